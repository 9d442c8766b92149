# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas — API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
"""

from typing import Optional

from pydantic import BaseModel

from app.models.domain import Schedule


# ── Schedule Schemas ──

class ScheduleRequest(Schedule):
    """Body of POST / PUT. ``id`` is ignored on create."""


class ScheduleResponse(Schedule):
    id: str
    session_id: Optional[str] = None
    venue_id: str


# ── Venue Schemas ──

class VenueResponse(BaseModel):
    id: str
    name: str
