# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.
Field names are snake_case in Python and camelCase on the wire.
"""

import datetime as dt
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Schedule(BaseModel):
    """One scheduled occurrence of a session at a venue."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[str] = Field(default=None, description="Store-assigned schedule id")
    session_id: Optional[str] = Field(default=None, description="Session being scheduled")
    venue: str = Field(..., description="Venue display name")
    venue_id: Optional[str] = Field(default=None, description="Key into the venue mapping")
    date: dt.date = Field(..., description="Calendar day")
    start_time: dt.time = Field(..., description="Time of day the session starts")
    duration: dt.timedelta = Field(..., description="Session length")


class BootstrapSchedule(BaseModel):
    """Raw schedule record as it appears in the bootstrap dataset."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, coerce_numbers_to_str=True
    )

    id: str
    session_id: Optional[str] = None
    venue: str
    date: str
    start_time: str
    length: Union[str, float]
