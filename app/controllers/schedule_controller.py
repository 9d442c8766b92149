# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Schedule CRUD and query endpoints.
Thin HTTP layer — delegates ALL logic to ScheduleStore.
"""

import datetime as dt

from fastapi import APIRouter, Depends, HTTPException, Response

from app.schemas.schedule import ScheduleRequest, ScheduleResponse, VenueResponse
from app.repositories.schedule_repository import ScheduleStore
from app.core.dependencies import get_schedule_store

router = APIRouter(prefix="/api/v1", tags=["Schedules"])


@router.get("/schedules", response_model=list[ScheduleResponse])
def list_schedules(
    store: ScheduleStore = Depends(get_schedule_store),
):
    """List every schedule in the store."""
    return store.get_all_schedules()


@router.get("/schedules/venue/{venue_id}", response_model=list[ScheduleResponse])
def schedules_by_venue(
    venue_id: str,
    store: ScheduleStore = Depends(get_schedule_store),
):
    """Schedules held at one venue."""
    return store.find_by_venue(venue_id)


@router.get("/schedules/date/{date}", response_model=list[ScheduleResponse])
def schedules_by_date(
    date: dt.date,
    store: ScheduleStore = Depends(get_schedule_store),
):
    """Schedules on one calendar day."""
    return store.find_by_date(date)


@router.get("/schedules/{schedule_id}", response_model=ScheduleResponse)
def get_schedule(
    schedule_id: str,
    store: ScheduleStore = Depends(get_schedule_store),
):
    schedule = store.find_by_id(schedule_id)
    if schedule is None:
        raise HTTPException(status_code=404, detail=f"No schedule found with id '{schedule_id}'")
    return schedule


@router.post("/schedules", status_code=201, response_model=ScheduleResponse)
def create_schedule(
    payload: ScheduleRequest,
    store: ScheduleStore = Depends(get_schedule_store),
):
    """Create a schedule. The store assigns the id."""
    return store.add_schedule(payload)


@router.put("/schedules", response_model=ScheduleResponse)
def upsert_schedule(
    payload: ScheduleRequest,
    store: ScheduleStore = Depends(get_schedule_store),
):
    """Replace the schedule named by the body's id, or create one when it has none."""
    return store.update_schedule(payload)


@router.put("/schedules/{schedule_id}", response_model=ScheduleResponse)
def update_schedule(
    schedule_id: str,
    payload: ScheduleRequest,
    store: ScheduleStore = Depends(get_schedule_store),
):
    """Replace a schedule entirely; unknown ids are inserted."""
    return store.update_schedule(payload.model_copy(update={"id": schedule_id}))


@router.delete("/schedules/{schedule_id}", status_code=204)
def delete_schedule(
    schedule_id: str,
    store: ScheduleStore = Depends(get_schedule_store),
):
    store.delete_schedule(schedule_id)
    return Response(status_code=204)


@router.get("/venues", response_model=list[VenueResponse])
def list_venues(
    store: ScheduleStore = Depends(get_schedule_store),
):
    """Venue id → name mapping built from the stored schedules."""
    return [
        {"id": venue_id, "name": name}
        for venue_id, name in store.get_venues().items()
    ]
