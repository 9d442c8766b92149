# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Schedule data access.
In-memory store of schedules and the venues they reference.
NO HTTP concerns here — pure CRUD plus the bootstrap ingestion.
"""

import datetime as dt
import itertools
import threading
from typing import Iterable, Optional

from app.core.logging import get_logger
from app.metrics.prometheus import STORE_OPERATIONS, GET_ALL_LATENCY
from app.models.domain import BootstrapSchedule, Schedule

logger = get_logger(__name__)


def parse_length(length: str | float) -> dt.timedelta:
    """Decimal minutes to a timedelta, dropping the fractional minute."""
    return dt.timedelta(minutes=int(float(length)))


class ScheduleStore:
    """Thread-safe in-memory schedule storage.

    Schedule ids, generated session ids and venue ids all come from one
    shared sequence, so their values never repeat across the three kinds.
    """

    def __init__(self) -> None:
        self._schedules: dict[str, Schedule] = {}
        self._venues: dict[str, str] = {}
        self._lock = threading.Lock()
        self._sequence = itertools.count(1)
        self._sequence_lock = threading.Lock()

    def _next_id(self) -> str:
        with self._sequence_lock:
            return str(next(self._sequence))

    def _venue_id_for(self, venue: str) -> str:
        """Id of the first venue named ``venue``, minting one if unknown. Caller holds the lock."""
        for venue_id, name in self._venues.items():
            if name == venue:
                return venue_id
        return self._next_id()

    def _resolve_venue(self, schedule: Schedule) -> Schedule:
        with self._lock:
            venue_id = schedule.venue_id or self._venue_id_for(schedule.venue)
            self._venues[venue_id] = schedule.venue
        return schedule.model_copy(update={"venue_id": venue_id})

    # ── Bootstrap ──

    def initialize(self, records: Iterable[BootstrapSchedule]) -> int:
        """Seed the store from bootstrap records. Returns the number ingested.

        A record that fails to parse is logged and skipped; the rest still load.
        """
        logger.info("Initialising schedule store from bootstrap data")
        loaded = 0
        for record in records:
            try:
                with self._lock:
                    venue_id = self._venue_id_for(record.venue)

                schedule = Schedule(
                    id=record.id,
                    session_id=record.session_id,
                    venue=record.venue,
                    venue_id=venue_id,
                    date=dt.date.fromisoformat(record.date),
                    start_time=dt.time.fromisoformat(record.start_time),
                    duration=parse_length(record.length),
                )
            except (ValueError, TypeError, OverflowError) as exc:
                logger.warning(
                    "Failed to parse bootstrap record id=%s: %s",
                    record.id,
                    exc,
                    extra={"schedule_id": record.id, "operation": "initialize"},
                )
                continue

            with self._lock:
                self._schedules[schedule.id] = schedule
                self._venues[venue_id] = schedule.venue
            loaded += 1

        logger.info(
            "Schedule store initialised: schedules=%d, venues=%d",
            self.schedule_count(),
            self.venue_count(),
        )
        return loaded

    # ── Write ──

    def add_schedule(self, schedule: Schedule) -> Schedule:
        """Insert as a new schedule. Any id on the input is replaced."""
        STORE_OPERATIONS.labels(operation="add_schedule").inc()
        update = {"id": self._next_id()}
        if not schedule.session_id:
            update["session_id"] = self._next_id()

        created = self._resolve_venue(schedule.model_copy(update=update))
        with self._lock:
            self._schedules[created.id] = created
        return created

    def update_schedule(self, schedule: Schedule) -> Schedule:
        """Replace the schedule stored under ``schedule.id``; creates when id is empty."""
        STORE_OPERATIONS.labels(operation="update_schedule").inc()
        if not schedule.id:
            return self.add_schedule(schedule)

        updated = self._resolve_venue(schedule)
        with self._lock:
            self._schedules[updated.id] = updated
        return updated

    def delete_schedule(self, schedule_id: Optional[str]) -> None:
        STORE_OPERATIONS.labels(operation="delete_schedule").inc()
        if schedule_id:
            with self._lock:
                self._schedules.pop(schedule_id, None)

    # ── Read ──

    def get_all_schedules(self) -> list[Schedule]:
        STORE_OPERATIONS.labels(operation="get_all_schedules").inc()
        with GET_ALL_LATENCY.time():
            with self._lock:
                return list(self._schedules.values())

    def find_by_id(self, schedule_id: Optional[str]) -> Optional[Schedule]:
        STORE_OPERATIONS.labels(operation="find_by_id").inc()
        if schedule_id is None:
            return None
        with self._lock:
            return self._schedules.get(schedule_id)

    def find_by_venue(self, venue_id: str) -> list[Schedule]:
        STORE_OPERATIONS.labels(operation="find_by_venue").inc()
        with self._lock:
            snapshot = list(self._schedules.values())
        return [s for s in snapshot if s.venue_id == venue_id]

    def find_by_date(self, date: dt.date) -> list[Schedule]:
        STORE_OPERATIONS.labels(operation="find_by_date").inc()
        with self._lock:
            snapshot = list(self._schedules.values())
        return [s for s in snapshot if s.date == date]

    def get_venues(self) -> dict[str, str]:
        with self._lock:
            return dict(self._venues)

    # ── Bulk / internal ──

    def clear(self) -> None:
        """Drop all schedules and venues. The id sequence keeps counting."""
        with self._lock:
            self._schedules.clear()
            self._venues.clear()

    # ── Sizes (read by the gauge collector) ──

    def schedule_count(self) -> int:
        with self._lock:
            return len(self._schedules)

    def venue_count(self) -> int:
        with self._lock:
            return len(self._venues)
