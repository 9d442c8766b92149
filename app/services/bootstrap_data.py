# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Bootstrap data — reads the conference seed dataset from disk.
Produces raw schedule records; typed parsing happens in the store.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from app.core.logging import get_logger
from app.models.domain import BootstrapSchedule

logger = get_logger(__name__)


class BootstrapData:
    """Seed dataset loaded once at startup."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._schedules: list[BootstrapSchedule] | None = None

    def _read(self) -> dict[str, Any]:
        try:
            with self._path.open(encoding="utf-8") as fh:
                return json.load(fh)
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Could not read bootstrap data from %s: %s", self._path, exc)
            return {}

    def get_schedules(self) -> list[BootstrapSchedule]:
        """Raw schedule records; entries with a missing or mistyped field are skipped."""
        if self._schedules is not None:
            return self._schedules

        schedules: list[BootstrapSchedule] = []
        for index, raw in enumerate(self._read().get("schedules", [])):
            try:
                schedules.append(BootstrapSchedule.model_validate(raw))
            except ValidationError as exc:
                fields = ", ".join(
                    ".".join(str(part) for part in error["loc"]) for error in exc.errors()
                )
                logger.warning(
                    "Skipping bootstrap schedule #%d: invalid field(s) %s",
                    index,
                    fields,
                    extra={"schedule_id": raw.get("id") if isinstance(raw, dict) else None},
                )
        self._schedules = schedules
        logger.info("Loaded %d bootstrap schedules from %s", len(schedules), self._path)
        return schedules
