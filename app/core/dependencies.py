# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire the store and its collaborators.
This module owns the one ScheduleStore of the running process.
"""

from app.core.config import settings
from app.core.logging import get_logger
from app.metrics.prometheus import register_store_gauges
from app.repositories.schedule_repository import ScheduleStore
from app.services.bootstrap_data import BootstrapData

logger = get_logger(__name__)

# ── Singleton instances (in-memory store) ──
_bootstrap_data = BootstrapData(settings.BOOTSTRAP_DATA_PATH)
_schedule_store = ScheduleStore()


def init_schedule_store() -> ScheduleStore:
    """Seed the store and expose its gauges. Called once from the app lifespan."""
    register_store_gauges(_schedule_store)
    if settings.SEED_BOOTSTRAP_DATA:
        _schedule_store.initialize(_bootstrap_data.get_schedules())
    else:
        logger.info("Bootstrap seeding disabled")
    return _schedule_store


# ── FastAPI dependency functions ──
def get_schedule_store() -> ScheduleStore:
    return _schedule_store


def get_bootstrap_data() -> BootstrapData:
    return _bootstrap_data
