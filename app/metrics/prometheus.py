# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by the store and middleware. Never instantiated in controllers.
"""

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram
from prometheus_client.core import GaugeMetricFamily
from prometheus_client.registry import Collector

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "schedule_requests_total",
    "Total HTTP requests to schedule service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "schedule_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "schedule_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Store Metrics (updated by the schedule store only) ──
STORE_OPERATIONS = Counter(
    "schedule_store_operations_total",
    "Total schedule store operations invoked",
    ["operation"],
)
GET_ALL_LATENCY = Histogram(
    "schedule_store_get_all_seconds",
    "Time spent taking a snapshot of all schedules",
)

SCHEDULE_GAUGE = "schedule_gauge"
VENUE_GAUGE = "venue_gauge"


class ScheduleStoreCollector(Collector):
    """Reports the store's schedule and venue counts at scrape time."""

    def __init__(self, store) -> None:
        self.store = store

    def describe(self):
        yield GaugeMetricFamily(SCHEDULE_GAUGE, "Number of schedules in the store")
        yield GaugeMetricFamily(VENUE_GAUGE, "Number of venues in the store")

    def collect(self):
        yield GaugeMetricFamily(
            SCHEDULE_GAUGE,
            "Number of schedules in the store",
            value=self.store.schedule_count(),
        )
        yield GaugeMetricFamily(
            VENUE_GAUGE,
            "Number of venues in the store",
            value=self.store.venue_count(),
        )


def register_store_gauges(store, registry: CollectorRegistry = REGISTRY) -> ScheduleStoreCollector:
    """Expose ``schedule_gauge`` and ``venue_gauge`` for ``store`` on ``registry``.

    If the registry already holds a store collector, it is pointed at the new
    store rather than registering the gauges a second time.
    """
    existing = registry._names_to_collectors.get(SCHEDULE_GAUGE)
    if existing is None:
        collector = ScheduleStoreCollector(store)
        registry.register(collector)
        return collector
    if not hasattr(existing, "store"):
        raise ValueError(
            f"{SCHEDULE_GAUGE} is already registered by {type(existing).__name__}"
        )
    existing.store = store
    return existing
