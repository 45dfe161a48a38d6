"""Prometheus metrics for Day Tally."""

import prometheus_client

# --- Metric singletons (created on first access) ---

_metrics = {}


def _metric(name, metric_type, description, labelnames=()):
    """Get or create a Prometheus metric."""
    if name in _metrics:
        return _metrics[name]
    cls = getattr(prometheus_client, metric_type)
    m = cls(name, description, labelnames=labelnames)
    _metrics[name] = m
    return m


def increments_total():
    return _metric(
        "day_tally_increments_total",
        "Counter",
        "Total daily counter increment events",
    )


def rollovers_total():
    return _metric(
        "day_tally_rollovers_total",
        "Counter",
        "Increment events that started a new day",
    )


def task_operations_total():
    return _metric(
        "day_tally_task_operations_total",
        "Counter",
        "Task operations",
        labelnames=["operation"],
    )


def point_counter():
    return _metric(
        "day_tally_point_counter",
        "Gauge",
        "In-memory counter for the current day",
    )


# --- Helper functions for recording metrics ---

def record_increment(rolled_over: bool, counter_value: int):
    increments_total().inc()
    if rolled_over:
        rollovers_total().inc()
    point_counter().set(counter_value)


def record_task_operation(operation: str):
    task_operations_total().labels(operation=operation).inc()


def generate_metrics_text() -> str:
    """Generate Prometheus metrics text output."""
    return prometheus_client.generate_latest().decode("utf-8")
