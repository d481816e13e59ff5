"""Prometheus metrics for document generation."""
from prometheus_client import REGISTRY, Counter, Histogram


def _get_or_create_metric(metric_class, name: str, doc: str, labelnames=None, **kwargs):
    """Get existing metric or create new one to avoid duplication errors in tests."""
    for collector in list(REGISTRY._collector_to_names.keys()):
        if hasattr(collector, "_name") and collector._name == name:
            return collector
    try:
        if labelnames is not None:
            kwargs["labelnames"] = labelnames
        return metric_class(name, doc, registry=REGISTRY, **kwargs)
    except ValueError as e:
        if "Duplicated timeseries" in str(e):
            for collector in list(REGISTRY._collector_to_names.keys()):
                if hasattr(collector, "_name") and collector._name == name:
                    return collector
        raise


documents_generated_total = _get_or_create_metric(
    Counter,
    "datagen_documents_generated",
    "Total number of synthetic documents generated",
    ["mode"],
)

generation_duration_seconds = _get_or_create_metric(
    Histogram,
    "datagen_generation_duration_seconds",
    "Time taken to generate one batch of documents",
    buckets=[0.001, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 30.0],
)

fields_degraded_total = _get_or_create_metric(
    Counter,
    "datagen_fields_degraded",
    "Fields that fell back to a default value instead of failing",
    ["reason"],
)

realtime_ticks_total = _get_or_create_metric(
    Counter,
    "datagen_realtime_ticks",
    "Total number of live feed ticks executed",
)

bulk_chunks_total = _get_or_create_metric(
    Counter,
    "datagen_bulk_chunks",
    "Bulk chunks handed to the loader",
    ["outcome"],
)


def record_degraded(reason: str) -> None:
    """Count a field that degraded to a fallback value."""
    fields_degraded_total.labels(reason=reason).inc()
