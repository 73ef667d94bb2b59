"""Prometheus metrics for dataset generation and derived views."""
from prometheus_client import REGISTRY, Counter, Histogram


def _get_or_create_metric(metric_class, name: str, doc: str, labelnames=None, **kwargs):
    """Return the registered collector for name, creating it on first use."""
    existing = REGISTRY._names_to_collectors.get(name)
    if existing is not None:
        return existing
    if labelnames is not None:
        kwargs["labelnames"] = labelnames
    return metric_class(name, doc, registry=REGISTRY, **kwargs)


# Generation metrics
datasets_generated_total = _get_or_create_metric(
    Counter,
    "sales_datasets_generated_total",
    "Total number of sales datasets generated",
)

dataset_generation_seconds = _get_or_create_metric(
    Histogram,
    "sales_dataset_generation_seconds",
    "Time taken to generate a sales dataset",
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
)

# Derived view metrics
kpi_computations_total = _get_or_create_metric(
    Counter,
    "sales_kpi_computations_total",
    "Total number of KPI summaries computed",
)

region_filter_total = _get_or_create_metric(
    Counter,
    "sales_region_filter_total",
    "Total number of region filter evaluations",
    ["selector"],
)

view_cache_requests_total = _get_or_create_metric(
    Counter,
    "sales_view_cache_requests_total",
    "Derived view cache lookups",
    ["result"],
)
