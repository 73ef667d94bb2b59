"""Derived views over generated sales data: KPIs, region filter, chart series."""

from .kpi import compute_kpi_summary
from .metric_series import (
    growth_direction,
    metric_series,
    parse_metric,
    region_revenue_shares,
)
from .region_filter import filter_by_region

__all__ = [
    "compute_kpi_summary",
    "filter_by_region",
    "growth_direction",
    "metric_series",
    "parse_metric",
    "region_revenue_shares",
]
