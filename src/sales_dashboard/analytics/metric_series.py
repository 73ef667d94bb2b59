"""
Chart-ready views over the generated collections.

Covers the selected-metric trend series, each region's share of revenue
for the distribution chart, and the sign of product growth used to style
the product table.
"""

from collections.abc import Sequence
from typing import Literal

from sales_dashboard.shared.exceptions import InvalidSelectorError, KPIComputationError
from sales_dashboard.shared.models import (
    METRIC_SELECTORS,
    MetricSelector,
    MonthlyRecord,
    ProductRecord,
    RegionRecord,
)


def parse_metric(value: str | MetricSelector) -> MetricSelector:
    """
    Resolve a metric dropdown value.

    Raises:
        InvalidSelectorError: If value is not revenue, orders or customers
    """
    if isinstance(value, MetricSelector):
        return value
    try:
        return MetricSelector(value)
    except ValueError as e:
        raise InvalidSelectorError("metric", value, METRIC_SELECTORS) from e


def metric_series(
    monthly_data: Sequence[MonthlyRecord], metric: str | MetricSelector
) -> tuple[tuple[str, float], ...]:
    """(month, value) pairs for the selected metric, in month order."""
    field = parse_metric(metric).value
    return tuple((record.month, getattr(record, field)) for record in monthly_data)


def region_revenue_shares(region_data: Sequence[RegionRecord]) -> dict[str, float]:
    """
    Each region's fraction of total revenue.

    Returns:
        Mapping of region label to share in [0, 1]; shares sum to 1

    Raises:
        KPIComputationError: If total revenue is zero
    """
    total = sum(record.revenue for record in region_data)
    if total == 0:
        raise KPIComputationError(
            "Cannot compute revenue shares with zero total revenue",
            metric="region_revenue_share",
            values={"regions": len(region_data)},
        )

    shares: dict[str, float] = {}
    for record in region_data:
        shares[record.region] = shares.get(record.region, 0.0) + record.revenue / total
    return shares


def growth_direction(product: ProductRecord) -> Literal["positive", "negative"]:
    """Zero growth counts as positive."""
    return "positive" if product.growth >= 0 else "negative"
