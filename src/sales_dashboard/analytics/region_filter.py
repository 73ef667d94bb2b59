"""Region selection over the region collection."""

import logging
from collections.abc import Sequence

from sales_dashboard.shared import metrics
from sales_dashboard.shared.models import ALL_REGIONS, REGION_SELECTORS, RegionRecord

logger = logging.getLogger(__name__)


def filter_by_region(
    region_data: Sequence[RegionRecord], selector: str
) -> Sequence[RegionRecord]:
    """
    Select the region records matching a dropdown value.

    Args:
        region_data: Region collection to filter
        selector: "all" or a region label (plain string or RegionSelector)

    Returns:
        region_data itself for "all"; otherwise a tuple of every record whose
        region equals selector, in original order. Records are returned as-is,
        never copied. An unknown selector yields an empty tuple.
    """
    value = getattr(selector, "value", selector)

    if value == ALL_REGIONS:
        metrics.region_filter_total.labels(selector=ALL_REGIONS).inc()
        return region_data

    known = value in REGION_SELECTORS
    metrics.region_filter_total.labels(selector=value if known else "unknown").inc()

    selection = tuple(record for record in region_data if record.region == value)

    if not selection:
        if known:
            logger.debug(f"No records for region {value!r}")
        else:
            logger.warning(
                f"Unknown region selector {value!r}; returning empty selection"
            )

    return selection
