"""
KPI rollups over the monthly series.

The summary is a pure function of its input: summing the same collection
twice yields identical results, which is what lets DashboardSession memoize
it by collection identity.
"""

import logging
import math
from collections.abc import Sequence

from sales_dashboard.shared import metrics
from sales_dashboard.shared.exceptions import KPIComputationError
from sales_dashboard.shared.models import KPISummary, MonthlyRecord

logger = logging.getLogger(__name__)


def compute_kpi_summary(monthly_data: Sequence[MonthlyRecord]) -> KPISummary:
    """
    Compute total revenue, orders, customers and average order value.

    Args:
        monthly_data: Monthly records to roll up (normally all 12 months)

    Returns:
        KPISummary with sums over the records and
        avg_order_value = total_revenue / total_orders

    Raises:
        KPIComputationError: If total orders is zero or any result is not finite
    """
    total_revenue = sum(m.revenue for m in monthly_data)
    total_orders = sum(m.orders for m in monthly_data)
    total_customers = sum(m.customers for m in monthly_data)

    if total_orders == 0:
        raise KPIComputationError(
            "Cannot compute average order value with zero total orders",
            metric="avg_order_value",
            values={"total_revenue": total_revenue, "records": len(monthly_data)},
        )

    totals = {
        "total_revenue": float(total_revenue),
        "total_orders": float(total_orders),
        "total_customers": float(total_customers),
        "avg_order_value": total_revenue / total_orders,
    }

    non_finite = {name: value for name, value in totals.items() if not math.isfinite(value)}
    if non_finite:
        raise KPIComputationError(
            "KPI rollup produced non-finite values",
            metric=", ".join(non_finite),
            values=non_finite,
        )

    metrics.kpi_computations_total.inc()
    logger.debug(
        f"Computed KPIs over {len(monthly_data)} months: "
        f"revenue={totals['total_revenue']:.2f}, orders={totals['total_orders']:.2f}"
    )
    return KPISummary(**totals)
