"""
Sales Dashboard Data Core

Synthesizes a sample sales dataset and derives the views a sales dashboard
renders:
- Monthly, product, region and daily collections from bounded random ranges
- KPI rollups (revenue, orders, customers, average order value)
- Region filtering and selected-metric chart series
"""

__version__ = "1.0.0"

from sales_dashboard.analytics import compute_kpi_summary, filter_by_region
from sales_dashboard.generators import generate_dataset
from sales_dashboard.session import DashboardSession
from sales_dashboard.shared.logging_config import configure_structured_logging

__all__ = [
    "__version__",
    "DashboardSession",
    "compute_kpi_summary",
    "configure_structured_logging",
    "filter_by_region",
    "generate_dataset",
]
