"""Shared models, exceptions, and utilities for the sales dashboard core."""

from sales_dashboard.shared.exceptions import (
    ConfigurationError,
    DatasetShapeError,
    InvalidSelectorError,
    KPIComputationError,
    SalesDashboardException,
)
from sales_dashboard.shared.formatting import (
    format_count,
    format_currency,
    format_growth,
)
from sales_dashboard.shared.logging_config import (
    configure_structured_logging,
    set_package_log_level,
)

__all__ = [
    "SalesDashboardException",
    "ConfigurationError",
    "KPIComputationError",
    "InvalidSelectorError",
    "DatasetShapeError",
    "format_currency",
    "format_count",
    "format_growth",
    "configure_structured_logging",
    "set_package_log_level",
]
