"""
Pytest configuration and fixtures for sales dashboard tests.

Provides common test fixtures, sample data, and test utilities.
"""

import json
import logging
import sys
import tempfile
from pathlib import Path

import pytest

# Ensure src/ is on sys.path for local test runs without installation
_SRC = Path(__file__).resolve().parents[1] / "src"
if _SRC.exists() and str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from sales_dashboard.generators import generate_dataset  # noqa: E402
from sales_dashboard.shared.logging_config import PACKAGE_LOGGER  # noqa: E402
from sales_dashboard.shared.models import (  # noqa: E402
    MONTHS,
    MonthlyRecord,
    RegionRecord,
)


@pytest.fixture
def fixed_monthly_data() -> tuple[MonthlyRecord, ...]:
    """Twelve identical months: revenue 1000, orders 10, customers 8, profit 200."""
    return tuple(
        MonthlyRecord(month=month, revenue=1000, orders=10, customers=8, profit=200)
        for month in MONTHS
    )


@pytest.fixture
def sample_region_data() -> tuple[RegionRecord, ...]:
    """One record per region with round numbers."""
    return (
        RegionRecord(region="North", revenue=100000, customers=1500, avg_order_value=100),
        RegionRecord(region="South", revenue=90000, customers=1400, avg_order_value=95),
        RegionRecord(region="East", revenue=120000, customers=1800, avg_order_value=110),
        RegionRecord(region="West", revenue=90000, customers=1300, avg_order_value=90),
    )


@pytest.fixture
def seeded_dataset():
    """Dataset generated with a fixed seed."""
    return generate_dataset(seed=42)


@pytest.fixture
def sample_config_data() -> dict:
    """Sample configuration data for testing."""
    return {
        "seed": 42,
        "log_level": "debug",
        "default_metric": "orders",
        "default_region": "North",
        "generation": {
            "monthly_revenue": {"base": 1000, "jitter": 500, "trend": 100},
            "growth_min": -5,
            "growth_max": 5,
        },
    }


@pytest.fixture
def temp_config_file(sample_config_data) -> str:
    """Create a temporary config file for testing."""
    with tempfile.NamedTemporaryFile(
        mode="w", suffix=".json", delete=False
    ) as temp_file:
        json.dump(sample_config_data, temp_file)
        temp_path = temp_file.name

    yield temp_path

    Path(temp_path).unlink(missing_ok=True)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove SALES_DASHBOARD_* variables for the duration of a test."""
    for name in (
        "SALES_DASHBOARD_CONFIG_FILE",
        "SALES_DASHBOARD_SEED",
        "SALES_DASHBOARD_LOG_LEVEL",
        "SALES_DASHBOARD_DEFAULT_METRIC",
        "SALES_DASHBOARD_DEFAULT_REGION",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def restore_package_log_level():
    """Sessions apply their configured level; undo it after each test."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    level = package_logger.level
    yield
    package_logger.setLevel(level)
