"""
Core data models for the sales dashboard.

This module contains the fixed label enumerations, the four generated record
types (monthly, product, region, daily), the dataset container, and the
derived KPI and snapshot models handed to the presentation layer.
"""

from enum import Enum

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator
from pydantic_core import PydanticCustomError

# ================================
# LABEL ENUMERATIONS
# ================================

MONTHS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

PRODUCT_CATEGORIES: tuple[str, ...] = (
    "Electronics",
    "Clothing",
    "Food",
    "Home & Garden",
    "Sports",
)

REGIONS: tuple[str, ...] = ("North", "South", "East", "West")

DAYS_IN_PERIOD = 30


class RegionSelector(str, Enum):
    """Values accepted by the region dropdown."""

    ALL = "all"
    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"


class MetricSelector(str, Enum):
    """Monthly metrics the trend chart can plot."""

    REVENUE = "revenue"
    ORDERS = "orders"
    CUSTOMERS = "customers"


ALL_REGIONS = RegionSelector.ALL.value
REGION_SELECTORS: tuple[str, ...] = tuple(s.value for s in RegionSelector)
METRIC_SELECTORS: tuple[str, ...] = tuple(m.value for m in MetricSelector)


def _shape_error(collection: str, detail: str) -> PydanticCustomError:
    return PydanticCustomError(
        "dataset_shape",
        "{collection} " + detail,
        {"collection": collection},
    )


# ================================
# GENERATED RECORDS
# ================================


class MonthlyRecord(BaseModel):
    """One calendar month of sales activity."""

    model_config = {"frozen": True}

    month: str = Field(..., description="Month label (Jan..Dec)")
    revenue: float = Field(..., ge=0, allow_inf_nan=False, description="Revenue")
    orders: float = Field(..., ge=0, allow_inf_nan=False, description="Order count")
    customers: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Customer count"
    )
    profit: float = Field(..., ge=0, allow_inf_nan=False, description="Profit")

    @field_validator("month")
    @classmethod
    def validate_month(cls, v: str) -> str:
        """Validate month is one of the fixed labels."""
        if v not in MONTHS:
            raise ValueError(f"month must be one of {', '.join(MONTHS)}")
        return v


class ProductRecord(BaseModel):
    """Sales figures for one product category."""

    model_config = {"frozen": True}

    name: str = Field(..., description="Product category label")
    sales: float = Field(..., ge=0, allow_inf_nan=False, description="Sales amount")
    units: float = Field(..., ge=0, allow_inf_nan=False, description="Units sold")
    growth: float = Field(
        ...,
        allow_inf_nan=False,
        description="Period-over-period growth percentage, one decimal place",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is one of the fixed product categories."""
        if v not in PRODUCT_CATEGORIES:
            raise ValueError(
                f"name must be one of {', '.join(PRODUCT_CATEGORIES)}"
            )
        return v

    @field_validator("growth")
    @classmethod
    def round_growth(cls, v: float) -> float:
        """Store growth at one decimal place."""
        return round(v, 1)


class RegionRecord(BaseModel):
    """Sales figures for one sales region."""

    model_config = {"frozen": True, "populate_by_name": True}

    region: str = Field(..., min_length=1, description="Region label")
    revenue: float = Field(..., ge=0, allow_inf_nan=False, description="Revenue")
    customers: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Customer count"
    )
    avg_order_value: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        alias="avgOrderValue",
        description="Average order value",
    )


class DailyRecord(BaseModel):
    """One day of the trailing 30-day window."""

    model_config = {"frozen": True}

    day: int = Field(..., ge=1, le=DAYS_IN_PERIOD, description="Day number (1-30)")
    revenue: float = Field(..., ge=0, allow_inf_nan=False, description="Revenue")
    orders: float = Field(..., ge=0, allow_inf_nan=False, description="Order count")


class SalesDataset(BaseModel):
    """
    The four generated collections for one dashboard session.

    Collections are tuples in canonical chart order and are validated
    against the fixed label enumerations, so record counts never vary.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    monthly_data: tuple[MonthlyRecord, ...] = Field(..., alias="monthlyData")
    product_data: tuple[ProductRecord, ...] = Field(..., alias="productData")
    region_data: tuple[RegionRecord, ...] = Field(..., alias="regionData")
    daily_data: tuple[DailyRecord, ...] = Field(..., alias="dailyData")

    @model_validator(mode="after")
    def validate_shape(self):
        """Check counts and label order of every collection."""
        months = tuple(m.month for m in self.monthly_data)
        if months != MONTHS:
            raise _shape_error(
                "monthlyData",
                f"must contain exactly {len(MONTHS)} records "
                f"ordered {MONTHS[0]}..{MONTHS[-1]}, got {list(months)}",
            )

        names = tuple(p.name for p in self.product_data)
        if names != PRODUCT_CATEGORIES:
            raise _shape_error(
                "productData",
                f"must list {list(PRODUCT_CATEGORIES)}, got {list(names)}",
            )

        regions = tuple(r.region for r in self.region_data)
        if regions != REGIONS:
            raise _shape_error(
                "regionData", f"must list {list(REGIONS)}, got {list(regions)}"
            )

        days = tuple(d.day for d in self.daily_data)
        if days != tuple(range(1, DAYS_IN_PERIOD + 1)):
            raise _shape_error(
                "dailyData",
                f"must contain days 1..{DAYS_IN_PERIOD} in increasing order",
            )

        return self

    @classmethod
    def failed_collection(cls, error: ValidationError) -> str | None:
        """Alias of the first collection a validation error points at."""
        aliases = {name: field.alias for name, field in cls.model_fields.items()}
        for err in error.errors():
            ctx = err.get("ctx") or {}
            if "collection" in ctx:
                return ctx["collection"]
            if err["loc"]:
                return aliases.get(err["loc"][0], str(err["loc"][0]))
        return None

    def to_frames(self) -> dict:
        """
        Convert each collection into a pandas DataFrame for chart libraries.

        Returns:
            Mapping of collection alias (monthlyData, ...) to DataFrame, with
            columns in field order and rows in canonical order
        """
        import pandas as pd

        frames = {}
        for name, field in type(self).model_fields.items():
            records = [r.model_dump(by_alias=True) for r in getattr(self, name)]
            frames[field.alias or name] = pd.DataFrame.from_records(records)
        return frames


# ================================
# DERIVED MODELS
# ================================


class KPISummary(BaseModel):
    """Rollup metrics over the monthly collection."""

    model_config = {"frozen": True, "populate_by_name": True}

    total_revenue: float = Field(..., allow_inf_nan=False, alias="totalRevenue")
    total_orders: float = Field(..., allow_inf_nan=False, alias="totalOrders")
    total_customers: float = Field(..., allow_inf_nan=False, alias="totalCustomers")
    avg_order_value: float = Field(..., allow_inf_nan=False, alias="avgOrderValue")


class DashboardSnapshot(BaseModel):
    """Everything the presentation layer renders for the current selectors."""

    model_config = {"frozen": True, "populate_by_name": True}

    dataset: SalesDataset
    kpis: KPISummary
    selected_metric: MetricSelector = Field(..., alias="selectedMetric")
    selected_region: str = Field(..., alias="selectedRegion")
    metric_series: tuple[tuple[str, float], ...] = Field(..., alias="metricSeries")
    region_view: tuple[RegionRecord, ...] = Field(..., alias="regionView")
