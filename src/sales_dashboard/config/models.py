"""
Configuration models for the sales dashboard core.

These models define the structure and validation for the optional
config.json file: the value ranges used by the dataset generator, the
random seed, logging level, and the initial selector values.
"""

import json
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from sales_dashboard.shared.models import (
    DAYS_IN_PERIOD,
    METRIC_SELECTORS,
    MONTHS,
    REGION_SELECTORS,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ValueRange(BaseModel):
    """Bounded value: base + uniform(0, jitter) + trend * index."""

    base: float = Field(..., ge=0.0, description="Minimum value before trend")
    jitter: float = Field(..., ge=0.0, description="Width of the uniform jitter")
    trend: float = Field(
        0.0, ge=0.0, description="Increase per position in the label sequence"
    )

    def upper_bound(self, index: int = 0) -> float:
        """Largest value the range can produce at the given position."""
        return self.base + self.jitter + self.trend * index


class GenerationConfig(BaseModel):
    """Value ranges for every generated field."""

    # Monthly series (trend scales with month index)
    monthly_revenue: ValueRange = Field(
        default_factory=lambda: ValueRange(base=45000, jitter=30000, trend=2000)
    )
    monthly_orders: ValueRange = Field(
        default_factory=lambda: ValueRange(base=450, jitter=200, trend=10)
    )
    monthly_customers: ValueRange = Field(
        default_factory=lambda: ValueRange(base=380, jitter=150, trend=8)
    )
    monthly_profit: ValueRange = Field(
        default_factory=lambda: ValueRange(base=12000, jitter=8000, trend=600)
    )

    # Product categories
    product_sales: ValueRange = Field(
        default_factory=lambda: ValueRange(base=15000, jitter=35000)
    )
    product_units: ValueRange = Field(
        default_factory=lambda: ValueRange(base=200, jitter=500)
    )
    growth_min: float = Field(-10.0, description="Lowest product growth percentage")
    growth_max: float = Field(30.0, description="Highest product growth percentage")

    # Regions
    region_revenue: ValueRange = Field(
        default_factory=lambda: ValueRange(base=80000, jitter=60000)
    )
    region_customers: ValueRange = Field(
        default_factory=lambda: ValueRange(base=1200, jitter=800)
    )
    region_avg_order_value: ValueRange = Field(
        default_factory=lambda: ValueRange(base=85, jitter=50)
    )

    # Daily series (trend scales with day number)
    daily_revenue: ValueRange = Field(
        default_factory=lambda: ValueRange(base=1500, jitter=2000, trend=10)
    )
    daily_orders: ValueRange = Field(
        default_factory=lambda: ValueRange(base=15, jitter=25, trend=0.1)
    )

    @model_validator(mode="after")
    def validate_growth_bounds(self):
        """Growth range must be non-empty."""
        if self.growth_min >= self.growth_max:
            raise ValueError(
                f"growth_min ({self.growth_min}) must be less than "
                f"growth_max ({self.growth_max})"
            )
        return self

    @model_validator(mode="after")
    def validate_positive_orders(self):
        """Order ranges must allow positive values somewhere in their series."""
        for name, length in (
            ("monthly_orders", len(MONTHS)),
            ("daily_orders", DAYS_IN_PERIOD),
        ):
            value_range: ValueRange = getattr(self, name)
            if value_range.upper_bound(length - 1) <= 0:
                raise ValueError(f"{name} must allow positive values")
        return self


class DashboardConfig(BaseModel):
    """Main configuration model for the sales dashboard core."""

    seed: int | None = Field(
        None,
        ge=0,
        le=2**32 - 1,
        description="Random seed for reproducible datasets (None = unseeded)",
    )
    generation: GenerationConfig = Field(
        default_factory=GenerationConfig,
        description="Value ranges for dataset generation",
    )
    log_level: str = Field("INFO", description="Logging level")
    default_metric: str = Field(
        "revenue", description="Metric selected when a session starts"
    )
    default_region: str = Field(
        "all", description="Region selected when a session starts"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("default_metric")
    @classmethod
    def validate_default_metric(cls, v: str) -> str:
        """Validate the initial metric selector."""
        if v not in METRIC_SELECTORS:
            raise ValueError(
                f"default_metric must be one of {', '.join(METRIC_SELECTORS)}"
            )
        return v

    @field_validator("default_region")
    @classmethod
    def validate_default_region(cls, v: str) -> str:
        """Validate the initial region selector."""
        if v not in REGION_SELECTORS:
            raise ValueError(
                f"default_region must be one of {', '.join(REGION_SELECTORS)}"
            )
        return v

    @classmethod
    def from_file(cls, file_path: str | Path) -> "DashboardConfig":
        """
        Load configuration from a JSON file.

        Args:
            file_path: Path to the configuration JSON file

        Returns:
            DashboardConfig instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the JSON is invalid or doesn't match the schema
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        try:
            with path.open("r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file: {e}")

        return cls(**data)
