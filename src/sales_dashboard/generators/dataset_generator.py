"""
Sales dataset generation.

Builds the four collections the dashboard renders: a monthly series, one
record per product category, one record per region, and a trailing 30-day
daily series. Monthly and daily values carry a positional trend so later
months and days skew higher.
"""

import logging

from pydantic import ValidationError

from sales_dashboard.config.models import GenerationConfig
from sales_dashboard.shared import metrics
from sales_dashboard.shared.exceptions import DatasetShapeError
from sales_dashboard.shared.logging_utils import get_structured_logger
from sales_dashboard.shared.models import (
    DAYS_IN_PERIOD,
    MONTHS,
    PRODUCT_CATEGORIES,
    REGIONS,
    DailyRecord,
    MonthlyRecord,
    ProductRecord,
    RegionRecord,
    SalesDataset,
)

from .synthesizer import RandomValueSynthesizer

logger = logging.getLogger(__name__)


class DatasetGenerator:
    """
    Generates a complete SalesDataset from configured value ranges.

    The generator holds no state besides its configuration and random
    source; every call to generate() returns a new, independent dataset.
    """

    def __init__(
        self,
        config: GenerationConfig | None = None,
        synthesizer: RandomValueSynthesizer | None = None,
        seed: int | None = None,
        session_id: str | None = None,
    ):
        """
        Initialize the generator.

        Args:
            config: Value ranges per field (defaults to GenerationConfig())
            synthesizer: Random value source; built from seed when omitted
            seed: Seed for the default synthesizer (None = unseeded)
            session_id: Session tag for structured log entries
        """
        self.config = config or GenerationConfig()
        self.synthesizer = synthesizer or RandomValueSynthesizer(seed)
        self._log = get_structured_logger(__name__, session_id)

    def generate_monthly(self) -> tuple[MonthlyRecord, ...]:
        """One record per month, Jan..Dec, trending upward by month index."""
        cfg = self.config
        synth = self.synthesizer
        return tuple(
            MonthlyRecord(
                month=month,
                revenue=synth.from_range(cfg.monthly_revenue, idx),
                orders=synth.from_range(cfg.monthly_orders, idx),
                customers=synth.from_range(cfg.monthly_customers, idx),
                profit=synth.from_range(cfg.monthly_profit, idx),
            )
            for idx, month in enumerate(MONTHS)
        )

    def generate_products(self) -> tuple[ProductRecord, ...]:
        cfg = self.config
        synth = self.synthesizer
        return tuple(
            ProductRecord(
                name=name,
                sales=synth.from_range(cfg.product_sales),
                units=synth.from_range(cfg.product_units),
                growth=synth.signed_value(cfg.growth_min, cfg.growth_max, digits=1),
            )
            for name in PRODUCT_CATEGORIES
        )

    def generate_regions(self) -> tuple[RegionRecord, ...]:
        cfg = self.config
        synth = self.synthesizer
        return tuple(
            RegionRecord(
                region=region,
                revenue=synth.from_range(cfg.region_revenue),
                customers=synth.from_range(cfg.region_customers),
                avg_order_value=synth.from_range(cfg.region_avg_order_value),
            )
            for region in REGIONS
        )

    def generate_daily(self) -> tuple[DailyRecord, ...]:
        """Days 1..30; the trend index is the zero-based day offset."""
        cfg = self.config
        synth = self.synthesizer
        return tuple(
            DailyRecord(
                day=offset + 1,
                revenue=synth.from_range(cfg.daily_revenue, offset),
                orders=synth.from_range(cfg.daily_orders, offset),
            )
            for offset in range(DAYS_IN_PERIOD)
        )

    def generate(self) -> SalesDataset:
        """
        Generate all four collections.

        Returns:
            SalesDataset with 12 monthly, 5 product, 4 region and 30 daily records

        Raises:
            DatasetShapeError: If the configured ranges produce invalid records
        """
        with metrics.dataset_generation_seconds.time():
            try:
                dataset = SalesDataset(
                    monthly_data=self.generate_monthly(),
                    product_data=self.generate_products(),
                    region_data=self.generate_regions(),
                    daily_data=self.generate_daily(),
                )
            except ValidationError as e:
                logger.error(f"Generated dataset failed validation: {e}")
                raise DatasetShapeError(
                    "Generated dataset failed validation",
                    collection=SalesDataset.failed_collection(e),
                    validation_errors=[err["msg"] for err in e.errors()],
                ) from e

        metrics.datasets_generated_total.inc()
        self._log.info(
            "dataset generated",
            seed=self.synthesizer.seed,
            monthly=len(dataset.monthly_data),
            products=len(dataset.product_data),
            regions=len(dataset.region_data),
            days=len(dataset.daily_data),
        )
        return dataset


def generate_dataset(
    config: GenerationConfig | None = None, seed: int | None = None
) -> SalesDataset:
    """Generate a fresh SalesDataset; called once per dashboard session."""
    return DatasetGenerator(config, seed=seed).generate()
