"""
Dashboard session wiring.

A session generates its dataset once, keeps the two dropdown values
(selected metric and selected region), and memoizes every derived view
against the identity of the collection it was computed from. Derived views
take the selectors as explicit arguments; the stored values are only the
defaults used when an argument is omitted.
"""

from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from sales_dashboard.analytics.kpi import compute_kpi_summary
from sales_dashboard.analytics.metric_series import metric_series, parse_metric
from sales_dashboard.analytics.region_filter import filter_by_region
from sales_dashboard.config.models import DashboardConfig
from sales_dashboard.generators.dataset_generator import DatasetGenerator
from sales_dashboard.shared.cache import CacheStats, DerivedViewCache
from sales_dashboard.shared.exceptions import DatasetShapeError, InvalidSelectorError
from sales_dashboard.shared.logging_config import set_package_log_level
from sales_dashboard.shared.logging_utils import StructuredLogger, get_structured_logger
from sales_dashboard.shared.models import (
    REGION_SELECTORS,
    DashboardSnapshot,
    KPISummary,
    MetricSelector,
    MonthlyRecord,
    RegionRecord,
    RegionSelector,
    SalesDataset,
)


class DashboardSession:
    """
    One dashboard session: a generated dataset plus the current selectors.

    The dataset is created once and never mutated. Selector changes only
    affect which derived views are returned; the underlying records stay
    the same objects for the whole session.
    """

    def __init__(
        self,
        config: DashboardConfig | None = None,
        dataset: SalesDataset | dict[str, Any] | None = None,
        cache: DerivedViewCache | None = None,
    ):
        """
        Start a session.

        Args:
            config: Dashboard configuration (defaults to DashboardConfig()); its
                log_level is applied to the sales_dashboard loggers
            dataset: Pre-built dataset or its alias-keyed dict; generated when omitted
            cache: Derived view cache to use (a fresh one when omitted)

        Raises:
            DatasetShapeError: If an injected dataset violates the fixed shape
        """
        self.config = config or DashboardConfig()
        set_package_log_level(self.config.log_level)
        self.session_id = StructuredLogger.new_session_id()
        self._log = get_structured_logger(__name__, self.session_id)
        self._cache = cache or DerivedViewCache()

        if dataset is None:
            generator = DatasetGenerator(
                self.config.generation,
                seed=self.config.seed,
                session_id=self.session_id,
            )
            self.dataset = generator.generate()
        else:
            self.dataset = self._coerce_dataset(dataset)

        self.selected_metric: MetricSelector = parse_metric(self.config.default_metric)
        self.selected_region: str = self.config.default_region

        self._log.info(
            "session started",
            seed=self.config.seed,
            metric=self.selected_metric.value,
            region=self.selected_region,
        )

    @staticmethod
    def _coerce_dataset(dataset: SalesDataset | dict[str, Any]) -> SalesDataset:
        if isinstance(dataset, SalesDataset):
            return dataset
        try:
            return SalesDataset.model_validate(dataset)
        except ValidationError as e:
            raise DatasetShapeError(
                "Injected dataset failed validation",
                collection=SalesDataset.failed_collection(e),
                validation_errors=[err["msg"] for err in e.errors()],
            ) from e

    # ----------------------------------------------------------------
    # Selector state
    # ----------------------------------------------------------------

    def select_metric(self, value: str | MetricSelector) -> MetricSelector:
        """Change the selected metric; raises InvalidSelectorError if unknown."""
        previous = self.selected_metric
        self.selected_metric = parse_metric(value)
        self._log.debug(
            "metric selected",
            previous=previous.value,
            current=self.selected_metric.value,
        )
        return self.selected_metric

    def select_region(self, value: str | RegionSelector) -> str:
        """Change the selected region; any region state is reachable from any other."""
        region = getattr(value, "value", value)
        if region not in REGION_SELECTORS:
            raise InvalidSelectorError("region", region, REGION_SELECTORS)
        previous = self.selected_region
        self.selected_region = region
        self._log.debug("region selected", previous=previous, current=region)
        return region

    # ----------------------------------------------------------------
    # Derived views
    # ----------------------------------------------------------------

    def kpis(self, monthly_data: Sequence[MonthlyRecord] | None = None) -> KPISummary:
        """KPI summary, memoized on the monthly collection identity."""
        source = self.dataset.monthly_data if monthly_data is None else monthly_data
        return self._cache.get_or_compute(
            "kpis", source, lambda: compute_kpi_summary(source)
        )

    def region_view(
        self,
        selector: str | RegionSelector | None = None,
        region_data: Sequence[RegionRecord] | None = None,
    ) -> Sequence[RegionRecord]:
        """Filtered region records, memoized on (collection identity, selector)."""
        value = getattr(selector, "value", selector)
        if value is None:
            value = self.selected_region
        source = self.dataset.region_data if region_data is None else region_data
        return self._cache.get_or_compute(
            "region_view", source, lambda: filter_by_region(source, value), value
        )

    def metric_view(
        self, metric: str | MetricSelector | None = None
    ) -> tuple[tuple[str, float], ...]:
        """(month, value) series for the metric, memoized like the other views."""
        selected = self.selected_metric if metric is None else parse_metric(metric)
        source = self.dataset.monthly_data
        return self._cache.get_or_compute(
            "metric_view",
            source,
            lambda: metric_series(source, selected),
            selected.value,
        )

    def snapshot(self) -> DashboardSnapshot:
        """Bundle the dataset and the views for the current selectors."""
        return DashboardSnapshot(
            dataset=self.dataset,
            kpis=self.kpis(),
            selected_metric=self.selected_metric,
            selected_region=self.selected_region,
            metric_series=self.metric_view(),
            region_view=tuple(self.region_view()),
        )

    def cache_stats(self) -> CacheStats:
        return self._cache.stats()
