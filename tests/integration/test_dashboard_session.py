"""
Integration tests for DashboardSession.

Exercise a full session: generation once at start, selector transitions,
memoized derived views and the snapshot handed to the presentation layer.
"""

import json
import logging

import pytest

from sales_dashboard import (
    DashboardSession,
    compute_kpi_summary,
    filter_by_region,
    generate_dataset,
)
from sales_dashboard.config.models import DashboardConfig
from sales_dashboard.shared.exceptions import DatasetShapeError, InvalidSelectorError
from sales_dashboard.shared.models import (
    MONTHS,
    REGION_SELECTORS,
    DashboardSnapshot,
    MetricSelector,
)

pytestmark = pytest.mark.integration


@pytest.fixture
def session():
    return DashboardSession(DashboardConfig(seed=42))


class TestSessionStart:
    """Dataset generation at session start."""

    def test_generates_dataset_once(self, session):
        dataset = session.dataset
        session.select_region("North")
        session.select_metric("orders")
        session.snapshot()
        assert session.dataset is dataset

    def test_seeded_session_matches_generate_dataset(self, session):
        assert session.dataset == generate_dataset(seed=42)

    def test_initial_selectors_from_config(self):
        cfg = DashboardConfig(seed=1, default_metric="customers", default_region="East")
        session = DashboardSession(cfg)
        assert session.selected_metric is MetricSelector.CUSTOMERS
        assert session.selected_region == "East"

    def test_injected_dataset_dict(self, seeded_dataset):
        session = DashboardSession(dataset=seeded_dataset.model_dump(by_alias=True))
        assert session.dataset == seeded_dataset

    def test_injected_dataset_instance_kept(self, seeded_dataset):
        assert DashboardSession(dataset=seeded_dataset).dataset is seeded_dataset

    def test_injected_dataset_with_wrong_shape(self, seeded_dataset):
        dumped = seeded_dataset.model_dump(by_alias=True)
        dumped["productData"] = dumped["productData"][:3]
        with pytest.raises(DatasetShapeError, match="Injected dataset"):
            DashboardSession(dataset=dumped)

    def test_session_logs_start_with_session_id(self, caplog):
        with caplog.at_level(logging.INFO, logger="sales_dashboard"):
            session = DashboardSession(DashboardConfig(seed=3))

        entries = [json.loads(r.message) for r in caplog.records]
        messages = {e["message"]: e for e in entries}
        assert messages["session started"]["session_id"] == session.session_id
        assert messages["dataset generated"]["session_id"] == session.session_id
        assert messages["dataset generated"]["context"]["seed"] == 3

    def test_debug_log_level_emits_selector_events(self, caplog):
        session = DashboardSession(DashboardConfig(seed=3, log_level="DEBUG"))
        with caplog.at_level(logging.DEBUG):
            session.select_region("North")

        entries = [
            json.loads(r.message)
            for r in caplog.records
            if r.name == "sales_dashboard.session"
        ]
        selected = [e for e in entries if e["message"] == "region selected"]
        assert selected[0]["context"] == {"previous": "all", "current": "North"}
        assert selected[0]["session_id"] == session.session_id

    def test_info_log_level_suppresses_debug_events(self, caplog):
        session = DashboardSession(DashboardConfig(seed=3, log_level="INFO"))
        with caplog.at_level(logging.DEBUG):
            session.select_region("North")
        assert not [
            r
            for r in caplog.records
            if r.name.startswith("sales_dashboard") and r.levelno == logging.DEBUG
        ]

    def test_wrong_shape_names_collection(self, seeded_dataset):
        dumped = seeded_dataset.model_dump(by_alias=True)
        dumped["regionData"] = dumped["regionData"][::-1]
        with pytest.raises(DatasetShapeError) as exc_info:
            DashboardSession(dataset=dumped)
        assert exc_info.value.collection == "regionData"

    def test_invalid_record_names_collection(self, seeded_dataset):
        dumped = seeded_dataset.model_dump(by_alias=True)
        dumped["dailyData"][0]["revenue"] = -1
        with pytest.raises(DatasetShapeError) as exc_info:
            DashboardSession(dataset=dumped)
        assert exc_info.value.collection == "dailyData"
        assert "Collection: dailyData" in str(exc_info.value)


class TestSelectors:
    """Selector state transitions."""

    @pytest.mark.parametrize("start", REGION_SELECTORS)
    @pytest.mark.parametrize("target", REGION_SELECTORS)
    def test_every_region_reachable_in_one_step(self, session, start, target):
        session.select_region(start)
        assert session.select_region(target) == target
        assert session.selected_region == target

    def test_invalid_region_rejected(self, session):
        with pytest.raises(InvalidSelectorError):
            session.select_region("Central")
        assert session.selected_region == "all"

    def test_invalid_metric_rejected(self, session):
        with pytest.raises(InvalidSelectorError):
            session.select_metric("profit")
        assert session.selected_metric is MetricSelector.REVENUE


class TestDerivedViews:
    """Memoized KPI, region and metric views."""

    def test_kpis_match_pure_function(self, session):
        assert session.kpis() == compute_kpi_summary(session.dataset.monthly_data)

    def test_kpis_memoized_by_identity(self, session):
        first = session.kpis()
        second = session.kpis()
        assert first is second
        stats = session.cache_stats()
        assert stats.hits == 1 and stats.misses == 1

    def test_kpis_recomputed_for_new_collection(self, session, fixed_monthly_data):
        default = session.kpis()
        other = session.kpis(fixed_monthly_data)
        assert other is not default
        assert other.avg_order_value == 100

    def test_kpis_cache_stays_bounded_for_fresh_collections(
        self, session, fixed_monthly_data
    ):
        for _ in range(200):
            session.kpis(list(fixed_monthly_data))
        session.kpis()

        stats = session.cache_stats()
        assert stats.entries == 1
        assert stats.views == {"kpis": 1}
        assert stats.misses == 201

    def test_region_view_follows_selected_region(self, session):
        assert session.region_view() is session.dataset.region_data
        session.select_region("South")
        view = session.region_view()
        assert [r.region for r in view] == ["South"]
        assert view[0] is session.dataset.region_data[1]

    def test_region_view_explicit_selector_overrides_state(self, session):
        session.select_region("North")
        assert [r.region for r in session.region_view("West")] == ["West"]
        assert session.selected_region == "North"

    def test_region_view_unknown_selector_is_empty(self, session):
        assert session.region_view("Nonexistent") == ()

    def test_region_view_memoized_per_selector(self, session):
        a = session.region_view("East")
        b = session.region_view("East")
        assert a is b
        assert session.region_view("West") is not a

    def test_region_view_matches_pure_function(self, session):
        for selector in REGION_SELECTORS:
            assert session.region_view(selector) == filter_by_region(
                session.dataset.region_data, selector
            )

    def test_metric_view_follows_selected_metric(self, session):
        session.select_metric("orders")
        series = session.metric_view()
        assert tuple(label for label, _ in series) == MONTHS
        assert [v for _, v in series] == [m.orders for m in session.dataset.monthly_data]

    def test_selector_change_does_not_touch_records(self, session):
        before = session.dataset.model_dump()
        for region in REGION_SELECTORS:
            session.select_region(region)
            session.region_view()
        assert session.dataset.model_dump() == before


class TestSnapshot:
    """Snapshot for the presentation layer."""

    def test_snapshot_contents(self, session):
        session.select_region("North")
        session.select_metric(MetricSelector.CUSTOMERS)
        snap = session.snapshot()

        assert isinstance(snap, DashboardSnapshot)
        assert snap.dataset is session.dataset
        assert snap.kpis == session.kpis()
        assert snap.selected_region == "North"
        assert snap.selected_metric is MetricSelector.CUSTOMERS
        assert [r.region for r in snap.region_view] == ["North"]
        assert len(snap.metric_series) == 12

    def test_snapshot_serializes_with_dashboard_keys(self, session):
        dumped = session.snapshot().model_dump(by_alias=True, mode="json")
        assert {"dataset", "kpis", "selectedMetric", "selectedRegion"} <= set(dumped)
        assert dumped["selectedMetric"] == "revenue"
        assert set(dumped["kpis"]) == {
            "totalRevenue",
            "totalOrders",
            "totalCustomers",
            "avgOrderValue",
        }
        assert len(dumped["regionView"]) == 4
