"""
Caching mechanism for derived dashboard views.

This module provides an in-memory memo for KPI summaries and filtered views.
Each view and selector combination owns a single slot holding the last input
collection and its result. A derived view is recomputed only when its input
reference or selector changes, and a new input replaces the slot.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Hashable, TypeVar

from pydantic import BaseModel, Field

from sales_dashboard.shared import metrics

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CacheStats(BaseModel):
    """Model for the derived view cache counters."""

    hits: int = 0
    misses: int = 0
    entries: int = 0
    views: dict[str, int] = Field(default_factory=dict)
    last_updated: datetime | None = None


class DerivedViewCache:
    """Identity-checked memo for derived views, one slot per view and selectors."""

    def __init__(self):
        # (view, *selectors) -> (source collection, cached value)
        self._entries: dict[tuple[Hashable, ...], tuple[Any, Any]] = {}
        self._hits = 0
        self._misses = 0
        self._last_updated: datetime | None = None

    def get_or_compute(
        self,
        view: str,
        source: Any,
        compute: Callable[[], T],
        *selectors: Hashable,
    ) -> T:
        """
        Return the cached view for source and selectors, computing it on a miss.

        Args:
            view: Name of the derived view (e.g. "kpis")
            source: Input collection the view is derived from
            compute: Zero-argument callable producing the view
            *selectors: Selector values that also key the entry

        Returns:
            The cached or freshly computed view
        """
        key = (view, *selectors)
        entry = self._entries.get(key)
        if entry is not None and entry[0] is source:
            self._hits += 1
            metrics.view_cache_requests_total.labels(result="hit").inc()
            return entry[1]

        self._misses += 1
        metrics.view_cache_requests_total.labels(result="miss").inc()
        value = compute()
        self._entries[key] = (source, value)
        self._last_updated = datetime.now()
        logger.debug(f"Cached view '{view}' for selectors {selectors}")
        return value

    def stats(self) -> CacheStats:
        """Snapshot of cache counters."""
        views: dict[str, int] = {}
        for key in self._entries:
            views[key[0]] = views.get(key[0], 0) + 1
        return CacheStats(
            hits=self._hits,
            misses=self._misses,
            entries=len(self._entries),
            views=views,
            last_updated=self._last_updated,
        )

    def __len__(self) -> int:
        return len(self._entries)
