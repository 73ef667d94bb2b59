"""
Bounded pseudo-random value synthesis.

Every generated numeric field is produced as
``base + uniform(0, jitter) + trend * index``, where index is the record's
position in its fixed label sequence.
"""

import random

from sales_dashboard.config.models import ValueRange


class RandomValueSynthesizer:
    """Produces bounded random values from an injectable random source."""

    def __init__(self, seed: int | None = None, rng: random.Random | None = None):
        """
        Initialize the synthesizer.

        Args:
            seed: Random seed for reproducible output (None = unseeded)
            rng: Pre-built random source; takes precedence over seed
        """
        self.seed = seed
        self._rng = rng if rng is not None else random.Random(seed)

    def value(
        self, base: float, jitter: float, trend: float = 0.0, index: int = 0
    ) -> float:
        """Return base + uniform(0, jitter) + trend * index."""
        return base + self._rng.uniform(0, jitter) + trend * index

    def from_range(self, value_range: ValueRange, index: int = 0) -> float:
        """Synthesize a value from a configured range."""
        return self.value(
            value_range.base, value_range.jitter, value_range.trend, index
        )

    def signed_value(
        self, low: float, high: float, digits: int | None = None
    ) -> float:
        """Return a uniform value in [low, high], optionally rounded."""
        result = self._rng.uniform(low, high)
        if digits is not None:
            # Rounding may not push the value outside the bounds
            result = min(max(round(result, digits), low), high)
        return result
