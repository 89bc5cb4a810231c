"""The seeded random stream shared by every stage of map generation."""

import logging

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

# Upper bound (exclusive) for seeds handed to height fields
MAX_FIELD_SEED = 2**31 - 1


class RandomStream:
    """Single seeded sequence of draws for one generation run.

    Every consumer pulls from the same stream in the order the pipeline
    calls it, so the same seed always yields the same map. Each draw
    carries a label for debug logging.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        self.draw_count = 0

    def get_random_number(self, max_exclusive: int, label: str) -> int:
        """Draw one integer in [0, max_exclusive).

        Args:
            max_exclusive: Number of possible outcomes; must be positive.
            label: Description of what the draw decides.

        Returns:
            The drawn integer.
        """
        if max_exclusive <= 0:
            raise ValueError(f"max_exclusive must be positive, got {max_exclusive}")
        value = int(self._rng.integers(0, max_exclusive))
        self.draw_count += 1
        logger.debug(f"Draw #{self.draw_count} '{label}': {value} of {max_exclusive}")
        return value

    def get_random_numbers(
        self, max_exclusive: int, count: int, label: str
    ) -> NDArray[np.int64]:
        """Draw `count` integers in [0, max_exclusive) as one batch.

        The batch occupies the same place in the stream on every run.
        """
        if max_exclusive <= 0:
            raise ValueError(f"max_exclusive must be positive, got {max_exclusive}")
        values = self._rng.integers(0, max_exclusive, size=count)
        self.draw_count += count
        logger.debug(f"Drew {count} values for '{label}' (total {self.draw_count})")
        return values

    def next_seed(self, label: str) -> int:
        """Draw a seed for an independent height field."""
        return self.get_random_number(MAX_FIELD_SEED, label)

    def sample_without_replacement(self, population: int, count: int, label: str) -> list[int]:
        """Choose `count` distinct indices from range(population)."""
        count = min(count, population)
        if count <= 0:
            return []
        chosen = self._rng.choice(population, size=count, replace=False)
        self.draw_count += count
        logger.debug(f"Chose {count} of {population} for '{label}'")
        return sorted(int(i) for i in chosen)
