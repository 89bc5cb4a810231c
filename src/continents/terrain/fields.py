"""Height fields: deterministic fractal scalar fields over the map grid."""

import logging

import numpy as np
from numpy.typing import NDArray

from .noise import fbm_noise, normalize_unit

logger = logging.getLogger(__name__)

# Threshold returned when a percentile lookup has no meaningful answer.
# Every height compares below it, so affected cells stay ocean.
UNDEFINED_THRESHOLD = float("inf")


def coarseness_wavelength(width: int, height: int, coarseness: int) -> float:
    """Base feature wavelength for a coarseness value.

    Each step of coarseness halves the size of the largest features.
    """
    return max(width, height, 1) / float(2 ** max(coarseness, 0))


class HeightField:
    """Immutable scalar field normalized to [0, 1].

    Values are a pure function of (seed, width, height, coarseness), so
    two fields built from the same inputs are identical.
    """

    def __init__(self, values: NDArray[np.float32], seed: int | None = None, coarseness: int | None = None):
        values = np.asarray(values, dtype=np.float32)
        if values.ndim != 2:
            raise ValueError(f"Height field must be 2D, got shape {values.shape}")
        values = values.copy()
        values.setflags(write=False)
        self._values = values
        self.seed = seed
        self.coarseness = coarseness

    @classmethod
    def build(
        cls,
        seed: int,
        width: int,
        height: int,
        coarseness: int,
        octaves: int = 4,
    ) -> "HeightField":
        """Build a fractal height field.

        Args:
            seed: Seed for the noise generators.
            width: Field width in tiles.
            height: Field height in tiles.
            coarseness: Fractal size; larger values give smaller features.
            octaves: Number of fBm octaves.

        Returns:
            New HeightField.
        """
        wavelength = coarseness_wavelength(width, height, coarseness)
        raw = fbm_noise(width, height, seed, wavelength, octaves=octaves)
        logger.debug(
            f"Built {width}x{height} height field seed={seed} "
            f"coarseness={coarseness} wavelength={wavelength:.1f}"
        )
        return cls(normalize_unit(raw), seed=seed, coarseness=coarseness)

    @classmethod
    def from_array(cls, values: NDArray) -> "HeightField":
        """Wrap an explicit (height, width) array as a field."""
        return cls(np.asarray(values, dtype=np.float32))

    @property
    def values(self) -> NDArray[np.float32]:
        """Read-only (height, width) array of heights."""
        return self._values

    @property
    def width(self) -> int:
        return self._values.shape[1]

    @property
    def height(self) -> int:
        return self._values.shape[0]

    def sample(self, x: int, y: int) -> float:
        """Height at cell (x, y)."""
        return float(self._values[y, x])

    def threshold_for_percentile(self, percent: float) -> float:
        """Height below which about `percent`% of the field's cells fall.

        Args:
            percent: Percentile in [0, 100]; values outside are clamped.

        Returns:
            Threshold height, or UNDEFINED_THRESHOLD for an empty or
            non-finite field.
        """
        if self._values.size == 0 or not np.isfinite(percent):
            return UNDEFINED_THRESHOLD
        if not np.all(np.isfinite(self._values)):
            return UNDEFINED_THRESHOLD

        percent = min(max(float(percent), 0.0), 100.0)
        return float(np.percentile(self._values, percent))
