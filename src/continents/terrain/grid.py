"""Mutable terrain grid: one terrain kind and one tag bitset per cell."""

import numpy as np
from numpy.typing import NDArray

from ..terrain_types import (
    LAND_TAGS,
    OCEAN,
    WATER_CODES,
    WATER_TAGS,
    PlotTag,
    TerrainKind,
)


class TerrainGrid:
    """Array-backed terrain store of shape (height, width).

    Starts as all ocean with no tags. Row 0 is the southern edge and
    y grows northward.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.kinds: NDArray[np.uint8] = np.full((height, width), OCEAN, dtype=np.uint8)
        self.tags: NDArray[np.uint8] = np.zeros((height, width), dtype=np.uint8)

    @classmethod
    def from_arrays(cls, kinds: NDArray[np.uint8], tags: NDArray[np.uint8] | None = None) -> "TerrainGrid":
        """Build a grid around existing kind (and tag) arrays."""
        height, width = kinds.shape
        grid = cls(width, height)
        grid.kinds = np.asarray(kinds, dtype=np.uint8).copy()
        if tags is not None:
            if tags.shape != kinds.shape:
                raise ValueError(
                    f"Tag array shape {tags.shape} doesn't match "
                    f"kind array shape {kinds.shape}"
                )
            grid.tags = np.asarray(tags, dtype=np.uint8).copy()
        return grid

    def copy(self) -> "TerrainGrid":
        return TerrainGrid.from_arrays(self.kinds, self.tags)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    # --- Terrain ---

    def get_terrain(self, x: int, y: int) -> TerrainKind:
        return TerrainKind.from_code(self.kinds[y, x])

    def set_terrain(self, x: int, y: int, kind: TerrainKind) -> None:
        self.kinds[y, x] = kind.code

    def land_mask(self) -> NDArray[np.bool_]:
        """Boolean mask where True = any non-water kind."""
        return ~self.water_mask()

    def water_mask(self) -> NDArray[np.bool_]:
        """Boolean mask where True = ocean or coast."""
        return np.isin(self.kinds, WATER_CODES)

    def count(self, kind: TerrainKind) -> int:
        return int(np.sum(self.kinds == kind.code))

    # --- Tags ---

    def get_tags(self, x: int, y: int) -> PlotTag:
        return PlotTag(int(self.tags[y, x]))

    def add_tag(self, x: int, y: int, tag: PlotTag) -> None:
        self.tags[y, x] |= int(tag)

    def clear_tags(self, x: int, y: int) -> None:
        self.tags[y, x] = int(PlotTag.NONE)

    def tag_landmass(self, mask: NDArray[np.bool_], east_mask: NDArray[np.bool_]) -> None:
        """Mark cells as landmass members, dropping any water tags.

        Args:
            mask: Cells to tag.
            east_mask: Cells belonging to the east side of the map.
        """
        self.tags[mask] &= np.uint8(~int(WATER_TAGS) & 0xFF)
        self.tags[mask] |= np.uint8(PlotTag.LANDMASS)
        self.tags[mask & east_mask] |= np.uint8(PlotTag.EAST_LANDMASS)
        self.tags[mask & ~east_mask] |= np.uint8(PlotTag.WEST_LANDMASS)

    def tag_water(self, mask: NDArray[np.bool_], east_mask: NDArray[np.bool_]) -> None:
        """Mark cells as water members, dropping any landmass tags."""
        self.tags[mask] &= np.uint8(~int(LAND_TAGS) & 0xFF)
        self.tags[mask] |= np.uint8(PlotTag.WATER)
        self.tags[mask & east_mask] |= np.uint8(PlotTag.EAST_WATER)
        self.tags[mask & ~east_mask] |= np.uint8(PlotTag.WEST_WATER)

    # --- Output ---

    def to_text(self) -> str:
        """Render one character per cell, northern row first.

        Each row is newline terminated.
        """
        symbols = np.array(
            [TerrainKind.from_code(code).symbol for code in range(len(TerrainKind))]
        )
        lines = []
        for y in range(self.height - 1, -1, -1):
            lines.append("".join(symbols[self.kinds[y]]) + "\n")
        return "".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TerrainGrid):
            return NotImplemented
        return np.array_equal(self.kinds, other.kinds) and np.array_equal(
            self.tags, other.tags
        )
