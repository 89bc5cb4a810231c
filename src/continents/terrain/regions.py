"""Continent regions and the boundary rules that keep oceans open."""

from enum import Enum

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel


class RegionLayout(str, Enum):
    """How the ocean gap between the two continents is placed."""

    # Gap band exactly `min_gap` columns wide, centered on the map
    CENTERED = "centered"
    # Each continent stops `min_gap` columns short of the midline
    MIRRORED = "mirrored"


class RegionDescriptor(BaseModel, frozen=True):
    """Rectangular continent region.

    Bounds are half-open: the interior is west <= x < east and
    south <= y < north.
    """

    west: int
    east: int
    south: int
    north: int
    continent: int

    @property
    def is_empty(self) -> bool:
        """True when the bounds enclose no cells."""
        return self.west >= self.east or self.south >= self.north

    @property
    def center_x(self) -> float:
        return (self.west + self.east) / 2

    @property
    def cell_count(self) -> int:
        if self.is_empty:
            return 0
        return (self.east - self.west) * (self.north - self.south)

    def contains(self, x: int, y: int) -> bool:
        return self.west <= x < self.east and self.south <= y < self.north

    def slices(self) -> tuple[slice, slice]:
        """(row, column) slices covering the interior."""
        if self.is_empty:
            return slice(0, 0), slice(0, 0)
        return slice(self.south, self.north), slice(self.west, self.east)

    def mask(self, width: int, height: int) -> NDArray[np.bool_]:
        """Boolean (height, width) mask of the interior."""
        result = np.zeros((height, width), dtype=bool)
        rows, cols = self.slices()
        result[rows, cols] = True
        return result


def _clamp(value: int, low: int, high: int) -> int:
    return min(max(value, low), high)


def compute_regions(
    width: int,
    height: int,
    ocean_columns: int,
    polar_rows: int,
    min_gap: int,
    layout: RegionLayout = RegionLayout.CENTERED,
) -> tuple[RegionDescriptor, RegionDescriptor]:
    """Compute the west and east continent regions.

    Args:
        width: Grid width.
        height: Grid height.
        ocean_columns: Ocean columns kept at the left and right edges.
        polar_rows: Water rows kept at the top and bottom.
        min_gap: Minimum ocean columns between the continents.
        layout: Placement of the gap.

    Returns:
        Tuple of (west, east) regions. Either may be empty on tiny maps.
    """
    middle = width // 2
    if layout == RegionLayout.CENTERED:
        west_east = middle - min_gap // 2
        east_west = west_east + min_gap
    else:
        west_east = middle - min_gap
        east_west = middle + min_gap

    west_east = _clamp(west_east, 0, width)
    east_west = _clamp(east_west, west_east, width)
    south = _clamp(polar_rows, 0, height)
    north = _clamp(height - polar_rows, 0, height)

    west = RegionDescriptor(
        west=_clamp(ocean_columns, 0, width),
        east=west_east,
        south=south,
        north=north,
        continent=0,
    )
    east = RegionDescriptor(
        west=east_west,
        east=_clamp(width - ocean_columns, 0, width),
        south=south,
        north=north,
        continent=1,
    )
    return west, east


def forced_ocean_mask(
    width: int,
    height: int,
    west: RegionDescriptor,
    east: RegionDescriptor,
) -> NDArray[np.bool_]:
    """Cells that must be ocean whatever the height field says.

    Covers the polar rows, the edge ocean columns and the gap band
    between the continents.
    """
    return ~(west.mask(width, height) | east.mask(width, height))


def forced_ocean(x: int, y: int, west: RegionDescriptor, east: RegionDescriptor) -> bool:
    """Whether cell (x, y) must be ocean."""
    return not (west.contains(x, y) or east.contains(x, y))


def region_for(x: int, west: RegionDescriptor, east: RegionDescriptor) -> RegionDescriptor | None:
    """Region whose column range holds x, if any."""
    if west.west <= x < west.east:
        return west
    if east.west <= x < east.east:
        return east
    return None


def gap_columns(west: RegionDescriptor, east: RegionDescriptor) -> range:
    """Columns of the ocean band separating the two continents."""
    return range(west.east, east.west)
