"""Shared test fixtures for map generation tests."""

import numpy as np
import pytest

from continents.map_sizes import MapSizeInfo, load_map_sizes
from continents.terrain.grid import TerrainGrid
from continents.terrain.regions import RegionDescriptor, RegionLayout, compute_regions
from continents.terrain.rng import RandomStream
from continents.terrain.sectors import StartSectors


@pytest.fixture
def map_sizes() -> dict[str, MapSizeInfo]:
    """The bundled map size table."""
    return load_map_sizes()


@pytest.fixture
def stream() -> RandomStream:
    return RandomStream(7)


@pytest.fixture
def small_regions() -> tuple[RegionDescriptor, RegionDescriptor]:
    """West/east regions on a 64x40 grid with an 8-column centered gap.

    west: x[4, 28)  east: x[36, 60)  y[2, 38)
    """
    return compute_regions(64, 40, 4, 2, 8, RegionLayout.CENTERED)


@pytest.fixture
def empty_grid() -> TerrainGrid:
    """64x40 grid, all ocean."""
    return TerrainGrid(64, 40)


@pytest.fixture
def no_sectors() -> StartSectors:
    """Single unclaimed sector per continent."""
    return StartSectors(rows=1, cols=1, claimed=(False, False))


@pytest.fixture
def island_grid() -> TerrainGrid:
    """7x7 grid with a 3x3 block of flat land in the middle.

        . . . . . . .
        . . . . . . .
        . . F F F . .
        . . F F F . .
        . . F F F . .
        . . . . . . .
        . . . . . . .
    """
    kinds = np.zeros((7, 7), dtype=np.uint8)
    kinds[2:5, 2:5] = 2
    return TerrainGrid.from_arrays(kinds)
