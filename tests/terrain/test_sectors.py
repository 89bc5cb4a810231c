"""Tests for start sector selection and partitioning."""

import numpy as np

from continents.terrain.regions import RegionDescriptor
from continents.terrain.rng import RandomStream
from continents.terrain.sectors import (
    StartSectors,
    choose_start_sectors,
    claimed_sector_mask,
    sector_grid,
)


class TestChooseStartSectors:
    """Tests for claiming sectors per player."""

    def test_one_sector_per_player(self) -> None:
        sectors = choose_start_sectors(2, 1, 2, 2, RandomStream(1))
        assert len(sectors.claimed) == 8
        assert sectors.claimed_count(0) == 2
        assert sectors.claimed_count(1) == 1

    def test_capped_at_sector_count(self) -> None:
        sectors = choose_start_sectors(9, 0, 2, 2, RandomStream(1))
        assert sectors.claimed_count(0) == 4
        assert sectors.claimed_count(1) == 0

    def test_deterministic(self) -> None:
        sectors1 = choose_start_sectors(3, 3, 3, 3, RandomStream(11))
        sectors2 = choose_start_sectors(3, 3, 3, 3, RandomStream(11))
        assert sectors1 == sectors2

    def test_consumes_stream(self) -> None:
        stream = RandomStream(11)
        choose_start_sectors(3, 2, 3, 3, stream)
        assert stream.draw_count == 5


class TestStartSectors:
    """Tests for the claimed sector container."""

    def test_is_claimed_indexing(self) -> None:
        claimed = [False] * 8
        claimed[4 + 1 * 2 + 0] = True  # east continent, row 1, col 0
        sectors = StartSectors(rows=2, cols=2, claimed=tuple(claimed))
        assert sectors.is_claimed(1, 1, 0)
        assert not sectors.is_claimed(0, 1, 0)


class TestSectorGrid:
    """Tests for cell to sector mapping."""

    def test_quadrants(self) -> None:
        region = RegionDescriptor(west=0, east=10, south=0, north=10, continent=0)
        grid = sector_grid(region, 2, 2, 12, 12)
        assert grid[0, 0] == 0
        assert grid[0, 9] == 1
        assert grid[9, 0] == 2
        assert grid[9, 9] == 3

    def test_outside_region(self) -> None:
        region = RegionDescriptor(west=0, east=10, south=0, north=10, continent=0)
        grid = sector_grid(region, 2, 2, 12, 12)
        assert grid[11, 11] == -1
        assert grid[0, 10] == -1

    def test_sectors_cover_region(self) -> None:
        region = RegionDescriptor(west=3, east=17, south=2, north=13, continent=1)
        grid = sector_grid(region, 3, 4, 20, 15)
        values = grid[2:13, 3:17]
        assert set(np.unique(values)) == set(range(12))

    def test_empty_region(self) -> None:
        region = RegionDescriptor(west=5, east=5, south=0, north=10, continent=0)
        assert (sector_grid(region, 2, 2, 10, 10) == -1).all()


class TestClaimedSectorMask:
    """Tests for the claimed-sector cell mask."""

    def test_only_claimed_quadrant(self) -> None:
        region = RegionDescriptor(west=0, east=10, south=0, north=10, continent=0)
        claimed = (False, False, False, True) + (False,) * 4
        sectors = StartSectors(rows=2, cols=2, claimed=claimed)
        mask = claimed_sector_mask(sectors, region, 10, 10)
        assert mask[5:, 5:].all()
        assert mask.sum() == 25

    def test_uses_region_continent(self) -> None:
        region = RegionDescriptor(west=0, east=10, south=0, north=10, continent=1)
        claimed = (True,) * 4 + (False,) * 4
        sectors = StartSectors(rows=2, cols=2, claimed=claimed)
        assert not claimed_sector_mask(sectors, region, 10, 10).any()
