"""Tests for terrain validation."""

import numpy as np

from continents.terrain.grid import TerrainGrid
from continents.terrain.landmass import east_side_mask
from continents.terrain.regions import RegionDescriptor
from continents.terrain.validation import ValidationResult, validate_terrain
from continents.terrain_types import COAST, FLAT, PlotTag


def _valid_grid(small_regions) -> TerrainGrid:
    """Land in both regions with consistent tags."""
    west, east = small_regions
    grid = TerrainGrid(64, 40)
    land = np.zeros((40, 64), dtype=bool)
    land[10:30, 8:24] = True
    land[10:30, 40:56] = True
    grid.kinds[land] = FLAT
    east_side = east_side_mask(64, 40, east.west)
    grid.tag_landmass(land, east_side)
    grid.tag_water(~land, east_side)
    return grid


class TestValidationResult:
    def test_starts_passed(self) -> None:
        result = ValidationResult()
        assert result.passed
        assert result.errors == []

    def test_warning_keeps_passed(self) -> None:
        result = ValidationResult()
        result.add_warning("careful")
        assert result.passed
        assert result.warnings == ["careful"]

    def test_error_fails(self) -> None:
        result = ValidationResult()
        result.add_error("broken")
        assert not result.passed


class TestValidateTerrain:
    def test_valid_grid_passes(self, small_regions) -> None:
        west, east = small_regions
        result = validate_terrain(_valid_grid(small_regions), west, east, 8)
        assert result.passed
        assert result.warnings == []

    def test_gap_too_narrow(self, small_regions) -> None:
        west, east = small_regions
        result = validate_terrain(_valid_grid(small_regions), west, east, 9)
        assert not result.passed
        assert any("gap" in error for error in result.errors)

    def test_land_in_gap(self, small_regions) -> None:
        west, east = small_regions
        grid = _valid_grid(small_regions)
        grid.kinds[20, 30] = FLAT
        grid.tags[20, 30] = int(PlotTag.LANDMASS | PlotTag.WEST_LANDMASS)

        result = validate_terrain(grid, west, east, 8)
        assert not result.passed
        assert any("(30, 20)" in error for error in result.errors)

    def test_land_in_polar_row(self, small_regions) -> None:
        west, east = small_regions
        grid = _valid_grid(small_regions)
        grid.kinds[0, 10] = FLAT
        grid.tags[0, 10] = int(PlotTag.LANDMASS | PlotTag.WEST_LANDMASS)
        assert not validate_terrain(grid, west, east, 8).passed

    def test_land_in_edge_columns(self, small_regions) -> None:
        west, east = small_regions
        grid = _valid_grid(small_regions)
        grid.kinds[20, 62] = FLAT
        grid.tags[20, 62] = int(PlotTag.LANDMASS | PlotTag.EAST_LANDMASS)
        assert not validate_terrain(grid, west, east, 8).passed

    def test_coast_in_gap_rejected(self, small_regions) -> None:
        west, east = small_regions
        grid = _valid_grid(small_regions)
        grid.kinds[20, 30] = COAST

        result = validate_terrain(grid, west, east, 8)
        assert not result.passed
        assert any("non-ocean" in error for error in result.errors)

    def test_coast_inside_region_allowed(self, small_regions) -> None:
        west, east = small_regions
        grid = _valid_grid(small_regions)
        grid.kinds[9, 8:24] = COAST
        assert validate_terrain(grid, west, east, 8).passed

    def test_land_with_water_tag(self, small_regions) -> None:
        west, east = small_regions
        grid = _valid_grid(small_regions)
        grid.tags[15, 10] |= int(PlotTag.WATER)

        result = validate_terrain(grid, west, east, 8)
        assert not result.passed
        assert any("land cells carry water tags" in error for error in result.errors)

    def test_water_with_land_tag(self, small_regions) -> None:
        west, east = small_regions
        grid = _valid_grid(small_regions)
        grid.tags[0, 0] |= int(PlotTag.LANDMASS)

        result = validate_terrain(grid, west, east, 8)
        assert not result.passed
        assert any("water cells carry landmass tags" in error for error in result.errors)

    def test_landless_continent_warns(self, small_regions) -> None:
        west, east = small_regions
        grid = TerrainGrid(64, 40)
        grid.tag_water(np.ones((40, 64), dtype=bool), east_side_mask(64, 40, east.west))

        result = validate_terrain(grid, west, east, 8)
        assert result.passed
        assert len(result.warnings) == 2

    def test_gap_not_checked_without_both_continents(self) -> None:
        west = RegionDescriptor(west=4, east=0, south=2, north=8, continent=0)
        east = RegionDescriptor(west=6, east=6, south=2, north=8, continent=1)
        grid = TerrainGrid(10, 10)
        grid.tag_water(np.ones((10, 10), dtype=bool), east_side_mask(10, 10, 6))

        result = validate_terrain(grid, west, east, 12)
        assert result.passed
        assert not any("gap" in error for error in result.errors)

    def test_empty_region_warns(self) -> None:
        west = RegionDescriptor(west=2, east=2, south=0, north=10, continent=0)
        east = RegionDescriptor(west=2, east=8, south=0, north=10, continent=1)
        grid = TerrainGrid(10, 10)
        grid.kinds[5, 5] = FLAT
        grid.tag_landmass(grid.land_mask(), east_side_mask(10, 10, 2))
        grid.tag_water(grid.water_mask(), east_side_mask(10, 10, 2))

        result = validate_terrain(grid, west, east, 0)
        assert result.passed
        assert any("empty region" in warning for warning in result.warnings)
