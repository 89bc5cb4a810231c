"""Post-generation validation of terrain invariants."""

import logging

import numpy as np

from ..terrain_types import LAND_TAGS, OCEAN, WATER_TAGS
from .grid import TerrainGrid
from .regions import RegionDescriptor, forced_ocean_mask

logger = logging.getLogger(__name__)


class ValidationResult:
    """Result of terrain validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.passed = True

    def add_error(self, message: str) -> None:
        self.errors.append(message)
        self.passed = False

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)


def validate_terrain(
    grid: TerrainGrid,
    west: RegionDescriptor,
    east: RegionDescriptor,
    min_gap: int,
) -> ValidationResult:
    """Check a generated grid against the map's geometric rules.

    Args:
        grid: Generated grid.
        west: West continent region.
        east: East continent region.
        min_gap: Required ocean columns between the continents.

    Returns:
        ValidationResult with any errors/warnings.
    """
    result = ValidationResult()

    _check_gap_width(west, east, min_gap, result)
    _check_forced_ocean(grid, west, east, result)
    _check_tags(grid, result)
    _check_land_present(grid, west, east, result)

    if result.passed:
        logger.info("Terrain validation passed")
    else:
        logger.warning(f"Terrain validation failed with {len(result.errors)} errors")
        for error in result.errors:
            logger.error(f"  - {error}")

    for warning in result.warnings:
        logger.warning(f"  - {warning}")

    return result


def _check_gap_width(
    west: RegionDescriptor,
    east: RegionDescriptor,
    min_gap: int,
    result: ValidationResult,
) -> None:
    # Land can only sit on one side, so there is nothing to separate
    if west.is_empty or east.is_empty:
        return
    gap = east.west - west.east
    if gap < min_gap:
        result.add_error(f"Ocean gap is {gap} columns, need at least {min_gap}")


def _check_forced_ocean(
    grid: TerrainGrid,
    west: RegionDescriptor,
    east: RegionDescriptor,
    result: ValidationResult,
) -> None:
    """Polar rows, edge columns and the gap band are pure ocean."""
    forced = forced_ocean_mask(grid.width, grid.height, west, east)
    stray = forced & (grid.kinds != OCEAN)
    count = int(np.sum(stray))
    if count > 0:
        ys, xs = np.nonzero(stray)
        result.add_error(
            f"{count} non-ocean cells outside the continents (first at ({xs[0]}, {ys[0]}))"
        )


def _check_tags(grid: TerrainGrid, result: ValidationResult) -> None:
    """Land tags only on land and water tags only on water."""
    land = grid.land_mask()
    land_tagged = (grid.tags & int(LAND_TAGS)) != 0
    water_tagged = (grid.tags & int(WATER_TAGS)) != 0

    bad_land = int(np.sum(land & water_tagged))
    bad_water = int(np.sum(~land & land_tagged))
    if bad_land > 0:
        result.add_error(f"{bad_land} land cells carry water tags")
    if bad_water > 0:
        result.add_error(f"{bad_water} water cells carry landmass tags")


def _check_land_present(
    grid: TerrainGrid,
    west: RegionDescriptor,
    east: RegionDescriptor,
    result: ValidationResult,
) -> None:
    land = grid.land_mask()
    for region in (west, east):
        if region.is_empty:
            result.add_warning(f"Continent {region.continent} has an empty region")
            continue
        rows, cols = region.slices()
        if not np.any(land[rows, cols]):
            result.add_warning(f"Continent {region.continent} has no land")
