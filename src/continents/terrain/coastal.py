"""Coastal refinement: coast band expansion and ocean tag adjustment."""

import logging

import numpy as np
from numpy.typing import NDArray
from scipy import ndimage

from ..terrain_types import COAST, OCEAN, WATER_TAGS
from .config import CoastConfig
from .grid import TerrainGrid
from .landmass import east_side_mask
from .regions import RegionDescriptor
from .rng import RandomStream

logger = logging.getLogger(__name__)

# 8-connected neighbourhood, center excluded
NEIGHBOR_KERNEL = np.array([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=np.int32)


def count_land_neighbors(land_mask: NDArray[np.bool_]) -> NDArray[np.int32]:
    """Number of land cells among each cell's 8 neighbours.

    Cells beyond the grid edge count as water.
    """
    return ndimage.convolve(
        land_mask.astype(np.int32), NEIGHBOR_KERNEL, mode="constant", cval=0
    )


def coast_candidates(
    grid: TerrainGrid, blocked: NDArray[np.bool_] | None = None
) -> NDArray[np.bool_]:
    """Ocean cells touching at least one land cell, minus any blocked cells."""
    candidates = (grid.kinds == OCEAN) & (count_land_neighbors(grid.land_mask()) > 0)
    if blocked is not None:
        candidates &= ~blocked
    return candidates


def expand_coasts(
    grid: TerrainGrid,
    stream: RandomStream,
    config: CoastConfig,
    blocked: NDArray[np.bool_] | None = None,
) -> NDArray[np.bool_]:
    """Turn a random share of land-adjacent ocean into coast.

    Candidates are fixed from the grid as it was before the pass, so new
    coast never makes further cells eligible. One draw is made per
    candidate in row-major (y, x) order.

    Args:
        grid: Classified grid, modified in place.
        stream: Shared random stream.
        config: Draw range and accepted outcomes.
        blocked: Cells that must stay ocean (polar rows, edge columns, gap).

    Returns:
        Boolean mask of cells promoted to coast.
    """
    candidates = coast_candidates(grid, blocked)
    ys, xs = np.nonzero(candidates)

    draws = stream.get_random_numbers(config.draw_range, len(ys), "Coast expansion")
    accepted = np.isin(draws, list(config.accept_values))

    promoted = np.zeros_like(candidates)
    promoted[ys[accepted], xs[accepted]] = True
    grid.kinds[promoted] = COAST

    logger.info(
        f"Coast expansion: {len(ys):,} candidates, {int(np.sum(promoted)):,} promoted "
        f"(p={config.probability:.2f})"
    )
    return promoted


def adjust_ocean_tags(
    grid: TerrainGrid,
    west: RegionDescriptor,
    east: RegionDescriptor,
    west_has_more_players: bool,
) -> None:
    """Give every water cell a water tag and a side.

    Water in the gap band between the continents is assigned to the
    side with more players; all other water is split at the column
    where the east continent begins.
    """
    water = grid.water_mask()
    east_side = east_side_mask(grid.width, grid.height, east.west)

    gap = np.zeros_like(water)
    gap[:, west.east:east.west] = True
    east_side = np.where(gap, not west_has_more_players, east_side)

    # Re-tag from scratch so side tags never disagree
    grid.tags[water] &= np.uint8(~int(WATER_TAGS) & 0xFF)
    grid.tag_water(water, east_side)

    logger.debug(
        f"Tagged {int(np.sum(water)):,} water cells "
        f"({int(np.sum(water & east_side)):,} east)"
    )
