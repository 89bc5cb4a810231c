"""Start sectors: a rows x cols partition of each continent."""

import logging

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel

from .regions import RegionDescriptor
from .rng import RandomStream

logger = logging.getLogger(__name__)


class StartSectors(BaseModel, frozen=True):
    """Claimed start sectors for both continents.

    `claimed` holds rows * cols flags for the west continent followed
    by rows * cols flags for the east continent, each in row-major order
    from the southern row.
    """

    rows: int
    cols: int
    claimed: tuple[bool, ...]

    @property
    def per_continent(self) -> int:
        return self.rows * self.cols

    def is_claimed(self, continent: int, row: int, col: int) -> bool:
        return self.claimed[continent * self.per_continent + row * self.cols + col]

    def claimed_count(self, continent: int) -> int:
        start = continent * self.per_continent
        return sum(self.claimed[start:start + self.per_continent])


def choose_start_sectors(
    players_west: int,
    players_east: int,
    rows: int,
    cols: int,
    stream: RandomStream,
) -> StartSectors:
    """Claim one sector per player on each continent.

    Draws for the west continent come before those for the east.
    """
    per_continent = rows * cols
    claimed = [False] * (2 * per_continent)

    for continent, players in enumerate((players_west, players_east)):
        if players > per_continent:
            logger.warning(
                f"{players} players on continent {continent} but only "
                f"{per_continent} start sectors"
            )
        for index in stream.sample_without_replacement(
            per_continent, players, f"Start sectors {continent}"
        ):
            claimed[continent * per_continent + index] = True

    return StartSectors(rows=rows, cols=cols, claimed=tuple(claimed))


def sector_grid(region: RegionDescriptor, rows: int, cols: int, width: int, height: int) -> NDArray[np.int32]:
    """Sector index of every cell in the region, -1 elsewhere.

    Indices are local to the continent (0 .. rows * cols - 1).
    """
    result = np.full((height, width), -1, dtype=np.int32)
    if region.is_empty or rows <= 0 or cols <= 0:
        return result

    span_x = region.east - region.west
    span_y = region.north - region.south
    cols_of = (np.arange(region.west, region.east) - region.west) * cols // span_x
    rows_of = (np.arange(region.south, region.north) - region.south) * rows // span_y

    row_slice, col_slice = region.slices()
    result[row_slice, col_slice] = rows_of[:, None] * cols + cols_of[None, :]
    return result


def claimed_sector_mask(
    sectors: StartSectors,
    region: RegionDescriptor,
    width: int,
    height: int,
) -> NDArray[np.bool_]:
    """Cells of the region that fall inside a claimed start sector."""
    local = sector_grid(region, sectors.rows, sectors.cols, width, height)
    start = region.continent * sectors.per_continent
    flags = np.array(
        sectors.claimed[start:start + sectors.per_continent] or (False,), dtype=bool
    )
    return (local >= 0) & flags[np.clip(local, 0, None)]
