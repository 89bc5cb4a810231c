"""Landmass classification: turning height fields into land and ocean.

Two classifiers share the same regions, fields and grid:

- ShapeOverlayClassifier makes one pass per cell, blending fractal
  height with center and start-sector bonuses, and carves the smiley
  features out as inland seas.
- TwoPassClassifier paints broad land with one field, then reverts some
  of it to ocean with a second, finer field to cut bays and inlets.
"""

import logging

import numpy as np
from numpy.typing import NDArray

from ..terrain_types import FLAT, OCEAN
from .config import (
    GenerationConfig,
    LandmassStrategy,
    ShapeOverlayConfig,
    TwoPassConfig,
)
from .fields import HeightField
from .grid import TerrainGrid
from .regions import RegionDescriptor, RegionLayout, forced_ocean_mask
from .rng import RandomStream
from .sectors import StartSectors, claimed_sector_mask
from .shapes import feature_mask

logger = logging.getLogger(__name__)


def east_side_mask(width: int, height: int, divide_col: int) -> NDArray[np.bool_]:
    """Cells at or beyond the column where the east continent begins."""
    mask = np.zeros((height, width), dtype=bool)
    mask[:, max(divide_col, 0):] = True
    return mask


def _check_shape(field: HeightField, grid: TerrainGrid) -> None:
    if field.values.shape != (grid.height, grid.width):
        raise ValueError(
            f"Height field shape {field.values.shape} doesn't match "
            f"grid dimensions ({grid.height}, {grid.width})"
        )


class LandClassifier:
    """Assigns land or ocean to every cell of a fresh grid."""

    strategy: LandmassStrategy

    def __init__(self) -> None:
        # Height fields built by the last classify call, keyed by name
        self.fields: dict[str, HeightField] = {}

    @property
    def min_gap(self) -> int:
        raise NotImplementedError

    @property
    def layout(self) -> RegionLayout:
        raise NotImplementedError

    def classify(
        self,
        grid: TerrainGrid,
        west: RegionDescriptor,
        east: RegionDescriptor,
        stream: RandomStream,
        sectors: StartSectors,
    ) -> None:
        """Write terrain kinds and tags for both continents into the grid."""
        raise NotImplementedError


class ShapeOverlayClassifier(LandClassifier):
    """Single pass with center/start-sector bias and a smiley overlay."""

    strategy = LandmassStrategy.SHAPE_OVERLAY

    def __init__(self, config: ShapeOverlayConfig):
        super().__init__()
        self.config = config

    @property
    def min_gap(self) -> int:
        return self.config.min_gap

    @property
    def layout(self) -> RegionLayout:
        return self.config.layout

    def classify(
        self,
        grid: TerrainGrid,
        west: RegionDescriptor,
        east: RegionDescriptor,
        stream: RandomStream,
        sectors: StartSectors,
    ) -> None:
        field = HeightField.build(
            stream.next_seed("Landmass fractal"),
            grid.width,
            grid.height,
            self.config.coarseness,
            octaves=self.config.octaves,
        )
        self.fields = {"landmass_fractal": field}
        self.carve(grid, west, east, field, sectors)

    def blended_height(
        self,
        field: HeightField,
        region: RegionDescriptor,
        water_height: float,
        sector_mask: NDArray[np.bool_],
    ) -> NDArray[np.float32]:
        """Fractal height plus positional bonuses over the whole grid.

        Only values inside the region are meaningful.
        """
        config = self.config
        height, width = field.values.shape
        ys, xs = np.meshgrid(
            np.arange(height, dtype=np.float64),
            np.arange(width, dtype=np.float64),
            indexing="ij",
        )

        center_y = (region.south + region.north) / 2
        distance = np.hypot(xs - region.center_x, ys - center_y)
        max_distance = np.hypot(
            (region.east - region.west) / 2, (region.north - region.south) / 2
        )
        pct_from_center = np.minimum(100.0 * distance / max(max_distance, 1e-9), 100.0)

        blended = config.fractal_weight * field.values.astype(np.float64)
        blended += config.center_weight * np.power(
            water_height * (100.0 - pct_from_center) / 100.0, config.center_exponent
        )

        bonus = np.where(
            sector_mask & (pct_from_center > config.sector_inner_pct),
            config.start_sector_weight * water_height,
            0.0,
        )
        bonus = np.where(pct_from_center < config.sector_half_bonus_pct, bonus / 2, bonus)
        return (blended + bonus).astype(np.float32)

    def carve(
        self,
        grid: TerrainGrid,
        west: RegionDescriptor,
        east: RegionDescriptor,
        field: HeightField,
        sectors: StartSectors,
    ) -> NDArray[np.bool_]:
        """Classify every cell of the grid in one pass.

        Returns:
            Boolean mask of cells that became land.
        """
        _check_shape(field, grid)
        config = self.config
        width, height = grid.width, grid.height

        water_height = field.threshold_for_percentile(config.water_percent)
        land = np.zeros((height, width), dtype=bool)

        if not np.isfinite(water_height):
            logger.warning("Water height undefined; leaving the map as ocean")
        else:
            for region in (west, east):
                if region.is_empty:
                    logger.debug(f"Skipping empty region {region.continent}")
                    continue

                sector_mask = claimed_sector_mask(sectors, region, width, height)
                blended = self.blended_height(field, region, water_height, sector_mask)
                region_land = region.mask(width, height) & (
                    blended >= water_height * config.cutoff
                )
                if config.shape_enabled:
                    region_land &= ~feature_mask(region, width, height)
                land |= region_land

        land &= ~forced_ocean_mask(width, height, west, east)

        grid.kinds[:] = OCEAN
        grid.kinds[land] = FLAT
        grid.tags[:] = 0
        east_side = east_side_mask(width, height, east.west)
        grid.tag_landmass(land, east_side)
        grid.tag_water(~land, east_side)

        logger.info(
            f"Shape overlay: water height {water_height:.3f}, "
            f"{int(np.sum(land)):,} land cells"
        )
        return land


class TwoPassClassifier(LandClassifier):
    """Primary land pass followed by a stricter refinement pass."""

    strategy = LandmassStrategy.TWO_PASS

    def __init__(self, config: TwoPassConfig):
        super().__init__()
        self.config = config

    @property
    def min_gap(self) -> int:
        return self.config.min_gap

    @property
    def layout(self) -> RegionLayout:
        return self.config.layout

    def classify(
        self,
        grid: TerrainGrid,
        west: RegionDescriptor,
        east: RegionDescriptor,
        stream: RandomStream,
        sectors: StartSectors,
    ) -> None:
        self.fields = {}
        for region in (west, east):
            if region.is_empty:
                logger.debug(f"Skipping empty region {region.continent}")
                continue

            primary = HeightField.build(
                stream.next_seed(f"Primary fractal {region.continent}"),
                grid.width,
                grid.height,
                self.config.primary_coarseness,
                octaves=self.config.octaves,
            )
            secondary = HeightField.build(
                stream.next_seed(f"Secondary fractal {region.continent}"),
                grid.width,
                grid.height,
                self.config.secondary_coarseness,
                octaves=self.config.octaves,
            )
            self.fields[f"primary_{region.continent}"] = primary
            self.fields[f"secondary_{region.continent}"] = secondary
            self.carve_continent(grid, region, primary, secondary, east.west)

    def carve_continent(
        self,
        grid: TerrainGrid,
        region: RegionDescriptor,
        primary: HeightField,
        secondary: HeightField,
        divide_col: int,
    ) -> tuple[NDArray[np.bool_], NDArray[np.bool_]]:
        """Run both passes over one region.

        Returns:
            Tuple of (cells raised by pass 1, cells reverted by pass 2).
        """
        raised = self.primary_pass(grid, region, primary, divide_col)
        reverted = self.refine_pass(grid, raised, secondary, divide_col)
        logger.info(
            f"Continent {region.continent}: {int(np.sum(raised)):,} raised, "
            f"{int(np.sum(reverted)):,} reverted"
        )
        return raised, reverted

    def primary_pass(
        self,
        grid: TerrainGrid,
        region: RegionDescriptor,
        field: HeightField,
        divide_col: int,
    ) -> NDArray[np.bool_]:
        """Raise ocean cells of the region whose height clears the water line."""
        _check_shape(field, grid)
        threshold = field.threshold_for_percentile(self.config.water_percent)

        raised = (
            region.mask(grid.width, grid.height)
            & (grid.kinds == OCEAN)
            & (field.values >= threshold)
        )
        grid.kinds[raised] = FLAT
        grid.tag_landmass(raised, east_side_mask(grid.width, grid.height, divide_col))
        return raised

    def refine_pass(
        self,
        grid: TerrainGrid,
        raised: NDArray[np.bool_],
        field: HeightField,
        divide_col: int,
    ) -> NDArray[np.bool_]:
        """Revert raised cells that fall below the stricter water line.

        Only cells raised by the primary pass are considered, so this pass
        can never add land.
        """
        _check_shape(field, grid)
        threshold = field.threshold_for_percentile(
            self.config.water_percent + self.config.refine_offset
        )

        # NaN heights and an undefined threshold both count as below the line
        below = ~(field.values >= threshold)
        reverted = raised & (grid.kinds == FLAT) & below
        grid.kinds[reverted] = OCEAN
        grid.tag_water(reverted, east_side_mask(grid.width, grid.height, divide_col))
        return reverted


def make_classifier(strategy: LandmassStrategy, config: GenerationConfig) -> LandClassifier:
    """Build the classifier for a strategy from the run configuration."""
    if strategy == LandmassStrategy.SHAPE_OVERLAY:
        return ShapeOverlayClassifier(config.shape_overlay)
    if strategy == LandmassStrategy.TWO_PASS:
        return TwoPassClassifier(config.two_pass)
    raise ValueError(f"Unknown landmass strategy: {strategy}")


def choose_strategy(stream: RandomStream) -> LandmassStrategy:
    """Pick a strategy with a single draw from the stream."""
    strategies = list(LandmassStrategy)
    return strategies[stream.get_random_number(len(strategies), "Landmass strategy")]
