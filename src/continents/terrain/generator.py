"""Main map generation orchestration."""

import logging
from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from ..exceptions import TerrainValidationError
from ..map_sizes import MapSizeInfo, load_map_sizes, lookup_map_size
from ..terrain_types import TerrainKind
from .coastal import adjust_ocean_tags, expand_coasts
from .config import GenerationConfig, LandmassStrategy
from .grid import TerrainGrid
from .landmass import choose_strategy, make_classifier
from .persistence import save_grid
from .regions import RegionDescriptor, compute_regions, forced_ocean_mask
from .rng import RandomStream
from .sectors import StartSectors, choose_start_sectors
from .validation import validate_terrain

logger = logging.getLogger(__name__)


class GenerationResult:
    """Result of map generation, handed to downstream map stages."""

    def __init__(
        self,
        grid: TerrainGrid,
        west: RegionDescriptor,
        east: RegionDescriptor,
        strategy: LandmassStrategy,
        map_info: MapSizeInfo,
        players_west: int,
        players_east: int,
        sectors: StartSectors,
        seed: int,
    ):
        self.grid = grid
        self.west = west
        self.east = east
        self.strategy = strategy
        self.map_info = map_info
        self.players_west = players_west
        self.players_east = players_east
        self.sectors = sectors
        self.seed = seed

    @property
    def regions(self) -> tuple[RegionDescriptor, RegionDescriptor]:
        return self.west, self.east

    def metadata(self) -> dict:
        """JSON-serializable summary of the run."""
        return {
            "seed": self.seed,
            "map_size": self.map_info.key,
            "strategy": self.strategy.value,
            "players_west": self.players_west,
            "players_east": self.players_east,
            "num_natural_wonders": self.map_info.num_natural_wonders,
            "lake_generation_frequency": self.map_info.lake_generation_frequency,
        }


def generate_map(
    config: GenerationConfig,
    map_sizes: dict[str, MapSizeInfo] | None = None,
) -> GenerationResult:
    """Generate a two-continent map from configuration.

    Args:
        config: Map generation configuration.
        map_sizes: Map size table (None = bundled table).

    Returns:
        GenerationResult with the finished grid.

    Raises:
        UnknownMapSizeError: If the map size has no entry. Raised before
            any grid is created.
        TerrainValidationError: If the finished grid breaks an invariant.
    """
    if map_sizes is None:
        map_sizes = load_map_sizes()
    map_info = lookup_map_size(map_sizes, config.map_size)

    width = config.width or map_info.width
    height = config.height or map_info.height
    stream = RandomStream(config.seed)

    logger.info(f"Generating {width}x{height} map ({map_info.key}) with seed {config.seed}")

    strategy = config.strategy or choose_strategy(stream)
    classifier = make_classifier(strategy, config)
    logger.info(f"Landmass strategy: {strategy.value}")

    west, east = compute_regions(
        width,
        height,
        config.ocean_columns,
        config.polar_rows,
        classifier.min_gap,
        classifier.layout,
    )
    logger.info(
        f"Continents: west x[{west.west}, {west.east}) east x[{east.west}, {east.east}) "
        f"y[{west.south}, {west.north})"
    )

    players_west = map_info.players_landmass1
    players_east = map_info.players_landmass2
    if stream.get_random_number(2, "East or West") == 1:
        players_west, players_east = players_east, players_west

    sectors = choose_start_sectors(
        players_west,
        players_east,
        map_info.start_sector_rows,
        map_info.start_sector_cols,
        stream,
    )

    # Stage A: Landmasses
    logger.info("Stage A: Classifying landmasses...")
    grid = TerrainGrid(width, height)
    classifier.classify(grid, west, east, stream, sectors)

    # Stage B: Coasts
    logger.info("Stage B: Expanding coasts...")
    coast_config = (
        config.shape_overlay.coast
        if strategy == LandmassStrategy.SHAPE_OVERLAY
        else config.two_pass.coast
    )
    forced = forced_ocean_mask(width, height, west, east)
    coast = expand_coasts(grid, stream, coast_config, forced)
    adjust_ocean_tags(grid, west, east, players_west > players_east)

    # Stage C: Validation
    if config.validate_output:
        logger.info("Stage C: Validating terrain...")
        validation = validate_terrain(grid, west, east, classifier.min_gap)
        if not validation.passed:
            raise TerrainValidationError(validation.errors)

    _log_terrain_stats(grid)

    if config.dump_path:
        dump_terrain(grid, Path(config.dump_path))

    if config.debug_output_dir:
        _dump_debug_images(
            Path(config.debug_output_dir),
            land=grid.land_mask(),
            coast=coast,
            forced_ocean=forced,
            terrain=grid.kinds,
            **{name: field.values for name, field in classifier.fields.items()},
        )

    return GenerationResult(
        grid=grid,
        west=west,
        east=east,
        strategy=strategy,
        map_info=map_info,
        players_west=players_west,
        players_east=players_east,
        sectors=sectors,
        seed=config.seed,
    )


def generate_and_save_map(
    config: GenerationConfig,
    save_path: Path,
    map_sizes: dict[str, MapSizeInfo] | None = None,
) -> GenerationResult:
    """Generate a map and save it to disk."""
    result = generate_map(config, map_sizes)

    save_path.parent.mkdir(parents=True, exist_ok=True)
    save_grid(save_path, result.grid, result.regions, result.metadata())

    return result


def dump_terrain(grid: TerrainGrid, path: Path) -> None:
    """Write the grid's text rendering to a file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(grid.to_text(), encoding="utf-8")
    logger.info(f"Terrain dump written to {path}")


def _log_terrain_stats(grid: TerrainGrid) -> None:
    """Log terrain generation statistics."""
    total = grid.kinds.size

    logger.info(f"Terrain stats ({total:,} tiles):")
    for kind in TerrainKind:
        count = grid.count(kind)
        if count:
            logger.info(f"  {kind.value}: {count:,} ({count / total * 100:.1f}%)")

    land = int(np.sum(grid.land_mask()))
    logger.info(f"  land fraction: {land / total:.2%}")


def _dump_debug_images(output_dir: Path, **arrays: NDArray) -> None:
    """Save arrays as images for debugging.

    Args:
        output_dir: Directory to save images.
        **arrays: Named (height, width) arrays to save, row 0 at the bottom.
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        logger.warning("matplotlib not available, skipping debug images")
        return

    output_dir.mkdir(parents=True, exist_ok=True)

    for name, arr in arrays.items():
        fig, ax = plt.subplots(figsize=(10, 10 * arr.shape[0] / max(arr.shape[1], 1)))

        if arr.dtype == bool:
            ax.imshow(arr, cmap="binary", origin="lower")
        elif arr.dtype == np.uint8:
            ax.imshow(arr, cmap="tab10", origin="lower", vmin=0, vmax=9)
        else:
            ax.imshow(arr, cmap="terrain", origin="lower")

        ax.set_title(name)
        ax.axis("off")

        fig.savefig(output_dir / f"{name}.png", dpi=150, bbox_inches="tight")
        plt.close(fig)

    logger.info(f"Debug images saved to {output_dir}")
