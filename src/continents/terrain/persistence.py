"""Map persistence: save and load generated grids."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import numpy as np

from .grid import TerrainGrid
from .regions import RegionDescriptor

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def save_grid(
    path: Path,
    grid: TerrainGrid,
    regions: tuple[RegionDescriptor, RegionDescriptor],
    metadata: dict | None = None,
) -> None:
    """Save a grid and its continent regions to disk.

    Uses numpy's compressed .npz format.

    Args:
        path: Output path (should end with .npz).
        grid: Generated grid.
        regions: (west, east) continent regions.
        metadata: Extra JSON-serializable run details.
    """
    header = {
        "version": FORMAT_VERSION,
        "width": grid.width,
        "height": grid.height,
        "regions": [region.model_dump() for region in regions],
        "saved_at": datetime.now(timezone.utc).isoformat(),
        **(metadata or {}),
    }

    np.savez_compressed(
        path,
        kinds=grid.kinds,
        tags=grid.tags,
        metadata=np.frombuffer(json.dumps(header).encode("utf-8"), dtype=np.uint8),
    )

    logger.info(f"Saved {grid.width}x{grid.height} map to {path}")


def load_grid(
    path: Path,
) -> tuple[TerrainGrid, tuple[RegionDescriptor, RegionDescriptor], dict]:
    """Load a grid saved by save_grid.

    Returns:
        Tuple of (grid, (west, east) regions, metadata dict).

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValueError: If file format is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Map file not found: {path}")

    with np.load(path) as data:
        if "kinds" not in data:
            raise ValueError("Invalid map file: missing 'kinds' array")
        kinds = data["kinds"]
        tags = data["tags"] if "tags" in data else None
        metadata = (
            json.loads(data["metadata"].tobytes().decode("utf-8"))
            if "metadata" in data
            else {}
        )

    if "regions" not in metadata or len(metadata["regions"]) != 2:
        raise ValueError("Invalid map file: missing continent regions")
    west, east = (RegionDescriptor.model_validate(r) for r in metadata["regions"])

    grid = TerrainGrid.from_arrays(kinds, tags)
    logger.info(f"Loaded map from {path}: {grid.width}x{grid.height}")
    return grid, (west, east), metadata
