"""Two-continent world grid synthesis for strategy game maps."""

from .exceptions import (
    MapGenerationError,
    TerrainValidationError,
    UnknownMapSizeError,
)
from .map_sizes import MapSizeInfo, load_map_sizes, lookup_map_size
from .terrain_types import PlotTag, TerrainKind

__all__ = [
    # Types
    "TerrainKind",
    "PlotTag",
    # Map sizes
    "MapSizeInfo",
    "load_map_sizes",
    "lookup_map_size",
    # Exceptions
    "MapGenerationError",
    "UnknownMapSizeError",
    "TerrainValidationError",
]
