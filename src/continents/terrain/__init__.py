"""Two-continent landmass generation.

Builds fractal height fields, classifies each continent's cells as land
or ocean (optionally carving a smiley overlay), and expands a coast band
around the result.
"""

from .config import (
    CoastConfig,
    GenerationConfig,
    LandmassStrategy,
    ShapeOverlayConfig,
    TwoPassConfig,
)
from .fields import HeightField
from .generator import (
    GenerationResult,
    generate_and_save_map,
    generate_map,
)
from .grid import TerrainGrid
from .landmass import LandClassifier, ShapeOverlayClassifier, TwoPassClassifier
from .persistence import load_grid, save_grid
from .regions import (
    RegionDescriptor,
    RegionLayout,
    compute_regions,
    forced_ocean,
    forced_ocean_mask,
)
from .rng import RandomStream
from .validation import ValidationResult, validate_terrain

__all__ = [
    "CoastConfig",
    "GenerationConfig",
    "GenerationResult",
    "HeightField",
    "LandClassifier",
    "LandmassStrategy",
    "RandomStream",
    "RegionDescriptor",
    "RegionLayout",
    "ShapeOverlayClassifier",
    "ShapeOverlayConfig",
    "TerrainGrid",
    "TwoPassClassifier",
    "TwoPassConfig",
    "ValidationResult",
    "compute_regions",
    "forced_ocean",
    "forced_ocean_mask",
    "generate_and_save_map",
    "generate_map",
    "load_grid",
    "save_grid",
    "validate_terrain",
]
