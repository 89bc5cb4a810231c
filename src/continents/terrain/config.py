"""Map generation configuration models."""

from enum import Enum

from pydantic import BaseModel, Field

from .regions import RegionLayout


class LandmassStrategy(str, Enum):
    """Closed set of landmass generation strategies."""

    SHAPE_OVERLAY = "shape_overlay"
    TWO_PASS = "two_pass"


class CoastConfig(BaseModel):
    """Coast expansion draw parameters.

    A candidate ocean cell becomes coast when its draw in
    [0, draw_range) is one of accept_values.
    """

    draw_range: int = Field(default=3, ge=1, description="Number of draw outcomes")
    accept_values: frozenset[int] = Field(
        default=frozenset({0}), description="Draw outcomes that create coast"
    )

    @property
    def probability(self) -> float:
        hits = sum(1 for value in self.accept_values if 0 <= value < self.draw_range)
        return hits / self.draw_range


class ShapeOverlayConfig(BaseModel):
    """Single-pass classifier with the smiley overlay."""

    coarseness: int = Field(default=2, ge=0, description="Fractal size of the landmass field")
    octaves: int = Field(default=4, ge=1, description="fBm octaves")
    water_percent: float = Field(
        default=55.0, ge=0, le=100, description="Percentile used as water height"
    )
    cutoff: float = Field(
        default=0.9, description="Fraction of water height a cell must reach to be land"
    )
    fractal_weight: float = Field(default=0.8, description="Weight of raw fractal height")
    center_weight: float = Field(
        default=0.4, description="Weight of the distance-to-center bonus"
    )
    center_exponent: float = Field(default=1.0, description="Exponent on the center bonus")
    start_sector_weight: float = Field(
        default=0.5, description="Bonus (times water height) inside claimed start sectors"
    )
    sector_inner_pct: float = Field(
        default=33.0, description="No sector bonus within this % of the center distance"
    )
    sector_half_bonus_pct: float = Field(
        default=67.0, description="Sector bonus is halved within this % of the center distance; full bonus beyond it"
    )
    shape_enabled: bool = Field(default=True, description="Carve the smiley features")
    min_gap: int = Field(default=12, ge=0, description="Columns each continent keeps from the midline")
    layout: RegionLayout = Field(default=RegionLayout.MIRRORED)
    coast: CoastConfig = Field(
        default_factory=lambda: CoastConfig(draw_range=2, accept_values=frozenset({0}))
    )


class TwoPassConfig(BaseModel):
    """Two-pass classifier: broad land pass, then coastline refinement."""

    primary_coarseness: int = Field(default=3, ge=0, description="Fractal size of pass 1")
    secondary_coarseness: int = Field(default=4, ge=0, description="Fractal size of pass 2")
    octaves: int = Field(default=4, ge=1, description="fBm octaves")
    water_percent: float = Field(
        default=20.0, ge=0, le=100, description="Water percentile for pass 1"
    )
    refine_offset: float = Field(
        default=10.0, ge=0, description="Extra water percentile for pass 2"
    )
    min_gap: int = Field(default=8, ge=0, description="Width of the central ocean band")
    layout: RegionLayout = Field(default=RegionLayout.CENTERED)
    coast: CoastConfig = Field(default_factory=CoastConfig)


class GenerationConfig(BaseModel):
    """Complete map generation configuration."""

    seed: int = Field(default=42, ge=0, description="Seed for the random stream")
    map_size: str = Field(default="MAPSIZE_STANDARD", description="Map size key")
    width: int | None = Field(default=None, gt=0, description="Override map size width")
    height: int | None = Field(default=None, gt=0, description="Override map size height")

    strategy: LandmassStrategy | None = Field(
        default=None, description="Landmass strategy (None = drawn from the stream)"
    )
    ocean_columns: int = Field(default=4, ge=0, description="Ocean columns at each side edge")
    polar_rows: int = Field(default=2, ge=0, description="Water rows at top and bottom")

    shape_overlay: ShapeOverlayConfig = Field(default_factory=ShapeOverlayConfig)
    two_pass: TwoPassConfig = Field(default_factory=TwoPassConfig)

    validate_output: bool = Field(default=True, description="Check invariants after generation")
    dump_path: str | None = Field(
        default=None, description="Write a text dump of the grid here (None = disabled)"
    )
    debug_output_dir: str | None = Field(
        default=None, description="Directory for debug images (None = disabled)"
    )
