"""Terrain kinds, plot tags and their storage codes."""

from enum import Enum, IntFlag


class TerrainKind(str, Enum):
    """Terrain kinds a grid cell can hold."""

    OCEAN = "ocean"
    COAST = "coast"
    FLAT = "flat"
    HILL = "hill"
    MOUNTAIN = "mountain"

    @property
    def is_water(self) -> bool:
        """Whether this kind counts as water."""
        return self in _WATER_KINDS

    @property
    def code(self) -> int:
        """Compact uint8 storage code."""
        return _KIND_CODES[self]

    @property
    def symbol(self) -> str:
        """Single character used in text dumps."""
        return _KIND_SYMBOLS[self]

    @classmethod
    def from_code(cls, code: int) -> "TerrainKind":
        """Convert a storage code back to a TerrainKind.

        Raises:
            ValueError: If the code is unknown.
        """
        try:
            return _CODE_KINDS[int(code)]
        except KeyError:
            raise ValueError(f"Unknown terrain code: {code}") from None


class PlotTag(IntFlag):
    """Auxiliary per-cell classification bits."""

    NONE = 0
    LANDMASS = 1
    WATER = 2
    EAST_LANDMASS = 4
    WEST_LANDMASS = 8
    EAST_WATER = 16
    WEST_WATER = 32


LAND_TAGS = PlotTag.LANDMASS | PlotTag.EAST_LANDMASS | PlotTag.WEST_LANDMASS
WATER_TAGS = PlotTag.WATER | PlotTag.EAST_WATER | PlotTag.WEST_WATER

_WATER_KINDS = frozenset({TerrainKind.OCEAN, TerrainKind.COAST})

_KIND_CODES = {
    TerrainKind.OCEAN: 0,
    TerrainKind.COAST: 1,
    TerrainKind.FLAT: 2,
    TerrainKind.HILL: 3,
    TerrainKind.MOUNTAIN: 4,
}
_CODE_KINDS = {code: kind for kind, code in _KIND_CODES.items()}

_KIND_SYMBOLS = {
    TerrainKind.OCEAN: "~",
    TerrainKind.COAST: "-",
    TerrainKind.FLAT: "F",
    TerrainKind.HILL: "H",
    TerrainKind.MOUNTAIN: "M",
}

OCEAN = _KIND_CODES[TerrainKind.OCEAN]
COAST = _KIND_CODES[TerrainKind.COAST]
FLAT = _KIND_CODES[TerrainKind.FLAT]
WATER_CODES = (OCEAN, COAST)
