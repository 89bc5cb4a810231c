"""Map size configuration loading from TOML files."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

from .exceptions import UnknownMapSizeError

DEFAULT_MAP_SIZES_PATH = Path(__file__).parent / "map_sizes.toml"


class MapSizeInfo(BaseModel, frozen=True):
    """Settings for one map size."""

    key: str
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    players_landmass1: int = Field(ge=0)
    players_landmass2: int = Field(ge=0)
    num_natural_wonders: int = Field(default=0, ge=0)
    lake_generation_frequency: int = Field(default=0, ge=0)
    start_sector_rows: int = Field(ge=1)
    start_sector_cols: int = Field(ge=1)


def load_map_sizes(path: Path = DEFAULT_MAP_SIZES_PATH) -> dict[str, MapSizeInfo]:
    """Load a map size table from a TOML file.

    Each top-level table is one map size keyed by its name.

    Args:
        path: Path to the TOML file.

    Returns:
        Mapping of map size key to MapSizeInfo.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If an entry is missing fields.
    """
    with open(path, "rb") as f:
        data = tomllib.load(f)
    return {
        key: MapSizeInfo.model_validate({"key": key, **values})
        for key, values in data.items()
    }


def lookup_map_size(sizes: dict[str, MapSizeInfo], key: str) -> MapSizeInfo:
    """Find the settings for a map size.

    Raises:
        UnknownMapSizeError: If no entry exists for the key.
    """
    try:
        return sizes[key]
    except KeyError:
        raise UnknownMapSizeError(
            f"Map size '{key}' not found. Available sizes: {sorted(sizes)}"
        ) from None
