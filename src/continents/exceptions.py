"""Custom exceptions for map generation."""


class MapGenerationError(Exception):
    """Base exception for map generation errors."""

    pass


class UnknownMapSizeError(MapGenerationError, KeyError):
    """Raised when a map size key has no configuration entry."""

    pass


class TerrainValidationError(MapGenerationError):
    """Raised when a generated grid breaks a terrain invariant."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(
            f"Terrain validation failed with {len(errors)} errors: "
            + "; ".join(errors)
        )
