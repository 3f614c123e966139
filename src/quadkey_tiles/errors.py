from __future__ import annotations


class QuadKeyTilesError(ValueError):
    """Base error for tile/quadkey conversions."""


class LevelOfDetailError(QuadKeyTilesError):
    """Raised when a level of detail falls outside the supported range."""

    def __init__(self, level: int, *, min_level: int, max_level: int) -> None:
        self.level = level
        self.min_level = min_level
        self.max_level = max_level
        super().__init__(
            f"Invalid level of detail: {level!r}; expected {min_level}..{max_level}"
        )


class InvalidQuadKeyError(QuadKeyTilesError):
    """Raised when a quadkey contains a character outside 0-3."""

    def __init__(self, quad_key: str, *, character: str, position: int) -> None:
        self.quad_key = quad_key
        self.character = character
        self.position = position
        super().__init__(
            f"Invalid quadkey {quad_key!r}: unexpected character {character!r} "
            f"at position {position}"
        )
