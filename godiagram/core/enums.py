"""
Enumerations shared across the diagram pipeline.

Rotations and flips are applied when the board is drawn; the underlying
game-record points are only touched by the auto-rotation transform.
"""
from enum import Enum

from .errors import InvalidEnumLiteralError


class Rotation(Enum):
    """Clockwise rotations that map a square Go board onto itself."""
    NO_ROTATION = "NO_ROTATION"
    CLOCKWISE_90 = "CLOCKWISE_90"
    CLOCKWISE_180 = "CLOCKWISE_180"
    CLOCKWISE_270 = "CLOCKWISE_270"

    @classmethod
    def from_string(cls, literal: str) -> "Rotation":
        try:
            return cls(literal)
        except ValueError as e:
            raise InvalidEnumLiteralError(
                f"Invalid rotation literal: {literal!r}"
            ) from e

    def inverse(self) -> "Rotation":
        """Group inverse: 90 and 270 swap, 0 and 180 are self-inverse."""
        if self is Rotation.CLOCKWISE_90:
            return Rotation.CLOCKWISE_270
        if self is Rotation.CLOCKWISE_270:
            return Rotation.CLOCKWISE_90
        return self


class Flip(Enum):
    """Reflections used in place of a rotation when flips are preferred."""
    NO_FLIP = "NO_FLIP"
    VERTICAL = "VERTICAL"  # Over the X axis (y values change)
    HORIZONTAL = "HORIZONTAL"  # Over the Y axis (x values change)


class BoardRegion(Enum):
    """Classification of a cropped board view."""
    ALL = "ALL"
    TOP = "TOP"
    BOTTOM = "BOTTOM"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    TOP_LEFT = "TOP_LEFT"
    TOP_RIGHT = "TOP_RIGHT"
    BOTTOM_LEFT = "BOTTOM_LEFT"
    BOTTOM_RIGHT = "BOTTOM_RIGHT"

    @classmethod
    def from_string(cls, literal: str) -> "BoardRegion":
        try:
            return cls(literal)
        except ValueError as e:
            raise InvalidEnumLiteralError(
                f"Invalid board region literal: {literal!r}"
            ) from e

    @property
    def is_corner(self) -> bool:
        return self in _CORNERS

    @property
    def is_side(self) -> bool:
        return self in _SIDES


_CORNERS = frozenset({
    BoardRegion.TOP_LEFT,
    BoardRegion.TOP_RIGHT,
    BoardRegion.BOTTOM_LEFT,
    BoardRegion.BOTTOM_RIGHT,
})
_SIDES = frozenset({
    BoardRegion.TOP,
    BoardRegion.BOTTOM,
    BoardRegion.LEFT,
    BoardRegion.RIGHT,
})


class Color(Enum):
    """Stone colors."""
    BLACK = 1
    WHITE = -1
    EMPTY = 0

    @classmethod
    def from_string(cls, literal: str) -> "Color":
        try:
            return cls[literal]
        except KeyError as e:
            raise InvalidEnumLiteralError(
                f"Invalid color literal: {literal!r}"
            ) from e

    def opposite(self) -> "Color":
        if self is Color.BLACK:
            return Color.WHITE
        if self is Color.WHITE:
            return Color.BLACK
        return self
