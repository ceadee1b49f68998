"""
Core data types for the Go diagram pipeline.
Defines the point algebra and the geometry records shared between modules.
"""
from dataclasses import dataclass
from string import ascii_lowercase, ascii_uppercase
from typing import Iterable, List, Optional, Union
import numpy as np

from .bounds import out_bounds
from .enums import Rotation
from .errors import (
    InvalidCoordLengthError,
    InvalidRectangleError,
    MissingSizeError,
    OutOfBoundsRotationError,
    ParseError,
)

Number = Union[int, float]

# SGF coordinates index from the upper left:
#    aa ba ca ...
#    ab bb
#    ..
# Lower case covers 0-25 (the usual board sizes), upper case extends to 51.
SGF_LETTERS = ascii_lowercase + ascii_uppercase

# Clockwise rotation matrices, applied in normalized (y-up) space
ROTATION_MATRICES = {
    Rotation.CLOCKWISE_90: np.array([[0, 1], [-1, 0]]),
    Rotation.CLOCKWISE_180: np.array([[-1, 0], [0, -1]]),
    Rotation.CLOCKWISE_270: np.array([[0, -1], [1, 0]]),
}


def _exact(value: Number) -> Number:
    """Collapse integral floats to int so string keys stay canonical."""
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return int(value)
    if isinstance(value, np.integer):
        return int(value)
    return value


def _midpoint(size: Optional[int]) -> Number:
    if not size:
        raise MissingSizeError(f"The board size must be defined. Was: {size}")
    return _exact((size - 1) / 2)


def coord_to_string(x: Number, y: Number) -> str:
    """Point string for a coordinate pair, e.g. '12,5'."""
    return f"{x},{y}"


@dataclass(frozen=True)
class Point:
    """
    Immutable integer intersection (or pixel) coordinate.

    Every transform returns a new Point. Two points are the same cache
    entry iff their string keys are equal.
    """
    x: Number
    y: Number

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        """String key, e.g. '12,3'."""
        return coord_to_string(self.x, self.y)

    @classmethod
    def from_string(cls, text: str) -> "Point":
        """Parse a point string of the form 'x,y'."""
        try:
            parts = text.split(",")
            if len(parts) != 2:
                raise ValueError(f"expected two components, got {len(parts)}")
            return cls(int(parts[0]), int(parts[1]))
        except (AttributeError, ValueError) as e:
            raise ParseError(f"Couldn't parse a point from: {text!r}") from e

    def to_sgf_coord(self) -> str:
        """SGF coordinate, e.g. 'ab' for (0, 1)."""
        limit = len(SGF_LETTERS)
        if out_bounds(self.x, limit) or out_bounds(self.y, limit):
            raise ParseError(f"Point {self} has no SGF coordinate")
        return SGF_LETTERS[self.x] + SGF_LETTERS[self.y]

    @classmethod
    def from_sgf_coord(cls, text: str) -> "Point":
        """Point from an SGF coordinate such as 'mc'."""
        if len(text) != 2:
            raise InvalidCoordLengthError(
                f"Unknown SGF coord length {len(text)} for: {text!r}"
            )
        x, y = SGF_LETTERS.find(text[0]), SGF_LETTERS.find(text[1])
        if x < 0 or y < 0:
            raise ParseError(f"Invalid SGF coordinate: {text!r}")
        return cls(x, y)

    def translate(self, dx: Number, dy: Number) -> "Point":
        return Point(_exact(self.x + dx), _exact(self.y + dy))

    def normalize(self, size: int) -> "Point":
        """
        Move (0, 0) to the center of the board, with y pointing up.

        Args:
            size: Board size, usually 9, 13 or 19

        Raises:
            MissingSizeError: If size is falsy
        """
        mid = _midpoint(size)
        return Point(_exact(self.x - mid), _exact(mid - self.y))

    def denormalize(self, size: int) -> "Point":
        """Inverse of normalize: (0, 0) back in the top left."""
        mid = _midpoint(size)
        return Point(_exact(mid + self.x), _exact(mid - self.y))

    def rotate(self, max_intersections: int, rotation: Optional[Rotation]) -> "Point":
        """
        Rotate the point clockwise about the board center.

        Args:
            max_intersections: Board size, usually 9, 13 or 19
            rotation: Rotation to apply

        Returns:
            A new rotated point, or this point for NO_ROTATION / a negative size

        Raises:
            MissingSizeError: If max_intersections is 0 or None
            OutOfBoundsRotationError: If either coordinate is off the board
        """
        if rotation is None or rotation is Rotation.NO_ROTATION:
            return self
        if not max_intersections:
            raise MissingSizeError(
                f"Rotating {self} requires a board size, got {max_intersections!r}"
            )
        if max_intersections < 0:
            return self

        if (out_bounds(self.x, max_intersections)
                or out_bounds(self.y, max_intersections)):
            raise OutOfBoundsRotationError(
                f"Rotating a point outside the bounds: {self} "
                f"(size {max_intersections})"
            )

        normalized = self.normalize(max_intersections)
        rotated = ROTATION_MATRICES[rotation] @ np.array([normalized.x, normalized.y])
        rx, ry = rotated.tolist()
        return Point(_exact(rx), _exact(ry)).denormalize(max_intersections)

    def antirotate(self, max_intersections: int, rotation: Optional[Rotation]) -> "Point":
        """Inverse of rotate."""
        if rotation is None:
            return self
        return self.rotate(max_intersections, rotation.inverse())

    def flip_vert(self, size: int) -> "Point":
        """Flip over the X axis (y values change)."""
        n = self.normalize(size)
        return Point(n.x, -n.y).denormalize(size)

    def flip_horz(self, size: int) -> "Point":
        """Flip over the Y axis (x values change)."""
        n = self.normalize(size)
        return Point(-n.x, n.y).denormalize(size)


def point_arr_from_sgf_prop(text: str) -> List[Point]:
    """
    Expand SGF point data into a list of points.

    Handles single points ([ab]) and point rectangles ([aa:cc]) uniformly.
    Rectangles expand row-major from top-left to bottom-right, inclusive.

    Raises:
        InvalidRectangleError: Malformed data or inverted rectangle corners
    """
    if len(text) == 2:
        return [Point.from_sgf_coord(text)]

    parts = text.split(":")
    if len(parts) != 2:
        raise InvalidRectangleError(
            "Expected two points (TopLeft:BottomRight) for point "
            f"rectangle. Instead found: {text!r}"
        )

    tl = Point.from_sgf_coord(parts[0])
    br = Point.from_sgf_coord(parts[1])
    if br.x < tl.x or br.y < tl.y:
        raise InvalidRectangleError(f"Invalid point rectangle: tl: {tl}, br: {br}")

    return [
        Point(x, y)
        for y in range(tl.y, br.y + 1)
        for x in range(tl.x, br.x + 1)
    ]


@dataclass(frozen=True)
class BoundingBox:
    """
    Inclusive rectangle in intersection space.
    """
    top_left: Point
    bot_right: Point

    def __post_init__(self):
        if (self.bot_right.x < self.top_left.x
                or self.bot_right.y < self.top_left.y):
            raise InvalidRectangleError(
                f"Bounding box corners are inverted: {self.top_left} / {self.bot_right}"
            )

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "BoundingBox":
        pts = list(points)
        if not pts:
            raise ValueError("Cannot build a bounding box from zero points")
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return cls(Point(min(xs), min(ys)), Point(max(xs), max(ys)))

    @classmethod
    def full_board(cls, size: int) -> "BoundingBox":
        return cls(Point(0, 0), Point(size - 1, size - 1))

    @property
    def width(self) -> int:
        """Number of columns covered (inclusive)."""
        return self.bot_right.x - self.top_left.x + 1

    @property
    def height(self) -> int:
        """Number of rows covered (inclusive)."""
        return self.bot_right.y - self.top_left.y + 1

    def contains(self, pt: Point) -> bool:
        return (self.top_left.x <= pt.x <= self.bot_right.x
                and self.top_left.y <= pt.y <= self.bot_right.y)

    def expand(self, margin: int) -> "BoundingBox":
        return BoundingBox(
            self.top_left.translate(-margin, -margin),
            self.bot_right.translate(margin, margin),
        )

    def points(self) -> List[Point]:
        """All points in the box, row-major."""
        return [
            Point(x, y)
            for y in range(self.top_left.y, self.bot_right.y + 1)
            for x in range(self.top_left.x, self.bot_right.x + 1)
        ]


@dataclass(frozen=True)
class BoardPt:
    """
    One rendered intersection.
    """
    int_pt: Point  # Intersection, 0-indexed from the top left
    coord_pt: Point  # Pixel position


@dataclass(frozen=True)
class EdgeLabel:
    """
    A coordinate label drawn outside the intersection grid.
    """
    label: str
    coord_pt: Point  # Pixel position
