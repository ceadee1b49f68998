"""
Capabilities the orientation code needs from the game record.

The resolver never touches concrete property storage; anything that can
report its geometry and produce transformed copies of itself will do.
"""
from abc import ABC, abstractmethod

from godiagram.core import BoundingBox, Rotation


class GeometryProvider(ABC):
    """Something with an intersection bounding box on a board of known size."""

    @property
    @abstractmethod
    def max_intersections(self) -> int:
        """Board size (9, 13, 19, ...)."""
        pass

    @abstractmethod
    def bounding_box(self) -> BoundingBox:
        """Intersection-space box around the interesting points."""
        pass


class Rotatable(ABC):
    """Point-valued data that can be re-oriented as a whole."""

    @abstractmethod
    def rotate(self, size: int, rotation: Rotation) -> "Rotatable":
        """Return a copy with every point rotated."""
        pass

    @abstractmethod
    def flip_vert(self, size: int) -> "Rotatable":
        """Return a copy with every point flipped over the X axis."""
        pass

    @abstractmethod
    def flip_horz(self, size: int) -> "Rotatable":
        """Return a copy with every point flipped over the Y axis."""
        pass
