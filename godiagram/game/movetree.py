"""
Minimal immutable game record holding point-valued SGF properties.

Only the data the orientation code needs is modeled: which points each node
refers to. Parsing SGF text and game rules live elsewhere.
"""
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Tuple
import logging

from godiagram.core import BoundingBox, Point, Rotation, point_arr_from_sgf_prop
from godiagram.orientation import GeometryProvider, Rotatable

logger = logging.getLogger(__name__)

# SGF properties whose values are points (or point rectangles)
POINT_PROPERTIES = frozenset({
    "B", "W",  # Moves
    "AB", "AW", "AE",  # Setup
    "TR", "SQ", "CR", "MA", "SL",  # Marks
    "DD", "TB", "TW", "VW",  # Dimming, territory, view
})


@dataclass(frozen=True)
class PointProperties(Rotatable):
    """
    Point-valued properties of one node, keyed by SGF property name.
    """
    values: Mapping[str, Tuple[Point, ...]] = field(default_factory=dict)

    @classmethod
    def from_sgf_values(cls, raw: Mapping[str, Iterable[str]]) -> "PointProperties":
        """
        Build from raw SGF property values, e.g. {"AB": ["pd", "aa:cc"]}.

        Non-point properties are skipped. Empty values (passes) carry no point.
        """
        values: Dict[str, Tuple[Point, ...]] = {}
        for prop, data in raw.items():
            if prop not in POINT_PROPERTIES:
                logger.debug(f"Skipping non-point property {prop}")
                continue
            pts: List[Point] = []
            for item in data:
                if item:
                    pts.extend(point_arr_from_sgf_prop(item))
            values[prop] = tuple(pts)
        return cls(values)

    def get(self, prop: str) -> Tuple[Point, ...]:
        return tuple(self.values.get(prop, ()))

    def all_points(self) -> List[Point]:
        return [pt for pts in self.values.values() for pt in pts]

    def map_points(self, fn: Callable[[Point], Point]) -> "PointProperties":
        return PointProperties({
            prop: tuple(fn(pt) for pt in pts) for prop, pts in self.values.items()
        })

    def rotate(self, size: int, rotation: Rotation) -> "PointProperties":
        return self.map_points(lambda pt: pt.rotate(size, rotation))

    def flip_vert(self, size: int) -> "PointProperties":
        return self.map_points(lambda pt: pt.flip_vert(size))

    def flip_horz(self, size: int) -> "PointProperties":
        return self.map_points(lambda pt: pt.flip_horz(size))


@dataclass(frozen=True)
class MoveNode:
    """One node of the game tree. children[0] is the main line."""
    properties: PointProperties = field(default_factory=PointProperties)
    children: Tuple["MoveNode", ...] = ()

    def transform(
            self,
            fn: Callable[[PointProperties], PointProperties]
    ) -> "MoveNode":
        """Copy of this subtree with fn applied to every node's properties."""
        return MoveNode(
            properties=fn(self.properties),
            children=tuple(child.transform(fn) for child in self.children),
        )

    def walk(self) -> Iterator["MoveNode"]:
        """Pre-order traversal of the subtree."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


@dataclass(frozen=True)
class MoveTree(GeometryProvider, Rotatable):
    """
    Game record: a root node on a board of a given size.

    Transforms return new trees; the original is never modified.
    """
    root: MoveNode
    size: int = 19

    @property
    def max_intersections(self) -> int:
        return self.size

    def nodes(self) -> Iterator[MoveNode]:
        return self.root.walk()

    def main_line(self) -> List[MoveNode]:
        line = [self.root]
        while line[-1].children:
            line.append(line[-1].children[0])
        return line

    def all_points(self) -> List[Point]:
        return [pt for node in self.nodes() for pt in node.properties.all_points()]

    def bounding_box(self) -> BoundingBox:
        """Box around every point in the record; the full board when empty."""
        pts = self.all_points()
        if not pts:
            return BoundingBox.full_board(self.size)
        return BoundingBox.from_points(pts)

    def rotate(self, size: int, rotation: Rotation) -> "MoveTree":
        return MoveTree(self.root.transform(lambda p: p.rotate(size, rotation)), self.size)

    def flip_vert(self, size: int) -> "MoveTree":
        return MoveTree(self.root.transform(lambda p: p.flip_vert(size)), self.size)

    def flip_horz(self, size: int) -> "MoveTree":
        return MoveTree(self.root.transform(lambda p: p.flip_horz(size)), self.size)
