"""
Board point geometry: intersection to pixel mapping for diagram rendering.
"""
from typing import Dict, List, Optional, Sequence, Tuple
import logging

from godiagram.core import (
    BoardPt,
    BoardRegion,
    BoundingBox,
    EdgeLabel,
    Point,
    PointNotFoundError,
)
from godiagram.orientation import GeometryProvider, crop_bounding_box

logger = logging.getLogger(__name__)


class BoardPointMapper:
    """
    Maps board intersections to pixel coordinates.

    Everything drawn on an intersection (lines, star points, stones, marks)
    is positioned from this mapping. Also carries the spacing and radius
    of an intersection, and the edge labels when board coordinates are drawn.
    """

    # Each inner group is crossed with itself: (2, 6) -> (2,2), (2,6), (6,2), (6,6)
    STAR_POINT_TEMPLATES: Dict[int, Tuple[Tuple[int, ...], ...]] = {
        9: ((2, 6), (4,)),
        13: ((3, 9), (6,)),
        19: ((3, 9, 15),),
    }

    # Column labels. Go convention leaves out 'I', and 'i' in the lowercase run.
    COORD_LETTERS = "ABCDEFGHJKLMNOPQRSTUVWXYZabcdefghjklmnopqrstuvwxyz"

    def __init__(
            self,
            points: Sequence[BoardPt],
            spacing: float,
            int_bbox: BoundingBox,
            num_intersections: int,
            edge_labels: Optional[Sequence[EdgeLabel]] = None
    ):
        """
        Initialize board point mapper.

        Args:
            points: Rendered intersections
            spacing: Pixels between adjacent intersections
            int_bbox: Source bounding box in intersection space
            num_intersections: Board size (9, 13, 19)
            edge_labels: Coordinate labels around the grid
        """
        if spacing <= 0:
            raise ValueError(f"spacing must be positive, got {spacing}")

        self.points: Tuple[BoardPt, ...] = tuple(points)
        self._cache: Dict[str, BoardPt] = {
            pt.int_pt.to_string(): pt for pt in self.points
        }
        if len(self._cache) != len(self.points):
            raise ValueError("Each intersection may be mapped only once")

        self.spacing = spacing
        self.radius = spacing / 2
        self.int_bbox = int_bbox
        self.num_intersections = num_intersections
        self.edge_labels: Tuple[EdgeLabel, ...] = tuple(edge_labels or ())

        logger.info(
            f"BoardPointMapper initialized: {len(self.points)} points, "
            f"{len(self.edge_labels)} labels, spacing={spacing}, "
            f"size={num_intersections}"
        )

    @classmethod
    def from_bounding_box(
            cls,
            bbox: BoundingBox,
            spacing: float,
            size: int,
            draw_coords: bool = False
    ) -> "BoardPointMapper":
        """
        Build the mapping for an intersection bounding box.

        With draw_coords the grid gets one intersection of margin on every
        side. The margin ring holds the labels (row numbers left and right,
        column letters top and bottom, nothing in the corners) and every
        intersection shifts by one spacing.

        Args:
            bbox: Inclusive bounding box, in intersections
            spacing: Pixels between intersections
            size: Board size
            draw_coords: Whether to reserve a margin for coordinate labels

        Returns:
            BoardPointMapper for the box
        """
        if spacing <= 0:
            raise ValueError(f"spacing must be positive, got {spacing}")

        half = spacing / 2
        offset = 1 if draw_coords else 0
        start_x, start_y = bbox.top_left.x, bbox.top_left.y
        end_x = bbox.bot_right.x + 2 * offset
        end_y = bbox.bot_right.y + 2 * offset

        board_pts: List[BoardPt] = []
        edge_labels: List[EdgeLabel] = []

        for y in range(start_y, end_y + 1):
            for x in range(start_x, end_x + 1):
                coord_pt = Point(half + (x - start_x) * spacing,
                                 half + (y - start_y) * spacing)

                on_vert_edge = x in (start_x, end_x)
                on_horz_edge = y in (start_y, end_y)

                if draw_coords and (on_vert_edge or on_horz_edge):
                    if on_vert_edge and on_horz_edge:
                        continue
                    if on_vert_edge:
                        # 1-based row of the intersection this label sits beside
                        label = str(y - offset + 1)
                    else:
                        label = cls.COORD_LETTERS[x - offset]
                    edge_labels.append(EdgeLabel(label=label, coord_pt=coord_pt))
                else:
                    board_pts.append(BoardPt(
                        int_pt=Point(x - offset, y - offset),
                        coord_pt=coord_pt,
                    ))

        return cls(board_pts, spacing, bbox, size, edge_labels)

    @classmethod
    def from_geometry(
            cls,
            provider: GeometryProvider,
            spacing: float,
            draw_coords: bool = False
    ) -> "BoardPointMapper":
        """Build the mapping from a geometry provider's box and board size."""
        return cls.from_bounding_box(
            provider.bounding_box(), spacing, provider.max_intersections, draw_coords
        )

    @classmethod
    def from_region(
            cls,
            region: BoardRegion,
            size: int,
            spacing: float,
            draw_coords: bool = False
    ) -> "BoardPointMapper":
        """Build the mapping for the crop shown for a board region."""
        return cls.from_bounding_box(
            crop_bounding_box(region, size), spacing, size, draw_coords
        )

    @classmethod
    def from_config(cls, provider: GeometryProvider, config) -> "BoardPointMapper":
        """Build the mapping using spacing / draw_coords from the 'board' section."""
        return cls.from_geometry(
            provider,
            spacing=config.get("board", "spacing", 20),
            draw_coords=bool(config.get("board", "draw_coords", False)),
        )

    @property
    def int_width(self) -> int:
        return self.int_bbox.width

    @property
    def int_height(self) -> int:
        return self.int_bbox.height

    def data(self) -> Tuple[BoardPt, ...]:
        """All board points, in construction order."""
        return self.points

    def has_coord(self, pt: Point) -> bool:
        """Whether an intersection is part of this mapping."""
        return pt.to_string() in self._cache

    def get_coord(self, pt: Point) -> BoardPt:
        """
        Board point for an intersection (0-indexed from the top left).

        Raises:
            PointNotFoundError: If the intersection is not mapped
        """
        try:
            return self._cache[pt.to_string()]
        except KeyError:
            raise PointNotFoundError(f"No board point for {pt}") from None

    def star_points(self) -> List[Point]:
        """
        Star points of the board that are present in this mapping.

        Returns:
            Intersections such as [(3,3), (3,9), ...]; empty for board sizes
            without a star point template
        """
        if self.num_intersections not in self.STAR_POINT_TEMPLATES:
            return []

        out = []
        for group in self.STAR_POINT_TEMPLATES[self.num_intersections]:
            for i in group:
                for j in group:
                    pt = Point(i, j)
                    if self.has_coord(pt):
                        out.append(pt)
        return out
