"""
Board region classification for cropped diagrams.
"""
import math
import logging

from godiagram.core import BoardRegion, BoundingBox, Point
from .interfaces import GeometryProvider

logger = logging.getLogger(__name__)

# Lines a crop extends past the midline, so the diagram shows some context
CROP_EXTENT_LARGE = 2  # 13x13 and up
CROP_EXTENT_SMALL = 1


def classify_bounding_box(bbox: BoundingBox, size: int) -> BoardRegion:
    """
    Classify a bounding box as a corner, side, or the whole board.

    The middle row / column of odd-sized boards belongs to both halves.

    Args:
        bbox: Intersection-space bounding box
        size: Board size

    Returns:
        Smallest region that contains the box
    """
    mid = (size - 1) / 2
    left = bbox.bot_right.x <= mid
    right = bbox.top_left.x >= mid
    top = bbox.bot_right.y <= mid
    bottom = bbox.top_left.y >= mid

    if top and left:
        return BoardRegion.TOP_LEFT
    if top and right:
        return BoardRegion.TOP_RIGHT
    if bottom and left:
        return BoardRegion.BOTTOM_LEFT
    if bottom and right:
        return BoardRegion.BOTTOM_RIGHT
    if top:
        return BoardRegion.TOP
    if bottom:
        return BoardRegion.BOTTOM
    if left:
        return BoardRegion.LEFT
    if right:
        return BoardRegion.RIGHT
    return BoardRegion.ALL


def get_quad_crop(provider: GeometryProvider) -> BoardRegion:
    """Region for a geometry provider's bounding box."""
    region = classify_bounding_box(provider.bounding_box(), provider.max_intersections)
    logger.debug(f"Quad crop: {region.value}")
    return region


def crop_bounding_box(region: BoardRegion, size: int) -> BoundingBox:
    """
    Intersection box shown for a region.

    Args:
        region: Region to display
        size: Board size

    Returns:
        Inclusive bounding box, extending a little past the midlines
    """
    extent = CROP_EXTENT_LARGE if size >= 13 else CROP_EXTENT_SMALL
    half = int(math.ceil((size - 1) / 2))
    last = size - 1

    top, left, bot, right = 0, 0, last, last
    if region in (BoardRegion.TOP, BoardRegion.TOP_LEFT, BoardRegion.TOP_RIGHT):
        bot = half + extent
    if region in (BoardRegion.BOTTOM, BoardRegion.BOTTOM_LEFT, BoardRegion.BOTTOM_RIGHT):
        top = half - extent
    if region in (BoardRegion.LEFT, BoardRegion.TOP_LEFT, BoardRegion.BOTTOM_LEFT):
        right = half + extent
    if region in (BoardRegion.RIGHT, BoardRegion.TOP_RIGHT, BoardRegion.BOTTOM_RIGHT):
        left = half - extent

    return BoundingBox(Point(max(left, 0), max(top, 0)),
                       Point(min(right, last), min(bot, last)))
