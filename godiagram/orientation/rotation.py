"""
Canonical orientation for cropped diagrams.

Problems are usually published with the action in one preferred corner (top
right by default) or side (top). Given the region a crop covers, these
helpers work out which rotation, or optionally which reflection, moves it
there, and apply it to a game record.
"""
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar
import logging

from godiagram.core import BoardRegion, Flip, InvalidEnumLiteralError, Rotation
from .interfaces import GeometryProvider, Rotatable
from .quad_crop import get_quad_crop

logger = logging.getLogger(__name__)

# Clockwise angle of each corner / side, measured from the top left / top
CORNER_ANGLES = {
    BoardRegion.TOP_LEFT: 0,
    BoardRegion.BOTTOM_LEFT: 90,
    BoardRegion.BOTTOM_RIGHT: 180,
    BoardRegion.TOP_RIGHT: 270,
}
SIDE_ANGLES = {
    BoardRegion.TOP: 0,
    BoardRegion.LEFT: 90,
    BoardRegion.BOTTOM: 180,
    BoardRegion.RIGHT: 270,
}
ANGLE_ROTATIONS = {
    0: Rotation.NO_ROTATION,
    90: Rotation.CLOCKWISE_90,
    180: Rotation.CLOCKWISE_180,
    270: Rotation.CLOCKWISE_270,
}

Classifier = Callable[[GeometryProvider], BoardRegion]
T = TypeVar("T")


@dataclass(frozen=True)
class AutoRotateCropPrefs:
    """
    Destination regions for auto-rotation.

    prefer_flips swaps a 90/270 degree rotation of a corner for the
    equivalent reflection where one exists.
    """
    corner: BoardRegion = BoardRegion.TOP_RIGHT
    side: BoardRegion = BoardRegion.TOP
    prefer_flips: bool = False

    def __post_init__(self):
        """Validate preference regions."""
        if not self.corner.is_corner:
            raise InvalidEnumLiteralError(f"Not a corner region: {self.corner.value}")
        if not self.side.is_side:
            raise InvalidEnumLiteralError(f"Not a side region: {self.side.value}")

    @classmethod
    def from_config(cls, config) -> "AutoRotateCropPrefs":
        """Build preferences from the 'orientation' config section."""
        section = config.get_section("orientation")
        return cls(
            corner=BoardRegion.from_string(section.get("corner", cls.corner.value)),
            side=BoardRegion.from_string(section.get("side", cls.side.value)),
            prefer_flips=bool(section.get("prefer_flips", False)),
        )


def find_crop_rotation(
        region: BoardRegion,
        prefs: Optional[AutoRotateCropPrefs] = None
) -> Rotation:
    """
    Rotation that takes a region to the preferred corner or side.

    Args:
        region: Region the crop covers
        prefs: Target regions (default: TOP_RIGHT / TOP)

    Returns:
        Rotation to apply; NO_ROTATION for the full board
    """
    prefs = prefs or AutoRotateCropPrefs()

    if region in CORNER_ANGLES:
        start, end = CORNER_ANGLES[region], CORNER_ANGLES[prefs.corner]
    elif region in SIDE_ANGLES:
        start, end = SIDE_ANGLES[region], SIDE_ANGLES[prefs.side]
    else:
        # Only corners and sides are rotated
        return Rotation.NO_ROTATION

    delta = (360 + start - end) % 360
    return ANGLE_ROTATIONS.get(delta, Rotation.NO_ROTATION)


def find_canonical_rotation(
        provider: GeometryProvider,
        prefs: Optional[AutoRotateCropPrefs] = None,
        classifier: Classifier = get_quad_crop
) -> Rotation:
    """Rotation for a provider, based on the region its bounding box covers."""
    return find_crop_rotation(classifier(provider), prefs)


def flip_for_rotation(region: BoardRegion, rotation: Rotation) -> Flip:
    """
    Reflection equivalent to rotating a corner by 90 or 270 degrees.

    Returns NO_FLIP for sides, 180 degrees and no rotation.
    """
    diagonal = region in (BoardRegion.TOP_LEFT, BoardRegion.BOTTOM_RIGHT)
    anti_diagonal = region in (BoardRegion.TOP_RIGHT, BoardRegion.BOTTOM_LEFT)

    if rotation is Rotation.CLOCKWISE_90:
        if diagonal:
            return Flip.HORIZONTAL
        if anti_diagonal:
            return Flip.VERTICAL
    elif rotation is Rotation.CLOCKWISE_270:
        if diagonal:
            return Flip.VERTICAL
        if anti_diagonal:
            return Flip.HORIZONTAL

    # TODO: side regions have reflection equivalents for 180 degrees too.
    return Flip.NO_FLIP


def auto_rotate_crop(
        movetree: T,
        prefs: Optional[AutoRotateCropPrefs] = None,
        classifier: Classifier = get_quad_crop
) -> T:
    """
    Re-orient a game record so its crop lands in the preferred region.

    The movetree must be both a GeometryProvider and Rotatable. The input is
    left untouched; a transformed copy is returned (or the input itself when
    no rotation is needed).

    Args:
        movetree: Game record to transform
        prefs: Target regions and flip preference
        classifier: Maps the record to a board region

    Returns:
        Re-oriented game record
    """
    prefs = prefs or AutoRotateCropPrefs()
    region = classifier(movetree)
    rotation = find_crop_rotation(region, prefs)
    if rotation is Rotation.NO_ROTATION:
        logger.debug(f"Region {region.value} already canonical")
        return movetree

    size = movetree.max_intersections
    flip = flip_for_rotation(region, rotation) if prefs.prefer_flips else Flip.NO_FLIP

    if flip is Flip.VERTICAL:
        logger.debug(f"Region {region.value}: flipping vertically")
        return movetree.flip_vert(size)
    if flip is Flip.HORIZONTAL:
        logger.debug(f"Region {region.value}: flipping horizontally")
        return movetree.flip_horz(size)

    logger.debug(f"Region {region.value}: rotating {rotation.value}")
    return movetree.rotate(size, rotation)
