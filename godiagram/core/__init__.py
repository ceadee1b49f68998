"""
Core module - point algebra, shared enums, errors, and configuration.
"""
from .types import (
    Point,
    BoundingBox,
    BoardPt,
    EdgeLabel,
    coord_to_string,
    point_arr_from_sgf_prop,
)
from .enums import (
    Rotation,
    Flip,
    BoardRegion,
    Color,
)
from .errors import (
    GoDiagramError,
    MissingSizeError,
    OutOfBoundsRotationError,
    InvalidCoordLengthError,
    InvalidRectangleError,
    ParseError,
    InvalidEnumLiteralError,
    PointNotFoundError,
)
from .bounds import in_bounds, out_bounds
from .io_utils import load_yaml
from .config_loader import Config

__all__ = [
    # Types
    "Point",
    "BoundingBox",
    "BoardPt",
    "EdgeLabel",
    "coord_to_string",
    "point_arr_from_sgf_prop",
    # Enums
    "Rotation",
    "Flip",
    "BoardRegion",
    "Color",
    # Errors
    "GoDiagramError",
    "MissingSizeError",
    "OutOfBoundsRotationError",
    "InvalidCoordLengthError",
    "InvalidRectangleError",
    "ParseError",
    "InvalidEnumLiteralError",
    "PointNotFoundError",
    # Bounds
    "in_bounds",
    "out_bounds",
    # I/O
    "load_yaml",
    # Config
    "Config",
]
