"""
Orientation module - region classification and canonical rotation of crops.
"""
from .interfaces import GeometryProvider, Rotatable
from .quad_crop import classify_bounding_box, crop_bounding_box, get_quad_crop
from .rotation import (
    AutoRotateCropPrefs,
    auto_rotate_crop,
    find_canonical_rotation,
    find_crop_rotation,
    flip_for_rotation,
)

__all__ = [
    "GeometryProvider",
    "Rotatable",
    "classify_bounding_box",
    "crop_bounding_box",
    "get_quad_crop",
    "AutoRotateCropPrefs",
    "auto_rotate_crop",
    "find_canonical_rotation",
    "find_crop_rotation",
    "flip_for_rotation",
]
