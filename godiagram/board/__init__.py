"""
Board module - intersection geometry, star points, and coordinate labels.
"""
from .geometry import BoardPointMapper

__all__ = [
    "BoardPointMapper",
]
