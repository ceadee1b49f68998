"""
Game module - minimal game record the orientation code transforms.
"""
from .movetree import POINT_PROPERTIES, MoveNode, MoveTree, PointProperties

__all__ = [
    "POINT_PROPERTIES",
    "MoveNode",
    "MoveTree",
    "PointProperties",
]
