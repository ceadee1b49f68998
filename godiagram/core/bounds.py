"""
Bounds checks for intersection indices.
"""


def in_bounds(num: int, bound: int) -> bool:
    """Whether num lies in [0, bound)."""
    return 0 <= num < bound


def out_bounds(num: int, bound: int) -> bool:
    """Whether num is negative or >= bound."""
    return num >= bound or num < 0
