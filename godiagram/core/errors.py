"""
Error types raised by the diagram geometry code.

Every error derives from GoDiagramError so callers can catch the whole family,
and from the builtin it specializes (ValueError / KeyError) so generic
handlers keep working.
"""


class GoDiagramError(Exception):
    """Base class for all godiagram errors."""


class MissingSizeError(GoDiagramError, ValueError):
    """A size-dependent transform was called without a usable board size."""


class OutOfBoundsRotationError(GoDiagramError, ValueError):
    """A point outside the board was rotated."""


class InvalidCoordLengthError(GoDiagramError, ValueError):
    """An SGF coordinate was not exactly two characters long."""


class InvalidRectangleError(GoDiagramError, ValueError):
    """A point rectangle was malformed or had inverted corners."""


class ParseError(GoDiagramError, ValueError):
    """A point string or SGF coordinate could not be parsed."""


class InvalidEnumLiteralError(GoDiagramError, ValueError):
    """An unrecognized color / rotation / region literal."""


class PointNotFoundError(GoDiagramError, KeyError):
    """Lookup of an intersection that the board mapper does not contain."""
