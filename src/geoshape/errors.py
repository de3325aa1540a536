"""
errors.py

Exception types raised by geoshape.

Everything derives from `GeometryError` so callers can catch the whole
family at once, and from `ValueError` so existing input-validation
handlers keep working.

- `DecodeError`: the text/binary payload could not be parsed at all.
- `GeometryTypeError`: the payload parsed, but into the wrong kind of shape.
- `SubdivisionError`: `divide` was asked for something it cannot finish.
"""
from typing import Iterable, Tuple


class GeometryError(Exception):
    """Base class for all geoshape errors."""


class DecodeError(GeometryError, ValueError):
    """Raised when WKB/WKT input cannot be decoded into any geometry."""


class GeometryTypeError(GeometryError, ValueError):
    """Raised when a decoded geometry is not the shape the caller asked for.

    Attributes:
        expected: tuple of accepted geometry type names.
        actual: the geometry type that was found.
    """

    def __init__(self, expected: Iterable[str], actual: str):
        self.expected: Tuple[str, ...] = tuple(expected)
        self.actual = actual
        super().__init__(
            f"failed geometry type: expected {' or '.join(self.expected)}, got {actual}"
        )


class SubdivisionError(GeometryError, ValueError):
    """Raised for thresholds or guard values that `divide` cannot honour."""
