"""Exceptions raised by the cache strategy layer.

Configuration and usage errors are caller bugs and are always raised.
``OutOfRangeError`` is the only one the strategy handles itself: a
candidate that leaves the dataset near an edge is dropped, not reported.
"""


class DimensionalCacheError(Exception):
    """Base class for all dimensional_cache errors."""


class InvalidConfigurationError(DimensionalCacheError, ValueError):
    """Axis lengths / order / priority / range or strategy type is invalid."""


class InvalidPositionError(DimensionalCacheError, ValueError):
    """The current position has the wrong arity or lies outside the space."""


class OutOfRangeError(DimensionalCacheError, IndexError):
    """A position + offset falls outside ``[0, length)`` on some axis."""

    def __init__(self, position, offset, axis: int):
        self.position = tuple(position)
        self.offset = tuple(offset)
        self.axis = axis
        super().__init__(
            f"offset {self.offset} from {self.position} leaves axis {axis}"
        )
