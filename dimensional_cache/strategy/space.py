from typing import Optional, Sequence, Tuple

from ..errors import InvalidConfigurationError, InvalidPositionError, OutOfRangeError

Position = Tuple[int, ...]
Offset = Tuple[int, ...]


class PositionSpace:
    """N-dimensional coordinate space bounded by per-axis lengths."""

    def __init__(self, lengths: Sequence[int]):
        lengths = tuple(lengths)
        if not lengths:
            raise InvalidConfigurationError("At least one axis is required")
        for i, n in enumerate(lengths):
            if not isinstance(n, int) or isinstance(n, bool) or n < 1:
                raise InvalidConfigurationError(
                    f"Axis {i} length must be a positive integer, got {n!r}"
                )
        self._lengths = lengths

    @property
    def lengths(self) -> Tuple[int, ...]:
        return self._lengths

    @property
    def ndim(self) -> int:
        return len(self._lengths)

    @property
    def size(self) -> int:
        total = 1
        for n in self._lengths:
            total *= n
        return total

    def is_valid(self, position: Sequence[int]) -> bool:
        """True iff ``position`` has one in-range integer per axis."""
        try:
            coords = tuple(position)
        except TypeError:
            return False
        if len(coords) != len(self._lengths):
            return False
        for c, n in zip(coords, self._lengths):
            if not isinstance(c, int) or isinstance(c, bool):
                return False
            if c < 0 or c >= n:
                return False
        return True

    def validate(self, position: Sequence[int]) -> Position:
        if not self.is_valid(position):
            raise InvalidPositionError(
                f"Position {position!r} is outside space {self._lengths}"
            )
        return tuple(position)

    def clamp_or_reject(self, position: Sequence[int], offset: Sequence[int]) -> Position:
        """Return ``position + offset``, raising ``OutOfRangeError`` if it leaves the space."""
        if len(position) != len(self._lengths) or len(offset) != len(self._lengths):
            raise InvalidPositionError(
                f"Expected {len(self._lengths)} coordinates, got "
                f"position={tuple(position)} offset={tuple(offset)}"
            )
        out = []
        for axis, (p, d, n) in enumerate(zip(position, offset, self._lengths)):
            c = p + d
            if c < 0 or c >= n:
                raise OutOfRangeError(position, offset, axis)
            out.append(c)
        return tuple(out)

    def resolve(self, position: Sequence[int], offset: Sequence[int]) -> Optional[Position]:
        try:
            return self.clamp_or_reject(position, offset)
        except OutOfRangeError:
            return None

    def rasterize(self, position: Sequence[int]) -> int:
        """Flat index of ``position``; the first axis varies fastest."""
        coords = self.validate(position)
        index = 0
        stride = 1
        for c, n in zip(coords, self._lengths):
            index += c * stride
            stride *= n
        return index

    def position_of(self, index: int) -> Position:
        """Inverse of :meth:`rasterize`."""
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < self.size:
            raise InvalidPositionError(f"Raster index {index!r} outside [0, {self.size})")
        coords = []
        for n in self._lengths:
            coords.append(index % n)
            index //= n
        return tuple(coords)

    def __repr__(self) -> str:
        return f"PositionSpace(lengths={self._lengths})"
