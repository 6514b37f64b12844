import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from ..errors import InvalidConfigurationError
from .axis import AxisConfig, Order
from .space import Offset

logger = logging.getLogger("ProximityRanker")


@dataclass(frozen=True)
class RankedCandidate:
    offset: Offset
    rank: int


class ProximityRanker:
    """Turns unsigned steps into signed offsets and orders them.

    Per axis, step ``j`` becomes:

    - ASCENDING: ``+j`` at distance ``j``
    - DESCENDING: ``-j`` at distance ``j``
    - CENTERED: ``+1, -1, +2, -2, ...`` for ``j = 1, 2, 3, 4, ...``, i.e.
      distance ``ceil(j / 2)``, odd steps on the preferred side

    Offsets reaching beyond an axis' ``range`` are dropped. The remaining
    offsets are ordered by

    1. total distance from the origin,
    2. preferred side before the opposite side,
    3. fewer diverging axes,
    4. larger distance along the earlier *visited* axis,
    5. side along the earlier visited axis.

    Axes are visited by descending priority weight; equal weights are
    visited from the last declared axis to the first. With two equal
    centered axes ``(Z, T)`` this yields ``0, +T, +Z, -T, -Z, +2T, ...``.
    """

    def __init__(self, axes: Sequence[AxisConfig]):
        self._axes = tuple(axes)
        if not self._axes:
            raise InvalidConfigurationError("At least one axis is required")
        self._visit = tuple(
            sorted(range(len(self._axes)), key=lambda i: (-self._axes[i].weight, -i))
        )

    @property
    def axes(self) -> Tuple[AxisConfig, ...]:
        return self._axes

    @property
    def visit_order(self) -> Tuple[int, ...]:
        return self._visit

    @staticmethod
    def realize(axis: AxisConfig, step: int) -> Tuple[int, int, int]:
        """Return ``(offset, distance, side)`` for one unsigned step on ``axis``."""
        if step == 0:
            return 0, 0, 0
        if axis.order is Order.ASCENDING:
            return step, step, 0
        if axis.order is Order.DESCENDING:
            return -step, step, 0
        distance = (step + 1) // 2
        preferred = step % 2 == 1
        sign = 1 if preferred == axis.prefer_positive else -1
        return sign * distance, distance, 0 if preferred else 1

    def _score(self, step: Sequence[int]):
        if len(step) != len(self._axes):
            raise InvalidConfigurationError(
                f"Step {tuple(step)} does not match {len(self._axes)} axes"
            )
        offset = []
        distances = []
        sides = []
        for axis, j in zip(self._axes, step):
            if j < 0 or j >= axis.length:
                raise InvalidConfigurationError(
                    f"Step {tuple(step)} exceeds axis length {axis.length}"
                )
            d, dist, side = self.realize(axis, j)
            if axis.range is not None and dist > axis.range:
                return None
            offset.append(d)
            distances.append(dist)
            sides.append(side)
        key = (
            sum(distances),
            sum(sides),
            sum(1 for dist in distances if dist),
            tuple(-distances[i] for i in self._visit),
            tuple(sides[i] for i in self._visit),
        )
        return key, tuple(offset)

    def rank(self, steps: Iterable[Sequence[int]]) -> List[RankedCandidate]:
        scored = []
        dropped = 0
        for step in steps:
            s = self._score(step)
            if s is None:
                dropped += 1
                continue
            scored.append(s)
        scored.sort(key=lambda item: item[0])
        if not scored or any(scored[0][1]):
            raise InvalidConfigurationError("Candidate steps must include the zero vector")
        logger.debug(f"ranked {len(scored)} candidates ({dropped} beyond range)")
        return [RankedCandidate(offset=offset, rank=i) for i, (_, offset) in enumerate(scored)]
