"""Crosshair variant: neighbors that diverge along a single axis only.

From Z5-C2-T18 it proposes Z6-C2-T18 / Z4-C2-T18, Z5-C3-T18 / Z5-C1-T18 and
Z5-C2-T19 / Z5-C2-T17 (and further along each axis), but never a plane
such as Z6-C3-T19 that moves along two axes at once.
"""
from functools import lru_cache
from typing import Sequence, Tuple

from .base import CacheStrategy
from .generator import CandidateGenerator, StepVector


@lru_cache(maxsize=128)
def _crosshair_steps(lengths: Tuple[int, ...]) -> Tuple[StepVector, ...]:
    ndim = len(lengths)
    steps = [(0,) * ndim]
    for axis, n in enumerate(lengths):
        for j in range(1, n):
            step = [0] * ndim
            step[axis] = j
            steps.append(tuple(step))
    return tuple(steps)


class CrosshairGenerator(CandidateGenerator):
    """``1 + sum(length - 1)`` steps; singleton axes contribute none."""

    name = "crosshair"

    def generate(self, lengths: Sequence[int]) -> Tuple[StepVector, ...]:
        return _crosshair_steps(tuple(lengths))

    def count(self, lengths: Sequence[int]) -> int:
        return 1 + sum(n - 1 for n in lengths)


class CrosshairStrategy(CacheStrategy):
    """Caches planes extending from the current position along each axis."""

    def __init__(self, axes, ranker=None):
        super().__init__(axes, CrosshairGenerator(), ranker=ranker)
