"""Rectangle variant: every combination of per-axis steps.

Unlike the crosshair it also proposes planes diverging along several axes
at once (Z6-C3-T19), ranked after single-axis planes of the same total
distance.
"""
from functools import lru_cache
from itertools import product
from typing import Sequence, Tuple

from .base import CacheStrategy
from .generator import CandidateGenerator, StepVector


@lru_cache(maxsize=32)
def _rectangle_steps(lengths: Tuple[int, ...]) -> Tuple[StepVector, ...]:
    # product() starts at the all-zero vector
    return tuple(product(*(range(n) for n in lengths)))


class RectangleGenerator(CandidateGenerator):
    """``prod(length)`` steps, i.e. one per position in the space."""

    name = "rectangle"

    def generate(self, lengths: Sequence[int]) -> Tuple[StepVector, ...]:
        return _rectangle_steps(tuple(lengths))

    def count(self, lengths: Sequence[int]) -> int:
        total = 1
        for n in lengths:
            total *= n
        return total


class RectangleStrategy(CacheStrategy):
    """Caches the whole neighborhood box around the current position."""

    def __init__(self, axes, ranker=None):
        super().__init__(axes, RectangleGenerator(), ranker=ranker)
