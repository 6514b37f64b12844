import abc
import logging
from typing import List, Optional, Sequence, Tuple, Union

from ..errors import OutOfRangeError
from .axis import AxisConfig, coerce_axes
from .generator import CandidateGenerator
from .ranker import ProximityRanker, RankedCandidate
from .space import Position, PositionSpace

logger = logging.getLogger("CacheStrategy")


class AbstractCacheStrategy(abc.ABC):
    """抽象缓存策略接口：给定当前位置，返回建议缓存的位置序列"""

    @abc.abstractmethod
    def get_load_order(self, position: Sequence[int]) -> List[Position]:
        """按优先级返回需要缓存的绝对位置，第一个元素为当前位置本身"""
        pass


class CacheStrategy(AbstractCacheStrategy):
    """Shared generate → rank → resolve pipeline.

    The candidate generator is injected, so crosshair, rectangle or any other
    enumeration reuse the same ranking and boundary handling. Everything is
    computed from the immutable axis configuration at construction time;
    ``get_load_order`` keeps no state between calls.
    """

    def __init__(
        self,
        axes: Sequence[Union[AxisConfig, int]],
        generator: CandidateGenerator,
        ranker: Optional[ProximityRanker] = None,
    ):
        self._axes = coerce_axes(axes)
        self._space = PositionSpace(a.length for a in self._axes)
        self._generator = generator
        self._ranker = ranker if ranker is not None else ProximityRanker(self._axes)
        self._ranked: Tuple[RankedCandidate, ...] = tuple(
            self._ranker.rank(generator.generate(self._space.lengths))
        )
        logger.info(
            f"Initialized {type(self).__name__}: lengths={self._space.lengths}, "
            f"generator={generator.name}, candidates={len(self._ranked)}"
        )

    @property
    def axes(self) -> Tuple[AxisConfig, ...]:
        return self._axes

    @property
    def lengths(self) -> Tuple[int, ...]:
        return self._space.lengths

    @property
    def space(self) -> PositionSpace:
        return self._space

    @property
    def generator(self) -> CandidateGenerator:
        return self._generator

    @property
    def candidate_count(self) -> int:
        return len(self._ranked)

    def get_ranked_offsets(self) -> List[RankedCandidate]:
        return list(self._ranked)

    def get_load_order(self, position: Sequence[int]) -> List[Position]:
        current = self._space.validate(position)
        order: List[Position] = []
        skipped = 0
        for candidate in self._ranked:
            try:
                order.append(self._space.clamp_or_reject(current, candidate.offset))
            except OutOfRangeError:
                # 边界附近的候选直接跳过，不视为错误
                skipped += 1
        logger.debug(
            f"load order for {current}: {len(order)} positions, {skipped} skipped at edges"
        )
        return order

    def __repr__(self) -> str:
        return f"{type(self).__name__}(lengths={self.lengths}, generator={self._generator!r})"
