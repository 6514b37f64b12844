import logging
import threading
from collections import OrderedDict
from typing import Any, Callable, List, Optional, Sequence, Set

from ..prefetch import PlanBuilder, PrefetchBuffer
from ..strategy.base import AbstractCacheStrategy
from ..strategy.space import Position

logger = logging.getLogger("PlaneCache")


class PlaneCache:
    """按策略给出的加载顺序缓存平面数据的简单缓存管理器。

    策略只负责排序；加载、淘汰与容量控制都在这里完成：
    - set_position: 重新计算加载计划，淘汰计划外的位置，按顺序加载缺失的位置
    - get: 命中直接返回；未命中则直接调用 loader（不放入缓存）

    线程安全。loader 返回 None 或抛出异常时记录日志并跳过该位置。
    """

    def __init__(
        self,
        strategy: AbstractCacheStrategy,
        loader: Callable[[Position], Any],
        capacity: int = 64,
    ):
        self.strategy = strategy
        self.loader = loader
        self.capacity = max(int(capacity), 0)
        self._planes: "OrderedDict[Position, Any]" = OrderedDict()
        self._buffer = PrefetchBuffer(capacity=max(self.capacity * 2, 1))
        self._planner = PlanBuilder()
        self._current: Optional[Position] = None
        self._planned: Set[Position] = set()
        self._generation = 0
        self._lock = threading.RLock()
        logger.info(f"Initialized PlaneCache with capacity: {self.capacity}")

    @property
    def current_position(self) -> Optional[Position]:
        with self._lock:
            return self._current

    @property
    def buffer(self) -> PrefetchBuffer:
        return self._buffer

    def set_position(self, position: Sequence[int]) -> List[Position]:
        """切换当前位置并重建缓存，返回本次加载计划。"""
        order = self.strategy.get_load_order(position)
        plan = self._planner.build(order, self.capacity)
        planned = set(plan)
        with self._lock:
            self._generation += 1
            generation = self._generation
            self._current = tuple(position)
            self._planned = planned
            # 淘汰计划外的位置
            for pos in [p for p in self._planes if p not in planned]:
                self._planes.pop(pos, None)
                self._buffer.mark_evicted(pos)
            missing = []
            for pos in plan:
                if pos in self._planes:
                    continue
                if not self._buffer.reserve(pos):
                    continue
                self._buffer.mark_fetching(pos)
                missing.append(pos)

        # 加载（I/O）在锁外进行，避免阻塞 get / is_cached
        loaded = [(pos, self._load(pos)) for pos in missing]

        with self._lock:
            stale = generation != self._generation
            for pos, data in loaded:
                if data is None:
                    self._buffer.forget(pos)
                elif pos not in self._planned:
                    # 位置已切换，本次加载结果不再属于当前计划
                    self._buffer.forget(pos)
                else:
                    self._planes[pos] = data
                    self._buffer.mark_ready(pos)
            if not stale:
                # 按计划顺序排列
                for pos in plan:
                    if pos in self._planes:
                        self._planes.move_to_end(pos)
            logger.debug(
                f"Position {self._current}: planned={len(plan)}, cached={len(self._planes)}"
            )
        return plan

    def get(self, position: Sequence[int]) -> Any:
        pos = self._validate(position)
        with self._lock:
            if pos in self._planes:
                self._buffer.on_access(pos, hit=True)
                return self._planes[pos]
            self._buffer.on_access(pos, hit=False)
        logger.debug(f"Cache miss, loading directly: {pos}")
        return self.loader(pos)

    def _validate(self, position: Sequence[int]) -> Position:
        space = getattr(self.strategy, "space", None)
        if space is not None:
            return space.validate(position)
        return tuple(position)

    def is_cached(self, position: Sequence[int]) -> bool:
        with self._lock:
            return tuple(position) in self._planes

    def cached_positions(self) -> List[Position]:
        with self._lock:
            return list(self._planes)

    def clear(self) -> None:
        with self._lock:
            for pos in list(self._planes):
                self._buffer.mark_evicted(pos)
            self._planes.clear()
            self._planned = set()
            self._current = None

    def _load(self, position: Position) -> Optional[Any]:
        try:
            data = self.loader(position)
        except Exception as e:
            logger.error(f"Failed to load plane {position}: {e}")
            return None
        if data is None:
            logger.warning(f"Loader returned no data for plane {position}")
        return data
