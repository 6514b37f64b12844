import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Hashable, List, Optional, Sequence


class EntryState(Enum):
    RESERVED = 0
    FETCHING = 1
    READY = 2
    EVICTED = 3


@dataclass
class PrefetchEntry:
    key: Hashable
    state: EntryState = EntryState.RESERVED
    last_update: float = field(default_factory=time.time)
    hits_after_prefetch: int = 0  # Telemetry: true hits following prefetch


class PrefetchBuffer:
    """
    Prefetch state index keyed by position (or any hashable key).
    Data itself lives in the cache; this buffer only tracks states so the
    same position is never submitted twice while it is in flight.
    """

    def __init__(self, capacity: int = 4096):
        self._cap = max(int(capacity), 1)
        self._map: Dict[Hashable, PrefetchEntry] = {}
        self._lock = threading.RLock()
        # Simple telemetry
        self.hits = 0
        self.misses = 0
        self.prefetch_submitted = 0
        self.evictions = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._map)

    def reserve(self, key: Hashable) -> bool:
        with self._lock:
            e = self._map.get(key)
            if e is not None and e.state != EntryState.EVICTED:
                return False
            if e is None and len(self._map) >= self._cap:
                # FIFO eviction of the oldest entry
                evict_key = next(iter(self._map))
                self._map.pop(evict_key, None)
                self.evictions += 1
            self._map[key] = PrefetchEntry(key=key, state=EntryState.RESERVED)
            self.prefetch_submitted += 1
            return True

    def _set_state(self, key: Hashable, state: EntryState):
        with self._lock:
            if key in self._map:
                self._map[key].state = state
                self._map[key].last_update = time.time()

    def mark_fetching(self, key: Hashable):
        self._set_state(key, EntryState.FETCHING)

    def mark_ready(self, key: Hashable):
        self._set_state(key, EntryState.READY)

    def mark_evicted(self, key: Hashable):
        self._set_state(key, EntryState.EVICTED)

    def forget(self, key: Hashable) -> bool:
        with self._lock:
            return self._map.pop(key, None) is not None

    def state(self, key: Hashable) -> Optional[EntryState]:
        with self._lock:
            e = self._map.get(key)
            return e.state if e is not None else None

    def is_ready(self, key: Hashable) -> bool:
        with self._lock:
            e = self._map.get(key)
            return e is not None and e.state == EntryState.READY

    def on_access(self, key: Hashable, hit: bool):
        with self._lock:
            e = self._map.get(key)
            if hit:
                self.hits += 1
                if e and e.state == EntryState.READY:
                    e.hits_after_prefetch += 1
            else:
                self.misses += 1


class PlanBuilder:
    """
    Trims an already ranked candidate list to a budget. Order is preserved;
    the caller supplies candidates in the order they should be loaded.
    """

    def build(self, candidates: Sequence[Hashable], budget: float, cost: float = 1) -> List[Hashable]:
        if budget <= 0 or cost <= 0:
            return []
        out: List[Hashable] = []
        spent = 0
        for c in candidates:
            if spent + cost > budget:
                break
            out.append(c)
            spent += cost
        return out
