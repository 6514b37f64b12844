"""Prefetch bookkeeping used by cache managers that consume a load order.

Exports the state index and the budget planner.
"""
from .core import (
    EntryState,
    PrefetchEntry,
    PrefetchBuffer,
    PlanBuilder,
)

__all__ = [
    "EntryState",
    "PrefetchEntry",
    "PrefetchBuffer",
    "PlanBuilder",
]
