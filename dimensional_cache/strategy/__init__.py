from .axis import AxisConfig, Order, Priority, build_axes
from .space import PositionSpace
from .generator import CandidateGenerator
from .ranker import ProximityRanker, RankedCandidate
from .base import AbstractCacheStrategy, CacheStrategy
from .crosshair import CrosshairGenerator, CrosshairStrategy
from .rectangle import RectangleGenerator, RectangleStrategy
from .factory import StrategyFactory

__all__ = [
    "AxisConfig",
    "Order",
    "Priority",
    "build_axes",
    "PositionSpace",
    "CandidateGenerator",
    "ProximityRanker",
    "RankedCandidate",
    "AbstractCacheStrategy",
    "CacheStrategy",
    "CrosshairGenerator",
    "CrosshairStrategy",
    "RectangleGenerator",
    "RectangleStrategy",
    "StrategyFactory",
]
