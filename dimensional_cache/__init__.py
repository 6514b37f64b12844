from .errors import (
    DimensionalCacheError,
    InvalidConfigurationError,
    InvalidPositionError,
    OutOfRangeError,
)

from .strategy import (
    AxisConfig,
    Order,
    Priority,
    PositionSpace,
    CandidateGenerator,
    ProximityRanker,
    RankedCandidate,
    AbstractCacheStrategy,
    CacheStrategy,
    CrosshairGenerator,
    CrosshairStrategy,
    RectangleGenerator,
    RectangleStrategy,
    StrategyFactory,
)

from .prefetch import (
    EntryState,
    PrefetchBuffer,
    PlanBuilder,
)

from .cache import PlaneCache

from .events import SpawnEvent

from .config_loader import (
    load_config_from_json,
    merge_config_with_defaults
)

__all__ = [
    # 错误类型
    'DimensionalCacheError',
    'InvalidConfigurationError',
    'InvalidPositionError',
    'OutOfRangeError',

    # 策略相关
    'AxisConfig',
    'Order',
    'Priority',
    'PositionSpace',
    'CandidateGenerator',
    'ProximityRanker',
    'RankedCandidate',
    'AbstractCacheStrategy',
    'CacheStrategy',
    'CrosshairGenerator',
    'CrosshairStrategy',
    'RectangleGenerator',
    'RectangleStrategy',
    'StrategyFactory',

    # 预取与缓存
    'EntryState',
    'PrefetchBuffer',
    'PlanBuilder',
    'PlaneCache',

    # 事件
    'SpawnEvent',

    # 配置相关
    'load_config_from_json',
    'merge_config_with_defaults'
]
