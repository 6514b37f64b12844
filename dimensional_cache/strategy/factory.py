import logging
from types import SimpleNamespace
from typing import Dict, Type

from ..errors import InvalidConfigurationError
from .axis import build_axes
from .base import CacheStrategy
from .crosshair import CrosshairStrategy
from .rectangle import RectangleStrategy

logger = logging.getLogger("StrategyFactory")

STRATEGY_TYPES: Dict[str, Type[CacheStrategy]] = {
    "crosshair": CrosshairStrategy,
    "rectangle": RectangleStrategy,
}


class StrategyFactory:
    """策略工厂：根据 cache_strategy 配置创建具体的 CacheStrategy 实例。"""

    @staticmethod
    def create_strategy(config) -> CacheStrategy:
        """按配置创建策略实例。

        说明：
        - config 可以是 config.json 解析出的 SimpleNamespace（包含 cache_strategy 字段），
          也可以直接是 cache_strategy 节点本身。
        - 字段优先从 cache_strategy.<name> 读取，其次从 cache_strategy.extra_config[name] 读取。
        """
        cs = getattr(config, "cache_strategy", config)

        def _get(name: str, default=None):
            val = getattr(cs, name, None)
            if val is not None:
                return val
            extra = getattr(cs, "extra_config", None)
            # config.json 中的 extra_config 会被解析为 SimpleNamespace
            if isinstance(extra, SimpleNamespace):
                extra = vars(extra)
            if isinstance(extra, dict) and name in extra:
                return extra[name]
            return default

        strategy_type = str(_get("type", "crosshair")).lower()
        lengths = _get("lengths", None)
        axis_specs = _get("axes", None)

        if lengths is None:
            # 未给出 lengths 时，从每个轴的 length 字段推导
            if not axis_specs:
                raise InvalidConfigurationError("cache_strategy.lengths 未配置")
            lengths = [_axis_field(spec, "length") for spec in axis_specs]

        cls = STRATEGY_TYPES.get(strategy_type)
        if cls is None:
            raise InvalidConfigurationError(f"Unsupported strategy type: {strategy_type}")

        axes = build_axes(lengths, axis_specs)
        logger.info(
            f"创建策略实例: type={strategy_type}, lengths={list(lengths)}, "
            f"orders={[a.order.name for a in axes]}"
        )
        return cls(axes)


def _axis_field(spec, name: str):
    if isinstance(spec, dict):
        value = spec.get(name)
    else:
        value = getattr(spec, name, None)
    if value is None:
        raise InvalidConfigurationError(f"轴配置缺少字段: {name}")
    return value
