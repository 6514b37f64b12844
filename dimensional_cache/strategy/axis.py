import math
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Optional, Sequence, Tuple, Union

from ..errors import InvalidConfigurationError


class Order(Enum):
    """Per-axis traversal policy: which sign each step receives."""
    ASCENDING = 1
    DESCENDING = -1
    CENTERED = 0


class Priority(Enum):
    """Named axis weights; larger values are cached first within a tier."""
    MIN = -10
    LOW = -5
    NORMAL = 0
    HIGH = 5
    MAX = 10


_ORDER_ALIASES = {
    "ascending": Order.ASCENDING,
    "forward": Order.ASCENDING,
    "descending": Order.DESCENDING,
    "backward": Order.DESCENDING,
    "centered": Order.CENTERED,
    "centred": Order.CENTERED,
}


def parse_order(value) -> Order:
    """Accept an ``Order`` or one of its config-file spellings."""
    if isinstance(value, Order):
        return value
    key = str(value).strip().lower()
    if key not in _ORDER_ALIASES:
        raise InvalidConfigurationError(f"Unknown axis order: {value!r}")
    return _ORDER_ALIASES[key]


def parse_priority(value) -> Union[Priority, float]:
    """Accept a ``Priority``, its name, or an explicit numeric weight."""
    if isinstance(value, Priority):
        return value
    if isinstance(value, bool):
        raise InvalidConfigurationError(f"Invalid axis priority: {value!r}")
    if isinstance(value, Real):
        if not math.isfinite(value):
            raise InvalidConfigurationError(f"Axis priority weight must be finite, got {value!r}")
        return value
    try:
        return Priority[str(value).strip().upper()]
    except KeyError:
        raise InvalidConfigurationError(f"Unknown axis priority: {value!r}") from None


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class AxisConfig:
    """Immutable configuration of one dimension.

    ``range`` caps how far (in planes) the strategy reaches along this axis;
    ``None`` means the whole axis. ``prefer_positive`` only matters for
    CENTERED axes, where it picks which of ``+k`` / ``-k`` comes first.
    """
    length: int
    order: Order = Order.CENTERED
    priority: Union[Priority, float] = Priority.NORMAL
    range: Optional[int] = None
    prefer_positive: bool = True
    name: Optional[str] = None

    def __post_init__(self):
        if not _is_int(self.length) or self.length < 1:
            raise InvalidConfigurationError(
                f"Axis length must be a positive integer, got {self.length!r}"
            )
        if self.range is not None and (not _is_int(self.range) or self.range < 0):
            raise InvalidConfigurationError(
                f"Axis range must be a non-negative integer or None, got {self.range!r}"
            )
        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "order", parse_order(self.order))
        object.__setattr__(self, "priority", parse_priority(self.priority))

    @property
    def weight(self) -> float:
        if isinstance(self.priority, Priority):
            return self.priority.value
        return self.priority


def build_axes(lengths: Sequence[int], specs: Optional[Sequence] = None) -> Tuple[AxisConfig, ...]:
    """Build one ``AxisConfig`` per length from optional per-axis settings.

    ``specs`` items may be ``AxisConfig``, dicts or namespaces carrying any of
    ``order``, ``priority``, ``range``, ``prefer_positive`` and ``name``.
    """
    lengths = list(lengths)
    if not lengths:
        raise InvalidConfigurationError("At least one axis is required")
    if specs is None:
        specs = [None] * len(lengths)
    specs = list(specs)
    if len(specs) != len(lengths):
        raise InvalidConfigurationError(
            f"Got {len(specs)} axis settings for {len(lengths)} lengths"
        )

    axes = []
    for length, spec in zip(lengths, specs):
        if isinstance(spec, AxisConfig):
            if spec.length != length:
                raise InvalidConfigurationError(
                    f"Axis {spec.name or ''} declares length {spec.length}, expected {length}"
                )
            axes.append(spec)
            continue
        if spec is None:
            fields = {}
        elif isinstance(spec, dict):
            fields = dict(spec)
        else:
            fields = dict(vars(spec))
        declared = fields.pop("length", length)
        if declared != length:
            raise InvalidConfigurationError(
                f"Axis settings declare length {declared}, expected {length}"
            )
        unknown = set(fields) - {"order", "priority", "range", "prefer_positive", "name"}
        if unknown:
            raise InvalidConfigurationError(f"Unknown axis settings: {sorted(unknown)}")
        axes.append(AxisConfig(length=length, **fields))
    return tuple(axes)


def coerce_axes(axes: Sequence[Union[AxisConfig, int]]) -> Tuple[AxisConfig, ...]:
    """Turn a mix of ``AxisConfig`` and bare lengths into ``AxisConfig``s."""
    out = []
    for axis in axes:
        if isinstance(axis, AxisConfig):
            out.append(axis)
        else:
            out.append(AxisConfig(length=axis))
    if not out:
        raise InvalidConfigurationError("At least one axis is required")
    return tuple(out)
