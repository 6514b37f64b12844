#!/usr/bin/env python3
"""Print the cache load order for a position.

Usage:
  python scripts/print_load_order.py --position 3,3
                                     [--config PATH] [--limit N]
                                     [--offsets] [--verbose]

By default the script reads `config.json` in the repo root and builds the
strategy described by its `cache_strategy` section:

- `type`: `crosshair` (default) or `rectangle`
- `lengths`: per-axis lengths
- `axes`: optional per-axis `order` / `priority` / `range` / `name`

Output is one position per line, in the order a cache manager should load
them; the first line is the position itself.

Options:
  --position X,Y,...   Current position (0-indexed, one value per axis).
  --config PATH        Config file to read instead of the repo-root config.json.
  --limit N            Print at most N positions.
  --offsets            Also print the rank and relative offset of each line.
  --verbose            Enable DEBUG logging.
"""

import argparse
import logging
import os
import sys
from typing import List, Tuple

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from dimensional_cache import StrategyFactory, load_config_from_json  # noqa: E402
from dimensional_cache.errors import DimensionalCacheError  # noqa: E402


def parse_position(text: str) -> Tuple[int, ...]:
    try:
        return tuple(int(v) for v in text.replace(" ", "").split(",") if v != "")
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid position: {text!r}") from None


def format_lines(strategy, position, limit=None, with_offsets=False) -> List[str]:
    order = strategy.get_load_order(position)
    if limit is not None:
        order = order[: max(limit, 0)]
    lines = []
    for rank, pos in enumerate(order):
        coords = " ".join(str(c) for c in pos)
        if with_offsets:
            offset = " ".join(f"{p - c:+d}" for p, c in zip(pos, position))
            lines.append(f"{rank}\t{coords}\t{offset}")
        else:
            lines.append(coords)
    return lines


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Print the cache load order for a position")
    parser.add_argument("--position", type=parse_position, required=True)
    parser.add_argument("--config", default=None)
    parser.add_argument("--limit", type=int, default=None)
    parser.add_argument("--offsets", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_config_from_json(args.config)
        strategy = StrategyFactory.create_strategy(config)
        lines = format_lines(strategy, args.position, args.limit, args.offsets)
    except (FileNotFoundError, DimensionalCacheError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
