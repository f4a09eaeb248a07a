from __future__ import annotations

import math
import re
from datetime import datetime, timezone


_NUMERIC_PREFIX = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_float(value: object) -> float:
    """Lenient float parse: reads the leading numeric part, ``nan`` when there is none."""
    if isinstance(value, bool) or value is None:
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    match = _NUMERIC_PREFIX.match(str(value))
    if match is None:
        return math.nan
    return float(match.group(0))


def timestamp_to_datetime(seconds: int) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def format_seconds(seconds: int) -> str:
    """Format a seconds count as ``HH:MM:SS``.

    Leading zero segments are dropped, the seconds segment is always kept:
    5 -> "05", 65 -> "01:05", 3661 -> "01:01:01". Hours do not wrap into days.
    """
    total = max(0, int(seconds))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)

    segments = [hours, minutes, secs]
    while len(segments) > 1 and segments[0] == 0:
        segments.pop(0)
    return ":".join(f"{segment:02d}" for segment in segments)


def currency_value(quantity: float, price: float) -> float:
    return quantity * price


def estimate_daily_rewards(*, stake: float, total_stake: float, total_daily_reward: float) -> float:
    if not total_stake > 0:
        return 0.0
    return stake / total_stake * total_daily_reward
