"""Configuration values and small numeric helpers shared across the package."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta

logger = logging.getLogger(__name__)

DEFAULT_LATITUDE = 48.516
DEFAULT_LONGITUDE = 9.120
DEFAULT_NIGHT_TEMP = 4000
DEFAULT_DAY_TEMP = 6500
DEFAULT_NIGHT_GAMMA = 90
DEFAULT_DAY_GAMMA = 100
DEFAULT_LOOP_INTERVAL = timedelta(seconds=30)
DEFAULT_TRANSITION_DURATION = timedelta(hours=1)
DEFAULT_HYPRCTL_CMD = "hyprctl"


@dataclass
class Config:
    """Settings controlling how brightness is computed and applied."""

    debug: bool = False
    night_temp: int = DEFAULT_NIGHT_TEMP
    day_temp: int = DEFAULT_DAY_TEMP
    night_gamma: int = DEFAULT_NIGHT_GAMMA
    day_gamma: int = DEFAULT_DAY_GAMMA
    latitude: float = DEFAULT_LATITUDE
    longitude: float = DEFAULT_LONGITUDE
    wakeup: str = ""
    bedtime: str = ""
    loop: bool = False
    version: bool = False
    hyprctl_cmd: str = DEFAULT_HYPRCTL_CMD
    transition_duration: timedelta = field(
        default_factory=lambda: DEFAULT_TRANSITION_DURATION
    )


def _round_half_away(value: float) -> float:
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(whole, value)


def round_float(val: float, precision: int) -> float:
    """Round ``val`` to ``precision`` decimals, halves away from zero."""
    ratio = math.pow(10, precision)
    return _round_half_away(val * ratio) / ratio


def round_float3(val: float) -> float:
    """Round ``val`` to three decimals."""
    return round_float(val, 3)


def time_ratio(start: datetime, end: datetime, duration: timedelta) -> float:
    """Return how far ``start`` has progressed towards ``end`` within ``duration``.

    With a one hour duration, 16:45 -> 17:00 gives 0.75 and equal times give 1.0.
    The result has three digit precision.
    """
    if end < start:
        return 0.0
    if end > start + duration:
        return 1.0
    diff = (end - start).total_seconds()
    total = duration.total_seconds()
    ratio = (total - diff) / total
    logger.debug("timeratio timeDiff=%s ratio=%s", end - start, ratio)
    return min(round_float3(ratio), 1.0)


def both_or_none(a: str, b: str) -> bool:
    """True if both strings are non-empty or both are empty."""
    return bool(a) == bool(b)