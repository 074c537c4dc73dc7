"""Crowd-level helpers over a destination's hourly crowd data."""

import random
from typing import Dict, Optional

from trip_planner.models import CrowdLevel

CROWD_TIMES = ["00:00", "04:00", "08:00", "10:00", "12:00", "14:00", "16:00", "18:00", "20:00", "22:00"]


def _hour(time_key: str) -> int:
    return int(time_key.split(":")[0])


def crowd_level_for(percent: float) -> CrowdLevel:
    if percent <= 40:
        return CrowdLevel.LOW
    if percent <= 70:
        return CrowdLevel.MEDIUM
    return CrowdLevel.HIGH


def current_crowd_level(crowd_data: Dict[str, int], hour: int) -> Optional[CrowdLevel]:
    """Crowd level at the sampled time closest to ``hour``.

    Ties go to the earlier key in ``crowd_data`` order.
    """
    if not crowd_data:
        return None
    closest = min(crowd_data, key=lambda t: abs(_hour(t) - hour))
    return crowd_level_for(crowd_data[closest])


def average_crowd_level(crowd_data: Dict[str, int]) -> Optional[CrowdLevel]:
    """Static level from the daily average (what non-premium users see)."""
    if not crowd_data:
        return None
    values = list(crowd_data.values())
    return crowd_level_for(sum(values) / len(values))


def format_hour(hour: int) -> str:
    if hour == 0:
        return "12 AM"
    if hour < 12:
        return f"{hour} AM"
    if hour == 12:
        return "12 PM"
    return f"{hour - 12} PM"


def best_time_to_visit(crowd_data: Dict[str, int]) -> str:
    """Time slot with the lowest crowd, e.g. "4 AM". Empty if no data."""
    if not crowd_data:
        return ""
    best = min(crowd_data, key=lambda t: crowd_data[t])
    return format_hour(_hour(best))


def generate_crowd_data(rng: Optional[random.Random] = None) -> Dict[str, int]:
    """Simulate a plausible daily crowd curve (percent per sampled hour)."""
    rng = rng or random.Random()
    data = {}
    for t in CROWD_TIMES:
        hour = _hour(t)
        if 10 <= hour <= 16:
            data[t] = rng.randrange(40) + 50  # peak
        elif 8 <= hour < 10 or 16 < hour <= 20:
            data[t] = rng.randrange(30) + 35
        else:
            data[t] = rng.randrange(30) + 5
    return data
