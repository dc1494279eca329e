"""Date utilities."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Optional


def format_time(timestamp: float, tz: Optional[timezone] = None) -> str:
    """Render epoch seconds as a short clock label such as ``03:00 PM``."""
    return datetime.fromtimestamp(timestamp, tz=tz or timezone.utc).strftime("%I:%M %p")


def hours_until(timestamp: float, now: float) -> int:
    return int(math.floor((timestamp - now) / 3600 + 0.5))
