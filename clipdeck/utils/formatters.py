"""Display formatting for video cards and plan listings."""

from datetime import datetime, timezone
from typing import Optional

_COMPACT_UNITS = (
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
)


def format_compact_number(value: int) -> str:
    """Format a counter the way social apps do: 950, 1.2K, 3.4M, 1B."""
    for threshold, suffix in _COMPACT_UNITS:
        if abs(value) >= threshold:
            compact = f"{value / threshold:.1f}".rstrip("0").rstrip(".")
            return f"{compact}{suffix}"
    return str(value)


def format_duration(seconds: int) -> str:
    """Format a duration as m:ss, or h:mm:ss from one hour up."""
    seconds = max(0, int(seconds))
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


_RELATIVE_UNITS = (
    (365 * 24 * 3600, "year"),
    (30 * 24 * 3600, "month"),
    (7 * 24 * 3600, "week"),
    (24 * 3600, "day"),
    (3600, "hour"),
    (60, "minute"),
)


def format_relative_time(epoch_millis: int, now: Optional[datetime] = None) -> str:
    """Describe an epoch-milliseconds timestamp relative to ``now``, e.g. "3 days ago"."""
    now = now or datetime.now(timezone.utc)
    delta = int(now.timestamp() - epoch_millis / 1000)
    future = delta < 0
    delta = abs(delta)

    for unit_seconds, unit in _RELATIVE_UNITS:
        if delta >= unit_seconds:
            amount = delta // unit_seconds
            label = f"{amount} {unit}{'' if amount == 1 else 's'}"
            return f"in {label}" if future else f"{label} ago"
    return "just now"
