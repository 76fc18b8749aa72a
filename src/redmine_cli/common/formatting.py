"""Text helpers shared by the command output."""

from __future__ import annotations

from datetime import datetime, timezone

_UNITS = (
    ("year", 365 * 24 * 3600),
    ("month", 30 * 24 * 3600),
    ("day", 24 * 3600),
    ("hour", 3600),
    ("minute", 60),
    ("second", 1),
)


def parse_timestamp(value: str) -> datetime:
    """Parse a Redmine ISO 8601 timestamp (``2024-01-01T12:00:00Z``) into an aware datetime."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def time_difference_as_text(moment: datetime, now: datetime | None = None) -> str:
    """Describe the distance between ``moment`` and ``now`` in its largest whole unit.

    Examples:
        >>> start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> time_difference_as_text(start, start.replace(hour=3))
        '3 hours'
    """
    now = now or datetime.now(timezone.utc)
    seconds = int(abs((now - moment).total_seconds()))

    for unit, size in _UNITS:
        count = seconds // size
        if count >= 1:
            return f"{count} {unit}" if count == 1 else f"{count} {unit}s"
    return "0 seconds"


def ellipsize(text: str, max_length: int) -> str:
    """Shorten ``text`` to ``max_length`` characters, marking the cut with ``...``."""
    if len(text) <= max_length:
        return text
    if max_length <= 3:
        return text[:max_length]
    return text[: max_length - 3] + "..."


def unquote(value: str) -> str:
    """Strip one pair of surrounding double quotes, as kept by option and key/value parsing."""
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value
