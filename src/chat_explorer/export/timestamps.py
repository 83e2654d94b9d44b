"""Human-readable rendering of export timestamps."""

from datetime import datetime
from typing import Optional

UNKNOWN_TIME = "Unknown time"


def parse_timestamp(timestamp: str) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z`` for UTC."""
    candidate = timestamp
    if candidate[-1:] in ('Z', 'z'):
        candidate = candidate[:-1] + '+00:00'

    try:
        return datetime.fromisoformat(candidate)
    except ValueError:
        return None


def format_message_timestamp(timestamp: Optional[str]) -> str:
    """Render a message timestamp in local time with the zone label.

    Blank input yields "Unknown time"; anything unparseable is returned
    trimmed but otherwise untouched.
    """
    trimmed = (timestamp or "").strip()
    if not trimmed:
        return UNKNOWN_TIME

    parsed = parse_timestamp(trimmed)
    if parsed is None:
        return trimmed

    # Naive values are taken as local time
    local = parsed.astimezone()
    local_time = local.strftime("%Y-%m-%d %H:%M:%S")

    timezone_label = (local.tzname() or "").strip()
    if not timezone_label:
        return local_time
    return f"{local_time} {timezone_label}"
