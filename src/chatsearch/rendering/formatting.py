"""Display strings for row dates, member counts and contact activity."""

from __future__ import annotations

from datetime import UTC, datetime


def _to_utc(iso_str: str) -> datetime | None:
    value = iso_str.strip().replace("Z", "+00:00")
    if not value:
        return None
    try:
        dt = datetime.fromisoformat(value)
    except ValueError:
        return None
    return dt.replace(tzinfo=UTC) if dt.tzinfo is None else dt.astimezone(UTC)


def _format_moment(dt: datetime) -> str:
    """Today or Yesterday with the time, otherwise the full date and time."""
    time_part = dt.strftime("%H:%M")
    days_ago = (datetime.now(tz=UTC).date() - dt.date()).days
    if days_ago == 0:
        return f"Today {time_part}"
    if days_ago == 1:
        return f"Yesterday {time_part}"
    return dt.strftime("%Y-%m-%d %H:%M")


def format_timestamp(seconds: int) -> str:
    """Row date for a unix timestamp in seconds; empty when unset."""
    if seconds <= 0:
        return ""
    return _format_moment(datetime.fromtimestamp(seconds, tz=UTC))


_UNITS = ((365 * 86400, "y"), (30 * 86400, "mo"), (86400, "d"), (3600, "h"), (60, "m"))


def format_relative_time(iso_str: str) -> str:
    """Age of an ISO datetime in its largest whole unit, e.g. "2h ago"."""
    dt = _to_utc(iso_str) if iso_str else None
    if dt is None:
        return iso_str
    seconds = int((datetime.now(tz=UTC) - dt).total_seconds())
    for size, suffix in _UNITS:
        if seconds >= size:
            return f"{seconds // size}{suffix} ago"
    return "just now"


def format_member_count(count: int) -> str:
    return "1 member" if count == 1 else f"{count} members"


def format_last_activity(presence: str, last_green: str) -> str:
    """Last activity line of a contact, preferring live presence."""
    if presence.strip().lower() == "online":
        return "Online"
    relative = format_relative_time(last_green)
    if not relative:
        return ""
    return f"Last seen {relative}"
