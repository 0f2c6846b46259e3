"""Relative time formatting for API responses."""

from datetime import datetime, timezone

_UNITS = (
    ("year", 365 * 24 * 3600),
    ("month", 30 * 24 * 3600),
    ("week", 7 * 24 * 3600),
    ("day", 24 * 3600),
    ("hour", 3600),
    ("minute", 60),
    ("second", 1),
)


def diff_for_humans(moment: datetime, now: datetime | None = None) -> str:
    """Describe a moment relative to now, e.g. "5 minutes ago".

    Naive datetimes are treated as UTC.

    Args:
        moment: The time to describe
        now: Reference time (defaults to the current UTC time)

    Returns:
        "just now" within a second, otherwise "<n> <unit>(s) ago" for the
        past or "<n> <unit>(s) from now" for the future
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    delta = int((now - moment).total_seconds())
    seconds = abs(delta)
    if seconds < 1:
        return "just now"

    for unit, size in _UNITS:
        if seconds >= size:
            count = seconds // size
            break

    label = unit if count == 1 else f"{unit}s"
    suffix = "ago" if delta > 0 else "from now"
    return f"{count} {label} {suffix}"
