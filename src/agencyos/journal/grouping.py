"""Group journal entries into Today / Yesterday / This Week / Older."""

from datetime import date, datetime, timedelta
from typing import Any, Callable, Iterable

from ..models import EntryGroup

BUCKET_LABELS = ("Today", "Yesterday", "This Week", "Older")


def parse_instant(value: datetime | str) -> datetime:
    """Accept a datetime or an ISO-8601 string (trailing Z allowed)."""
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def entry_instant(entry: Any) -> datetime:
    """Read the creation instant from an attribute or mapping key."""
    if isinstance(entry, dict):
        return parse_instant(entry["created_at"])
    return parse_instant(entry.created_at)


def _local_day(instant: datetime, now: datetime) -> date:
    """Calendar day of instant as seen in now's timezone."""
    if now.tzinfo is not None:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=now.tzinfo)
        return instant.astimezone(now.tzinfo).date()
    if instant.tzinfo is not None:
        instant = instant.astimezone().replace(tzinfo=None)
    return instant.date()


def group_by_recency(
    entries: Iterable[Any],
    now: datetime,
    key: Callable[[Any], datetime | str] | None = None,
) -> list[EntryGroup]:
    """Partition entries into recency buckets relative to now.

    Args:
        entries: Items exposing a creation instant.
        now: Reference time; its timezone defines calendar days.
        key: Optional accessor returning the instant for an entry.

    Returns:
        Non-empty groups in bucket order; entries keep their input order.
    """
    today = now.date()
    yesterday = today - timedelta(days=1)
    week_ago = today - timedelta(days=7)

    buckets: dict[str, list[Any]] = {label: [] for label in BUCKET_LABELS}
    for entry in entries:
        instant = parse_instant(key(entry)) if key else entry_instant(entry)
        day = _local_day(instant, now)

        if day == today:
            buckets["Today"].append(entry)
        elif day == yesterday:
            buckets["Yesterday"].append(entry)
        elif day >= week_ago:
            buckets["This Week"].append(entry)
        else:
            buckets["Older"].append(entry)

    return [EntryGroup(label=label, entries=items) for label, items in buckets.items() if items]
