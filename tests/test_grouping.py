"""Tests for recency grouping of journal entries."""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from agencyos.journal.grouping import group_by_recency, parse_instant

NOW = datetime(2024, 1, 10, 12, 0, 0, tzinfo=timezone.utc)


def _labels(groups):
    return {g.label: g.entries for g in groups}


def test_bucket_boundaries():
    entries = [
        {"id": "today", "created_at": "2024-01-10T00:00:01Z"},
        {"id": "yesterday", "created_at": "2024-01-09T23:59:59Z"},
        {"id": "week", "created_at": "2024-01-03T00:00:00Z"},
        {"id": "older", "created_at": "2024-01-02T23:59:59Z"},
    ]
    groups = group_by_recency(entries, NOW)
    assert [g.label for g in groups] == ["Today", "Yesterday", "This Week", "Older"]
    assert [[e["id"] for e in g.entries] for g in groups] == [["today"], ["yesterday"], ["week"], ["older"]]


def test_empty_buckets_omitted_and_order_preserved():
    entries = [
        {"id": "b", "created_at": "2024-01-10T09:00:00Z"},
        {"id": "old", "created_at": "2023-06-01T09:00:00Z"},
        {"id": "a", "created_at": "2024-01-10T08:00:00Z"},
    ]
    groups = group_by_recency(entries, NOW)
    assert [g.label for g in groups] == ["Today", "Older"]
    assert [e["id"] for e in _labels(groups)["Today"]] == ["b", "a"]


def test_no_entries():
    assert group_by_recency([], NOW) == []


def test_attribute_entries_and_datetimes():
    entry = SimpleNamespace(created_at=NOW - timedelta(days=1))
    groups = group_by_recency([entry], NOW)
    assert groups[0].label == "Yesterday"
    assert groups[0].entries == [entry]


def test_custom_key():
    entries = [("note", "2024-01-05T10:00:00+00:00")]
    groups = group_by_recency(entries, NOW, key=lambda e: e[1])
    assert groups[0].label == "This Week"


def test_days_follow_now_timezone():
    eastern = timezone(timedelta(hours=-5))
    now = datetime(2024, 1, 10, 12, 0, 0, tzinfo=eastern)
    # 03:00 UTC on the 10th is still the 9th in UTC-5
    groups = group_by_recency([{"created_at": "2024-01-10T03:00:00Z"}], now)
    assert groups[0].label == "Yesterday"


def test_future_entries_fall_in_this_week():
    groups = group_by_recency([{"created_at": "2024-01-12T08:00:00Z"}], NOW)
    assert groups[0].label == "This Week"


def test_parse_instant():
    assert parse_instant("2024-01-10T00:00:00Z") == datetime(2024, 1, 10, tzinfo=timezone.utc)
    assert parse_instant(NOW) is NOW
