"""Unit tests for relative time formatting."""

from datetime import datetime, timedelta, timezone

import pytest

from dojo.util.timefmt import diff_for_humans

NOW = datetime(2026, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        (timedelta(0), "just now"),
        (timedelta(milliseconds=400), "just now"),
        (timedelta(seconds=1), "1 second ago"),
        (timedelta(seconds=45), "45 seconds ago"),
        (timedelta(minutes=1), "1 minute ago"),
        (timedelta(minutes=5, seconds=30), "5 minutes ago"),
        (timedelta(hours=3), "3 hours ago"),
        (timedelta(days=1), "1 day ago"),
        (timedelta(days=13), "1 week ago"),
        (timedelta(days=60), "2 months ago"),
        (timedelta(days=400), "1 year ago"),
    ],
)
def test_past(delta, expected):
    assert diff_for_humans(NOW - delta, now=NOW) == expected


def test_future():
    assert diff_for_humans(NOW + timedelta(hours=2), now=NOW) == "2 hours from now"


def test_naive_datetimes_are_utc():
    naive = (NOW - timedelta(minutes=10)).replace(tzinfo=None)
    assert diff_for_humans(naive, now=NOW) == "10 minutes ago"
