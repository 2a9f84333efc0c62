"""Calendar helpers.

All comparisons are date-only: a stay is a pair of calendar days and
time-of-day never takes part in any decision.
"""

from __future__ import annotations

from datetime import date, datetime


def nights_between(check_in: date, check_out: date) -> int:
    """Whole calendar days from check_in to check_out (may be <= 0)."""
    return (check_out - check_in).days


def local_today(now: datetime) -> date:
    """Calendar day of ``now`` in its own (local) timezone."""
    return now.date()


def is_upcoming(check_in: date, today: date) -> bool:
    """A stay is upcoming when it starts today or later."""
    return check_in >= today


def is_past(check_out: date, today: date) -> bool:
    """A stay is past once its checkout day has fully elapsed."""
    return check_out < today
