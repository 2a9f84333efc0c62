from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from stayfinder.domain.calendar import build_ics
from stayfinder.domain.dates import is_past, is_upcoming, local_today, nights_between

TODAY = date(2026, 3, 15)


# ==============================================================================
# Date helpers
# ==============================================================================


def test_nights_between_counts_calendar_days() -> None:
    assert nights_between(date(2026, 1, 10), date(2026, 1, 12)) == 2


def test_nights_between_can_be_zero_or_negative() -> None:
    assert nights_between(date(2026, 1, 10), date(2026, 1, 10)) == 0
    assert nights_between(date(2026, 1, 12), date(2026, 1, 10)) == -2


def test_nights_between_crosses_month_and_leap_day() -> None:
    assert nights_between(date(2028, 2, 27), date(2028, 3, 1)) == 3


def test_local_today_ignores_time_of_day() -> None:
    assert local_today(datetime(2026, 3, 15, 23, 59, 59)) == TODAY
    assert local_today(datetime(2026, 3, 15, 0, 0, 0)) == TODAY


def test_today_is_upcoming() -> None:
    assert is_upcoming(TODAY, TODAY) is True


def test_yesterday_is_not_upcoming() -> None:
    assert is_upcoming(TODAY - timedelta(days=1), TODAY) is False


def test_checkout_today_is_not_past() -> None:
    assert is_past(TODAY, TODAY) is False


def test_checkout_yesterday_is_past() -> None:
    assert is_past(TODAY - timedelta(days=1), TODAY) is True


# ==============================================================================
# Calendar export
# ==============================================================================


def test_build_ics_uses_date_values_and_utc_stamp() -> None:
    now = datetime(2026, 1, 5, 14, 30, 0, tzinfo=timezone(timedelta(hours=4)))

    content = build_ics(
        "Stay at Loft", "Yerevan, Armenia", date(2026, 1, 10), date(2026, 1, 12), "Line1\nLine2", now
    )
    lines = content.split("\n")

    assert lines[0] == "BEGIN:VCALENDAR"
    assert lines[-1] == "END:VCALENDAR"
    assert "DTSTAMP:20260105T103000Z" in lines
    assert "DTSTART;VALUE=DATE:20260110" in lines
    assert "DTEND;VALUE=DATE:20260112" in lines
    assert "SUMMARY:Stay at Loft" in lines
    assert "LOCATION:Yerevan, Armenia" in lines
    assert "DESCRIPTION:Line1\\nLine2" in lines


def test_build_ics_uid_is_derived_from_now() -> None:
    now = datetime(2026, 1, 5, 10, 30, 0, tzinfo=timezone.utc)

    content = build_ics("t", "l", date(2026, 1, 10), date(2026, 1, 11), "", now)

    assert f"UID:{int(now.timestamp() * 1000)}@stayfinder.app" in content.split("\n")
