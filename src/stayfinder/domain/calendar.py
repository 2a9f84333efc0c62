from __future__ import annotations

from datetime import date, datetime, timezone

PRODUCT_ID = "-//StayFinder//Booking//EN"
UID_DOMAIN = "stayfinder.app"


def _utc_timestamp(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def build_ics(
    title: str,
    location: str,
    check_in: date,
    check_out: date,
    description: str,
    now: datetime,
) -> str:
    """
    Render a single all-day VEVENT spanning the stay.

    Dates are emitted as DATE values (no time, no timezone), so the event
    covers the same calendar days wherever it is imported. ``now`` must be
    timezone-aware; it feeds the UID and the UTC DTSTAMP.
    """
    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{PRODUCT_ID}",
        "BEGIN:VEVENT",
        f"UID:{int(now.timestamp() * 1000)}@{UID_DOMAIN}",
        f"DTSTAMP:{_utc_timestamp(now)}",
        f"DTSTART;VALUE=DATE:{check_in.strftime('%Y%m%d')}",
        f"DTEND;VALUE=DATE:{check_out.strftime('%Y%m%d')}",
        f"SUMMARY:{title}",
        f"LOCATION:{location}",
        "DESCRIPTION:" + description.replace("\n", "\\n"),
        "END:VEVENT",
        "END:VCALENDAR",
    ]
    return "\n".join(lines)
