"""
Test suite for BookingService.

Test sections:
- Create: validation and persistence
- Cancel: status transitions
- Projections: upcoming and past
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal

import pytest

from stayfinder.adapters.in_memory_storage_medium import InMemoryStorageMedium
from stayfinder.adapters.persistent_store import PersistentStore
from stayfinder.domain.booking import BookingStatus, InvalidBookingInput
from stayfinder.domain.listing import Listing
from stayfinder.ports.storage_medium import StorageEvent
from stayfinder.use_cases.bookings import BookingService


class FakeClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 1, 5, 10, 30))


@pytest.fixture()
def listing(make_listing) -> Listing:
    return make_listing("lst-001", max_guests=2)


@pytest.fixture()
def service(store: PersistentStore, clock: FakeClock) -> BookingService:
    return BookingService(store, clock=clock)


# ==============================================================================
# Create
# ==============================================================================


def test_create_stores_confirmed_booking(service: BookingService, listing: Listing) -> None:
    booking = service.create(listing, date(2026, 1, 10), date(2026, 1, 12), 2, Decimal("215.00"))

    assert booking.status is BookingStatus.CONFIRMED
    assert booking.listing_id == "lst-001"
    assert booking.listing == listing
    assert booking.total_price == Decimal("215.00")
    assert booking.created_at == datetime(2026, 1, 5, 10, 30)
    assert service.all() == [booking]
    assert service.get(booking.id) == booking


def test_bookings_keep_creation_order(service: BookingService, listing: Listing) -> None:
    later = service.create(listing, date(2026, 3, 1), date(2026, 3, 2), 1, Decimal("100"))
    sooner = service.create(listing, date(2026, 2, 1), date(2026, 2, 2), 1, Decimal("100"))

    assert [b.id for b in service.all()] == [later.id, sooner.id]
    assert later.id != sooner.id


def test_check_in_today_is_allowed(service: BookingService, listing: Listing) -> None:
    booking = service.create(listing, date(2026, 1, 5), date(2026, 1, 6), 1, Decimal("100"))

    assert service.get(booking.id) is not None


@pytest.mark.parametrize(
    "check_in, check_out, guests, field, code",
    [
        (date(2026, 1, 4), date(2026, 1, 6), 1, "checkIn", "INVALID_DATE"),
        (date(2026, 1, 10), date(2026, 1, 10), 1, "checkOut", "INVALID_RANGE"),
        (date(2026, 1, 10), date(2026, 1, 8), 1, "checkOut", "INVALID_RANGE"),
        (date(2026, 1, 10), date(2026, 1, 12), 0, "guests", "INVALID_VALUE"),
    ],
)
def test_invalid_input_is_rejected_and_not_stored(
    service: BookingService,
    listing: Listing,
    check_in: date,
    check_out: date,
    guests: int,
    field: str,
    code: str,
) -> None:
    with pytest.raises(InvalidBookingInput) as exc_info:
        service.create(listing, check_in, check_out, guests, Decimal("100"))

    assert [(e["field"], e["code"]) for e in exc_info.value.errors] == [(field, code)]
    assert service.all() == []


def test_too_many_guests_names_the_limit(service: BookingService, listing: Listing) -> None:
    with pytest.raises(InvalidBookingInput) as exc_info:
        service.create(listing, date(2026, 1, 10), date(2026, 1, 12), 3, Decimal("100"))

    assert exc_info.value.errors == [
        {"field": "guests", "message": "Maximum 2 guests allowed", "code": "INVALID_VALUE"}
    ]


def test_all_errors_are_reported_together(service: BookingService, listing: Listing) -> None:
    with pytest.raises(InvalidBookingInput) as exc_info:
        service.create(listing, date(2026, 1, 1), date(2026, 1, 1), 0, Decimal("0"))

    assert [e["field"] for e in exc_info.value.errors] == ["checkIn", "checkOut", "guests"]


def test_booking_returned_even_when_storage_is_full(
    listing: Listing, clock: FakeClock, caplog: pytest.LogCaptureFixture
) -> None:
    store = PersistentStore(InMemoryStorageMedium(quota_bytes=32), context_id="tab-a")
    service = BookingService(store, clock=clock)

    with caplog.at_level(logging.WARNING):
        booking = service.create(listing, date(2026, 1, 10), date(2026, 1, 12), 2, Decimal("215"))

    assert booking.status is BookingStatus.CONFIRMED
    assert service.all() == []
    assert "Booking confirmed but not persisted" in caplog.text


# ==============================================================================
# Cancel
# ==============================================================================


def test_cancel_marks_booking_cancelled(service: BookingService, listing: Listing) -> None:
    booking = service.create(listing, date(2026, 1, 10), date(2026, 1, 12), 2, Decimal("215"))

    assert service.cancel(booking.id) is True

    cancelled = service.get(booking.id)
    assert cancelled is not None
    assert cancelled.status is BookingStatus.CANCELLED
    assert cancelled.is_cancelled


def test_cancel_twice_or_unknown_is_a_no_op(service: BookingService, listing: Listing) -> None:
    booking = service.create(listing, date(2026, 1, 10), date(2026, 1, 12), 2, Decimal("215"))
    service.cancel(booking.id)

    assert service.cancel(booking.id) is False
    assert service.cancel("unknown") is False


def test_cancel_leaves_other_bookings_untouched(service: BookingService, listing: Listing) -> None:
    first = service.create(listing, date(2026, 1, 10), date(2026, 1, 12), 2, Decimal("215"))
    second = service.create(listing, date(2026, 2, 10), date(2026, 2, 12), 2, Decimal("215"))

    service.cancel(first.id)

    assert service.get(second.id) == second


# ==============================================================================
# Projections
# ==============================================================================


def test_upcoming_and_past(service: BookingService, listing: Listing, clock: FakeClock) -> None:
    a = service.create(listing, date(2026, 1, 10), date(2026, 1, 12), 1, Decimal("1"))
    b = service.create(listing, date(2026, 1, 6), date(2026, 1, 8), 1, Decimal("1"))
    c = service.create(listing, date(2026, 2, 1), date(2026, 2, 3), 1, Decimal("1"))
    d = service.create(listing, date(2026, 1, 20), date(2026, 1, 22), 1, Decimal("1"))
    service.cancel(c.id)

    clock.now = datetime(2026, 1, 9, 23, 59)

    assert [x.id for x in service.upcoming()] == [a.id, d.id]
    assert [x.id for x in service.past()] == [c.id, b.id]


def test_stay_in_progress_is_neither_upcoming_nor_past(
    service: BookingService, listing: Listing, clock: FakeClock
) -> None:
    service.create(listing, date(2026, 1, 6), date(2026, 1, 9), 1, Decimal("1"))

    clock.now = datetime(2026, 1, 7, 8, 0)

    assert service.upcoming() == []
    assert service.past() == []


def test_booking_in_one_tab_notifies_another(
    medium: InMemoryStorageMedium, listing: Listing, clock: FakeClock
) -> None:
    tab_a = BookingService(PersistentStore(medium, context_id="tab-a"), clock=clock)
    tab_b = BookingService(PersistentStore(medium, context_id="tab-b"), clock=clock)
    events: list[StorageEvent] = []
    tab_b.subscribe(events.append)

    booking = tab_a.create(listing, date(2026, 1, 10), date(2026, 1, 12), 2, Decimal("215"))

    assert [e.origin for e in events] == ["tab-a"]
    assert tab_b.get(booking.id) == booking
