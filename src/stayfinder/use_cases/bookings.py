from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from typing import Callable

from stayfinder.adapters.persistent_store import PersistentStore, Unsubscribe
from stayfinder.domain.booking import Booking, BookingStatus, InvalidBookingInput
from stayfinder.domain.dates import is_past, is_upcoming, local_today, nights_between
from stayfinder.domain.listing import Listing
from stayfinder.ports.storage_medium import StorageListener

logger = logging.getLogger(__name__)

BOOKINGS_KEY = "bookings"

Clock = Callable[[], datetime]


class BookingService:
    """
    Bookings made in this browser profile.

    Storage keeps bookings in creation order and is only ever appended to or
    rewritten in place (cancellation). ``upcoming()`` and ``past()`` are
    projections computed from the stored sequence on every call.
    """

    def __init__(self, store: PersistentStore, clock: Clock = datetime.now) -> None:
        """
        Args:
            store: Persistent store for this context
            clock: Returns the current local time; only its calendar day is
                used for date decisions
        """
        self._store = store
        self._clock = clock

    def all(self) -> list[Booking]:
        return self._store.read(BOOKINGS_KEY, list[Booking], [])

    def get(self, booking_id: str) -> Booking | None:
        return next((b for b in self.all() if b.id == booking_id), None)

    def create(
        self,
        listing: Listing,
        check_in: date,
        check_out: date,
        guests: int,
        total_price: Decimal,
    ) -> Booking:
        """
        Validate and store a new confirmed booking.

        Args:
            listing: Listing being booked; a snapshot is embedded in the booking
            check_in: First night
            check_out: Departure day, strictly after check_in
            guests: Between 1 and listing.max_guests
            total_price: Quoted total, stored as-is

        Returns:
            The stored booking

        Raises:
            InvalidBookingInput: If dates or guest count are invalid; nothing is stored
        """
        now = self._clock()
        self._validate(listing, check_in, check_out, guests, local_today(now))

        booking = Booking(
            id=str(uuid.uuid4()),
            listing_id=listing.id,
            listing=listing,
            check_in=check_in,
            check_out=check_out,
            guests=guests,
            total_price=Decimal(total_price),
            status=BookingStatus.CONFIRMED,
            created_at=now,
        )

        if not self._store.write(BOOKINGS_KEY, [*self.all(), booking]):
            logger.warning(
                "Booking confirmed but not persisted",
                extra={"booking_id": booking.id, "listing_id": listing.id},
            )

        return booking

    def cancel(self, booking_id: str) -> bool:
        """
        Mark a booking as cancelled.

        Unknown ids and bookings that are no longer confirmed are left alone.

        Returns:
            True if a booking changed status
        """
        bookings = self.all()
        changed = False
        updated = []
        for booking in bookings:
            if booking.id == booking_id and booking.status is BookingStatus.CONFIRMED:
                booking = replace(booking, status=BookingStatus.CANCELLED)
                changed = True
            updated.append(booking)

        if not changed:
            return False

        return self._store.write(BOOKINGS_KEY, updated)

    def upcoming(self) -> list[Booking]:
        """Non-cancelled bookings starting today or later, soonest first."""
        today = local_today(self._clock())
        selected = [
            b for b in self.all() if not b.is_cancelled and is_upcoming(b.check_in, today)
        ]
        return sorted(selected, key=lambda b: b.check_in)

    def past(self) -> list[Booking]:
        """Finished or cancelled bookings, most recent check-in first."""
        today = local_today(self._clock())
        selected = [b for b in self.all() if b.is_cancelled or is_past(b.check_out, today)]
        return sorted(selected, key=lambda b: b.check_in, reverse=True)

    def subscribe(self, listener: StorageListener) -> Unsubscribe:
        return self._store.subscribe(BOOKINGS_KEY, listener)

    @staticmethod
    def _validate(
        listing: Listing, check_in: date, check_out: date, guests: int, today: date
    ) -> None:
        errors = []

        if check_in < today:
            errors.append(
                {"field": "checkIn", "message": "Must be today or later", "code": "INVALID_DATE"}
            )
        if nights_between(check_in, check_out) <= 0:
            errors.append(
                {
                    "field": "checkOut",
                    "message": "Must be after checkIn",
                    "code": "INVALID_RANGE",
                }
            )
        if guests < 1:
            errors.append(
                {"field": "guests", "message": "Must be at least 1", "code": "INVALID_VALUE"}
            )
        elif guests > listing.max_guests:
            errors.append(
                {
                    "field": "guests",
                    "message": f"Maximum {listing.max_guests} guests allowed",
                    "code": "INVALID_VALUE",
                }
            )

        if errors:
            raise InvalidBookingInput(errors=errors)
