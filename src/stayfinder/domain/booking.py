from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from stayfinder.domain.errors import ValidationError
from stayfinder.domain.listing import Listing


class InvalidBookingInput(ValidationError):
    """Raised when a booking request is rejected before anything is stored."""

    pass


class BookingStatus(str, Enum):
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    # Reserved; never assigned by this package.
    COMPLETED = "completed"


@dataclass(frozen=True, slots=True)
class Booking:
    id: str
    listing_id: str
    listing: Listing  # snapshot taken at booking time
    check_in: date
    check_out: date
    guests: int
    total_price: Decimal
    status: BookingStatus
    created_at: datetime

    @property
    def is_cancelled(self) -> bool:
        return self.status is BookingStatus.CANCELLED
