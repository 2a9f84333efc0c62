from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from stayfinder.domain.dates import nights_between
from stayfinder.domain.listing import Listing
from stayfinder.domain.pricing import PriceQuote, QuoteRequest

CENTS = Decimal("0.01")


@dataclass(frozen=True, slots=True)
class ComputePriceQuote:
    """
    Compute a stay's price breakdown using exact decimal arithmetic.

    Rules:
    - nights is the calendar-day difference and is not validated here;
      callers reject non-positive stays before booking
    - cleaning and service fees are flat per stay
    - discount is a percentage of the subtotal, rounded to cents (ROUND_HALF_UP)
    - total = subtotal + cleaning + service - discount
    """

    def execute(self, req: QuoteRequest) -> PriceQuote:
        listing = req.listing
        nights = nights_between(req.check_in, req.check_out)

        subtotal = Decimal(listing.price_per_night) * nights
        cleaning = Decimal(listing.fees.cleaning)
        service = Decimal(listing.fees.service)

        discount_percent = Decimal(listing.fees.discount_percent)
        if discount_percent > 0:
            discount = (subtotal * discount_percent / Decimal("100")).quantize(
                CENTS, rounding=ROUND_HALF_UP
            )
        else:
            discount = Decimal("0")

        total = subtotal + cleaning + service - discount

        return PriceQuote(
            nights=nights,
            subtotal=subtotal,
            cleaning=cleaning,
            service=service,
            discount=discount,
            total=total,
        )


def compute_quote(listing: Listing, check_in: date, check_out: date) -> PriceQuote:
    return ComputePriceQuote().execute(
        QuoteRequest(listing=listing, check_in=check_in, check_out=check_out)
    )
