from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from stayfinder.domain.listing import Listing


@dataclass(frozen=True, slots=True)
class QuoteRequest:
    listing: Listing
    check_in: date
    check_out: date


@dataclass(frozen=True, slots=True)
class PriceQuote:
    nights: int
    subtotal: Decimal
    cleaning: Decimal
    service: Decimal
    discount: Decimal
    total: Decimal
