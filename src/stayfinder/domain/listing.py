from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from stayfinder.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


# ==============================================================================
# Catalog
# ==============================================================================


class PropertyType(str, Enum):
    APARTMENT = "apartment"
    HOUSE = "house"
    HOTEL = "hotel"


class SortOption(str, Enum):
    RECOMMENDED = "recommended"
    PRICE_ASC = "price_asc"
    RATING = "rating"
    REVIEWS = "reviews"


ITEMS_PER_PAGE = 12
MAX_PAGE_SIZE = 200


@dataclass(frozen=True, slots=True)
class Fees:
    cleaning: int = 0
    service: int = 0
    discount_percent: int = 0


@dataclass(frozen=True, slots=True)
class Review:
    id: str
    author_name: str
    rating: float
    posted_on: date
    text: str = ""


@dataclass(frozen=True, slots=True)
class Listing:
    id: str
    title: str
    city: str
    country: str
    type: PropertyType
    price_per_night: int
    rating: float
    reviews_count: int
    max_guests: int
    bedrooms: int
    baths: int
    amenities: tuple[str, ...] = ()
    fees: Fees = field(default_factory=Fees)
    instant_book: bool = False
    reviews: tuple[Review, ...] = ()
    area: str = ""
    description: str = ""
    free_cancellation: bool = False


# ==============================================================================
# Search intent
# ==============================================================================


@dataclass(frozen=True, slots=True)
class SearchParams:
    location: str | None = None
    check_in: date | None = None
    check_out: date | None = None
    guests: int | None = None


@dataclass(frozen=True, slots=True)
class FilterParams:
    price_min: int | None = None
    price_max: int | None = None
    type: tuple[str, ...] = ()
    min_rating: float | None = None
    amenities: tuple[str, ...] = ()
    instant_book: bool = False

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        errors = []

        if self.price_min is not None and self.price_min < 0:
            errors.append(
                {"field": "priceMin", "message": "Must be >= 0", "code": "INVALID_VALUE"}
            )
        if self.price_max is not None and self.price_max < 0:
            errors.append(
                {"field": "priceMax", "message": "Must be >= 0", "code": "INVALID_VALUE"}
            )
        if (
            self.price_min is not None
            and self.price_max is not None
            and self.price_min > self.price_max
        ):
            errors.append(
                {
                    "field": "priceMin",
                    "message": "Must be less than or equal to priceMax",
                    "code": "INVALID_RANGE",
                }
            )
        if self.min_rating is not None and not 0 <= self.min_rating <= 5:
            errors.append(
                {"field": "minRating", "message": "Must be between 0 and 5", "code": "INVALID_VALUE"}
            )

        if errors:
            raise FilterValidationError(errors=errors)


@dataclass(frozen=True, slots=True)
class Paging:
    page: int = 1
    page_size: int = ITEMS_PER_PAGE

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page < 1:
            raise PagingValidationError("page must be >= 1")
        if self.page_size <= 0:
            raise PagingValidationError("page_size must be > 0")
        if self.page_size > MAX_PAGE_SIZE:
            raise PagingValidationError(f"page_size must be <= {MAX_PAGE_SIZE}")
