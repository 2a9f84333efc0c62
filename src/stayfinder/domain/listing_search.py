"""Listing search pipeline.

Filters run in a fixed order (location, guests, price, type, rating,
amenities, instant book), then a stable sort, then pagination. Every step
returns a new list; the input collection is never mutated.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence

from stayfinder.domain.listing import (
    FilterParams,
    Listing,
    SearchParams,
    SortOption,
)


@dataclass(frozen=True, slots=True)
class SearchPage:
    items: list[Listing]
    total_count: int
    total_pages: int


def filter_by_location(listings: list[Listing], location: str | None) -> list[Listing]:
    if not location:
        return listings
    needle = location.lower()
    return [
        listing
        for listing in listings
        if needle in listing.city.lower() or needle in listing.country.lower()
    ]


def filter_by_guests(listings: list[Listing], guests: int | None) -> list[Listing]:
    if guests is None:
        return listings
    return [listing for listing in listings if listing.max_guests >= guests]


def filter_by_price(
    listings: list[Listing], price_min: int | None, price_max: int | None
) -> list[Listing]:
    if price_min is not None:
        listings = [listing for listing in listings if listing.price_per_night >= price_min]
    if price_max is not None:
        listings = [listing for listing in listings if listing.price_per_night <= price_max]
    return listings


def filter_by_type(listings: list[Listing], types: Sequence[str]) -> list[Listing]:
    if not types:
        return listings
    wanted = set(types)
    return [listing for listing in listings if listing.type.value in wanted]


def filter_by_rating(listings: list[Listing], min_rating: float | None) -> list[Listing]:
    if min_rating is None:
        return listings
    return [listing for listing in listings if listing.rating >= min_rating]


def filter_by_amenities(listings: list[Listing], amenities: Sequence[str]) -> list[Listing]:
    # AND semantics: every requested amenity must be present
    if not amenities:
        return listings
    wanted = set(amenities)
    return [listing for listing in listings if wanted.issubset(listing.amenities)]


def filter_by_instant_book(listings: list[Listing], instant_book: bool) -> list[Listing]:
    if not instant_book:
        return listings
    return [listing for listing in listings if listing.instant_book is True]


# (key, descending) per sort option; sorted() is stable in both directions
_SORT_KEYS: dict[SortOption, tuple[Callable[[Listing], float], bool]] = {
    SortOption.PRICE_ASC: (lambda listing: listing.price_per_night, False),
    SortOption.RATING: (lambda listing: listing.rating, True),
    SortOption.REVIEWS: (lambda listing: listing.reviews_count, True),
}


def sort_listings(listings: list[Listing], sort: SortOption) -> list[Listing]:
    if sort not in _SORT_KEYS:
        # recommended: catalog order
        return list(listings)
    key, descending = _SORT_KEYS[sort]
    return sorted(listings, key=key, reverse=descending)


def paginate(listings: list[Listing], page: int, page_size: int) -> SearchPage:
    total_count = len(listings)
    total_pages = math.ceil(total_count / page_size)

    if page < 1:
        return SearchPage(items=[], total_count=total_count, total_pages=total_pages)

    start = (page - 1) * page_size
    end = page * page_size

    return SearchPage(
        items=listings[start:end],
        total_count=total_count,
        total_pages=total_pages,
    )


def search_listings(
    listings: Sequence[Listing],
    search: SearchParams,
    filters: FilterParams,
    sort: SortOption = SortOption.RECOMMENDED,
    page: int = 1,
    page_size: int = 12,
) -> SearchPage:
    """
    Apply the full filter -> sort -> paginate pipeline.

    Trusts that ``filters`` and paging have been validated by the caller.

    Args:
        listings: Catalog, in catalog order
        search: Coarse search intent (location, guests)
        filters: Refinements (AND semantics across all of them)
        sort: Ordering of the filtered result
        page: 1-based page number; pages past the end are empty
        page_size: Items per page

    Returns:
        SearchPage with the requested slice and totals before paging
    """
    result = list(listings)

    result = filter_by_location(result, search.location)
    result = filter_by_guests(result, search.guests)
    result = filter_by_price(result, filters.price_min, filters.price_max)
    result = filter_by_type(result, filters.type)
    result = filter_by_rating(result, filters.min_rating)
    result = filter_by_amenities(result, filters.amenities)
    result = filter_by_instant_book(result, filters.instant_book)

    result = sort_listings(result, SortOption(sort))

    return paginate(result, page, page_size)
