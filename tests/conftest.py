from __future__ import annotations

from typing import Any, Callable

import pytest

from stayfinder.adapters.in_memory_storage_medium import InMemoryStorageMedium
from stayfinder.adapters.persistent_store import PersistentStore
from stayfinder.domain.listing import Fees, Listing, PropertyType

ListingFactory = Callable[..., Listing]


@pytest.fixture()
def make_listing() -> ListingFactory:
    """Build a Listing with sensible defaults; override any field by keyword."""

    def factory(listing_id: str = "1", **overrides: Any) -> Listing:
        fields: dict[str, Any] = {
            "id": listing_id,
            "title": f"Listing {listing_id}",
            "city": "Paris",
            "country": "France",
            "type": PropertyType.APARTMENT,
            "price_per_night": 100,
            "rating": 4.5,
            "reviews_count": 10,
            "max_guests": 2,
            "bedrooms": 1,
            "baths": 1,
            "amenities": ("wifi",),
            "fees": Fees(cleaning=20, service=15, discount_percent=10),
            "instant_book": False,
        }
        fields.update(overrides)
        return Listing(**fields)

    return factory


@pytest.fixture()
def medium() -> InMemoryStorageMedium:
    return InMemoryStorageMedium()


@pytest.fixture()
def store(medium: InMemoryStorageMedium) -> PersistentStore:
    return PersistentStore(medium, context_id="tab-a")
