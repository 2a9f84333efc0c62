"""Static listing dataset loader.

The catalog is an external, read-only input: a JSON array of camelCase
listing records. Records are validated with pydantic at the boundary and
converted to frozen domain entities.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from stayfinder.domain.listing import Fees, Listing, PropertyType, Review

logger = logging.getLogger(__name__)


class _SourceModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class FeesRecord(_SourceModel):
    cleaning: int = Field(default=0, ge=0)
    service: int = Field(default=0, ge=0)
    discount_percent: int = Field(default=0, ge=0, le=100)


class ReviewRecord(_SourceModel):
    id: str
    author_name: str
    rating: float = Field(ge=0, le=5)
    posted_on: date = Field(alias="date")
    text: str = ""


class ListingRecord(_SourceModel):
    id: str
    title: str
    city: str
    country: str
    area: str = ""
    type: PropertyType
    price_per_night: int = Field(gt=0)
    rating: float = Field(ge=0, le=5)
    reviews_count: int = Field(ge=0)
    max_guests: int = Field(gt=0)
    bedrooms: int = Field(gt=0)
    baths: int = Field(gt=0)
    amenities: list[str] = Field(default_factory=list)
    fees: FeesRecord = Field(default_factory=FeesRecord)
    instant_book: bool = False
    free_cancellation: bool = False
    reviews: list[ReviewRecord] = Field(default_factory=list)
    description: str = ""


_LISTINGS = TypeAdapter(list[ListingRecord])


def to_domain(record: ListingRecord) -> Listing:
    """
    Convert a source record to a domain Listing.

    Args:
        record: Validated source record

    Returns:
        Listing domain entity (amenities de-duplicated, order kept)
    """
    return Listing(
        id=record.id,
        title=record.title,
        city=record.city,
        country=record.country,
        type=record.type,
        price_per_night=record.price_per_night,
        rating=round(record.rating, 2),
        reviews_count=record.reviews_count,
        max_guests=record.max_guests,
        bedrooms=record.bedrooms,
        baths=record.baths,
        amenities=tuple(dict.fromkeys(record.amenities)),
        fees=Fees(
            cleaning=record.fees.cleaning,
            service=record.fees.service,
            discount_percent=record.fees.discount_percent,
        ),
        instant_book=record.instant_book,
        reviews=tuple(
            Review(
                id=review.id,
                author_name=review.author_name,
                rating=review.rating,
                posted_on=review.posted_on,
                text=review.text,
            )
            for review in record.reviews
        ),
        area=record.area,
        description=record.description,
        free_cancellation=record.free_cancellation,
    )


def parse_listings(raw: str | bytes) -> list[Listing]:
    """
    Parse a JSON document holding the listing array.

    Raises:
        pydantic.ValidationError: If the document does not match the schema
    """
    return [to_domain(record) for record in _LISTINGS.validate_json(raw)]


def load_listings(path: str | Path) -> list[Listing]:
    """Load the catalog from a JSON file, in file order."""
    listings = parse_listings(Path(path).read_bytes())
    logger.info("Loaded listing catalog", extra={"path": str(path), "count": len(listings)})
    return listings
