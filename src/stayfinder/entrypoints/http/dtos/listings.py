from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FeesDTO(CamelModel):
    cleaning: int
    service: int
    discount_percent: int


class ReviewDTO(CamelModel):
    id: str
    author_name: str
    rating: float
    date: str
    text: str


class ListingSummaryDTO(CamelModel):
    id: str
    title: str
    city: str
    country: str
    type: str
    price_per_night: int
    rating: float
    reviews_count: int
    max_guests: int
    instant_book: bool


class ListingDetailDTO(ListingSummaryDTO):
    area: str
    description: str
    bedrooms: int
    baths: int
    amenities: list[str]
    fees: FeesDTO
    free_cancellation: bool
    reviews: list[ReviewDTO]


class ListingsPageDTO(CamelModel):
    items: list[ListingSummaryDTO]
    total_count: int
    total_pages: int
    page: int
    page_size: int


class QuoteRequestDTO(CamelModel):
    """Request payload for a price quote."""

    check_in: date = Field(description="First night (ISO date)", examples=["2026-01-10"])
    check_out: date = Field(description="Departure day (ISO date)", examples=["2026-01-12"])

    model_config = ConfigDict(
        json_schema_extra={"example": {"checkIn": "2026-01-10", "checkOut": "2026-01-12"}}
    )


class QuoteResponseDTO(CamelModel):
    """Price breakdown; money values are decimal strings."""

    nights: int
    subtotal: str
    cleaning: str
    service: str
    discount: str
    total: str
