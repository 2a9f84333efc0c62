from pydantic import BaseModel, Field

from stayfinder.entrypoints.http.dtos.listings import ListingSummaryDTO


class ShareWishlistRequestDTO(BaseModel):
    ids: list[str] = Field(description="Listing ids in wishlist order", examples=[["a", "b"]])


class ShareWishlistResponseDTO(BaseModel):
    url: str


class SharedWishlistDTO(BaseModel):
    ids: list[str] = Field(description="Ids exactly as decoded from the token")
    items: list[ListingSummaryDTO] = Field(
        description="Listings for the ids still in the catalog, in wishlist order"
    )
