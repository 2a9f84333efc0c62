"""Get listing by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from stayfinder.domain.errors import NotFoundError
from stayfinder.domain.listing import Listing
from stayfinder.ports.listing_catalog_repository import ListingCatalogRepository


@dataclass(frozen=True, slots=True)
class GetListingByIdRequest:
    listing_id: str


@dataclass(frozen=True, slots=True)
class GetListingByIdResponse:
    listing: Listing


class GetListingById:
    """Retrieve a single listing; raises NotFoundError when it does not exist."""

    def __init__(self, listing_catalog_repository: ListingCatalogRepository) -> None:
        self._repository = listing_catalog_repository

    def execute(self, request: GetListingByIdRequest) -> GetListingByIdResponse:
        listing = self._repository.get_by_id(request.listing_id)

        if listing is None:
            raise NotFoundError(resource="Listing", identifier=request.listing_id)

        return GetListingByIdResponse(listing=listing)
