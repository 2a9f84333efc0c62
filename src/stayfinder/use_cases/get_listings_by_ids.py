"""Resolve a list of listing ids, such as a shared wishlist, into listings."""

from __future__ import annotations

from dataclasses import dataclass

from stayfinder.domain.listing import Listing
from stayfinder.ports.listing_catalog_repository import ListingCatalogRepository


@dataclass(frozen=True, slots=True)
class GetListingsByIdsRequest:
    listing_ids: list[str]


@dataclass(frozen=True, slots=True)
class GetListingsByIdsResponse:
    listings: list[Listing]


class GetListingsByIds:
    """
    Look up listings in the order they were requested.

    Ids missing from the catalog are dropped, since a shared link may
    outlive the listings it names.
    """

    def __init__(self, listing_catalog_repository: ListingCatalogRepository) -> None:
        self._repository = listing_catalog_repository

    def execute(self, request: GetListingsByIdsRequest) -> GetListingsByIdsResponse:
        return GetListingsByIdsResponse(listings=self._repository.get_many(request.listing_ids))
