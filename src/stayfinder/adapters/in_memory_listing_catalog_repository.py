from __future__ import annotations

from typing import Sequence

from stayfinder.domain.listing import FilterParams, Listing, Paging, SearchParams, SortOption
from stayfinder.domain.listing_search import SearchPage, search_listings
from stayfinder.ports.listing_catalog_repository import ListingCatalogRepository


class InMemoryListingCatalogRepository(ListingCatalogRepository):
    """
    Catalog held in memory, loaded once from the external data source.

    - Keeps listings in catalog order (the "recommended" order)
    - Applies the search pipeline from domain.listing_search
    - Returns total_count of matching listings before paging
    """

    def __init__(self, listings: Sequence[Listing]) -> None:
        self._listings = tuple(listings)
        self._by_id = {listing.id: listing for listing in self._listings}

    def search(
        self,
        search: SearchParams,
        filters: FilterParams,
        sort: SortOption,
        paging: Paging,
    ) -> SearchPage:
        # Trust that UseCase has validated inputs (contract programming)
        return search_listings(
            self._listings,
            search,
            filters,
            sort=sort,
            page=paging.page,
            page_size=paging.page_size,
        )

    def get_by_id(self, listing_id: str) -> Listing | None:
        return self._by_id.get(listing_id)

    def get_many(self, listing_ids: list[str]) -> list[Listing]:
        return [self._by_id[i] for i in listing_ids if i in self._by_id]
