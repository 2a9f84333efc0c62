from __future__ import annotations

from dataclasses import dataclass, field

from stayfinder.domain.listing import (
    FilterParams,
    Listing,
    Paging,
    SearchParams,
    SortOption,
)
from stayfinder.ports.listing_catalog_repository import ListingCatalogRepository


@dataclass(frozen=True, slots=True)
class SearchListingsRequest:
    search: SearchParams = field(default_factory=SearchParams)
    filters: FilterParams = field(default_factory=FilterParams)
    sort: SortOption = SortOption.RECOMMENDED
    paging: Paging = field(default_factory=Paging)


@dataclass(frozen=True, slots=True)
class SearchListingsResponse:
    listings: list[Listing]
    total_count: int  # Matching listings before paging
    total_pages: int


class SearchListings:
    """
    Listing search with filters, sorting and pagination.

    This use case validates filter and paging parameters and delegates the
    pipeline to the repository adapter.
    """

    def __init__(self, listing_catalog_repository: ListingCatalogRepository) -> None:
        self._repository = listing_catalog_repository

    def execute(self, request: SearchListingsRequest) -> SearchListingsResponse:
        """
        Execute catalog search.

        Args:
            request: Search intent, filters, sort and paging

        Returns:
            Response containing the page of listings and totals

        Raises:
            PagingValidationError: If paging parameters are invalid
            FilterValidationError: If filter parameters are invalid
        """
        request.filters.validate()
        request.paging.validate()

        page = self._repository.search(
            search=request.search,
            filters=request.filters,
            sort=request.sort,
            paging=request.paging,
        )

        return SearchListingsResponse(
            listings=page.items,
            total_count=page.total_count,
            total_pages=page.total_pages,
        )
