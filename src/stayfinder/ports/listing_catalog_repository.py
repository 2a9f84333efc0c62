from __future__ import annotations

from abc import ABC, abstractmethod

from stayfinder.domain.listing import FilterParams, Listing, Paging, SearchParams, SortOption
from stayfinder.domain.listing_search import SearchPage


class ListingCatalogRepository(ABC):
    """
    Port for read-only catalog access.

    Contract (Preconditions):
        - filters and paging parameters must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate
        - Implementations never mutate the catalog
    """

    @abstractmethod
    def search(
        self,
        search: SearchParams,
        filters: FilterParams,
        sort: SortOption,
        paging: Paging,
    ) -> SearchPage:
        """
        Search the catalog.

        Args:
            search: Location and guest intent
            filters: Filter criteria (AND semantics) - pre-validated
            sort: Result ordering (stable)
            paging: Pagination parameters - pre-validated

        Returns:
            SearchPage with the requested page and totals before paging
        """
        ...

    @abstractmethod
    def get_by_id(self, listing_id: str) -> Listing | None: ...

    @abstractmethod
    def get_many(self, listing_ids: list[str]) -> list[Listing]:
        """Listings for ``listing_ids`` in the given order; unknown ids are skipped."""
        ...
