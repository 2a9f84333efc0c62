"""
Dependency injection for FastAPI routes.

The catalog is a read-only dataset loaded once per process, so the
repository is a cached singleton. Use cases are cheap and built per request.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from stayfinder.adapters.in_memory_listing_catalog_repository import (
    InMemoryListingCatalogRepository,
)
from stayfinder.adapters.json_listing_source import load_listings
from stayfinder.infra.config import listings_path, share_base_url
from stayfinder.ports.listing_catalog_repository import ListingCatalogRepository
from stayfinder.use_cases.compute_price_quote import ComputePriceQuote
from stayfinder.use_cases.get_listing_by_id import GetListingById
from stayfinder.use_cases.get_listings_by_ids import GetListingsByIds
from stayfinder.use_cases.search_listings import SearchListings


@lru_cache(maxsize=1)
def get_listing_repository() -> ListingCatalogRepository:
    """
    Catalog repository over the configured dataset file.

    Loaded on first use and shared by all requests.
    """
    return InMemoryListingCatalogRepository(load_listings(listings_path()))


def get_search_listings_use_case(
    repository: ListingCatalogRepository = Depends(get_listing_repository),
) -> SearchListings:
    return SearchListings(listing_catalog_repository=repository)


def get_get_listing_by_id_use_case(
    repository: ListingCatalogRepository = Depends(get_listing_repository),
) -> GetListingById:
    return GetListingById(listing_catalog_repository=repository)


def get_get_listings_by_ids_use_case(
    repository: ListingCatalogRepository = Depends(get_listing_repository),
) -> GetListingsByIds:
    return GetListingsByIds(listing_catalog_repository=repository)


def get_compute_price_quote_use_case() -> ComputePriceQuote:
    return ComputePriceQuote()


def get_share_base_url() -> str:
    return share_base_url()
