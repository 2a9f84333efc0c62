from fastapi import APIRouter, Depends, Query, Request

from stayfinder.domain.listing import ITEMS_PER_PAGE, MAX_PAGE_SIZE, SortOption
from stayfinder.entrypoints.http.dependencies import (
    get_compute_price_quote_use_case,
    get_get_listing_by_id_use_case,
    get_search_listings_use_case,
)
from stayfinder.entrypoints.http.dtos.listings import (
    ListingDetailDTO,
    ListingsPageDTO,
    QuoteRequestDTO,
    QuoteResponseDTO,
)
from stayfinder.entrypoints.http.error_responses import ErrorResponse
from stayfinder.entrypoints.http.mappers.listing_mapper import ListingMapper
from stayfinder.entrypoints.http.mappers.quote_mapper import QuoteMapper
from stayfinder.use_cases.compute_price_quote import ComputePriceQuote
from stayfinder.use_cases.get_listing_by_id import GetListingById, GetListingByIdRequest
from stayfinder.use_cases.search_listings import SearchListings


router = APIRouter(tags=["Listings"])


@router.get(
    "/listings",
    response_model=ListingsPageDTO,
    summary="Search listings",
    description="""
    Search the catalog with the web client's URL query format.

    ## Search keys
    `location`, `checkIn`, `checkOut`, `guests`

    ## Filter keys
    `priceMin`, `priceMax`, `type` (comma list), `minRating`,
    `amenities` (comma list, all required), `instantBook=true`

    ## Sorting and paging
    `sort` (recommended, price_asc, rating, reviews), `page` (1-based),
    `pageSize` (default 12). Pages past the end are empty.

    ## Example
    ```
    GET /v1/listings?location=Paris&guests=2&amenities=wifi,kitchen&sort=price_asc
    ```
    """,
    responses={
        422: {"model": ErrorResponse, "description": "Invalid filters or paging"},
    },
)
def search_listings(
    request: Request,
    sort: SortOption = Query(default=SortOption.RECOMMENDED),
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=ITEMS_PER_PAGE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
    use_case: SearchListings = Depends(get_search_listings_use_case),
) -> ListingsPageDTO:
    """Search endpoint following parse → execute → map → return pattern."""
    domain_request = ListingMapper.to_domain_request(
        request.url.query, sort=sort, page=page, page_size=page_size
    )

    result = use_case.execute(domain_request)

    return ListingMapper.to_page_response(result, page=page, page_size=page_size)


@router.get(
    "/listings/{listing_id}",
    response_model=ListingDetailDTO,
    summary="Get listing details",
    responses={404: {"model": ErrorResponse, "description": "Listing not found"}},
)
def get_listing(
    listing_id: str,
    use_case: GetListingById = Depends(get_get_listing_by_id_use_case),
) -> ListingDetailDTO:
    result = use_case.execute(GetListingByIdRequest(listing_id=listing_id))
    return ListingMapper.to_detail(result.listing)


@router.post(
    "/listings/{listing_id}/quote",
    response_model=QuoteResponseDTO,
    summary="Price quote for a stay",
    description="""
    Break down the price of a stay.

    - subtotal = pricePerNight × nights
    - cleaning and service fees are flat per stay
    - discount = subtotal × discountPercent / 100
    - total = subtotal + cleaning + service − discount

    Money values are decimal strings. A non-positive night count is returned
    as-is; booking rejects such stays.
    """,
    responses={
        404: {"model": ErrorResponse, "description": "Listing not found"},
        422: {"model": ErrorResponse, "description": "Invalid dates"},
    },
)
def quote_listing(
    listing_id: str,
    payload: QuoteRequestDTO,
    get_listing_use_case: GetListingById = Depends(get_get_listing_by_id_use_case),
    use_case: ComputePriceQuote = Depends(get_compute_price_quote_use_case),
) -> QuoteResponseDTO:
    listing = get_listing_use_case.execute(GetListingByIdRequest(listing_id=listing_id)).listing

    quote = use_case.execute(QuoteMapper.to_domain_request(listing, payload))

    return QuoteMapper.to_response(quote)
