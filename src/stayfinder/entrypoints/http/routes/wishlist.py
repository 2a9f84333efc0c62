from fastapi import APIRouter, Depends, Query

from stayfinder.codecs.query_params import decode_wishlist_token, encode_wishlist_share
from stayfinder.domain.errors import NotFoundError
from stayfinder.entrypoints.http.dependencies import (
    get_get_listings_by_ids_use_case,
    get_share_base_url,
)
from stayfinder.entrypoints.http.dtos.wishlist import (
    SharedWishlistDTO,
    ShareWishlistRequestDTO,
    ShareWishlistResponseDTO,
)
from stayfinder.entrypoints.http.error_responses import ErrorResponse
from stayfinder.entrypoints.http.mappers.listing_mapper import ListingMapper
from stayfinder.use_cases.get_listings_by_ids import GetListingsByIds, GetListingsByIdsRequest


router = APIRouter(tags=["Wishlist"])


@router.post(
    "/wishlist/share",
    response_model=ShareWishlistResponseDTO,
    summary="Build a wishlist share link",
)
def share_wishlist(
    payload: ShareWishlistRequestDTO,
    base_url: str = Depends(get_share_base_url),
) -> ShareWishlistResponseDTO:
    return ShareWishlistResponseDTO(url=encode_wishlist_share(payload.ids, base_url))


@router.get(
    "/wishlist/shared",
    response_model=SharedWishlistDTO,
    summary="Open a shared wishlist",
    description="""
    Decode the `shared` token of a share link and resolve its ids against
    the catalog. `ids` echoes the token; `items` holds the listings that
    still exist, in wishlist order.
    """,
    responses={
        404: {"model": ErrorResponse, "description": "Token is missing or does not decode"}
    },
)
def get_shared_wishlist(
    shared: str = Query(default=""),
    use_case: GetListingsByIds = Depends(get_get_listings_by_ids_use_case),
) -> SharedWishlistDTO:
    ids = decode_wishlist_token(shared) if shared else None

    if ids is None:
        raise NotFoundError(resource="Shared wishlist")

    result = use_case.execute(GetListingsByIdsRequest(listing_ids=ids))

    return SharedWishlistDTO(
        ids=ids, items=[ListingMapper.to_summary(listing) for listing in result.listings]
    )
