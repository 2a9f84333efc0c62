from __future__ import annotations

from stayfinder.codecs.query_params import decode_filters, decode_search
from stayfinder.domain.listing import Listing, Paging, SortOption
from stayfinder.entrypoints.http.dtos.listings import (
    FeesDTO,
    ListingDetailDTO,
    ListingsPageDTO,
    ListingSummaryDTO,
    ReviewDTO,
)
from stayfinder.use_cases.search_listings import (
    SearchListingsRequest,
    SearchListingsResponse,
)


class ListingMapper:
    """Maps between REST DTOs / query strings and domain models for listings."""

    @staticmethod
    def to_domain_request(
        query_string: str, sort: SortOption, page: int, page_size: int
    ) -> SearchListingsRequest:
        """
        Build a search request from the raw URL query.

        Search and filter keys use the same codec as the web client's URLs, so
        a client URL's query can be forwarded unchanged.

        Args:
            query_string: Raw query string of the request
            sort: Parsed sort option
            page: 1-based page number
            page_size: Items per page

        Returns:
            SearchListingsRequest: Complete domain request
        """
        return SearchListingsRequest(
            search=decode_search(query_string),
            filters=decode_filters(query_string),
            sort=sort,
            paging=Paging(page=page, page_size=page_size),
        )

    @staticmethod
    def to_summary(listing: Listing) -> ListingSummaryDTO:
        return ListingSummaryDTO(
            id=listing.id,
            title=listing.title,
            city=listing.city,
            country=listing.country,
            type=listing.type.value,
            price_per_night=listing.price_per_night,
            rating=listing.rating,
            reviews_count=listing.reviews_count,
            max_guests=listing.max_guests,
            instant_book=listing.instant_book,
        )

    @staticmethod
    def to_detail(listing: Listing) -> ListingDetailDTO:
        return ListingDetailDTO(
            **ListingMapper.to_summary(listing).model_dump(),
            area=listing.area,
            description=listing.description,
            bedrooms=listing.bedrooms,
            baths=listing.baths,
            amenities=list(listing.amenities),
            fees=FeesDTO(
                cleaning=listing.fees.cleaning,
                service=listing.fees.service,
                discount_percent=listing.fees.discount_percent,
            ),
            free_cancellation=listing.free_cancellation,
            reviews=[
                ReviewDTO(
                    id=review.id,
                    author_name=review.author_name,
                    rating=review.rating,
                    date=review.posted_on.isoformat(),
                    text=review.text,
                )
                for review in listing.reviews
            ],
        )

    @staticmethod
    def to_page_response(
        result: SearchListingsResponse, page: int, page_size: int
    ) -> ListingsPageDTO:
        """
        Converts a domain search result to a REST page with pagination metadata.

        Args:
            result: Domain search result
            page: Current page (echoed from request)
            page_size: Current page size (echoed from request)
        """
        return ListingsPageDTO(
            items=[ListingMapper.to_summary(listing) for listing in result.listings],
            total_count=result.total_count,
            total_pages=result.total_pages,
            page=page,
            page_size=page_size,
        )
