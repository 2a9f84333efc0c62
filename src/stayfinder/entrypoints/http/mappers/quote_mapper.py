from __future__ import annotations

from stayfinder.domain.listing import Listing
from stayfinder.domain.pricing import PriceQuote, QuoteRequest
from stayfinder.entrypoints.http.dtos.listings import QuoteRequestDTO, QuoteResponseDTO


class QuoteMapper:
    """Maps between REST DTOs and domain models for price quotes."""

    @staticmethod
    def to_domain_request(listing: Listing, dto: QuoteRequestDTO) -> QuoteRequest:
        return QuoteRequest(listing=listing, check_in=dto.check_in, check_out=dto.check_out)

    @staticmethod
    def to_response(quote: PriceQuote) -> QuoteResponseDTO:
        """
        Converts a domain PriceQuote to the response DTO.

        Handles Decimal → str conversion at the boundary.
        """
        return QuoteResponseDTO(
            nights=quote.nights,
            subtotal=str(quote.subtotal),
            cleaning=str(quote.cleaning),
            service=str(quote.service),
            discount=str(quote.discount),
            total=str(quote.total),
        )
