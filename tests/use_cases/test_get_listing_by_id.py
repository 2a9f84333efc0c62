from __future__ import annotations

from unittest.mock import Mock

import pytest

from stayfinder.domain.errors import NotFoundError
from stayfinder.ports.listing_catalog_repository import ListingCatalogRepository
from stayfinder.use_cases.get_listing_by_id import GetListingById, GetListingByIdRequest


@pytest.fixture()
def mock_repository() -> Mock:
    return Mock(spec=ListingCatalogRepository)


def test_returns_listing(mock_repository: Mock, make_listing) -> None:
    listing = make_listing("lst-001")
    mock_repository.get_by_id.return_value = listing

    response = GetListingById(mock_repository).execute(GetListingByIdRequest("lst-001"))

    assert response.listing == listing
    mock_repository.get_by_id.assert_called_once_with("lst-001")


def test_missing_listing_raises_not_found(mock_repository: Mock) -> None:
    mock_repository.get_by_id.return_value = None

    with pytest.raises(NotFoundError) as exc_info:
        GetListingById(mock_repository).execute(GetListingByIdRequest("nope"))

    assert exc_info.value.context == {"resource": "Listing", "identifier": "nope"}
