from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from stayfinder.adapters.in_memory_listing_catalog_repository import (
    InMemoryListingCatalogRepository,
)
from stayfinder.codecs.query_params import encode_wishlist_token
from stayfinder.entrypoints.http.dependencies import get_listing_repository, get_share_base_url
from stayfinder.entrypoints.http.exception_handlers import register_exception_handlers
from stayfinder.entrypoints.http.routes.wishlist import router


@pytest.fixture
def repository(make_listing) -> InMemoryListingCatalogRepository:
    return InMemoryListingCatalogRepository(
        [
            make_listing("a", title="Canal flat"),
            make_listing("b", title="Garden house", price_per_night=180),
            make_listing("c", title="Attic room"),
        ]
    )


@pytest.fixture
def app(repository: InMemoryListingCatalogRepository) -> FastAPI:
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    test_app.dependency_overrides[get_share_base_url] = lambda: "https://stayfinder.test/app"
    test_app.dependency_overrides[get_listing_repository] = lambda: repository
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


def test_share_builds_link(client: TestClient) -> None:
    response = client.post("/v1/wishlist/share", json={"ids": ["a", "b", "c"]})

    assert response.status_code == 200
    url = response.json()["url"]
    assert url.startswith("https://stayfinder.test/app#/wishlist?shared=")


def test_share_link_round_trips_through_shared_endpoint(client: TestClient) -> None:
    url = client.post("/v1/wishlist/share", json={"ids": ["c", "a"]}).json()["url"]
    query = url.split("?", 1)[1]

    response = client.get(f"/v1/wishlist/shared?{query}")

    assert response.status_code == 200
    data = response.json()
    assert data["ids"] == ["c", "a"]
    assert [item["id"] for item in data["items"]] == ["c", "a"]


def test_shared_items_are_camel_case_summaries(client: TestClient) -> None:
    response = client.get("/v1/wishlist/shared", params={"shared": encode_wishlist_token(["b"])})

    item = response.json()["items"][0]
    assert item["title"] == "Garden house"
    assert item["pricePerNight"] == 180
    assert "instantBook" in item


def test_shared_skips_ids_no_longer_in_catalog(client: TestClient) -> None:
    token = encode_wishlist_token(["gone", "a"])

    response = client.get("/v1/wishlist/shared", params={"shared": token})

    assert response.status_code == 200
    assert response.json()["ids"] == ["gone", "a"]
    assert [item["id"] for item in response.json()["items"]] == ["a"]


def test_shared_empty_wishlist(client: TestClient) -> None:
    response = client.get("/v1/wishlist/shared", params={"shared": encode_wishlist_token([])})

    assert response.json() == {"ids": [], "items": []}


@pytest.mark.parametrize("params", [{"shared": "not-a-valid-token"}, {"shared": ""}, {}])
def test_unusable_token_returns_404(client: TestClient, params: dict) -> None:
    response = client.get("/v1/wishlist/shared", params=params)

    assert response.status_code == 404
    assert response.json() == {"detail": "Shared wishlist not found", "code": "NOT_FOUND"}


def test_share_requires_ids(client: TestClient) -> None:
    response = client.post("/v1/wishlist/share", json={})

    assert response.status_code == 422
