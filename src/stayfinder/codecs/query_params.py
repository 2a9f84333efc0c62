"""URL query and share-link codecs.

Search and filter state travel as ``application/x-www-form-urlencoded``
query strings with camelCase keys; a wishlist travels as a URL-safe base64
token of its JSON id array. All functions here are pure.
"""

from __future__ import annotations

import base64
import binascii
import json
from datetime import date
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from stayfinder.domain.listing import FilterParams, SearchParams
from stayfinder.infra.config import share_base_url

SEARCH_PATH = "/search"
WISHLIST_ROUTE = "#/wishlist"
SHARED_PARAM = "shared"


# ==============================================================================
# Helpers
# ==============================================================================


def _query_part(query: str) -> str:
    """Accept a bare query, a '?query', or a full URL (fragment routes included)."""
    if "?" in query:
        return query.split("?", 1)[1]
    return query


def _parse(query: str) -> dict[str, str]:
    # First occurrence wins, empty values are kept so they can be treated as absent
    parsed = parse_qs(_query_part(query), keep_blank_values=True)
    return {key: values[0] for key, values in parsed.items()}


def _parse_int(raw: str | None) -> int | None:
    if not raw:
        return None
    try:
        return int(raw, 10)
    except ValueError:
        return None


def _parse_float(raw: str | None) -> float | None:
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    # nan/inf never describe a rating threshold
    return value if value == value and abs(value) != float("inf") else None


def _parse_date(raw: str | None) -> date | None:
    if not raw:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError:
        return None


def _split_ids(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ()
    return tuple(token for token in raw.split(",") if token)


def _format_number(value: float) -> str:
    # 4.0 -> "4", 4.5 -> "4.5"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


# ==============================================================================
# Search
# ==============================================================================


def encode_search(params: SearchParams) -> str:
    """
    Encode search intent as a query string (no leading '?').

    Only present fields are emitted, in the order location, checkIn,
    checkOut, guests.
    """
    pairs: list[tuple[str, str]] = []

    if params.location:
        pairs.append(("location", params.location))
    if params.check_in is not None:
        pairs.append(("checkIn", params.check_in.isoformat()))
    if params.check_out is not None:
        pairs.append(("checkOut", params.check_out.isoformat()))
    if params.guests is not None:
        pairs.append(("guests", str(params.guests)))

    return urlencode(pairs)


def build_search_url(params: SearchParams) -> str:
    query = encode_search(params)
    return f"{SEARCH_PATH}?{query}" if query else SEARCH_PATH


def decode_search(query: str) -> SearchParams:
    """
    Decode a search query string. Unknown keys are ignored; malformed or
    empty values decode as absent.
    """
    values = _parse(query)

    guests = _parse_int(values.get("guests"))
    if guests is not None and guests < 1:
        guests = None

    return SearchParams(
        location=values.get("location") or None,
        check_in=_parse_date(values.get("checkIn")),
        check_out=_parse_date(values.get("checkOut")),
        guests=guests,
    )


# ==============================================================================
# Filters
# ==============================================================================


def encode_filters(filters: FilterParams) -> str:
    """Encode filter refinements as a query string (no leading '?')."""
    pairs: list[tuple[str, str]] = []

    if filters.price_min is not None:
        pairs.append(("priceMin", str(filters.price_min)))
    if filters.price_max is not None:
        pairs.append(("priceMax", str(filters.price_max)))
    if filters.type:
        pairs.append(("type", ",".join(filters.type)))
    if filters.min_rating is not None:
        pairs.append(("minRating", _format_number(filters.min_rating)))
    if filters.amenities:
        pairs.append(("amenities", ",".join(filters.amenities)))
    if filters.instant_book:
        pairs.append(("instantBook", "true"))

    # Commas inside list values stay literal
    return urlencode(pairs, safe=",")


def decode_filters(query: str) -> FilterParams:
    """
    Decode a filter query string into canonical FilterParams.

    List values split on commas with empty tokens dropped; ``instantBook`` is
    set only by the exact token ``true``.
    """
    values = _parse(query)

    return FilterParams(
        price_min=_parse_int(values.get("priceMin")),
        price_max=_parse_int(values.get("priceMax")),
        type=_split_ids(values.get("type")),
        min_rating=_parse_float(values.get("minRating")),
        amenities=_split_ids(values.get("amenities")),
        instant_book=values.get("instantBook") == "true",
    )


# ==============================================================================
# Wishlist share links
# ==============================================================================


def encode_wishlist_token(ids: list[str]) -> str:
    payload = json.dumps(list(ids), separators=(",", ":")).encode()
    return base64.urlsafe_b64encode(payload).decode("ascii")


def decode_wishlist_token(token: str) -> list[str] | None:
    try:
        payload = base64.b64decode(token, altchars=b"-_", validate=True)
        ids = json.loads(payload)
    except (binascii.Error, ValueError):
        return None

    if not isinstance(ids, list) or not all(isinstance(item, str) for item in ids):
        return None
    return ids


def encode_wishlist_share(ids: list[str], base_url: str | None = None) -> str:
    """
    Build an absolute share link: ``<origin><path>#/wishlist?shared=<token>``.

    ``base_url`` defaults to the configured share base URL. Its query and
    fragment are discarded.
    """
    parts = urlsplit(base_url or share_base_url())
    page = urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))
    query = urlencode({SHARED_PARAM: encode_wishlist_token(ids)})
    return f"{page}{WISHLIST_ROUTE}?{query}"


def decode_wishlist_share(query: str) -> list[str] | None:
    """
    Extract the shared id list from a share link or its query string.

    Returns:
        The ids, or None when there is no usable ``shared`` parameter
        (absent, not base64, not JSON, not a list of strings)
    """
    token = _parse(query).get(SHARED_PARAM)
    if not token:
        return None
    return decode_wishlist_token(token)
