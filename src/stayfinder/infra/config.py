from __future__ import annotations

import os

DEFAULT_SHARE_BASE_URL = "http://localhost:5173/"


def listings_path() -> str:
    path = os.getenv("STAYFINDER_LISTINGS_PATH")

    if not path:
        raise RuntimeError("STAYFINDER_LISTINGS_PATH environment variable is not set")

    return path


def share_base_url() -> str:
    return os.getenv("STAYFINDER_SHARE_BASE_URL") or DEFAULT_SHARE_BASE_URL


def storage_prefix() -> str:
    return os.getenv("STAYFINDER_STORAGE_PREFIX", "")
