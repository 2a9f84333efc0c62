"""Wiring for the durable storage medium and per-context stores."""

from __future__ import annotations

from stayfinder.adapters.persistent_store import PersistentStore
from stayfinder.adapters.sqlalchemy_storage_medium import SqlAlchemyStorageMedium
from stayfinder.infra.config import storage_prefix
from stayfinder.infra.db.models.base import Base
from stayfinder.infra.db.session import get_engine, get_session_local
from stayfinder.ports.storage_medium import StorageMedium


def build_storage_medium(create_schema: bool = True) -> SqlAlchemyStorageMedium:
    """
    Medium on the database named by STAYFINDER_DATABASE_URL.

    Args:
        create_schema: Create the storage table when missing (a local
            SQLite file needs no migration step)
    """
    if create_schema:
        Base.metadata.create_all(get_engine())
    return SqlAlchemyStorageMedium(get_session_local())


def open_store(medium: StorageMedium, context_id: str | None = None) -> PersistentStore:
    """New context (tab) on ``medium`` using the configured key prefix."""
    return PersistentStore(medium, prefix=storage_prefix(), context_id=context_id)
