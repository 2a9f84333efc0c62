from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from stayfinder.infra.db.config import database_url

# Lazy initialization - only create engine/session when needed
_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None


def create_storage_engine(url: str) -> Engine:
    """
    Build an engine for the storage database.

    SQLite files are the expected medium: the store is local to one user, so
    connections are cheap and short-lived. ``check_same_thread`` is relaxed so
    a context can hand its medium to a worker thread.
    """
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(
        url,
        pool_pre_ping=True,  # Verify connection health before checkout
        connect_args=connect_args,
        future=True,
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        class_=Session,
        expire_on_commit=False,
    )


def get_engine() -> Engine:
    """Get or create the configured storage engine (lazy initialization)."""
    global _engine
    if _engine is None:
        _engine = create_storage_engine(database_url())
    return _engine


def get_session_local() -> sessionmaker[Session]:
    """Get or create the session factory (lazy initialization)."""
    global _session_local
    if _session_local is None:
        _session_local = create_session_factory(get_engine())
    return _session_local


@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Iterator[Session]:
    """Open a session from ``factory`` with automatic commit/rollback."""
    session = factory()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()

