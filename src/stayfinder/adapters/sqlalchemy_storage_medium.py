"""SQL implementation of StorageMedium."""

from __future__ import annotations

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from stayfinder.infra.db.models.storage_item import StorageItemRow
from stayfinder.infra.db.session import session_scope
from stayfinder.ports.storage_medium import (
    StorageError,
    StorageEvent,
    StorageListener,
    StorageMedium,
)

logger = logging.getLogger(__name__)

# Origin reported for rows purged from the table outside this medium
UNKNOWN_ORIGIN = "external"


class SqlAlchemyStorageMedium(StorageMedium):
    """
    StorageMedium over a ``storage_items`` table.

    - Contexts attached to the same instance are notified synchronously
    - Writes made through *other* instances (other processes sharing the
      database file) are discovered by ``poll()``, which compares per-key
      revisions against the last ones this instance has seen
    - Removal leaves a tombstone row, so a key's revision only ever grows
      and a remove followed by a rewrite is still seen as a change
    - Revisions are bumped in the UPDATE itself, never read-modify-write
    - Database failures surface as StorageError
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        """
        Initialize the medium and snapshot current revisions.

        Args:
            session_factory: Factory for short-lived sessions on the storage database
        """
        self._session_factory = session_factory
        self._listeners: dict[str, StorageListener] = {}
        self._seen: dict[str, int] = {
            key: revision for key, (revision, _) in self._load_revisions().items()
        }

    def get_item(self, key: str) -> str | None:
        query = select(StorageItemRow.value).where(
            StorageItemRow.key == key, StorageItemRow.deleted.is_(False)
        )
        try:
            with session_scope(self._session_factory) as session:
                return session.scalar(query)
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to read '{key}'") from exc

    def set_item(self, key: str, value: str, origin: str) -> None:
        bump = (
            update(StorageItemRow)
            .where(StorageItemRow.key == key)
            .values(
                value=value,
                revision=StorageItemRow.revision + 1,
                written_by=origin,
                deleted=False,
            )
            .execution_options(synchronize_session=False)
        )
        try:
            with session_scope(self._session_factory) as session:
                if session.execute(bump).rowcount == 0:
                    session.add(
                        StorageItemRow(key=key, value=value, revision=1, written_by=origin)
                    )
                    session.flush()
                revision = self._revision_of(session, key)
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to write '{key}'") from exc

        self._seen[key] = revision
        self._broadcast(StorageEvent(key=key, origin=origin))

    def remove_item(self, key: str, origin: str) -> None:
        tombstone = (
            update(StorageItemRow)
            .where(StorageItemRow.key == key, StorageItemRow.deleted.is_(False))
            .values(
                value="",
                revision=StorageItemRow.revision + 1,
                written_by=origin,
                deleted=True,
            )
            .execution_options(synchronize_session=False)
        )
        try:
            with session_scope(self._session_factory) as session:
                if session.execute(tombstone).rowcount == 0:
                    return
                revision = self._revision_of(session, key)
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to remove '{key}'") from exc

        self._seen[key] = revision
        self._broadcast(StorageEvent(key=key, origin=origin))

    def attach(self, origin: str, listener: StorageListener) -> None:
        self._listeners[origin] = listener

    def detach(self, origin: str) -> None:
        self._listeners.pop(origin, None)

    def poll(self) -> list[StorageEvent]:
        """
        Detect writes and removals made by other processes and notify
        attached contexts.

        Returns:
            The events delivered, one per changed key
        """
        current = self._load_revisions()

        events: list[StorageEvent] = []
        for key, (revision, writer) in current.items():
            if self._seen.get(key) != revision:
                events.append(StorageEvent(key=key, origin=writer))
        for key in self._seen.keys() - current.keys():
            events.append(StorageEvent(key=key, origin=UNKNOWN_ORIGIN))

        self._seen = {key: revision for key, (revision, _) in current.items()}

        for event in events:
            logger.debug("Detected external storage change", extra={"key": event.key})
            self._broadcast(event)

        return events

    def _broadcast(self, event: StorageEvent) -> None:
        for context, listener in list(self._listeners.items()):
            if context == event.origin:
                continue
            listener(event)

    @staticmethod
    def _revision_of(session: Session, key: str) -> int:
        return session.scalar(select(StorageItemRow.revision).where(StorageItemRow.key == key))

    def _load_revisions(self) -> dict[str, tuple[int, str]]:
        # Tombstones included: a removal is a revision like any write
        query = select(StorageItemRow.key, StorageItemRow.revision, StorageItemRow.written_by)
        try:
            with session_scope(self._session_factory) as session:
                rows = session.execute(query).all()
        except SQLAlchemyError as exc:
            raise StorageError("Failed to load storage revisions") from exc
        return {key: (revision, writer) for key, revision, writer in rows}
