"""Typed JSON key/value store with change notification.

The store is the only way services touch the storage medium. Reads are
validated against an explicit schema and degrade to a caller-supplied
default; writes are write-through and never raise.

Change notification has two origins that share a single code path:

- writes made through this store loop back to its own subscribers
- writes made by other contexts on the same medium arrive as StorageEvents
"""

from __future__ import annotations

import logging
import uuid
from collections import defaultdict
from functools import lru_cache
from typing import Any, Callable, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from stayfinder.ports.storage_medium import (
    StorageError,
    StorageEvent,
    StorageListener,
    StorageMedium,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

Unsubscribe = Callable[[], None]


@lru_cache(maxsize=None)
def _adapter_for(schema: Any) -> TypeAdapter[Any]:
    return TypeAdapter(schema)


class PersistentStore:
    """
    One context's view of a shared StorageMedium.

    Each instance stands for one tab/window: it has its own ``context_id``
    and its own subscribers, and is notified of writes made by any other
    PersistentStore attached to the same medium.
    """

    def __init__(
        self,
        medium: StorageMedium,
        prefix: str = "",
        context_id: str | None = None,
    ) -> None:
        """
        Attach a new context to ``medium``.

        Args:
            medium: Shared durable storage
            prefix: Namespace prepended to every key on the medium
            context_id: Identity of this context (generated when omitted)
        """
        self._medium = medium
        self._prefix = prefix
        self.context_id = context_id or uuid.uuid4().hex
        self._subscribers: dict[str, list[StorageListener]] = defaultdict(list)
        self._medium.attach(self.context_id, self._on_external_change)

    def read(self, key: str, schema: Any, default: T) -> T:
        """
        Read and validate the value stored at ``key``.

        Never raises: an absent key, unreadable medium, invalid JSON, or a
        payload that does not match ``schema`` all yield ``default``.

        Args:
            key: Storage key (without prefix)
            schema: Python type the payload must validate as (e.g. list[str])
            default: Returned when no valid value is available
        """
        try:
            raw = self._medium.get_item(self._full_key(key))
        except StorageError:
            logger.warning("Storage read failed", exc_info=True, extra={"key": key})
            return default

        if raw is None:
            return default

        try:
            return _adapter_for(schema).validate_json(raw)
        except ValidationError as exc:
            logger.warning(
                "Discarding malformed stored value",
                extra={"key": key, "errors": exc.error_count()},
            )
            return default

    def write(self, key: str, value: Any) -> bool:
        """
        Serialize ``value`` as JSON, persist it, and notify subscribers.

        Returns:
            True if the value was stored; False if serialization or the
            medium failed (logged, nothing notified)
        """
        try:
            payload = to_json(value).decode()
        except PydanticSerializationError:
            logger.error("Value is not JSON serializable", exc_info=True, extra={"key": key})
            return False

        try:
            self._medium.set_item(self._full_key(key), payload, origin=self.context_id)
        except StorageError:
            logger.error("Storage write failed", exc_info=True, extra={"key": key})
            return False

        logger.debug("Stored value", extra={"key": key, "bytes": len(payload)})
        self._notify(StorageEvent(key=key, origin=self.context_id))
        return True

    def remove(self, key: str) -> bool:
        """Delete ``key``; subscribers are notified like for a write."""
        try:
            self._medium.remove_item(self._full_key(key), origin=self.context_id)
        except StorageError:
            logger.error("Storage remove failed", exc_info=True, extra={"key": key})
            return False

        self._notify(StorageEvent(key=key, origin=self.context_id))
        return True

    def subscribe(self, key: str, listener: StorageListener) -> Unsubscribe:
        """
        Call ``listener`` whenever ``key`` changes, from any context.

        Returns:
            A callable that removes the subscription (safe to call twice)
        """
        self._subscribers[key].append(listener)

        def unsubscribe() -> None:
            listeners = self._subscribers.get(key, [])
            if listener in listeners:
                listeners.remove(listener)

        return unsubscribe

    def close(self) -> None:
        """Stop receiving changes made by other contexts."""
        self._medium.detach(self.context_id)
        self._subscribers.clear()

    def _on_external_change(self, event: StorageEvent) -> None:
        if not event.key.startswith(self._prefix):
            return
        key = event.key[len(self._prefix) :]
        logger.debug("External change", extra={"key": key, "origin": event.origin})
        self._notify(StorageEvent(key=key, origin=event.origin))

    def _notify(self, event: StorageEvent) -> None:
        for listener in list(self._subscribers.get(event.key, [])):
            try:
                listener(event)
            except Exception:
                # One failing view must not starve the others
                logger.error(
                    "Storage listener failed",
                    exc_info=True,
                    extra={"key": event.key},
                )

    def _full_key(self, key: str) -> str:
        return f"{self._prefix}{key}"
