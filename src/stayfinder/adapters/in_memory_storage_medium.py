from __future__ import annotations

import logging

from stayfinder.ports.storage_medium import (
    StorageEvent,
    StorageListener,
    StorageMedium,
    StorageQuotaExceeded,
)

logger = logging.getLogger(__name__)


class InMemoryStorageMedium(StorageMedium):
    """
    Canonical contract implementation for tests and single-process use.

    - One instance stands for one origin's storage; attach one PersistentStore
      per simulated tab
    - Cross-context events are delivered synchronously, to every attached
      context except the writer, in attachment order
    - Optional ``quota_bytes`` bounds the total UTF-8 size of keys and values
    """

    def __init__(self, quota_bytes: int | None = None) -> None:
        self._items: dict[str, str] = {}
        self._listeners: dict[str, StorageListener] = {}
        self._quota_bytes = quota_bytes

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str, origin: str) -> None:
        if self._quota_bytes is not None:
            projected = self._used_bytes() - self._entry_size(key) + len(key.encode()) + len(
                value.encode()
            )
            if projected > self._quota_bytes:
                raise StorageQuotaExceeded(
                    f"Writing '{key}' needs {projected} bytes, quota is {self._quota_bytes}"
                )

        self._items[key] = value
        self._broadcast(key, origin)

    def remove_item(self, key: str, origin: str) -> None:
        if self._items.pop(key, None) is not None:
            self._broadcast(key, origin)

    def attach(self, origin: str, listener: StorageListener) -> None:
        self._listeners[origin] = listener

    def detach(self, origin: str) -> None:
        self._listeners.pop(origin, None)

    def _broadcast(self, key: str, origin: str) -> None:
        event = StorageEvent(key=key, origin=origin)
        for context, listener in list(self._listeners.items()):
            if context == origin:
                continue
            logger.debug("Delivering storage event", extra={"key": key, "to": context})
            listener(event)

    def _used_bytes(self) -> int:
        return sum(len(k.encode()) + len(v.encode()) for k, v in self._items.items())

    def _entry_size(self, key: str) -> int:
        value = self._items.get(key)
        if value is None:
            return 0
        return len(key.encode()) + len(value.encode())
