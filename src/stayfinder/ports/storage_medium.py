from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable


class StorageError(Exception):
    """Raised by a medium when a read or write cannot be completed."""

    pass


class StorageQuotaExceeded(StorageError):
    """Raised when a write would push the medium past its capacity."""

    pass


@dataclass(frozen=True, slots=True)
class StorageEvent:
    """
    Change signal for one key.

    Carries no value: receivers must re-read the key. ``origin`` is the id of
    the context that performed the write.
    """

    key: str
    origin: str


StorageListener = Callable[[StorageEvent], None]


class StorageMedium(ABC):
    """
    Port for a durable, origin-scoped string key/value medium.

    Several contexts (tabs, windows, processes) may share one medium. Each
    context attaches a listener and receives a StorageEvent for every write
    or removal performed by *another* context.

    Contract:
        - Values are opaque text; serialization belongs to the caller.
        - Per-key last write wins; no cross-key ordering guarantees.
        - Implementations raise StorageError (or a subclass) on failure.
    """

    @abstractmethod
    def get_item(self, key: str) -> str | None: ...

    @abstractmethod
    def set_item(self, key: str, value: str, origin: str) -> None: ...

    @abstractmethod
    def remove_item(self, key: str, origin: str) -> None: ...

    @abstractmethod
    def attach(self, origin: str, listener: StorageListener) -> None:
        """Register ``listener`` for writes made by contexts other than ``origin``."""
        ...

    @abstractmethod
    def detach(self, origin: str) -> None: ...
