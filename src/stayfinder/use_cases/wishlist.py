from __future__ import annotations

from stayfinder.adapters.persistent_store import PersistentStore, Unsubscribe
from stayfinder.ports.storage_medium import StorageListener

WISHLIST_KEY = "wishlist"


class WishlistService:
    """
    Saved listing ids, in the order they were saved.

    The stored sequence never holds the same id twice; every mutator
    re-reads the store first, so changes made by other contexts are never
    overwritten with a stale copy.
    """

    def __init__(self, store: PersistentStore) -> None:
        self._store = store

    def items(self) -> list[str]:
        # dict.fromkeys drops duplicates a foreign writer may have introduced
        return list(dict.fromkeys(self._store.read(WISHLIST_KEY, list[str], [])))

    def contains(self, listing_id: str) -> bool:
        return listing_id in self.items()

    def add(self, listing_id: str) -> None:
        ids = self.items()
        if listing_id in ids:
            return
        self._store.write(WISHLIST_KEY, [*ids, listing_id])

    def remove(self, listing_id: str) -> None:
        ids = self.items()
        if listing_id not in ids:
            return
        self._store.write(WISHLIST_KEY, [i for i in ids if i != listing_id])

    def toggle(self, listing_id: str) -> bool:
        """Flip membership; returns True if the listing is now saved."""
        if self.contains(listing_id):
            self.remove(listing_id)
            return False
        self.add(listing_id)
        return True

    def clear(self) -> None:
        self._store.write(WISHLIST_KEY, [])

    def subscribe(self, listener: StorageListener) -> Unsubscribe:
        return self._store.subscribe(WISHLIST_KEY, listener)
