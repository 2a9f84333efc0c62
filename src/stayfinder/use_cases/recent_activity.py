from __future__ import annotations

from stayfinder.adapters.persistent_store import PersistentStore, Unsubscribe
from stayfinder.domain.listing import SearchParams
from stayfinder.ports.storage_medium import StorageListener

RECENT_SEARCHES_KEY = "recent_searches"
RECENTLY_VIEWED_KEY = "recently_viewed"

MAX_RECENT_SEARCHES = 5
MAX_RECENTLY_VIEWED = 10


def _same_search(a: SearchParams, b: SearchParams) -> bool:
    # identity is (location, check_in, check_out); guests is ignored
    return (a.location, a.check_in, a.check_out) == (b.location, b.check_in, b.check_out)


class RecentActivityService:
    """Most-recent-first history of searches and viewed listings."""

    def __init__(self, store: PersistentStore) -> None:
        self._store = store

    def recent_searches(self) -> list[SearchParams]:
        return self._store.read(RECENT_SEARCHES_KEY, list[SearchParams], [])

    def record_search(self, search: SearchParams) -> None:
        others = [s for s in self.recent_searches() if not _same_search(s, search)]
        self._store.write(RECENT_SEARCHES_KEY, [search, *others][:MAX_RECENT_SEARCHES])

    def recently_viewed(self) -> list[str]:
        return self._store.read(RECENTLY_VIEWED_KEY, list[str], [])

    def record_view(self, listing_id: str) -> None:
        others = [i for i in self.recently_viewed() if i != listing_id]
        self._store.write(RECENTLY_VIEWED_KEY, [listing_id, *others][:MAX_RECENTLY_VIEWED])

    def subscribe(self, listener: StorageListener) -> Unsubscribe:
        """Call ``listener`` when either history changes; ``event.key`` tells which."""
        unsubscribers = [
            self._store.subscribe(key, listener)
            for key in (RECENT_SEARCHES_KEY, RECENTLY_VIEWED_KEY)
        ]

        def unsubscribe() -> None:
            for undo in unsubscribers:
                undo()

        return unsubscribe
