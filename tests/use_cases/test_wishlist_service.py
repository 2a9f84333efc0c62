from __future__ import annotations

from stayfinder.adapters.in_memory_storage_medium import InMemoryStorageMedium
from stayfinder.adapters.persistent_store import PersistentStore
from stayfinder.ports.storage_medium import StorageEvent
from stayfinder.use_cases.wishlist import WISHLIST_KEY, WishlistService


def test_starts_empty(store: PersistentStore) -> None:
    assert WishlistService(store).items() == []


def test_add_keeps_insertion_order_and_is_idempotent(store: PersistentStore) -> None:
    wishlist = WishlistService(store)

    wishlist.add("b")
    wishlist.add("a")
    wishlist.add("b")

    assert wishlist.items() == ["b", "a"]
    assert wishlist.contains("a")


def test_remove_is_idempotent(store: PersistentStore) -> None:
    wishlist = WishlistService(store)
    wishlist.add("a")

    wishlist.remove("a")
    wishlist.remove("a")

    assert wishlist.items() == []


def test_toggle_flips_membership(store: PersistentStore) -> None:
    wishlist = WishlistService(store)

    assert wishlist.toggle("a") is True
    assert wishlist.items() == ["a"]
    assert wishlist.toggle("a") is False
    assert wishlist.items() == []


def test_clear(store: PersistentStore) -> None:
    wishlist = WishlistService(store)
    wishlist.add("a")
    wishlist.add("b")

    wishlist.clear()

    assert wishlist.items() == []


def test_no_op_mutations_do_not_notify(store: PersistentStore) -> None:
    wishlist = WishlistService(store)
    wishlist.add("a")
    events: list[StorageEvent] = []
    wishlist.subscribe(events.append)

    wishlist.add("a")
    wishlist.remove("missing")

    assert events == []


def test_duplicates_written_by_another_writer_are_collapsed(
    store: PersistentStore, medium: InMemoryStorageMedium
) -> None:
    medium.set_item(WISHLIST_KEY, '["a","b","a"]', origin="legacy")

    assert WishlistService(store).items() == ["a", "b"]


def test_corrupt_wishlist_reads_as_empty(store: PersistentStore, medium: InMemoryStorageMedium) -> None:
    medium.set_item(WISHLIST_KEY, "oops", origin="legacy")

    assert WishlistService(store).items() == []


def test_two_tabs_share_one_wishlist(medium: InMemoryStorageMedium) -> None:
    tab_a = WishlistService(PersistentStore(medium, context_id="tab-a"))
    tab_b = WishlistService(PersistentStore(medium, context_id="tab-b"))
    seen_in_b: list[list[str]] = []
    tab_b.subscribe(lambda event: seen_in_b.append(tab_b.items()))

    tab_a.add("lst-001")
    tab_b.add("lst-002")

    assert seen_in_b == [["lst-001"], ["lst-001", "lst-002"]]
    assert tab_a.items() == ["lst-001", "lst-002"]
