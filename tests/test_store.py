from __future__ import annotations

import threading

import pytest

from user_directory_api.app.core.store import DEFAULT_USERS, UserRecord, UserStore


def test_default_seed_matches_initial_directory() -> None:
    store = UserStore()
    assert [(u.id, u.name) for u in store.all()] == [
        (1, "Juan"),
        (2, "Ana"),
        (3, "Karen"),
        (4, "Luis"),
    ]
    assert len(store) == len(DEFAULT_USERS)


def test_add_continues_after_largest_seed_id() -> None:
    store = UserStore([UserRecord(7, "Zoe"), UserRecord(2, "Ana")])
    assert store.add("Eva").id == 8


def test_ids_are_not_reused_after_deleting_newest() -> None:
    store = UserStore()
    created = store.add("Eva")
    store.remove(created.id)

    again = store.add("Olga")

    assert again.id == created.id + 1
    assert store.get(created.id) is None


def test_ids_stay_unique_after_deleting_from_middle() -> None:
    store = UserStore()
    store.remove(2)
    created = store.add("Eva")

    ids = [u.id for u in store.all()]
    assert len(ids) == len(set(ids))
    assert created.id == 5


def test_empty_store_starts_at_one() -> None:
    store = UserStore([])
    assert store.all() == []
    assert store.add("Eva").id == 1


def test_rename_keeps_position_and_id() -> None:
    store = UserStore()
    updated = store.rename(3, "Kara")

    assert updated == UserRecord(3, "Kara")
    assert store.all()[2] == UserRecord(3, "Kara")


def test_rename_and_remove_unknown_id_return_none() -> None:
    store = UserStore()
    assert store.rename(99, "Nadie") is None
    assert store.remove(99) is None
    assert len(store) == 4


def test_remove_returns_prior_record() -> None:
    store = UserStore()
    removed = store.remove(2)

    assert removed == UserRecord(2, "Ana")
    assert [u.id for u in store.all()] == [1, 3, 4]


def test_all_returns_snapshot() -> None:
    store = UserStore()
    snapshot = store.all()
    store.add("Eva")
    assert len(snapshot) == 4


def test_duplicate_seed_ids_are_rejected() -> None:
    with pytest.raises(ValueError):
        UserStore([UserRecord(1, "Juan"), UserRecord(1, "Otro")])


def test_non_positive_seed_ids_are_rejected() -> None:
    with pytest.raises(ValueError):
        UserStore([UserRecord(0, "Cero")])


def test_concurrent_adds_assign_distinct_ids() -> None:
    store = UserStore([])
    created = []

    def worker() -> None:
        for _ in range(50):
            created.append(store.add("Hilo"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ids = [record.id for record in created]
    assert len(ids) == 400
    assert len(set(ids)) == 400
    assert len(store) == 400
