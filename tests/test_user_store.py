"""Tests for the in-memory record store."""

from user_registry_api.app.services.user_store import UserRecord, UserStore


def _fill(store: UserStore, *ids: str) -> None:
    for user_id in ids:
        store.insert(UserRecord(id=user_id, name=f"user-{user_id}", age=20))


class TestUserStore:
    def test_new_store_is_empty(self, store: UserStore) -> None:
        assert len(store) == 0
        assert store.list_all() == []

    def test_insert_preserves_order(self, store: UserStore) -> None:
        _fill(store, "a", "b", "c")

        assert [record.id for record in store.list_all()] == ["a", "b", "c"]

    def test_list_all_returns_snapshot(self, store: UserStore) -> None:
        _fill(store, "a")

        snapshot = store.list_all()
        snapshot.clear()

        assert len(store) == 1

    def test_find_index_by_id(self, store: UserStore) -> None:
        _fill(store, "a", "b", "c")

        assert store.find_index_by_id("a") == 0
        assert store.find_index_by_id("c") == 2
        assert store.find_index_by_id("missing") is None

    def test_replace_at_overwrites_position(self, store: UserStore) -> None:
        _fill(store, "a", "b")

        store.replace_at(1, UserRecord(id="b", name="Bea", age=41))

        assert store.list_all()[1] == UserRecord(id="b", name="Bea", age=41)
        assert len(store) == 2

    def test_remove_at_shifts_later_records(self, store: UserStore) -> None:
        _fill(store, "a", "b", "c")

        store.remove_at(0)

        assert [record.id for record in store.list_all()] == ["b", "c"]
        assert store.find_index_by_id("c") == 1
        assert store.find_index_by_id("a") is None

    def test_stores_are_independent(self) -> None:
        first, second = UserStore(), UserStore()
        _fill(first, "a")

        assert len(first) == 1
        assert len(second) == 0

    def test_lock_is_reentrant(self, store: UserStore) -> None:
        _fill(store, "a")

        with store.lock:
            index = store.find_index_by_id("a")
            store.remove_at(index)

        assert len(store) == 0
