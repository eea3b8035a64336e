"""Tests for the in-memory record store."""

from __future__ import annotations

from sweet_shop_api.app.core.store import Database, RecordStore, sequential_ids
from sweet_shop_api.app.models import Sweet


def _store() -> RecordStore[Sweet]:
    return RecordStore(Sweet, sequential_ids())


class TestRecordStore:
    def test_create_assigns_sequential_ids(self) -> None:
        store = _store()
        first = store.create({"name": "Fudge", "category": "Chocolate", "price": 5.0, "quantity": 20})
        second = store.create({"name": "Toffee", "category": "Chewy", "price": 2.0, "quantity": 5})

        assert first.id == "1"
        assert second.id == "2"
        assert store.find_by_id("2") == second

    def test_create_skips_ids_taken_by_insert(self) -> None:
        store = _store()
        store.insert(Sweet(id="1", name="Seed", category="Gummy", price=1.0, quantity=1))
        created = store.create({"name": "Fudge", "category": "Chocolate", "price": 5.0, "quantity": 20})
        assert created.id == "2"

    def test_find_all_keeps_insertion_order_and_is_live(self) -> None:
        store = _store()
        everything = store.find_all()
        store.create({"name": "A", "category": "x", "price": 1.0, "quantity": 1})
        store.create({"name": "B", "category": "x", "price": 1.0, "quantity": 1})

        assert [s.name for s in everything] == ["A", "B"]

    def test_find_by_id_missing_returns_none(self) -> None:
        assert _store().find_by_id("nope") is None

    def test_update_merges_only_given_fields(self) -> None:
        store = _store()
        sweet = store.create({"name": "Fudge", "category": "Chocolate", "price": 5.0, "quantity": 20})

        updated = store.update(sweet.id, {"price": 4.5})

        assert updated.price == 4.5
        assert updated.name == "Fudge"
        assert updated.quantity == 20
        assert store.find_by_id(sweet.id).price == 4.5

    def test_update_never_changes_id(self) -> None:
        store = _store()
        sweet = store.create({"name": "Fudge", "category": "Chocolate", "price": 5.0, "quantity": 20})
        assert store.update(sweet.id, {"id": "other"}).id == sweet.id

    def test_update_missing_returns_none(self) -> None:
        assert _store().update("nope", {"price": 1.0}) is None

    def test_delete(self) -> None:
        store = _store()
        sweet = store.create({"name": "Fudge", "category": "Chocolate", "price": 5.0, "quantity": 20})

        assert store.delete(sweet.id) is True
        assert store.delete(sweet.id) is False
        assert store.count() == 0

    def test_find_one_matches_all_criteria(self) -> None:
        store = _store()
        store.create({"name": "Fudge", "category": "Chocolate", "price": 5.0, "quantity": 20})
        store.create({"name": "Fudge", "category": "Vegan", "price": 6.0, "quantity": 2})

        assert store.find_one(name="Fudge", category="Vegan").price == 6.0
        assert store.find_one(name="Toffee") is None


def test_database_reset_clears_both_collections() -> None:
    db = Database()
    db.sweets.create({"name": "Fudge", "category": "Chocolate", "price": 5.0, "quantity": 20})
    db.users.create({"username": "a", "password_hash": "x", "role": "User"})

    db.reset()

    assert db.sweets.count() == 0
    assert db.users.count() == 0
