"""
Unit tests for the in-memory product store.
"""
import pytest
from concurrent.futures import ThreadPoolExecutor
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from errors import ProductNotFoundError
from models import Product, SEED_PRODUCTS
from store import ProductStore


def make_product(product_id=0, name="Widget"):
    return Product(id=product_id, name=name, price=1.5, description="A widget.", image="/w.png")


@pytest.fixture
def store():
    return ProductStore.seeded()


class TestSeed:
    def test_seeded_store_has_ten_products(self, store):
        assert len(store) == 10
        assert [p.id for p in store.list()] == list(range(1, 11))

    def test_stores_do_not_share_records(self):
        first, second = ProductStore.seeded(), ProductStore.seeded()
        first.update(make_product(1, "Changed"))
        assert second.get(1).name == "ZenoFit Tracker"
        assert SEED_PRODUCTS[0].name == "ZenoFit Tracker"

    def test_list_returns_a_copy(self, store):
        store.list().clear()
        assert len(store) == 10


class TestCreate:
    def test_id_is_length_plus_two(self, store):
        assert store.create("A", 1.0, "a", "/a.png").id == 12
        assert store.create("B", 2.0, "b", "/b.png").id == 13

    def test_empty_store_starts_at_two(self):
        assert ProductStore().create("A", 1.0, "a", "/a.png").id == 2

    def test_concurrent_creates_are_serialized(self, store):
        with ThreadPoolExecutor(max_workers=8) as pool:
            created = list(pool.map(lambda i: store.create(f"P{i}", 1.0, "", ""), range(50)))
        assert len(store) == 60
        # Chaque création voit une longueur distincte
        assert sorted(p.id for p in created) == list(range(12, 62))


class TestLookup:
    def test_get_missing_raises(self, store):
        with pytest.raises(ProductNotFoundError) as exc:
            store.get(42)
        assert exc.value.product_id == 42

    def test_update_missing_raises(self, store):
        with pytest.raises(ProductNotFoundError):
            store.update(make_product(42))
        assert len(store) == 10

    def test_delete_missing_raises(self, store):
        with pytest.raises(ProductNotFoundError):
            store.delete(42)
        assert len(store) == 10

    def test_delete_returns_removed_product(self, store):
        removed = store.delete(3)
        assert removed.id == 3
        assert [p.id for p in store.list()] == [1, 2, 4, 5, 6, 7, 8, 9, 10]

    def test_first_match_wins_on_duplicates(self, store):
        assert store.create("First", 1.0, "", "").id == 12
        store.delete(1)
        assert store.create("Second", 1.0, "", "").id == 12
        assert store.get(12).name == "First"
        store.update(make_product(12, "Updated"))
        assert [p.name for p in store.list() if p.id == 12] == ["Updated", "Second"]
