# tests/test_store.py
from product_api.database import ProductStore, seeded_store
from product_api.models import ProductIn


def _draft(name="Kettle", category="kitchen"):
    return ProductIn(name=name, description="Boils water", price=30, category=category, in_stock=True)


def test_seeded_store_has_sequential_ids():
    store = seeded_store()
    assert [p.id for p in store.get_all()] == ["1", "2", "3"]


def test_append_assigns_next_id():
    store = ProductStore()
    assert store.append(_draft()).id == "1"
    assert store.append(_draft()).id == "2"
    assert len(store) == 2


def test_append_skips_ids_still_in_use():
    store = seeded_store()
    store.remove_at(store.find_index("2"))
    # count is 2, but "3" is still taken
    assert store.append(_draft()).id == "4"
    assert store.append(_draft()).id == "5"


def test_lookups():
    store = seeded_store()
    assert store.get_by_id("2").name == "Smartphone"
    assert store.get_by_id("42") is None
    assert store.find_index("3") == 2
    assert store.find_index("nope") is None


def test_remove_at_returns_removed_product():
    store = seeded_store()
    removed = store.remove_at(0)
    assert removed.name == "Laptop"
    assert store.get_by_id("1") is None


def test_replace_updates_in_place():
    store = seeded_store()
    product = store.get_by_id("3")
    updated = store.replace("3", _draft(name="Espresso Machine"))
    assert updated is product
    assert product.id == "3"
    assert product.name == "Espresso Machine"
    assert product.in_stock is True
    assert store.replace("99", _draft()) is None


def test_get_all_returns_a_copy():
    store = seeded_store()
    snapshot = store.get_all()
    store.append(_draft())
    assert len(snapshot) == 3
    assert len(store.get_all()) == 4


def test_reset():
    store = seeded_store()
    store.reset()
    assert store.get_all() == []
    store.reset([_draft()])
    assert [p.id for p in store.get_all()] == ["1"]
