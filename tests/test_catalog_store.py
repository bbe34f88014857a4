"""Product catalog create/update/delete and owner queries."""

import json

import pytest
from pydantic import ValidationError

from src.database.models import ProductInput
from src.marketplace.catalog_store import PRODUCTS_KEY, CatalogStore


def _input(**overrides):
    data = {
        "name": "Brass Diya",
        "description": "Hand-polished oil lamp",
        "seller_price": 249.0,
        "mrp": 299.0,
        "category": "Puja Items & Accessories",
        "weight": 150.0,
        "weight_unit": "g",
        "quantity": 1,
        "quantity_unit": "pieces",
        "image_url": "https://images.example.com/diya.jpg",
    }
    data.update(overrides)
    return ProductInput(**data)


def test_create_adds_exactly_one_record_for_owner(catalog, storage):
    product = catalog.create(_input(), "vendor-1")

    assert len(catalog.products) == 1
    assert product.vendor_id == "vendor-1"
    assert product.in_stock is True
    assert [p.id for p in catalog.list_by_owner("vendor-1")] == [product.id]
    assert catalog.list_by_owner("vendor-2") == []

    stored = json.loads(storage.get_item(PRODUCTS_KEY))
    assert stored[0]["id"] == product.id


def test_list_by_owner_keeps_insertion_order(catalog):
    a = catalog.create(_input(name="A"), "vendor-1")
    catalog.create(_input(name="B"), "vendor-2")
    c = catalog.create(_input(name="C"), "vendor-1")
    assert [p.id for p in catalog.list_by_owner("vendor-1")] == [a.id, c.id]


def test_update_merges_fields(catalog):
    product = catalog.create(_input(), "vendor-1")
    updated = catalog.update(product.id, {"name": "Large Brass Diya", "seller_price": 349.0})

    assert updated.name == "Large Brass Diya"
    assert updated.seller_price == 349.0
    assert updated.mrp == product.mrp
    assert catalog.get(product.id) == updated


def test_update_unknown_id_is_a_noop(catalog, storage):
    catalog.create(_input(), "vendor-1")
    before = storage.get_item(PRODUCTS_KEY)
    assert catalog.update("missing", {"name": "x"}) is None
    assert storage.get_item(PRODUCTS_KEY) == before


def test_update_never_changes_id_or_created_at(catalog):
    product = catalog.create(_input(), "vendor-1")
    updated = catalog.update(product.id, {"id": "other", "created_at": "2000-01-01T00:00:00Z", "name": "Renamed"})
    assert updated.id == product.id
    assert updated.created_at == product.created_at
    assert updated.name == "Renamed"


def test_update_rejects_invalid_prices(catalog):
    product = catalog.create(_input(), "vendor-1")
    with pytest.raises(ValidationError):
        catalog.update(product.id, {"mrp": -5})
    assert catalog.get(product.id).mrp == product.mrp


def test_toggle_stock_twice_restores_state(catalog):
    product = catalog.create(_input(), "vendor-1")

    once = catalog.toggle_stock(product.id)
    assert once.in_stock is False
    twice = catalog.toggle_stock(product.id)
    assert twice.in_stock is True
    assert twice.id == product.id
    assert twice.created_at == product.created_at


def test_delete_removes_record(catalog):
    keep = catalog.create(_input(name="Keep"), "vendor-1")
    drop = catalog.create(_input(name="Drop"), "vendor-1")

    assert catalog.delete(drop.id) is True
    assert [p.id for p in catalog.products] == [keep.id]
    assert catalog.delete(drop.id) is False


def test_collection_survives_new_store(storage):
    first = CatalogStore(storage)
    product = first.create(_input(), "vendor-1")
    first.toggle_stock(product.id)

    reloaded = CatalogStore(storage)
    assert len(reloaded.products) == 1
    assert reloaded.get(product.id).in_stock is False
    assert reloaded.get(product.id).created_at == product.created_at


def test_corrupt_products_are_treated_as_empty(storage, caplog):
    storage.set_item(PRODUCTS_KEY, "not json")
    assert CatalogStore(storage).products == []
    assert "not valid JSON" in caplog.text


def test_invalid_record_is_skipped_and_valid_ones_survive_writes(storage, caplog):
    good = CatalogStore(storage).create(_input(), "vendor-1")
    stored = json.loads(storage.get_item(PRODUCTS_KEY))
    storage.set_item(PRODUCTS_KEY, json.dumps([*stored, {"id": "legacy", "name": "x"}]))

    store = CatalogStore(storage)
    assert [p.id for p in store.products] == [good.id]
    assert "failed validation" in caplog.text

    added = store.create(_input(name="Camphor"), "vendor-1")
    persisted = [p["id"] for p in json.loads(storage.get_item(PRODUCTS_KEY))]
    assert persisted == [good.id, added.id]


def test_stores_sharing_storage_see_each_others_writes(storage):
    first = CatalogStore(storage)
    second = CatalogStore(storage)

    a = first.create(_input(name="A"), "vendor-1")
    b = second.create(_input(name="B"), "vendor-1")

    assert [p.id for p in first.list_by_owner("vendor-1")] == [a.id, b.id]
    assert second.delete(a.id) is True
    assert first.get(a.id) is None
    assert [p.id for p in json.loads(storage.get_item(PRODUCTS_KEY))] == [b.id]


def test_summary_counts_stock(catalog):
    a = catalog.create(_input(), "vendor-1")
    catalog.create(_input(), "vendor-1")
    catalog.create(_input(), "vendor-2")
    catalog.toggle_stock(a.id)
    assert catalog.summary_for_owner("vendor-1") == {"total": 2, "in_stock": 1, "out_of_stock": 1}
