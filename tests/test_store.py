import pytest

import store


def test_list_products_ordered_by_name(products):
    names = [p["name"] for p in store.list_products(products)]
    assert names == ["Cojín Lino", "Lámpara Arc", "Sofá Riviera"]

def test_create_stamps_created_at_and_invalidates_cache(db):
    assert store.cached_products(db) == []
    new_id = store.create_product(db, {"name": "Mesa", "price": 35000})
    stored = db.collection("products").docs[new_id]
    assert stored["createdAt"]
    assert [p["id"] for p in store.cached_products(db)] == [new_id]

def test_update_and_delete(products):
    store.update_product(products, "p2", {"price": 399000})
    assert store.get_product(products, "p2")["price"] == 399000
    assert products.collection("products").docs["p2"]["updatedAt"]
    store.delete_product(products, "p2")
    assert store.get_product(products, "p2") is None

def test_missing_records_raise_not_found(db):
    with pytest.raises(store.NotFound):
        store.update_category(db, "nope", {"name": "x"})
    with pytest.raises(store.NotFound):
        store.delete_collection(db, "nope")

def test_sdk_errors_become_store_error(db):
    db.down = True
    with pytest.raises(store.StoreError, match="No se pudieron cargar los productos"):
        store.list_products(db)

def test_bulk_create_reports_per_row(db):
    db.reject_names.add("Rechazado")
    result = store.bulk_create_products(db, [
        {"name": "Mesa", "price": 35000},
        {"name": "Rechazado", "price": 1000},
        {"name": "", "price": 1000},
        {"name": "Silla", "price": 12000},
    ])
    assert result["created"] == 2
    assert result["failed"] == 2
    assert result["errors"][0].startswith("Rechazado:")
    assert result["errors"][1].startswith("Sin nombre:")
    assert len(db.collection("products").docs) == 2

def test_bulk_create_counts_malformed_rows_as_failed(db):
    result = store.bulk_create_products(db, [
        {"name": "Mesa", "price": 10},
        "junk",
        {"name": 42, "price": 5},
        {"name": ["x"], "price": 5},
    ])
    assert result["created"] == 2
    assert result["failed"] == 2
    assert result["errors"][0] == "Fila 2: formato inválido"
    assert result["errors"][1].endswith("El campo name debe ser texto")
    names = sorted(d["name"] for d in db.collection("products").docs.values())
    assert names == ["42", "Mesa"]

def test_categories_sorted_by_order_then_name(db):
    db.seed("categories", "c1", {"slug": "cocina", "name": "Cocina", "order": 3})
    db.seed("categories", "c2", {"slug": "living", "name": "Living", "order": 1})
    db.seed("categories", "c3", {"slug": "arte", "nombre": "Arte", "order": 3})
    assert [c["slug"] for c in store.list_categories(db)] == ["living", "arte", "cocina"]
    assert store.get_category(db, "c2")["slug"] == "living"
    assert store.get_category(db, "missing") is None
    assert store.get_category_by_slug(db, "arte")["name"] == "Arte"
    assert store.get_category_by_slug(db, "jardin") is None

def test_featured_collections(db):
    db.seed("collections", "k1", {"slug": "vintage", "name": "Vintage", "featured": True})
    db.seed("collections", "k2", {"slug": "minimal", "name": "Minimal", "destacado": False})
    assert [c["slug"] for c in store.featured_collections(db)] == ["vintage"]

def test_add_and_remove_collection_products(db):
    db.seed("collections", "k1", {"slug": "vintage", "name": "Vintage", "productIds": ["a"]})
    assert store.add_products_to_collection(db, "k1", ["b", "a", "b"]) == ["a", "b"]
    assert store.remove_products_from_collection(db, "k1", ["a"]) == ["b"]
    assert store.get_collection(db, "k1")["productIds"] == ["b"]
    with pytest.raises(store.NotFound):
        store.add_products_to_collection(db, "missing", ["a"])

def test_seed_database(db):
    created = store.seed_database(db)
    assert created == {"categories": 10, "collections": 5}
    assert store.get_collection_by_slug(db, "primavera-2026")["endDate"] == "2026-05-31"
