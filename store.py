# store.py
"""Firestore access for products, categories and collections.

Every function takes the Firestore client as its first argument. SDK errors
are logged and re-raised as ``StoreError`` carrying a message that can be
shown to the user as is.
"""
import logging
from functools import wraps

from google.api_core.exceptions import GoogleAPIError

import config
import site_data
from models import (ValidationError, doc_to_category, doc_to_collection, doc_to_product,
                    now_iso, product_from_form)

logger = logging.getLogger(__name__)


class StoreError(Exception):
    pass


class NotFound(StoreError):
    pass


def guarded(message):
    def decorator(f):
        @wraps(f)
        def wrapped(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except GoogleAPIError as e:
                logger.error("%s failed: %s", f.__name__, e)
                raise StoreError(message) from e
        return wrapped
    return decorator

def _sorted_by_order(items):
    return sorted(items, key=lambda d: (d["order"], d["name"].casefold()))

def _get(db, collection_name, id, convert):
    snap = db.collection(collection_name).document(id).get()
    if not snap.exists:
        return None
    return convert(snap.id, snap.to_dict())

def _create(db, collection_name, data):
    _, ref = db.collection(collection_name).add({**data, "createdAt": now_iso()})
    logger.info("Created %s/%s", collection_name, ref.id)
    return ref.id

def _update(db, collection_name, id, data, label):
    doc = db.collection(collection_name).document(id)
    if not doc.get().exists:
        raise NotFound(f"{label} no encontrado")
    doc.update({**data, "updatedAt": now_iso()})
    logger.info("Updated %s/%s", collection_name, id)

def _delete(db, collection_name, id, label):
    doc = db.collection(collection_name).document(id)
    if not doc.get().exists:
        raise NotFound(f"{label} no encontrado")
    doc.delete()
    logger.info("Deleted %s/%s", collection_name, id)

# ---------- PRODUCTS ----------
_products_cache = None

@guarded("No se pudieron cargar los productos")
def list_products(db):
    query = db.collection(config.products_collection()).order_by("name")
    return [doc_to_product(d.id, d.to_dict()) for d in query.stream()]

def cached_products(db):
    """Product list cached for the life of the process until a mutation."""
    global _products_cache
    if _products_cache is None:
        _products_cache = list_products(db)
        logger.info("Loaded %d products from Firestore", len(_products_cache))
    return _products_cache

def invalidate_products():
    global _products_cache
    _products_cache = None

@guarded("No se pudo cargar el producto")
def get_product(db, id):
    return _get(db, config.products_collection(), id, doc_to_product)

@guarded("No se pudo crear el producto")
def create_product(db, data):
    try:
        return _create(db, config.products_collection(), data)
    finally:
        invalidate_products()

@guarded("No se pudo actualizar el producto")
def update_product(db, id, data):
    try:
        _update(db, config.products_collection(), id, data, "Producto")
    finally:
        invalidate_products()

@guarded("No se pudo eliminar el producto")
def delete_product(db, id):
    try:
        _delete(db, config.products_collection(), id, "Producto")
    finally:
        invalidate_products()

def bulk_create_products(db, records):
    """Create each record independently; a failing row does not stop the rest."""
    result = {"created": 0, "failed": 0, "errors": []}
    for row, record in enumerate(records, start=1):
        if not isinstance(record, dict):
            result["failed"] += 1
            result["errors"].append(f"Fila {row}: formato inválido")
            continue
        name = str(record.get("name") or "").strip() or "Sin nombre"
        try:
            create_product(db, product_from_form(record))
            result["created"] += 1
        except (ValidationError, StoreError) as e:
            result["failed"] += 1
            result["errors"].append(f"{name}: {e}")
    if result["failed"]:
        logger.warning("Bulk import: %d created, %d failed: %s",
                       result["created"], result["failed"], "; ".join(result["errors"]))
    else:
        logger.info("Bulk import: %d created", result["created"])
    return result

# ---------- CATEGORIES ----------
@guarded("No se pudieron cargar las categorías")
def list_categories(db):
    docs = db.collection(config.categories_collection()).stream()
    return _sorted_by_order(doc_to_category(d.id, d.to_dict()) for d in docs)

@guarded("No se pudo cargar la categoría")
def get_category(db, id):
    return _get(db, config.categories_collection(), id, doc_to_category)

def get_category_by_slug(db, slug):
    return next((c for c in list_categories(db) if c["slug"] == slug), None)

@guarded("No se pudo crear la categoría")
def create_category(db, data):
    return _create(db, config.categories_collection(), data)

@guarded("No se pudo actualizar la categoría")
def update_category(db, id, data):
    _update(db, config.categories_collection(), id, data, "Categoría")

@guarded("No se pudo eliminar la categoría")
def delete_category(db, id):
    _delete(db, config.categories_collection(), id, "Categoría")

# ---------- COLLECTIONS ----------
@guarded("No se pudieron cargar las colecciones")
def list_collections(db):
    docs = db.collection(config.collections_collection()).stream()
    return _sorted_by_order(doc_to_collection(d.id, d.to_dict()) for d in docs)

@guarded("No se pudo cargar la colección")
def get_collection(db, id):
    return _get(db, config.collections_collection(), id, doc_to_collection)

def get_collection_by_slug(db, slug):
    return next((c for c in list_collections(db) if c["slug"] == slug), None)

def featured_collections(db):
    return [c for c in list_collections(db) if c["featured"]]

@guarded("No se pudo crear la colección")
def create_collection(db, data):
    return _create(db, config.collections_collection(), data)

@guarded("No se pudo actualizar la colección")
def update_collection(db, id, data):
    _update(db, config.collections_collection(), id, data, "Colección")

@guarded("No se pudo eliminar la colección")
def delete_collection(db, id):
    _delete(db, config.collections_collection(), id, "Colección")

def add_products_to_collection(db, collection_id, product_ids):
    col = get_collection(db, collection_id)
    if col is None:
        raise NotFound("Colección no encontrada")
    ids = list(col["productIds"])
    ids += [pid for pid in dict.fromkeys(product_ids) if pid not in ids]
    update_collection(db, collection_id, {"productIds": ids})
    return ids

def remove_products_from_collection(db, collection_id, product_ids):
    col = get_collection(db, collection_id)
    if col is None:
        raise NotFound("Colección no encontrada")
    drop = set(product_ids)
    ids = [pid for pid in col["productIds"] if pid not in drop]
    update_collection(db, collection_id, {"productIds": ids})
    return ids

# ---------- SEED ----------
def seed_database(db):
    """Create the starter categories and collections; failures are logged and skipped."""
    created = {"categories": 0, "collections": 0}
    for category in site_data.SEED_CATEGORIES:
        try:
            create_category(db, category)
            created["categories"] += 1
        except StoreError as e:
            logger.error("Seed category %s failed: %s", category["name"], e)
    for collection in site_data.SEED_COLLECTIONS:
        try:
            create_collection(db, collection)
            created["collections"] += 1
        except StoreError as e:
            logger.error("Seed collection %s failed: %s", collection["name"], e)
    logger.info("Seeded %(categories)d categories, %(collections)d collections", created)
    return created
