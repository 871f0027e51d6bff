# models.py
"""Record shapes for products, categories and collections.

Firestore documents are schema-less, so everything read back goes through a
``doc_to_*`` function that fills defaults and accepts the older Spanish field
names. Admin form / JSON payloads go through ``*_from_form`` which coerces
types and raises ``ValidationError`` with a message fit for the UI.
"""
import math
from datetime import datetime, timezone

from catalog import slugify

DEFAULT_PRODUCT_EMOJI = "🏺"
DEFAULT_CATEGORY_EMOJI = "📦"

TRUE_STRINGS = {"si", "sí", "yes", "true", "1", "on", "x"}


class ValidationError(ValueError):
    pass


def now_iso():
    return datetime.now(timezone.utc).isoformat()

def to_number(value, default=0):
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        num = float(str(value).strip().replace(",", "."))
    except ValueError:
        return default
    # nan and inf are not prices or quantities
    if not math.isfinite(num):
        return default
    return int(num) if num.is_integer() else num

def to_bool(value):
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return bool(value)

def to_list(value, separators=","):
    """Accept a list or a delimited string; strips blanks."""
    if isinstance(value, (list, tuple)):
        items = [str(v) for v in value]
    elif isinstance(value, str):
        items = [value]
        for sep in separators:
            items = [part for item in items for part in item.split(sep)]
    else:
        return []
    return [i.strip() for i in items if i.strip()]

# ---------- Firestore -> dict ----------
def doc_to_product(id, data):
    return {
        "id": id,
        "name": str(data.get("name") or ""),
        "category": str(data.get("category") or ""),
        "price": to_number(data.get("price")),
        "description": str(data.get("description") or ""),
        "emoji": data.get("emoji") or DEFAULT_PRODUCT_EMOJI,
        "featured": bool(data.get("featured")),
        "tags": [str(t) for t in data["tags"]] if isinstance(data.get("tags"), list) else [],
        "stock": int(to_number(data["stock"])) if data.get("stock") is not None else None,
        "sku": data.get("sku") or "",
        "createdAt": data.get("createdAt"),
        "updatedAt": data.get("updatedAt"),
    }

def doc_to_category(id, data):
    return {
        "id": id,
        "slug": data.get("slug") or "",
        "name": data.get("name") or data.get("nombre") or "",
        "description": data.get("description") or data.get("descripcion") or "",
        "emoji": data.get("emoji") or DEFAULT_CATEGORY_EMOJI,
        "order": to_number(data.get("order"), 0),
        "featured": bool(data.get("featured") or data.get("destacado")),
        "createdAt": data.get("createdAt"),
        "updatedAt": data.get("updatedAt"),
    }

def doc_to_collection(id, data):
    product_ids = data.get("productIds")
    return {
        "id": id,
        "slug": data.get("slug") or "",
        "name": data.get("name") or data.get("nombre") or "",
        "description": data.get("description") or data.get("descripcion") or "",
        "imageUrl": data.get("imageUrl") or data.get("imagen") or "",
        "featured": bool(data.get("featured") or data.get("destacado")),
        "productIds": to_list(product_ids) if isinstance(product_ids, (list, str)) else [],
        "order": to_number(data.get("order"), 0),
        "startDate": data.get("startDate") or data.get("fechaInicio"),
        "endDate": data.get("endDate") or data.get("fechaFin"),
        "createdAt": data.get("createdAt"),
        "updatedAt": data.get("updatedAt"),
    }

# ---------- form / JSON -> Firestore payload ----------
def _clean(form, key):
    """Form field as stripped text; numbers are stringified, containers refused."""
    value = form.get(key)
    if value is None:
        return ""
    if isinstance(value, (dict, list, tuple)):
        raise ValidationError(f"El campo {key} debe ser texto")
    return str(value).strip()

def product_from_form(form, partial=False):
    """Build a product payload. With ``partial`` only the given keys are kept (PUT)."""
    data = {}
    if not partial or "name" in form:
        data["name"] = _clean(form, "name") or ""
        if not data["name"]:
            raise ValidationError("El nombre del producto es obligatorio")
    if not partial or "price" in form:
        price = to_number(form.get("price"), None)
        if price is None or price < 0:
            raise ValidationError("El precio debe ser un número mayor o igual a 0")
        data["price"] = price
    if not partial or "category" in form:
        data["category"] = (_clean(form, "category") or "").lower()
    if not partial or "description" in form:
        data["description"] = _clean(form, "description") or ""
    if not partial or "emoji" in form:
        data["emoji"] = _clean(form, "emoji") or DEFAULT_PRODUCT_EMOJI
    if not partial or "featured" in form:
        data["featured"] = to_bool(form.get("featured", False))
    if not partial or "tags" in form:
        data["tags"] = [t.lower() for t in to_list(form.get("tags"))]
    if not partial or "stock" in form:
        stock = to_number(form.get("stock"), None)
        data["stock"] = int(stock) if stock is not None else None
    if not partial or "sku" in form:
        data["sku"] = _clean(form, "sku") or ""
    return data

def _named_payload(form, partial, what):
    data = {}
    if not partial or "name" in form:
        data["name"] = _clean(form, "name") or ""
        if not data["name"]:
            raise ValidationError(f"El nombre de la {what} es obligatorio")
    if not partial or "slug" in form:
        data["slug"] = slugify(_clean(form, "slug") or data.get("name", ""))
        if not data["slug"]:
            raise ValidationError(f"El slug de la {what} es obligatorio")
    if not partial or "description" in form:
        data["description"] = _clean(form, "description") or ""
    if not partial or "order" in form:
        data["order"] = to_number(form.get("order"), 0)
    if not partial or "featured" in form:
        data["featured"] = to_bool(form.get("featured", False))
    return data

def category_from_form(form, partial=False):
    data = _named_payload(form, partial, "categoría")
    if not partial or "emoji" in form:
        data["emoji"] = _clean(form, "emoji") or DEFAULT_CATEGORY_EMOJI
    return data

def collection_from_form(form, partial=False):
    data = _named_payload(form, partial, "colección")
    if not partial or "imageUrl" in form:
        data["imageUrl"] = _clean(form, "imageUrl") or ""
    if not partial or "productIds" in form:
        data["productIds"] = to_list(form.get("productIds"))
    for key in ("startDate", "endDate"):
        if not partial or key in form:
            data[key] = _clean(form, key) or None
    if data.get("startDate") and data.get("endDate") and data["startDate"] > data["endDate"]:
        raise ValidationError("La fecha de inicio debe ser anterior a la fecha de fin")
    return data
