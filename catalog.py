# catalog.py
"""In-memory catalog helpers: filtering, sorting, stats and formatting.

Everything here works on plain product/category/collection dicts as returned
by ``models.doc_to_*`` and never touches Firestore.
"""
import re
import unicodedata
from collections import Counter
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from urllib.parse import quote

import config
import site_data

SORT_OPTIONS = ("destacados", "nombre-asc", "nombre-desc", "precio-asc", "precio-desc")
DEFAULT_SORT = "destacados"


def _name_key(product):
    return product.get("name", "").casefold()

def filter_products(products, category="", search="", price_min=config.PRICE_MIN_DEFAULT,
                    price_max=None, sort=DEFAULT_SORT):
    """Return a new list with the catalog filters applied.

    ``category`` matches the product's category slug exactly, ``search`` is a
    case-insensitive substring of the name, description or any tag, and the
    price range is inclusive (``price_max=None`` means no upper bound).
    ``destacados`` (and any unknown sort key) keeps the incoming order.
    """
    result = list(products)

    if category:
        result = [p for p in result if p.get("category") == category]

    if search:
        q = search.strip().lower()
        result = [p for p in result
                  if q in p.get("name", "").lower()
                  or q in p.get("description", "").lower()
                  or any(q in t.lower() for t in p.get("tags", []))]

    result = [p for p in result if p.get("price", 0) >= price_min]
    if price_max is not None:
        result = [p for p in result if p.get("price", 0) <= price_max]

    if sort == "nombre-asc":
        result.sort(key=_name_key)
    elif sort == "nombre-desc":
        result.sort(key=_name_key, reverse=True)
    elif sort == "precio-asc":
        result.sort(key=lambda p: p.get("price", 0))
    elif sort == "precio-desc":
        result.sort(key=lambda p: p.get("price", 0), reverse=True)

    return result

def has_active_filters(category="", search="", price_min=config.PRICE_MIN_DEFAULT,
                       price_max=None):
    return bool(category or search or price_min > config.PRICE_MIN_DEFAULT
                or price_max is not None)

def search_admin_products(products, term):
    # admin table search: name or category slug
    if not term:
        return list(products)
    t = term.lower()
    return [p for p in products
            if t in p.get("name", "").lower() or t in p.get("category", "").lower()]

def product_stats(products):
    return {
        "total": len(products),
        "featured": sum(1 for p in products if p.get("featured") is True),
        "categories": len({p.get("category") for p in products}),
    }

def category_counts(products):
    return Counter(p.get("category", "") for p in products)

def categories_with_counts(categories, products):
    counts = category_counts(products)
    return [{**c, "count": counts.get(c.get("slug"), 0)} for c in categories]

def collection_products(collection, products):
    """Products referenced by ``collection`` in its own order; unknown ids are skipped."""
    by_id = {p["id"]: p for p in products if p.get("id")}
    return [by_id[pid] for pid in collection.get("productIds", []) if pid in by_id]

def _parse_day(value):
    if not value:
        return None
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None

def is_collection_active(collection, today=None):
    today = today or date.today()
    start = _parse_day(collection.get("startDate"))
    end = _parse_day(collection.get("endDate"))
    if start and today < start:
        return False
    if end and today > end:
        return False
    return True

def active_collections(collections, today=None):
    return [c for c in collections if is_collection_active(c, today)]

# ---------- formatting ----------
def format_price(value):
    """Format a CLP amount the way es-CL does: ``$1.890.000``."""
    try:
        amount = Decimal(str(float(value)))
    except (TypeError, ValueError):
        amount = Decimal(0)
    if not amount.is_finite():
        amount = Decimal(0)
    # es-CL rounds halves away from zero, not to even
    amount = int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,}".replace(",", ".")

def truncate(text, max_length):
    if len(text) <= max_length:
        return text
    return text[:max_length].rstrip() + "…"

def slugify(text):
    s = unicodedata.normalize("NFD", str(text).lower())
    s = "".join(ch for ch in s if not unicodedata.combining(ch))
    s = re.sub(r"[^a-z0-9\s-]", "", s)
    s = re.sub(r"\s+", "-", s)
    s = re.sub(r"-+", "-", s)
    return s.strip()

def whatsapp_url(message=site_data.WHATSAPP_DEFAULT_MESSAGE):
    # same escaping as encodeURIComponent
    text = quote(message, safe="-_.!~*'()")
    return f"https://wa.me/{site_data.CONTACT['whatsapp']}?text={text}"

def contact_message(name, message):
    return (f"Hola! Me contacto desde la web. Soy {name or 'un cliente'} "
            f"y quería consultar: {message or '...'}")
