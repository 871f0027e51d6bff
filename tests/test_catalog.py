from datetime import date

import catalog

PRODUCTS = [
    {"id": "1", "name": "Sofá Riviera", "category": "living", "price": 1890000,
     "description": "Sofá de tres cuerpos", "tags": ["madera", "lino"], "featured": True},
    {"id": "2", "name": "Lámpara Arc Doré", "category": "iluminacion", "price": 420000,
     "description": "Base de mármol travertino", "tags": ["marmol"], "featured": True},
    {"id": "3", "name": "Alfombra Bereber", "category": "textiles", "price": 950000,
     "description": "Tejida a mano", "tags": ["artesanal"], "featured": False},
    {"id": "4", "name": "mesa Travertino", "category": "living", "price": 670000,
     "description": "Hierro forjado", "tags": ["travertino"], "featured": True},
]


def test_filter_by_category_returns_only_matching():
    result = catalog.filter_products(PRODUCTS, category="living")
    assert [p["id"] for p in result] == ["1", "4"]
    assert all(p["category"] == "living" for p in result)

def test_filter_unknown_category_is_empty():
    assert catalog.filter_products(PRODUCTS, category="cocina") == []

def test_search_matches_name_description_and_tags():
    assert [p["id"] for p in catalog.filter_products(PRODUCTS, search="SOFÁ")] == ["1"]
    assert [p["id"] for p in catalog.filter_products(PRODUCTS, search="travertino")] == ["2", "4"]
    assert [p["id"] for p in catalog.filter_products(PRODUCTS, search="artes")] == ["3"]

def test_price_range_is_inclusive():
    result = catalog.filter_products(PRODUCTS, price_min=420000, price_max=950000)
    assert sorted(p["id"] for p in result) == ["2", "3", "4"]

def test_no_upper_price_bound_unless_given():
    assert len(catalog.filter_products(PRODUCTS)) == 4
    assert [p["id"] for p in catalog.filter_products(PRODUCTS, price_min=1000000)] == ["1"]
    assert catalog.filter_products(PRODUCTS, price_max=0) == []

def test_price_sorting_is_monotonic():
    asc = [p["price"] for p in catalog.filter_products(PRODUCTS, sort="precio-asc")]
    desc = [p["price"] for p in catalog.filter_products(PRODUCTS, sort="precio-desc")]
    assert asc == sorted(asc)
    assert desc == sorted(desc, reverse=True)

def test_name_sorting_ignores_case():
    names = [p["name"] for p in catalog.filter_products(PRODUCTS, sort="nombre-asc")]
    assert names == ["Alfombra Bereber", "Lámpara Arc Doré", "mesa Travertino", "Sofá Riviera"]
    names = [p["name"] for p in catalog.filter_products(PRODUCTS, sort="nombre-desc")]
    assert names[0] == "Sofá Riviera"

def test_default_and_unknown_sort_keep_order():
    assert catalog.filter_products(PRODUCTS) == PRODUCTS
    assert catalog.filter_products(PRODUCTS, sort="bogus") == PRODUCTS

def test_filter_does_not_mutate_input():
    before = list(PRODUCTS)
    catalog.filter_products(PRODUCTS, sort="precio-desc")
    assert PRODUCTS == before

def test_has_active_filters():
    assert not catalog.has_active_filters()
    assert catalog.has_active_filters(category="living")
    assert catalog.has_active_filters(price_max=500000)
    assert catalog.has_active_filters(price_max=0)
    assert not catalog.has_active_filters(price_max=None)

def test_admin_search_by_name_or_category():
    assert [p["id"] for p in catalog.search_admin_products(PRODUCTS, "ilumin")] == ["2"]
    assert len(catalog.search_admin_products(PRODUCTS, "")) == 4

def test_product_stats():
    assert catalog.product_stats(PRODUCTS) == {"total": 4, "featured": 3, "categories": 3}

def test_categories_with_counts():
    cats = [{"slug": "living", "name": "Living"}, {"slug": "cocina", "name": "Cocina"}]
    counted = catalog.categories_with_counts(cats, PRODUCTS)
    assert [c["count"] for c in counted] == [2, 0]

def test_collection_products_follow_collection_order_and_skip_missing():
    col = {"productIds": ["4", "missing", "1"]}
    assert [p["id"] for p in catalog.collection_products(col, PRODUCTS)] == ["4", "1"]

def test_active_collections_respect_date_range():
    cols = [
        {"slug": "spring", "startDate": "2026-03-01", "endDate": "2026-05-31"},
        {"slug": "always"},
        {"slug": "future", "startDate": "2027-01-01"},
    ]
    active = catalog.active_collections(cols, today=date(2026, 4, 15))
    assert [c["slug"] for c in active] == ["spring", "always"]
    active = catalog.active_collections(cols, today=date(2026, 10, 1))
    assert [c["slug"] for c in active] == ["always"]

def test_format_price_uses_clp_thousands():
    assert catalog.format_price(1890000) == "$1.890.000"
    assert catalog.format_price(999) == "$999"
    assert catalog.format_price(12500.6) == "$12.501"
    assert catalog.format_price(None) == "$0"

def test_format_price_rounds_halves_up():
    assert catalog.format_price(2.5) == "$3"
    assert catalog.format_price(1000.5) == "$1.001"
    assert catalog.format_price("12500.5") == "$12.501"
    assert catalog.format_price(float("nan")) == "$0"

def test_slugify():
    assert catalog.slugify("Colección Primavera 2026") == "coleccion-primavera-2026"
    assert catalog.slugify("Arte & Deco") == "arte-deco"
    assert catalog.slugify("Iluminación") == "iluminacion"

def test_truncate():
    assert catalog.truncate("corto", 10) == "corto"
    assert catalog.truncate("una descripción larga", 9) == "una descr…"

def test_whatsapp_url_encodes_message():
    url = catalog.whatsapp_url(catalog.contact_message("Ana", "¿Precio?"))
    assert url.startswith("https://wa.me/56987654321?text=Hola!%20Me%20contacto")
    assert "Ana" in url
    assert " " not in url
