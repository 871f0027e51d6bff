# importer.py
"""Spreadsheet -> product records for the admin bulk import.

Column names are matched loosely (Spanish or English, any case, accents
optional). The first row is the header; for .xlsx only the first worksheet is
read.
"""
import csv
import io
import logging
import os
import zipfile

from openpyxl import load_workbook

from catalog import slugify
from models import DEFAULT_PRODUCT_EMOJI, to_bool, to_list, to_number

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".xlsx", ".csv")

# field -> accepted header names, already slugified
COLUMN_ALIASES = {
    "name": ("nombre", "name"),
    "category": ("categoria", "category"),
    "price": ("precio", "price"),
    "description": ("descripcion", "description"),
    "emoji": ("emoji",),
    "tags": ("tags", "etiquetas"),
    "featured": ("destacado", "featured"),
    "sku": ("sku", "codigo"),
    "stock": ("stock",),
}


class SpreadsheetError(Exception):
    pass


def _lookup(row, field):
    """First non-empty cell among the aliases of ``field``."""
    for alias in COLUMN_ALIASES[field]:
        value = row.get(alias)
        if value is not None and value != "":
            return value
    return ""

def map_row_to_product(row):
    """Map one spreadsheet row (header -> cell) to a product payload."""
    row = {slugify(k): v for k, v in row.items() if k is not None}

    name = str(_lookup(row, "name")).strip()
    featured_cell = _lookup(row, "featured")
    return {
        "name": name,
        "category": str(_lookup(row, "category")).strip().lower(),
        "price": to_number(_lookup(row, "price")),
        "description": str(_lookup(row, "description")).strip(),
        "emoji": str(_lookup(row, "emoji")).strip() or DEFAULT_PRODUCT_EMOJI,
        "featured": featured_cell is True or to_bool(str(featured_cell)),
        "tags": [t.lower() for t in to_list(str(_lookup(row, "tags")), ",;|")],
        "sku": str(_lookup(row, "sku")).strip() or slugify(name),
        "stock": int(to_number(_lookup(row, "stock"))),
    }

def is_importable(product):
    return bool(product["name"]) and product["price"] > 0

# ---------- readers ----------
def _read_csv(raw):
    text = raw.decode("utf-8-sig")
    # Excel in es-CL locales saves CSV with ";"
    header = text.split("\n", 1)[0]
    delimiter = max(",;\t", key=header.count)
    reader = csv.DictReader(io.StringIO(text, newline=None), delimiter=delimiter)
    return [{k: (v if v is not None else "") for k, v in r.items()} for r in reader]

def _read_xlsx(raw):
    wb = load_workbook(io.BytesIO(raw), read_only=True, data_only=True)
    try:
        ws = wb.worksheets[0]
        rows = ws.iter_rows(values_only=True)
        header = next(rows, None)
        if not header:
            return []
        header = [str(h).strip() if h is not None else None for h in header]
        records = []
        for values in rows:
            if values is None or all(v is None or v == "" for v in values):
                continue
            records.append({h: (v if v is not None else "")
                            for h, v in zip(header, values) if h})
        return records
    finally:
        wb.close()

def read_rows(filename, stream):
    ext = os.path.splitext(filename or "")[1].lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise SpreadsheetError("Formato no soportado. Sube un archivo .xlsx o .csv.")
    raw = stream.read()
    try:
        if ext == ".csv":
            return _read_csv(raw)
        return _read_xlsx(raw)
    except (UnicodeDecodeError, csv.Error, zipfile.BadZipFile, KeyError, ValueError, OSError) as e:
        logger.warning("Could not read spreadsheet %s: %s", filename, e)
        raise SpreadsheetError(
            "Error al leer el archivo. Asegúrate de que sea un .xlsx o .csv válido.") from e

def parse_spreadsheet(filename, stream):
    """Return the import preview: valid product payloads, in sheet order.

    Rows with no name or a price that is not positive are left out.
    """
    rows = read_rows(filename, stream)
    if not rows:
        raise SpreadsheetError("El archivo está vacío.")

    products = [p for p in (map_row_to_product(r) for r in rows) if is_importable(p)]
    if not products:
        raise SpreadsheetError('No se encontraron productos válidos. Asegúrate de tener '
                               'columnas "nombre" y "precio".')
    logger.info("Parsed %s: %d rows, %d importable", filename, len(rows), len(products))
    return products
