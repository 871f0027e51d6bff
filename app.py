# app.py
import io, csv, logging, math
from functools import wraps
from flask import (Flask, render_template, request, jsonify, session,
                   redirect, url_for, send_file, flash, abort)
import firebase_admin
from firebase_admin import credentials, firestore, auth as firebase_auth
from firebase_admin.exceptions import FirebaseError

import config
import catalog
import site_data
import store
from auth import ADMIN, UNINITIALIZED, admin_access, parse_admin_emails
from importer import SpreadsheetError, parse_spreadsheet
from models import (ValidationError, category_from_form, collection_from_form,
                    product_from_form)

# logging
logging.basicConfig(level=config.LOG_LEVEL,
                    format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Flask
app = Flask(__name__, template_folder="templates", static_folder="static")
app.secret_key = config.SECRET_KEY
app.config["ADMIN_EMAILS"] = parse_admin_emails(config.ADMIN_EMAILS)
app.jinja_env.filters["price"] = catalog.format_price
app.jinja_env.filters["truncate_text"] = catalog.truncate

# Firebase Admin, initialised on first use
def init_firebase():
    if not firebase_admin._apps:
        cred = credentials.Certificate(config.FIREBASE_CREDENTIALS)
        firebase_admin.initialize_app(cred)

def get_db():
    db = app.config.get("FIRESTORE_CLIENT")
    if db is None:
        try:
            init_firebase()
            db = firestore.client()
        except (OSError, ValueError) as e:
            logging.error("Firestore unavailable: %s", e)
            raise store.StoreError("No se pudo conectar con la base de datos") from e
        app.config["FIRESTORE_CLIENT"] = db
    return db

def verify_id_token(id_token):
    init_firebase()
    return firebase_auth.verify_id_token(id_token)

def current_admin_state():
    return admin_access(session.get("admin_user"), app.config["ADMIN_EMAILS"])

# admin decorator
def admin_required(f):
    @wraps(f)
    def decorated(*args, **kwargs):
        state = current_admin_state()
        if state == ADMIN:
            return f(*args, **kwargs)
        if request.path.startswith("/api/"):
            if state == UNINITIALIZED:
                return json_error("Debes iniciar sesión", 401)
            return json_error("No tienes permisos de administrador", 403)
        if state != UNINITIALIZED:
            session.pop("admin_user", None)
            flash("Tu cuenta no tiene acceso al panel de administración", "danger")
        return redirect(url_for("admin_login"))
    return decorated

@app.context_processor
def inject_site():
    return {"site": site_data.SITE, "contact": site_data.CONTACT,
            "nav_links": site_data.NAV_LINKS, "whatsapp_url": catalog.whatsapp_url(),
            "is_admin": current_admin_state() == ADMIN,
            "admin_user": session.get("admin_user")}

# ---------- ERRORS ----------
def json_error(message, status):
    return jsonify({"success": False, "message": message}), status

def wants_json():
    return request.path.startswith("/api/")

@app.errorhandler(ValidationError)
@app.errorhandler(SpreadsheetError)
def handle_bad_input(e):
    return json_error(str(e), 400)

@app.errorhandler(store.NotFound)
def handle_missing_record(e):
    if wants_json():
        return json_error(str(e), 404)
    return render_template("error.html", code=404, message=str(e)), 404

@app.errorhandler(store.StoreError)
def handle_store_error(e):
    if wants_json():
        return json_error(str(e), 503)
    return render_template("error.html", code=503, message=str(e)), 503

@app.errorhandler(404)
def page_not_found(e):
    if wants_json():
        return json_error("Recurso no encontrado", 404)
    return render_template("error.html", code=404,
                           message="La página que buscas no existe."), 404

@app.errorhandler(500)
def server_error(e):
    logging.error("Unhandled error on %s: %s", request.path, getattr(e, "original_exception", e))
    if wants_json():
        return json_error("Error interno del servidor", 500)
    return render_template("error.html", code=500,
                           message="Algo salió mal. Intenta nuevamente."), 500

def request_data():
    data = request.get_json(silent=True)
    # only a JSON object carries fields; anything else falls back to the form
    return data if isinstance(data, dict) else request.form.to_dict()

# ---------- PUBLIC DATA ----------
def load_products():
    """Products for public pages and whether they are the bundled fallback list."""
    try:
        products = store.cached_products(get_db())
    except store.StoreError as e:
        logging.warning("Falling back to bundled products: %s", e)
        return site_data.FALLBACK_PRODUCTS, True
    if not products:
        return site_data.FALLBACK_PRODUCTS, True
    return products, False

def load_categories():
    try:
        categories = store.list_categories(get_db())
    except store.StoreError as e:
        logging.warning("Falling back to default categories: %s", e)
        categories = []
    return categories or site_data.DEFAULT_CATEGORIES

def load_featured_collections():
    try:
        return catalog.active_collections(store.featured_collections(get_db()))
    except store.StoreError as e:
        logging.warning("Collections unavailable: %s", e)
        return []

def price_bound(args, key, default=None):
    value = args.get(key, type=float)
    if value is None or not math.isfinite(value):
        return default
    return value

def catalog_filters(args):
    sort = args.get("sort", catalog.DEFAULT_SORT)
    if sort not in catalog.SORT_OPTIONS:
        sort = catalog.DEFAULT_SORT
    return {
        "category": args.get("categoria", "").strip(),
        "search": args.get("q", "").strip(),
        "price_min": price_bound(args, "min", config.PRICE_MIN_DEFAULT),
        "price_max": price_bound(args, "max"),
        "sort": sort,
    }

# ---------- PUBLIC PAGES ----------
@app.route("/")
def home():
    products, using_local = load_products()
    categories = catalog.categories_with_counts(load_categories(), products)
    featured = [p for p in products if p.get("featured")][:6]
    return render_template("home.html", copy=site_data.COPY, featured=featured,
                           categories=categories, collections=load_featured_collections(),
                           testimonials=site_data.TESTIMONIALS, benefits=site_data.BENEFITS,
                           using_local_data=using_local)

@app.route("/catalogo")
def catalog_page():
    products, using_local = load_products()
    filters = catalog_filters(request.args)
    results = catalog.filter_products(products, **filters)
    active = catalog.has_active_filters(filters["category"], filters["search"],
                                        filters["price_min"], filters["price_max"])
    return render_template("catalog.html", products=results, filters=filters,
                           categories=load_categories(), sort_labels=site_data.SORT_LABELS,
                           has_active_filters=active, using_local_data=using_local)

@app.route("/api/catalog")
def api_catalog():
    products, using_local = load_products()
    filters = catalog_filters(request.args)
    results = catalog.filter_products(products, **filters)
    return jsonify({"products": results, "count": len(results),
                    "using_local_data": using_local, "filters": filters})

@app.route("/colecciones/<slug>")
def collection_page(slug):
    col = store.get_collection_by_slug(get_db(), slug)
    if col is None:
        abort(404)
    products, _ = load_products()
    return render_template("collection.html", collection=col,
                           products=catalog.collection_products(col, products))

@app.route("/nosotros")
def about_page():
    return render_template("about.html", copy=site_data.COPY["about"])

@app.route("/contacto", methods=["GET", "POST"])
def contact_page():
    if request.method == "GET":
        return render_template("contact.html", copy=site_data.COPY["contact"])
    name = request.form.get("nombre", "").strip()
    message = request.form.get("mensaje", "").strip()
    return redirect(catalog.whatsapp_url(catalog.contact_message(name, message)))

# ---------- ADMIN AUTH ----------
@app.route("/admin")
def admin_login():
    if current_admin_state() == ADMIN:
        return redirect(url_for("admin_dashboard"))
    return render_template("admin/login.html", firebase_config=config.FIREBASE_WEB_CONFIG)

@app.route("/api/admin/session", methods=["POST"])
def api_admin_session():
    id_token = (request_data().get("idToken") or "").strip()
    if not id_token:
        return json_error("Falta el token de inicio de sesión", 400)
    try:
        claims = verify_id_token(id_token)
    except (ValueError, OSError, FirebaseError) as e:
        logging.warning("Rejected sign-in token: %s", e)
        return json_error("No se pudo verificar el inicio de sesión", 401)

    user = {"uid": claims.get("uid"), "email": claims.get("email"),
            "name": claims.get("name", "")}
    if admin_access(user, app.config["ADMIN_EMAILS"]) != ADMIN:
        logging.warning("Admin access denied for %s", user["email"])
        session.pop("admin_user", None)
        return json_error("Tu cuenta no tiene acceso al panel de administración", 403)

    session["admin_user"] = user
    logging.info("Admin login: %s", user["email"])
    return jsonify({"success": True, "redirect": url_for("admin_dashboard")})

@app.route("/admin/logout")
def admin_logout():
    session.pop("admin_user", None)
    flash("Sesión cerrada", "info")
    return redirect(url_for("admin_login"))

# ---------- ADMIN PAGES ----------
@app.route("/admin/dashboard")
@admin_required
def admin_dashboard():
    term = request.args.get("q", "").strip()
    try:
        products = store.cached_products(get_db())
    except store.StoreError as e:
        flash(str(e), "danger")
        products = []
    return render_template("admin/dashboard.html",
                           products=catalog.search_admin_products(products, term),
                           stats=catalog.product_stats(products), search=term,
                           total=len(products), categories=load_categories())

@app.route("/admin/categories")
@admin_required
def admin_categories():
    try:
        categories = store.list_categories(get_db())
        counts = catalog.category_counts(store.cached_products(get_db()))
    except store.StoreError as e:
        flash(str(e), "danger")
        categories, counts = [], {}
    return render_template("admin/categories.html", categories=categories, counts=counts)

@app.route("/admin/collections")
@admin_required
def admin_collections():
    try:
        collections = store.list_collections(get_db())
        products = store.cached_products(get_db())
    except store.StoreError as e:
        flash(str(e), "danger")
        collections, products = [], []
    return render_template("admin/collections.html", collections=collections,
                           products=products)

# ---------- PRODUCTS ----------
@app.route("/api/products", methods=["GET", "POST"])
@admin_required
def api_products():
    db = get_db()
    if request.method == "GET":
        return jsonify({"products": store.list_products(db)})
    new_id = store.create_product(db, product_from_form(request_data()))
    return jsonify({"success": True, "id": new_id}), 201

@app.route("/api/products/<id>", methods=["PUT", "DELETE"])
@admin_required
def api_product_item(id):
    db = get_db()
    if request.method == "PUT":
        store.update_product(db, id, product_from_form(request_data(), partial=True))
    else:
        store.delete_product(db, id)
    return jsonify({"success": True})

@app.route("/api/products/import/preview", methods=["POST"])
@admin_required
def api_products_import_preview():
    f = request.files.get("file")
    if not f or not f.filename:
        return json_error("No se subió ningún archivo", 400)
    products = parse_spreadsheet(f.filename, f.stream)
    return jsonify({"success": True, "products": products})

@app.route("/api/products/import", methods=["POST"])
@admin_required
def api_products_import():
    records = request_data().get("products")
    if not isinstance(records, list) or not records:
        return json_error("No hay productos para importar", 400)
    result = store.bulk_create_products(get_db(), records)
    logging.info("Import by %s: %d created, %d failed",
                 session["admin_user"]["email"], result["created"], result["failed"])
    return jsonify({"success": result["failed"] == 0, **result})

# ---------- Download CSV generic helper ----------
def rows_to_csv_bytes(rows, header):
    out = io.StringIO(); w = csv.writer(out)
    w.writerow(header)
    for r in rows: w.writerow([r.get(k, "") for k in header])
    out.seek(0)
    return io.BytesIO(out.getvalue().encode("utf-8-sig"))

@app.route("/admin/products/export")
@admin_required
def products_export():
    header = ["id", "name", "category", "price", "description", "emoji",
              "featured", "tags", "stock", "sku"]
    rows = []
    for p in store.list_products(get_db()):
        rows.append({**p, "tags": ", ".join(p["tags"]),
                     "featured": "si" if p["featured"] else "no",
                     "stock": "" if p["stock"] is None else p["stock"]})
    buf = rows_to_csv_bytes(rows, header)
    return send_file(buf, as_attachment=True, download_name="productos.csv",
                     mimetype="text/csv")

# ---------- CATEGORIES ----------
@app.route("/api/categories", methods=["GET", "POST"])
@admin_required
def api_categories():
    db = get_db()
    if request.method == "GET":
        return jsonify({"categories": store.list_categories(db)})
    new_id = store.create_category(db, category_from_form(request_data()))
    return jsonify({"success": True, "id": new_id}), 201

@app.route("/api/categories/<id>", methods=["PUT", "DELETE"])
@admin_required
def api_category_item(id):
    db = get_db()
    if request.method == "PUT":
        store.update_category(db, id, category_from_form(request_data(), partial=True))
    else:
        store.delete_category(db, id)
    return jsonify({"success": True})

# ---------- COLLECTIONS ----------
@app.route("/api/collections", methods=["GET", "POST"])
@admin_required
def api_collections():
    db = get_db()
    if request.method == "GET":
        return jsonify({"collections": store.list_collections(db)})
    new_id = store.create_collection(db, collection_from_form(request_data()))
    return jsonify({"success": True, "id": new_id}), 201

@app.route("/api/collections/<id>", methods=["PUT", "DELETE"])
@admin_required
def api_collection_item(id):
    db = get_db()
    if request.method == "PUT":
        store.update_collection(db, id, collection_from_form(request_data(), partial=True))
    else:
        store.delete_collection(db, id)
    return jsonify({"success": True})

@app.route("/api/collections/<id>/products", methods=["POST", "DELETE"])
@admin_required
def api_collection_products(id):
    ids = request_data().get("productIds")
    if not isinstance(ids, list) or not ids:
        return json_error("Indica al menos un producto", 400)
    db = get_db()
    if request.method == "POST":
        product_ids = store.add_products_to_collection(db, id, ids)
    else:
        product_ids = store.remove_products_from_collection(db, id, ids)
    return jsonify({"success": True, "productIds": product_ids})

# ---------- SEED ----------
@app.route("/api/admin/seed", methods=["POST"])
@admin_required
def api_seed():
    created = store.seed_database(get_db())
    return jsonify({"success": True, **created})

# ---------- run ----------
if __name__ == "__main__":
    app.run(debug=True)
