import itertools

import pytest
from google.api_core import exceptions as gexc

import store
from app import app as flask_app

ADMIN_EMAIL = "admin@decoambiente.cl"


class FakeSnapshot:
    def __init__(self, id, data):
        self.id = id
        self._data = data
        self.exists = data is not None

    def to_dict(self):
        return dict(self._data) if self._data is not None else None


class FakeDocument:
    def __init__(self, collection, id):
        self._collection = collection
        self.id = id

    def get(self):
        self._collection.client.check()
        return FakeSnapshot(self.id, self._collection.docs.get(self.id))

    def update(self, data):
        self._collection.client.check()
        if self.id not in self._collection.docs:
            raise gexc.NotFound(f"No document to update: {self.id}")
        self._collection.docs[self.id].update(data)

    def delete(self):
        self._collection.client.check()
        self._collection.docs.pop(self.id, None)


class FakeCollection:
    def __init__(self, client, name):
        self.client = client
        self.name = name
        self.docs = {}
        self._order = None

    def document(self, id):
        return FakeDocument(self, id)

    def add(self, data):
        self.client.check()
        if data.get("name") in self.client.reject_names:
            raise gexc.InternalServerError("write rejected")
        id = f"{self.name}-{next(self.client.ids)}"
        self.docs[id] = dict(data)
        return None, FakeDocument(self, id)

    def order_by(self, field):
        query = FakeCollection(self.client, self.name)
        query.docs = self.docs
        query._order = field
        return query

    def stream(self):
        self.client.check()
        items = list(self.docs.items())
        if self._order:
            items.sort(key=lambda kv: kv[1].get(self._order, ""))
        for id, data in items:
            yield FakeSnapshot(id, dict(data))


class FakeFirestore:
    """In-memory stand-in for the parts of firestore.Client the app uses."""

    def __init__(self):
        self.collections = {}
        self.ids = itertools.count(1)
        self.down = False
        self.reject_names = set()

    def check(self):
        if self.down:
            raise gexc.ServiceUnavailable("firestore is down")

    def collection(self, name):
        if name not in self.collections:
            self.collections[name] = FakeCollection(self, name)
        return self.collections[name]

    def seed(self, name, id, data):
        self.collection(name).docs[id] = dict(data)


@pytest.fixture(autouse=True)
def fresh_cache():
    store.invalidate_products()
    yield
    store.invalidate_products()


@pytest.fixture
def db():
    return FakeFirestore()


@pytest.fixture
def app(db, monkeypatch):
    monkeypatch.setitem(flask_app.config, "TESTING", True)
    monkeypatch.setitem(flask_app.config, "FIRESTORE_CLIENT", db)
    monkeypatch.setitem(flask_app.config, "ADMIN_EMAILS", frozenset({ADMIN_EMAIL}))
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    with client.session_transaction() as sess:
        sess["admin_user"] = {"uid": "u1", "email": ADMIN_EMAIL, "name": "Camila"}
    return client


@pytest.fixture
def products(db):
    db.seed("products", "p1", {"name": "Sofá Riviera", "category": "living", "price": 1890000,
                                "description": "Sofá de tres cuerpos", "featured": True,
                                "tags": ["madera", "lino"], "stock": 2, "sku": "SOF-001"})
    db.seed("products", "p2", {"name": "Lámpara Arc", "category": "iluminacion", "price": 420000,
                                "description": "Lámpara de pie", "featured": False,
                                "tags": ["marmol"]})
    db.seed("products", "p3", {"name": "Cojín Lino", "category": "textiles", "price": 35000,
                                "description": "Cojín de lino natural", "featured": True,
                                "tags": ["lino"]})
    return db
