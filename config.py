# config.py
import os
from pathlib import Path

from dotenv import load_dotenv

# a local .env never overrides variables already set in the environment
load_dotenv(Path(__file__).resolve().parent / ".env")

SECRET_KEY = os.environ.get("FLASK_SECRET", "supersecretkey")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Service-account key used by firebase_admin
FIREBASE_CREDENTIALS = os.environ.get("FIREBASE_CREDENTIALS", "firebase-key.json")

# Comma separated list of emails allowed into /admin
ADMIN_EMAILS = os.environ.get("ADMIN_EMAILS", "")

# Public web-SDK config for the Google sign-in popup on /admin
FIREBASE_WEB_CONFIG = {
    "apiKey": os.environ.get("FIREBASE_WEB_API_KEY", ""),
    "authDomain": os.environ.get("FIREBASE_WEB_AUTH_DOMAIN", ""),
    "projectId": os.environ.get("FIREBASE_WEB_PROJECT_ID", ""),
}

# Optional prefix so several sites can share one Firestore project
COLLECTION_PREFIX = os.environ.get("COLLECTION_PREFIX", "")

# Catalog price filter floor (CLP); there is no ceiling unless one is asked for
PRICE_MIN_DEFAULT = 0


def _collection(name: str):
    return f"{COLLECTION_PREFIX}{name}"

def products_collection():
    return _collection("products")

def categories_collection():
    return _collection("categories")

def collections_collection():
    return _collection("collections")
