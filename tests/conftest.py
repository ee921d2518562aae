# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from product_api.config import Settings
from product_api.database import seeded_store
from product_api.main import create_app

API_KEY = "test-key"
AUTH = {"x-api-key": API_KEY}

NEW_PRODUCT = {
    "name": "Wireless Headphones",
    "description": "Noise-cancelling over-ear headphones",
    "price": 150,
    "category": "electronics",
    "inStock": True,
}


def make_settings(**overrides) -> Settings:
    values = {"api_key": API_KEY, "seed_products": True}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def store():
    return seeded_store()


@pytest.fixture
def app(store):
    return create_app(make_settings(), store=store)


@pytest.fixture
def client(app):
    return TestClient(app, headers=AUTH)


@pytest.fixture
def anon_client(app):
    return TestClient(app)
