# tests/test_client.py
import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from conftest import API_KEY
from product_sdk.client import ProductApiError, ProductClient


@pytest.fixture
def sdk(app):
    return ProductClient(base_url="http://testserver", api_key=API_KEY, session=TestClient(app))


def test_welcome_returns_text(sdk):
    assert sdk.welcome().startswith("Welcome to the Product API!")


def test_listing_and_lookups(sdk):
    assert len(sdk.list_all()) == 3
    page = sdk.list_products(category="electronics", page=1, limit=1)
    assert page["total"] == 2
    assert [p["name"] for p in page["data"]] == ["Laptop"]
    assert sdk.search_products("coffee")[0]["id"] == "3"
    assert sdk.stats()["countByCategory"] == {"electronics": 2, "kitchen": 1}
    assert sdk.get_product("2")["name"] == "Smartphone"


def test_write_cycle(sdk):
    created = sdk.create_product("Blender", "600W blender", 75, "kitchen")["product"]
    assert created["id"] == "4"

    updated = sdk.update_product(created["id"], "Blender XL", "900W blender", 95, "kitchen")
    assert updated["product"]["name"] == "Blender XL"

    deleted = sdk.delete_product(created["id"])
    assert deleted["product"]["id"] == "4"
    with pytest.raises(ProductApiError) as exc:
        sdk.get_product("4")
    assert exc.value.status_code == 404
    assert exc.value.message == "Product not found"


def test_validation_error_surfaces_message(sdk):
    with pytest.raises(ProductApiError) as exc:
        sdk.create_product("Freebie", "costs nothing", 0, "misc")
    assert exc.value.status_code == 400
    assert exc.value.message == "Invalid or missing Product price"


def test_wrong_key_is_forbidden(app):
    sdk = ProductClient(base_url="http://testserver", api_key="nope", session=TestClient(app))
    with pytest.raises(ProductApiError) as exc:
        sdk.list_all()
    assert exc.value.status_code == 403
    assert exc.value.message == "Forbidden: Invalid or missing API Key"


def test_create_async(sdk, app, store):
    transport = httpx.ASGITransport(app=app)
    res = asyncio.run(sdk.create_product_async("Toaster", "2 slots", 25, "kitchen", transport=transport))
    assert res["product"]["id"] == "4"
    assert store.get_by_id("4").name == "Toaster"
