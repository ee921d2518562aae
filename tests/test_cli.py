# tests/test_cli.py
import pytest
from fastapi.testclient import TestClient
from rich.console import Console

from conftest import API_KEY
from product_sdk import cli
from product_sdk.client import ProductClient


@pytest.fixture
def out(monkeypatch):
    console = Console(record=True, width=200)
    monkeypatch.setattr(cli, "console", console)
    return console


@pytest.fixture
def sdk(app):
    return ProductClient(base_url="http://testserver", api_key=API_KEY, session=TestClient(app))


def test_show_products_renders_rows(out):
    cli.show_products([{"id": "1", "name": "Laptop", "description": "16GB", "price": 1200,
                        "category": "electronics", "inStock": True}])
    text = out.export_text()
    assert "Laptop" in text
    assert "1200.00" in text


def test_show_products_empty(out):
    cli.show_products([])
    assert "No products found" in out.export_text()


def test_show_stats(out):
    cli.show_stats({"totalProducts": 3, "countByCategory": {"electronics": 2, "kitchen": 1}})
    text = out.export_text()
    assert "electronics" in text
    assert "Total products: 3" in text


def test_try_api_reports_errors(out, sdk):
    assert cli.try_api(sdk.get_product, "404") is None
    assert "Product not found" in out.export_text()


def test_menu_list_and_stats(out, sdk):
    assert cli.run_choice("1", sdk)
    assert cli.run_choice("8", sdk)
    text = out.export_text()
    assert "Coffee Maker" in text
    assert "kitchen" in text


def test_menu_create_and_delete(out, sdk, store, monkeypatch):
    monkeypatch.setattr(cli, "ask_product_fields", lambda defaults=None: {
        "name": "Kettle", "description": "1.7L", "price": 30.0, "category": "kitchen", "in_stock": True,
    })
    assert cli.run_choice("5", sdk)
    assert store.get_by_id("4").name == "Kettle"

    monkeypatch.setattr(cli, "prompt_with_autocomplete", lambda *a, **k: "4")
    monkeypatch.setattr(cli.Confirm, "ask", lambda *a, **k: True)
    assert cli.run_choice("7", sdk)
    assert store.get_by_id("4") is None
    assert "Product 4 deleted" in out.export_text()


def test_menu_quit(sdk):
    assert cli.run_choice("q", sdk) is False
