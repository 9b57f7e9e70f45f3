"""Pytest fixtures for the storefront server and client."""

import json
from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from shopfront.client.catalog import CatalogClient
from shopfront.client.models import Product
from shopfront.client.session import StorefrontSession
from shopfront.client.storage import LocalStorage
from shopfront.config import settings
from shopfront.web.main import create_app

PRODUCTS = [
    {
        "id": 1,
        "name": "Faith Over Fear Tee",
        "description": "Soft cotton t-shirt.",
        "price": 5000,
        "image": "/images/tee.jpg",
        "sizes": ["S", "M", "L"],
        "category": "t-shirts",
    },
    {
        "id": 2,
        "name": "Blessed Hoodie",
        "description": "Fleece hoodie.",
        "price": 15000,
        "image": "/images/hoodie.jpg",
        "sizes": ["M", "L"],
        "category": "hoodies",
    },
]


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(json.dumps({"products": PRODUCTS}), encoding="utf-8")
    return path


@pytest.fixture
def cfg(tmp_path, catalog_file):
    return replace(
        settings,
        catalog_path=str(catalog_file),
        cart_storage_path=str(tmp_path / "local_storage.json"),
        api_base_url="http://testserver",
        shop_name="Belivers Fashion Brand",
        whatsapp_number="08052443377",
        messaging_url="https://wa.me",
    )


@pytest.fixture
def client(cfg):
    return TestClient(create_app(cfg))


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(tmp_path / "local_storage.json")


@pytest.fixture
def tee():
    return Product.from_dict(PRODUCTS[0])


@pytest.fixture
def hoodie():
    return Product.from_dict(PRODUCTS[1])


@pytest.fixture
def opened():
    return []


@pytest.fixture
def session(cfg, client, storage, opened):
    return StorefrontSession(
        cfg,
        storage=storage,
        catalog=CatalogClient(cfg.api_base_url, http=client),
        opener=opened.append,
    )
