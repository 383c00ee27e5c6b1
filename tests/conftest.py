"""Pytest fixtures for the catalog API tests."""

import pytest
from fastapi.testclient import TestClient

from productdash.api.main import create_app
from productdash.integrations.clients.mocks import MemoryCatalogStore
from productdash.utils.config_loader import StoreConfig


def make_product(product_id: str, nama: str, **extra):
    product = {
        "id": product_id,
        "nama": nama,
        "deskripsi_singkat": f"{nama} singkat",
        "deskripsi_lengkap": f"{nama} lengkap",
        "stok": "in-stock",
        "terjual": 0,
        "rating": 5.0,
        "gambar": "",
        "varian": [{"name": "Default", "harga_asli": 10000, "harga_diskon": 10000}],
    }
    product.update(extra)
    return product


@pytest.fixture
def seed_products():
    return [
        make_product("i.100001.000000001", "Kaos", url="https://shop.example/product/i.100001.000000001"),
        make_product("i.100002.000000002", "Celana"),
        make_product("i.100003.000000003", "Topi"),
    ]


@pytest.fixture
def store(seed_products):
    """In-memory catalog seeded with three products."""
    return MemoryCatalogStore(seed_products)


@pytest.fixture
def empty_store():
    return MemoryCatalogStore()


@pytest.fixture
def client(store):
    app = create_app(config=StoreConfig(token="test-token"), store=store)
    return TestClient(app)
