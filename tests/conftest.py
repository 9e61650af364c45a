import os
import sys
import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path for `import storefront_scraper`
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)

from storefront_scraper.main import app
from storefront_scraper.api import deps
from storefront_scraper.core.exceptions import StorefrontStatusError
from storefront_scraper.models.shopify import Collection, Product


SAMPLE_PRODUCT = {
    "id": 123,
    "title": "Test Product",
    "handle": "test-product",
    "body_html": "<p>Soft wool</p>",
    "vendor": "Acme",
    "product_type": "Shoes",
    "created_at": "2024-01-02T10:00:00-05:00",
    "updated_at": "2024-01-03T10:00:00-05:00",
    "published_at": "2024-01-02T11:00:00-05:00",
    "tags": ["red", "blue"],
    "variants": [
        {
            "id": 456,
            "product_id": 123,
            "title": "Small",
            "price": "19.99",
            "compare_at_price": "24.90",
            "sku": "TP-S",
            "option1": "Small",
            "option2": None,
            "option3": None,
            "taxable": True,
            "requires_shipping": True,
            "available": True,
        }
    ],
    "images": [
        {
            "id": 789,
            "product_id": 123,
            "position": 1,
            "width": 800,
            "height": 600,
            "src": "https://cdn.example.com/tp.jpg",
            "variant_ids": [456],
        }
    ],
    "options": [
        {"name": "Size", "position": 1, "values": ["Small"]}
    ],
}

SAMPLE_COLLECTION = {
    "id": 321,
    "title": "Test Collection",
    "handle": "test-collection",
    "image": {"id": 654, "src": "https://cdn.example.com/c.jpg", "width": 100, "height": 100},
}


class _FakeCatalogClient:
    def __init__(self):
        self.calls = []

    def test_connection(self, domain: str) -> bool:
        return True

    def get_products(self, domain):
        self.calls.append(("get_products", domain))
        return [Product.model_validate(SAMPLE_PRODUCT)]

    def get_product(self, domain, handle):
        self.calls.append(("get_product", domain, handle))
        if handle != "test-product":
            raise StorefrontStatusError(f"https://{domain}/products/{handle}.json", 404, "Not Found")
        return Product.model_validate(SAMPLE_PRODUCT)

    def get_collections(self, domain):
        self.calls.append(("get_collections", domain))
        return [Collection.model_validate(SAMPLE_COLLECTION)]

    def get_collection_products(self, domain, handle):
        self.calls.append(("get_collection_products", domain, handle))
        return [Product.model_validate(SAMPLE_PRODUCT)]

    def search_products(self, domain, query):
        self.calls.append(("search_products", domain, query))
        return []


@pytest.fixture()
def fake_catalog():
    return _FakeCatalogClient()


@pytest.fixture(autouse=True)
def _override_dependencies(fake_catalog):
    app.dependency_overrides[deps.get_catalog_client] = lambda: fake_catalog
    yield
    app.dependency_overrides.clear()


@pytest.fixture()
def client():
    return TestClient(app)
