from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.categories.models import Category
from modules.products.models import Product
from modules.skus.models import Sku


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def category():
    return Category.objects.create(
        name="Electronics", description="Electronic devices and accessories"
    )


@pytest.fixture()
def product(category):
    return Product.objects.create(
        name="MacBook Pro 16-inch",
        description="High-performance laptop",
        price=Decimal("2499.99"),
        category=category,
    )


@pytest.fixture()
def sku(product):
    return Sku.objects.create(
        sku_code="MBP16-SG-512",
        quantity=100,
        product=product,
        attributes={"color": "Space Gray", "storage": "512GB", "ram": "18GB"},
    )
