"""Integration tests for the ``seed_data`` management command."""

from io import StringIO

import pytest
from django.core.management import call_command

from modules.categories.models import Category
from modules.products.models import Product
from modules.skus.models import Sku

pytestmark = pytest.mark.integration


class TestSeedData:
    def test_seeds_catalog(self):
        out = StringIO()
        call_command("seed_data", stdout=out)

        assert Category.objects.filter(name="Electronics").exists()
        laptop = Product.objects.get(name="MacBook Pro 16-inch")
        sku = Sku.objects.get(sku_code="MBP16-SG-512")
        assert sku.product_id == laptop.id
        assert sku.attributes == {"color": "Space Gray", "storage": "512GB", "ram": "18GB"}
        assert "Seed completed" in out.getvalue()

    def test_is_idempotent(self):
        call_command("seed_data", stdout=StringIO())
        counts = (Category.objects.count(), Product.objects.count(), Sku.objects.count())

        out = StringIO()
        call_command("seed_data", stdout=out)

        assert (
            Category.objects.count(),
            Product.objects.count(),
            Sku.objects.count(),
        ) == counts
        assert "categories=0, products=0, skus=0" in out.getvalue()
