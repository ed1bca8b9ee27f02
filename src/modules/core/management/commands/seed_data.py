from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.categories.models import Category
from modules.products.models import Product
from modules.skus.models import Sku

SEED_CATALOG = [
    {
        "name": "Electronics",
        "description": "Electronic devices and accessories",
        "products": [
            {
                "name": "MacBook Pro 16-inch",
                "description": "High-performance laptop with M3 Pro chip, 18GB RAM, and 512GB SSD",
                "price": Decimal("2499.99"),
                "skus": [
                    ("MBP16-SG-512", 100, {"color": "Space Gray", "storage": "512GB", "ram": "18GB"}),
                    ("MBP16-SL-1TB", 40, {"color": "Silver", "storage": "1TB", "ram": "36GB"}),
                ],
            },
            {
                "name": "Wireless Headphones",
                "description": "Over-ear noise cancelling headphones",
                "price": Decimal("349.00"),
                "skus": [
                    ("WH-BLK", 250, {"color": "Black"}),
                    ("WH-WHT", 120, {"color": "White"}),
                ],
            },
            {
                "name": "USB-C Charger 96W",
                "description": "",
                "price": Decimal("79.90"),
                "skus": [("USBC-96W", 500, {})],
            },
        ],
    },
    {
        "name": "Books",
        "description": "Printed and digital books",
        "products": [
            {
                "name": "Domain-Driven Design",
                "description": "Tackling complexity in the heart of software",
                "price": Decimal("54.99"),
                "skus": [
                    ("DDD-HC", 30, {"format": "hardcover"}),
                    ("DDD-EBOOK", 0, {"format": "ebook"}),
                ],
            },
            {
                "name": "Refactoring",
                "description": "Improving the design of existing code",
                "price": Decimal("47.50"),
                "skus": [("REF-2ED", 60, {"format": "paperback", "edition": 2})],
            },
        ],
    },
    {
        "name": "Home & Kitchen",
        "description": "Appliances and kitchenware",
        "products": [
            {
                "name": "Espresso Machine",
                "description": "15-bar pump espresso maker",
                "price": Decimal("189.99"),
                "skus": [
                    ("ESP-RED-EU", 15, {"color": "Red", "plug": "EU"}),
                    ("ESP-RED-US", 12, {"color": "Red", "plug": "US"}),
                ],
            },
        ],
    },
]


class Command(BaseCommand):
    help = "Seed database with a demo catalog (idempotent)."

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding catalog data...")

        categories = products = skus = 0
        for category_data in SEED_CATALOG:
            category, created = Category.objects.get_or_create(
                name=category_data["name"],
                defaults={"description": category_data["description"]},
            )
            categories += created
            for product_data in category_data["products"]:
                product, created = Product.objects.get_or_create(
                    name=product_data["name"],
                    category=category,
                    defaults={
                        "description": product_data["description"],
                        "price": product_data["price"],
                    },
                )
                products += created
                for sku_code, quantity, attributes in product_data["skus"]:
                    _, created = Sku.objects.get_or_create(
                        sku_code=sku_code,
                        defaults={
                            "product": product,
                            "quantity": quantity,
                            "attributes": attributes,
                        },
                    )
                    skus += created

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"categories={categories}, "
                f"products={products}, "
                f"skus={skus}"
            )
        )
