"""Product model: a sellable item belonging to exactly one category.

Rules implemented at the data layer:
- Price must be greater than zero (DB check constraint).
- The category reference is mandatory and ``PROTECT``-ed: the database
  never holds a product pointing at a missing category.
- No reverse accessor on Category (``related_name="+"``); products of a
  category are found by query.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinLengthValidator, MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    name = models.CharField(max_length=200, validators=[MinLengthValidator(2)])
    description = models.CharField(max_length=1000, blank=True, default="")
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    category = models.ForeignKey(
        "categories.Category",
        on_delete=models.PROTECT,
        related_name="+",
        db_index=True,
    )

    class Meta:
        db_table = "products"
        ordering = ["name", "id"]
        indexes = [
            models.Index(fields=["price"], name="products_price_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
        ]

    def __str__(self) -> str:
        return self.name
