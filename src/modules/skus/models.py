"""SKU model: a stock-keeping variant of a product.

Rules implemented at the data layer:
- ``sku_code`` is unique across all SKUs (DB ``UNIQUE``).
- Quantity is never negative (DB check constraint).
- The product reference is mandatory and ``PROTECT``-ed; a product with
  SKUs cannot be removed from the database.
"""

from __future__ import annotations

from django.core.validators import MinLengthValidator, RegexValidator
from django.db import models

from modules.core.models import BaseModel

SKU_CODE_PATTERN = r"^[A-Z0-9\-_]+$"


class Sku(BaseModel):
    sku_code = models.CharField(
        max_length=50,
        unique=True,
        validators=[MinLengthValidator(3), RegexValidator(SKU_CODE_PATTERN)],
    )
    quantity = models.PositiveIntegerField()
    product = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="+",
        db_index=True,
    )
    attributes = models.JSONField(default=dict, blank=True)

    class Meta:
        db_table = "skus"
        ordering = ["sku_code"]
        verbose_name = "SKU"
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=0),
                name="skus_quantity_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return self.sku_code
