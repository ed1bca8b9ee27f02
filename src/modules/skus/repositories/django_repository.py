"""Django ORM implementation of the SKU repository."""

from __future__ import annotations

from typing import Any, List

from modules.core.repositories.django_repository import DjangoRepository
from modules.skus.models import Sku
from modules.skus.repositories.interfaces import ISkuRepository


class SkuDjangoRepository(DjangoRepository[Sku], ISkuRepository):
    """Concrete Sku repository backed by Django ORM."""

    model = Sku
    log_prefix = "sku"

    def _by_id(self, id: Any):
        return super()._by_id(id).select_related("product")

    def exists_by_sku_code(self, sku_code: str) -> bool:
        return Sku.objects.filter(sku_code=sku_code).exists()

    def exists_by_sku_code_excluding_id(self, sku_code: str, id: Any) -> bool:
        return Sku.objects.filter(sku_code=sku_code).exclude(id=id).exists()

    def list_by_product_id(self, product_id: Any) -> List[Sku]:
        return list(
            Sku.objects.filter(product_id=product_id)
            .select_related("product")
            .order_by("sku_code")
        )
