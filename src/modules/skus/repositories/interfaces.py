"""SKU repository interface.

Extends ``IRepository[Sku]`` with the unique-code look-ups and the
"SKUs of a product" query.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.skus.models import Sku


class ISkuRepository(IRepository["Sku"]):
    """Repository contract for the Sku entity."""

    @abstractmethod
    def exists_by_sku_code(self, sku_code: str) -> bool:
        """Whether any SKU uses ``sku_code`` (exact match)."""

    @abstractmethod
    def exists_by_sku_code_excluding_id(self, sku_code: str, id: Any) -> bool:
        """Whether a SKU other than ``id`` uses ``sku_code``."""

    @abstractmethod
    def list_by_product_id(self, product_id: Any) -> List[Sku]:
        """SKUs of one product, ordered by code."""
