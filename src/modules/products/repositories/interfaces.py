"""Product repository interface.

Extends ``IRepository[Product]`` with the category-reference check used
before deleting a category and with the paged specification search.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any

from django.db.models import Q

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.core.pagination import Page, PageRequest
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity."""

    @abstractmethod
    def exists_by_category_id(self, category_id: Any) -> bool:
        """Whether at least one product references the category."""

    @abstractmethod
    def search(
        self, spec: Q, page_request: PageRequest
    ) -> Page[Product]:
        """Return one ordered page of products matching ``spec``, with totals."""
