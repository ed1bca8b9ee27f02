"""Django ORM implementation of the Product repository."""

from __future__ import annotations

from typing import Any

from django.db.models import Q

from modules.core.pagination import Page, PageRequest, paginate
from modules.core.repositories.django_repository import DjangoRepository
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository
from modules.products.specifications import SORT_FIELDS


class ProductDjangoRepository(DjangoRepository[Product], IProductRepository):
    """Concrete Product repository backed by Django ORM.

    Reads join the category in the same query so the denormalised
    ``categoryName`` costs no extra round-trip.
    """

    model = Product
    log_prefix = "product"

    def _by_id(self, id: Any):
        return super()._by_id(id).select_related("category")

    def exists_by_category_id(self, category_id: Any) -> bool:
        return Product.objects.filter(category_id=category_id).exists()

    def search(self, spec: Q, page_request: PageRequest) -> Page[Product]:
        """Filter by ``spec``, order, and return the requested page."""
        queryset = (
            Product.objects.filter(spec)
            .select_related("category")
            .order_by(*page_request.ordering(SORT_FIELDS))
        )
        return paginate(queryset, page_request)
