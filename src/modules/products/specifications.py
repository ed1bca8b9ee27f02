"""Composable search predicates for Product (the Specification pattern).

Every factory returns a Django ``Q``; when its argument is absent the
factory returns an empty ``Q()``, which matches every row.  Search
filters are therefore always combined the same way, by folding all of
them with ``&``::

    spec = ProductSpecification.all_of(
        ProductSpecification.has_name_like("book"),
        ProductSpecification.has_category_id(None),          # no-op
        ProductSpecification.has_price_greater_than_or_equal(Decimal("10")),
    )
    Product.objects.filter(spec)
"""

from __future__ import annotations

import operator
from decimal import Decimal
from functools import reduce
from typing import TYPE_CHECKING, Any, Optional

from django.db.models import Q

if TYPE_CHECKING:
    from modules.products.dtos import ProductSearchCriteria

# Wire name -> ORM column, for the sortBy query parameter.
SORT_FIELDS = {
    "name": "name",
    "price": "price",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "id": "id",
}


class ProductSpecification:
    """Factories for Product search predicates."""

    @staticmethod
    def has_name_like(name: Optional[str]) -> Q:
        """Case-insensitive substring match on the product name.

        Surrounding whitespace only decides blankness; it is part of the
        matched term.
        """
        if name is None or not name.strip():
            return Q()
        return Q(name__icontains=name)

    @staticmethod
    def has_category_id(category_id: Any) -> Q:
        if category_id is None:
            return Q()
        return Q(category_id=category_id)

    @staticmethod
    def has_price_greater_than_or_equal(min_price: Optional[Decimal]) -> Q:
        if min_price is None:
            return Q()
        return Q(price__gte=min_price)

    @staticmethod
    def has_price_less_than_or_equal(max_price: Optional[Decimal]) -> Q:
        if max_price is None:
            return Q()
        return Q(price__lte=max_price)

    @staticmethod
    def all_of(*specs: Q) -> Q:
        """AND together any number of specifications."""
        return reduce(operator.and_, specs, Q())

    @classmethod
    def from_criteria(cls, criteria: ProductSearchCriteria) -> Q:
        return cls.all_of(
            cls.has_name_like(criteria.search),
            cls.has_category_id(criteria.category_id),
            cls.has_price_greater_than_or_equal(criteria.min_price),
            cls.has_price_less_than_or_equal(criteria.max_price),
        )
