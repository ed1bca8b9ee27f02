"""Unit + DB tests for ProductSpecification.

Each factory must return the identity ``Q()`` for an absent argument so
that the folded specification only constrains what was supplied.
"""

from __future__ import annotations

import uuid
from decimal import Decimal

import pytest
from django.db.models import Q

from modules.categories.models import Category
from modules.products.dtos import ProductSearchCriteria
from modules.products.models import Product
from modules.products.specifications import ProductSpecification

pytestmark = pytest.mark.unit


class TestFactories:
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_name_like_absent_is_identity(self, value):
        assert ProductSpecification.has_name_like(value) == Q()

    def test_name_like_keeps_surrounding_spaces(self):
        assert ProductSpecification.has_name_like(" Pro") == Q(name__icontains=" Pro")

    def test_category_absent_is_identity(self):
        assert ProductSpecification.has_category_id(None) == Q()

    def test_category(self):
        category_id = uuid.uuid4()
        assert ProductSpecification.has_category_id(category_id) == Q(
            category_id=category_id
        )

    def test_price_bounds(self):
        assert ProductSpecification.has_price_greater_than_or_equal(
            Decimal("10")
        ) == Q(price__gte=Decimal("10"))
        assert ProductSpecification.has_price_less_than_or_equal(
            Decimal("20")
        ) == Q(price__lte=Decimal("20"))

    def test_price_bounds_absent_are_identity(self):
        assert ProductSpecification.has_price_greater_than_or_equal(None) == Q()
        assert ProductSpecification.has_price_less_than_or_equal(None) == Q()

    def test_all_of_nothing_is_identity(self):
        assert ProductSpecification.all_of() == Q()


@pytest.fixture()
def catalog():
    electronics = Category.objects.create(name="Electronics")
    books = Category.objects.create(name="Books")
    rows = [
        ("MacBook Pro", "2499.99", electronics),
        ("MacBook Air", "1299.00", electronics),
        ("Magic Mouse", "99.00", electronics),
        ("Mac OS Internals", "59.90", books),
    ]
    for name, price, category in rows:
        Product.objects.create(name=name, price=Decimal(price), category=category)
    return electronics, books


def _names(spec) -> list:
    return sorted(Product.objects.filter(spec).values_list("name", flat=True))


class TestComposition:
    def test_no_criteria_matches_everything(self, catalog):
        spec = ProductSpecification.from_criteria(ProductSearchCriteria())
        assert len(_names(spec)) == 4

    def test_name_is_case_insensitive(self, catalog):
        spec = ProductSpecification.from_criteria(ProductSearchCriteria(search="MACBOOK"))
        assert _names(spec) == ["MacBook Air", "MacBook Pro"]

    def test_filters_are_conjunctive(self, catalog):
        electronics, _ = catalog
        spec = ProductSpecification.from_criteria(
            ProductSearchCriteria(
                search="mac",
                category_id=electronics.id,
                min_price="1000",
                max_price="2000",
            )
        )
        assert _names(spec) == ["MacBook Air"]

    def test_price_bounds_are_inclusive(self, catalog):
        spec = ProductSpecification.from_criteria(
            ProductSearchCriteria(min_price="59.90", max_price="99.00")
        )
        assert _names(spec) == ["Mac OS Internals", "Magic Mouse"]

    def test_leading_space_is_part_of_the_term(self, catalog):
        spec = ProductSpecification.from_criteria(ProductSearchCriteria(search=" Mac"))
        assert _names(spec) == []

    def test_inner_word_with_leading_space(self, catalog):
        spec = ProductSpecification.from_criteria(ProductSearchCriteria(search=" OS"))
        assert _names(spec) == ["Mac OS Internals"]

    def test_inverted_bounds_match_nothing(self, catalog):
        spec = ProductSpecification.from_criteria(
            ProductSearchCriteria(min_price="500", max_price="100")
        )
        assert _names(spec) == []
