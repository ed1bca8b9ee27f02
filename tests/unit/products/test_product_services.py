"""Unit tests for ProductService.

Covers:
- create_product: happy path, unknown category.
- update_product: happy path, re-pointing category, check order.
- delete_product: happy path, not found, no SKU pre-check.
- search_products: specification handed to the repository.
"""

from __future__ import annotations

import uuid
from decimal import Decimal
from unittest.mock import ANY, MagicMock

import pytest

from modules.categories.exceptions import CategoryNotFound
from modules.categories.models import Category
from modules.core.pagination import Page
from modules.products.dtos import (
    ProductPageRequest,
    ProductRequestDTO,
    ProductSearchCriteria,
)
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def mock_category_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo, mock_category_repo):
    return ProductService(repository=mock_repo, category_repository=mock_category_repo)


@pytest.fixture()
def electronics():
    return Category(name="Electronics")


def _dto(category_id, **overrides) -> ProductRequestDTO:
    data = {
        "name": "MacBook Pro 16-inch",
        "price": Decimal("2499.99"),
        "category_id": category_id,
        "description": "Laptop",
    }
    data.update(overrides)
    return ProductRequestDTO(**data)


def _make_product(category: Category, **overrides) -> Product:
    defaults = {"name": "Widget", "price": Decimal("19.99"), "category": category}
    defaults.update(overrides)
    return Product(**defaults)


# ===========================================================================
# create_product
# ===========================================================================


class TestCreateProduct:
    def test_success(self, service, mock_repo, mock_category_repo, electronics):
        mock_category_repo.get_by_id.return_value = electronics
        mock_repo.save.side_effect = lambda p: p

        product = service.create_product(_dto(electronics.id))

        assert product.name == "MacBook Pro 16-inch"
        assert product.price == Decimal("2499.99")
        assert product.description == "Laptop"
        assert product.category is electronics
        mock_repo.save.assert_called_once()

    def test_unknown_category_raises(self, service, mock_repo, mock_category_repo):
        mock_category_repo.get_by_id.return_value = None
        missing = uuid.uuid4()

        with pytest.raises(CategoryNotFound) as exc_info:
            service.create_product(_dto(missing))

        assert exc_info.value.message == f"Category not found with id: '{missing}'"
        mock_repo.save.assert_not_called()


# ===========================================================================
# update_product
# ===========================================================================


class TestUpdateProduct:
    def test_success(self, service, mock_repo, mock_category_repo, electronics):
        existing = _make_product(electronics)
        mock_repo.get_by_id.return_value = existing
        mock_category_repo.get_by_id.return_value = electronics
        mock_repo.save.side_effect = lambda p: p

        product = service.update_product(
            existing.id, _dto(electronics.id, name="Renamed", price=Decimal("5.00"))
        )

        assert product.name == "Renamed"
        assert product.price == Decimal("5.00")

    def test_moves_to_other_category(
        self, service, mock_repo, mock_category_repo, electronics
    ):
        books = Category(name="Books")
        existing = _make_product(electronics)
        mock_repo.get_by_id.return_value = existing
        mock_category_repo.get_by_id.return_value = books
        mock_repo.save.side_effect = lambda p: p

        product = service.update_product(existing.id, _dto(books.id))

        assert product.category is books
        mock_category_repo.get_by_id.assert_called_once_with(books.id)

    def test_not_found_checked_before_category(
        self, service, mock_repo, mock_category_repo
    ):
        mock_repo.get_by_id.return_value = None
        mock_category_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.update_product(uuid.uuid4(), _dto(uuid.uuid4()))

        mock_category_repo.get_by_id.assert_not_called()

    def test_unknown_category_raises(
        self, service, mock_repo, mock_category_repo, electronics
    ):
        mock_repo.get_by_id.return_value = _make_product(electronics)
        mock_category_repo.get_by_id.return_value = None

        with pytest.raises(CategoryNotFound):
            service.update_product(uuid.uuid4(), _dto(uuid.uuid4()))

        mock_repo.save.assert_not_called()


# ===========================================================================
# get / delete
# ===========================================================================


class TestGetProduct:
    def test_success(self, service, mock_repo, electronics):
        existing = _make_product(electronics)
        mock_repo.get_by_id.return_value = existing

        assert service.get_product(existing.id) is existing

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        missing = uuid.uuid4()

        with pytest.raises(ProductNotFound, match=f"Product not found with id: '{missing}'"):
            service.get_product(missing)


class TestDeleteProduct:
    def test_success(self, service, mock_repo, electronics):
        existing = _make_product(electronics)
        mock_repo.get_by_id.return_value = existing

        service.delete_product(existing.id)

        mock_repo.delete.assert_called_once_with(existing.id)

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.delete_product(uuid.uuid4())

        mock_repo.delete.assert_not_called()

    def test_does_not_look_at_skus(self, service, mock_repo, electronics):
        existing = _make_product(electronics)
        mock_repo.get_by_id.return_value = existing

        service.delete_product(existing.id)

        assert [c[0] for c in mock_repo.method_calls] == ["get_by_id", "delete"]


# ===========================================================================
# search_products
# ===========================================================================


class TestSearchProducts:
    def test_returns_repository_page(self, service, mock_repo, electronics):
        items = [_make_product(electronics, name=f"P{i}") for i in range(3)]
        page_request = ProductPageRequest(page=1, size=3)
        mock_repo.search.return_value = Page(
            content=items, page=1, size=3, total_elements=13, total_pages=5
        )

        page = service.search_products(ProductSearchCriteria(search="p"), page_request)

        mock_repo.search.assert_called_once_with(ANY, page_request)
        assert page.content == items
        assert page.page == 1
        assert page.size == 3
        assert page.total_elements == 13
        assert page.total_pages == 5
        assert not page.first
        assert not page.last

    def test_empty_result(self, service, mock_repo):
        mock_repo.search.return_value = Page(
            content=[], page=0, size=20, total_elements=0, total_pages=0
        )

        page = service.search_products(ProductSearchCriteria(), ProductPageRequest())

        assert page.empty
        assert page.total_pages == 0
        assert page.first
        assert page.last
