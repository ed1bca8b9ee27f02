"""Product service layer (Use Cases).

Orchestrates business logic for the Product entity, delegating
persistence to the injected repositories.

Rules enforced here:
- A product always references an existing category (create and update).
- Product names are not unique.
- Deleting a product does not look at its SKUs.  The ``PROTECT`` foreign
  key on ``Sku.product`` is the only guard, so deleting a product that
  still has SKUs fails in the store and surfaces as an internal error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from django.db import transaction

from modules.categories.exceptions import CategoryNotFound
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.specifications import ProductSpecification

if TYPE_CHECKING:
    from modules.categories.models import Category
    from modules.categories.repositories.interfaces import ICategoryRepository
    from modules.core.pagination import Page, PageRequest
    from modules.products.dtos import ProductRequestDTO, ProductSearchCriteria
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives its repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        repository: IProductRepository,
        category_repository: ICategoryRepository,
    ) -> None:
        self._repo = repository
        self._category_repo = category_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: ProductRequestDTO) -> Product:
        """Create a product inside an existing category.

        Raises:
            CategoryNotFound: if ``category_id`` does not resolve.
        """
        category = self._resolve_category(dto.category_id)

        product = Product(
            name=dto.name,
            description=dto.description,
            price=dto.price,
            category=category,
        )
        product = self._repo.save(product)
        logger.info(
            "product.created",
            product_id=str(product.id),
            category_id=str(category.id),
        )
        return product

    @transaction.atomic
    def update_product(self, id: Any, dto: ProductRequestDTO) -> Product:
        """Replace a product's fields, possibly moving it to another category.

        Raises:
            ProductNotFound: if the product does not exist.
            CategoryNotFound: if ``category_id`` does not resolve.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            logger.warning("product.not_found", product_id=str(id))
            raise ProductNotFound(id)

        category = self._resolve_category(dto.category_id)

        product.name = dto.name
        product.description = dto.description
        product.price = dto.price
        product.category = category
        product = self._repo.save(product)
        logger.info(
            "product.updated",
            product_id=str(id),
            category_id=str(category.id),
        )
        return product

    @transaction.atomic
    def delete_product(self, id: Any) -> None:
        """Delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            logger.warning("product.not_found", product_id=str(id))
            raise ProductNotFound(id)
        self._repo.delete(product.id)
        logger.info("product.deleted", product_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_product(self, id: Any) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            logger.warning("product.not_found", product_id=str(id))
            raise ProductNotFound(id)
        return product

    def search_products(
        self, criteria: ProductSearchCriteria, page_request: PageRequest
    ) -> Page[Product]:
        """Return one page of products matching every supplied filter."""
        log = logger.bind(
            search=criteria.search,
            category_id=str(criteria.category_id) if criteria.category_id else None,
            min_price=str(criteria.min_price) if criteria.min_price is not None else None,
            max_price=str(criteria.max_price) if criteria.max_price is not None else None,
            page=page_request.page,
            size=page_request.size,
        )
        spec = ProductSpecification.from_criteria(criteria)
        page = self._repo.search(spec, page_request)
        log.debug(
            "product.searched",
            returned=len(page.content),
            total=page.total_elements,
        )
        return page

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve_category(self, category_id: Any) -> Category:
        category = self._category_repo.get_by_id(category_id)
        if category is None:
            logger.warning("category.not_found", category_id=str(category_id))
            raise CategoryNotFound(category_id)
        return category
