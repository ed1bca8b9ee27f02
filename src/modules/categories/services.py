"""Category service layer (Use Cases).

Orchestrates business logic for the Category entity, delegating
persistence to the injected repositories.

Rules enforced here:
- Category names are unique (exact match).
- A category cannot be deleted while any product references it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

import structlog
from django.db import transaction

from modules.categories.exceptions import (
    CategoryHasProducts,
    CategoryNotFound,
    DuplicateCategoryName,
)
from modules.categories.models import Category

if TYPE_CHECKING:
    from modules.categories.dtos import CategoryRequestDTO
    from modules.categories.repositories.interfaces import ICategoryRepository
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class CategoryService:
    """Application service for Category use-cases.

    Receives its repositories via constructor injection (DIP).  The
    product repository is only used to answer "is this category still
    referenced?" before a delete.
    """

    def __init__(
        self,
        repository: ICategoryRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._repo = repository
        self._product_repo = product_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_category(self, dto: CategoryRequestDTO) -> Category:
        """Create a new category.

        Raises:
            DuplicateCategoryName: if the name is already taken.
        """
        log = logger.bind(name=dto.name)

        if self._repo.exists_by_name(dto.name):
            log.warning("category.duplicate_name")
            raise DuplicateCategoryName(dto.name)

        category = Category(name=dto.name, description=dto.description)
        category = self._repo.save(category)
        log.info("category.created", category_id=str(category.id))
        return category

    @transaction.atomic
    def update_category(self, id: Any, dto: CategoryRequestDTO) -> Category:
        """Rename / re-describe a category in place.

        Keeping the current name is not a conflict.

        Raises:
            CategoryNotFound: if the category does not exist.
            DuplicateCategoryName: if another category has the name.
        """
        category = self._repo.get_by_id(id)
        if category is None:
            logger.warning("category.not_found", category_id=str(id))
            raise CategoryNotFound(id)

        log = logger.bind(category_id=str(id))

        if self._repo.exists_by_name_excluding_id(dto.name, category.id):
            log.warning("category.duplicate_name", name=dto.name)
            raise DuplicateCategoryName(dto.name)

        category.name = dto.name
        category.description = dto.description
        category = self._repo.save(category)
        log.info("category.updated")
        return category

    @transaction.atomic
    def delete_category(self, id: Any) -> None:
        """Delete a category that no product references.

        Raises:
            CategoryNotFound: if the category does not exist.
            CategoryHasProducts: if at least one product references it.
        """
        category = self._repo.get_by_id(id)
        if category is None:
            logger.warning("category.not_found", category_id=str(id))
            raise CategoryNotFound(id)

        if self._product_repo.exists_by_category_id(category.id):
            logger.warning("category.has_products", category_id=str(id))
            raise CategoryHasProducts(category.name)

        self._repo.delete(category.id)
        logger.info("category.deleted", category_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_categories(self) -> List[Category]:
        """Return every category, ordered by name (no pagination)."""
        categories = self._repo.list()
        logger.debug("category.listed", count=len(categories))
        return categories

    def get_category(self, id: Any) -> Category:
        """Retrieve a single category by ID.

        Raises:
            CategoryNotFound: if the category does not exist.
        """
        category = self._repo.get_by_id(id)
        if category is None:
            logger.warning("category.not_found", category_id=str(id))
            raise CategoryNotFound(id)
        return category
