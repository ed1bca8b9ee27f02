"""Category domain exceptions.

Raised by the Service Layer when business rules are violated.  They
propagate untouched to ``inventory_exception_handler``.
"""

from __future__ import annotations

from modules.core.exceptions import DuplicateValue, IntegrityConflict, NotFound


class CategoryNotFound(NotFound):
    """The requested category does not exist."""

    entity = "Category"


class DuplicateCategoryName(DuplicateValue):
    """Another category already uses this name."""

    entity = "Category"

    def __init__(self, name: str) -> None:
        super().__init__(name, field="name")


class CategoryHasProducts(IntegrityConflict):
    """The category is still referenced by at least one product."""

    entity = "Category"

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Cannot delete category '{name}' because it has associated products. "
            "Please delete or reassign the products first."
        )
