"""Category repository interface.

Extends ``IRepository[Category]`` with the look-ups behind the
unique-name rule.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.categories.models import Category


class ICategoryRepository(IRepository["Category"]):
    """Repository contract for the Category entity."""

    @abstractmethod
    def exists_by_name(self, name: str) -> bool:
        """Whether any category uses ``name`` (exact match)."""

    @abstractmethod
    def exists_by_name_excluding_id(self, name: str, id: Any) -> bool:
        """Whether a category other than ``id`` uses ``name``."""
