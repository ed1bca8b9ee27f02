"""Django ORM implementation of the Category repository."""

from __future__ import annotations

from typing import Any

from modules.categories.models import Category
from modules.categories.repositories.interfaces import ICategoryRepository
from modules.core.repositories.django_repository import DjangoRepository


class CategoryDjangoRepository(DjangoRepository[Category], ICategoryRepository):
    """Concrete Category repository backed by Django ORM."""

    model = Category
    log_prefix = "category"

    def exists_by_name(self, name: str) -> bool:
        return Category.objects.filter(name=name).exists()

    def exists_by_name_excluding_id(self, name: str, id: Any) -> bool:
        return Category.objects.filter(name=name).exclude(id=id).exists()
