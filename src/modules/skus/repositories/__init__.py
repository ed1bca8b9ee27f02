"""SKU repositories package."""

from modules.skus.repositories.django_repository import SkuDjangoRepository
from modules.skus.repositories.interfaces import ISkuRepository

__all__ = ["ISkuRepository", "SkuDjangoRepository"]
