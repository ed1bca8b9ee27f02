"""SKU service layer (Use Cases).

Orchestrates business logic for the Sku entity, delegating persistence
to the injected repositories.

Rules enforced here:
- A SKU always references an existing product.
- SKU codes are unique (exact, case-sensitive match).
- Checks run in a fixed order so the first failing rule decides the
  error: SKU existence, then product existence, then code uniqueness.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

import structlog
from django.db import transaction

from modules.products.exceptions import ProductNotFound
from modules.skus.exceptions import DuplicateSkuCode, SkuNotFound
from modules.skus.models import Sku

if TYPE_CHECKING:
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository
    from modules.skus.dtos import SkuRequestDTO
    from modules.skus.repositories.interfaces import ISkuRepository

logger = structlog.get_logger(__name__)


class SkuService:
    """Application service for SKU use-cases."""

    def __init__(
        self,
        repository: ISkuRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._repo = repository
        self._product_repo = product_repository

    @transaction.atomic
    def create_sku(self, dto: SkuRequestDTO) -> Sku:
        """Create a SKU for an existing product.

        Raises:
            ProductNotFound: if ``product_id`` does not resolve.
            DuplicateSkuCode: if the code is already in use.
        """
        product = self._resolve_product(dto.product_id)
        log = logger.bind(sku_code=dto.sku_code, product_id=str(product.id))

        if self._repo.exists_by_sku_code(dto.sku_code):
            log.warning("sku.duplicate_code")
            raise DuplicateSkuCode(dto.sku_code)

        sku = Sku(
            sku_code=dto.sku_code,
            quantity=dto.quantity,
            attributes=dict(dto.attributes),
            product=product,
        )
        sku = self._repo.save(sku)
        log.info("sku.created", sku_id=str(sku.id))
        return sku

    @transaction.atomic
    def update_sku(self, id: Any, dto: SkuRequestDTO) -> Sku:
        """Replace every field of a SKU, possibly moving it to another product.

        Raises:
            SkuNotFound: if the SKU does not exist.
            ProductNotFound: if ``product_id`` does not resolve.
            DuplicateSkuCode: if another SKU has the code.
        """
        sku = self._repo.get_by_id(id)
        if sku is None:
            logger.warning("sku.not_found", sku_id=str(id))
            raise SkuNotFound(id)

        product = self._resolve_product(dto.product_id)
        log = logger.bind(sku_id=str(id))

        if self._repo.exists_by_sku_code_excluding_id(dto.sku_code, sku.id):
            log.warning("sku.duplicate_code", sku_code=dto.sku_code)
            raise DuplicateSkuCode(dto.sku_code)

        sku.sku_code = dto.sku_code
        sku.quantity = dto.quantity
        sku.attributes = dict(dto.attributes)
        sku.product = product
        sku = self._repo.save(sku)
        log.info("sku.updated", product_id=str(product.id))
        return sku

    @transaction.atomic
    def delete_sku(self, id: Any) -> None:
        """Delete a SKU.

        Raises:
            SkuNotFound: if the SKU does not exist.
        """
        sku = self._repo.get_by_id(id)
        if sku is None:
            logger.warning("sku.not_found", sku_id=str(id))
            raise SkuNotFound(id)
        self._repo.delete(sku.id)
        logger.info("sku.deleted", sku_id=str(id))

    def get_sku(self, id: Any) -> Sku:
        sku = self._repo.get_by_id(id)
        if sku is None:
            logger.warning("sku.not_found", sku_id=str(id))
            raise SkuNotFound(id)
        return sku

    def list_skus_by_product(self, product_id: Any) -> List[Sku]:
        """SKUs of a product ordered by code; empty when it has none.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        if not self._product_repo.exists_by_id(product_id):
            logger.warning("product.not_found", product_id=str(product_id))
            raise ProductNotFound(product_id)
        skus = self._repo.list_by_product_id(product_id)
        logger.debug("sku.listed", product_id=str(product_id), count=len(skus))
        return skus

    def _resolve_product(self, product_id: Any) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.warning("product.not_found", product_id=str(product_id))
            raise ProductNotFound(product_id)
        return product
