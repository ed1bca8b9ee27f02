"""SKU domain exceptions.

Raised by the Service Layer when business rules are violated.  They
propagate untouched to ``inventory_exception_handler``.
"""

from __future__ import annotations

from modules.core.exceptions import DuplicateValue, NotFound


class SkuNotFound(NotFound):
    """The requested SKU does not exist."""

    entity = "SKU"


class DuplicateSkuCode(DuplicateValue):
    """Another SKU already uses this code."""

    entity = "SKU"

    def __init__(self, sku_code: str) -> None:
        super().__init__(sku_code, field="skuCode")
