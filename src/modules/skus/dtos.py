"""SKU DTOs for the Service Layer.

``SkuRequestDTO`` is the immutable body of create and (full) update
requests.  SKU codes are case-sensitive: lowercase input is rejected,
never upper-cased.
"""

from __future__ import annotations

import re
from typing import Any, Dict
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from modules.skus.models import SKU_CODE_PATTERN

_SKU_CODE_RE = re.compile(SKU_CODE_PATTERN)

# Upper bound of the quantity column (signed 32-bit integer).
MAX_QUANTITY = 2_147_483_647


class SkuRequestDTO(BaseModel):
    """Immutable DTO for SKU create and update requests."""

    model_config = ConfigDict(frozen=True)

    sku_code: str
    product_id: UUID
    quantity: int
    attributes: Dict[str, Any] = {}

    @field_validator("sku_code", mode="before")
    @classmethod
    def code_is_required(cls, v: object) -> object:
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("SKU code is required")
        return v

    @field_validator("sku_code")
    @classmethod
    def code_format(cls, v: str) -> str:
        if not 3 <= len(v) <= 50:
            raise ValueError("SKU code must be between 3 and 50 characters")
        if not _SKU_CODE_RE.fullmatch(v):
            raise ValueError(
                "SKU code must contain only uppercase letters, numbers, "
                "hyphens, and underscores"
            )
        return v

    @field_validator("product_id", mode="before")
    @classmethod
    def product_is_required(cls, v: object) -> object:
        if v is None or v == "":
            raise ValueError("Product ID is required")
        return v

    @field_validator("quantity", mode="before")
    @classmethod
    def quantity_is_required(cls, v: object) -> object:
        if v is None or v == "":
            raise ValueError("Quantity is required")
        return v

    @field_validator("quantity")
    @classmethod
    def quantity_not_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Quantity cannot be negative")
        if v > MAX_QUANTITY:
            raise ValueError(f"Quantity cannot exceed {MAX_QUANTITY}")
        return v

    @field_validator("attributes", mode="before")
    @classmethod
    def attributes_default_to_empty(cls, v: object) -> object:
        return {} if v is None else v
