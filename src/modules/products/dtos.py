"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  These are
the contracts between the API layer and the Service layer; all of them
are immutable (``frozen=True``).

- ``ProductRequestDTO``: body of create and (full) update requests.
- ``ProductSearchCriteria``: optional search filters from the query string.
- ``ProductPageRequest``: page/sort request restricted to sortable fields.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from modules.core.pagination import PageRequest
from modules.products.specifications import SORT_FIELDS

MAX_PRICE = Decimal("100000000")


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class ProductRequestDTO(BaseModel):
    """Immutable DTO for product create and update requests.

    Validates:
    - ``name`` is present and 2-200 characters long.
    - ``description`` is at most 1000 characters.
    - ``price`` is present, greater than zero, with at most 2 decimals.
    - ``category_id`` is present (existence is checked by the service).
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str
    price: Decimal
    category_id: UUID
    description: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def name_is_required(cls, v: object) -> object:
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("Product name is required")
        return v

    @field_validator("name")
    @classmethod
    def name_length(cls, v: str) -> str:
        if not 2 <= len(v) <= 200:
            raise ValueError("Product name must be between 2 and 200 characters")
        return v

    @field_validator("description", mode="before")
    @classmethod
    def description_defaults_to_empty(cls, v: object) -> object:
        return "" if v is None else v

    @field_validator("description")
    @classmethod
    def description_length(cls, v: str) -> str:
        if len(v) > 1000:
            raise ValueError("Description cannot exceed 1000 characters")
        return v

    @field_validator("price", mode="before")
    @classmethod
    def price_is_required(cls, v: object) -> object:
        if v is None or v == "":
            raise ValueError("Price is required")
        # JSON numbers arrive as floats; keep their shortest decimal form.
        if isinstance(v, float):
            return str(v)
        return v

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        if not v.is_finite():
            raise ValueError("Price must be a finite number")
        if v <= 0:
            raise ValueError("Price must be greater than 0")
        if v >= MAX_PRICE:
            raise ValueError(f"Price must be less than {MAX_PRICE}")
        if v != v.quantize(Decimal("0.01")):
            raise ValueError("Price must have at most 2 decimal places")
        return v.quantize(Decimal("0.01"))

    @field_validator("category_id", mode="before")
    @classmethod
    def category_is_required(cls, v: object) -> object:
        if v is None or v == "":
            raise ValueError("Category ID is required")
        return v


class ProductSearchCriteria(BaseModel):
    """Optional Product search filters; ``None`` means "no constraint".

    A blank ``search`` string is treated as absent.
    """

    model_config = ConfigDict(frozen=True)

    search: Optional[str] = None
    category_id: Optional[UUID] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None

    @field_validator("search", "category_id", "min_price", "max_price", mode="before")
    @classmethod
    def blank_is_absent(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ProductPageRequest(PageRequest):
    """Page request whose ``sortBy`` must name a sortable product field."""

    @field_validator("sort_by")
    @classmethod
    def sort_field_supported(cls, v: str) -> str:
        if v not in SORT_FIELDS:
            allowed = ", ".join(sorted(SORT_FIELDS))
            raise ValueError(f"Unsupported sort field '{v}'. Allowed: {allowed}")
        return v
