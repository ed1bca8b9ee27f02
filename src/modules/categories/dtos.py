"""Category DTOs for the Service Layer.

Framework-agnostic input contracts built from the request body.  Field
constraints mirror the model so invalid input never reaches the service.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class CategoryRequestDTO(BaseModel):
    """Immutable DTO for category create and update requests."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str
    description: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def name_is_required(cls, v: object) -> object:
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("Category name is required")
        return v

    @field_validator("name")
    @classmethod
    def name_length(cls, v: str) -> str:
        if not 2 <= len(v) <= 100:
            raise ValueError("Category name must be between 2 and 100 characters")
        return v

    @field_validator("description", mode="before")
    @classmethod
    def description_defaults_to_empty(cls, v: object) -> object:
        return "" if v is None else v

    @field_validator("description")
    @classmethod
    def description_length(cls, v: str) -> str:
        if len(v) > 500:
            raise ValueError("Description cannot exceed 500 characters")
        return v
