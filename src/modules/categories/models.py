"""Category model: the top-level grouping of the catalog.

- Name is unique across all categories (exact, case-sensitive match).
- Categories hold no collection of their products; "products of a
  category" is always a repository query.
"""

from __future__ import annotations

from django.core.validators import MinLengthValidator
from django.db import models

from modules.core.models import BaseModel


class Category(BaseModel):
    name = models.CharField(
        max_length=100,
        unique=True,
        validators=[MinLengthValidator(2)],
    )
    description = models.CharField(max_length=500, blank=True, default="")

    class Meta:
        db_table = "categories"
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.name
