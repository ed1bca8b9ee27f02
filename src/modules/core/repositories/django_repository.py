"""Django ORM base implementation of ``IRepository``.

Concrete repositories set ``model`` and ``log_prefix`` and add their own
look-ups.  Error handling follows the Null Object pattern: malformed or
unknown ids yield ``None`` / ``False`` and the Service Layer decides how
to translate a missing entity into a domain error.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.core.repositories.interfaces import IRepository

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=models.Model)


class DjangoRepository(IRepository[M], Generic[M]):
    """Shared CRUD for catalog entities keyed by UUID."""

    model: Type[M]
    log_prefix: str = "entity"

    def _by_id(self, id: Any) -> models.QuerySet:
        try:
            return self.model.objects.filter(id=id)
        except (ValueError, ValidationError):
            return self.model.objects.none()

    def get_by_id(self, id: Any) -> Optional[M]:
        """Retrieve an entity by primary key; ``None`` for unknown or invalid IDs."""
        return self._by_id(id).first()

    def exists_by_id(self, id: Any) -> bool:
        return self._by_id(id).exists()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[M]:
        """List entities with optional Django ORM look-ups.

        Examples of valid filters::

            {"name__icontains": "phone"}
            {"product_id": "0190d3c2-..."}
        """
        queryset = self.model.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: M) -> M:
        """Persist (create or update) an entity."""
        is_new = entity._state.adding
        entity.save()
        logger.info(
            f"{self.log_prefix}.saved",
            entity_id=str(entity.pk),
            is_new=is_new,
        )
        return entity

    @transaction.atomic
    def delete(self, id: Any) -> bool:
        """Hard-delete an entity by ID.

        Returns ``False`` if no entity exists with the given ID.  Foreign
        keys pointing at the row are ``PROTECT``-ed, so deleting a
        referenced row raises ``django.db.models.ProtectedError``.
        """
        entity = self.get_by_id(id)
        if entity is None:
            return False
        entity.delete()
        logger.info(f"{self.log_prefix}.deleted", entity_id=str(id))
        return True
