"""Unit tests for BaseModel, exercised through Category.

Covers UUIDv7 primary keys and timestamp bookkeeping, including
``save(update_fields=...)`` refreshing ``updated_at``.
"""

from __future__ import annotations

from datetime import timedelta

import pytest
from freezegun import freeze_time

from django.utils import timezone

from modules.categories.models import Category

pytestmark = pytest.mark.unit


class TestBaseModel:
    def test_primary_key_is_uuid7(self):
        category = Category.objects.create(name="Books")
        assert category.id.version == 7

    def test_timestamps_set_on_create(self):
        with freeze_time("2026-01-04 10:30:00"):
            category = Category.objects.create(name="Books")
        assert category.created_at == category.updated_at
        assert category.created_at.isoformat().startswith("2026-01-04T10:30:00")

    def test_update_fields_refreshes_updated_at(self):
        with freeze_time("2026-01-04 10:30:00"):
            category = Category.objects.create(name="Books")
        with freeze_time("2026-01-05 10:30:00"):
            category.description = "Printed books"
            category.save(update_fields=["description"])
        category.refresh_from_db()
        assert category.updated_at - category.created_at == timedelta(days=1)
        assert category.description == "Printed books"

    def test_created_at_not_changed_by_update(self):
        category = Category.objects.create(name="Books")
        created_at = category.created_at
        category.name = "Novels"
        category.save()
        category.refresh_from_db()
        assert category.created_at == created_at
        assert category.updated_at <= timezone.now()
