"""Category DRF serializers (output only).

Request bodies are parsed into ``CategoryRequestDTO``; these serializers
render entities in the camelCase wire format.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.categories.models import Category


class CategorySerializer(serializers.ModelSerializer):
    """Read serializer for the Category resource."""

    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Category
        fields = ["id", "name", "description", "createdAt", "updatedAt"]
        read_only_fields = fields


class CategoryRequestSerializer(serializers.Serializer):
    """Request body shape, published in the OpenAPI schema."""

    name = serializers.CharField(min_length=2, max_length=100)
    description = serializers.CharField(max_length=500, required=False, allow_blank=True)
