"""Product DRF serializers (output only).

Request bodies are parsed into ``ProductRequestDTO``; these serializers
render entities in the camelCase wire format.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ObjectDoesNotExist
from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource.

    ``categoryName`` is left out when the parent category cannot be
    loaded.
    """

    price = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)
    categoryId = serializers.UUIDField(source="category_id", read_only=True)
    categoryName = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "categoryId",
            "categoryName",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields

    def get_categoryName(self, obj: Product) -> str | None:
        try:
            return obj.category.name
        except ObjectDoesNotExist:
            return None

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if data.get("categoryName") is None:
            data.pop("categoryName", None)
        return data


class ProductRequestSerializer(serializers.Serializer):
    """Request body shape, published in the OpenAPI schema."""

    name = serializers.CharField(min_length=2, max_length=200)
    description = serializers.CharField(max_length=1000, required=False, allow_blank=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0.01"))
    categoryId = serializers.UUIDField()
