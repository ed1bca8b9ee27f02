"""SKU DRF serializers (output only)."""

from __future__ import annotations

from django.core.exceptions import ObjectDoesNotExist
from rest_framework import serializers

from modules.skus.models import Sku


class SkuSerializer(serializers.ModelSerializer):
    """Read serializer for the SKU resource.

    ``productName`` is left out when the parent product cannot be loaded.
    """

    skuCode = serializers.CharField(source="sku_code", read_only=True)
    productId = serializers.UUIDField(source="product_id", read_only=True)
    productName = serializers.SerializerMethodField()
    attributes = serializers.JSONField(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Sku
        fields = [
            "id",
            "skuCode",
            "productId",
            "productName",
            "quantity",
            "attributes",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields

    def get_productName(self, obj: Sku) -> str | None:
        try:
            return obj.product.name
        except ObjectDoesNotExist:
            return None

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if data.get("productName") is None:
            data.pop("productName", None)
        return data


class SkuRequestSerializer(serializers.Serializer):
    """Request body shape, published in the OpenAPI schema."""

    skuCode = serializers.RegexField(r"^[A-Z0-9\-_]+$", min_length=3, max_length=50)
    productId = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=0)
    attributes = serializers.DictField(required=False, allow_null=True)
