"""SKU API views.

Exposes the ``SkuService`` via HTTP using DRF ViewSets.  Domain
exceptions are not caught here; ``inventory_exception_handler`` maps
them to status codes.
"""

from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.http import request_body, required_query_param
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.skus.dtos import SkuRequestDTO
from modules.skus.repositories.django_repository import SkuDjangoRepository
from modules.skus.serializers import SkuRequestSerializer, SkuSerializer
from modules.skus.services import SkuService


def _to_dto(request: Request) -> SkuRequestDTO:
    data = request_body(request)
    return SkuRequestDTO(
        sku_code=data.get("skuCode"),
        product_id=data.get("productId"),
        quantity=data.get("quantity"),
        attributes=data.get("attributes"),
    )


@extend_schema_view(
    list=extend_schema(
        summary="List SKUs of a product",
        parameters=[OpenApiParameter("productId", OpenApiTypes.UUID, required=True)],
        responses=SkuSerializer(many=True),
    ),
    retrieve=extend_schema(summary="Get SKU by ID", responses=SkuSerializer),
    create=extend_schema(
        summary="Create a new SKU",
        request=SkuRequestSerializer,
        responses={201: SkuSerializer},
    ),
    update=extend_schema(
        summary="Update SKU",
        request=SkuRequestSerializer,
        responses=SkuSerializer,
    ),
    destroy=extend_schema(summary="Delete SKU", responses={204: None}),
)
class SkuViewSet(ViewSet):
    """ViewSet for SKU CRUD operations; only PUT updates are routed."""

    http_method_names = ["get", "post", "put", "delete", "head", "options"]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = SkuService(
            repository=SkuDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )

    def list(self, request: Request) -> Response:
        """GET /api/v1/skus/?productId={id}"""
        product_id = required_query_param(request, "productId")
        skus = self._service.list_skus_by_product(product_id)
        return Response(SkuSerializer(skus, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/skus/{pk}/"""
        sku = self._service.get_sku(pk)
        return Response(SkuSerializer(sku).data)

    def create(self, request: Request) -> Response:
        """POST /api/v1/skus/"""
        sku = self._service.create_sku(_to_dto(request))
        return Response(SkuSerializer(sku).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/skus/{pk}/"""
        sku = self._service.update_sku(pk, _to_dto(request))
        return Response(SkuSerializer(sku).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/skus/{pk}/"""
        self._service.delete_sku(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
