"""Product API views.

Exposes the ``ProductService`` via HTTP using DRF ViewSets.  Domain
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

from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.core.http import request_body
from modules.products.dtos import (
    ProductPageRequest,
    ProductRequestDTO,
    ProductSearchCriteria,
)
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductRequestSerializer, ProductSerializer
from modules.products.services import ProductService

# Query parameter -> ProductSearchCriteria / ProductPageRequest field.
SEARCH_PARAMS = {
    "search": "search",
    "categoryId": "category_id",
    "minPrice": "min_price",
    "maxPrice": "max_price",
}
PAGE_PARAMS = {
    "page": "page",
    "size": "size",
    "sortBy": "sort_by",
    "sortDir": "sort_dir",
}


def _to_dto(request: Request) -> ProductRequestDTO:
    data = request_body(request)
    return ProductRequestDTO(
        name=data.get("name"),
        description=data.get("description"),
        price=data.get("price"),
        category_id=data.get("categoryId"),
    )


def _pick(request: Request, params: dict) -> dict:
    """Only the query parameters actually sent, so model defaults apply."""
    return {
        field: request.query_params[param]
        for param, field in params.items()
        if param in request.query_params
    }


def _serialize(product) -> dict:
    return ProductSerializer(product).data


@extend_schema_view(
    list=extend_schema(
        summary="Search products with filters and pagination",
        parameters=[
            OpenApiParameter("search", OpenApiTypes.STR, description="Name contains (case-insensitive)"),
            OpenApiParameter("categoryId", OpenApiTypes.UUID),
            OpenApiParameter("minPrice", OpenApiTypes.DECIMAL),
            OpenApiParameter("maxPrice", OpenApiTypes.DECIMAL),
            OpenApiParameter("page", OpenApiTypes.INT, description="Zero-based page index"),
            OpenApiParameter("size", OpenApiTypes.INT),
            OpenApiParameter("sortBy", OpenApiTypes.STR, enum=["name", "price", "createdAt", "updatedAt", "id"]),
            OpenApiParameter("sortDir", OpenApiTypes.STR, enum=["asc", "desc"]),
        ],
        responses=OpenApiTypes.OBJECT,
    ),
    retrieve=extend_schema(summary="Get product by ID", responses=ProductSerializer),
    create=extend_schema(
        summary="Create a new product",
        request=ProductRequestSerializer,
        responses={201: ProductSerializer},
    ),
    update=extend_schema(
        summary="Update product",
        request=ProductRequestSerializer,
        responses=ProductSerializer,
    ),
    destroy=extend_schema(summary="Delete product", responses={204: None}),
)
class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD and search.

    Uses ``ProductService`` with Django repositories (DIP).  Updates are
    full replacements, so only PUT is routed.
    """

    http_method_names = ["get", "post", "put", "delete", "head", "options"]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(
            repository=ProductDjangoRepository(),
            category_repository=CategoryDjangoRepository(),
        )

    def list(self, request: Request) -> Response:
        """GET /api/v1/products/?search=&categoryId=&minPrice=&maxPrice=&page=&size="""
        criteria = ProductSearchCriteria(**_pick(request, SEARCH_PARAMS))
        page_request = ProductPageRequest(**_pick(request, PAGE_PARAMS))
        page = self._service.search_products(criteria, page_request)
        return Response(page.map(_serialize).to_dict())

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        product = self._service.get_product(pk)
        return Response(ProductSerializer(product).data)

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        product = self._service.create_product(_to_dto(request))
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}/"""
        product = self._service.update_product(pk, _to_dto(request))
        return Response(ProductSerializer(product).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/"""
        self._service.delete_product(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
