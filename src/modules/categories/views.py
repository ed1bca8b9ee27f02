"""Category API views.

Exposes the ``CategoryService`` via HTTP using DRF ViewSets.  Domain
exceptions are not caught here; ``inventory_exception_handler`` maps
them to status codes.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.categories.dtos import CategoryRequestDTO
from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.categories.serializers import CategoryRequestSerializer, CategorySerializer
from modules.categories.services import CategoryService
from modules.core.http import request_body
from modules.products.repositories.django_repository import ProductDjangoRepository


def _to_dto(request: Request) -> CategoryRequestDTO:
    data = request_body(request)
    return CategoryRequestDTO(
        name=data.get("name"),
        description=data.get("description"),
    )


@extend_schema_view(
    list=extend_schema(summary="List all categories", responses=CategorySerializer(many=True)),
    retrieve=extend_schema(summary="Get category by ID", responses=CategorySerializer),
    create=extend_schema(
        summary="Create a new category",
        request=CategoryRequestSerializer,
        responses={201: CategorySerializer},
    ),
    update=extend_schema(
        summary="Update category",
        request=CategoryRequestSerializer,
        responses=CategorySerializer,
    ),
    destroy=extend_schema(summary="Delete category", responses={204: None}),
)
class CategoryViewSet(ViewSet):
    """ViewSet for Category CRUD operations.

    Uses ``CategoryService`` with Django repositories (DIP).  Updates are
    full replacements, so only PUT is routed.
    """

    http_method_names = ["get", "post", "put", "delete", "head", "options"]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CategoryService(
            repository=CategoryDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )

    def list(self, request: Request) -> Response:
        """GET /api/v1/categories/"""
        categories = self._service.list_categories()
        return Response(CategorySerializer(categories, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/categories/{pk}/"""
        category = self._service.get_category(pk)
        return Response(CategorySerializer(category).data)

    def create(self, request: Request) -> Response:
        """POST /api/v1/categories/"""
        category = self._service.create_category(_to_dto(request))
        return Response(CategorySerializer(category).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/categories/{pk}/"""
        category = self._service.update_category(pk, _to_dto(request))
        return Response(CategorySerializer(category).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/categories/{pk}/"""
        self._service.delete_category(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
