"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Request bodies are turned into DTOs by ``parse_request`` before the service
runs; validation and business-rule failures propagate to
``api_exception_handler``.  A missing product is answered with an empty 404.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema, extend_schema_view
from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.request import Request
from rest_framework.response import Response

from modules.products.dtos import ProductRequest, ProductResponse, ProductUpdateRequest
from modules.products.repositories import ProductDjangoRepository
from modules.products.services import ProductService
from modules.products.validation import parse_request

_NOT_FOUND = OpenApiResponse(description="Product not found (empty body)")


@extend_schema_view(
    list=extend_schema(responses={200: ProductResponse}, summary="List all products"),
    retrieve=extend_schema(
        responses={200: ProductResponse, 404: _NOT_FOUND}, summary="Get a product"
    ),
    create=extend_schema(
        request=ProductRequest,
        responses={201: ProductResponse},
        summary="Create a product",
    ),
    update=extend_schema(
        request=ProductRequest,
        responses={200: ProductResponse, 404: _NOT_FOUND},
        summary="Replace a product",
    ),
    partial_update=extend_schema(
        request=ProductUpdateRequest,
        responses={200: ProductResponse, 404: _NOT_FOUND},
        summary="Partially update a product",
    ),
    destroy=extend_schema(
        responses={204: None, 404: _NOT_FOUND}, summary="Delete a product"
    ),
)
class ProductViewSet(viewsets.ViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    Reads are public; writes need an authenticated user.
    """

    permission_classes = [IsAuthenticatedOrReadOnly]
    lookup_value_regex = r"[0-9]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return Response([p.to_wire() for p in products])

    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /api/products/{pk}"""
        product = self._service.get_product(int(pk))
        if product is None:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(product.to_wire())

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        dto = parse_request(ProductRequest, request.data)
        product = self._service.create_product(dto)
        return Response(product.to_wire(), status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str) -> Response:
        """PUT /api/products/{pk}"""
        dto = parse_request(ProductRequest, request.data)
        product = self._service.update_product(int(pk), dto)
        if product is None:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(product.to_wire())

    def partial_update(self, request: Request, pk: str) -> Response:
        """PATCH /api/products/{pk}"""
        dto = parse_request(ProductUpdateRequest, request.data)
        product = self._service.partial_update_product(int(pk), dto)
        if product is None:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(product.to_wire())

    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /api/products/{pk}"""
        if not self._service.delete_product(int(pk)):
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)
