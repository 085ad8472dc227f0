"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Every
action is wrapped by ``handle_input_errors`` with its route rule set, so
by the time the action body runs the path and body fields are valid.
Domain exceptions are caught and translated into appropriate HTTP
status codes; the view never swallows generic exceptions.

Responses use a fixed envelope: ``{"data": ...}`` on success,
``{"errors": [...]}`` for validation failures and ``{"error": "..."}``
when the product does not exist.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.validation import errors_from_pydantic, handle_input_errors
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository
from modules.products.serializers import (
    CreateProductRequestSerializer,
    NotFoundResponseSerializer,
    ProductDeletedResponseSerializer,
    ProductListResponseSerializer,
    ProductResponseSerializer,
    ProductSerializer,
    UpdateProductRequestSerializer,
    ValidationErrorResponseSerializer,
)
from modules.products.services import ProductService
from modules.products.validators import (
    CREATE_PRODUCT_RULES,
    DELETE_PRODUCT_RULES,
    RETRIEVE_PRODUCT_RULES,
    TOGGLE_AVAILABILITY_RULES,
    UPDATE_PRODUCT_RULES,
)

NOT_FOUND_MESSAGE = "Producto no encontrado"
DELETED_MESSAGE = "Producto Eliminado"

# ---------------------------------------------------------------------------
# OpenAPI helpers
# ---------------------------------------------------------------------------

_ID_PARAMETER = OpenApiParameter(
    "id",
    int,
    OpenApiParameter.PATH,
    description="The Id of the product",
)


def _errors(description: str) -> OpenApiResponse:
    return OpenApiResponse(ValidationErrorResponseSerializer, description=description)


_NOT_FOUND_RESPONSE = OpenApiResponse(
    NotFoundResponseSerializer, description="Product not Found"
)


def _not_found() -> Response:
    return Response({"error": NOT_FOUND_MESSAGE}, status=status.HTTP_404_NOT_FOUND)


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    The Store is passed in by the router through ``as_view(repository=...)``;
    ``ProductDjangoRepository`` is only a fallback for direct use.
    """

    repository: IProductRepository | None = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(
            repository=self.repository or ProductDjangoRepository()
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Get a list of products",
        tags=["Products"],
        responses={200: ProductListResponseSerializer},
    )
    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return Response({"data": ProductSerializer(products, many=True).data})

    @extend_schema(
        summary="Get a Product by ID",
        tags=["Products"],
        parameters=[_ID_PARAMETER],
        responses={
            200: ProductResponseSerializer,
            400: _errors("Bad Request - Invalid ID"),
            404: _NOT_FOUND_RESPONSE,
        },
    )
    @handle_input_errors(RETRIEVE_PRODUCT_RULES)
    def retrieve(self, request: Request, id: str) -> Response:
        """GET /api/products/{id}"""
        try:
            product = self._service.get_product(int(id))
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    # ------------------------------------------------------------------
    # Create / Update / Toggle / Destroy
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Creates a new Product",
        tags=["Products"],
        request=CreateProductRequestSerializer,
        responses={
            201: ProductResponseSerializer,
            400: _errors("Bad Request - Invalid Input Data"),
        },
    )
    @handle_input_errors(CREATE_PRODUCT_RULES)
    def create(self, request: Request) -> Response:
        """POST /api/products"""
        data = request.data

        try:
            dto = CreateProductDTO(name=data.get("name"), price=data.get("price"))
        except PydanticValidationError as exc:
            return Response(
                {"errors": errors_from_pydantic(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        product = self._service.create_product(dto)
        return Response(
            {"data": ProductSerializer(product).data},
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        summary="Updates a Product with user Input",
        tags=["Products"],
        parameters=[_ID_PARAMETER],
        request=UpdateProductRequestSerializer,
        responses={
            200: ProductResponseSerializer,
            400: _errors("Bad Request - Invalid ID or Invalid Input Data"),
            404: _NOT_FOUND_RESPONSE,
        },
    )
    @handle_input_errors(UPDATE_PRODUCT_RULES)
    def update(self, request: Request, id: str) -> Response:
        """PUT /api/products/{id}"""
        data = request.data

        try:
            dto = UpdateProductDTO(
                name=data.get("name"),
                price=data.get("price"),
                availability=data.get("availability"),
            )
        except PydanticValidationError as exc:
            return Response(
                {"errors": errors_from_pydantic(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            product = self._service.update_product(int(id), dto)
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    @extend_schema(
        summary="Update Products Availability",
        tags=["Products"],
        parameters=[_ID_PARAMETER],
        request=None,
        responses={
            200: ProductResponseSerializer,
            400: _errors("Bad Request - Invalid ID"),
            404: _NOT_FOUND_RESPONSE,
        },
    )
    @handle_input_errors(TOGGLE_AVAILABILITY_RULES)
    def toggle_availability(self, request: Request, id: str) -> Response:
        """PATCH /api/products/{id}"""
        try:
            product = self._service.toggle_availability(int(id))
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    @extend_schema(
        summary="Delete a Product by given ID",
        tags=["Products"],
        parameters=[_ID_PARAMETER],
        responses={
            200: ProductDeletedResponseSerializer,
            400: _errors("Bad Request - Invalid ID"),
            404: _NOT_FOUND_RESPONSE,
        },
    )
    @handle_input_errors(DELETE_PRODUCT_RULES)
    def destroy(self, request: Request, id: str) -> Response:
        """DELETE /api/products/{id}"""
        try:
            self._service.delete_product(int(id))
        except ProductNotFound:
            return _not_found()
        return Response({"data": DELETED_MESSAGE})
