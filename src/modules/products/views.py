"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Every
action runs its validation pipeline first (``@validate_request``), then
builds a DTO, calls the service and wraps the result in ``{"data": ...}``.
``ProductNotFound`` is translated into ``404 {"error": ...}``; database
errors are left to the API exception handler.
"""

from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.validation import (
    errors_from_pydantic,
    request_body,
    validate_request,
    validation_error_response,
)
from modules.products.constants import PRODUCT_DELETED, PRODUCT_NOT_FOUND
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    DeletedProductSerializer,
    NotFoundSerializer,
    ProductCreateRequestSerializer,
    ProductEnvelopeSerializer,
    ProductListEnvelopeSerializer,
    ProductSerializer,
    ProductUpdateRequestSerializer,
    ValidationErrorSerializer,
)
from modules.products.services import ProductService
from modules.products.validators import AVAILABILITY, PRODUCT_BODY, PRODUCT_ID

ID_PARAMETER = OpenApiParameter(
    "id",
    OpenApiTypes.INT,
    OpenApiParameter.PATH,
    description="Product ID",
)


def _not_found() -> Response:
    return Response({"error": PRODUCT_NOT_FOUND}, status=status.HTTP_404_NOT_FOUND)


@extend_schema(tags=["Products"])
class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    lookup_url_kwarg = "id"
    lookup_value_regex = "[^/.]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Get a list of all products",
        responses={200: ProductListEnvelopeSerializer},
    )
    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return Response({"data": ProductSerializer(products, many=True).data})

    @extend_schema(
        summary="Get a product by ID",
        parameters=[ID_PARAMETER],
        responses={
            200: ProductEnvelopeSerializer,
            400: ValidationErrorSerializer,
            404: NotFoundSerializer,
        },
    )
    @validate_request(PRODUCT_ID)
    def retrieve(self, request: Request, id: str | None = None) -> Response:
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
        summary="Create a new product",
        request=ProductCreateRequestSerializer,
        responses={201: ProductEnvelopeSerializer, 400: ValidationErrorSerializer},
    )
    @validate_request(*PRODUCT_BODY)
    def create(self, request: Request) -> Response:
        """POST /api/products"""
        data = request_body(request)
        try:
            dto = CreateProductDTO(name=data.get("name"), price=data.get("price"))
        except PydanticValidationError as exc:
            return validation_error_response(errors_from_pydantic(exc))

        product = self._service.create_product(dto)
        return Response(
            {"data": ProductSerializer(product).data},
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        summary="Update a product with user input",
        parameters=[ID_PARAMETER],
        request=ProductUpdateRequestSerializer,
        responses={
            200: ProductEnvelopeSerializer,
            400: ValidationErrorSerializer,
            404: NotFoundSerializer,
        },
    )
    @validate_request(PRODUCT_ID, *PRODUCT_BODY, AVAILABILITY)
    def update(self, request: Request, id: str | None = None) -> Response:
        """PUT /api/products/{id}"""
        data = request_body(request)
        try:
            dto = UpdateProductDTO(
                name=data.get("name"),
                price=data.get("price"),
                availability=data.get("availability"),
            )
        except PydanticValidationError as exc:
            return validation_error_response(errors_from_pydantic(exc))

        try:
            product = self._service.update_product(int(id), dto)
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    @extend_schema(
        summary="Toggle product availability",
        parameters=[ID_PARAMETER],
        request=None,
        responses={
            200: ProductEnvelopeSerializer,
            400: ValidationErrorSerializer,
            404: NotFoundSerializer,
        },
    )
    @validate_request(PRODUCT_ID)
    def partial_update(self, request: Request, id: str | None = None) -> Response:
        """PATCH /api/products/{id}

        Ignores the request body: availability is always negated.
        """
        try:
            product = self._service.toggle_availability(int(id))
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    @extend_schema(
        summary="Delete a product by ID",
        parameters=[ID_PARAMETER],
        responses={
            200: DeletedProductSerializer,
            400: ValidationErrorSerializer,
            404: NotFoundSerializer,
        },
    )
    @validate_request(PRODUCT_ID)
    def destroy(self, request: Request, id: str | None = None) -> Response:
        """DELETE /api/products/{id}"""
        try:
            self._service.delete_product(int(id))
        except ProductNotFound:
            return _not_found()
        return Response({"data": PRODUCT_DELETED})
