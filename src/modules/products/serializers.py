"""Product DRF serializers for API output.

Input is checked by the validation pipeline (``validators.py``) and
normalised by the Pydantic DTOs; the serializer only shapes responses
and documents the resource in the OpenAPI schema.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = ["id", "name", "price", "availability"]
        read_only_fields = fields


class ProductCreateRequestSerializer(serializers.Serializer):
    """Request body of ``POST /api/products`` (schema only)."""

    name = serializers.CharField(max_length=100)
    price = serializers.DecimalField(max_digits=10, decimal_places=2)


class ProductUpdateRequestSerializer(ProductCreateRequestSerializer):
    """Request body of ``PUT /api/products/{id}`` (schema only)."""

    availability = serializers.BooleanField()


class ProductEnvelopeSerializer(serializers.Serializer):
    data = ProductSerializer()


class ProductListEnvelopeSerializer(serializers.Serializer):
    data = ProductSerializer(many=True)


class DeletedProductSerializer(serializers.Serializer):
    data = serializers.CharField(help_text="Confirmation message.")


class NotFoundSerializer(serializers.Serializer):
    error = serializers.CharField()


class ValidationErrorItemSerializer(serializers.Serializer):
    type = serializers.CharField()
    value = serializers.JSONField(required=False)
    msg = serializers.CharField()
    path = serializers.CharField()
    location = serializers.CharField()


class ValidationErrorSerializer(serializers.Serializer):
    errors = ValidationErrorItemSerializer(many=True)
