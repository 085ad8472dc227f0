"""Product DRF serializers.

``ProductSerializer`` renders a Product.  Input is checked by the rule
sets in ``validators.py`` and parsed into the Pydantic DTOs from
``dtos.py``, so the request serializers and envelopes below only
describe payloads for the OpenAPI schema.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema_serializer
from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource; ``price`` renders as a number."""

    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, coerce_to_string=False
    )

    class Meta:
        model = Product
        fields = ["id", "name", "price", "availability"]
        read_only_fields = ["id"]


# ---------------------------------------------------------------------------
# Request payloads (schema only)
# ---------------------------------------------------------------------------


class CreateProductRequestSerializer(serializers.Serializer):
    name = serializers.CharField(help_text="The product name")
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, help_text="The product price"
    )


class UpdateProductRequestSerializer(CreateProductRequestSerializer):
    availability = serializers.BooleanField(help_text="The product availability")


# ---------------------------------------------------------------------------
# Response envelopes (schema only)
# ---------------------------------------------------------------------------


@extend_schema_serializer(many=False)
class ProductResponseSerializer(serializers.Serializer):
    data = ProductSerializer()


@extend_schema_serializer(many=False)
class ProductListResponseSerializer(serializers.Serializer):
    data = ProductSerializer(many=True)


class ProductDeletedResponseSerializer(serializers.Serializer):
    data = serializers.CharField(default="Producto Eliminado")


class FieldErrorSerializer(serializers.Serializer):
    type = serializers.CharField(default="field")
    value = serializers.JSONField(required=False)
    msg = serializers.CharField()
    path = serializers.CharField()
    location = serializers.ChoiceField(choices=["params", "body"])


class ValidationErrorResponseSerializer(serializers.Serializer):
    errors = FieldErrorSerializer(many=True)


class NotFoundResponseSerializer(serializers.Serializer):
    error = serializers.CharField(default="Producto no encontrado")
