"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for a full product update.

Request bodies have already passed the route rule sets by the time a DTO
is built; the DTOs still enforce the persistence invariants (``price``
must stay positive once rounded to cents and ``name`` must fit its
column).
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from pydantic import BaseModel, ConfigDict, field_validator

INVALID_PRICE_MESSAGE = "Precio no valido"
EMPTY_NAME_MESSAGE = "El nombre del producto no puede ir vacio"
NAME_TOO_LONG_MESSAGE = "El nombre del producto no puede superar los 100 caracteres"

# Column sizes of the products table
NAME_MAX_LENGTH = 100
MAX_PRICE = Decimal("99999999.99")

_CENT = Decimal("0.01")


def _to_cents(v: Decimal) -> Decimal:
    try:
        v = v.quantize(_CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(INVALID_PRICE_MESSAGE) from exc
    if not (0 < v <= MAX_PRICE):
        raise ValueError(INVALID_PRICE_MESSAGE)
    return v


def _require_name(v: str) -> str:
    if not v:
        raise ValueError(EMPTY_NAME_MESSAGE)
    if len(v) > NAME_MAX_LENGTH:
        raise ValueError(NAME_TOO_LONG_MESSAGE)
    return v


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    New products are always created available.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        return _to_cents(v)

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        return _require_name(v)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for full product updates (PUT): every field is required."""

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal
    availability: bool

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        return _to_cents(v)

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        return _require_name(v)
