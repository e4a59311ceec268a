"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

They are built only after the request passed the validation pipeline,
so they mostly normalise: names are stripped and prices are rounded to
the two decimal places the ``products`` table stores.

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for full product replacement (PUT).
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.products.constants import NAME_EMPTY, PRICE_INVALID
from modules.products.models import (
    NAME_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
)

_CENT = Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)
_PRICE_MAX = Decimal(10) ** (PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES) - _CENT


class _ProductFieldsDTO(BaseModel):
    model_config = ConfigDict(
        frozen=True, str_strip_whitespace=True, coerce_numbers_to_str=True
    )

    name: str = Field(max_length=NAME_MAX_LENGTH)
    price: Decimal

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError(NAME_EMPTY)
        return v

    @field_validator("price")
    @classmethod
    def price_must_fit_column(cls, v: Decimal) -> Decimal:
        """Round to cents; the result must stay positive and fit decimal(10, 2)."""
        if not v.is_finite() or v > _PRICE_MAX:
            raise ValueError(PRICE_INVALID)
        rounded = v.quantize(_CENT, rounding=ROUND_HALF_UP)
        if rounded <= 0:
            raise ValueError(PRICE_INVALID)
        return rounded


class CreateProductDTO(_ProductFieldsDTO):
    """Immutable DTO for product creation requests.

    ``availability`` is not accepted here; new products start available.
    """


class UpdateProductDTO(_ProductFieldsDTO):
    """Immutable DTO for full product updates (every field is replaced)."""

    availability: bool
