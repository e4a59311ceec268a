"""Product model.

Business rules implemented:
- ``name`` is required and never blank.
- ``price`` must be greater than zero (validator + DB check constraint).
- ``availability`` defaults to ``True`` on creation.
- ``id`` is an auto-increment integer; rows are deleted permanently.
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

logger = structlog.get_logger(__name__)

NAME_MAX_LENGTH = 100
PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2


class Product(models.Model):
    """The single persisted resource of the API."""

    name = models.CharField(max_length=NAME_MAX_LENGTH)
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    availability = models.BooleanField(default=True)

    class Meta:
        db_table = "products"
        ordering = ["-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.name is not None and not self.name.strip():
            raise ValidationError({"name": "Name must not be blank."})
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": "Price must be greater than zero."})

    # ------------------------------------------------------------------
    # Behaviour
    # ------------------------------------------------------------------

    def toggle_availability(self) -> bool:
        """Flip ``availability`` in memory and return the new value."""
        self.availability = not self.availability
        return self.availability

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"#{self.id} - {self.name}"
