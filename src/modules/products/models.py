"""Product model.

Invariants held at the storage level:
- ``price`` is an exact decimal with 2 fractional digits and is > 0
  (application ``clean()`` + database CHECK constraint).
- ``quantity`` is >= 0 (``PositiveIntegerField``).
- ``created_at`` / ``updated_at`` follow the ``BaseModel`` lifecycle.
"""

from __future__ import annotations

import structlog

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.products.constants import (
    DESCRIPTION_MAX_LENGTH,
    NAME_EMPTY,
    NAME_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    PRICE_MIN,
    PRICE_NOT_POSITIVE,
)

logger = structlog.get_logger(__name__)


class Product(BaseModel):
    """A catalog product.

    The integer ``id`` is assigned by the database on first insert.
    Two instances compare equal when they share the same ``id``.
    """

    name = models.CharField(max_length=NAME_MAX_LENGTH)
    description = models.CharField(
        max_length=DESCRIPTION_MAX_LENGTH,
        null=True,
        blank=True,
        default=None,
    )
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        validators=[MinValueValidator(PRICE_MIN)],
    )
    quantity = models.PositiveIntegerField()

    class Meta:
        db_table = "products"
        ordering = ["id"]
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
            raise ValidationError({"name": NAME_EMPTY})
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": PRICE_NOT_POSITIVE})

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info("product_created", product_id=self.pk, name=self.name)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"#{self.pk} {self.name}"
