"""Product DTOs.

Framework-agnostic data transfer objects using Pydantic v2.  They are the
wire contract of the API and are decoupled from the ``Product`` model.
DTOs are immutable (``frozen=True``).

- ``ProductRequest``: body of POST (create) and PUT (full replace).
- ``ProductUpdateRequest``: body of PATCH (partial update).
- ``ProductResponse``: the only shape in which a product leaves the API.
"""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Annotated, Any, Dict, Optional

from pydantic import AfterValidator, AliasGenerator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from modules.products.constants import (
    DESCRIPTION_MAX_LENGTH,
    NAME_EMPTY,
    NAME_MAX_LENGTH,
    PRICE_MAX,
    PRICE_MIN,
    PRICE_QUANTUM,
    QUANTITY_MAX,
    QUANTITY_MIN,
)

if TYPE_CHECKING:
    from modules.products.models import Product


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError(NAME_EMPTY)
    return value


def _to_cents(value: Decimal) -> Decimal:
    return value.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)


ProductName = Annotated[str, Field(max_length=NAME_MAX_LENGTH), AfterValidator(_not_blank)]
Description = Annotated[str, Field(max_length=DESCRIPTION_MAX_LENGTH)]
Price = Annotated[Decimal, Field(ge=PRICE_MIN, le=PRICE_MAX), AfterValidator(_to_cents)]
Quantity = Annotated[int, Field(strict=True, ge=QUANTITY_MIN, le=QUANTITY_MAX)]


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class ProductRequest(BaseModel):
    """Create / full-replace request.

    ``name``, ``price`` and ``quantity`` are required; ``description`` may be
    omitted or ``null``.
    """

    model_config = ConfigDict(frozen=True)

    name: ProductName
    description: Optional[Description] = None
    price: Price
    quantity: Quantity


class ProductUpdateRequest(BaseModel):
    """Partial update request.

    Every field is optional.  ``None`` (omitted *or* explicit ``null``)
    means "leave the stored value alone"; present values obey the same
    constraints as ``ProductRequest``.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[ProductName] = None
    description: Optional[Description] = None
    price: Optional[Price] = None
    quantity: Optional[Quantity] = None


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductResponse(BaseModel):
    """Read-only projection of a persisted product (camelCase on the wire)."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )

    id: int
    name: str
    description: Optional[str]
    price: Decimal
    quantity: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> ProductResponse:
        """Build a response DTO from a ``Product`` model instance."""
        return cls(
            id=product.pk,
            name=product.name,
            description=product.description,
            price=product.price,
            quantity=product.quantity,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
