"""Mapping of request DTOs onto ``Product`` entities.

Three entry points, none of which persist anything:

- ``new_product``: a fresh, unsaved entity from a ``ProductRequest``.
- ``apply_full_update`` (PUT): every mutable field is overwritten,
  including ``description`` with ``None``.
- ``apply_partial_update`` (PATCH): each field is overwritten only when the
  DTO carries a value for it; ``None`` leaves the stored value untouched.

``id`` and ``created_at`` are never written here; ``updated_at`` is refreshed
by ``BaseModel.save()`` when the caller persists the result.
"""

from __future__ import annotations

from modules.products.constants import MUTABLE_FIELDS
from modules.products.dtos import ProductRequest, ProductUpdateRequest
from modules.products.models import Product


def new_product(request: ProductRequest) -> Product:
    return Product(
        name=request.name,
        description=request.description,
        price=request.price,
        quantity=request.quantity,
    )


def apply_full_update(product: Product, request: ProductRequest) -> Product:
    for field in MUTABLE_FIELDS:
        setattr(product, field, getattr(request, field))
    return product


def apply_partial_update(product: Product, request: ProductUpdateRequest) -> Product:
    for field in MUTABLE_FIELDS:
        value = getattr(request, field)
        if value is not None:
            setattr(product, field, value)
    return product
