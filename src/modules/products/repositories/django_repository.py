"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.  Missing rows
are reported as ``None`` / ``False``; the Service Layer decides what a
missing product means for the API response.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def list(self) -> List[Product]:
        """Return every product in primary-key order."""
        return list(Product.objects.all())

    def get_by_id(self, id: int) -> Optional[Product]:
        return Product.objects.filter(pk=id).first()

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Insert or update a product; timestamps are stamped by ``save()``."""
        entity.save()
        logger.info("product.saved", product_id=entity.pk)
        return entity

    @transaction.atomic
    def delete(self, id: int) -> None:
        """Hard-delete a product.  Deleting an absent id is a no-op."""
        deleted, _ = Product.objects.filter(pk=id).delete()
        logger.info("product.deleted", product_id=id, rows=deleted)

    def exists(self, id: int) -> bool:
        return Product.objects.filter(pk=id).exists()
