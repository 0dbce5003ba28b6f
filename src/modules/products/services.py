"""Product service layer (Use Cases).

Sequences look-up -> merge -> persist -> response mapping for the Product
resource, delegating storage to the injected ``IProductRepository`` through
``CrudOperations``.

Outcome contract:
- Reads and updates return a ``ProductResponse``, or ``None`` when the id
  does not exist.
- ``delete_product`` returns ``True`` when a row was deleted, ``False`` when
  the id does not exist.
- Business-rule failures raise (``NonPositivePrice``).

Request DTOs reach this layer already validated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.core.crud import CrudOperations
from modules.products.dtos import ProductResponse
from modules.products.exceptions import NonPositivePrice
from modules.products.merge import apply_full_update, apply_partial_update, new_product
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import ProductRequest, ProductUpdateRequest
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._crud: CrudOperations[Product] = CrudOperations(repository, entity_name="Product")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[ProductResponse]:
        """Return every product, mapped to response DTOs."""
        return [ProductResponse.from_entity(p) for p in self._crud.find_all()]

    def get_product(self, id: int) -> Optional[ProductResponse]:
        product = self._crud.find_by_id(id)
        if product is None:
            logger.warning("product.not_found", product_id=id, operation="get")
            return None
        return ProductResponse.from_entity(product)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, request: ProductRequest) -> ProductResponse:
        """Create a new product.

        Raises:
            NonPositivePrice: if the price is not strictly positive.
        """
        logger.info("product.create.started", name=request.name)
        product = new_product(request)
        if product.price is None or product.price <= 0:
            logger.warning("product.create.rejected", reason="non_positive_price")
            raise NonPositivePrice()

        product = self._crud.save(product)
        logger.info("product.created", product_id=product.pk)
        return ProductResponse.from_entity(product)

    @transaction.atomic
    def update_product(self, id: int, request: ProductRequest) -> Optional[ProductResponse]:
        """Replace every mutable field of an existing product (PUT)."""
        log = logger.bind(product_id=id)
        log.info("product.update.started")
        product = self._crud.find_by_id(id)
        if product is None:
            log.warning("product.not_found", operation="update")
            return None

        product = self._crud.save(apply_full_update(product, request))
        log.info("product.updated")
        return ProductResponse.from_entity(product)

    @transaction.atomic
    def partial_update_product(
        self, id: int, request: ProductUpdateRequest
    ) -> Optional[ProductResponse]:
        """Overwrite only the fields the request carries (PATCH)."""
        log = logger.bind(product_id=id)
        log.info(
            "product.partial_update.started",
            fields=sorted(request.model_dump(exclude_none=True)),
        )
        product = self._crud.find_by_id(id)
        if product is None:
            log.warning("product.not_found", operation="partial_update")
            return None

        product = self._crud.save(apply_partial_update(product, request))
        log.info("product.partially_updated")
        return ProductResponse.from_entity(product)

    @transaction.atomic
    def delete_product(self, id: int) -> bool:
        """Delete a product by id.

        Existence check and delete are two storage calls; a concurrent
        delete between them is tolerated.
        """
        log = logger.bind(product_id=id)
        log.info("product.delete.started")
        if not self._crud.exists_by_id(id):
            log.warning("product.not_found", operation="delete")
            return False

        self._crud.delete_by_id(id)
        log.info("product.deleted")
        return True
