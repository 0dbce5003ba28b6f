"""Product repository interface.

Narrows ``IRepository`` to the ``Product`` entity.  The service layer
depends on this contract; ``ProductDjangoRepository`` is the production
implementation and tests substitute a mock.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity."""
