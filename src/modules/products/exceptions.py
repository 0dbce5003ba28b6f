"""Product domain exceptions.

Raised by the Service Layer when a business rule rejects a request.  They
propagate out of the view untouched and are rendered by
``modules.core.exceptions.api_exception_handler``.

A missing product is *not* an exception: service look-ups return ``None``.
"""

from __future__ import annotations

from modules.core.exceptions import BusinessRuleViolation
from modules.products.constants import PRICE_NOT_POSITIVE


class NonPositivePrice(BusinessRuleViolation):
    """A product was about to be created with a price <= 0."""

    def __init__(self) -> None:
        super().__init__(PRICE_NOT_POSITIVE, field="price")
