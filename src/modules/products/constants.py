"""Product field limits and validation messages.

Kept as plain data so the model, the DTOs and the request validator all
read one definition.
"""

from __future__ import annotations

from decimal import Decimal

NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 1000

PRICE_MAX_DIGITS = 12
PRICE_DECIMAL_PLACES = 2
PRICE_MIN = Decimal("0.01")
PRICE_MAX = Decimal("9999999999.99")
PRICE_QUANTUM = Decimal("0.01")

QUANTITY_MIN = 0
QUANTITY_MAX = 2147483647

MUTABLE_FIELDS = ("name", "description", "price", "quantity")

NAME_EMPTY = "Product name cannot be empty"
NAME_TOO_LONG = f"Product name cannot exceed {NAME_MAX_LENGTH} characters"
DESCRIPTION_TOO_LONG = (
    f"Product description cannot exceed {DESCRIPTION_MAX_LENGTH} characters"
)
PRICE_REQUIRED = "Product price is required"
PRICE_NOT_POSITIVE = "Product price must be greater than 0"
PRICE_TOO_LARGE = f"Product price cannot exceed {PRICE_MAX}"
PRICE_INVALID = "Product price must be a valid number"
QUANTITY_REQUIRED = "Product quantity is required"
QUANTITY_NEGATIVE = "Product quantity cannot be negative"
QUANTITY_TOO_LARGE = f"Product quantity cannot exceed {QUANTITY_MAX}"
QUANTITY_INVALID = "Product quantity must be a whole number"
BODY_NOT_OBJECT = "Request body must be a JSON object"

# pydantic error type -> message, per field.  Types absent here fall back to
# pydantic's own message.
FIELD_MESSAGES = {
    "name": {
        "missing": NAME_EMPTY,
        "string_type": NAME_EMPTY,
        "string_too_short": NAME_EMPTY,
        "string_too_long": NAME_TOO_LONG,
    },
    "description": {
        "string_type": "Product description must be text",
        "string_too_long": DESCRIPTION_TOO_LONG,
    },
    "price": {
        "missing": PRICE_REQUIRED,
        "greater_than_equal": PRICE_NOT_POSITIVE,
        "less_than_equal": PRICE_TOO_LARGE,
        "decimal_parsing": PRICE_INVALID,
        "decimal_type": PRICE_INVALID,
        "finite_number": PRICE_INVALID,
    },
    "quantity": {
        "missing": QUANTITY_REQUIRED,
        "greater_than_equal": QUANTITY_NEGATIVE,
        "less_than_equal": QUANTITY_TOO_LARGE,
        "int_parsing": QUANTITY_INVALID,
        "int_from_float": QUANTITY_INVALID,
        "int_type": QUANTITY_INVALID,
    },
}
