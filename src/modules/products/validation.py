"""Request body validation for the Product API.

Runs the DTO constraints on a raw request body before any service code is
invoked.  Failures surface as ``RequestValidationError`` carrying one
message per offending field, worded from ``constants.FIELD_MESSAGES``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from modules.core.exceptions import RequestValidationError
from modules.products.constants import BODY_NOT_OBJECT, FIELD_MESSAGES

D = TypeVar("D", bound=BaseModel)

Violation = Tuple[str, str]


def _message(field: str, error: Any) -> str:
    if error["type"] == "value_error":
        return str(error["ctx"]["error"])
    error_type = error["type"]
    # A JSON null on a required field reads as a missing field.
    if error.get("input", ...) is None:
        error_type = "missing"
    return FIELD_MESSAGES.get(field, {}).get(error_type, error["msg"])


def collect_violations(exc: PydanticValidationError) -> List[Violation]:
    """Translate a pydantic error into ``(field, message)`` pairs, in order."""
    violations: List[Violation] = []
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "body"
        violations.append((field, _message(field, error)))
    return violations


def parse_request(dto_class: Type[D], data: Any) -> D:
    """Build ``dto_class`` from a request body or raise ``RequestValidationError``.

    Only the first violation of each field is reported.
    """
    if not isinstance(data, Mapping):
        raise RequestValidationError({"body": BODY_NOT_OBJECT})
    try:
        return dto_class.model_validate(dict(data))
    except PydanticValidationError as exc:
        errors: dict[str, str] = {}
        for field, message in collect_violations(exc):
            errors.setdefault(field, message)
        raise RequestValidationError(errors) from exc
