"""Cross-cutting exceptions and the API error envelope.

Every fault raised inside a DRF view ends up in ``api_exception_handler``
(wired via ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``) and is rendered as an
``ErrorResponse``::

    {"timestamp": ..., "status": 400, "error": "Bad Request",
     "message": "Validation failed", "path": "/api/products",
     "errors": {"price": "Product price must be greater than 0"}}

Categories:

* ``RequestValidationError``  -> 400, per-field messages.
* ``BusinessRuleViolation``   -> 422, the rule's own message.
* DRF ``APIException``        -> its status code (401, 405, 415, ...).
* anything else               -> 500, generic message unless
  ``settings.EXPOSE_ERROR_DETAILS`` is enabled.
"""

from __future__ import annotations

from datetime import datetime
from http import HTTPStatus
from typing import Any, Dict, Optional

import structlog
from django.conf import settings
from django.utils import timezone
from pydantic import BaseModel, ConfigDict
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = structlog.get_logger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class RequestValidationError(Exception):
    """A request body violated its DTO constraints.

    ``errors`` maps each offending field to a human-readable message.
    """

    def __init__(self, errors: Dict[str, str]) -> None:
        super().__init__("Validation failed")
        self.errors = errors


class BusinessRuleViolation(Exception):
    """A domain rule rejected an otherwise well-formed request."""

    status_code = 422

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------


class ErrorResponse(BaseModel):
    """Immutable error body returned for every non-2xx API response."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    status: int
    error: str
    message: str
    path: Optional[str] = None
    errors: Optional[Dict[str, str]] = None

    @classmethod
    def build(
        cls,
        status_code: int,
        message: str,
        path: Optional[str] = None,
        errors: Optional[Dict[str, str]] = None,
    ) -> ErrorResponse:
        return cls(
            timestamp=timezone.now(),
            status=status_code,
            error=HTTPStatus(status_code).phrase,
            message=message,
            path=path,
            errors=errors,
        )

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


# ---------------------------------------------------------------------------
# Handler
# ---------------------------------------------------------------------------


def _flatten_detail(detail: Any) -> Dict[str, str]:
    """Collapse DRF's nested ``detail`` structure into ``{field: message}``."""
    if isinstance(detail, dict):
        return {
            str(key): str(value[0]) if isinstance(value, list) and value else str(value)
            for key, value in detail.items()
        }
    if isinstance(detail, list):
        return {"non_field_errors": "; ".join(str(item) for item in detail)}
    return {}


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """DRF exception handler producing the uniform ``ErrorResponse`` body."""
    request = context.get("request")
    path = request.path if request is not None else None

    if isinstance(exc, RequestValidationError):
        logger.info("request.validation_failed", path=path, fields=sorted(exc.errors))
        body = ErrorResponse.build(
            status.HTTP_400_BAD_REQUEST, str(exc), path=path, errors=exc.errors
        )
        return Response(body.to_wire(), status=body.status)

    if isinstance(exc, BusinessRuleViolation):
        logger.warning("request.business_rule_violated", path=path, rule=type(exc).__name__)
        errors = {exc.field: exc.message} if exc.field else None
        body = ErrorResponse.build(exc.status_code, exc.message, path=path, errors=errors)
        return Response(body.to_wire(), status=body.status)

    response = drf_exception_handler(exc, context)
    if response is not None:
        detail = getattr(exc, "detail", None)
        if isinstance(detail, (dict, list)):
            message = "Validation failed"
            errors = _flatten_detail(detail) or None
        else:
            message = str(detail) if detail is not None else HTTPStatus(response.status_code).phrase
            errors = None
        body = ErrorResponse.build(response.status_code, message, path=path, errors=errors)
        # Keep headers DRF attached (WWW-Authenticate, Retry-After, Allow).
        response.data = body.to_wire()
        return response

    logger.exception("request.unhandled_error", path=path, error_type=type(exc).__name__)
    message = GENERIC_ERROR_MESSAGE
    if getattr(settings, "EXPOSE_ERROR_DETAILS", False):
        message = f"{GENERIC_ERROR_MESSAGE}: {exc}"
    body = ErrorResponse.build(status.HTTP_500_INTERNAL_SERVER_ERROR, message, path=path)
    return Response(body.to_wire(), status=body.status)
