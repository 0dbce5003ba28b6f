"""Integration tests for standardized error responses."""

from unittest.mock import patch

import pytest
from django.test import override_settings

pytestmark = pytest.mark.integration

LIST_URL = "/api/products"
ENVELOPE_KEYS = {"timestamp", "status", "error", "message", "path"}


class TestStandardizedErrors:
    def test_auth_error_has_standard_format(self, api_client):
        response = api_client.post(LIST_URL, {"name": "Widget", "price": 1, "quantity": 1})
        assert response.status_code == 401
        assert ENVELOPE_KEYS <= set(response.json())

    def test_validation_error_has_standard_format(self, auth_client):
        response = auth_client.post(LIST_URL, {"name": "", "price": 0, "quantity": -1})
        assert response.status_code == 400
        data = response.json()
        assert ENVELOPE_KEYS <= set(data)
        assert data["status"] == 400
        assert data["error"] == "Bad Request"
        assert data["message"] == "Validation failed"
        assert data["path"] == LIST_URL
        assert data["errors"] == {
            "name": "Product name cannot be empty",
            "price": "Product price must be greater than 0",
            "quantity": "Product quantity cannot be negative",
        }

    def test_parse_error_has_standard_format(self, auth_client):
        response = auth_client.post(LIST_URL, data="{", content_type="application/json")
        assert response.status_code == 400
        assert ENVELOPE_KEYS <= set(response.json())

    def test_method_not_allowed_has_standard_format(self, auth_client):
        response = auth_client.delete(LIST_URL)
        assert response.status_code == 405
        assert response.json()["status"] == 405

    def test_business_rule_violation_is_422(self, auth_client):
        from modules.products.exceptions import NonPositivePrice

        with patch(
            "modules.products.services.ProductService.create_product",
            side_effect=NonPositivePrice(),
        ):
            response = auth_client.post(
                LIST_URL, {"name": "Widget", "price": 1, "quantity": 1}
            )
        assert response.status_code == 422
        data = response.json()
        assert data["message"] == "Product price must be greater than 0"
        assert data["errors"] == {"price": "Product price must be greater than 0"}

    @override_settings(EXPOSE_ERROR_DETAILS=False)
    def test_unexpected_error_is_generic_500(self, auth_client):
        with patch(
            "modules.products.services.ProductService.list_products",
            side_effect=RuntimeError("connection string with secrets"),
        ):
            response = auth_client.get(LIST_URL)
        assert response.status_code == 500
        data = response.json()
        assert data["message"] == "An unexpected error occurred"
        assert "secrets" not in response.content.decode()
