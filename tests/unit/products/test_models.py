"""Unit tests for the Product model.

Covers:
- Valid creation, nullable description.
- Timestamp lifecycle (inherited from BaseModel).
- Price > 0 (application clean() + DB constraint).
- Quantity >= 0 (PositiveIntegerField).
- Equality by primary key.
- __str__ representation.
- INFO log on product creation.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from decimal import Decimal

import pytest
from freezegun import freeze_time

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.utils import timezone

from modules.products.models import Product

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Creation
# ---------------------------------------------------------------------------


class TestProductCreation:
    def test_create_product_with_valid_data(self):
        p = Product.objects.create(
            name="Widget",
            description="A fine widget",
            price=Decimal("19.99"),
            quantity=10,
        )
        p.refresh_from_db()
        assert p.pk is not None
        assert p.name == "Widget"
        assert p.price == Decimal("19.99")
        assert p.quantity == 10

    def test_description_is_optional(self, make_product):
        p = make_product(description=None)
        p.refresh_from_db()
        assert p.description is None

    def test_ids_are_assigned_by_database(self, make_product):
        first = make_product()
        second = make_product()
        assert first.pk != second.pk


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------


class TestTimestampLifecycle:
    def test_timestamps_equal_on_first_persist(self, make_product):
        p = make_product()
        assert p.created_at is not None
        assert p.created_at == p.updated_at

    def test_update_refreshes_updated_at_only(self, make_product):
        start = timezone.now()
        with freeze_time(start) as frozen:
            p = make_product()
            created = p.created_at

            frozen.tick(timedelta(seconds=5))
            p.quantity = 99
            p.save()

        p.refresh_from_db()
        assert p.created_at == created
        assert p.updated_at == created + timedelta(seconds=5)

    def test_updated_at_monotone_across_saves(self, make_product):
        with freeze_time(timezone.now()) as frozen:
            p = make_product()
            stamps = [p.updated_at]
            for _ in range(3):
                frozen.tick(timedelta(seconds=1))
                p.save()
                stamps.append(p.updated_at)
        assert stamps == sorted(stamps)
        assert len(set(stamps)) == len(stamps)

    def test_update_fields_includes_updated_at(self, make_product):
        with freeze_time(timezone.now()) as frozen:
            p = make_product()
            frozen.tick(timedelta(minutes=1))
            p.name = "Renamed"
            p.save(update_fields=["name"])
            expected = p.updated_at

        p.refresh_from_db()
        assert p.name == "Renamed"
        assert p.updated_at == expected
        assert p.updated_at > p.created_at


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestProductValidation:
    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-1.00")])
    def test_clean_rejects_non_positive_price(self, price):
        p = Product(name="Widget", price=price, quantity=1)
        with pytest.raises(ValidationError) as exc_info:
            p.full_clean(exclude=["created_at", "updated_at"])
        assert "price" in exc_info.value.message_dict

    def test_clean_rejects_blank_name(self):
        p = Product(name="   ", price=Decimal("1.00"), quantity=1)
        with pytest.raises(ValidationError) as exc_info:
            p.clean()
        assert "name" in exc_info.value.message_dict

    def test_db_constraint_rejects_zero_price(self):
        with pytest.raises(IntegrityError), transaction.atomic():
            Product.objects.create(name="Free", price=Decimal("0.00"), quantity=1)

    def test_db_rejects_negative_quantity(self):
        with pytest.raises(IntegrityError), transaction.atomic():
            Product.objects.create(name="Widget", price=Decimal("1.00"), quantity=-1)


# ---------------------------------------------------------------------------
# Identity / display / logging
# ---------------------------------------------------------------------------


class TestProductIdentity:
    def test_equality_by_id(self, make_product):
        p = make_product()
        same_row = Product.objects.get(pk=p.pk)
        same_row.name = "Different in memory"
        assert p == same_row

    def test_different_ids_not_equal(self, make_product):
        assert make_product() != make_product()

    def test_str(self, make_product):
        p = make_product(name="Widget")
        assert str(p) == f"#{p.pk} Widget"


class TestProductLogging:
    def test_creation_logged(self, caplog):
        with caplog.at_level(logging.INFO):
            Product.objects.create(name="Logged", price=Decimal("1.00"), quantity=1)
        assert any("product_created" in r.getMessage() for r in caplog.records)

    def test_update_not_logged_as_creation(self, make_product, caplog):
        p = make_product()
        caplog.clear()
        with caplog.at_level(logging.INFO):
            p.quantity = 1
            p.save()
        assert not any("product_created" in r.getMessage() for r in caplog.records)
