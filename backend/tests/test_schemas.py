"""
Commerce Backend — Schema Tests
================================

What we test:
    ✅ Partial updates report only the fields that were sent
    ✅ Explicit null clears nullable fields, is rejected for required ones
    ✅ Unknown fields are rejected
    ✅ Order status accepts only the three known values
    ✅ Pagination offset arithmetic
    ✅ Responses never carry the password
"""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from pydantic import ValidationError

from app.models.user import User
from app.schemas.common import PaginationParams
from app.schemas.courier import CourierUpdate
from app.schemas.order import OrderCreate, OrderUpdate
from app.schemas.product import ProductCreate, ProductUpdate
from app.schemas.user import UserResponse, UserUpdate


class TestPartialUpdate:

    def test_changes_contains_only_sent_fields(self):
        update = ProductUpdate(name="Renamed")
        assert update.changes() == {"name": "Renamed"}

    def test_empty_body_has_no_changes(self):
        assert UserUpdate().changes() == {}

    def test_null_clears_nullable_field(self):
        assert UserUpdate(address=None).changes() == {"address": None}

    @pytest.mark.parametrize("field", ["email", "password"])
    def test_null_rejected_for_required_user_fields(self, field):
        with pytest.raises(ValidationError):
            UserUpdate(**{field: None})

    def test_null_rejected_for_courier_availability(self):
        with pytest.raises(ValidationError):
            CourierUpdate(is_available=None)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            ProductUpdate(stock=10)


class TestOrderSchemas:

    def test_status_defaults_to_paid_string(self):
        assert OrderCreate().status == "PAID"

    def test_in_transit_keeps_its_space(self):
        assert OrderCreate(status="IN TRANSIT").status == "IN TRANSIT"

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            OrderCreate(status="SHIPPED")

    def test_quantity_must_be_positive(self):
        with pytest.raises(ValidationError):
            OrderCreate(quantity=0)

    def test_status_cannot_be_nulled(self):
        with pytest.raises(ValidationError):
            OrderUpdate(status=None)


class TestProductCreate:

    def test_price_precision_limited_to_cents(self):
        with pytest.raises(ValidationError):
            ProductCreate(name="Pen", price=Decimal("1.999"))

    def test_stock_defaults_to_zero(self):
        assert ProductCreate(name="Pen", price=Decimal("1.50")).stock == 0


class TestPagination:

    @pytest.mark.parametrize(
        "page,limit,offset",
        [(1, 10, 0), (2, 10, 10), (3, 25, 50)],
    )
    def test_offset(self, page, limit, offset):
        assert PaginationParams(page=page, limit=limit).offset == offset


def test_user_response_omits_password():
    now = datetime.now(timezone.utc)
    user = User(
        id=uuid4(),
        email="hidden@example.com",
        password="secret123",
        name=None,
        address=None,
        created_at=now,
        updated_at=now,
    )

    payload = UserResponse.model_validate(user).model_dump()

    assert "password" not in payload
    assert payload["email"] == "hidden@example.com"
