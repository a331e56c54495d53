"""
Commerce Backend — API Endpoint Tests
======================================

What:  End-to-end HTTP behavior through the FastAPI app (HTTPX + ASGITransport).

What we test:
    ✅ Success envelopes: {success, data}, {success, data, pagination}, {success, message}
    ✅ Error envelope: {success: false, error, request_id} with 404/409/422
    ✅ Order placement over HTTP: stock deducted, 409 when short, 404 for unknown product
    ✅ Passwords never appear in responses
    ✅ Pagination defaults and caps, product search, order filters
    ✅ Health check and X-Request-ID propagation
    ✅ A failed commit surfaces as a 500, never as a success
"""

import uuid
from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from app.main import create_app


async def _create_user(client, email="api@example.com"):
    response = await client.post(
        "/api/users",
        json={"email": email, "password": "secret123", "name": "Api User"},
    )
    assert response.status_code == 201
    return response.json()["data"]


async def _create_product(client, name="Wireless Mouse", stock=5, price="29.99", description=None):
    response = await client.post(
        "/api/products",
        json={"name": name, "price": price, "stock": stock, "description": description},
    )
    assert response.status_code == 201
    return response.json()["data"]


class TestUserEndpoints:

    @pytest.mark.asyncio
    async def test_create_returns_envelope_without_password(self, test_client):
        response = await test_client.post(
            "/api/users",
            json={"email": "new@example.com", "password": "secret123"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["email"] == "new@example.com"
        assert "password" not in body["data"]
        uuid.UUID(body["data"]["id"])

    @pytest.mark.asyncio
    async def test_duplicate_email_is_409(self, test_client):
        await _create_user(test_client, "taken@example.com")

        response = await test_client.post(
            "/api/users",
            json={"email": "taken@example.com", "password": "secret123"},
        )

        assert response.status_code == 409
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "A user with this email already exists"

    @pytest.mark.asyncio
    async def test_invalid_email_is_422_envelope(self, test_client):
        response = await test_client.post(
            "/api/users",
            json={"email": "not-an-email", "password": "secret123"},
        )

        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Request validation failed"
        assert any("email" in error["loc"] for error in body["details"])

    @pytest.mark.asyncio
    async def test_unknown_user_is_404_with_request_id(self, test_client):
        missing = uuid.uuid4()

        response = await test_client.get(f"/api/users/{missing}")

        assert response.status_code == 404
        body = response.json()
        assert body == {
            "success": False,
            "error": f"User with ID '{missing}' was not found",
            "request_id": response.headers["X-Request-ID"],
        }

    @pytest.mark.asyncio
    async def test_malformed_id_is_422(self, test_client):
        response = await test_client.get("/api/users/not-a-uuid")

        assert response.status_code == 422
        assert response.json()["success"] is False

    @pytest.mark.asyncio
    async def test_update_and_delete(self, test_client):
        user = await _create_user(test_client)

        updated = await test_client.put(f"/api/users/{user['id']}", json={"address": "1 Main St"})
        assert updated.status_code == 200
        assert updated.json()["data"]["address"] == "1 Main St"
        assert updated.json()["data"]["name"] == "Api User"

        deleted = await test_client.delete(f"/api/users/{user['id']}")
        assert deleted.status_code == 200
        assert deleted.json() == {"success": True, "message": "User deleted successfully"}

        again = await test_client.get(f"/api/users/{user['id']}")
        assert again.status_code == 404

    @pytest.mark.asyncio
    async def test_null_for_required_field_is_422(self, test_client):
        user = await _create_user(test_client)

        response = await test_client.put(f"/api/users/{user['id']}", json={"email": None})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_unknown_field_in_update_is_422(self, test_client):
        user = await _create_user(test_client)

        response = await test_client.put(f"/api/users/{user['id']}", json={"nickname": "x"})

        assert response.status_code == 422


class TestProductEndpoints:

    @pytest.mark.asyncio
    async def test_price_round_trips_as_decimal_string(self, test_client):
        product = await _create_product(test_client, price="1299.99")

        fetched = await test_client.get(f"/api/products/{product['id']}")

        assert Decimal(fetched.json()["data"]["price"]) == Decimal("1299.99")

    @pytest.mark.asyncio
    async def test_negative_stock_is_rejected(self, test_client):
        response = await test_client.post(
            "/api/products",
            json={"name": "Bad", "price": "1.00", "stock": -1},
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_search_and_pagination_meta(self, test_client):
        await _create_product(test_client, name="Laptop Pro 15")
        await _create_product(test_client, name="Laptop Stand")
        await _create_product(test_client, name="Wireless Mouse")

        response = await test_client.get("/api/products", params={"search": "LAPTOP", "limit": 1})

        body = response.json()
        assert body["success"] is True
        assert body["pagination"] == {"page": 1, "limit": 1}
        assert [p["name"] for p in body["data"]] == ["Laptop Stand"]

    @pytest.mark.asyncio
    async def test_default_limit_and_cap(self, test_client):
        default = await test_client.get("/api/products")
        capped = await test_client.get("/api/products", params={"limit": 5000})

        assert default.json()["pagination"] == {"page": 1, "limit": 10}
        assert capped.json()["pagination"]["limit"] == 100

    @pytest.mark.asyncio
    async def test_page_zero_is_422(self, test_client):
        response = await test_client.get("/api/products", params={"page": 0})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_stock_adjustment(self, test_client):
        product = await _create_product(test_client, stock=2)

        added = await test_client.post(f"/api/products/{product['id']}/stock", json={"delta": 3})
        refused = await test_client.post(f"/api/products/{product['id']}/stock", json={"delta": -9})

        assert added.json()["data"]["stock"] == 5
        assert refused.status_code == 409
        assert refused.json()["details"] == {"requested": 9, "available": 5}

    @pytest.mark.asyncio
    async def test_zero_stock_delta_is_400(self, test_client):
        product = await _create_product(test_client)

        response = await test_client.post(f"/api/products/{product['id']}/stock", json={"delta": 0})

        assert response.status_code == 400
        assert response.json()["error"] == "Stock delta must be non-zero"
        assert response.json()["details"] == {"field": "delta"}

    @pytest.mark.asyncio
    async def test_stock_is_not_updatable_through_put(self, test_client):
        product = await _create_product(test_client)

        response = await test_client.put(f"/api/products/{product['id']}", json={"stock": 100})

        assert response.status_code == 422


class TestOrderEndpoints:

    @pytest.mark.asyncio
    async def test_placement_and_oversell(self, test_client):
        user = await _create_user(test_client)
        product = await _create_product(test_client, stock=5)
        order_body = {"user_id": user["id"], "product_id": product["id"], "quantity": 3}

        first = await test_client.post("/api/orders", json=order_body)
        second = await test_client.post("/api/orders", json=order_body)
        remaining = await test_client.get(f"/api/products/{product['id']}")

        assert first.status_code == 201
        assert first.json()["data"]["status"] == "PAID"
        assert second.status_code == 409
        assert second.json()["success"] is False
        assert "Insufficient inventory" in second.json()["error"]
        assert remaining.json()["data"]["stock"] == 2

    @pytest.mark.asyncio
    async def test_unknown_product_is_404_and_no_order(self, test_client):
        user = await _create_user(test_client)

        response = await test_client.post(
            "/api/orders",
            json={"user_id": user["id"], "product_id": str(uuid.uuid4()), "quantity": 1},
        )
        orders = await test_client.get("/api/orders")

        assert response.status_code == 404
        assert response.json()["error"].startswith("Product with ID")
        assert orders.json()["data"] == []

    @pytest.mark.asyncio
    async def test_invalid_status_is_422(self, test_client):
        product = await _create_product(test_client)

        response = await test_client.post(
            "/api/orders",
            json={"product_id": product["id"], "quantity": 1, "status": "LOST"},
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_filters_and_user_orders(self, test_client):
        user = await _create_user(test_client)
        product = await _create_product(test_client, stock=10)
        await test_client.post(
            "/api/orders",
            json={"user_id": user["id"], "product_id": product["id"], "quantity": 1},
        )
        await test_client.post(
            "/api/orders",
            json={"product_id": product["id"], "quantity": 1, "status": "IN TRANSIT"},
        )

        in_transit = await test_client.get("/api/orders", params={"status": "IN TRANSIT"})
        by_user = await test_client.get(f"/api/users/{user['id']}/orders")

        assert [o["status"] for o in in_transit.json()["data"]] == ["IN TRANSIT"]
        assert len(by_user.json()["data"]) == 1
        assert by_user.json()["data"][0]["user_id"] == user["id"]


class TestDeliveryAndCourierEndpoints:

    @pytest.mark.asyncio
    async def test_delivery_lifecycle(self, test_client):
        product = await _create_product(test_client)
        order = (
            await test_client.post("/api/orders", json={"product_id": product["id"], "quantity": 1})
        ).json()["data"]
        courier = (await test_client.post("/api/couriers", json={"name": "Speedy Sam"})).json()["data"]
        assert courier["is_available"] is True

        created = await test_client.post(
            "/api/deliveries",
            json={"order_id": order["id"], "courier_id": courier["id"]},
        )
        assert created.status_code == 201
        delivery = created.json()["data"]
        assert delivery["pick_up_date"] is None

        picked_up = await test_client.put(
            f"/api/deliveries/{delivery['id']}",
            json={"pick_up_date": "2026-01-15T10:00:00+00:00"},
        )
        assert picked_up.status_code == 200
        assert picked_up.json()["data"]["pick_up_date"].startswith("2026-01-15T10:00:00")

        deleted = await test_client.delete(f"/api/deliveries/{delivery['id']}")
        assert deleted.json()["message"] == "Delivery deleted successfully"

    @pytest.mark.asyncio
    async def test_delivery_with_unknown_courier_is_404(self, test_client):
        response = await test_client.post(
            "/api/deliveries",
            json={"courier_id": str(uuid.uuid4())},
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_courier_availability_toggle(self, test_client):
        courier = (await test_client.post("/api/couriers", json={"name": "Rapid Rita"})).json()["data"]

        response = await test_client.put(
            f"/api/couriers/{courier['id']}",
            json={"is_available": False},
        )

        assert response.json()["data"]["is_available"] is False
        assert response.json()["data"]["name"] == "Rapid Rita"


class TestHealthAndMiddleware:

    @pytest.mark.asyncio
    async def test_health_reports_connected(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["environment"] == "test"

    @pytest.mark.asyncio
    async def test_client_request_id_is_echoed(self, test_client):
        response = await test_client.get(
            f"/api/products/{uuid.uuid4()}",
            headers={"X-Request-ID": "trace-123"},
        )

        assert response.headers["X-Request-ID"] == "trace-123"
        assert response.json()["request_id"] == "trace-123"

    @pytest.mark.asyncio
    async def test_unknown_route_uses_error_envelope(self, test_client):
        response = await test_client.get("/api/nope")

        assert response.status_code == 404
        assert response.json()["success"] is False


class TestCommitFailure:

    @pytest.mark.asyncio
    async def test_failed_commit_is_500_and_nothing_saved(self, test_settings):
        app = create_app(test_settings)
        await app.state.database.create_all()
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        failing_commit = AsyncMock(
            side_effect=OperationalError("COMMIT", {}, Exception("disk I/O error"))
        )

        try:
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                with patch.object(AsyncSession, "commit", failing_commit):
                    response = await client.post("/api/couriers", json={"name": "Ghost"})

                listed = await client.get("/api/couriers")
        finally:
            await app.state.database.dispose()

        assert response.status_code == 500
        assert response.json()["success"] is False
        assert failing_commit.await_count >= 1
        assert listed.json()["data"] == []
