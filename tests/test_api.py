"""Tests for API endpoints."""

import pytest
from fastapi.testclient import TestClient

from src.api import app
from src.api.dependencies import get_app_settings, get_order_store
from src.config import Settings
from src.services import InMemoryOrderStore


@pytest.fixture
def export_path(tmp_path, sample_export):
    """Write the sample export to a temporary file."""
    path = tmp_path / "orders-new.csv"
    path.write_text(sample_export, encoding="utf-8")
    return path


@pytest.fixture
def client(tmp_path, export_path):
    """Create test client backed by a temp export and an in-memory store."""
    store = InMemoryOrderStore()
    settings = Settings(data_dir=tmp_path, orders_csv_path=export_path, default_order_limit=50)

    app.dependency_overrides[get_app_settings] = lambda: settings
    app.dependency_overrides[get_order_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealthEndpoints:
    """Tests for health endpoints."""

    def test_root(self, client):
        """Test root endpoint."""
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data

    def test_health(self, client):
        """Test health check endpoint."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "services" in data


class TestOrdersEndpoints:
    """Tests for export order endpoints."""

    def test_list_orders(self, client):
        """Test the export is aggregated into orders."""
        response = client.get("/api/orders")

        assert response.status_code == 200
        data = response.json()
        assert [o["id"] for o in data] == ["O1", "O2", "O3"]

        o1 = data[0]
        assert o1["items"] == 3
        assert o1["totalPackTime"] == 30
        assert o1["estimatedTime"] == 24
        assert o1["hasVAS"] is True
        assert o1["hasFragile"] is True
        assert o1["station"] is None
        assert o1["status"] == "Pending"
        assert o1["itemDetails"][0]["orderID"] == "O1"
        assert o1["itemDetails"][0]["packTime"] == 10

    def test_list_orders_limit(self, client):
        """Test the limit query parameter."""
        response = client.get("/api/orders?limit=1")

        assert response.status_code == 200
        assert [o["id"] for o in response.json()] == ["O1"]

    def test_list_orders_zero_limit_uses_default(self, client):
        """Test a zero limit falls back to the default."""
        response = client.get("/api/orders?limit=0")

        assert response.status_code == 200
        assert len(response.json()) == 3

    def test_list_orders_missing_export(self, client, export_path):
        """Test an unreadable export is a server error."""
        export_path.unlink()

        response = client.get("/api/orders")

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to read orders"


class TestBalanceEndpoints:
    """Tests for load balancing endpoints."""

    def test_balance(self, client):
        """Test aggregated orders can be balanced across stations."""
        orders = client.get("/api/orders").json()

        response = client.post("/api/balance", json={"orders": orders, "stationCount": 2})

        assert response.status_code == 200
        data = response.json()
        assert [o["id"] for o in data["orders"]] == ["O1", "O3", "O2"]
        assert [o["station"] for o in data["orders"]] == [1, 2, 2]
        assert all(o["status"] == "Assigned" for o in data["orders"])

        s1, s2 = data["stations"]
        assert s1["name"] == "Station 1"
        assert s1["totalTime"] == 24
        assert s1["status"] == "Light Load"
        assert s1["loadBalance"] == 51
        assert s1["efficiency"] == 34
        assert s2["totalTime"] == 71
        assert s2["status"] == "Overloaded"
        assert [o["id"] for o in s2["orders"]] == ["O3", "O2"]

    def test_balance_minimal_orders(self, client):
        """Test orders only need an id, priority and estimated time."""
        payload = {
            "orders": [
                {"id": "A", "priority": "Low", "estimatedTime": 5},
                {"id": "B", "priority": "High", "estimatedTime": 5},
            ],
            "stationCount": 3,
        }

        response = client.post("/api/balance", json=payload)

        assert response.status_code == 200
        data = response.json()
        assert [o["id"] for o in data["orders"]] == ["B", "A"]
        assert data["stations"][2]["status"] == "Idle"
        assert data["stations"][2]["loadBalance"] == 0

    @pytest.mark.parametrize("station_count", [0, -2])
    def test_balance_invalid_station_count(self, client, station_count):
        """Test non-positive station counts are rejected."""
        response = client.post(
            "/api/balance",
            json={"orders": [{"id": "A", "estimatedTime": 5}], "stationCount": station_count},
        )

        assert response.status_code == 400

    def test_balance_missing_station_count(self, client):
        """Test the station count is required."""
        response = client.post("/api/balance", json={"orders": []})

        assert response.status_code == 422


class TestCustomerOrderEndpoints:
    """Tests for customer order storage endpoints."""

    def test_save_and_list(self, client):
        """Test saving customer orders and listing them back."""
        order = {"id": "C-1", "priority": "High", "items": 2, "estimatedTime": 12}

        response = client.post("/api/orders", json=order)

        assert response.status_code == 200
        assert response.json() == {"success": True, "orderId": "C-1"}

        listed = client.get("/api/customer-orders").json()
        assert [o["id"] for o in listed] == ["C-1"]
        assert listed[0]["estimatedTime"] == 12

    def test_update_orders(self, client):
        """Test station assignments are written back to saved orders."""
        client.post("/api/orders", json={"id": "C-1", "estimatedTime": 12})
        client.post("/api/orders", json={"id": "C-2", "estimatedTime": 7})

        response = client.post(
            "/api/update-orders",
            json=[
                {"id": "C-2", "station": 3, "status": "Assigned"},
                {"id": "missing", "station": 1, "status": "Assigned"},
            ],
        )

        assert response.status_code == 200
        assert response.json() == {"success": True}

        listed = {o["id"]: o for o in client.get("/api/customer-orders").json()}
        assert listed["C-2"]["station"] == 3
        assert listed["C-2"]["status"] == "Assigned"
        assert listed["C-1"]["station"] is None

    def test_update_orders_invalid_status(self, client):
        """Test unknown statuses are rejected."""
        response = client.post(
            "/api/update-orders",
            json=[{"id": "C-1", "station": 1, "status": "Shipped"}],
        )

        assert response.status_code == 422
