"""Pytest fixtures for the Order Management API tests."""

import pytest
from fastapi.testclient import TestClient

from order_management_api.app.core.config import settings
from order_management_api.app.core.db import init_db
from order_management_api.app.core.security import create_access_token


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Point the app at a fresh, migrated SQLite file."""
    path = tmp_path / "orders.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def raw_db_path(tmp_path, monkeypatch):
    """Point the app at a SQLite file without any tables."""
    path = tmp_path / "empty.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    return path


@pytest.fixture
def auth_headers():
    token = create_access_token({"sub": "tester"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_client(db_path):
    """Factory building a test client from the current settings."""
    clients = []

    def _make():
        from order_management_api.app.main import create_app

        client = TestClient(create_app())
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def supplier_data():
    return {
        "SupplierID": "S1",
        "SupplierName": "Acme",
        "ContactInfo": "a@acme.com",
        "Address": "1 Main St",
    }


@pytest.fixture
def order_data():
    return {"OrderID": "ORD-1", "ProductID": "PRD-1", "Quantity": 3, "Price": 19.99}


@pytest.fixture
def order_detail_data():
    return {
        "OrderDetailID": "OD-1",
        "OrderID": "ORD-1",
        "ProductID": "PRD-1",
        "Quantity": 2,
        "Price": 4.5,
    }


@pytest.fixture
def payment_data():
    return {
        "PaymentID": "PAY-1",
        "OrderID": "ORD-1",
        "PaymentDate": "2024-05-01T10:00:00",
        "PaymentMethod": "GCash",
        "PaymentAmount": 59.97,
    }
