from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add backend folder to sys.path so `import receipt_points...` works in tests when running from backend root
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from receipt_points.api.dependencies import get_receipt_store  # noqa: E402
from receipt_points.api.main import app  # noqa: E402
from receipt_points.models.schemas import Receipt  # noqa: E402
from receipt_points.services.receipt_store import ReceiptStore  # noqa: E402


@pytest.fixture
def store():
    """Fresh store per test, injected into the app."""
    s = ReceiptStore()
    app.dependency_overrides[get_receipt_store] = lambda: s
    yield s
    app.dependency_overrides.clear()


@pytest.fixture
def client(store):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def target_receipt_payload():
    return {
        "retailer": "Target",
        "purchaseDate": "2022-01-01",
        "purchaseTime": "13:01",
        "items": [
            {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
            {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
            {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
            {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
            {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
        ],
        "total": "35.35",
    }


@pytest.fixture
def corner_market_payload():
    return {
        "retailer": "M&M Corner Market",
        "purchaseDate": "2022-03-20",
        "purchaseTime": "14:33",
        "items": [
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
        ],
        "total": "9.00",
    }


@pytest.fixture
def make_receipt():
    """Factory for receipts that score zero unless fields are overridden."""

    def _make(**overrides) -> Receipt:
        data = {
            "retailer": "",
            "purchaseDate": "2022-01-02",
            "purchaseTime": "10:00",
            "items": [],
            "total": "1.10",
        }
        data.update(overrides)
        return Receipt.model_validate(data)

    return _make
