from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_use_cases
from app.config import Settings
from app.domain.errors import PriceCalculatorNotFoundError
from app.main import app


def _use_cases_raising(name: str, exc: Exception):
    use_case = MagicMock()
    use_case.execute = AsyncMock(side_effect=exc)
    return lambda: {name: use_case}


def test_not_found_envelope(client):
    response = client.get("/api/rentals/3f2b8c1e-9a4d-4e0b-8f61-2c7d5e9a1b30")

    body = response.json()
    assert response.status_code == 404
    assert body["status_code"] == 404
    assert body["path"] == "/api/rentals/3f2b8c1e-9a4d-4e0b-8f61-2c7d5e9a1b30"
    assert "not found" in body["message"]
    assert "timestamp" in body
    assert "details" not in body
    assert "error_id" not in body


def test_details_included_outside_production(client, monkeypatch):
    monkeypatch.setattr(
        "app.api.error_handlers.get_settings", lambda: Settings(environment="development")
    )

    response = client.get("/api/rentals/3f2b8c1e-9a4d-4e0b-8f61-2c7d5e9a1b30")

    assert "RentalNotFoundError" in response.json()["details"]


def test_configuration_error_is_generic_500(client):
    app.dependency_overrides[get_use_cases] = _use_cases_raising(
        "register_return", PriceCalculatorNotFoundError("Truck")
    )

    response = client.post(
        "/api/rentals/3f2b8c1e-9a4d-4e0b-8f61-2c7d5e9a1b30/return",
        json={"return_datetime": "2026-02-06T10:00:00", "return_meter_reading": 1500},
    )

    body = response.json()
    assert response.status_code == 500
    assert body["message"] == "An internal server error occurred"
    assert "Truck" not in body["message"]
    assert body["error_id"]


@pytest.fixture
def lenient_client():
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_unexpected_error_is_generic_500(lenient_client):
    app.dependency_overrides[get_use_cases] = _use_cases_raising(
        "list_rentals", RuntimeError("database password is hunter2")
    )

    response = lenient_client.get("/api/rentals")

    body = response.json()
    assert response.status_code == 500
    assert body["message"] == "An internal server error occurred"
    assert "hunter2" not in response.text
    assert body["error_id"]
