from unittest.mock import AsyncMock

from app.api.dependencies import get_session
from app.config import Settings, get_settings
from app.main import app


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "rental-service-api"}


def test_liveness(client):
    assert client.get("/health/live").json()["status"] == "ok"


def test_readiness_in_memory(client):
    response = client.get("/health/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ready", "checks": {"storage": "in_memory"}}


def test_readiness_reports_unreachable_database(client):
    session = AsyncMock()
    session.execute.side_effect = ConnectionError("connection refused")

    async def broken_session():
        yield session

    app.dependency_overrides[get_settings] = lambda: Settings(use_in_memory=False)
    app.dependency_overrides[get_session] = broken_session

    response = client.get("/health/ready")

    assert response.status_code == 503
    assert response.json() == {"status": "not_ready", "checks": {"database": "unhealthy"}}
