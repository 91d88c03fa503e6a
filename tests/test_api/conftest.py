# tests/test_api/conftest.py
import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from core.config import Settings
from core.sa.database import Database

ALLOWED_ORIGIN = "http://localhost:8000"

@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'api.db'}",
        cors_origin=ALLOWED_ORIGIN,
        host="127.0.0.1",
        port=8080,
        log_level="INFO",
        sql_echo=False,
    )

@pytest.fixture
def database(settings):
    db = Database(settings.database_url)
    yield db
    db.close()

@pytest.fixture
def client(database, settings):
    """A client for an app whose schema was created on startup."""
    app = create_app(database=database, settings=settings)
    with TestClient(app) as test_client:
        yield test_client

@pytest.fixture
def collection(client):
    response = client.post("/collections", json={"name": "Sci-Fi"})
    assert response.status_code == 200
    return response.json()
