"""Pytest configuration and fixtures"""
from typing import Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from api import create_app
from models import storage


@pytest.fixture(scope="function")
def static_root(tmp_path) -> str:
    """Directory served under /app/"""
    root = tmp_path / "static"
    root.mkdir()
    (root / "index.html").write_text("<html><body>Welcome to Chirpy</body></html>")
    (root / "assets").mkdir()
    (root / "assets" / "logo.txt").write_text("chirpy logo")
    return str(root)


@pytest.fixture(scope="function")
def app_factory(tmp_path, static_root):
    """Build an isolated app on a fresh SQLite file; extra config via kwargs"""
    made = []

    def make(**overrides) -> Flask:
        config = {
            "DATABASE_URL": f"sqlite:///{tmp_path / 'chirpy.db'}",
            "FILESERVER_ROOT": static_root,
        }
        config.update(overrides)
        made.append(create_app("testing", overrides=config))
        return made[-1]

    yield make
    if made:
        storage.drop_all()
        storage.dispose()


@pytest.fixture(scope="function")
def app(app_factory) -> Flask:
    return app_factory()


@pytest.fixture(scope="function")
def client(app: Flask) -> Generator[FlaskClient, None, None]:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def credentials() -> dict:
    return {"email": "saul@bettercall.com", "password": "123456"}


@pytest.fixture
def user(client: FlaskClient, credentials: dict) -> dict:
    """A registered user (response body)"""
    response = client.post("/api/users", json=credentials)
    assert response.status_code == 201
    return response.get_json()


@pytest.fixture
def session_tokens(client: FlaskClient, user: dict, credentials: dict) -> dict:
    """Login response for the registered user"""
    response = client.post("/api/login", json=credentials)
    assert response.status_code == 200
    return response.get_json()


@pytest.fixture
def auth_headers(session_tokens: dict) -> dict:
    return {"Authorization": f"Bearer {session_tokens['token']}"}


@pytest.fixture
def refresh_headers(session_tokens: dict) -> dict:
    return {"Authorization": f"Bearer {session_tokens['refresh_token']}"}
