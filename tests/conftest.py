import pytest
from fastapi.testclient import TestClient

from app.core.app import create_app


@pytest.fixture
def identity_env(monkeypatch, tmp_path):
    monkeypatch.setenv("USER_CONFIG_FILE", str(tmp_path / "user-config.json"))
    monkeypatch.setenv("USER_FULL_NAME", "jane_roe")
    monkeypatch.setenv("USER_BIRTH_DATE", "01012000")
    monkeypatch.setenv("USER_EMAIL", "jane@example.com")
    monkeypatch.setenv("USER_ROLL_NUMBER", "XYZ789")
    return tmp_path


@pytest.fixture
def app(identity_env):
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
