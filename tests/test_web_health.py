"""
Health endpoints and app wiring.

Run with: pytest tests/test_web_health.py
"""

from fastapi.testclient import TestClient

from backend.src.web.config import AppConfig
from backend.src.web.main import create_app


def test_live(client):
    response = client.get("/api/health/live")
    assert response.status_code == 200
    assert response.json() == {"status": "live"}


def test_ready_reports_task_count(client, store):
    store.create("one", "x")
    store.create("two", "x")

    response = client.get("/api/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready", "tasks": 2}


def test_config_exposes_name_and_version():
    app = create_app(config=AppConfig(app_name="Tracker", version="9.9.9"))
    with TestClient(app) as client:
        assert client.get("/api/health/config").json() == {"app_name": "Tracker", "version": "9.9.9"}


def test_each_app_owns_its_store():
    first = TestClient(create_app(config=AppConfig()))
    second = TestClient(create_app(config=AppConfig()))

    first.post("/tasks", json={"title": "a", "description": "b"})

    assert len(first.get("/tasks").json()) == 1
    assert second.get("/tasks").json() == []


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("TASKS_PORT", "9001")
    monkeypatch.setenv("TASKS_DEBUG", "1")
    monkeypatch.setenv("TASKS_LOG_LEVEL", "debug")

    loaded = AppConfig.from_env()
    assert loaded.port == 9001
    assert loaded.debug is True
    assert loaded.log_level == "DEBUG"
