"""Tests for application wiring: docs, configuration and logging."""

import logging
from logging.handlers import RotatingFileHandler

import pytest
from fastapi.testclient import TestClient

from student_records_api.app.core.config import Settings
from student_records_api.app.core.logging_config import resolve_level, setup_logging
from student_records_api.app.main import create_app


def test_openapi_document_lists_routes(client):
    resp = client.get("/openapi.json")
    assert resp.status_code == 200
    doc = resp.json()
    assert doc["info"]["title"] == "Student CRUD API"
    assert doc["info"]["version"] == "1.0.0"
    assert set(doc["paths"]["/students"]) == {"get", "post"}
    assert set(doc["paths"]["/students/{student_id}"]) == {"get", "put", "delete"}
    assert doc["paths"]["/students"]["get"]["summary"] == "Get the complete list of student records"


def test_docs_page_served(client):
    resp = client.get("/api-docs")
    assert resp.status_code == 200
    assert "swagger" in resp.text.lower()


def test_settings_defaults(monkeypatch):
    for name in ("PORT", "HOST", "DOCS_URL", "LOG_LEVEL", "DEBUG", "PROJECT_NAME"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.port == 3000
    assert settings.host == "0.0.0.0"
    assert settings.docs_url == "/api-docs"
    assert settings.log_level == "INFO"
    assert settings.debug is False


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("PROJECT_NAME", "Roster")
    monkeypatch.setenv("DOCS_URL", "/docs")
    settings = Settings()
    assert settings.port == 8080
    assert settings.debug is True

    with TestClient(create_app(settings)) as c:
        assert c.get("/openapi.json").json()["info"]["title"] == "Roster"
        assert c.get("/docs").status_code == 200
        assert c.get("/api-docs").status_code == 404


def test_setup_logging_is_idempotent(monkeypatch, tmp_path):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    logfile = tmp_path / "api.log"
    setup_logging(Settings(log_level="debug", log_file=str(logfile), debug=False))
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    file_handler = root.handlers[1]
    assert isinstance(file_handler, RotatingFileHandler)
    assert file_handler.maxBytes == 5 * 1024 * 1024
    assert file_handler.backupCount == 3

    setup_logging(Settings(log_level="error", debug=False))
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2

    for handler in root.handlers:
        handler.close()


@pytest.mark.parametrize(
    "overrides, expected",
    [
        ({"log_level": "warning"}, logging.WARNING),
        ({"log_level": "chatty"}, logging.INFO),
        ({"log_level": "error", "debug": True}, logging.DEBUG),
    ],
)
def test_resolve_level(overrides, expected):
    settings = Settings(**{"debug": False, **overrides})
    assert resolve_level(settings) == expected
