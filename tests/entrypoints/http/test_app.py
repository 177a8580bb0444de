"""
Unit tests for FastAPI application setup and configuration.

This test suite verifies the application structure and wiring:
- build_app() creates a configured FastAPI instance
- Process-wide resources are placed on app.state
- Router registration and route ordering
- OpenAPI schema generation and documentation endpoints
- Lifespan connects and disconnects the database
"""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.middleware.sessions import SessionMiddleware

from autohaus.adapters.local_file_storage import LocalFileStorage
from autohaus.adapters.smtp_email_sender import SmtpEmailSender
from autohaus.entrypoints.http.app import build_app
from autohaus.infra.config import Settings
from autohaus.infra.db.session import Database


def build_settings(**overrides) -> Settings:
    values = {"APP_SECRET": "test-secret", "DATABASE_URL": None}
    values.update(overrides)
    return Settings(**values)


# ==============================================================================
# Application Creation
# ==============================================================================


def test_build_app_returns_fastapi_instance() -> None:
    """build_app() returns a FastAPI application instance."""
    app = build_app(build_settings())
    assert isinstance(app, FastAPI)


def test_build_app_creates_new_instance_each_call() -> None:
    """build_app() creates a new app instance for each call (not cached)."""
    settings = build_settings()
    assert build_app(settings) is not build_app(settings)


def test_app_metadata() -> None:
    app = build_app(build_settings())

    assert app.title == "Autohaus API"
    assert app.version == "0.1.0"
    assert "Dealership inventory" in app.description
    assert app.contact == {"name": "Autohaus Team", "email": "dev@autohaus.example"}


# ==============================================================================
# Process-wide resources
# ==============================================================================


def test_state_holds_shared_resources() -> None:
    settings = build_settings()
    app = build_app(settings)

    assert app.state.settings is settings
    assert app.state.database is None
    assert isinstance(app.state.email_sender, SmtpEmailSender)
    assert isinstance(app.state.file_storage, LocalFileStorage)


def test_database_is_built_from_settings(tmp_path: Path) -> None:
    app = build_app(build_settings(DATABASE_URL=f"sqlite:///{tmp_path / 'x.db'}"))

    assert isinstance(app.state.database, Database)
    assert not app.state.database.is_connected


def test_explicit_database_wins() -> None:
    database = Database("sqlite://")
    app = build_app(build_settings(DATABASE_URL="sqlite:///ignored.db"), database=database)

    assert app.state.database is database


def test_session_middleware_is_installed() -> None:
    app = build_app(build_settings())

    assert any(middleware.cls is SessionMiddleware for middleware in app.user_middleware)


def test_lifespan_connects_and_disconnects(tmp_path: Path) -> None:
    app = build_app(build_settings(DATABASE_URL=f"sqlite:///{tmp_path / 'life.db'}"))

    with TestClient(app):
        assert app.state.database.is_connected

    assert not app.state.database.is_connected


def test_lifespan_without_database() -> None:
    app = build_app(build_settings())

    with TestClient(app) as client:
        assert client.get("/health").status_code == 200


# ==============================================================================
# Router Registration
# ==============================================================================


def test_app_has_routes_registered() -> None:
    app = build_app(build_settings())
    paths = {route.path for route in app.routes}  # type: ignore[attr-defined]

    assert {
        "/health",
        "/",
        "/login",
        "/logout",
        "/me",
        "/gas",
        "/electric",
        "/electric/filter",
        "/gas/details/{vehicle_id}",
        "/electric/booknow/{vehicle_id}",
        "/electric/filter/booknow/{vehicle_id}",
        "/admin/staff",
        "/admin/staff/{user_id}",
        "/admin/{kind}",
        "/admin/{kind}/{vehicle_id}",
        "/contact/submit",
        "/send-message",
        "/financing-submit",
    } <= paths


def test_staff_routes_are_matched_before_inventory_routes() -> None:
    app = build_app(build_settings())
    paths = [route.path for route in app.routes]  # type: ignore[attr-defined]

    assert paths.index("/admin/staff") < paths.index("/admin/{kind}")


# ==============================================================================
# OpenAPI and documentation
# ==============================================================================


def test_openapi_schema_documents_endpoints() -> None:
    client = TestClient(build_app(build_settings()))

    response = client.get("/openapi.json")

    assert response.status_code == 200
    schema = response.json()
    assert schema["info"]["title"] == "Autohaus API"
    assert "get" in schema["paths"]["/gas"]
    assert "404" in schema["paths"]["/gas/details/{vehicle_id}"]["get"]["responses"]
    assert "409" in schema["paths"]["/financing-submit"]["post"]["responses"]
    assert "ErrorResponse" in schema["components"]["schemas"]


def test_documentation_endpoints_are_accessible() -> None:
    client = TestClient(build_app(build_settings()))

    assert client.get("/docs").status_code == 200
    assert client.get("/redoc").status_code == 200


def test_app_returns_404_for_unknown_routes() -> None:
    client = TestClient(build_app(build_settings()))

    assert client.get("/nonexistent").status_code == 404


# ==============================================================================
# Application Structure
# ==============================================================================


def test_app_module_exports_app_instance() -> None:
    from autohaus.entrypoints.http import app as app_module

    assert isinstance(app_module.app, FastAPI)
