"""
Fixtures for HTTP tests.

The full application runs against a SQLite file database with the schema
created up front. Outbound e-mail is replaced by a Mock so tests can inspect
what would have been sent.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from autohaus.adapters.postgres_staff_user_repository import PostgresStaffUserRepository
from autohaus.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from autohaus.domain.staff import StaffUser
from autohaus.entrypoints.http.app import build_app
from autohaus.infra.config import Settings
from autohaus.infra.db.models import Base
from autohaus.infra.db.session import Database
from autohaus.ports.email_sender import EmailSender
from autohaus.use_cases.manage_staff import CreateStaffUser, CreateStaffUserRequest

ADMIN_EMAIL = "admin@autohaus.example"
ADMIN_PASSWORD = "admin-password"
STAFF_EMAIL = "sales@autohaus.example"
STAFF_PASSWORD = "sales-password"
RECEIVER_EMAIL = "leads@autohaus.example"


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        APP_ENV="test",
        APP_SECRET="test-secret",
        DATABASE_URL=None,
        SMTP_HOST=None,
        SMTP_USER=None,
        CONTACT_RECEIVER_EMAIL=RECEIVER_EMAIL,
        UPLOAD_DIR=str(tmp_path / "uploads"),
    )


@pytest.fixture()
def database(tmp_path: Path) -> Iterator[Database]:
    db = Database(f"sqlite:///{tmp_path / 'app.db'}")
    db.connect()
    Base.metadata.create_all(db.engine)
    yield db
    db.disconnect()


@pytest.fixture()
def email_sender() -> Mock:
    sender = Mock(spec=EmailSender)
    sender.send.return_value = True
    return sender


@pytest.fixture()
def app(settings: Settings, database: Database, email_sender: Mock) -> FastAPI:
    application = build_app(settings=settings, database=database)
    application.state.email_sender = email_sender
    return application


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture()
def vehicle_repository(database: Database) -> PostgresVehicleRepository:
    return PostgresVehicleRepository(database)


@pytest.fixture()
def staff_repository(database: Database) -> PostgresStaffUserRepository:
    return PostgresStaffUserRepository(database)


@pytest.fixture()
def admin(staff_repository: PostgresStaffUserRepository) -> StaffUser:
    return CreateStaffUser(staff_repository).execute(
        CreateStaffUserRequest(
            name="Site Admin", email=ADMIN_EMAIL, password=ADMIN_PASSWORD, is_admin=True
        )
    )


@pytest.fixture()
def staff_member(staff_repository: PostgresStaffUserRepository) -> StaffUser:
    return CreateStaffUser(staff_repository).execute(
        CreateStaffUserRequest(name="Sam Sales", email=STAFF_EMAIL, password=STAFF_PASSWORD)
    )


@pytest.fixture()
def admin_client(client: TestClient, admin: StaffUser) -> TestClient:
    """A client whose session cookie belongs to the admin account."""
    response = client.post("/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture()
def staff_client(client: TestClient, staff_member: StaffUser) -> TestClient:
    """A client signed in without admin rights."""
    response = client.post("/login", json={"email": STAFF_EMAIL, "password": STAFF_PASSWORD})
    assert response.status_code == 200
    return client
