"""
Unit tests for FastAPI dependency injection functions.

This test suite verifies the dependency wiring logic:
- Process-wide resources are read from app.state
- Repositories and use cases are built fresh per call on top of them
- Session-based authentication guards

Tests use a bare Starlette Request and mocks; no server is started.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import Mock

import pytest
from fastapi import FastAPI, Request

from autohaus.adapters.postgres_financing_application_repository import (
    PostgresFinancingApplicationRepository,
)
from autohaus.adapters.postgres_staff_user_repository import PostgresStaffUserRepository
from autohaus.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from autohaus.domain.errors import ForbiddenError, UnauthorizedError
from autohaus.domain.staff import StaffUser
from autohaus.entrypoints.http.dependencies import (
    SESSION_USER_KEY,
    get_current_user,
    get_database,
    get_financing_application_repository,
    get_list_vehicles_use_case,
    get_staff_user_repository,
    get_submit_contact_request_use_case,
    get_vehicle_detail_use_case,
    get_vehicle_repository,
    require_admin,
    require_user,
)
from autohaus.infra.config import Settings
from autohaus.infra.db.session import Database
from autohaus.ports.email_sender import EmailSender
from autohaus.ports.staff_user_repository import StaffUserRepository
from autohaus.ports.vehicle_repository import VehicleRepository
from autohaus.use_cases.get_vehicle_detail import GetVehicleDetail
from autohaus.use_cases.list_vehicles import ListVehicles
from autohaus.use_cases.submit_contact_request import SubmitContactRequest

USER = StaffUser(
    id="00000000-0000-0000-0000-000000000007",
    name="Sam Sales",
    email="sam@autohaus.example",
    password_hash="hash",
)


def build_request(app: FastAPI | None = None, session: dict[str, Any] | None = None) -> Request:
    scope: dict[str, Any] = {"type": "http", "headers": []}
    if app is not None:
        scope["app"] = app
    if session is not None:
        scope["session"] = session
    return Request(scope)


# ==============================================================================
# Process-wide resources
# ==============================================================================


def test_get_database_returns_shared_instance() -> None:
    app = FastAPI()
    app.state.database = Database("sqlite://")

    assert get_database(build_request(app)) is app.state.database


def test_get_database_without_configuration() -> None:
    app = FastAPI()
    app.state.database = None

    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        get_database(build_request(app))


# ==============================================================================
# Repositories
# ==============================================================================


def test_repositories_share_the_database() -> None:
    database = Database("sqlite://")

    assert isinstance(get_vehicle_repository(database), PostgresVehicleRepository)
    assert isinstance(get_staff_user_repository(database), PostgresStaffUserRepository)
    assert isinstance(
        get_financing_application_repository(database), PostgresFinancingApplicationRepository
    )


def test_repositories_are_not_cached() -> None:
    database = Database("sqlite://")

    assert get_vehicle_repository(database) is not get_vehicle_repository(database)


# ==============================================================================
# Use case factories
# ==============================================================================


def test_list_vehicles_use_case_is_fresh_each_call() -> None:
    repository = Mock(spec=VehicleRepository)

    first = get_list_vehicles_use_case(repository)
    second = get_list_vehicles_use_case(repository)

    assert isinstance(first, ListVehicles)
    assert first is not second


def test_vehicle_detail_use_case_uses_site_settings() -> None:
    settings = Settings(SITE_NAME="Autohaus Dallas", CURRENCY="EUR")

    use_case = get_vehicle_detail_use_case(Mock(spec=VehicleRepository), settings)

    assert isinstance(use_case, GetVehicleDetail)
    assert use_case._site_name == "Autohaus Dallas"
    assert use_case._currency == "EUR"


def test_contact_use_case_uses_receiver_from_settings() -> None:
    settings = Settings(CONTACT_RECEIVER_EMAIL=None, SMTP_USER="mailer@autohaus.example")

    use_case = get_submit_contact_request_use_case(Mock(spec=EmailSender), settings)

    assert isinstance(use_case, SubmitContactRequest)
    assert use_case._receiver == "mailer@autohaus.example"


# ==============================================================================
# Authentication
# ==============================================================================


def test_current_user_without_session() -> None:
    repository = Mock(spec=StaffUserRepository)

    assert get_current_user(build_request(session={}), repository) is None
    repository.get_by_id.assert_not_called()


def test_current_user_from_session() -> None:
    repository = Mock(spec=StaffUserRepository)
    repository.get_by_id.return_value = USER

    user = get_current_user(build_request(session={SESSION_USER_KEY: USER.id}), repository)

    assert user == USER
    repository.get_by_id.assert_called_once_with(USER.id)


def test_session_of_deleted_user_is_cleared() -> None:
    repository = Mock(spec=StaffUserRepository)
    repository.get_by_id.return_value = None
    session = {SESSION_USER_KEY: USER.id}

    assert get_current_user(build_request(session=session), repository) is None
    assert session == {}


def test_require_user() -> None:
    assert require_user(USER) is USER
    with pytest.raises(UnauthorizedError):
        require_user(None)


def test_require_admin() -> None:
    admin = StaffUser(id=USER.id, name="Admin", email="a@b.co", password_hash="h", is_admin=True)

    assert require_admin(admin) is admin
    with pytest.raises(ForbiddenError):
        require_admin(USER)
