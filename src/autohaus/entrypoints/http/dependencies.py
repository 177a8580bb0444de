"""
Dependency injection for FastAPI routes.

Key principle: process-wide resources (Database, e-mail sender, file storage,
settings) live on ``app.state`` and are built once by ``build_app``.
Repositories and use cases are cheap and built per request on top of them.
"""

from __future__ import annotations

from fastapi import Depends, Request

from autohaus.adapters.postgres_financing_application_repository import (
    PostgresFinancingApplicationRepository,
)
from autohaus.adapters.postgres_staff_user_repository import PostgresStaffUserRepository
from autohaus.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from autohaus.domain.errors import ForbiddenError, UnauthorizedError
from autohaus.domain.staff import StaffUser
from autohaus.infra.config import Settings
from autohaus.infra.db.session import Database
from autohaus.ports.email_sender import EmailSender
from autohaus.ports.file_storage import FileStorage
from autohaus.ports.financing_application_repository import FinancingApplicationRepository
from autohaus.ports.staff_user_repository import StaffUserRepository
from autohaus.ports.vehicle_repository import VehicleRepository
from autohaus.use_cases.get_home_showcase import GetHomeShowcase
from autohaus.use_cases.get_vehicle_detail import GetVehicleDetail
from autohaus.use_cases.list_vehicles import ListVehicles
from autohaus.use_cases.manage_staff import (
    AuthenticateStaff,
    CreateStaffUser,
    DeleteStaffUser,
    ListStaffUsers,
)
from autohaus.use_cases.manage_vehicles import (
    CreateVehicle,
    DeleteVehicle,
    GetVehicleForEdit,
    UpdateVehicle,
)
from autohaus.use_cases.submit_contact_request import SendQuickMessage, SubmitContactRequest
from autohaus.use_cases.submit_financing_application import SubmitFinancingApplication

SESSION_USER_KEY = "user_id"


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    """
    The process-wide Database opened by the app lifespan.

    Raises:
        RuntimeError: If no DATABASE_URL was configured
    """
    database: Database | None = request.app.state.database
    if database is None:
        raise RuntimeError("DATABASE_URL environment variable is not set")
    return database


def get_email_sender(request: Request) -> EmailSender:
    return request.app.state.email_sender


def get_file_storage(request: Request) -> FileStorage:
    return request.app.state.file_storage


# ----------------------------------------------------------------------
# Repositories
# ----------------------------------------------------------------------


def get_vehicle_repository(database: Database = Depends(get_database)) -> VehicleRepository:
    return PostgresVehicleRepository(database)


def get_staff_user_repository(database: Database = Depends(get_database)) -> StaffUserRepository:
    return PostgresStaffUserRepository(database)


def get_financing_application_repository(
    database: Database = Depends(get_database),
) -> FinancingApplicationRepository:
    return PostgresFinancingApplicationRepository(database)


# ----------------------------------------------------------------------
# Authentication
# ----------------------------------------------------------------------


def get_current_user(
    request: Request,
    repository: StaffUserRepository = Depends(get_staff_user_repository),
) -> StaffUser | None:
    """
    The signed-in staff user, read from the signed session cookie.

    A session pointing at a deleted account is cleared.
    """
    user_id = request.session.get(SESSION_USER_KEY)
    if not user_id:
        return None
    user = repository.get_by_id(str(user_id))
    if user is None:
        request.session.pop(SESSION_USER_KEY, None)
    return user


def require_user(user: StaffUser | None = Depends(get_current_user)) -> StaffUser:
    if user is None:
        raise UnauthorizedError()
    return user


def require_admin(user: StaffUser = Depends(require_user)) -> StaffUser:
    if not user.is_admin:
        raise ForbiddenError()
    return user


# ----------------------------------------------------------------------
# Use cases
# ----------------------------------------------------------------------


def get_list_vehicles_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> ListVehicles:
    """
    Factory function that returns a configured ListVehicles use case.

    Args:
        repository: Vehicle repository (injected by FastAPI)

    Returns:
        ListVehicles: Use case sharing the repository with its facet aggregator
    """
    return ListVehicles(vehicle_repository=repository)


def get_vehicle_detail_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
    settings: Settings = Depends(get_settings),
) -> GetVehicleDetail:
    return GetVehicleDetail(
        vehicle_repository=repository,
        site_name=settings.SITE_NAME,
        currency=settings.CURRENCY,
    )


def get_home_showcase_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> GetHomeShowcase:
    return GetHomeShowcase(vehicle_repository=repository)


def get_create_vehicle_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
    storage: FileStorage = Depends(get_file_storage),
) -> CreateVehicle:
    return CreateVehicle(vehicle_repository=repository, file_storage=storage)


def get_update_vehicle_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
    storage: FileStorage = Depends(get_file_storage),
) -> UpdateVehicle:
    return UpdateVehicle(vehicle_repository=repository, file_storage=storage)


def get_vehicle_for_edit_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> GetVehicleForEdit:
    return GetVehicleForEdit(vehicle_repository=repository)


def get_delete_vehicle_use_case(
    repository: VehicleRepository = Depends(get_vehicle_repository),
) -> DeleteVehicle:
    return DeleteVehicle(vehicle_repository=repository)


def get_authenticate_staff_use_case(
    repository: StaffUserRepository = Depends(get_staff_user_repository),
) -> AuthenticateStaff:
    return AuthenticateStaff(staff_user_repository=repository)


def get_create_staff_user_use_case(
    repository: StaffUserRepository = Depends(get_staff_user_repository),
) -> CreateStaffUser:
    return CreateStaffUser(staff_user_repository=repository)


def get_list_staff_users_use_case(
    repository: StaffUserRepository = Depends(get_staff_user_repository),
) -> ListStaffUsers:
    return ListStaffUsers(staff_user_repository=repository)


def get_delete_staff_user_use_case(
    repository: StaffUserRepository = Depends(get_staff_user_repository),
) -> DeleteStaffUser:
    return DeleteStaffUser(staff_user_repository=repository)


def get_submit_contact_request_use_case(
    sender: EmailSender = Depends(get_email_sender),
    settings: Settings = Depends(get_settings),
) -> SubmitContactRequest:
    return SubmitContactRequest(email_sender=sender, receiver_email=settings.receiver_email)


def get_send_quick_message_use_case(
    sender: EmailSender = Depends(get_email_sender),
    settings: Settings = Depends(get_settings),
) -> SendQuickMessage:
    return SendQuickMessage(email_sender=sender, receiver_email=settings.receiver_email)


def get_submit_financing_application_use_case(
    repository: FinancingApplicationRepository = Depends(get_financing_application_repository),
    sender: EmailSender = Depends(get_email_sender),
    settings: Settings = Depends(get_settings),
) -> SubmitFinancingApplication:
    return SubmitFinancingApplication(
        financing_application_repository=repository,
        email_sender=sender,
        receiver_email=settings.receiver_email,
    )
