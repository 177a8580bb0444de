"""Back-office accounts: sign-in and admin management of staff users."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from autohaus.domain.errors import ConflictError, NotFoundError, UnauthorizedError
from autohaus.domain.staff import StaffUser, normalize_email
from autohaus.ports.staff_user_repository import StaffUserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AuthenticateStaffRequest:
    email: str
    password: str


class AuthenticateStaff:
    """Checks e-mail and password; the caller stores the user id in the session."""

    def __init__(self, staff_user_repository: StaffUserRepository) -> None:
        self._repository = staff_user_repository

    def execute(self, request: AuthenticateStaffRequest) -> StaffUser:
        """
        Raises:
            UnauthorizedError: Same message for unknown e-mail and wrong password
        """
        user = self._repository.get_by_email(normalize_email(request.email))
        if user is None or not check_password_hash(user.password_hash, request.password):
            logger.info("Failed sign-in attempt", extra={"email": normalize_email(request.email)})
            raise UnauthorizedError("Invalid email or password")
        return user


@dataclass(frozen=True, slots=True)
class CreateStaffUserRequest:
    name: str
    email: str
    password: str
    is_admin: bool = False


class CreateStaffUser:
    def __init__(self, staff_user_repository: StaffUserRepository) -> None:
        self._repository = staff_user_repository

    def execute(self, request: CreateStaffUserRequest) -> StaffUser:
        """
        Register an account with a hashed password.

        Raises:
            ConflictError: If the e-mail is already registered
        """
        email = normalize_email(request.email)
        if self._repository.get_by_email(email) is not None:
            raise ConflictError("A staff account with this email already exists", email=email)

        user = StaffUser(
            id=str(uuid.uuid4()),
            name=request.name.strip(),
            email=email,
            password_hash=generate_password_hash(request.password),
            is_admin=request.is_admin,
        )
        self._repository.add(user)
        logger.info("Staff user created", extra={"user_id": user.id, "is_admin": user.is_admin})
        return user


class ListStaffUsers:
    def __init__(self, staff_user_repository: StaffUserRepository) -> None:
        self._repository = staff_user_repository

    def execute(self) -> list[StaffUser]:
        return self._repository.list_all()


class DeleteStaffUser:
    def __init__(self, staff_user_repository: StaffUserRepository) -> None:
        self._repository = staff_user_repository

    def execute(self, user_id: str, acting_user: StaffUser) -> None:
        """
        Remove an account.

        Raises:
            ConflictError: If admins try to delete themselves
            NotFoundError: If the account does not exist
        """
        if user_id == acting_user.id:
            raise ConflictError("You cannot delete your own account")
        if self._repository.get_by_id(user_id) is None or not self._repository.delete(user_id):
            raise NotFoundError(resource="StaffUser", identifier=user_id)
        logger.info("Staff user deleted", extra={"user_id": user_id, "by": acting_user.id})
