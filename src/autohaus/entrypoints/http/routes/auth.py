from fastapi import APIRouter, Depends, Request

from autohaus.domain.staff import StaffUser
from autohaus.entrypoints.http.dependencies import (
    SESSION_USER_KEY,
    get_authenticate_staff_use_case,
    require_user,
)
from autohaus.entrypoints.http.dtos.auth import (
    LoginRequestDTO,
    MessageResponseDTO,
    StaffUserResponseDTO,
)
from autohaus.entrypoints.http.error_responses import error_response
from autohaus.entrypoints.http.mappers.admin_mapper import AdminMapper
from autohaus.use_cases.manage_staff import AuthenticateStaff, AuthenticateStaffRequest

router = APIRouter(tags=["Auth"])


@router.post(
    "/login",
    response_model=StaffUserResponseDTO,
    summary="Sign in",
    description="""
    Checks the credentials and stores the account id in the signed session
    cookie. Unknown e-mails and wrong passwords get the same 401 answer.
    """,
    responses={401: error_response("Invalid email or password")},
)
def login(
    payload: LoginRequestDTO,
    request: Request,
    use_case: AuthenticateStaff = Depends(get_authenticate_staff_use_case),
) -> StaffUserResponseDTO:
    user = use_case.execute(AuthenticateStaffRequest(email=payload.email, password=payload.password))
    request.session.clear()
    request.session[SESSION_USER_KEY] = user.id
    return AdminMapper.to_staff_response(user)


@router.post("/logout", response_model=MessageResponseDTO, summary="Sign out")
def logout(request: Request) -> MessageResponseDTO:
    request.session.clear()
    return MessageResponseDTO(message="Signed out")


@router.get(
    "/me",
    response_model=StaffUserResponseDTO,
    summary="Current staff account",
    responses={401: error_response("Not signed in")},
)
def current_user(user: StaffUser = Depends(require_user)) -> StaffUserResponseDTO:
    return AdminMapper.to_staff_response(user)
