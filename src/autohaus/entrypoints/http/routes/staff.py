from fastapi import APIRouter, Depends, Response

from autohaus.domain.staff import StaffUser
from autohaus.entrypoints.http.dependencies import (
    get_create_staff_user_use_case,
    get_delete_staff_user_use_case,
    get_list_staff_users_use_case,
    require_admin,
)
from autohaus.entrypoints.http.dtos.auth import CreateStaffUserRequestDTO, StaffUserResponseDTO
from autohaus.entrypoints.http.error_responses import error_response
from autohaus.entrypoints.http.mappers.admin_mapper import AdminMapper
from autohaus.use_cases.manage_staff import CreateStaffUser, DeleteStaffUser, ListStaffUsers

router = APIRouter(prefix="/admin/staff", tags=["Staff"])

AUTH_RESPONSES = {
    401: error_response("Not signed in"),
    403: error_response("Signed in without admin rights"),
}


@router.get(
    "",
    response_model=list[StaffUserResponseDTO],
    summary="List staff accounts",
    responses=AUTH_RESPONSES,
)
def list_staff_users(
    _admin: StaffUser = Depends(require_admin),
    use_case: ListStaffUsers = Depends(get_list_staff_users_use_case),
) -> list[StaffUserResponseDTO]:
    return [AdminMapper.to_staff_response(user) for user in use_case.execute()]


@router.post(
    "",
    response_model=StaffUserResponseDTO,
    status_code=201,
    summary="Create a staff account",
    description="""
    Register a back-office account. E-mails are stored lower-cased and must be
    unique; the password is stored as a salted hash.
    """,
    responses={
        **AUTH_RESPONSES,
        409: error_response("E-mail already registered"),
    },
)
def create_staff_user(
    payload: CreateStaffUserRequestDTO,
    _admin: StaffUser = Depends(require_admin),
    use_case: CreateStaffUser = Depends(get_create_staff_user_use_case),
) -> StaffUserResponseDTO:
    # 1. Map to domain request
    request = AdminMapper.to_create_staff_request(payload)

    # 2. Execute use case
    user = use_case.execute(request)

    # 3. Map to response
    return AdminMapper.to_staff_response(user)


@router.delete(
    "/{user_id}",
    status_code=204,
    summary="Delete a staff account",
    responses={
        **AUTH_RESPONSES,
        404: error_response("Unknown account"),
        409: error_response("Admins cannot delete themselves"),
    },
)
def delete_staff_user(
    user_id: str,
    admin: StaffUser = Depends(require_admin),
    use_case: DeleteStaffUser = Depends(get_delete_staff_user_use_case),
) -> Response:
    use_case.execute(user_id, acting_user=admin)
    return Response(status_code=204)
