from fastapi import APIRouter, Depends, File, Request, Response, UploadFile

from autohaus.domain.staff import StaffUser
from autohaus.domain.vehicle import VehicleKind
from autohaus.entrypoints.http.dependencies import (
    get_create_vehicle_use_case,
    get_delete_vehicle_use_case,
    get_list_vehicles_use_case,
    get_update_vehicle_use_case,
    get_vehicle_for_edit_use_case,
    require_admin,
)
from autohaus.entrypoints.http.dtos.catalog import VehicleListResponseDTO, VehicleResponseDTO
from autohaus.entrypoints.http.dtos.vehicle_form import VehicleFormDTO
from autohaus.entrypoints.http.error_responses import error_response
from autohaus.entrypoints.http.mappers.admin_mapper import AdminMapper
from autohaus.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from autohaus.use_cases.list_vehicles import ListVehicles
from autohaus.use_cases.manage_vehicles import (
    CreateVehicle,
    DeleteVehicle,
    GetVehicleForEdit,
    UpdateVehicle,
)

router = APIRouter(prefix="/admin", tags=["Admin inventory"])

AUTH_RESPONSES = {
    401: error_response("Not signed in"),
    403: error_response("Signed in without admin rights"),
}
NOT_FOUND_RESPONSE = {
    404: error_response("No vehicle of this kind has the id"),
}
FORM_ERROR_RESPONSE = {
    422: error_response(
        "Missing or unparsable fields (all of them are listed)",
        example={
            "detail": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": [
                {"field": "title", "message": "This field is required"},
                {"field": "price", "message": "Must be a positive number"},
            ],
        },
    ),
}

FORM_DESCRIPTION = """
    Multipart form. Numbers accept locale formats: `45.000,50`, `45,000.50`
    and `45000` are all understood. Up to 10 files in the `images` field
    (jpg, jpeg, png, webp, gif, avif).
    """


@router.get(
    "/{kind}",
    response_model=VehicleListResponseDTO,
    summary="List inventory for admins",
    description="""
    Same filters, sorting and pagination as the public listing, but every
    status is included unless `status=available|reserved|sold` is given.
    """,
    responses=AUTH_RESPONSES,
)
def list_inventory(
    kind: VehicleKind,
    request: Request,
    _admin: StaffUser = Depends(require_admin),
    use_case: ListVehicles = Depends(get_list_vehicles_use_case),
) -> VehicleListResponseDTO:
    # 1. Map to domain request
    domain_request = CatalogMapper.to_list_request(
        kind, request.query_params, include_all_statuses=True
    )

    # 2. Execute use case
    result = use_case.execute(domain_request)

    # 3. Map to response
    return CatalogMapper.to_list_response(result)


@router.post(
    "/{kind}",
    response_model=VehicleResponseDTO,
    status_code=201,
    summary="Create a listing",
    description=FORM_DESCRIPTION,
    responses={**AUTH_RESPONSES, **FORM_ERROR_RESPONSE},
)
def create_vehicle(
    kind: VehicleKind,
    form: VehicleFormDTO = Depends(VehicleFormDTO.as_form),
    images: list[UploadFile] | None = File(None),
    _admin: StaffUser = Depends(require_admin),
    use_case: CreateVehicle = Depends(get_create_vehicle_use_case),
) -> VehicleResponseDTO:
    # 1. Map to domain request
    request = AdminMapper.to_create_request(kind, form, images)

    # 2. Execute use case
    vehicle = use_case.execute(request)

    # 3. Map to response
    return CatalogMapper.to_vehicle_response(vehicle)


@router.get(
    "/{kind}/{vehicle_id}",
    response_model=VehicleResponseDTO,
    summary="Load a listing for editing",
    description="Any status; does not count a view.",
    responses={**AUTH_RESPONSES, **NOT_FOUND_RESPONSE},
)
def get_vehicle_for_edit(
    kind: VehicleKind,
    vehicle_id: str,
    _admin: StaffUser = Depends(require_admin),
    use_case: GetVehicleForEdit = Depends(get_vehicle_for_edit_use_case),
) -> VehicleResponseDTO:
    vehicle = use_case.execute(vehicle_id, kind)
    return CatalogMapper.to_vehicle_response(vehicle)


@router.put(
    "/{kind}/{vehicle_id}",
    response_model=VehicleResponseDTO,
    summary="Replace a listing",
    description=FORM_DESCRIPTION
    + """
    All fields are replaced. Images are replaced only when new files are
    uploaded; the view counter is never changed.
    """,
    responses={**AUTH_RESPONSES, **NOT_FOUND_RESPONSE, **FORM_ERROR_RESPONSE},
)
def update_vehicle(
    kind: VehicleKind,
    vehicle_id: str,
    form: VehicleFormDTO = Depends(VehicleFormDTO.as_form),
    images: list[UploadFile] | None = File(None),
    _admin: StaffUser = Depends(require_admin),
    use_case: UpdateVehicle = Depends(get_update_vehicle_use_case),
) -> VehicleResponseDTO:
    # 1. Map to domain request
    request = AdminMapper.to_update_request(vehicle_id, kind, form, images)

    # 2. Execute use case
    vehicle = use_case.execute(request)

    # 3. Map to response
    return CatalogMapper.to_vehicle_response(vehicle)


@router.delete(
    "/{kind}/{vehicle_id}",
    status_code=204,
    summary="Delete a listing",
    responses={**AUTH_RESPONSES, **NOT_FOUND_RESPONSE},
)
def delete_vehicle(
    kind: VehicleKind,
    vehicle_id: str,
    _admin: StaffUser = Depends(require_admin),
    use_case: DeleteVehicle = Depends(get_delete_vehicle_use_case),
) -> Response:
    use_case.execute(vehicle_id, kind)
    return Response(status_code=204)
