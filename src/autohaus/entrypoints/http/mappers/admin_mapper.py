from __future__ import annotations

from fastapi import UploadFile

from autohaus.domain.staff import StaffUser
from autohaus.domain.vehicle import VehicleKind
from autohaus.entrypoints.http.dtos.auth import CreateStaffUserRequestDTO, StaffUserResponseDTO
from autohaus.entrypoints.http.dtos.vehicle_form import VehicleFormDTO
from autohaus.use_cases.manage_staff import CreateStaffUserRequest
from autohaus.use_cases.manage_vehicles import (
    CreateVehicleRequest,
    ImageUpload,
    UpdateVehicleRequest,
)


class AdminMapper:
    """Maps back-office forms and payloads to domain requests."""

    @staticmethod
    def to_image_uploads(files: list[UploadFile] | None) -> list[ImageUpload]:
        """
        Reads uploaded files into memory.

        Browsers submit an empty part when no file was chosen; those are skipped.
        """
        uploads = []
        for upload in files or []:
            if not upload.filename:
                continue
            uploads.append(
                ImageUpload(filename=upload.filename, content=upload.file.read())
            )
        return uploads

    @staticmethod
    def to_create_request(
        kind: VehicleKind, form: VehicleFormDTO, files: list[UploadFile] | None
    ) -> CreateVehicleRequest:
        return CreateVehicleRequest(
            kind=kind,
            fields=form.fields(),
            images=AdminMapper.to_image_uploads(files),
        )

    @staticmethod
    def to_update_request(
        vehicle_id: str,
        kind: VehicleKind,
        form: VehicleFormDTO,
        files: list[UploadFile] | None,
    ) -> UpdateVehicleRequest:
        return UpdateVehicleRequest(
            vehicle_id=vehicle_id,
            kind=kind,
            fields=form.fields(),
            images=AdminMapper.to_image_uploads(files),
        )

    @staticmethod
    def to_create_staff_request(dto: CreateStaffUserRequestDTO) -> CreateStaffUserRequest:
        return CreateStaffUserRequest(
            name=dto.name,
            email=dto.email,
            password=dto.password,
            is_admin=dto.is_admin,
        )

    @staticmethod
    def to_staff_response(user: StaffUser) -> StaffUserResponseDTO:
        # The password hash never leaves the domain
        return StaffUserResponseDTO(
            id=user.id,
            name=user.name,
            email=user.email,
            is_admin=user.is_admin,
            created_at=user.created_at.isoformat(),
        )
