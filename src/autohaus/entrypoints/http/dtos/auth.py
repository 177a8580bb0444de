from pydantic import BaseModel, ConfigDict, Field


class LoginRequestDTO(BaseModel):
    email: str = Field(min_length=3, max_length=254, examples=["admin@autohaus.example"])
    password: str = Field(min_length=1, max_length=128)

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "admin@autohaus.example", "password": "s3cret!"}}
    )


class StaffUserResponseDTO(BaseModel):
    id: str
    name: str
    email: str
    is_admin: bool
    created_at: str


class CreateStaffUserRequestDTO(BaseModel):
    name: str = Field(min_length=2, max_length=100, examples=["Jane Doe"])
    email: str = Field(
        max_length=254,
        pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
        examples=["jane@autohaus.example"],
    )
    password: str = Field(min_length=8, max_length=128)
    is_admin: bool = False


class MessageResponseDTO(BaseModel):
    message: str
