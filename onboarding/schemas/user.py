from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from onboarding.models.user import Role, Status
from onboarding.services.password_service import MAX_PASSWORD_BYTES, password_too_long


def _check_password_length(value: str) -> str:
    if password_too_long(value):
        raise ValueError(f"password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
    return value


class UserRequest(BaseModel):
    user_name: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    email: EmailStr
    role: Role = Role.EMPLOYEE
    phone_number: str | None = None
    description: str | None = None

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return _check_password_length(value)


class VerifyOtpRequest(BaseModel):
    user_id: int
    otp: str


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class LoginResponse(BaseModel):
    token: str
    message: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class ForgotPasswordRequest(BaseModel):
    email: EmailStr


class ChangePasswordRequest(BaseModel):
    email: EmailStr
    current_password: str
    new_password: str = Field(..., min_length=1)
    confirm_password: str

    @field_validator("new_password")
    @classmethod
    def validate_new_password(cls, value: str) -> str:
        return _check_password_length(value)


class UserResponse(BaseModel):
    """Externally visible user record; never carries the password."""

    user_id: int
    user_name: str
    email: EmailStr
    role: Role
    phone_number: str | None
    description: str | None
    status: Status
    created_at: datetime
    updated_at: datetime | None

    model_config = {"from_attributes": True}
