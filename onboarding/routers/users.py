from fastapi import APIRouter, Depends, status

from onboarding.models.user import User
from onboarding.schemas.user import (
    ChangePasswordRequest,
    ForgotPasswordRequest,
    LoginRequest,
    UserRequest,
    UserResponse,
    VerifyOtpRequest,
)
from onboarding.services.auth_middleware import get_current_user
from onboarding.services.user_service import UserService, get_user_service
from onboarding.utils.response import create_response, handle_exception

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post("/register")
def register(body: UserRequest, service: UserService = Depends(get_user_service)):
    try:
        user = service.register_new_user(body)
        return create_response(
            message="User registered successfully. Check your email for the OTP.",
            data=UserResponse.model_validate(user).model_dump(),
            status_code=status.HTTP_201_CREATED,
        )
    except Exception as exc:
        return handle_exception(exc)


@router.post("/verify-otp")
def verify_otp(body: VerifyOtpRequest, service: UserService = Depends(get_user_service)):
    try:
        service.verify_otp(body.user_id, body.otp)
        return create_response(
            message="OTP verified successfully",
            data={"user_id": body.user_id, "verified": True},
            status_code=status.HTTP_200_OK,
        )
    except Exception as exc:
        return handle_exception(exc)


@router.post("/login")
def login(body: LoginRequest, service: UserService = Depends(get_user_service)):
    try:
        result = service.login(body)
        return create_response(
            message=result.message,
            data=result.model_dump(),
            status_code=status.HTTP_200_OK,
        )
    except Exception as exc:
        return handle_exception(exc)


@router.post("/generate-token")
def generate_token(body: LoginRequest, service: UserService = Depends(get_user_service)):
    try:
        result = service.generate_token(body)
        return create_response(
            message="Token generated successfully",
            data=result.model_dump(),
            status_code=status.HTTP_200_OK,
        )
    except Exception as exc:
        return handle_exception(exc)


@router.post("/forgot-password")
def forgot_password(body: ForgotPasswordRequest, service: UserService = Depends(get_user_service)):
    try:
        service.send_password_by_email(body.email)
        return create_response(
            message="Temporary password sent to your email",
            data={"email": body.email},
            status_code=status.HTTP_200_OK,
        )
    except Exception as exc:
        return handle_exception(exc)


@router.post("/change-password")
def change_password(body: ChangePasswordRequest, service: UserService = Depends(get_user_service)):
    try:
        service.change_password(body)
        return create_response(
            message="Password changed successfully",
            data={"email": body.email},
            status_code=status.HTTP_200_OK,
        )
    except Exception as exc:
        return handle_exception(exc)


@router.get("/me")
def get_me(current_user: User = Depends(get_current_user)):
    try:
        return create_response(
            message="Profile fetched successfully",
            data=UserResponse.model_validate(current_user).model_dump(),
            status_code=status.HTTP_200_OK,
        )
    except Exception as exc:
        return handle_exception(exc)
