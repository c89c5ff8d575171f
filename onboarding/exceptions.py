from fastapi import status


class OnboardingError(Exception):
    """Base error for the onboarding workflow, carries the HTTP status to report."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmailAlreadyInUse(OnboardingError):
    status_code = status.HTTP_409_CONFLICT


class InvalidOtp(OnboardingError):
    status_code = status.HTTP_400_BAD_REQUEST


class UserNotFound(OnboardingError):
    status_code = status.HTTP_404_NOT_FOUND


class InvalidPassword(OnboardingError):
    status_code = status.HTTP_400_BAD_REQUEST


class PasswordMismatch(InvalidPassword):
    """New password and its confirmation differ."""


class AuthenticationFailed(OnboardingError):
    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidToken(OnboardingError):
    status_code = status.HTTP_401_UNAUTHORIZED
