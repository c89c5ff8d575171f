import logging
import secrets
import uuid
from datetime import datetime

from fastapi import Depends
from sqlalchemy.orm import Session

from onboarding.config import settings
from onboarding.database import get_db
from onboarding.exceptions import (
    EmailAlreadyInUse,
    InvalidOtp,
    InvalidPassword,
    PasswordMismatch,
    UserNotFound,
)
from onboarding.models.user import Status, User
from onboarding.repositories.otp_repository import OtpRepository
from onboarding.repositories.user_repository import UserRepository
from onboarding.schemas.user import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    TokenResponse,
    UserRequest,
)
from onboarding.services.auth_service import Authenticator
from onboarding.services.email_service import EmailService, get_notification_sender
from onboarding.services.password_service import PasswordHasher
from onboarding.services.token_service import TokenService

logger = logging.getLogger(__name__)

OTP_MIN = 100000
OTP_MAX = 999999
TEMPORARY_PASSWORD_LENGTH = 8
LOGIN_SUCCESS_MESSAGE = "Login Successful !"


def generate_otp() -> str:
    """Return a uniformly random 6-digit code in [100000, 999999]."""
    return str(OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1))


def generate_temporary_password() -> str:
    return uuid.uuid4().hex[:TEMPORARY_PASSWORD_LENGTH]


class UserService:
    """Registration, OTP verification, login and password recovery."""

    def __init__(
        self,
        users: UserRepository,
        otps: OtpRepository,
        notifier: EmailService,
        hasher: PasswordHasher,
        tokens: TokenService,
        authenticator: Authenticator,
        hash_temporary_passwords: bool = settings.HASH_TEMPORARY_PASSWORDS,
    ):
        self.users = users
        self.otps = otps
        self.notifier = notifier
        self.hasher = hasher
        self.tokens = tokens
        self.authenticator = authenticator
        self.hash_temporary_passwords = hash_temporary_passwords

    def register_new_user(self, request: UserRequest) -> User:
        if self.users.find_by_email(request.email):
            raise EmailAlreadyInUse(f"Email already in use: {request.email}")

        user = User(
            user_name=request.user_name,
            password=self.hasher.hash(request.password),
            email=request.email,
            role=request.role.value,
            phone_number=request.phone_number,
            description=request.description,
            status=Status.INACTIVE.value,
            created_at=datetime.utcnow(),
        )
        saved = self.users.create(user)

        otp = generate_otp()
        self.otps.put(saved.user_id, otp)
        self.notifier.send(
            saved.email,
            "OTP Verification",
            f"Your OTP is: {otp} and user id is: {saved.user_id}",
        )
        logger.info("Registered user %s (%s), awaiting OTP verification", saved.user_id, saved.email)
        return saved

    def verify_otp(self, user_id: int, otp: str) -> None:
        if not self.otps.consume(user_id, otp):
            logger.info("Invalid OTP submitted for user %s", user_id)
            raise InvalidOtp("Invalid OTP provided.")

        user = self.users.find_by_id(user_id)
        if not user:
            self.otps.rollback()
            raise UserNotFound(f"User not found with ID: {user_id}")

        user.status = Status.ACTIVE.value
        user.updated_at = datetime.utcnow()
        self.users.save(user)
        logger.info("User %s verified and activated", user_id)

    def login(self, request: LoginRequest) -> LoginResponse:
        user = self.authenticator.authenticate(request.email, request.password)
        token = self.tokens.issue(user.email)
        return LoginResponse(token=token, message=LOGIN_SUCCESS_MESSAGE)

    def generate_token(self, request: LoginRequest) -> TokenResponse:
        user = self.authenticator.authenticate(request.email, request.password)
        return TokenResponse(access_token=self.tokens.issue(user.email))

    def send_password_by_email(self, email: str) -> None:
        user = self.users.find_by_email(email)
        if not user:
            raise UserNotFound("No user found with the provided email.")

        temporary_password = generate_temporary_password()
        if self.hash_temporary_passwords:
            user.password = self.hasher.hash(temporary_password)
        else:
            user.password = temporary_password
        user.updated_at = datetime.utcnow()
        self.users.save(user)

        self.notifier.send(
            user.email,
            "Temporary Password",
            f"Your temporary password is: {temporary_password}",
        )
        logger.info("Temporary password issued for user %s", user.user_id)

    def change_password(self, request: ChangePasswordRequest) -> None:
        if request.new_password != request.confirm_password:
            raise PasswordMismatch("New password and confirm password do not match.")

        user = self.users.find_by_email(request.email)
        if not user:
            raise UserNotFound("User not found")

        if not self.hasher.verify_stored(request.current_password, user.password):
            raise InvalidPassword("Current password is incorrect.")

        user.password = self.hasher.hash(request.new_password)
        user.updated_at = datetime.utcnow()
        self.users.save(user)
        logger.info("Password changed for user %s", user.user_id)


def build_user_service(db: Session, notifier: EmailService) -> UserService:
    users = UserRepository(db)
    hasher = PasswordHasher()
    return UserService(
        users=users,
        otps=OtpRepository(db),
        notifier=notifier,
        hasher=hasher,
        tokens=TokenService(),
        authenticator=Authenticator(users, hasher),
    )


def get_user_service(
    db: Session = Depends(get_db),
    notifier: EmailService = Depends(get_notification_sender),
) -> UserService:
    return build_user_service(db, notifier)
