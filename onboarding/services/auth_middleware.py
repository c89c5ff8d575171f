import logging

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials, HTTPBearer
from sqlalchemy.orm import Session

from onboarding.config import settings
from onboarding.database import get_db
from onboarding.exceptions import AuthenticationFailed, InvalidToken
from onboarding.models.user import User
from onboarding.repositories.user_repository import UserRepository
from onboarding.services.auth_service import Authenticator
from onboarding.services.password_service import PasswordHasher
from onboarding.services.token_service import TokenService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)
basic_scheme = HTTPBasic(auto_error=False)

PUBLIC_PATHS = frozenset(
    {
        "/",
        "/api/users/register",
        "/api/users/verify-otp",
        "/api/users/login",
        "/api/users/generate-token",
    }
)


def is_public_path(path: str) -> bool:
    normalized = path.rstrip("/") or "/"
    return normalized in PUBLIC_PATHS


def _unauthorized(detail: str) -> HTTPException:
    challenges = []
    if "bearer" in settings.AUTH_SCHEMES:
        challenges.append("Bearer")
    if "basic" in settings.AUTH_SCHEMES:
        challenges.append('Basic realm="onboarding"')
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": ", ".join(challenges) or "Bearer"},
    )


def _principal_from_bearer(token: str, db: Session) -> User:
    try:
        payload = TokenService().decode(token)
    except InvalidToken as exc:
        raise _unauthorized(exc.message)

    user = UserRepository(db).find_by_email(payload["sub"])
    if not user:
        raise _unauthorized("User not found for token")
    return user


def _principal_from_basic(credentials: HTTPBasicCredentials, db: Session) -> User:
    users = UserRepository(db)
    authenticator = Authenticator(users, PasswordHasher())
    try:
        return authenticator.authenticate(credentials.username, credentials.password)
    except AuthenticationFailed as exc:
        raise _unauthorized(exc.message)


async def access_gate(request: Request, db: Session = Depends(get_db)):
    """Authenticate every request outside the allow-list.

    Installed as an application-wide dependency. Credentials are read only
    after the allow-list check, so public routes ignore the Authorization
    header entirely. Nothing is kept between requests; the resolved user is
    attached to ``request.state.principal``.
    """
    if is_public_path(request.url.path):
        return None

    try:
        bearer = await bearer_scheme(request)
        basic = await basic_scheme(request)
    except HTTPException:
        raise _unauthorized("Malformed credentials")

    if bearer and "bearer" in settings.AUTH_SCHEMES:
        principal = _principal_from_bearer(bearer.credentials, db)
    elif basic and "basic" in settings.AUTH_SCHEMES:
        principal = _principal_from_basic(basic, db)
    else:
        logger.info("Rejected unauthenticated request to %s", request.url.path)
        raise _unauthorized("Authentication required")

    request.state.principal = principal
    return principal


def get_current_user(request: Request) -> User:
    principal = getattr(request.state, "principal", None)
    if principal is None:
        raise _unauthorized("Authentication required")
    return principal
