import logging

from onboarding.config import settings
from onboarding.exceptions import AuthenticationFailed
from onboarding.models.user import User
from onboarding.repositories.user_repository import UserRepository
from onboarding.services.password_service import PasswordHasher

logger = logging.getLogger(__name__)


class Authenticator:
    """Resolves an email/password pair to a stored user."""

    def __init__(
        self,
        users: UserRepository,
        hasher: PasswordHasher,
        require_active: bool = settings.REQUIRE_ACTIVE_LOGIN,
    ):
        self.users = users
        self.hasher = hasher
        self.require_active = require_active

    def authenticate(self, email: str, password: str) -> User:
        user = self.users.find_by_email(email)
        # also matches an unhashed temporary password during recovery
        if not user or not self.hasher.verify_stored(password, user.password):
            logger.info("Authentication failed for %s", email)
            raise AuthenticationFailed("Invalid email or password")
        if self.require_active and not user.is_active:
            logger.info("Authentication refused for unverified account %s", email)
            raise AuthenticationFailed("Account is not verified")
        return user
