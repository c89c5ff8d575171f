import logging
import secrets

import bcrypt

from onboarding.config import settings
from onboarding.exceptions import InvalidPassword

logger = logging.getLogger(__name__)

BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")
# bcrypt only reads the first 72 bytes; newer releases refuse longer input
MAX_PASSWORD_BYTES = 72


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


class PasswordHasher:
    """Bcrypt password hashing utility."""

    def __init__(self, rounds: int = settings.BCRYPT_ROUNDS) -> None:
        self.rounds = rounds

    def hash(self, password: str) -> str:
        if password_too_long(password):
            raise InvalidPassword(f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes.")
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def matches(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError as exc:
            logger.error("Password verification failed: %s", exc)
            return False

    @staticmethod
    def is_hashed(value: str | None) -> bool:
        return bool(value) and value.startswith(BCRYPT_PREFIXES)

    def verify_stored(self, password: str, stored: str | None) -> bool:
        """Check ``password`` against a stored credential.

        Stored values are bcrypt digests except while a user holds an
        unhashed temporary password, which is compared in constant time.
        """
        if not stored:
            return False
        if self.is_hashed(stored):
            return self.matches(password, stored)
        return secrets.compare_digest(password.encode("utf-8"), stored.encode("utf-8"))
