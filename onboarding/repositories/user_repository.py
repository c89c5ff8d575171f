import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from onboarding.exceptions import EmailAlreadyInUse
from onboarding.models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Credential store backed by the ``users`` table."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.user_id == user_id).first()

    def create(self, user: User) -> User:
        """Insert a new user, relying on the unique email index to reject duplicates."""
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Concurrent registration rejected for %s", user.email)
            raise EmailAlreadyInUse(f"Email already in use: {user.email}")
        self.db.refresh(user)
        return user

    def save(self, user: User) -> User:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user
