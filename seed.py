import logging
from datetime import datetime

from onboarding.config import settings
from onboarding.database import SessionLocal
from onboarding.models.user import Role, Status, User
from onboarding.services.password_service import PasswordHasher

logger = logging.getLogger(__name__)


def run_seed():
    """Create an active admin when the database has no users yet."""
    email = settings.SEED_ADMIN_EMAIL
    password = settings.SEED_ADMIN_PASSWORD
    if not email or not password:
        logger.info("SEED_ADMIN_EMAIL/SEED_ADMIN_PASSWORD not set, skipping seeding.")
        return

    db = SessionLocal()
    try:
        if db.query(User).count() == 0:
            admin_user = User(
                user_name=settings.SEED_ADMIN_NAME,
                email=email,
                password=PasswordHasher().hash(password),
                role=Role.ADMIN.value,
                status=Status.ACTIVE.value,
                created_at=datetime.utcnow(),
            )
            db.add(admin_user)
            db.commit()
            logger.info("Default admin user %s seeded", email)
        else:
            logger.info("Users already present, skipping seeding.")
    finally:
        db.close()


if __name__ == "__main__":
    run_seed()
