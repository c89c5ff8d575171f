from sqlalchemy.orm import Session

from onboarding.models.otp import OtpEntry


class OtpRepository:
    """Key-value store of one-time codes keyed by user id."""

    def __init__(self, db: Session):
        self.db = db

    def put(self, user_id: int, otp: str) -> None:
        # merge overwrites any previous code for the same user
        self.db.merge(OtpEntry(user_id=user_id, otp=otp))
        self.db.commit()

    def get(self, user_id: int) -> str | None:
        return self.db.query(OtpEntry.otp).filter(OtpEntry.user_id == user_id).scalar()

    def remove(self, user_id: int) -> None:
        self.db.query(OtpEntry).filter(OtpEntry.user_id == user_id).delete(
            synchronize_session=False
        )
        self.db.commit()

    def consume(self, user_id: int, otp: str) -> bool:
        """Delete the entry only if it holds ``otp``.

        Compare and delete happen in one statement, so two concurrent
        verifications cannot both succeed. The delete is left uncommitted;
        the caller's next commit makes it permanent.
        """
        deleted = (
            self.db.query(OtpEntry)
            .filter(OtpEntry.user_id == user_id, OtpEntry.otp == otp)
            .delete(synchronize_session=False)
        )
        return deleted == 1

    def rollback(self) -> None:
        """Discard an uncommitted ``consume``."""
        self.db.rollback()
