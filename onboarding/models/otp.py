from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String

from onboarding.database import Base


class OtpEntry(Base):
    __tablename__ = "otp_entries"

    # One live code per user; no foreign key to users
    user_id = Column(Integer, primary_key=True)
    otp = Column(String(6), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
