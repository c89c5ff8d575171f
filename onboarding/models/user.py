from datetime import datetime
from enum import Enum

from sqlalchemy import Column, DateTime, Integer, String, Text

from onboarding.database import Base


class Status(str, Enum):
    INACTIVE = "INACTIVE"
    ACTIVE = "ACTIVE"


class Role(str, Enum):
    EMPLOYEE = "EMPLOYEE"
    MANAGER = "MANAGER"
    HR = "HR"
    ADMIN = "ADMIN"


class User(Base):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, index=True)

    # Registration fields
    user_name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # bcrypt digest, or a temporary password
    role = Column(String, nullable=False, default=Role.EMPLOYEE.value)
    phone_number = Column(String, nullable=True)
    description = Column(Text, nullable=True)

    status = Column(String, nullable=False, default=Status.INACTIVE.value)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, nullable=True)

    @property
    def is_active(self) -> bool:
        return self.status == Status.ACTIVE.value
