"""User model definitions."""

import enum

from sqlalchemy import Column, DateTime, Integer, String
from tracker.database import Base, utcnow


class Role(str, enum.Enum):
    """Closed set of roles a user can hold."""
    STUDENT = "student"
    ADMIN = "admin"


class User(Base):
    """Represents an application user."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String)
    role = Column(String, nullable=False, default=Role.STUDENT.value)  # resolved through tracker.auth.policy
    created_at = Column(DateTime, default=utcnow)
