"""Subject model definitions."""

from sqlalchemy import Column, DateTime, Integer, String
from tracker.database import Base, utcnow


class Subject(Base):
    """Represents a course subject shared by every user."""
    __tablename__ = "subjects"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    code = Column(String, unique=True, index=True, nullable=False)
    color = Column(String, nullable=False, default="#3b82f6")
    description = Column(String)
    created_at = Column(DateTime, default=utcnow, index=True)
