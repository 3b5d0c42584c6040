"""Assignment model definitions."""

import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from tracker.database import Base, utcnow


def _enum_values(members) -> list[str]:
    return [member.value for member in members]


class AssignmentStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class AssignmentPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Assignment(Base):
    """Represents a piece of coursework owned by the user who created it."""
    __tablename__ = "assignments"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(String)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False, index=True)
    created_by_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    due_date = Column(DateTime, nullable=False, index=True)
    status = Column(
        Enum(AssignmentStatus, native_enum=False, values_callable=_enum_values),
        nullable=False,
        default=AssignmentStatus.PENDING,
    )
    priority = Column(
        Enum(AssignmentPriority, native_enum=False, values_callable=_enum_values),
        nullable=False,
        default=AssignmentPriority.MEDIUM,
    )
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    subject = relationship("Subject", lazy="joined")
    created_by = relationship("User", lazy="joined")
