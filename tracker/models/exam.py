"""Exam model definitions."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from tracker.database import Base, utcnow


class Exam(Base):
    """Represents a scheduled exam for a subject."""
    __tablename__ = "exams"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False, index=True)
    date = Column(DateTime, nullable=False, index=True)
    location = Column(String)
    duration_minutes = Column(Integer)
    notes = Column(String)
    created_at = Column(DateTime, default=utcnow)

    subject = relationship("Subject", lazy="joined")
