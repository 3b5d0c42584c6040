from datetime import datetime

from pydantic import Field, field_validator

from tracker.models.assignment import AssignmentPriority, AssignmentStatus
from tracker.schemas.common import (
    SubjectSummary,
    TrackerModel,
    UserSummary,
    normalize_datetime,
    normalize_text,
    require_text,
)

MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 2000


class AssignmentCreate(TrackerModel):
    """Fields a client may set on an assignment; the owner is never one of them."""

    title: str
    description: str | None = None
    subject: int = Field(gt=0)
    due_date: datetime
    status: AssignmentStatus = AssignmentStatus.PENDING
    priority: AssignmentPriority = AssignmentPriority.MEDIUM

    @field_validator('title')
    @classmethod
    def validate_title(cls, value: str) -> str:
        normalized = require_text(value, 'Title')
        if len(normalized) > MAX_TITLE_LENGTH:
            raise ValueError(f'Title must be {MAX_TITLE_LENGTH} characters or fewer.')
        return normalized

    @field_validator('description')
    @classmethod
    def validate_description(cls, value: str | None) -> str | None:
        normalized = normalize_text(value)
        if normalized and len(normalized) > MAX_DESCRIPTION_LENGTH:
            raise ValueError(f'Description must be {MAX_DESCRIPTION_LENGTH} characters or fewer.')
        return normalized

    @field_validator('due_date')
    @classmethod
    def validate_due_date(cls, value: datetime) -> datetime:
        return normalize_datetime(value)


class AssignmentUpdate(TrackerModel):
    title: str | None = None
    description: str | None = None
    subject: int | None = None
    due_date: datetime | None = None
    status: AssignmentStatus | None = None
    priority: AssignmentPriority | None = None


class AssignmentResponse(TrackerModel):
    id: int
    title: str
    description: str | None = None
    subject: SubjectSummary | None = None
    created_by: UserSummary | None = None
    due_date: datetime
    status: AssignmentStatus
    priority: AssignmentPriority
    created_at: datetime
    updated_at: datetime | None = None
