from datetime import datetime

from pydantic import Field, field_validator

from tracker.schemas.common import SubjectSummary, TrackerModel, normalize_datetime, normalize_text, require_text

MAX_EXAM_DURATION_MINUTES = 24 * 60


class ExamCreate(TrackerModel):
    title: str
    subject: int = Field(gt=0)
    date: datetime
    location: str | None = None
    duration_minutes: int | None = Field(default=None, gt=0, le=MAX_EXAM_DURATION_MINUTES)
    notes: str | None = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, value: str) -> str:
        return require_text(value, 'Title')

    @field_validator('date')
    @classmethod
    def validate_date(cls, value: datetime) -> datetime:
        return normalize_datetime(value)

    @field_validator('location', 'notes')
    @classmethod
    def validate_optional_text(cls, value: str | None) -> str | None:
        return normalize_text(value)


class ExamUpdate(TrackerModel):
    title: str | None = None
    subject: int | None = None
    date: datetime | None = None
    location: str | None = None
    duration_minutes: int | None = None
    notes: str | None = None


class ExamResponse(TrackerModel):
    id: int
    title: str
    subject: SubjectSummary | None = None
    date: datetime
    location: str | None = None
    duration_minutes: int | None = None
    notes: str | None = None
    created_at: datetime
