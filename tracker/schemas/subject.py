import re
from datetime import datetime

from pydantic import field_validator

from tracker.schemas.common import TrackerModel, normalize_text, require_text

DEFAULT_SUBJECT_COLOR = '#3b82f6'
MAX_SUBJECT_CODE_LENGTH = 20
HEX_COLOR_PATTERN = re.compile(r'^#[0-9a-fA-F]{6}$')


def _validate_code(value: str) -> str:
    normalized = require_text(value, 'Subject code').upper()
    if len(normalized) > MAX_SUBJECT_CODE_LENGTH:
        raise ValueError(f'Subject code must be {MAX_SUBJECT_CODE_LENGTH} characters or fewer.')
    return normalized


def _validate_color(value: str) -> str:
    normalized = value.strip()
    if not HEX_COLOR_PATTERN.match(normalized):
        raise ValueError('Color must be a hex value like #ff0000.')
    return normalized


class SubjectCreate(TrackerModel):
    name: str
    code: str
    color: str = DEFAULT_SUBJECT_COLOR
    description: str | None = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, value: str) -> str:
        return require_text(value, 'Subject name')

    @field_validator('code')
    @classmethod
    def validate_code(cls, value: str) -> str:
        return _validate_code(value)

    @field_validator('color')
    @classmethod
    def validate_color(cls, value: str) -> str:
        return _validate_color(value)

    @field_validator('description')
    @classmethod
    def validate_description(cls, value: str | None) -> str | None:
        return normalize_text(value)


class SubjectUpdate(TrackerModel):
    name: str | None = None
    code: str | None = None
    color: str | None = None
    description: str | None = None


class SubjectResponse(TrackerModel):
    id: int
    name: str
    code: str
    color: str
    description: str | None = None
    created_at: datetime
