from datetime import datetime

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from tracker.database import to_naive_utc


class TrackerModel(BaseModel):
    """Base for every payload: camelCase on the wire, snake_case accepted too."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


def normalize_datetime(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    return to_naive_utc(value)


def normalize_text(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip()
    return normalized or None


def require_text(value: str, field_label: str) -> str:
    normalized = value.strip()
    if not normalized:
        raise ValueError(f'{field_label} is required.')
    return normalized


class SubjectSummary(TrackerModel):
    id: int
    name: str
    code: str
    color: str


class UserSummary(TrackerModel):
    id: int
    name: str
    email: str


def format_validation_errors(errors: list[dict]) -> str:
    """Collapse pydantic error entries into one human-readable sentence."""
    messages = []
    for error in errors:
        location = [str(part) for part in error.get('loc', ()) if part != 'body']
        message = error.get('msg', 'Invalid value')
        messages.append(f"{'.'.join(location)}: {message}" if location else message)
    return '; '.join(messages) or 'Invalid request payload.'
