"""Error kinds raised by the services and rendered by the API layer."""

from fastapi import status


class TrackerError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = 'Something went wrong.'

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(TrackerError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = 'Not authenticated.'


class Forbidden(TrackerError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = 'Not authorized to perform this action.'


class NotFound(TrackerError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'Resource not found.'


class ValidationError(TrackerError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Invalid request payload.'


class Conflict(TrackerError):
    status_code = status.HTTP_409_CONFLICT
    default_message = 'Request conflicts with the current state of the resource.'


class StoreError(TrackerError):
    default_message = 'Database unavailable. Verify DATABASE_URL and database credentials.'
