from datetime import datetime, timedelta, timezone

import jwt
import pytest
from fastapi.security import HTTPAuthorizationCredentials

from tracker.auth import jwt_handler
from tracker.auth.dependencies import get_current_user
from tracker.core import config
from tracker.core.errors import Unauthenticated


def _credentials(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme='Bearer', credentials=token)


def test_access_token_round_trips_subject() -> None:
    token = jwt_handler.create_access_token('a@example.edu')

    assert jwt_handler.decode_access_token(token)['sub'] == 'a@example.edu'


def test_decode_rejects_expired_token() -> None:
    issued_at = datetime.now(timezone.utc) - timedelta(hours=2)
    token = jwt.encode(
        {'sub': 'a@example.edu', 'iat': issued_at, 'exp': issued_at + timedelta(minutes=5)},
        config.JWT_SECRET_KEY,
        algorithm=config.JWT_ALGORITHM,
    )

    with pytest.raises(Unauthenticated) as exception_info:
        jwt_handler.decode_access_token(token)

    assert exception_info.value.message == 'Token has expired.'


def test_decode_rejects_token_signed_with_another_key() -> None:
    token = jwt.encode({'sub': 'a@example.edu', 'iat': 0, 'exp': 9999999999}, 'other-key', algorithm='HS256')

    with pytest.raises(Unauthenticated):
        jwt_handler.decode_access_token(token)


def test_get_current_user_requires_credentials(db_session) -> None:
    with pytest.raises(Unauthenticated) as exception_info:
        get_current_user(credentials=None, db=db_session)

    assert exception_info.value.status_code == 401


def test_get_current_user_rejects_unknown_user(db_session) -> None:
    token = jwt_handler.create_access_token('ghost@example.edu')

    with pytest.raises(Unauthenticated) as exception_info:
        get_current_user(credentials=_credentials(token), db=db_session)

    assert exception_info.value.message == 'User not found.'


def test_get_current_user_resolves_user_record(db_session, student_a) -> None:
    token = jwt_handler.create_access_token(student_a.email)

    user = get_current_user(credentials=_credentials(token), db=db_session)

    assert user.id == student_a.id
    assert user.role == 'student'
