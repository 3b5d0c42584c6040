import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tracker.auth import jwt_handler
from tracker.core.errors import StoreError, Unauthenticated
from tracker.database import get_db
from tracker.models.user import User

# Missing credentials are reported through Unauthenticated, not HTTPBearer's own error.
security = HTTPBearer(auto_error=False)

logger = logging.getLogger(__name__)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None or not credentials.credentials:
        raise Unauthenticated("Not authorized to access this route.")

    payload = jwt_handler.decode_access_token(credentials.credentials)

    email = payload.get("sub")
    if not email or not isinstance(email, str):
        logger.warning("Rejected token without a usable subject claim.")
        raise Unauthenticated("Invalid token subject.")

    try:
        user = db.query(User).filter(func.lower(User.email) == email.strip().lower()).first()
    except SQLAlchemyError as exc:
        logger.exception("User lookup failed during authentication.")
        raise StoreError() from exc

    if user is None:
        logger.warning("Rejected token for unknown user %s.", email)
        raise Unauthenticated("User not found.")
    return user
