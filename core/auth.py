"""Caller identity dependency.

Credential checks happen upstream (gateway or session layer); by the time a
request reaches this service the caller's user id travels in the
`X-User-Id` header. The dependency resolves it to a stored `User` and
rejects missing, malformed or unknown ids with 401.
"""

from typing import Annotated, Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from core.exceptions import UnauthorizedError
from database import models
from database import get_db_read


def get_current_user(
    x_user_id: Annotated[Optional[str], Header()] = None,
    db: Session = Depends(get_db_read),
) -> models.User:
    """FastAPI dependency: return the user identified by `X-User-Id`."""
    if not x_user_id:
        raise UnauthorizedError()
    try:
        user_id = int(x_user_id)
    except ValueError:
        raise UnauthorizedError("X-User-Id must be an integer user id")
    user = db.get(models.User, user_id)
    if user is None:
        raise UnauthorizedError(f"Unknown user id '{user_id}'")
    return user
