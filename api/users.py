"""User API router.

Registers users and returns the caller's own record. Credentials are handled
upstream; registration only records the name and a unique email.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from database import get_db_write
from database import models
from core.auth import get_current_user
from core.exceptions import ConflictError
from core.logger import get_logger
from core.repository import save
from schemas import UserCreateRequest, UserResponse

logger = get_logger("api.users")
router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=201)
def register_user(payload: UserCreateRequest, db: Session = Depends(get_db_write)):
    """Register a new user.

    Raises:
        ConflictError: If the email is already registered.
    """
    email = payload.email.strip().lower()
    if db.query(models.User).filter(models.User.email == email).first():
        raise ConflictError("Email already registered", field="email")

    user = save(db, models.User(name=payload.name.strip(), email=email))
    logger.info("User registered: id=%s", user.id)
    return UserResponse.model_validate(user)


@router.get("/me", response_model=UserResponse)
def get_me(current_user: models.User = Depends(get_current_user)):
    """Return the calling user."""
    return UserResponse.model_validate(current_user)
