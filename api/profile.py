"""Profile API router.

Reads and upserts the caller's profile and exposes the nutrition targets
derived from it by `NutritionCalculator`.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from database import get_db_read, get_db_write
from database import models
from core.auth import get_current_user
from core.exceptions import NotFoundError
from core.logger import get_logger
from core.repository import BaseRepository, save
from services.nutrition_calculator import nutrition_calculator
from schemas import ProfileRequest, ProfileResponse, NutritionResponse

logger = get_logger("api.profile")
router = APIRouter(prefix="/api/profile", tags=["profile"])


def _load_profile(db: Session, user_id: int) -> models.UserProfile:
    profile = db.query(models.UserProfile).filter(models.UserProfile.user_id == user_id).first()
    if profile is None:
        raise NotFoundError("UserProfile", user_id, message="Profile not found")
    return profile


@router.get("", response_model=ProfileResponse)
def get_profile(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_read),
):
    """Return the caller's profile.

    Raises:
        NotFoundError: If no profile has been saved yet.
    """
    return ProfileResponse.model_validate(_load_profile(db, current_user.id))


@router.post("", response_model=ProfileResponse)
def save_profile(
    payload: ProfileRequest,
    response: Response,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
):
    """Create the caller's profile (201) or update it in place (200)."""
    profile = db.query(models.UserProfile).filter(models.UserProfile.user_id == current_user.id).first()
    if profile is None:
        profile = save(db, models.UserProfile(user_id=current_user.id, **payload.model_dump()))
        response.status_code = status.HTTP_201_CREATED
        logger.info("Profile created for user %s", current_user.id)
    else:
        profile = BaseRepository(models.UserProfile, db).update(profile, payload.model_dump())
        logger.info("Profile updated for user %s", current_user.id)
    return ProfileResponse.model_validate(profile)


@router.get("/nutrition", response_model=NutritionResponse)
def get_nutrition(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_read),
):
    """Return BMR, TDEE, target calories and macros for the caller.

    Raises:
        NotFoundError: If no profile has been saved yet.
    """
    nutrition = nutrition_calculator.compute(_load_profile(db, current_user.id))
    return NutritionResponse(**nutrition)
