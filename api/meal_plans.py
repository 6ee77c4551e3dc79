"""Meal-plan API router.

Serves today's plan (generating it on first access), explicit regeneration,
meal completion and plan history for the calling user.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from database import get_db_read, get_db_write
from database import models
from core.auth import get_current_user
from core.dates import parse_date, utc_today
from core.logger import get_logger
from core.repository import MealPlanRepository
from services.meal_plan_generator import MealPlanGenerator, get_meal_plan_generator
from services.compliance_tracker import ComplianceTracker, get_compliance_tracker
from schemas import MealPlanResponse, MealCompletionResponse

logger = get_logger("api.meal_plans")
router = APIRouter(prefix="/api/meal-plans", tags=["meal-plans"])


@router.get("/current", response_model=MealPlanResponse)
def get_current_plan(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
    generator: MealPlanGenerator = Depends(get_meal_plan_generator),
):
    """Return today's plan, generating and storing one if none exists.

    Raises:
        NotFoundError: If a plan must be generated but the caller has no profile.
    """
    plan = generator.current_plan(db, current_user.id, utc_today())
    return MealPlanResponse.model_validate(plan)


@router.post("/generate", response_model=MealPlanResponse)
def generate_plan(
    date: Optional[str] = None,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
    generator: MealPlanGenerator = Depends(get_meal_plan_generator),
):
    """Generate a fresh plan for `date` (default today), replacing any existing one.

    Raises:
        ValidationError: If `date` is not yyyy-MM-dd.
        NotFoundError: If the caller has no profile or no food is eligible.
    """
    plan_date = parse_date(date, "date") or utc_today()
    logger.info("Generating plan for user %s on %s", current_user.id, plan_date)
    plan = generator.generate_for_user(db, current_user.id, plan_date)
    return MealPlanResponse.model_validate(plan)


@router.post("/{meal_plan_id}/meals/{meal_id}/complete", response_model=MealCompletionResponse)
def complete_meal(
    meal_plan_id: int,
    meal_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
    tracker: ComplianceTracker = Depends(get_compliance_tracker),
):
    """Mark a meal completed; completes the plan when it was the last one.

    Raises:
        NotFoundError: If the meal is not part of that plan.
        ForbiddenError: If the plan belongs to someone else.
    """
    result = tracker.complete_meal(db, meal_plan_id, meal_id, current_user.id)
    return MealCompletionResponse(
        message="Meal marked as completed",
        meal_id=result['meal_id'],
        meal_plan_id=result['meal_plan_id'],
        plan_completed=result['plan_completed'],
        compliance_recorded=result['compliance_entry'] is not None,
    )


@router.get("/history", response_model=List[MealPlanResponse])
def get_plan_history(
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_read),
):
    """Return the caller's plans, newest first, within optional date bounds.

    Raises:
        ValidationError: If a bound is not yyyy-MM-dd.
    """
    plans = MealPlanRepository(db).history(
        current_user.id,
        parse_date(start_date, "start_date"),
        parse_date(end_date, "end_date"),
    )
    return [MealPlanResponse.model_validate(p) for p in plans]
