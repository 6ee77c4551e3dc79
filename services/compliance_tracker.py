"""Meal completion and progress tracking.

A meal moves one way, from pending to completed. When the last pending meal
of a plan is completed the plan is marked completed and a single
ComplianceEntry is recorded for it, dated with the server's current day.
Progress summaries combine the weight log with those compliance entries.
"""

from datetime import date
from typing import Callable, Dict, List, Optional, Sequence

from sqlalchemy.orm import Session

from core.dates import utc_today
from core.exceptions import ForbiddenError, NotFoundError, ValidationError
from core.logger import get_logger
from core.repository import ComplianceEntryRepository, WeightEntryRepository, save
from database import models

logger = get_logger("services.compliance_tracker")


def summarize_progress(weight_entries: Sequence, compliance_entries: Sequence) -> Dict[str, float]:
    """Aggregate weight change and mean compliance.

    Args:
        weight_entries: Non-empty weight entries in ascending date order.
        compliance_entries: Compliance entries for the same period.

    Returns:
        Dictionary with `start_weight`, `current_weight`, `weight_change`
        and `average_compliance_rate` (0 when there are no entries).
    """
    start_weight = weight_entries[0].weight
    current_weight = weight_entries[-1].weight
    if compliance_entries:
        average = sum(c.compliance_rate for c in compliance_entries) / len(compliance_entries)
    else:
        average = 0.0
    return {
        'start_weight': start_weight,
        'current_weight': current_weight,
        'weight_change': current_weight - start_weight,
        'average_compliance_rate': average,
    }


class ComplianceTracker:
    """Completes meals, records compliance and reports progress.

    Parameters
    ----------
    today: Callable[[], date]
        Clock used to date compliance entries.
    """

    def __init__(self, today: Callable[[], date] = utc_today):
        self.today = today

    def complete_meal(self, db: Session, meal_plan_id: int, meal_id: int, user_id: int) -> Dict:
        """Mark a meal completed on behalf of `user_id`.

        The plan row is locked for the duration of the transaction so that the
        "are all meals done" check and the compliance insert cannot interleave
        with another completion on the same plan.

        Returns:
            Dictionary with `meal_id`, `meal_plan_id`, `plan_completed` and the
            `compliance_entry` created by this call (or None).

        Raises:
            NotFoundError: If the meal does not belong to that plan.
            ForbiddenError: If the plan belongs to another user.
        """
        plan = (
            db.query(models.MealPlan)
            .filter(models.MealPlan.id == meal_plan_id)
            .with_for_update()
            .first()
        )
        meal = None
        if plan is not None:
            meal = (
                db.query(models.Meal)
                .filter(models.Meal.id == meal_id, models.Meal.meal_plan_id == meal_plan_id)
                .first()
            )
        if meal is None:
            db.rollback()
            raise NotFoundError("Meal", meal_id, message="Meal not found")
        if plan.user_id != user_id:
            db.rollback()
            raise ForbiddenError("MealPlan", meal_plan_id)

        entry = None
        try:
            meal.completed = True
            meals = db.query(models.Meal).filter(models.Meal.meal_plan_id == meal_plan_id).all()
            all_done = len(meals) > 0 and all(m.completed for m in meals)
            plan.completed = all_done

            if all_done and ComplianceEntryRepository(db).for_plan(meal_plan_id) is None:
                completed_count = sum(1 for m in meals if m.completed)
                entry = models.ComplianceEntry(
                    user_id=user_id,
                    meal_plan_id=meal_plan_id,
                    entry_date=self.today(),
                    meals_completed=completed_count,
                    total_meals=len(meals),
                    compliance_rate=completed_count / len(meals),
                )
                db.add(entry)
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info("Meal %s of plan %s completed by user %s", meal_id, meal_plan_id, user_id)
        if entry is not None:
            logger.info("Compliance recorded for plan %s: %s/%s", meal_plan_id, entry.meals_completed, entry.total_meals)
        return {
            'meal_id': meal_id,
            'meal_plan_id': meal_plan_id,
            'plan_completed': plan.completed,
            'compliance_entry': entry,
        }

    def record_weight(self, db: Session, user_id: int, entry_date: date, weight: float, note: Optional[str] = None) -> models.WeightEntry:
        """Append a weight entry for the user."""
        entry = save(db, models.WeightEntry(user_id=user_id, entry_date=entry_date, weight=weight, note=note))
        logger.info("Weight %.1f recorded for user %s on %s", weight, user_id, entry_date)
        return entry

    def weight_history(self, db: Session, user_id: int, start_date: Optional[date] = None, end_date: Optional[date] = None) -> List[models.WeightEntry]:
        return WeightEntryRepository(db).in_range(user_id, start_date, end_date)

    def compliance_history(self, db: Session, user_id: int, start_date: Optional[date] = None, end_date: Optional[date] = None) -> List[models.ComplianceEntry]:
        return ComplianceEntryRepository(db).in_range(user_id, start_date, end_date)

    def progress_summary(self, db: Session, user_id: int, start_date: date, end_date: date) -> Dict:
        """Summarise weight change and compliance between two inclusive dates.

        Raises:
            ValidationError: If `start_date` is after `end_date`.
            NotFoundError: If the user logged no weight in the period.
        """
        if start_date > end_date:
            raise ValidationError("start_date must not be after end_date", field="start_date")

        weights = self.weight_history(db, user_id, start_date, end_date)
        if not weights:
            raise NotFoundError("WeightEntry", message="No weight entries found for the specified period")
        compliance = self.compliance_history(db, user_id, start_date, end_date)

        summary = summarize_progress(weights, compliance)
        summary.update({'start_date': start_date, 'end_date': end_date})
        logger.debug("Progress summary for user %s: %s", user_id, summary)
        return summary


compliance_tracker = ComplianceTracker()


def get_compliance_tracker() -> ComplianceTracker:
    """FastAPI dependency returning the shared tracker."""
    return compliance_tracker
