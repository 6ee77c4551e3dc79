"""Meal-plan generation service.

Builds a day's plan by splitting the profile's calorie/macro targets evenly
across the meal slots implied by `meal_frequency`, then filling each slot with
a bounded random walk over the eligible food catalog:

- draw a uniformly random eligible food at one serving,
- keep it only if the meal stays within 110% of the slot's calorie target,
- stop once the meal reaches 90% of the target, holds five lines, or the
  draw limit is reached.

Selection is approximate by nature: duplicates are allowed (each accepted
draw is its own line) and a meal may end below 90% when draws keep getting
rejected. The random source is injected so callers can seed it.
"""

import random
from datetime import date
from typing import Dict, List, Optional, Sequence

from sqlalchemy.orm import Session

from core.config import settings
from core.exceptions import NotFoundError
from core.logger import get_logger
from core.repository import FoodItemRepository, MealPlanRepository
from database import models
from services.nutrition_calculator import NutritionCalculator, nutrition_calculator

logger = get_logger("services.meal_plan_generator")

MEAL_SLOTS = {
    1: ('lunch',),
    2: ('breakfast', 'dinner'),
}
DEFAULT_MEAL_SLOTS = ('breakfast', 'lunch', 'dinner')

MAX_ITEMS_PER_MEAL = 5
LOWER_CALORIE_RATIO = 0.9
UPPER_CALORIE_RATIO = 1.1
SERVINGS_PER_DRAW = 1.0

NON_VEGETARIAN_PREFERENCES = {'non-veg', 'non-vegetarian', 'nonveg', 'non vegetarian'}


class MealPlanGenerator:
    """Randomised greedy meal-plan builder.

    Parameters
    ----------
    calculator: NutritionCalculator
        Source of the daily calorie/macro targets.
    rng: random.Random
        Random source for food draws. Defaults to a generator seeded from
        `MEAL_PLAN_SEED` (or from the OS when unset).
    max_draws: int
        Upper bound on draws per meal so the loop ends even when every
        candidate is rejected.
    """

    def __init__(
        self,
        calculator: NutritionCalculator = nutrition_calculator,
        rng: Optional[random.Random] = None,
        max_draws: Optional[int] = None,
    ):
        self.calculator = calculator
        self.rng = rng if rng is not None else random.Random(settings.MEAL_PLAN_SEED)
        self.max_draws = max_draws if max_draws is not None else settings.MEAL_PLAN_MAX_DRAWS

    @staticmethod
    def meal_slots(meal_frequency: int) -> Sequence[str]:
        """Map meal frequency to slot names; anything but 1 or 2 gets three meals."""
        return MEAL_SLOTS.get(meal_frequency, DEFAULT_MEAL_SLOTS)

    @staticmethod
    def is_non_vegetarian(dietary_preference: str) -> bool:
        return (dietary_preference or '').strip().lower().replace('_', '-') in NON_VEGETARIAN_PREFERENCES

    def filter_food_items(self, food_items: Sequence, dietary_preference: str) -> List:
        """Return the foods a profile may eat.

        Non-vegetarian profiles may eat everything; every other preference is
        restricted to vegetarian items.
        """
        if self.is_non_vegetarian(dietary_preference):
            eligible = list(food_items)
        else:
            eligible = [f for f in food_items if f.is_vegetarian]
        logger.debug("Filtered food items: %s -> %s", len(food_items), len(eligible))
        return eligible

    def per_meal_targets(self, nutrition: Dict, slot_count: int) -> Dict[str, float]:
        macros = nutrition['macros']
        return {
            'calories': nutrition['target_calories'] / slot_count,
            'protein': macros['protein'] / slot_count,
            'carbs': macros['carbs'] / slot_count,
            'fats': macros['fats'] / slot_count,
        }

    def build_meal(self, meal_type: str, target_calories: float, eligible: Sequence) -> models.Meal:
        """Fill one meal slot by random draws from `eligible`.

        Args:
            meal_type: Slot name stored on the meal.
            target_calories: Calorie target for this slot.
            eligible: Non-empty sequence of food items.

        Returns:
            An unsaved `models.Meal` with its `MealFoodItem` lines and totals.
        """
        meal = models.Meal(
            meal_type=meal_type,
            total_calories=0.0,
            total_protein=0.0,
            total_carbs=0.0,
            total_fats=0.0,
            completed=False,
        )
        floor = target_calories * LOWER_CALORIE_RATIO
        ceiling = target_calories * UPPER_CALORIE_RATIO

        draws = 0
        while (
            meal.total_calories < floor
            and len(meal.food_items) < MAX_ITEMS_PER_MEAL
            and draws < self.max_draws
        ):
            draws += 1
            food = self.rng.choice(eligible)
            quantity = SERVINGS_PER_DRAW
            if meal.total_calories + food.calories * quantity > ceiling:
                continue
            meal.food_items.append(models.MealFoodItem(
                food_item=food,
                food_item_id=food.id,
                quantity=quantity,
            ))
            meal.total_calories += food.calories * quantity
            meal.total_protein += food.protein * quantity
            meal.total_carbs += food.carbs * quantity
            meal.total_fats += food.fats * quantity

        if meal.total_calories < floor:
            logger.debug(
                "Meal %s under-filled: %.1f of %.1f kcal after %s draws",
                meal_type, meal.total_calories, target_calories, draws,
            )
        return meal

    def generate(self, user_id: int, plan_date: date, profile, food_items: Sequence) -> models.MealPlan:
        """Build an unsaved meal plan for a user's profile.

        Args:
            user_id: Owner of the plan.
            plan_date: Calendar day the plan is for.
            profile: The user's profile; required.
            food_items: Candidate catalog entries.

        Returns:
            A `models.MealPlan` with nested meals and plan-level totals.

        Raises:
            NotFoundError: If the profile is missing or no food is eligible.
        """
        if profile is None:
            raise NotFoundError("UserProfile", user_id, message="Profile not found")

        nutrition = self.calculator.compute(profile)
        slots = self.meal_slots(profile.meal_frequency)
        targets = self.per_meal_targets(nutrition, len(slots))
        logger.debug("Per-meal targets for user %s: %s", user_id, targets)

        eligible = self.filter_food_items(food_items, profile.dietary_preference)
        if not eligible:
            raise NotFoundError(
                "FoodItem",
                message=f"No food items available for dietary preference '{profile.dietary_preference}'",
            )

        plan = models.MealPlan(user_id=user_id, plan_date=plan_date, completed=False)
        for slot in slots:
            plan.meals.append(self.build_meal(slot, targets['calories'], eligible))

        plan.total_calories = sum(m.total_calories for m in plan.meals)
        plan.total_protein = sum(m.total_protein for m in plan.meals)
        plan.total_carbs = sum(m.total_carbs for m in plan.meals)
        plan.total_fats = sum(m.total_fats for m in plan.meals)

        logger.info(
            "Generated plan for user %s on %s: %s meals, calories=%.1f (target=%.1f)",
            user_id, plan_date, len(plan.meals), plan.total_calories, nutrition['target_calories'],
        )
        return plan

    # Persistence-aware entry points

    def _profile_for(self, db: Session, user_id: int):
        return db.query(models.UserProfile).filter(models.UserProfile.user_id == user_id).first()

    def generate_for_user(self, db: Session, user_id: int, plan_date: date) -> models.MealPlan:
        """Replace the user's plan for `plan_date` with a freshly generated one.

        The delete of any existing plan and the insert of the new one happen
        in a single transaction, so at most one plan exists per user and day.
        """
        profile = self._profile_for(db, user_id)
        food_items = FoodItemRepository(db).list()
        plan = self.generate(user_id, plan_date, profile, food_items)

        plans = MealPlanRepository(db)
        try:
            removed = plans.delete_for_day(user_id, plan_date)
            db.add(plan)
            db.commit()
        except Exception:
            db.rollback()
            raise
        if removed:
            logger.info("Replaced %s existing plan(s) for user %s on %s", removed, user_id, plan_date)
        return plans.get_for_day(user_id, plan_date)

    def current_plan(self, db: Session, user_id: int, plan_date: date) -> models.MealPlan:
        """Return the user's plan for `plan_date`, generating it if missing."""
        plan = MealPlanRepository(db).get_for_day(user_id, plan_date)
        if plan is not None:
            return plan
        return self.generate_for_user(db, user_id, plan_date)


# export a default instance
meal_plan_generator = MealPlanGenerator()


def get_meal_plan_generator() -> MealPlanGenerator:
    """FastAPI dependency returning the shared generator."""
    return meal_plan_generator
