"""Nutrition calculation helpers.

Provides BMR/TDEE, goal-adjusted calorie targets and macro allocation derived
from a user profile. Every input maps to a defined output: unrecognised
activity levels and goals fall back to the sedentary multiplier and to
maintenance respectively.
"""

from typing import Dict
from core.logger import get_logger

logger = get_logger("services.nutrition_calculator")

ACTIVITY_MULTIPLIERS = {
    'sedentary': 1.2,
    'lightly active': 1.375,
    'moderately active': 1.55,
    'very active': 1.725,
    'extra active': 1.9,
}
DEFAULT_ACTIVITY_MULTIPLIER = 1.2

GOAL_FACTORS = {
    'lose weight': 0.8,
    'gain weight': 1.2,
}

# share of calories per macro, and kcal per gram
MACRO_SPLIT = {'protein': 0.3, 'carbs': 0.4, 'fats': 0.3}
KCAL_PER_GRAM = {'protein': 4.0, 'carbs': 4.0, 'fats': 9.0}


def _normalize(label: str) -> str:
    """Lower-case a free-text label and treat `_`/`-` as spaces."""
    return " ".join((label or "").lower().replace("_", " ").replace("-", " ").split())


class NutritionCalculator:
    """Class-based nutrition calculator used across the app."""

    def calculate_bmr(self, age: int, height_cm: float, weight_kg: float, gender: str) -> float:
        """Calculate BMR using the Mifflin-St Jeor equation.

        Anything other than "male" (case-insensitive) takes the female branch.
        """
        if (gender or "").strip().lower() == 'male':
            return 10 * weight_kg + 6.25 * height_cm - 5 * age + 5
        else:
            return 10 * weight_kg + 6.25 * height_cm - 5 * age - 161

    def activity_multiplier(self, activity_level: str) -> float:
        return ACTIVITY_MULTIPLIERS.get(_normalize(activity_level), DEFAULT_ACTIVITY_MULTIPLIER)

    def calculate_tdee(self, bmr: float, activity_level: str) -> float:
        """Estimate TDEE from BMR and activity multiplier."""
        val = bmr * self.activity_multiplier(activity_level)
        logger.debug("TDEE calculated: %s", val)
        return val

    def calculate_target_calories(self, tdee: float, goal: str) -> float:
        """Derive a daily calorie target from TDEE based on a goal.

        "lose weight" is a 20% deficit, "gain weight" a 20% surplus, and any
        other goal is maintenance.
        """
        val = tdee * GOAL_FACTORS.get(_normalize(goal), 1.0)
        logger.debug("Target calories for goal %s: %s", goal, val)
        return val

    def calculate_macros(self, target_calories: float) -> Dict[str, float]:
        """Allocate macronutrient targets (grams) from a calorie target.

        Uses a fixed 30/40/30 protein/carbs/fats split; values are not rounded
        so that they convert back to `target_calories` exactly.
        """
        macros = {
            name: target_calories * share / KCAL_PER_GRAM[name]
            for name, share in MACRO_SPLIT.items()
        }
        logger.debug("Macros calculated: %s", macros)
        return macros

    def compute(self, profile) -> Dict:
        """Derive `bmr`, `tdee`, `target_calories` and `macros` for a profile.

        Args:
            profile: Any object exposing `age`, `height`, `weight`, `gender`,
                `activity_level` and `goal` (ORM row or schema).

        Returns:
            Dictionary with keys `bmr`, `tdee`, `target_calories`, `macros`.
        """
        bmr = self.calculate_bmr(profile.age, profile.height, profile.weight, profile.gender)
        tdee = self.calculate_tdee(bmr, profile.activity_level)
        target_calories = self.calculate_target_calories(tdee, profile.goal)
        return {
            'bmr': bmr,
            'tdee': tdee,
            'target_calories': target_calories,
            'macros': self.calculate_macros(target_calories),
        }


# export singleton
nutrition_calculator = NutritionCalculator()
__all__ = ["NutritionCalculator", "nutrition_calculator", "ACTIVITY_MULTIPLIERS"]
