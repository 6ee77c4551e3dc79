"""Goal-based recipe recommendations.

Recipes carry goal categories ("Weight Loss", "Muscle Gain", ...). A
recommendation is a uniformly random sample of the recipes tagged with the
requested goal, optionally narrowed to one diet type.
"""

import random
from typing import List, Optional

from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from core.logger import get_logger
from core.repository import MealItemRepository
from database import models

logger = get_logger("services.meal_item_recommender")

# profile goals mapped onto recipe categories
GOAL_CATEGORIES = {
    'lose weight': 'Weight Loss',
    'gain weight': 'Muscle Gain',
    'maintain': 'Balanced',
}
DEFAULT_RECOMMENDATIONS = 3


class MealItemRecommender:
    """Random recipe picker filtered by goal and diet type.

    Parameters
    ----------
    rng: random.Random
        Random source for sampling; pass a seeded one for repeatable picks.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    @staticmethod
    def goal_category(goal: Optional[str]) -> Optional[str]:
        """Translate a profile goal ("lose weight") to its recipe category.

        Anything that is not a profile goal is taken as a category name.
        """
        if not goal or not goal.strip():
            return None
        normalized = " ".join(goal.lower().replace("_", " ").split())
        return GOAL_CATEGORIES.get(normalized, goal.strip())

    def recommend(
        self,
        db: Session,
        goal: Optional[str] = None,
        diet_type: Optional[str] = None,
        count: int = DEFAULT_RECOMMENDATIONS,
    ) -> List[models.MealItem]:
        """Pick up to `count` distinct recipes matching the goal and diet type.

        Raises:
            NotFoundError: If no recipe matches.
        """
        category = self.goal_category(goal)
        matching = MealItemRepository(db).list(diet_type=diet_type, category=category)
        if not matching:
            raise NotFoundError("MealItem", message="No matching meal items found")
        picked = self.rng.sample(matching, min(count, len(matching)))
        logger.debug("Recommended %s of %s recipes for category=%s diet_type=%s", len(picked), len(matching), category, diet_type)
        return picked


meal_item_recommender = MealItemRecommender()


def get_meal_item_recommender() -> MealItemRecommender:
    """FastAPI dependency returning the shared recommender."""
    return meal_item_recommender
