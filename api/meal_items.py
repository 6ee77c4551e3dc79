"""Recipe catalog API router.

Browsing, categories and goal-based recommendations are public; adding and
removing recipes requires an identified caller.
"""

import json
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from database import get_db_read, get_db_write
from database import models
from core.auth import get_current_user
from core.logger import get_logger
from core.repository import MealItemRepository, decode_categories
from services.meal_item_recommender import MealItemRecommender, get_meal_item_recommender
from schemas import MealItemRequest, MealItemResponse, MealItemBulkResponse

logger = get_logger("api.meal_items")
router = APIRouter(prefix="/api/meal-items", tags=["meal-items"])


def _to_response(item: models.MealItem) -> MealItemResponse:
    return MealItemResponse(
        id=item.id,
        name=item.name,
        diet_type=item.diet_type,
        calories=item.calories,
        protein=item.protein,
        carbs=item.carbs,
        fats=item.fats,
        categories=decode_categories(item.categories),
        created_at=item.created_at,
    )


def _to_model(payload: MealItemRequest) -> models.MealItem:
    fields = payload.model_dump()
    fields["categories"] = json.dumps([c.strip() for c in fields["categories"] if c.strip()])
    return models.MealItem(**fields)


@router.get("", response_model=List[MealItemResponse])
def list_meal_items(
    diet_type: Optional[str] = None,
    category: Optional[str] = None,
    db: Session = Depends(get_db_read),
):
    """Return recipes, optionally filtered by diet type and category."""
    return [_to_response(i) for i in MealItemRepository(db).list(diet_type=diet_type, category=category)]


@router.get("/categories", response_model=List[str])
def list_meal_item_categories(db: Session = Depends(get_db_read)):
    """Return every category used by at least one recipe."""
    return MealItemRepository(db).categories()


@router.get("/recommendations", response_model=List[MealItemResponse])
def recommend_meal_items(
    goal: Optional[str] = None,
    diet_type: Optional[str] = None,
    count: int = Query(3, ge=1, le=20),
    db: Session = Depends(get_db_read),
    recommender: MealItemRecommender = Depends(get_meal_item_recommender),
):
    """Return up to `count` random recipes for a goal.

    `goal` accepts a category ("Weight Loss") or a profile goal ("lose weight").

    Raises:
        NotFoundError: If no recipe matches.
    """
    return [_to_response(i) for i in recommender.recommend(db, goal=goal, diet_type=diet_type, count=count)]


@router.get("/{meal_item_id}", response_model=MealItemResponse)
def get_meal_item(meal_item_id: int, db: Session = Depends(get_db_read)):
    """Return a single recipe.

    Raises:
        NotFoundError: If the id is unknown.
    """
    return _to_response(MealItemRepository(db).get_or_404(meal_item_id))


@router.post("", response_model=MealItemResponse, status_code=201)
def create_meal_item(
    payload: MealItemRequest,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
):
    """Add a recipe."""
    item = MealItemRepository(db).add(_to_model(payload))
    logger.info("Meal item %s created by user %s", item.id, current_user.id)
    return _to_response(item)


@router.post("/bulk", response_model=MealItemBulkResponse, status_code=201)
def bulk_create_meal_items(
    payload: List[MealItemRequest],
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
):
    """Add several recipes in one transaction."""
    items = MealItemRepository(db).add_all([_to_model(p) for p in payload])
    logger.info("%s meal items added by user %s", len(items), current_user.id)
    return MealItemBulkResponse(message=f"Added {len(items)} meal items", count=len(items))


@router.delete("/{meal_item_id}", status_code=204)
def delete_meal_item(
    meal_item_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
):
    """Remove a recipe.

    Raises:
        NotFoundError: If the id is unknown.
    """
    repo = MealItemRepository(db)
    repo.delete(repo.get_or_404(meal_item_id))
    logger.info("Meal item %s deleted by user %s", meal_item_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
