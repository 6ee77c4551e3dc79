"""Food catalog API router.

Listing and lookups are public; writes require an identified caller. Foods
still used by a stored meal plan cannot be deleted (409).
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from database import get_db_read, get_db_write
from database import models
from core.auth import get_current_user
from core.logger import get_logger
from core.repository import FoodItemRepository
from schemas import FoodItemRequest, FoodItemResponse

logger = get_logger("api.food_items")
router = APIRouter(prefix="/api/food-items", tags=["food-items"])


@router.get("", response_model=List[FoodItemResponse])
def list_food_items(
    category: Optional[str] = None,
    is_vegetarian: Optional[bool] = None,
    db: Session = Depends(get_db_read),
):
    """Return food items, optionally filtered by category and vegetarian flag."""
    items = FoodItemRepository(db).list(category=category, is_vegetarian=is_vegetarian)
    return [FoodItemResponse.model_validate(i) for i in items]


@router.get("/categories", response_model=List[str])
def list_categories(db: Session = Depends(get_db_read)):
    """Return the distinct food categories."""
    return FoodItemRepository(db).categories()


@router.get("/{food_item_id}", response_model=FoodItemResponse)
def get_food_item(food_item_id: int, db: Session = Depends(get_db_read)):
    """Return a single food item.

    Raises:
        NotFoundError: If the id is unknown.
    """
    return FoodItemResponse.model_validate(FoodItemRepository(db).get_or_404(food_item_id))


@router.post("", response_model=FoodItemResponse, status_code=201)
def create_food_item(
    payload: FoodItemRequest,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
):
    """Add a food item to the catalog."""
    item = FoodItemRepository(db).add(models.FoodItem(**payload.model_dump()))
    logger.info("Food item %s created by user %s", item.id, current_user.id)
    return FoodItemResponse.model_validate(item)


@router.put("/{food_item_id}", response_model=FoodItemResponse)
def update_food_item(
    food_item_id: int,
    payload: FoodItemRequest,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
):
    """Replace a food item's fields.

    Raises:
        NotFoundError: If the id is unknown.
    """
    repo = FoodItemRepository(db)
    item = repo.update(repo.get_or_404(food_item_id), payload.model_dump())
    logger.info("Food item %s updated by user %s", item.id, current_user.id)
    return FoodItemResponse.model_validate(item)


@router.delete("/{food_item_id}", status_code=204)
def delete_food_item(
    food_item_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
):
    """Remove a food item from the catalog.

    Raises:
        NotFoundError: If the id is unknown.
        ConflictError: If a stored meal plan still uses the food.
    """
    repo = FoodItemRepository(db)
    repo.delete(repo.get_or_404(food_item_id))
    logger.info("Food item %s deleted by user %s", food_item_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
