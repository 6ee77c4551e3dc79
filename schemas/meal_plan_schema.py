"""Schemas for meal plans and meal completion."""

from pydantic import BaseModel, ConfigDict
from typing import List
from datetime import date

from .food_item_schema import FoodItemResponse


class MealFoodItemResponse(BaseModel):
    """A food line inside a meal; quantity is in servings."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    food_item_id: int
    quantity: float
    food_item: FoodItemResponse


class MealResponse(BaseModel):
    """A meal slot with its lines and totals."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    meal_type: str
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fats: float
    completed: bool
    food_items: List[MealFoodItemResponse]


class MealPlanResponse(BaseModel):
    """A user's plan for one day."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    plan_date: date
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fats: float
    completed: bool
    meals: List[MealResponse]


class MealCompletionResponse(BaseModel):
    """Outcome of marking a meal completed."""

    message: str
    meal_id: int
    meal_plan_id: int
    plan_completed: bool
    compliance_recorded: bool
