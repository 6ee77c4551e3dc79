"""Pydantic schema package for request and response models."""

from .user_schema import UserCreateRequest, UserResponse
from .profile_schema import ProfileRequest, ProfileResponse, NutritionResponse, MacroBreakdown
from .food_item_schema import FoodItemRequest, FoodItemResponse
from .meal_item_schema import MealItemRequest, MealItemResponse, MealItemBulkResponse
from .meal_plan_schema import MealPlanResponse, MealResponse, MealFoodItemResponse, MealCompletionResponse
from .progress_schema import (
    WeightEntryRequest,
    WeightEntryResponse,
    ComplianceEntryResponse,
    ProgressSummaryResponse,
)

__all__ = [
    "UserCreateRequest",
    "UserResponse",
    "ProfileRequest",
    "ProfileResponse",
    "NutritionResponse",
    "MacroBreakdown",
    "FoodItemRequest",
    "FoodItemResponse",
    "MealItemRequest",
    "MealItemResponse",
    "MealItemBulkResponse",
    "MealPlanResponse",
    "MealResponse",
    "MealFoodItemResponse",
    "MealCompletionResponse",
    "WeightEntryRequest",
    "WeightEntryResponse",
    "ComplianceEntryResponse",
    "ProgressSummaryResponse",
]
