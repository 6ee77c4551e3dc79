"""Schemas for the recipe catalog endpoints."""

from pydantic import BaseModel, Field
from typing import List, Literal
from datetime import datetime

DietType = Literal["Vegetarian", "Non-Vegetarian"]


class MealItemRequest(BaseModel):
    """Payload for adding a recipe."""

    name: str = Field(..., min_length=1, examples=["Moong Dal Chilla"])
    diet_type: DietType = Field(..., examples=["Vegetarian"])
    calories: float = Field(..., ge=0, le=3000, examples=[220])
    protein: float = Field(..., ge=0, le=300, examples=[14])
    carbs: float = Field(..., ge=0, le=300, examples=[20])
    fats: float = Field(..., ge=0, le=300, examples=[8])
    categories: List[str] = Field(default_factory=list, examples=[["Weight Loss", "Diabetic-Friendly"]])


class MealItemResponse(BaseModel):
    """Recipe returned by the API with its categories decoded."""

    id: int
    name: str
    diet_type: str
    calories: float
    protein: float
    carbs: float
    fats: float
    categories: List[str]
    created_at: datetime


class MealItemBulkResponse(BaseModel):
    message: str
    count: int
