"""Schemas for profile and nutrition endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class ProfileRequest(BaseModel):
    """Payload for creating or updating the caller's profile."""

    age: int = Field(..., ge=15, le=100, examples=[30], description="Age in years (15-100)")
    gender: str = Field(..., min_length=1, examples=["male"], description="Gender (male/female)")
    height: float = Field(..., ge=120, le=250, examples=[175.0], description="Height in centimeters (120-250)")
    weight: float = Field(..., ge=30, le=300, examples=[75.0], description="Weight in kilograms (30-300)")
    activity_level: str = Field(..., min_length=1, examples=["moderately active"], description="Activity level: sedentary, lightly active, moderately active, very active, extra active")
    dietary_preference: str = Field(..., min_length=1, examples=["veg"], description="Dietary preference: veg or non-veg")
    goal: str = Field(..., min_length=1, examples=["lose weight"], description="Goal: lose weight, gain weight, maintain")
    meal_frequency: int = Field(3, ge=1, le=3, examples=[3], description="Meals per day (1-3)")
    body_fat_percentage: Optional[float] = Field(None, ge=3, le=70, examples=[18.5], description="Body fat percentage (3-70)")


class ProfileResponse(BaseModel):
    """Stored profile returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    age: int
    gender: str
    height: float
    weight: float
    activity_level: str
    dietary_preference: str
    goal: str
    meal_frequency: int
    body_fat_percentage: Optional[float] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class MacroBreakdown(BaseModel):
    """Daily macronutrient targets in grams."""

    protein: float
    carbs: float
    fats: float


class NutritionResponse(BaseModel):
    """Energy and macro targets derived from a profile."""

    bmr: float
    tdee: float
    target_calories: float
    macros: MacroBreakdown
