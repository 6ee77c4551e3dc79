"""Schemas for the food catalog."""

from pydantic import BaseModel, ConfigDict, Field


class FoodItemRequest(BaseModel):
    """Payload for creating or replacing a food item. Nutrients are per serving."""

    name: str = Field(..., min_length=1, examples=["Chicken Breast"])
    calories: float = Field(..., ge=0, le=1000, examples=[165])
    protein: float = Field(..., ge=0, le=100, examples=[31])
    carbs: float = Field(..., ge=0, le=100, examples=[0])
    fats: float = Field(..., ge=0, le=100, examples=[3.6])
    serving_size: float = Field(..., gt=0, examples=[100])
    serving_unit: str = Field(..., min_length=1, examples=["g"])
    category: str = Field(..., min_length=1, examples=["Protein"])
    is_vegetarian: bool = Field(..., examples=[False])


class FoodItemResponse(BaseModel):
    """Food item returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    calories: float
    protein: float
    carbs: float
    fats: float
    serving_size: float
    serving_unit: str
    category: str
    is_vegetarian: bool
