"""Schemas for weight, compliance and progress summary endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date, datetime


class WeightEntryRequest(BaseModel):
    """Payload for logging a body weight measurement."""

    entry_date: date = Field(..., examples=["2024-05-01"])
    weight: float = Field(..., ge=30, le=300, examples=[78.5], description="Weight in kilograms (30-300)")
    note: Optional[str] = Field(None, examples=["after morning run"])


class WeightEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    entry_date: date
    weight: float
    note: Optional[str] = None
    created_at: datetime


class ComplianceEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    meal_plan_id: Optional[int] = None
    entry_date: date
    meals_completed: int
    total_meals: int
    compliance_rate: float
    created_at: datetime


class ProgressSummaryResponse(BaseModel):
    """Weight change and mean compliance over a date range."""

    start_date: date
    end_date: date
    start_weight: float
    current_weight: float
    weight_change: float
    average_compliance_rate: float
