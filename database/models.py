"""SQLAlchemy ORM models for the diet planner service.

This module defines the database schema: users and their profiles, the food
and recipe catalogs, generated meal plans (plan -> meals -> food-item lines)
and the append-only weight and compliance logs. Models stay behavior-free apart from
relationship wiring; business rules live in `services`.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import declarative_base, relationship
from core.dates import utc_now

Base = declarative_base()


class User(Base):
    """ORM model representing an application user."""

    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True, index=True)
    created_at = Column(DateTime, default=utc_now)

    profile = relationship("UserProfile", back_populates="user", uselist=False, cascade="all, delete-orphan")


class UserProfile(Base):
    """Body metrics and preferences that drive nutrition targets.

    One profile per user; created on first save and updated thereafter.
    """

    __tablename__ = "user_profiles"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True)
    age = Column(Integer, nullable=False)
    gender = Column(String, nullable=False)
    height = Column(Float, nullable=False)  # cm
    weight = Column(Float, nullable=False)  # kg
    activity_level = Column(String, nullable=False)
    dietary_preference = Column(String, nullable=False)
    goal = Column(String, nullable=False)
    meal_frequency = Column(Integer, nullable=False, default=3)
    body_fat_percentage = Column(Float, nullable=True)
    created_at = Column(DateTime, default=utc_now)
    updated_at = Column(DateTime, nullable=True)

    user = relationship("User", back_populates="profile")


class FoodItem(Base):
    """ORM model for a catalog food; nutrients are per serving."""

    __tablename__ = "food_items"
    __table_args__ = (
        CheckConstraint("calories >= 0 AND protein >= 0 AND carbs >= 0 AND fats >= 0", name="ck_food_items_nutrients"),
    )
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    calories = Column(Float, nullable=False)
    protein = Column(Float, nullable=False)
    carbs = Column(Float, nullable=False)
    fats = Column(Float, nullable=False)
    serving_size = Column(Float, nullable=False)
    serving_unit = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)
    is_vegetarian = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utc_now)
    updated_at = Column(DateTime, nullable=True)


class MealItem(Base):
    """ORM model for a ready-made recipe in the browsable recipe catalog.

    `diet_type` is "Vegetarian" or "Non-Vegetarian". Categories (goal labels
    such as "Weight Loss") are stored as a JSON-encoded list.
    """

    __tablename__ = "meal_items"
    __table_args__ = (
        CheckConstraint("calories >= 0 AND protein >= 0 AND carbs >= 0 AND fats >= 0", name="ck_meal_items_nutrients"),
    )
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    diet_type = Column(String, nullable=False, index=True)
    calories = Column(Float, nullable=False)
    protein = Column(Float, nullable=False)
    carbs = Column(Float, nullable=False)
    fats = Column(Float, nullable=False)
    categories = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utc_now)
    updated_at = Column(DateTime, nullable=True)


class MealPlan(Base):
    """A generated plan for one user on one calendar day."""

    __tablename__ = "meal_plans"
    __table_args__ = (
        UniqueConstraint("user_id", "plan_date", name="uq_meal_plans_user_date"),
    )
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    plan_date = Column(Date, nullable=False)
    total_calories = Column(Float, nullable=False, default=0.0)
    total_protein = Column(Float, nullable=False, default=0.0)
    total_carbs = Column(Float, nullable=False, default=0.0)
    total_fats = Column(Float, nullable=False, default=0.0)
    completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utc_now)
    updated_at = Column(DateTime, nullable=True)

    meals = relationship(
        "Meal",
        back_populates="meal_plan",
        cascade="all, delete-orphan",
        order_by="Meal.id",
    )


class Meal(Base):
    """A single meal slot (breakfast/lunch/dinner) inside a plan."""

    __tablename__ = "meals"
    id = Column(Integer, primary_key=True, index=True)
    meal_plan_id = Column(Integer, ForeignKey("meal_plans.id", ondelete="CASCADE"), nullable=False, index=True)
    meal_type = Column(String, nullable=False)
    total_calories = Column(Float, nullable=False, default=0.0)
    total_protein = Column(Float, nullable=False, default=0.0)
    total_carbs = Column(Float, nullable=False, default=0.0)
    total_fats = Column(Float, nullable=False, default=0.0)
    completed = Column(Boolean, nullable=False, default=False)

    meal_plan = relationship("MealPlan", back_populates="meals")
    food_items = relationship(
        "MealFoodItem",
        back_populates="meal",
        cascade="all, delete-orphan",
        order_by="MealFoodItem.id",
    )


class MealFoodItem(Base):
    """Line item: `quantity` servings of a catalog food inside a meal."""

    __tablename__ = "meal_food_items"
    __table_args__ = (
        CheckConstraint("quantity >= 0.1", name="ck_meal_food_items_quantity"),
    )
    id = Column(Integer, primary_key=True, index=True)
    meal_id = Column(Integer, ForeignKey("meals.id", ondelete="CASCADE"), nullable=False, index=True)
    food_item_id = Column(Integer, ForeignKey("food_items.id"), nullable=False)
    quantity = Column(Float, nullable=False, default=1.0)

    meal = relationship("Meal", back_populates="food_items")
    food_item = relationship("FoodItem")


class WeightEntry(Base):
    """Append-only body weight log entry."""

    __tablename__ = "weight_entries"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    entry_date = Column(Date, nullable=False)
    weight = Column(Float, nullable=False)
    note = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utc_now)


class ComplianceEntry(Base):
    """Recorded once per plan, when the last of its meals is completed."""

    __tablename__ = "compliance_entries"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    meal_plan_id = Column(Integer, ForeignKey("meal_plans.id", ondelete="SET NULL"), nullable=True, unique=True)
    entry_date = Column(Date, nullable=False)
    meals_completed = Column(Integer, nullable=False)
    total_meals = Column(Integer, nullable=False)
    compliance_rate = Column(Float, nullable=False)
    created_at = Column(DateTime, default=utc_now)
