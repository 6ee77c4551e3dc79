"""Pytest fixtures for the Diet Planner tests.

Points the application at a throwaway SQLite file before anything imports
`database`, and rebuilds the schema (with the default food and recipe
catalogs) for every test.
"""
import os
import tempfile
from datetime import date
from types import SimpleNamespace

import pytest

_TMP_DIR = tempfile.mkdtemp(prefix="diet-planner-tests-")
os.environ["WRITE_DATABASE_URL"] = "sqlite:///" + os.path.join(_TMP_DIR, "test.db")
os.environ.pop("READ_DATABASE_URL", None)
os.environ.pop("MEAL_PLAN_SEED", None)
os.environ.setdefault("LOG_DIR", _TMP_DIR)

from database import models, seed_food_items, seed_meal_items  # noqa: E402
from database.database import WriteSessionLocal, write_engine  # noqa: E402
from database.models import Base  # noqa: E402


@pytest.fixture(autouse=True)
def reset_db():
    """Recreate all tables and seed the default food and recipe catalogs."""
    Base.metadata.drop_all(bind=write_engine)
    Base.metadata.create_all(bind=write_engine)
    session = WriteSessionLocal()
    try:
        seed_food_items(session)
        seed_meal_items(session)
    finally:
        session.close()
    yield


@pytest.fixture
def db():
    """Write session bound to the test database."""
    session = WriteSessionLocal()
    try:
        yield session
    finally:
        session.close()


def create_user(db, name="Jane Doe", email="jane@example.com"):
    user = models.User(name=name, email=email)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def create_profile(db, user, **overrides):
    fields = dict(
        age=25,
        gender="male",
        height=175.0,
        weight=70.0,
        activity_level="sedentary",
        dietary_preference="non-veg",
        goal="maintain",
        meal_frequency=3,
    )
    fields.update(overrides)
    profile = models.UserProfile(user_id=user.id, **fields)
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


def create_plan(db, user, plan_date=date(2024, 5, 1), meal_types=("breakfast", "lunch", "dinner")):
    """Store a plan whose meals each hold one serving of the first catalog food."""
    food = db.query(models.FoodItem).order_by(models.FoodItem.id).first()
    plan = models.MealPlan(user_id=user.id, plan_date=plan_date)
    for meal_type in meal_types:
        meal = models.Meal(
            meal_type=meal_type,
            total_calories=food.calories,
            total_protein=food.protein,
            total_carbs=food.carbs,
            total_fats=food.fats,
        )
        meal.food_items.append(models.MealFoodItem(food_item=food, quantity=1.0))
        plan.meals.append(meal)
    plan.total_calories = sum(m.total_calories for m in plan.meals)
    plan.total_protein = sum(m.total_protein for m in plan.meals)
    plan.total_carbs = sum(m.total_carbs for m in plan.meals)
    plan.total_fats = sum(m.total_fats for m in plan.meals)
    db.add(plan)
    db.commit()
    db.refresh(plan)
    return plan


@pytest.fixture
def user(db):
    return create_user(db)


@pytest.fixture
def other_user(db):
    return create_user(db, name="John Roe", email="john@example.com")


@pytest.fixture
def profile(db, user):
    return create_profile(db, user)


@pytest.fixture
def sample_profile():
    """Plain profile object for the pure calculators (25y male, 70kg, 175cm)."""
    return SimpleNamespace(
        age=25,
        gender="male",
        height=175.0,
        weight=70.0,
        activity_level="sedentary",
        dietary_preference="non-veg",
        goal="maintain",
        meal_frequency=3,
    )


@pytest.fixture
def client():
    """Create a test client for the FastAPI app."""
    from fastapi.testclient import TestClient
    from main import app

    with TestClient(app) as test_client:
        yield test_client
