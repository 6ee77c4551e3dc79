"""Unit tests for the randomised meal-plan builder (no database)."""
import random
from datetime import date

import pytest

from core.exceptions import NotFoundError
from data.food_items_dataset import FOOD_ITEMS_DATA
from database import models
from services.meal_plan_generator import MealPlanGenerator, MAX_ITEMS_PER_MEAL


def make_food(id, name, calories, is_vegetarian=True, protein=5.0, carbs=10.0, fats=2.0):
    return models.FoodItem(
        id=id, name=name, calories=calories, protein=protein, carbs=carbs, fats=fats,
        serving_size=100, serving_unit="g", category="Test", is_vegetarian=is_vegetarian,
    )


def default_catalog():
    return [models.FoodItem(id=i + 1, **item) for i, item in enumerate(FOOD_ITEMS_DATA)]


class ScriptedRandom:
    """Returns foods by name in a fixed order."""

    def __init__(self, names):
        self.names = list(names)

    def choice(self, seq):
        name = self.names.pop(0)
        return next(f for f in seq if f.name == name)


class CountingRandom(random.Random):
    def __init__(self, seed=0):
        super().__init__(seed)
        self.draws = 0

    def choice(self, seq):
        self.draws += 1
        return super().choice(seq)


@pytest.mark.parametrize("frequency,slots", [
    (1, ("lunch",)),
    (2, ("breakfast", "dinner")),
    (3, ("breakfast", "lunch", "dinner")),
    (0, ("breakfast", "lunch", "dinner")),
    (7, ("breakfast", "lunch", "dinner")),
])
def test_meal_slots_lookup(frequency, slots):
    assert tuple(MealPlanGenerator.meal_slots(frequency)) == slots


def test_build_meal_accepts_duplicates_and_rejects_overshoot():
    foods = [make_food(1, "A", 300), make_food(2, "B", 500), make_food(3, "C", 200)]
    generator = MealPlanGenerator(rng=ScriptedRandom(["A", "B", "A"]), max_draws=50)

    meal = generator.build_meal("lunch", 600.0, foods)

    # B would have pushed the meal past 660 kcal, so it was skipped
    assert [line.food_item.name for line in meal.food_items] == ["A", "A"]
    assert all(line.quantity == 1.0 for line in meal.food_items)
    assert meal.total_calories == pytest.approx(600.0)
    assert meal.total_protein == pytest.approx(10.0)


def test_build_meal_stops_at_five_lines():
    foods = [make_food(1, "Small", 100)]
    generator = MealPlanGenerator(rng=random.Random(1), max_draws=100)

    meal = generator.build_meal("dinner", 10000.0, foods)

    assert len(meal.food_items) == MAX_ITEMS_PER_MEAL
    assert meal.total_calories == pytest.approx(500.0)


def test_build_meal_terminates_when_every_draw_is_rejected():
    foods = [make_food(1, "Huge", 1000)]
    rng = CountingRandom()
    generator = MealPlanGenerator(rng=rng, max_draws=25)

    meal = generator.build_meal("breakfast", 100.0, foods)

    assert meal.food_items == []
    assert meal.total_calories == 0.0
    assert rng.draws == 25


def test_generated_plan_totals_and_bounds(sample_profile):
    generator = MealPlanGenerator(rng=random.Random(7), max_draws=10000)

    plan = generator.generate(1, date(2024, 5, 1), sample_profile, default_catalog())

    assert sorted(m.meal_type for m in plan.meals) == ["breakfast", "dinner", "lunch"]
    per_meal = 2008.5 / 3
    for meal in plan.meals:
        assert 1 <= len(meal.food_items) <= MAX_ITEMS_PER_MEAL
        line_total = sum(line.quantity * line.food_item.calories for line in meal.food_items)
        assert meal.total_calories == pytest.approx(line_total)
        assert meal.total_fats == pytest.approx(
            sum(line.quantity * line.food_item.fats for line in meal.food_items))
        assert meal.total_calories <= per_meal * 1.1 + 1e-9
        assert len(meal.food_items) == MAX_ITEMS_PER_MEAL or meal.total_calories >= per_meal * 0.9
        assert meal.completed is False
    assert plan.total_calories == pytest.approx(sum(m.total_calories for m in plan.meals))
    assert plan.total_protein == pytest.approx(sum(m.total_protein for m in plan.meals))
    assert plan.total_carbs == pytest.approx(sum(m.total_carbs for m in plan.meals))
    assert plan.completed is False
    assert plan.user_id == 1
    assert plan.plan_date == date(2024, 5, 1)


def test_vegetarian_profile_only_gets_vegetarian_food(sample_profile):
    sample_profile.dietary_preference = "veg"
    generator = MealPlanGenerator(rng=random.Random(3))

    plan = generator.generate(1, date(2024, 5, 1), sample_profile, default_catalog())

    names = [line.food_item.name for meal in plan.meals for line in meal.food_items]
    assert names
    assert all(line.food_item.is_vegetarian for meal in plan.meals for line in meal.food_items)
    assert "Chicken Breast" not in names and "Salmon" not in names


@pytest.mark.parametrize("preference,expected", [
    ("non-veg", 3),
    ("Non-Vegetarian", 3),
    ("non_veg", 3),
    ("veg", 2),
    ("vegetarian", 2),
    ("vegan", 2),
])
def test_filter_food_items(preference, expected):
    foods = [make_food(1, "Tofu", 76), make_food(2, "Beef", 250, is_vegetarian=False), make_food(3, "Rice", 112)]
    assert len(MealPlanGenerator(rng=random.Random()).filter_food_items(foods, preference)) == expected


def test_meal_frequency_controls_meal_count(sample_profile):
    sample_profile.meal_frequency = 2
    plan = MealPlanGenerator(rng=random.Random(11)).generate(1, date(2024, 5, 1), sample_profile, default_catalog())
    assert [m.meal_type for m in plan.meals] == ["breakfast", "dinner"]


def test_same_seed_gives_same_plan(sample_profile):
    catalog = default_catalog()
    first = MealPlanGenerator(rng=random.Random(42)).generate(1, date(2024, 5, 1), sample_profile, catalog)
    second = MealPlanGenerator(rng=random.Random(42)).generate(1, date(2024, 5, 1), sample_profile, catalog)

    def names(plan):
        return [[line.food_item.name for line in meal.food_items] for meal in plan.meals]

    assert names(first) == names(second)


def test_missing_profile_raises_not_found():
    with pytest.raises(NotFoundError) as exc_info:
        MealPlanGenerator(rng=random.Random()).generate(1, date(2024, 5, 1), None, default_catalog())
    assert exc_info.value.status_code == 404
    assert "Profile" in exc_info.value.message


def test_no_eligible_food_raises_not_found(sample_profile):
    sample_profile.dietary_preference = "veg"
    foods = [make_food(1, "Beef", 250, is_vegetarian=False)]
    with pytest.raises(NotFoundError) as exc_info:
        MealPlanGenerator(rng=random.Random()).generate(1, date(2024, 5, 1), sample_profile, foods)
    assert exc_info.value.details["resource"] == "FoodItem"
