"""Tests for the CSV ingestion utilities in `data/ingest_food_items.py`."""
from pathlib import Path

from data.ingest_food_items import parse_food_items_csv, seed_food_items_from_csv
from database import models

CSV_PATH = str(Path(__file__).resolve().parents[1] / "data" / "fixtures" / "food_items.csv")


def test_parse_food_items_csv_has_expected_keys():
    rows = parse_food_items_csv(CSV_PATH)
    assert isinstance(rows, list) and len(rows) > 0
    first = rows[0]
    for key in ("name", "calories", "protein", "carbs", "fats", "serving_size", "serving_unit", "category", "is_vegetarian"):
        assert key in first


def test_parse_skips_rows_without_name_and_reads_flags():
    rows = {r["name"]: r for r in parse_food_items_csv(CSV_PATH)}
    assert len(rows) == 9
    assert rows["Lentils (cooked)"]["is_vegetarian"] is True
    assert rows["Chickpeas (cooked)"]["is_vegetarian"] is True
    assert rows["Almonds"]["is_vegetarian"] is True
    assert rows["Turkey Breast"]["is_vegetarian"] is False
    assert rows["Tuna (canned)"]["is_vegetarian"] is False
    assert rows["Milk"]["serving_unit"] == "ml"
    assert rows["Paneer"]["calories"] == 265.0


def test_seed_food_items_is_idempotent(db):
    before = db.query(models.FoodItem).count()
    added = seed_food_items_from_csv(CSV_PATH, session=db)
    after = db.query(models.FoodItem).count()
    assert added == 9
    assert after == before + added
    # Run again - should not duplicate
    added2 = seed_food_items_from_csv(CSV_PATH, session=db)
    assert added2 == 0
    assert db.query(models.FoodItem).count() == after
