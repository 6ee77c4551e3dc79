"""Utilities to ingest food catalog CSV files into the application's database.

This module provides:
- parse_food_items_csv(csv_path): returns a list of normalized food item dicts
- seed_food_items_from_csv(csv_path, session): idempotently seeds the food_items table

The CSV expected columns include at least `name` and the per-serving nutrient
columns `calories`, `protein`, `carbs`, `fats`. `serving_size`,
`serving_unit`, `category` and a vegetarian flag column (`vegetarian` or
`is_vegetarian`) are optional and fall back to sensible defaults.
"""
from __future__ import annotations

from typing import List, Dict
import math
import pandas as pd

from core.logger import get_logger
from database.database import WriteSessionLocal
from database import models

logger = get_logger("data.ingest_food_items")

NUTRIENT_COLUMNS = ("calories", "protein", "carbs", "fats")


def _truthy(val) -> bool:
    """Return True for common truthy CSV cell values.
    
    Handles numeric (>= 0.5), boolean, and string representations.
    """
    if val is None:
        return False
    if isinstance(val, bool):
        return val
    if isinstance(val, (int, float)):
        if isinstance(val, float) and math.isnan(val):
            return False
        return float(val) >= 0.5
    v = str(val).strip().lower()
    if v in ("1", "true", "yes", "y"):
        return True
    try:
        return float(v) >= 0.5
    except ValueError:
        return False


def _to_number(val, default: float = 0.0) -> float:
    """Coerce a CSV cell to a non-negative float."""
    if val is None:
        return default
    try:
        number = float(val)
    except (TypeError, ValueError):
        return default
    if math.isnan(number):
        return default
    return max(0.0, number)


def _to_text(val, default: str) -> str:
    if val is None or (isinstance(val, float) and math.isnan(val)):
        return default
    text = str(val).strip()
    return text or default


def parse_food_items_csv(csv_path: str) -> List[Dict]:
    """Parse the CSV and return a list of normalized food item dictionaries.
    
    Rows without a name are skipped. Negative or unparsable nutrient values
    are clamped to zero.

    Args:
        csv_path: Path to the food items CSV file.
        
    Returns:
        List of dictionaries with keys matching `models.FoodItem` columns.
    """
    logger.info("Parsing food items CSV: %s", csv_path)
    df = pd.read_csv(csv_path, encoding="utf-8")
    df = df.rename(columns=lambda s: s.strip().lower())

    veg_column = "is_vegetarian" if "is_vegetarian" in df.columns else "vegetarian"

    items = []
    for _, row in df.iterrows():
        name = _to_text(row.get("name"), "")
        if not name:
            continue

        item = {"name": name}
        for column in NUTRIENT_COLUMNS:
            item[column] = round(_to_number(row.get(column)), 1)
        item["serving_size"] = _to_number(row.get("serving_size"), 100.0) or 100.0
        item["serving_unit"] = _to_text(row.get("serving_unit"), "g")
        item["category"] = _to_text(row.get("category"), "Other")
        item["is_vegetarian"] = _truthy(row.get(veg_column))
        items.append(item)

    logger.info("Parsed %s food items from CSV", len(items))
    return items


def seed_food_items_from_csv(csv_path: str, session=None) -> int:
    """Idempotently seed the food_items table from the CSV file.

    If `session` is not supplied, a `WriteSessionLocal` session is used.
    Existing food items are matched by name and skipped to avoid duplicates.
    
    Args:
        csv_path: Path to the food items CSV file.
        session: Optional SQLAlchemy session. If None, creates a new one.
        
    Returns:
        Number of food items added.
    """
    close_session = False
    if session is None:
        session = WriteSessionLocal()
        close_session = True
    try:
        parsed = parse_food_items_csv(csv_path)
        existing_names = {name for (name,) in session.query(models.FoodItem.name).all()}
        added = 0
        for item in parsed:
            if item["name"] in existing_names:
                continue
            session.add(models.FoodItem(**item))
            existing_names.add(item["name"])
            added += 1
        if added:
            session.commit()
        logger.info("Seeded %s new food items into DB", added)
        return added
    finally:
        if close_session:
            session.close()


if __name__ == "__main__":
    import argparse
    from database import init_db

    p = argparse.ArgumentParser("Seed food items from CSV into the DB")
    p.add_argument("csv_path", nargs="?", default="data/fixtures/food_items.csv")
    args = p.parse_args()
    init_db()
    count = seed_food_items_from_csv(args.csv_path)
    print(f"Done: {count} added")
