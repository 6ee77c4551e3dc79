"""Database helpers: engines, session factories and DB initialization.

Provides read/write session factories, the FastAPI session dependencies and
an `init_db` helper that creates tables and seeds the food and recipe
catalogs when they are empty.
"""

import json
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from core.config import settings
from core.logger import get_logger
from .models import Base, FoodItem, MealItem
from data.food_items_dataset import FOOD_ITEMS_DATA
from data.meal_items_dataset import MEAL_ITEMS_DATA

logger = get_logger("database")

# Read/Write partitioning pattern
# In production, set WRITE_DATABASE_URL and READ_DATABASE_URL to different DB instances.
# For SQLite/demo this defaults to the same file but the interfaces are separated.
WRITE_DATABASE_URL = settings.WRITE_DATABASE_URL
READ_DATABASE_URL = settings.READ_DATABASE_URL


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores FOREIGN KEY clauses (and ON DELETE actions) unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _make_engine(url: str):
    if not url.startswith("sqlite"):
        return create_engine(url)
    engine = create_engine(url, connect_args={"check_same_thread": False})
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


# Engines
write_engine = _make_engine(WRITE_DATABASE_URL)
read_engine = _make_engine(READ_DATABASE_URL)

# Session factories
WriteSessionLocal = sessionmaker(bind=write_engine)
ReadSessionLocal = sessionmaker(bind=read_engine)


def seed_food_items(session) -> int:
    """Insert the default food catalog if the table is empty.

    Returns:
        Number of food items added.
    """
    if session.query(FoodItem).count() > 0:
        return 0
    for item in FOOD_ITEMS_DATA:
        session.add(FoodItem(**item))
    session.commit()
    logger.info("Seeded %s default food items", len(FOOD_ITEMS_DATA))
    return len(FOOD_ITEMS_DATA)


def seed_meal_items(session) -> int:
    """Insert the default recipe catalog if the table is empty.

    Categories are stored JSON-encoded.
    """
    if session.query(MealItem).count() > 0:
        return 0
    for item in MEAL_ITEMS_DATA:
        fields = dict(item)
        fields["categories"] = json.dumps(fields.get("categories", []))
        session.add(MealItem(**fields))
    session.commit()
    logger.info("Seeded %s default meal items", len(MEAL_ITEMS_DATA))
    return len(MEAL_ITEMS_DATA)


def init_db(seed: Optional[bool] = None):
    """Initialize database schema and seed the catalogs.

    Creates all tables using SQLAlchemy models and, unless disabled through
    `SEED_FOOD_ITEMS`, populates the food and recipe catalogs if empty.
    """
    Base.metadata.create_all(bind=write_engine)
    if seed is None:
        seed = settings.SEED_FOOD_ITEMS
    if not seed:
        return
    session = WriteSessionLocal()
    try:
        seed_food_items(session)
        seed_meal_items(session)
    finally:
        session.close()


# FastAPI dependencies
def get_db_write():
    """Yield a write-enabled SQLAlchemy session for the request scope."""
    db = WriteSessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_db_read():
    """Yield a read-only SQLAlchemy session for the request scope.

    Used for read endpoints where routing reads to a replica may be desired.
    """
    db = ReadSessionLocal()
    try:
        yield db
    finally:
        db.close()
