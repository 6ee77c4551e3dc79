"""Database package: ORM models and session helpers."""

from .database import (
    write_engine,
    read_engine,
    WriteSessionLocal,
    ReadSessionLocal,
    init_db,
    seed_food_items,
    seed_meal_items,
    get_db_write,
    get_db_read,
)
from . import models

__all__ = [
    "write_engine",
    "read_engine",
    "WriteSessionLocal",
    "ReadSessionLocal",
    "init_db",
    "seed_food_items",
    "seed_meal_items",
    "get_db_write",
    "get_db_read",
    "models",
]
