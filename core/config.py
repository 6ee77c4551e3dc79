"""Application settings loaded from environment variables.

All values are read once at import time; tests override them by setting the
environment before importing `database` or `main`.
"""

import os
from typing import List, Optional

from core.exceptions import ConfigurationError


def _parse_bool(value: str) -> bool:
    return str(value).strip().lower() in ("1", "true", "yes", "y", "on")


class Settings:
    """Runtime configuration for the diet planner service."""

    def __init__(self, environ=None):
        env = os.environ if environ is None else environ

        self.WRITE_DATABASE_URL: str = env.get("WRITE_DATABASE_URL", "sqlite:///diet_planner.db")
        self.READ_DATABASE_URL: str = env.get("READ_DATABASE_URL", self.WRITE_DATABASE_URL)

        origins = env.get("ALLOWED_ORIGINS", "*")
        self.ALLOWED_ORIGINS: List[str] = [o.strip() for o in origins.split(",") if o.strip()]

        self.SEED_FOOD_ITEMS: bool = _parse_bool(env.get("SEED_FOOD_ITEMS", "true"))

        self.MEAL_PLAN_SEED: Optional[int] = None
        raw_seed = env.get("MEAL_PLAN_SEED")
        if raw_seed not in (None, ""):
            try:
                self.MEAL_PLAN_SEED = int(raw_seed)
            except ValueError:
                raise ConfigurationError("MEAL_PLAN_SEED must be an integer", config_key="MEAL_PLAN_SEED")

        try:
            self.MEAL_PLAN_MAX_DRAWS: int = int(env.get("MEAL_PLAN_MAX_DRAWS", "100"))
        except ValueError:
            raise ConfigurationError("MEAL_PLAN_MAX_DRAWS must be an integer", config_key="MEAL_PLAN_MAX_DRAWS")
        if self.MEAL_PLAN_MAX_DRAWS <= 0:
            raise ConfigurationError("MEAL_PLAN_MAX_DRAWS must be positive", config_key="MEAL_PLAN_MAX_DRAWS")


settings = Settings()
