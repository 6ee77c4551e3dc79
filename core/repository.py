"""Repository classes for database operations.

`BaseRepository` covers single-object lookups and writes for one model;
the subclasses add the aggregate-specific queries used by the services:
the food and recipe catalogs, meal plans by user/day, and the weight and
compliance logs by date range.
"""

import json
from datetime import date
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload
from typing import TypeVar, Generic, Type, Optional, List, Any, Dict
from core.dates import utc_now
from core.exceptions import ConflictError, NotFoundError
from database.models import Base
from database import models

T = TypeVar('T', bound=Base)


class BaseRepository(Generic[T]):
    """Lookups and committed writes for a single model class.

    Every write commits on its own. Services that need several statements
    in one transaction work on the session directly.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
    """

    def __init__(self, model: Type[T], session: Session):
        self.model = model
        self.session = session

    def get(self, id: Any) -> Optional[T]:
        return self.session.get(self.model, id)

    def get_or_404(self, id: Any) -> T:
        """Return the object with primary key `id`.

        Raises:
            NotFoundError: If no row has that key.
        """
        obj = self.get(id)
        if obj is None:
            raise NotFoundError(self.model.__name__, id)
        return obj

    def add(self, obj: T) -> T:
        return save(self.session, obj)

    def add_all(self, objs: List[T]) -> List[T]:
        """Insert several objects in one commit."""
        self.session.add_all(objs)
        self.session.commit()
        for obj in objs:
            self.session.refresh(obj)
        return objs

    def update(self, obj: T, fields: Dict[str, Any]) -> T:
        """Assign `fields`, stamp `updated_at` when the model has one, commit."""
        for name, value in fields.items():
            setattr(obj, name, value)
        if hasattr(obj, "updated_at"):
            obj.updated_at = utc_now()
        return save(self.session, obj)

    def delete(self, obj: T) -> None:
        """Delete and commit.

        Raises:
            ConflictError: If other rows still reference the object.
        """
        identifier = obj.id
        self.session.delete(obj)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise ConflictError(f"{self.model.__name__} '{identifier}' is still referenced")


class FoodItemRepository(BaseRepository[models.FoodItem]):
    """Read/write access to the food catalog."""

    def __init__(self, session: Session):
        super().__init__(models.FoodItem, session)

    def list(self, category: Optional[str] = None, is_vegetarian: Optional[bool] = None) -> List[models.FoodItem]:
        """List food items, optionally filtered by category and vegetarian flag."""
        query = self.session.query(models.FoodItem)
        if category:
            query = query.filter(models.FoodItem.category == category)
        if is_vegetarian is not None:
            query = query.filter(models.FoodItem.is_vegetarian == is_vegetarian)
        return query.order_by(models.FoodItem.id).all()

    def categories(self) -> List[str]:
        rows = self.session.query(models.FoodItem.category).distinct().order_by(models.FoodItem.category).all()
        return [category for (category,) in rows]

    def is_referenced(self, food_item_id: int) -> bool:
        """Whether any stored meal still holds a line for this food."""
        line = (
            self.session.query(models.MealFoodItem.id)
            .filter(models.MealFoodItem.food_item_id == food_item_id)
            .first()
        )
        return line is not None

    def delete(self, obj: models.FoodItem) -> None:
        """Delete a food that no stored meal plan uses.

        Raises:
            ConflictError: If a stored meal still holds the food.
        """
        if self.is_referenced(obj.id):
            raise ConflictError(
                f"Food item '{obj.id}' is used by stored meal plans and cannot be deleted",
                field="food_item_id",
            )
        super().delete(obj)


def decode_categories(raw: Optional[str]) -> List[str]:
    """Decode the JSON-encoded category list of a recipe."""
    if not raw:
        return []
    return json.loads(raw)


class MealItemRepository(BaseRepository[models.MealItem]):
    """Read/write access to the recipe catalog."""

    def __init__(self, session: Session):
        super().__init__(models.MealItem, session)

    def list(self, diet_type: Optional[str] = None, category: Optional[str] = None) -> List[models.MealItem]:
        """List recipes, optionally filtered by diet type and category.

        Both filters are case-insensitive; `category` must match one of the
        recipe's categories exactly.
        """
        items = self.session.query(models.MealItem).order_by(models.MealItem.id).all()
        if diet_type:
            items = [i for i in items if i.diet_type.lower() == diet_type.strip().lower()]
        if category:
            wanted = category.strip().lower()
            items = [i for i in items if wanted in (c.lower() for c in decode_categories(i.categories))]
        return items

    def categories(self) -> List[str]:
        """Sorted union of all recipe categories."""
        found = set()
        for (raw,) in self.session.query(models.MealItem.categories).all():
            found.update(c.strip() for c in decode_categories(raw))
        return sorted(c for c in found if c)


class MealPlanRepository(BaseRepository[models.MealPlan]):
    """Meal plans with their nested meals and food-item lines."""

    def __init__(self, session: Session):
        super().__init__(models.MealPlan, session)

    def _with_children(self):
        return self.session.query(models.MealPlan).options(
            selectinload(models.MealPlan.meals)
            .selectinload(models.Meal.food_items)
            .selectinload(models.MealFoodItem.food_item)
        )

    def get_for_day(self, user_id: int, plan_date: date) -> Optional[models.MealPlan]:
        return (
            self._with_children()
            .filter(models.MealPlan.user_id == user_id, models.MealPlan.plan_date == plan_date)
            .first()
        )

    def delete_for_day(self, user_id: int, plan_date: date) -> int:
        """Delete every plan of the user on that day, cascading to meals and lines.

        Compliance entries recorded for those plans are kept and unlinked.
        Does not commit; the caller owns the transaction.

        Returns:
            Number of plans removed.
        """
        plans = (
            self.session.query(models.MealPlan)
            .filter(models.MealPlan.user_id == user_id, models.MealPlan.plan_date == plan_date)
            .all()
        )
        if not plans:
            return 0
        plan_ids = [plan.id for plan in plans]
        # a reused plan id must not inherit an old entry
        (
            self.session.query(models.ComplianceEntry)
            .filter(models.ComplianceEntry.meal_plan_id.in_(plan_ids))
            .update({models.ComplianceEntry.meal_plan_id: None}, synchronize_session="fetch")
        )
        for plan in plans:
            self.session.delete(plan)
        # deletes must reach the database before the replacement insert
        self.session.flush()
        return len(plans)

    def history(self, user_id: int, start_date: Optional[date] = None, end_date: Optional[date] = None) -> List[models.MealPlan]:
        """Return the user's plans within optional bounds, newest first."""
        query = self._with_children().filter(models.MealPlan.user_id == user_id)
        if start_date is not None:
            query = query.filter(models.MealPlan.plan_date >= start_date)
        if end_date is not None:
            query = query.filter(models.MealPlan.plan_date <= end_date)
        return query.order_by(models.MealPlan.plan_date.desc()).all()


def _in_range(query, column, start_date: Optional[date], end_date: Optional[date]):
    if start_date is not None:
        query = query.filter(column >= start_date)
    if end_date is not None:
        query = query.filter(column <= end_date)
    return query


class WeightEntryRepository(BaseRepository[models.WeightEntry]):
    """Append-only weight log."""

    def __init__(self, session: Session):
        super().__init__(models.WeightEntry, session)

    def in_range(self, user_id: int, start_date: Optional[date] = None, end_date: Optional[date] = None) -> List[models.WeightEntry]:
        """Entries for the user within optional inclusive bounds, oldest first."""
        query = self.session.query(models.WeightEntry).filter(models.WeightEntry.user_id == user_id)
        query = _in_range(query, models.WeightEntry.entry_date, start_date, end_date)
        return query.order_by(models.WeightEntry.entry_date, models.WeightEntry.id).all()


class ComplianceEntryRepository(BaseRepository[models.ComplianceEntry]):
    """Append-only compliance log."""

    def __init__(self, session: Session):
        super().__init__(models.ComplianceEntry, session)

    def for_plan(self, meal_plan_id: int) -> Optional[models.ComplianceEntry]:
        return (
            self.session.query(models.ComplianceEntry)
            .filter(models.ComplianceEntry.meal_plan_id == meal_plan_id)
            .first()
        )

    def in_range(self, user_id: int, start_date: Optional[date] = None, end_date: Optional[date] = None) -> List[models.ComplianceEntry]:
        """Entries for the user within optional inclusive bounds, oldest first."""
        query = self.session.query(models.ComplianceEntry).filter(models.ComplianceEntry.user_id == user_id)
        query = _in_range(query, models.ComplianceEntry.entry_date, start_date, end_date)
        return query.order_by(models.ComplianceEntry.entry_date, models.ComplianceEntry.id).all()


def save(session: Session, obj: Base) -> Base:
    """Add, commit and refresh an object."""
    session.add(obj)
    session.commit()
    session.refresh(obj)
    return obj
