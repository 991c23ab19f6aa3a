"""
Nutrition diary repositories.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.nutrition import NutritionEntry, NutritionGoal


class NutritionEntryRepository:
    """Repository for NutritionEntry database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: NutritionEntry) -> NutritionEntry:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[NutritionEntry]:
        return self.session.get(NutritionEntry, entry_id)

    def get_by_user(
        self,
        user_id: int,
        start: Optional[datetime.date] = None,
        end: Optional[datetime.date] = None,
        meal_type: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[NutritionEntry]:
        """Entries in ``[start, end]``, most recent first."""
        statement = select(NutritionEntry).where(NutritionEntry.user_id == user_id)
        if start is not None:
            statement = statement.where(NutritionEntry.date >= start)
        if end is not None:
            statement = statement.where(NutritionEntry.date <= end)
        if meal_type is not None:
            statement = statement.where(NutritionEntry.meal_type == meal_type)
        statement = statement.order_by(NutritionEntry.date.desc(), NutritionEntry.id.desc())
        if limit is not None:
            statement = statement.limit(limit)
        return list(self.session.exec(statement).all())

    def update(self, entry: NutritionEntry) -> NutritionEntry:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False

    def clear_food(self, food_id: int) -> None:
        """Detach entries from a food database item that is about to be deleted."""
        statement = select(NutritionEntry).where(NutritionEntry.food_id == food_id)
        for entry in self.session.exec(statement).all():
            entry.food_id = None
            self.session.add(entry)


class NutritionGoalRepository:
    """Repository for NutritionGoal database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_active(self, user_id: int) -> Optional[NutritionGoal]:
        statement = (
            select(NutritionGoal)
            .where(NutritionGoal.user_id == user_id, NutritionGoal.is_active == True)  # noqa: E712
            .order_by(NutritionGoal.created_at.desc(), NutritionGoal.id.desc())
        )
        return self.session.exec(statement).first()

    def get_history(self, user_id: int) -> list[NutritionGoal]:
        statement = (
            select(NutritionGoal)
            .where(NutritionGoal.user_id == user_id)
            .order_by(NutritionGoal.created_at.desc(), NutritionGoal.id.desc())
        )
        return list(self.session.exec(statement).all())

    def replace_active(self, goal: NutritionGoal) -> NutritionGoal:
        """Deactivate the user's current goals and store *goal* as the active one."""
        statement = select(NutritionGoal).where(
            NutritionGoal.user_id == goal.user_id, NutritionGoal.is_active == True,  # noqa: E712
        )
        for previous in self.session.exec(statement).all():
            previous.is_active = False
            previous.updated_at = datetime.datetime.utcnow()
            self.session.add(previous)
        goal.is_active = True
        self.session.add(goal)
        self.session.commit()
        self.session.refresh(goal)
        return goal
