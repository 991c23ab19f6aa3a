"""
Nutrition diary service: food entries, macro goals and daily stats.

Entries are private to their owner; entries of other users are reported
as not found.  An entry may point at a food database item, which must exist.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.food import FoodRepository
from app.db.repositories.nutrition import NutritionEntryRepository, NutritionGoalRepository
from app.models.nutrition import NutritionEntry, NutritionGoal
from app.routinize.nutrition_stats import compute_nutrition_stats
from app.schemas.nutrition import (
    NutritionEntryCreate,
    NutritionEntryResponse,
    NutritionEntryUpdate,
    NutritionGoalResponse,
    NutritionGoalSet,
    NutritionStatsResponse,
)

logger = logging.getLogger(__name__)


class NutritionService:
    """Service for the food diary."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = NutritionEntryRepository(session)
        self.goals = NutritionGoalRepository(session)
        self.foods = FoodRepository(session)

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    def create_entry(self, user_id: int, data: NutritionEntryCreate) -> NutritionEntryResponse:
        self._check_food(data.food_id)
        entry = self.repository.create(NutritionEntry(user_id=user_id, **data.model_dump()))
        logger.info("Logged %s entry %s on %s for user %s", entry.meal_type, entry.id, entry.date, user_id)
        return NutritionEntryResponse.model_validate(entry)

    def list_entries(
        self,
        user_id: int,
        day: Optional[datetime.date] = None,
        start: Optional[datetime.date] = None,
        end: Optional[datetime.date] = None,
        meal_type: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[NutritionEntryResponse]:
        """Entries most recent first; *day* overrides *start*/*end*."""
        if day is not None:
            start = end = day
        if start and end and start > end:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="start must not be after end")
        entries = self.repository.get_by_user(user_id, start, end, meal_type, limit)
        return [NutritionEntryResponse.model_validate(e) for e in entries]

    def get_entry(self, user_id: int, entry_id: int) -> NutritionEntryResponse:
        return NutritionEntryResponse.model_validate(self._get_owned_entry(user_id, entry_id))

    def update_entry(self, user_id: int, entry_id: int, data: NutritionEntryUpdate) -> NutritionEntryResponse:
        entry = self._get_owned_entry(user_id, entry_id)
        changes = data.model_dump(exclude_unset=True)
        if changes.get("food_id") is not None:
            self._check_food(changes["food_id"])
        for key, value in changes.items():
            if value is not None:
                setattr(entry, key, value)
        entry.updated_at = datetime.datetime.utcnow()
        entry = self.repository.update(entry)
        logger.info("Updated nutrition entry %s for user %s", entry_id, user_id)
        return NutritionEntryResponse.model_validate(entry)

    def delete_entry(self, user_id: int, entry_id: int) -> None:
        self._get_owned_entry(user_id, entry_id)
        self.repository.delete(entry_id)
        logger.info("Deleted nutrition entry %s for user %s", entry_id, user_id)

    # ------------------------------------------------------------------
    # Goals
    # ------------------------------------------------------------------

    def set_goal(self, user_id: int, data: NutritionGoalSet) -> NutritionGoalResponse:
        goal = self.goals.replace_active(NutritionGoal(user_id=user_id, **data.model_dump()))
        logger.info("Set nutrition goal %s for user %s (%s kcal)", goal.id, user_id, goal.calories)
        return NutritionGoalResponse.model_validate(goal)

    def get_goal(self, user_id: int) -> NutritionGoalResponse:
        goal = self.goals.get_active(user_id)
        if goal is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No nutrition goal set")
        return NutritionGoalResponse.model_validate(goal)

    def get_goal_history(self, user_id: int) -> list[NutritionGoalResponse]:
        return [NutritionGoalResponse.model_validate(g) for g in self.goals.get_history(user_id)]

    # ------------------------------------------------------------------
    # Stats
    # ------------------------------------------------------------------

    def get_stats(self, user_id: int, day: Optional[datetime.date] = None) -> NutritionStatsResponse:
        return compute_nutrition_stats(self.session, user_id, day or datetime.date.today())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_food(self, food_id: Optional[int]) -> None:
        if food_id is not None and self.foods.get_by_id(food_id) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Food not found")

    def _get_owned_entry(self, user_id: int, entry_id: int) -> NutritionEntry:
        entry = self.repository.get_by_id(entry_id)
        if not entry or entry.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Nutrition entry not found")
        return entry
