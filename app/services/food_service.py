"""
Food database service.

Everyone can browse; only professionals (superusers) may change the
shared database.  Privilege is checked by the endpoint dependency.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.food import FoodRepository
from app.db.repositories.nutrition import NutritionEntryRepository
from app.models.food import FoodItem
from app.routinize.food_alternatives import compute_food_alternatives
from app.routinize.food_catalog import seed_food_catalog
from app.schemas.food import FoodAlternativesResponse, FoodCreate, FoodResponse, FoodUpdate

logger = logging.getLogger(__name__)


class FoodService:
    """Service for food database business logic."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = FoodRepository(session)

    def search(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
        region: Optional[str] = None,
        supermarket: Optional[str] = None,
        limit: int = 20,
    ) -> list[FoodResponse]:
        items = self.repository.search(query, category, region, supermarket, limit)
        return [FoodResponse.model_validate(i) for i in items]

    def get_categories(self) -> list[str]:
        return self.repository.get_categories()

    def get(self, food_id: int) -> FoodResponse:
        return FoodResponse.model_validate(self._get_or_404(food_id))

    def create(self, data: FoodCreate) -> FoodResponse:
        if data.external_id and self.repository.get_by_external_id(data.external_id):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Food with external id '{data.external_id}' already exists",
            )
        item = self.repository.create(FoodItem(**data.model_dump()))
        logger.info("Added food %s '%s'", item.id, item.name)
        return FoodResponse.model_validate(item)

    def update(self, food_id: int, data: FoodUpdate) -> FoodResponse:
        item = self._get_or_404(food_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(item, key, value)
        item.updated_at = datetime.datetime.utcnow()
        item = self.repository.update(item)
        logger.info("Updated food %s", food_id)
        return FoodResponse.model_validate(item)

    def delete(self, food_id: int) -> None:
        self._get_or_404(food_id)
        NutritionEntryRepository(self.session).clear_food(food_id)
        self.repository.delete(food_id)
        logger.info("Deleted food %s", food_id)

    def get_alternatives(
        self,
        food_id: int,
        query: Optional[str] = None,
        sort_by: str = "similarity",
        limit: Optional[int] = None,
    ) -> FoodAlternativesResponse:
        original = self._get_or_404(food_id)
        try:
            return compute_food_alternatives(
                self.session, original, limit or settings.FOOD_ALTERNATIVES_LIMIT, query, sort_by,
            )
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    def seed_catalog(self) -> int:
        """Insert the built-in Spanish catalog if missing.  Returns rows inserted."""
        return seed_food_catalog(self.session)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_404(self, food_id: int) -> FoodItem:
        item = self.repository.get_by_id(food_id)
        if not item:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Food not found")
        return item
