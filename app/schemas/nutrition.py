"""
Nutrition diary API schemas: food entries, macro goals and daily stats.
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

MealType = Literal["breakfast", "lunch", "dinner", "snack"]
MEAL_TYPES: tuple[str, ...] = ("breakfast", "lunch", "dinner", "snack")


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------

class NutritionEntryCreate(BaseModel):
    date: datetime.date
    meal_type: MealType
    food_name: str = Field(..., min_length=1, max_length=200)
    food_id: Optional[int] = Field(None, description="Food database item this entry was taken from")
    quantity: Optional[float] = Field(None, gt=0)
    unit: Optional[str] = Field(None, max_length=20)
    calories: float = Field(0.0, ge=0)
    protein: float = Field(0.0, ge=0)
    carbs: float = Field(0.0, ge=0)
    fat: float = Field(0.0, ge=0)
    notes: Optional[str] = Field(None, max_length=1000)


class NutritionEntryUpdate(BaseModel):
    date: Optional[datetime.date] = None
    meal_type: Optional[MealType] = None
    food_name: Optional[str] = Field(None, min_length=1, max_length=200)
    food_id: Optional[int] = None
    quantity: Optional[float] = Field(None, gt=0)
    unit: Optional[str] = Field(None, max_length=20)
    calories: Optional[float] = Field(None, ge=0)
    protein: Optional[float] = Field(None, ge=0)
    carbs: Optional[float] = Field(None, ge=0)
    fat: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = Field(None, max_length=1000)


class NutritionEntryResponse(BaseModel):
    id: int
    user_id: int
    date: datetime.date
    meal_type: MealType
    food_name: str
    food_id: Optional[int]
    quantity: Optional[float]
    unit: Optional[str]
    calories: float
    protein: float
    carbs: float
    fat: float
    notes: Optional[str]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


# ---------------------------------------------------------------------------
# Goals
# ---------------------------------------------------------------------------

class NutritionGoalSet(BaseModel):
    """Daily targets: kcal and grams of each macro."""

    calories: float = Field(..., gt=0)
    protein: float = Field(..., ge=0)
    carbs: float = Field(..., ge=0)
    fat: float = Field(..., ge=0)


class NutritionGoalResponse(NutritionGoalSet):
    id: int
    user_id: int
    is_active: bool
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


# ---------------------------------------------------------------------------
# Stats
# ---------------------------------------------------------------------------

class MacroTotals(BaseModel):
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0


class DailyTotals(MacroTotals):
    entries: int = 0


class MealTotals(MacroTotals):
    count: int = 0


class MacroPercentages(BaseModel):
    """Share of macro calories (protein and carbs 4 kcal/g, fat 9 kcal/g)."""

    protein: float
    carbs: float
    fat: float


class NutritionTrendPoint(MacroTotals):
    date: datetime.date


class GoalProgress(BaseModel):
    """Percent of each daily target reached."""

    calories: float
    protein: float
    carbs: float
    fat: float


class NutritionStatsResponse(BaseModel):
    date: datetime.date
    totals: DailyTotals
    meal_totals: dict[str, MealTotals]
    macro_percentages: MacroPercentages
    trend: list[NutritionTrendPoint] = Field(..., description="Days with entries in the 7 days up to date")
    goal: Optional[NutritionGoalSet] = None
    goal_progress: Optional[GoalProgress] = None
