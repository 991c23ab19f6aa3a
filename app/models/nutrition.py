"""
Nutrition diary models: logged food entries and per-user macro goals.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class NutritionEntry(SQLModel, table=True):
    """One food logged against a meal of a day."""

    __tablename__ = "nutrition"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)
    meal_type: str = Field(nullable=False, max_length=20)

    food_name: str = Field(nullable=False, max_length=200)
    # Optional link to the shared food database
    food_id: Optional[int] = Field(default=None, foreign_key="food_database.id")
    quantity: Optional[float] = Field(default=None)
    unit: Optional[str] = Field(default=None, max_length=20)

    calories: float = Field(default=0.0)
    protein: float = Field(default=0.0)
    carbs: float = Field(default=0.0)
    fat: float = Field(default=0.0)
    notes: Optional[str] = Field(default=None, max_length=1000)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class NutritionGoal(SQLModel, table=True):
    """Daily calorie and macro targets. Setting new goals deactivates the previous ones."""

    __tablename__ = "nutrition_goals"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    calories: float = Field(nullable=False)
    protein: float = Field(nullable=False)
    carbs: float = Field(nullable=False)
    fat: float = Field(nullable=False)
    is_active: bool = Field(default=True, index=True)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
