"""
Food database model.

Nutrition values are per serving (``serving_size`` + ``serving_unit``).
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class FoodItem(SQLModel, table=True):
    """A food in the shared food database."""

    __tablename__ = "food_database"

    id: Optional[int] = Field(default=None, primary_key=True)
    # Catalog key (e.g. "es-12" for the built-in Spanish catalog)
    external_id: Optional[str] = Field(default=None, unique=True, index=True, max_length=50)

    name: str = Field(nullable=False, max_length=200, index=True)
    brand: Optional[str] = Field(default=None, max_length=120)
    category: str = Field(nullable=False, max_length=60, index=True)
    subcategory: Optional[str] = Field(default=None, max_length=60)
    region: Optional[str] = Field(default=None, max_length=60)

    calories: float = Field(default=0.0)
    protein: float = Field(default=0.0)
    carbs: float = Field(default=0.0)
    fat: float = Field(default=0.0)
    fiber: Optional[float] = Field(default=None)
    sugar: Optional[float] = Field(default=None)

    serving_size: float = Field(default=100.0)
    serving_unit: str = Field(default="g", max_length=20)
    image_url: Optional[str] = Field(default=None, max_length=500)
    supermarkets: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
