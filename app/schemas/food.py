"""
Food database API schemas.

Nutrition values are per serving (``serving_size`` ``serving_unit``).
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

NutritionalMatch = Literal["excellent", "good", "fair", "poor"]
AlternativeSort = Literal["similarity", "calories", "protein"]


class FoodBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    brand: Optional[str] = Field(None, max_length=120)
    category: str = Field(..., min_length=1, max_length=60)
    subcategory: Optional[str] = Field(None, max_length=60)
    region: Optional[str] = Field(None, max_length=60)

    calories: float = Field(..., ge=0.0, description="kcal per serving")
    protein: float = Field(0.0, ge=0.0, description="grams per serving")
    carbs: float = Field(0.0, ge=0.0, description="grams per serving")
    fat: float = Field(0.0, ge=0.0, description="grams per serving")
    fiber: Optional[float] = Field(None, ge=0.0)
    sugar: Optional[float] = Field(None, ge=0.0)

    serving_size: float = Field(100.0, gt=0.0)
    serving_unit: str = Field("g", max_length=20)
    image_url: Optional[str] = Field(None, max_length=500)
    supermarkets: list[str] = Field(default_factory=list)


class FoodCreate(FoodBase):
    """Schema for adding a food (professionals only)."""

    external_id: Optional[str] = Field(None, max_length=50, description="Catalog key, e.g. 'es-12'")


class FoodUpdate(BaseModel):
    """Schema for editing a food.  All fields optional."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    brand: Optional[str] = Field(None, max_length=120)
    category: Optional[str] = Field(None, min_length=1, max_length=60)
    subcategory: Optional[str] = Field(None, max_length=60)
    region: Optional[str] = Field(None, max_length=60)
    calories: Optional[float] = Field(None, ge=0.0)
    protein: Optional[float] = Field(None, ge=0.0)
    carbs: Optional[float] = Field(None, ge=0.0)
    fat: Optional[float] = Field(None, ge=0.0)
    fiber: Optional[float] = Field(None, ge=0.0)
    sugar: Optional[float] = Field(None, ge=0.0)
    serving_size: Optional[float] = Field(None, gt=0.0)
    serving_unit: Optional[str] = Field(None, max_length=20)
    image_url: Optional[str] = Field(None, max_length=500)
    supermarkets: Optional[list[str]] = None


class FoodResponse(FoodBase):
    id: int
    external_id: Optional[str]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


class FoodAlternative(BaseModel):
    """A candidate replacement and how far its macros are from the original."""

    food: FoodResponse
    calories_diff: float
    protein_diff: float
    carbs_diff: float
    fat_diff: float
    similarity_score: float = Field(..., ge=0.0, description="Weighted relative difference; lower is closer")
    similarity_percent: int = Field(..., ge=0, le=100)
    nutritional_match: NutritionalMatch


class FoodAlternativesResponse(BaseModel):
    original: FoodResponse
    sort_by: AlternativeSort
    alternatives: list[FoodAlternative]
