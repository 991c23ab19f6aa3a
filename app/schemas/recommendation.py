"""
Personalized recommendation API schemas.
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

RecommendationType = Literal["training", "nutrition", "recovery", "lifestyle"]
RecommendationPriority = Literal["high", "medium", "low"]


class RecommendationCreate(BaseModel):
    """Schema for a professional writing a recommendation for a client."""

    type: RecommendationType
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    priority: RecommendationPriority = "medium"
    base_reason: str = Field("", max_length=500)
    data_points: dict = Field(default_factory=dict)
    expires_at: Optional[datetime.datetime] = None


class RecommendationImplement(BaseModel):
    result: str = Field(..., min_length=1, max_length=1000, description="Observed outcome")


class RecommendationResponse(BaseModel):
    id: int
    user_id: int
    type: RecommendationType
    title: str
    description: str
    priority: RecommendationPriority
    base_reason: str
    data_points: dict
    created_at: datetime.datetime
    expires_at: Optional[datetime.datetime]
    implemented: bool
    result: Optional[str]
    implemented_by: Optional[int]
    implemented_at: Optional[datetime.datetime]

    class Config:
        from_attributes = True
