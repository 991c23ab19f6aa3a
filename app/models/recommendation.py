"""
Personalized recommendation model.

Recommendations are either generated from the user's own data
(volume landmarks, sleep profile) or written by a professional.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class PersonalizedRecommendation(SQLModel, table=True):
    """A recommendation addressed to one user."""

    __tablename__ = "personalized_recommendations"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    type: str = Field(nullable=False, max_length=20, index=True)
    title: str = Field(nullable=False, max_length=200)
    description: str = Field(nullable=False)
    priority: str = Field(default="medium", max_length=10)
    base_reason: str = Field(default="", max_length=500)
    data_points: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow, index=True)
    expires_at: Optional[datetime.datetime] = Field(default=None)

    implemented: bool = Field(default=False)
    result: Optional[str] = Field(default=None, max_length=1000)
    implemented_by: Optional[int] = Field(default=None, foreign_key="users.id")
    implemented_at: Optional[datetime.datetime] = Field(default=None)
