"""
Wellness database models: emotional journal, mood check-ins and
wellness activity logs.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class JournalEntry(SQLModel, table=True):
    """Emotional journal entry."""

    __tablename__ = "emotional_journal"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)
    title: str = Field(nullable=False, max_length=200)
    content: str = Field(nullable=False)
    emotion: str = Field(default="neutral", max_length=20)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class MoodEntry(SQLModel, table=True):
    """Mood / energy / stress check-in (1-5 scales)."""

    __tablename__ = "mood_entries"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)
    time: Optional[datetime.time] = Field(default=None)

    mood: int = Field(nullable=False)
    energy: int = Field(nullable=False)
    stress: int = Field(nullable=False)
    notes: Optional[str] = Field(default=None, max_length=1000)
    tags: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class WellnessActivityLog(SQLModel, table=True):
    """A completed wellness activity (meditation, breathing, walk...)."""

    __tablename__ = "wellness_activity_logs"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    activity_name: str = Field(nullable=False, max_length=120)
    category: str = Field(nullable=False, max_length=20)
    date: datetime.date = Field(nullable=False, index=True)
    duration_min: int = Field(nullable=False)
    rating: Optional[int] = Field(default=None)
    notes: Optional[str] = Field(default=None, max_length=1000)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
