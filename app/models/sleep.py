"""
Sleep database models.

- ``sleep_entries``: one logged night per user per date.
- ``sleep_assessments``: questionnaire answers (the sleep profile).
  The most recent row is the active profile.
- ``sleep_goals``: one target per user.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, UniqueConstraint
from sqlmodel import Field, SQLModel


class SleepEntry(SQLModel, table=True):
    """A single night of sleep."""

    __tablename__ = "sleep_entries"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_sleep_user_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    bed_time: datetime.time = Field(nullable=False)
    wake_time: datetime.time = Field(nullable=False)
    duration_min: int = Field(nullable=False)
    quality: int = Field(nullable=False)

    # Phases (optional, usually from a wearable)
    deep_sleep_min: Optional[int] = Field(default=None)
    rem_sleep_min: Optional[int] = Field(default=None)
    light_sleep_min: Optional[int] = Field(default=None)
    awake_min: Optional[int] = Field(default=None)

    notes: Optional[str] = Field(default=None, max_length=1000)
    tags: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class SleepAssessment(SQLModel, table=True):
    """Sleep questionnaire answers."""

    __tablename__ = "sleep_assessments"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    average_sleep_hours: float = Field(default=7.0)
    bed_time: datetime.time = Field(default=datetime.time(23, 0))
    wake_time: datetime.time = Field(default=datetime.time(7, 0))
    sleep_latency_min: int = Field(default=15)
    sleep_quality: str = Field(default="fair", max_length=20)
    wake_up_frequency: str = Field(default="sometimes", max_length=20)
    morning_feel: str = Field(default="neutral", max_length=20)

    # Environment
    room_temperature: str = Field(default="comfortable", max_length=20)
    noise_level: str = Field(default="quiet", max_length=20)
    light_level: str = Field(default="dark", max_length=20)

    disruptors: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    disorders: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    sleep_goal: str = Field(default="feel_more_rested", max_length=30)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow, index=True)


class SleepGoal(SQLModel, table=True):
    """User's sleep targets."""

    __tablename__ = "sleep_goals"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, unique=True, index=True)

    target_duration_min: int = Field(default=480)
    target_bed_time: datetime.time = Field(default=datetime.time(23, 0))
    target_wake_time: datetime.time = Field(default=datetime.time(7, 0))

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
