"""
Workout database models.

Routines and logged sessions store their exercise structure as JSON;
the shape is validated by the API schemas at the service layer.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class WorkoutRoutine(SQLModel, table=True):
    """A training plan: a named set of workout days.

    ``is_template`` routines are readable by every user.  At most one
    routine per user is active (enforced by :class:`WorkoutRoutineService`).
    """

    __tablename__ = "workout_routines"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    name: str = Field(nullable=False, max_length=120)
    description: Optional[str] = Field(default=None, max_length=2000)
    level: str = Field(default="beginner", max_length=20)
    goal: str = Field(default="general", max_length=20)
    frequency: int = Field(default=3)

    # [{name, exercises: [{exercise_name, muscle_groups, sets, reps, rest_seconds}]}]
    days: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    is_active: bool = Field(default=False, index=True)
    is_template: bool = Field(default=False, index=True)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class WorkoutSession(SQLModel, table=True):
    """A performed workout."""

    __tablename__ = "workout_sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    routine_id: Optional[int] = Field(default=None, foreign_key="workout_routines.id")
    date: datetime.date = Field(nullable=False, index=True)

    duration_min: int = Field(default=0)
    # [{exercise_name, muscle_groups, sets: [{reps, weight_kg, rpe, completed}]}]
    exercises: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    notes: Optional[str] = Field(default=None, max_length=1000)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class VolumeProgression(SQLModel, table=True):
    """Weekly per-muscle volume feedback."""

    __tablename__ = "volume_progressions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    muscle_group: str = Field(nullable=False, max_length=40, index=True)
    # Monday of the recorded week
    week_start: datetime.date = Field(nullable=False, index=True)

    sets_performed: int = Field(nullable=False)
    target_sets: int = Field(nullable=False)
    adaptation_response: str = Field(nullable=False, max_length=10)
    fatigue_level: int = Field(nullable=False)
    notes: str = Field(default="", max_length=1000)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class TrainingAssessment(SQLModel, table=True):
    """Initial / periodic training questionnaire (free-form answers)."""

    __tablename__ = "training_assessments"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    assessment_data: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow, index=True)
