"""
Wellness API schemas: emotional journal, mood check-ins, activity logs
and their aggregate stats.
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

Emotion = Literal["happy", "sad", "angry", "anxious", "calm", "grateful", "neutral"]
ActivityCategory = Literal["mental", "emotional", "physical", "social", "spiritual"]


# ---------------------------------------------------------------------------
# Emotional journal
# ---------------------------------------------------------------------------

class JournalEntryCreate(BaseModel):
    date: datetime.date
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    emotion: Emotion = "neutral"


class JournalEntryUpdate(BaseModel):
    date: Optional[datetime.date] = None
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = Field(None, min_length=1)
    emotion: Optional[Emotion] = None


class JournalEntryResponse(BaseModel):
    id: int
    user_id: int
    date: datetime.date
    title: str
    content: str
    emotion: Emotion
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


# ---------------------------------------------------------------------------
# Mood check-ins
# ---------------------------------------------------------------------------

class MoodEntryCreate(BaseModel):
    """Mood, energy and stress on 1-5 scales."""

    date: datetime.date
    time: Optional[datetime.time] = None
    mood: int = Field(..., ge=1, le=5)
    energy: int = Field(..., ge=1, le=5)
    stress: int = Field(..., ge=1, le=5)
    notes: Optional[str] = Field(None, max_length=1000)
    tags: list[str] = Field(default_factory=list)


class MoodEntryUpdate(BaseModel):
    date: Optional[datetime.date] = None
    time: Optional[datetime.time] = None
    mood: Optional[int] = Field(None, ge=1, le=5)
    energy: Optional[int] = Field(None, ge=1, le=5)
    stress: Optional[int] = Field(None, ge=1, le=5)
    notes: Optional[str] = Field(None, max_length=1000)
    tags: Optional[list[str]] = None


class MoodEntryResponse(BaseModel):
    id: int
    user_id: int
    date: datetime.date
    time: Optional[datetime.time]
    mood: int
    energy: int
    stress: int
    notes: Optional[str]
    tags: list[str]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


# ---------------------------------------------------------------------------
# Activity logs
# ---------------------------------------------------------------------------

class ActivityLogCreate(BaseModel):
    activity_name: str = Field(..., min_length=1, max_length=120)
    category: ActivityCategory
    date: datetime.date
    duration_min: int = Field(..., ge=1, le=1440)
    rating: Optional[int] = Field(None, ge=1, le=5)
    notes: Optional[str] = Field(None, max_length=1000)


class ActivityLogUpdate(BaseModel):
    activity_name: Optional[str] = Field(None, min_length=1, max_length=120)
    category: Optional[ActivityCategory] = None
    date: Optional[datetime.date] = None
    duration_min: Optional[int] = Field(None, ge=1, le=1440)
    rating: Optional[int] = Field(None, ge=1, le=5)
    notes: Optional[str] = Field(None, max_length=1000)


class ActivityLogResponse(BaseModel):
    id: int
    user_id: int
    activity_name: str
    category: ActivityCategory
    date: datetime.date
    duration_min: int
    rating: Optional[int]
    notes: Optional[str]
    created_at: datetime.datetime

    class Config:
        from_attributes = True


# ---------------------------------------------------------------------------
# Stats
# ---------------------------------------------------------------------------

class MoodTrendPoint(BaseModel):
    date: datetime.date
    mood: int
    energy: int
    stress: int


class MoodStats(BaseModel):
    total_entries: int
    avg_mood: float
    avg_energy: float
    avg_stress: float
    trend: list[MoodTrendPoint] = Field(..., description="Chronological")


class ActivityStats(BaseModel):
    total_activities: int
    total_duration_min: int
    avg_duration_min: float
    by_category: dict[str, int]


class WellnessStatsResponse(BaseModel):
    """``mood`` / ``activities`` are null when there is nothing logged in the window."""

    mood: Optional[MoodStats]
    activities: Optional[ActivityStats]
