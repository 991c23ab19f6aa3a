"""
Sleep API schemas.

Three groups:

- nightly entries (log + stats),
- the sleep profile (questionnaire) and its 0-100 score,
- sleep goals.
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

SleepQuality = Literal["very_good", "good", "fair", "poor", "very_poor"]
WakeUpFrequency = Literal["never", "rarely", "sometimes", "often", "very_often"]
MorningFeel = Literal["very_rested", "rested", "neutral", "tired", "very_tired"]
RoomTemperature = Literal["too_cold", "cold", "comfortable", "warm", "too_warm"]
NoiseLevel = Literal["very_quiet", "quiet", "moderate", "noisy", "very_noisy"]
LightLevel = Literal["very_dark", "dark", "dim", "bright"]
SleepDisruptor = Literal["caffeine", "alcohol", "screen_time", "exercise", "heavy_meal"]
SleepDisorder = Literal["snoring", "sleep_apnea", "insomnia", "restless_legs", "nightmares", "sleepwalking"]
SleepGoalType = Literal["fall_asleep_faster", "sleep_longer", "reduce_wakeups", "feel_more_rested",
                        "consistent_schedule"]


# ---------------------------------------------------------------------------
# Nightly entries
# ---------------------------------------------------------------------------

class SleepEntryCreate(BaseModel):
    """Schema for logging (or merging into) a night of sleep."""

    bed_time: datetime.time = Field(..., description="Time the user went to bed (HH:MM)")
    wake_time: datetime.time = Field(..., description="Time the user woke up (HH:MM)")
    duration_min: Optional[int] = Field(
        None, ge=0, le=1440,
        description="Total sleep (minutes). Derived from bed/wake time when omitted.",
    )
    quality: int = Field(..., ge=1, le=5, description="Subjective quality 1-5")
    deep_sleep_min: Optional[int] = Field(None, ge=0, le=600)
    rem_sleep_min: Optional[int] = Field(None, ge=0, le=600)
    light_sleep_min: Optional[int] = Field(None, ge=0, le=900)
    awake_min: Optional[int] = Field(None, ge=0, le=480)
    notes: Optional[str] = Field(None, max_length=1000)
    tags: list[str] = Field(default_factory=list)


class SleepEntryResponse(BaseModel):
    """Schema for a sleep entry in API responses."""

    id: int
    user_id: int
    date: datetime.date
    bed_time: datetime.time
    wake_time: datetime.time
    duration_min: int
    quality: int
    deep_sleep_min: Optional[int]
    rem_sleep_min: Optional[int]
    light_sleep_min: Optional[int]
    awake_min: Optional[int]
    notes: Optional[str]
    tags: list[str]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


class SleepTrendPoint(BaseModel):
    date: datetime.date
    duration_min: int
    quality: int


class SleepStatsResponse(BaseModel):
    """Aggregates and entry-based sleep score over a date window."""

    total_entries: int
    avg_duration_min: float
    avg_quality: float
    avg_deep_sleep_min: float
    avg_rem_sleep_min: float
    avg_light_sleep_min: float
    avg_awake_min: float
    trend: list[SleepTrendPoint] = Field(..., description="Most recent 7 nights, oldest first")
    bedtime_consistency_min: float = Field(..., description="Std deviation of bedtimes (minutes)")
    waketime_consistency_min: float = Field(..., description="Std deviation of wake times (minutes)")
    duration_score: float
    quality_score: float
    consistency_score: float
    sleep_score: int = Field(..., ge=0, le=100)


# ---------------------------------------------------------------------------
# Sleep profile (assessment)
# ---------------------------------------------------------------------------

class SleepProfile(BaseModel):
    """Sleep questionnaire answers.  Defaults form the default profile."""

    average_sleep_hours: float = Field(7.0, ge=0.0, le=24.0)
    bed_time: datetime.time = datetime.time(23, 0)
    wake_time: datetime.time = datetime.time(7, 0)
    sleep_latency_min: int = Field(15, ge=0, le=300)
    sleep_quality: SleepQuality = "fair"
    wake_up_frequency: WakeUpFrequency = "sometimes"
    morning_feel: MorningFeel = "neutral"
    room_temperature: RoomTemperature = "comfortable"
    noise_level: NoiseLevel = "quiet"
    light_level: LightLevel = "dark"
    disruptors: list[SleepDisruptor] = Field(default_factory=list)
    disorders: list[SleepDisorder] = Field(default_factory=list)
    sleep_goal: SleepGoalType = "feel_more_rested"


class SleepAssessmentCreate(SleepProfile):
    """Schema for submitting a sleep questionnaire."""
    pass


class SleepAssessmentResponse(SleepProfile):
    """Stored (or default) sleep profile."""

    id: Optional[int] = None
    is_default: bool = Field(False, description="True when no assessment has been submitted yet")
    created_at: Optional[datetime.datetime] = None

    class Config:
        from_attributes = True


class SleepScoreResponse(BaseModel):
    """Profile-based sleep score; every component is 0-100."""

    overall: int = Field(..., ge=0, le=100)
    duration: int = Field(..., ge=0, le=100)
    quality: int = Field(..., ge=0, le=100)
    consistency: float = Field(..., ge=0.0, le=100.0)
    efficiency: int = Field(..., ge=0, le=100)
    consistency_source: Literal["entries", "default"] = Field(
        ..., description="Whether consistency comes from logged nights or the default value",
    )


class SleepRecommendation(BaseModel):
    category: Literal["environment", "habits", "schedule", "relaxation", "nutrition"]
    title: str
    description: str
    priority: Literal["high", "medium", "low"]
    implementation_difficulty: Literal["easy", "moderate", "challenging"]
    expected_impact: Literal["high", "medium", "low"]


# ---------------------------------------------------------------------------
# Goals
# ---------------------------------------------------------------------------

class SleepGoalUpdate(BaseModel):
    target_duration_min: int = Field(480, ge=180, le=720)
    target_bed_time: datetime.time = datetime.time(23, 0)
    target_wake_time: datetime.time = datetime.time(7, 0)


class SleepGoalResponse(SleepGoalUpdate):
    id: int
    user_id: int
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True
