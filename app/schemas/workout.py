"""
Workout API schemas.

Routines (plans), logged sessions, and the volume-landmark views built
on top of logged sessions.
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

ExperienceLevel = Literal["beginner", "intermediate", "advanced"]
RoutineGoal = Literal["strength", "hypertrophy", "endurance", "general"]
VolumeGoal = Literal["strength", "hypertrophy", "endurance"]
VolumeStatus = Literal["below_mev", "optimal", "approaching_mrv", "above_mrv"]
AdaptationResponse = Literal["positive", "neutral", "negative"]
VolumeTrend = Literal["increasing", "stable", "decreasing", "inconsistent"]
AdjustmentType = Literal["increase", "maintain", "decrease", "deload"]


# ---------------------------------------------------------------------------
# Routines
# ---------------------------------------------------------------------------

class RoutineExercise(BaseModel):
    """A planned exercise inside a routine day."""

    exercise_name: str = Field(..., min_length=1, max_length=120)
    muscle_groups: list[str] = Field(default_factory=list)
    sets: int = Field(3, ge=1, le=20)
    reps: str = Field("8-12", max_length=20, description="Rep target, e.g. '5' or '8-12'")
    rest_seconds: int = Field(90, ge=0, le=900)


class RoutineDay(BaseModel):
    name: str = Field(..., min_length=1, max_length=60)
    exercises: list[RoutineExercise] = Field(default_factory=list)


class WorkoutRoutineCreate(BaseModel):
    """Schema for creating a routine."""

    name: str = Field(..., min_length=1, max_length=120)
    description: Optional[str] = Field(None, max_length=2000)
    level: ExperienceLevel = "beginner"
    goal: RoutineGoal = "general"
    frequency: int = Field(3, ge=1, le=7, description="Training days per week")
    days: list[RoutineDay] = Field(default_factory=list)
    is_template: bool = False


class WorkoutRoutineUpdate(BaseModel):
    """Schema for updating a routine.  All fields optional."""

    name: Optional[str] = Field(None, min_length=1, max_length=120)
    description: Optional[str] = Field(None, max_length=2000)
    level: Optional[ExperienceLevel] = None
    goal: Optional[RoutineGoal] = None
    frequency: Optional[int] = Field(None, ge=1, le=7)
    days: Optional[list[RoutineDay]] = None
    is_template: Optional[bool] = None


class WorkoutRoutineResponse(BaseModel):
    id: int
    user_id: int
    name: str
    description: Optional[str]
    level: ExperienceLevel
    goal: RoutineGoal
    frequency: int
    days: list[RoutineDay]
    is_active: bool
    is_template: bool
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------

class SetLog(BaseModel):
    reps: int = Field(..., ge=0, le=200)
    weight_kg: Optional[float] = Field(None, ge=0.0, le=1000.0)
    rpe: Optional[float] = Field(None, ge=1.0, le=10.0, description="Rate of perceived exertion")
    completed: bool = True


class SessionExercise(BaseModel):
    """An exercise as performed; each set credits every listed muscle group."""

    exercise_name: str = Field(..., min_length=1, max_length=120)
    muscle_groups: list[str] = Field(default_factory=list)
    sets: list[SetLog] = Field(default_factory=list)


class WorkoutSessionCreate(BaseModel):
    date: datetime.date
    routine_id: Optional[int] = None
    duration_min: int = Field(0, ge=0, le=600)
    exercises: list[SessionExercise] = Field(default_factory=list)
    notes: Optional[str] = Field(None, max_length=1000)


class WorkoutSessionResponse(BaseModel):
    id: int
    user_id: int
    routine_id: Optional[int]
    date: datetime.date
    duration_min: int
    exercises: list[SessionExercise]
    notes: Optional[str]
    created_at: datetime.datetime

    class Config:
        from_attributes = True


class WorkoutStatsResponse(BaseModel):
    total_sessions: int
    total_duration_min: int
    total_sets: int
    sessions_last_7_days: int


# ---------------------------------------------------------------------------
# Volume landmarks
# ---------------------------------------------------------------------------

class VolumeLandmark(BaseModel):
    """Landmarks for one muscle group compared to the current weekly volume."""

    muscle_group: str = Field(..., description="Canonical muscle-group key")
    display_name: str
    mev: int
    mav: int
    mrv: int
    current_weekly_sets: int
    status: VolumeStatus
    recommendation: str


class VolumeLandmarksResponse(BaseModel):
    level: ExperienceLevel
    week_start: datetime.date = Field(..., description="First day of the 7-day window")
    week_end: datetime.date = Field(..., description="Last day of the 7-day window (inclusive)")
    landmarks: list[VolumeLandmark]


class VolumeProgressionCreate(BaseModel):
    muscle_group: str = Field(..., min_length=1, max_length=40)
    sets_performed: int = Field(..., ge=0, le=100)
    target_sets: int = Field(..., ge=1, le=100)
    fatigue_level: int = Field(..., ge=1, le=10)
    notes: str = Field("", max_length=1000)


class VolumeProgressionResponse(BaseModel):
    id: int
    user_id: int
    muscle_group: str
    week_start: datetime.date
    sets_performed: int
    target_sets: int
    adaptation_response: AdaptationResponse
    fatigue_level: int
    notes: str
    created_at: datetime.datetime

    class Config:
        from_attributes = True


class VolumeRecommendation(BaseModel):
    muscle_group: str
    current_volume: int
    recommended_volume: int
    adjustment_type: AdjustmentType
    trend: VolumeTrend
    reasoning: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    timeline_weeks: int


class VolumeTargets(BaseModel):
    """Weekly set range for a training goal."""

    goal: VolumeGoal
    level: ExperienceLevel
    muscle_group: str
    min: int
    optimal: int
    max: int


class MuscleGroupInfo(BaseModel):
    name: str
    spanish_name: str
    mev: dict[str, int]
    mav: dict[str, int]
    mrv: dict[str, int]
    recovery_time_hours: int


# ---------------------------------------------------------------------------
# Training assessments
# ---------------------------------------------------------------------------

class TrainingAssessmentCreate(BaseModel):
    """Free-form questionnaire answers.

    ``experience_level`` is optional but, when present, must be a known
    level: it drives the default level of the volume-landmark views.
    """

    assessment_data: dict = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_experience_level(self) -> "TrainingAssessmentCreate":
        level = self.assessment_data.get("experience_level")
        if level is not None and level not in ("beginner", "intermediate", "advanced"):
            raise ValueError(f"Unknown experience_level '{level}'")
        return self


class TrainingAssessmentResponse(BaseModel):
    id: int
    user_id: int
    assessment_data: dict
    created_at: datetime.datetime

    class Config:
        from_attributes = True
