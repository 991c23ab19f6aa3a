"""Pydantic schemas for request/response validation."""

from app.schemas.token import Token
from app.schemas.user import UserCreate, UserLogin, UserResponse
from app.schemas.sleep import (
    SleepAssessmentCreate,
    SleepAssessmentResponse,
    SleepEntryCreate,
    SleepEntryResponse,
    SleepGoalResponse,
    SleepGoalUpdate,
    SleepProfile,
    SleepRecommendation,
    SleepScoreResponse,
    SleepStatsResponse,
)
from app.schemas.workout import (
    TrainingAssessmentCreate,
    TrainingAssessmentResponse,
    VolumeLandmark,
    VolumeLandmarksResponse,
    VolumeProgressionCreate,
    VolumeProgressionResponse,
    VolumeRecommendation,
    VolumeTargets,
    WorkoutRoutineCreate,
    WorkoutRoutineResponse,
    WorkoutRoutineUpdate,
    WorkoutSessionCreate,
    WorkoutSessionResponse,
    WorkoutStatsResponse,
)
from app.schemas.food import FoodAlternative, FoodAlternativesResponse, FoodCreate, FoodResponse, FoodUpdate
from app.schemas.nutrition import (
    NutritionEntryCreate,
    NutritionEntryResponse,
    NutritionEntryUpdate,
    NutritionGoalResponse,
    NutritionGoalSet,
    NutritionStatsResponse,
)
from app.schemas.wellness import (
    ActivityLogCreate,
    ActivityLogResponse,
    JournalEntryCreate,
    JournalEntryResponse,
    MoodEntryCreate,
    MoodEntryResponse,
    WellnessStatsResponse,
)
from app.schemas.recommendation import RecommendationCreate, RecommendationImplement, RecommendationResponse

__all__ = [
    "Token",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "SleepAssessmentCreate",
    "SleepAssessmentResponse",
    "SleepEntryCreate",
    "SleepEntryResponse",
    "SleepGoalResponse",
    "SleepGoalUpdate",
    "SleepProfile",
    "SleepRecommendation",
    "SleepScoreResponse",
    "SleepStatsResponse",
    "TrainingAssessmentCreate",
    "TrainingAssessmentResponse",
    "VolumeLandmark",
    "VolumeLandmarksResponse",
    "VolumeProgressionCreate",
    "VolumeProgressionResponse",
    "VolumeRecommendation",
    "VolumeTargets",
    "WorkoutRoutineCreate",
    "WorkoutRoutineResponse",
    "WorkoutRoutineUpdate",
    "WorkoutSessionCreate",
    "WorkoutSessionResponse",
    "WorkoutStatsResponse",
    "FoodAlternative",
    "FoodAlternativesResponse",
    "FoodCreate",
    "FoodResponse",
    "FoodUpdate",
    "NutritionEntryCreate",
    "NutritionEntryResponse",
    "NutritionEntryUpdate",
    "NutritionGoalResponse",
    "NutritionGoalSet",
    "NutritionStatsResponse",
    "ActivityLogCreate",
    "ActivityLogResponse",
    "JournalEntryCreate",
    "JournalEntryResponse",
    "MoodEntryCreate",
    "MoodEntryResponse",
    "WellnessStatsResponse",
    "RecommendationCreate",
    "RecommendationImplement",
    "RecommendationResponse",
]
