"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.sleep import SleepRepository
from app.db.repositories.workout import (
    TrainingAssessmentRepository,
    VolumeProgressionRepository,
    WorkoutRoutineRepository,
    WorkoutSessionRepository,
)
from app.db.repositories.food import FoodRepository
from app.db.repositories.nutrition import NutritionEntryRepository, NutritionGoalRepository
from app.db.repositories.wellness import ActivityLogRepository, JournalRepository, MoodEntryRepository
from app.db.repositories.recommendation import RecommendationRepository

__all__ = [
    "UserRepository",
    "SleepRepository",
    "WorkoutRoutineRepository",
    "WorkoutSessionRepository",
    "VolumeProgressionRepository",
    "TrainingAssessmentRepository",
    "FoodRepository",
    "NutritionEntryRepository",
    "NutritionGoalRepository",
    "JournalRepository",
    "MoodEntryRepository",
    "ActivityLogRepository",
    "RecommendationRepository",
]
