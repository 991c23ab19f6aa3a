"""Business logic services."""

from app.services.user_service import UserService
from app.services.sleep_service import SleepService
from app.services.workout_routine_service import WorkoutRoutineService
from app.services.workout_session_service import WorkoutSessionService
from app.services.volume_service import VolumeService
from app.services.food_service import FoodService
from app.services.nutrition_service import NutritionService
from app.services.wellness_service import ActivityLogService, JournalService, MoodService, WellnessStatsService
from app.services.recommendation_service import RecommendationService
from app.services.assessment_service import AssessmentService

__all__ = [
    "UserService",
    "SleepService",
    "WorkoutRoutineService",
    "WorkoutSessionService",
    "VolumeService",
    "FoodService",
    "NutritionService",
    "JournalService",
    "MoodService",
    "ActivityLogService",
    "WellnessStatsService",
    "RecommendationService",
    "AssessmentService",
]
