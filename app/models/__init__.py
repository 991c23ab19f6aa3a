"""SQLModel database models."""

from app.models.user import User
from app.models.sleep import SleepAssessment, SleepEntry, SleepGoal
from app.models.workout import TrainingAssessment, VolumeProgression, WorkoutRoutine, WorkoutSession
from app.models.food import FoodItem
from app.models.nutrition import NutritionEntry, NutritionGoal
from app.models.wellness import JournalEntry, MoodEntry, WellnessActivityLog
from app.models.recommendation import PersonalizedRecommendation

__all__ = [
    "User",
    "SleepEntry",
    "SleepAssessment",
    "SleepGoal",
    "WorkoutRoutine",
    "WorkoutSession",
    "VolumeProgression",
    "TrainingAssessment",
    "FoodItem",
    "NutritionEntry",
    "NutritionGoal",
    "JournalEntry",
    "MoodEntry",
    "WellnessActivityLog",
    "PersonalizedRecommendation",
]
