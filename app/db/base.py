"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User  # noqa: F401
from app.models.sleep import SleepAssessment, SleepEntry, SleepGoal  # noqa: F401
from app.models.workout import TrainingAssessment, VolumeProgression, WorkoutRoutine, WorkoutSession  # noqa: F401
from app.models.food import FoodItem  # noqa: F401
from app.models.nutrition import NutritionEntry, NutritionGoal  # noqa: F401
from app.models.wellness import JournalEntry, MoodEntry, WellnessActivityLog  # noqa: F401
from app.models.recommendation import PersonalizedRecommendation  # noqa: F401
