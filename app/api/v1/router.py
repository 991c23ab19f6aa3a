"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    assessments,
    auth,
    foods,
    journal,
    nutrition,
    recommendations,
    routines,
    sleep,
    volume,
    wellness,
    workouts,
)

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, prefix="/auth", tags=["Authentication"]
)
api_router.include_router(
    sleep.router, prefix="/sleep", tags=["Sleep"]
)
api_router.include_router(
    routines.router, prefix="/routines", tags=["Workout routines"]
)
api_router.include_router(
    workouts.router, prefix="/workouts", tags=["Workout sessions"]
)
api_router.include_router(
    volume.router, prefix="/volume", tags=["Volume landmarks"]
)
api_router.include_router(
    assessments.router, prefix="/assessments", tags=["Training assessments"]
)
api_router.include_router(
    foods.router, prefix="/foods", tags=["Food database"]
)
api_router.include_router(
    nutrition.router, prefix="/nutrition", tags=["Nutrition diary"]
)
api_router.include_router(
    journal.router, prefix="/journal", tags=["Emotional journal"]
)
api_router.include_router(
    wellness.router, prefix="/wellness", tags=["Mood & wellness"]
)
api_router.include_router(
    recommendations.router, prefix="/recommendations", tags=["Recommendations"]
)
