"""Routinize scoring engines: sleep score, volume landmarks, food alternatives, wellness stats."""

from app.routinize.food_alternatives import compute_food_alternatives
from app.routinize.sleep_score import compute_sleep_score, compute_sleep_stats
from app.routinize.volume_landmarks import compute_volume_landmarks, compute_volume_recommendations
from app.routinize.wellness_stats import compute_wellness_stats

__all__ = [
    "compute_food_alternatives",
    "compute_sleep_score",
    "compute_sleep_stats",
    "compute_volume_landmarks",
    "compute_volume_recommendations",
    "compute_wellness_stats",
]
