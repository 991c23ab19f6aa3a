"""
Daily nutrition aggregates.

- totals: calories and macros summed over the day's entries,
- meal_totals: the same per meal type, every meal type always present,
- macro_percentages: share of macro calories, using 4 kcal/g for protein
  and carbs and 9 kcal/g for fat (all 0 when nothing was logged),
- trend: per-day totals over the 7 days ending on the target date,
- goal_progress: percent of each active daily target reached.
"""

from __future__ import annotations

import datetime
from typing import Sequence

from sqlmodel import Session

from app.db.repositories.nutrition import NutritionEntryRepository, NutritionGoalRepository
from app.schemas.nutrition import (
    MEAL_TYPES,
    DailyTotals,
    GoalProgress,
    MacroPercentages,
    MealTotals,
    NutritionGoalSet,
    NutritionStatsResponse,
    NutritionTrendPoint,
)

# ======================================================================
# Constants
# ======================================================================

KCAL_PER_GRAM = {
    "protein": 4,
    "carbs": 4,
    "fat": 9,
}

TREND_DAYS = 7


# ======================================================================
# Pure aggregation
# ======================================================================


def daily_totals(entries: Sequence) -> DailyTotals:
    return DailyTotals(
        calories=round(sum(e.calories or 0 for e in entries), 1),
        protein=round(sum(e.protein or 0 for e in entries), 1),
        carbs=round(sum(e.carbs or 0 for e in entries), 1),
        fat=round(sum(e.fat or 0 for e in entries), 1),
        entries=len(entries),
    )


def meal_totals(entries: Sequence) -> dict[str, MealTotals]:
    """Totals per meal type; entries with an unknown meal type are ignored."""
    totals = {meal: MealTotals() for meal in MEAL_TYPES}
    for e in entries:
        bucket = totals.get(e.meal_type)
        if bucket is None:
            continue
        bucket.calories += e.calories or 0
        bucket.protein += e.protein or 0
        bucket.carbs += e.carbs or 0
        bucket.fat += e.fat or 0
        bucket.count += 1
    for bucket in totals.values():
        bucket.calories = round(bucket.calories, 1)
        bucket.protein = round(bucket.protein, 1)
        bucket.carbs = round(bucket.carbs, 1)
        bucket.fat = round(bucket.fat, 1)
    return totals


def macro_percentages(protein: float, carbs: float, fat: float) -> MacroPercentages:
    kcal = {
        "protein": protein * KCAL_PER_GRAM["protein"],
        "carbs": carbs * KCAL_PER_GRAM["carbs"],
        "fat": fat * KCAL_PER_GRAM["fat"],
    }
    total = sum(kcal.values())
    if total <= 0:
        return MacroPercentages(protein=0.0, carbs=0.0, fat=0.0)
    return MacroPercentages(**{macro: round(value / total * 100, 1) for macro, value in kcal.items()})


def daily_trend(entries: Sequence) -> list[NutritionTrendPoint]:
    """Per-day totals for the days present in *entries*, chronological."""
    by_day: dict[datetime.date, NutritionTrendPoint] = {}
    for e in entries:
        point = by_day.setdefault(e.date, NutritionTrendPoint(date=e.date))
        point.calories += e.calories or 0
        point.protein += e.protein or 0
        point.carbs += e.carbs or 0
        point.fat += e.fat or 0
    return [
        NutritionTrendPoint(
            date=day,
            calories=round(p.calories, 1),
            protein=round(p.protein, 1),
            carbs=round(p.carbs, 1),
            fat=round(p.fat, 1),
        )
        for day, p in sorted(by_day.items())
    ]


def _percent_of(value: float, target: float) -> float:
    return round(value / target * 100, 1) if target > 0 else 0.0


def goal_progress(totals: DailyTotals, goal) -> GoalProgress:
    return GoalProgress(
        calories=_percent_of(totals.calories, goal.calories),
        protein=_percent_of(totals.protein, goal.protein),
        carbs=_percent_of(totals.carbs, goal.carbs),
        fat=_percent_of(totals.fat, goal.fat),
    )


def summarize_day(
    day: datetime.date,
    day_entries: Sequence,
    week_entries: Sequence,
    goal=None,
) -> NutritionStatsResponse:
    """Assemble the stats for *day*.

    Args:
        day: Target date.
        day_entries: Entries logged on *day*.
        week_entries: Entries logged in the trend window ending on *day*.
        goal: Active goal (anything with calories/protein/carbs/fat) or None.
    """
    totals = daily_totals(day_entries)
    targets = progress = None
    if goal is not None:
        targets = NutritionGoalSet(calories=goal.calories, protein=goal.protein, carbs=goal.carbs, fat=goal.fat)
        progress = goal_progress(totals, goal)
    return NutritionStatsResponse(
        date=day,
        totals=totals,
        meal_totals=meal_totals(day_entries),
        macro_percentages=macro_percentages(totals.protein, totals.carbs, totals.fat),
        trend=daily_trend(week_entries),
        goal=targets,
        goal_progress=progress,
    )


# ======================================================================
# Public API
# ======================================================================


def compute_nutrition_stats(
    session: Session,
    user_id: int,
    day: datetime.date,
) -> NutritionStatsResponse:
    """Stats for *day*, with the trend over the 7 days ending on it."""
    repository = NutritionEntryRepository(session)
    start = day - datetime.timedelta(days=TREND_DAYS - 1)
    week_entries = repository.get_by_user(user_id, start=start, end=day)
    day_entries = [e for e in week_entries if e.date == day]
    goal = NutritionGoalRepository(session).get_active(user_id)
    return summarize_day(day, day_entries, week_entries, goal)
