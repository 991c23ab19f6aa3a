"""
Wellness aggregates over a date window.

- mood: averages of mood / energy / stress and the chronological trend,
- activities: count, total and mean duration, count per category.

Either block is ``None`` when there is no data in the window.
"""

from __future__ import annotations

import datetime
from typing import Optional, Sequence

from sqlmodel import Session

from app.db.repositories.wellness import ActivityLogRepository, MoodEntryRepository
from app.schemas.wellness import ActivityStats, MoodStats, MoodTrendPoint, WellnessStatsResponse


def summarize_mood(entries: Sequence) -> Optional[MoodStats]:
    """Mood aggregates; *entries* may be in any order."""
    if not entries:
        return None

    n = len(entries)
    ordered = sorted(entries, key=lambda e: (e.date, e.time or datetime.time.min))
    return MoodStats(
        total_entries=n,
        avg_mood=round(sum(e.mood for e in entries) / n, 2),
        avg_energy=round(sum(e.energy for e in entries) / n, 2),
        avg_stress=round(sum(e.stress for e in entries) / n, 2),
        trend=[MoodTrendPoint(date=e.date, mood=e.mood, energy=e.energy, stress=e.stress) for e in ordered],
    )


def summarize_activities(logs: Sequence) -> Optional[ActivityStats]:
    if not logs:
        return None

    total_duration = sum(log.duration_min for log in logs)
    by_category: dict[str, int] = {}
    for log in logs:
        by_category[log.category] = by_category.get(log.category, 0) + 1

    return ActivityStats(
        total_activities=len(logs),
        total_duration_min=total_duration,
        avg_duration_min=round(total_duration / len(logs), 1),
        by_category=by_category,
    )


def compute_wellness_stats(
    session: Session,
    user_id: int,
    start: Optional[datetime.date] = None,
    end: Optional[datetime.date] = None,
) -> WellnessStatsResponse:
    """Mood and activity aggregates for ``[start, end]`` (open ends allowed)."""
    moods = MoodEntryRepository(session).get_by_user(user_id, start=start, end=end)
    logs = ActivityLogRepository(session).get_by_user(user_id, start=start, end=end)
    return WellnessStatsResponse(mood=summarize_mood(moods), activities=summarize_activities(logs))
