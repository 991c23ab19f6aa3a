"""
Volume landmarks: weekly set volume per muscle group vs MEV / MAV / MRV.

Status classifier
-----------------

Evaluated in order, first match wins::

    current < MEV        → below_mev
    current > MRV        → above_mrv
    current > 0.9 × MAV  → approaching_mrv
    otherwise            → optimal

Weekly volume is the number of logged sets per muscle group over the
7 days ending at ``as_of``.  An exercise tagged with several muscle
groups credits its full set count to each of them.

Recommendations combine the status with the trend of the recorded
weekly progressions (see :func:`_volume_trend`).
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional, Sequence

from sqlmodel import Session

from app.db.repositories.workout import VolumeProgressionRepository, WorkoutSessionRepository
from app.routinize.muscle_groups import MUSCLE_GROUPS, MuscleGroupData, get_muscle_group, normalize_muscle_group
from app.routinize.utils import round_half_up
from app.schemas.workout import (
    VolumeLandmark,
    VolumeLandmarksResponse,
    VolumeRecommendation,
    VolumeTargets,
)

# ======================================================================
# Configuration
# ======================================================================

WINDOW_DAYS = 7
APPROACHING_MRV_FRACTION = 0.9
TREND_WEEKS = 4

# Used by goal targets when the muscle group is not in the table.
_FALLBACK_TARGETS = (6, 12, 18)

_DEFAULT_CONFIDENCE = 0.8
_DEFAULT_TIMELINE_WEEKS = 2


# ======================================================================
# Pure helpers
# ======================================================================


def week_start(day: datetime.date) -> datetime.date:
    """Monday of the week containing *day*."""
    return day - datetime.timedelta(days=day.weekday())


def _classify(current: int, mev: int, mav: int, mrv: int) -> str:
    if current < mev:
        return "below_mev"
    if current > mrv:
        return "above_mrv"
    if current > mav * APPROACHING_MRV_FRACTION:
        return "approaching_mrv"
    return "optimal"


def _status_message(status: str, mev: int, mav: int) -> str:
    if status == "below_mev":
        return f"Increase volume to at least {mev} sets to stimulate adaptation"
    if status == "optimal":
        return f"Optimal volume. Keep between {mev}-{mav} weekly sets"
    if status == "approaching_mrv":
        return "Close to your limit. Consider a deload or hold current volume"
    return f"Excessive volume. Reduce to {mav} sets to recover properly"


def adaptation_response(sets_performed: int, target_sets: int, fatigue_level: int) -> str:
    """Classify a week's response from completion and fatigue.

    Raises:
        ValueError: if *target_sets* is not positive.
    """
    if target_sets < 1:
        raise ValueError("target_sets must be at least 1")
    completion = sets_performed / target_sets
    if completion >= 1.0 and fatigue_level <= 6:
        return "positive"
    if completion >= 0.8 and fatigue_level <= 8:
        return "neutral"
    return "negative"


def weekly_volume(sessions: Iterable) -> dict[str, int]:
    """Sets per canonical muscle group across *sessions*.

    Each session's ``exercises`` is the stored JSON list of
    ``{exercise_name, muscle_groups, sets: [...]}``.
    """
    volumes: dict[str, int] = {}
    for session in sessions:
        for exercise in session.exercises or []:
            set_count = len(exercise.get("sets") or [])
            for group in exercise.get("muscle_groups") or []:
                key = normalize_muscle_group(group)
                volumes[key] = volumes.get(key, 0) + set_count
    return volumes


def _volume_trend(sets_history: Sequence[int]) -> str:
    """Trend of chronological weekly set counts.

    Fewer than two points is ``stable``; otherwise compare the number of
    week-over-week increases and decreases.
    """
    if len(sets_history) < 2:
        return "stable"

    increases = decreases = 0
    for previous, current in zip(sets_history, sets_history[1:]):
        if current > previous:
            increases += 1
        elif current < previous:
            decreases += 1

    if increases > decreases:
        return "increasing"
    if decreases > increases:
        return "decreasing"
    if increases == 0:
        return "stable"
    return "inconsistent"


def build_landmarks(volumes: dict[str, int], level: str) -> list[VolumeLandmark]:
    """One :class:`VolumeLandmark` per known muscle group."""
    landmarks = []
    for group in MUSCLE_GROUPS:
        mev, mav, mrv = group.landmarks(level)
        current = volumes.get(group.name, 0)
        status = _classify(current, mev, mav, mrv)
        landmarks.append(VolumeLandmark(
            muscle_group=group.name,
            display_name=group.spanish_name,
            mev=mev,
            mav=mav,
            mrv=mrv,
            current_weekly_sets=current,
            status=status,
            recommendation=_status_message(status, mev, mav),
        ))
    return landmarks


def _recommend(landmark: VolumeLandmark, trend: str) -> VolumeRecommendation:
    current = landmark.current_weekly_sets
    mev, mav = landmark.mev, landmark.mav

    recommended = current
    adjustment = "maintain"
    confidence = _DEFAULT_CONFIDENCE
    timeline = _DEFAULT_TIMELINE_WEEKS

    if landmark.status == "below_mev":
        recommended = min(mev + 2, mav)
        adjustment = "increase"
        reasoning = "Volume below the minimum effective dose. Increase gradually to drive adaptation."
        confidence = 0.9
    elif landmark.status == "optimal":
        if trend == "increasing" and current < mav * 0.8:
            recommended = current + 1
            adjustment = "increase"
            reasoning = "Positive progression. Add one set to keep adapting."
        else:
            reasoning = "Optimal volume. Hold it to consolidate adaptation."
    elif landmark.status == "approaching_mrv":
        if trend == "decreasing":
            reasoning = "Close to the limit but trending down. Hold current volume."
        else:
            recommended = max(current - 2, mav)
            adjustment = "decrease"
            reasoning = "Approaching your recovery limit. Reduce slightly."
            timeline = 1
    else:
        recommended = mav
        adjustment = "deload"
        reasoning = "Volume beyond what you can recover from. Deload required."
        confidence = 0.95
        timeline = 1

    return VolumeRecommendation(
        muscle_group=landmark.muscle_group,
        current_volume=current,
        recommended_volume=recommended,
        adjustment_type=adjustment,
        trend=trend,
        reasoning=reasoning,
        confidence=confidence,
        timeline_weeks=timeline,
    )


def build_recommendations(
    landmarks: Sequence[VolumeLandmark],
    sets_history: dict[str, list[int]],
) -> list[VolumeRecommendation]:
    """Recommendations for every landmark.

    Args:
        landmarks: Output of :func:`build_landmarks`.
        sets_history: Chronological ``sets_performed`` per canonical
            muscle group.
    """
    return [
        _recommend(landmark, _volume_trend(sets_history.get(landmark.muscle_group, [])))
        for landmark in landmarks
    ]


def optimal_volume_for_goal(goal: str, level: str, muscle_group: str) -> VolumeTargets:
    """Weekly set range (min, optimal, max) for a training goal.

    Raises:
        ValueError: for an unknown goal or experience level.
    """
    if goal not in ("strength", "hypertrophy", "endurance"):
        raise ValueError(f"Unknown goal '{goal}'")

    group: Optional[MuscleGroupData] = get_muscle_group(muscle_group)
    if group is None:
        # Validate the level even for unknown muscles
        MUSCLE_GROUPS[0].landmarks(level)
        low, mid, high = _FALLBACK_TARGETS
    else:
        mev, mav, mrv = group.landmarks(level)
        if goal == "strength":
            low, mid, high = mev, round_half_up(mev + (mav - mev) * 0.4), round_half_up(mav * 0.8)
        elif goal == "hypertrophy":
            low, mid, high = round_half_up(mev + (mav - mev) * 0.3), mav, round_half_up(mrv * 0.9)
        else:
            low, mid, high = round_half_up(mav * 0.6), round_half_up(mav * 0.8), mrv

    return VolumeTargets(
        goal=goal,
        level=level,
        muscle_group=group.name if group else normalize_muscle_group(muscle_group),
        min=low,
        optimal=mid,
        max=high,
    )


# ======================================================================
# Public API
# ======================================================================


def compute_volume_landmarks(
    session: Session,
    user_id: int,
    level: str,
    as_of: datetime.date,
) -> VolumeLandmarksResponse:
    """Landmarks for all muscle groups using sessions in the 7 days ending at *as_of*."""
    start = as_of - datetime.timedelta(days=WINDOW_DAYS - 1)
    sessions = WorkoutSessionRepository(session).get_by_user_date_range(user_id, start, as_of)
    return VolumeLandmarksResponse(
        level=level,
        week_start=start,
        week_end=as_of,
        landmarks=build_landmarks(weekly_volume(sessions), level),
    )


def compute_volume_recommendations(
    session: Session,
    user_id: int,
    level: str,
    as_of: datetime.date,
) -> list[VolumeRecommendation]:
    """Per-muscle recommendations from current volume and the last 4 weeks of progressions."""
    landmarks = compute_volume_landmarks(session, user_id, level, as_of).landmarks

    until = week_start(as_of)
    since = until - datetime.timedelta(weeks=TREND_WEEKS - 1)
    progressions = VolumeProgressionRepository(session).get_between(user_id, since, until)
    history: dict[str, list[int]] = {}
    for p in progressions:
        history.setdefault(p.muscle_group, []).append(p.sets_performed)

    return build_recommendations(landmarks, history)
