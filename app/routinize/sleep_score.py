"""
Sleep scoring.

Two independent 0-100 scores are produced.

**Entry-based score** (from logged nights)::

    duration    = min(100, avg_duration / 480 × 100)
    quality     = avg_quality / 5 × 100
    consistency = mean(max(0, 100 − sd_bed / 60 × 100),
                       max(0, 100 − sd_wake / 60 × 100))
    sleep_score = round(0.4·duration + 0.4·quality + 0.2·consistency)

``sd`` is the population standard deviation of clock times expressed in
minutes from midnight.  Bedtimes before noon are counted as "after
midnight" (+1440) so that 23:30 and 00:30 are one hour apart, not 23.

**Profile-based score** (from the questionnaire)::

    overall = round(0.25·duration + 0.3·quality + 0.2·consistency + 0.25·efficiency)

The component tables are simple lookups; see the ``_PROFILE_*`` tables
below.  Consistency is not part of the questionnaire, so it is taken
from the logged nights when there are at least two, else a neutral 70.
"""

from __future__ import annotations

import datetime
import math
from typing import Iterable, Optional, Sequence

from sqlmodel import Session

from app.db.repositories.sleep import SleepRepository
from app.routinize.utils import round_half_up
from app.schemas.sleep import (
    SleepProfile,
    SleepRecommendation,
    SleepScoreResponse,
    SleepStatsResponse,
    SleepTrendPoint,
)

# ======================================================================
# Configuration
# ======================================================================

IDEAL_SLEEP_MIN = 480
MAX_CONSISTENCY_SD_MIN = 60.0
TREND_LENGTH = 7

_ENTRY_WEIGHTS: dict[str, float] = {
    "duration": 0.4,
    "quality": 0.4,
    "consistency": 0.2,
}

_PROFILE_WEIGHTS: dict[str, float] = {
    "duration": 0.25,
    "quality": 0.3,
    "consistency": 0.2,
    "efficiency": 0.25,
}

DEFAULT_CONSISTENCY = 70.0
# Window of logged nights used for the profile consistency component.
CONSISTENCY_WINDOW_DAYS = 14

_PROFILE_QUALITY: dict[str, int] = {
    "very_good": 100,
    "good": 80,
    "fair": 60,
    "poor": 40,
    "very_poor": 20,
}

_WAKE_UP_ADJUSTMENT: dict[str, int] = {
    "never": 10,
    "rarely": 5,
    "sometimes": 0,
    "often": -10,
    "very_often": -20,
}

# (max latency minutes, points); first match wins.
_LATENCY_POINTS: list[tuple[float, int]] = [
    (10, 50),
    (20, 40),
    (30, 30),
    (45, 20),
    (60, 10),
]

_MORNING_FEEL_POINTS: dict[str, int] = {
    "very_rested": 50,
    "rested": 40,
    "neutral": 30,
    "tired": 20,
    "very_tired": 10,
}


# ======================================================================
# Clock-time helpers
# ======================================================================


def _minutes_from_midnight(t: datetime.time, overnight: bool = False) -> int:
    """Minutes since midnight.  With *overnight*, times before noon roll
    over to the next day (+1440)."""
    minutes = t.hour * 60 + t.minute
    if overnight and t.hour < 12:
        minutes += 24 * 60
    return minutes


def duration_between(bed_time: datetime.time, wake_time: datetime.time) -> int:
    """Minutes from *bed_time* to *wake_time*, wrapping past midnight."""
    start = bed_time.hour * 60 + bed_time.minute
    end = wake_time.hour * 60 + wake_time.minute
    if end <= start:
        end += 24 * 60
    return end - start


def _time_consistency(times: Sequence[datetime.time], overnight: bool = False) -> float:
    """Population standard deviation of clock times, in minutes.

    0 for fewer than two values.
    """
    if len(times) <= 1:
        return 0.0
    minutes = [_minutes_from_midnight(t, overnight) for t in times]
    mean = sum(minutes) / len(minutes)
    variance = sum((m - mean) ** 2 for m in minutes) / len(minutes)
    return math.sqrt(variance)


def _consistency_score(sd_minutes: float) -> float:
    return max(0.0, 100.0 - (sd_minutes / MAX_CONSISTENCY_SD_MIN) * 100.0)


# ======================================================================
# Entry-based score
# ======================================================================


def _empty_stats() -> SleepStatsResponse:
    return SleepStatsResponse(
        total_entries=0,
        avg_duration_min=0.0,
        avg_quality=0.0,
        avg_deep_sleep_min=0.0,
        avg_rem_sleep_min=0.0,
        avg_light_sleep_min=0.0,
        avg_awake_min=0.0,
        trend=[],
        bedtime_consistency_min=0.0,
        waketime_consistency_min=0.0,
        duration_score=0.0,
        quality_score=0.0,
        consistency_score=0.0,
        sleep_score=0,
    )


def entries_consistency_score(entries: Sequence) -> float:
    """Mean of the bedtime and wake-time consistency scores."""
    bed_sd = _time_consistency([e.bed_time for e in entries], overnight=True)
    wake_sd = _time_consistency([e.wake_time for e in entries])
    return (_consistency_score(bed_sd) + _consistency_score(wake_sd)) / 2


def summarize_entries(entries: Sequence) -> SleepStatsResponse:
    """Aggregate logged nights into stats and the entry-based score.

    Args:
        entries: Sleep entries ordered by date **descending** (most
            recent first).  Any object exposing the
            :class:`~app.models.sleep.SleepEntry` attributes works.

    Returns:
        :class:`SleepStatsResponse`.  All zeros for an empty input.
    """
    if not entries:
        return _empty_stats()

    total = len(entries)
    avg_duration = sum(e.duration_min for e in entries) / total
    avg_quality = sum(e.quality for e in entries) / total

    # Phase averages only over nights where all three phases were recorded.
    phased = [
        e for e in entries
        if e.deep_sleep_min is not None and e.rem_sleep_min is not None and e.light_sleep_min is not None
    ]
    avg_deep = avg_rem = avg_light = avg_awake = 0.0
    if phased:
        n = len(phased)
        avg_deep = sum(e.deep_sleep_min for e in phased) / n
        avg_rem = sum(e.rem_sleep_min for e in phased) / n
        avg_light = sum(e.light_sleep_min for e in phased) / n
        avg_awake = sum(e.awake_min or 0 for e in phased) / n

    trend = [
        SleepTrendPoint(date=e.date, duration_min=e.duration_min, quality=e.quality)
        for e in reversed(entries[:TREND_LENGTH])
    ]

    bed_sd = _time_consistency([e.bed_time for e in entries], overnight=True)
    wake_sd = _time_consistency([e.wake_time for e in entries])

    duration_score = min(100.0, (avg_duration / IDEAL_SLEEP_MIN) * 100.0)
    quality_score = (avg_quality / 5.0) * 100.0
    consistency_score = (_consistency_score(bed_sd) + _consistency_score(wake_sd)) / 2

    sleep_score = round_half_up(
        duration_score * _ENTRY_WEIGHTS["duration"]
        + quality_score * _ENTRY_WEIGHTS["quality"]
        + consistency_score * _ENTRY_WEIGHTS["consistency"]
    )

    return SleepStatsResponse(
        total_entries=total,
        avg_duration_min=round(avg_duration, 1),
        avg_quality=round(avg_quality, 2),
        avg_deep_sleep_min=round(avg_deep, 1),
        avg_rem_sleep_min=round(avg_rem, 1),
        avg_light_sleep_min=round(avg_light, 1),
        avg_awake_min=round(avg_awake, 1),
        trend=trend,
        bedtime_consistency_min=round(bed_sd, 1),
        waketime_consistency_min=round(wake_sd, 1),
        duration_score=round(duration_score, 1),
        quality_score=round(quality_score, 1),
        consistency_score=round(consistency_score, 1),
        sleep_score=sleep_score,
    )


def compute_sleep_stats(
    session: Session,
    user_id: int,
    start: Optional[datetime.date] = None,
    end: Optional[datetime.date] = None,
) -> SleepStatsResponse:
    """Load the user's nights in ``[start, end]`` and summarise them."""
    entries = SleepRepository(session).get_entries(user_id, start=start, end=end)
    return summarize_entries(entries)


# ======================================================================
# Profile-based score
# ======================================================================


def _duration_component(hours: float) -> int:
    """7-9 h is ideal; each band further out loses 20 points."""
    if 7 <= hours <= 9:
        return 100
    if 6 <= hours < 7 or 9 < hours <= 10:
        return 80
    if 5 <= hours < 6 or 10 < hours <= 11:
        return 60
    if 4 <= hours < 5 or hours > 11:
        return 40
    return 20


def _quality_component(sleep_quality: str, wake_up_frequency: str) -> int:
    score = _PROFILE_QUALITY.get(sleep_quality, 60)
    score += _WAKE_UP_ADJUSTMENT.get(wake_up_frequency, 0)
    return max(0, min(100, score))


def _efficiency_component(sleep_latency_min: float, morning_feel: str) -> int:
    latency_points = 0
    for limit, points in _LATENCY_POINTS:
        if sleep_latency_min <= limit:
            latency_points = points
            break
    return latency_points + _MORNING_FEEL_POINTS.get(morning_feel, 30)


def score_profile(profile: SleepProfile, consistency: Optional[float] = None) -> SleepScoreResponse:
    """Compute the profile-based sleep score.

    Args:
        profile: Questionnaire answers (schema or stored assessment).
        consistency: Consistency component from logged nights, or
            ``None`` to use :data:`DEFAULT_CONSISTENCY`.
    """
    duration = _duration_component(profile.average_sleep_hours)
    quality = _quality_component(profile.sleep_quality, profile.wake_up_frequency)
    efficiency = _efficiency_component(profile.sleep_latency_min, profile.morning_feel)

    source = "entries" if consistency is not None else "default"
    consistency_value = DEFAULT_CONSISTENCY if consistency is None else consistency

    overall = round_half_up(
        duration * _PROFILE_WEIGHTS["duration"]
        + quality * _PROFILE_WEIGHTS["quality"]
        + consistency_value * _PROFILE_WEIGHTS["consistency"]
        + efficiency * _PROFILE_WEIGHTS["efficiency"]
    )

    return SleepScoreResponse(
        overall=overall,
        duration=duration,
        quality=quality,
        consistency=round(consistency_value, 1),
        efficiency=efficiency,
        consistency_source=source,
    )


def compute_sleep_score(
    session: Session,
    user_id: int,
    profile: SleepProfile,
    as_of: datetime.date,
) -> SleepScoreResponse:
    """Score *profile*, taking consistency from the last two weeks of nights."""
    start = as_of - datetime.timedelta(days=CONSISTENCY_WINDOW_DAYS - 1)
    entries = SleepRepository(session).get_entries(user_id, start=start, end=as_of)
    consistency = entries_consistency_score(entries) if len(entries) >= 2 else None
    return score_profile(profile, consistency)


# ======================================================================
# Recommendations
# ======================================================================


def _rec(category, title, description, priority, difficulty, impact) -> SleepRecommendation:
    return SleepRecommendation(
        category=category,
        title=title,
        description=description,
        priority=priority,
        implementation_difficulty=difficulty,
        expected_impact=impact,
    )


_GOAL_RECOMMENDATIONS: dict[str, SleepRecommendation] = {
    "fall_asleep_faster": _rec(
        "relaxation", "Try 4-7-8 breathing",
        "Inhale for 4 seconds, hold for 7, exhale for 8. Repeat four times before sleeping.",
        "high", "easy", "high",
    ),
    "sleep_longer": _rec(
        "schedule", "Keep a consistent schedule",
        "Go to bed and get up at the same time every day, weekends included, to anchor your body clock.",
        "high", "moderate", "high",
    ),
    "reduce_wakeups": _rec(
        "habits", "Limit fluids before bed",
        "Cut down on drinks 2-3 hours before bed to avoid getting up during the night.",
        "medium", "easy", "medium",
    ),
    "feel_more_rested": _rec(
        "schedule", "Sleep in full cycles",
        "Aim for multiples of 90 minutes so you wake at the end of a sleep cycle.",
        "medium", "moderate", "high",
    ),
    "consistent_schedule": _rec(
        "habits", "Wind-down routine",
        "Spend the last 30 minutes before bed on a warm shower, light reading or meditation.",
        "high", "moderate", "high",
    ),
}


def build_sleep_recommendations(profile: SleepProfile) -> list[SleepRecommendation]:
    """Rule-based suggestions derived from the sleep profile."""
    recs: list[SleepRecommendation] = []

    if profile.average_sleep_hours < 7:
        recs.append(_rec(
            "schedule", "Increase your sleep time",
            "Go to bed 30 minutes earlier each night until you reach at least 7 hours.",
            "high", "moderate", "high",
        ))
    elif profile.average_sleep_hours > 9:
        recs.append(_rec(
            "schedule", "Trim your sleep time",
            "Oversleeping can sap energy. Settle on a regular 7-8 hour schedule.",
            "medium", "moderate", "medium",
        ))

    if profile.light_level not in ("very_dark", "dark"):
        recs.append(_rec(
            "environment", "Darken your bedroom",
            "Use blackout curtains or a sleep mask; darkness supports melatonin production.",
            "high", "easy", "high",
        ))

    if profile.noise_level not in ("very_quiet", "quiet"):
        recs.append(_rec(
            "environment", "Reduce background noise",
            "Use earplugs or a white-noise machine to mask disruptive sounds.",
            "medium", "easy", "high",
        ))

    if profile.room_temperature in ("warm", "too_warm"):
        recs.append(_rec(
            "environment", "Cool your bedroom",
            "Keep the room between 16 and 19 °C, the best range for sleep.",
            "medium", "moderate", "medium",
        ))

    disruptors: Iterable[str] = profile.disruptors or []
    if "caffeine" in disruptors:
        recs.append(_rec(
            "nutrition", "Limit caffeine",
            "Avoid coffee, tea, soft drinks and chocolate for at least 6 hours before bed.",
            "high", "moderate", "high",
        ))
    if "alcohol" in disruptors:
        recs.append(_rec(
            "nutrition", "Cut alcohol before bed",
            "Alcohol may help you fall asleep but fragments sleep. Stop at least 3 hours before bed.",
            "high", "moderate", "high",
        ))
    if "screen_time" in disruptors:
        recs.append(_rec(
            "habits", "Digital curfew",
            "Switch off screens at least an hour before bed to reduce blue-light exposure.",
            "high", "challenging", "high",
        ))

    goal_rec = _GOAL_RECOMMENDATIONS.get(profile.sleep_goal)
    if goal_rec is not None:
        recs.append(goal_rec.model_copy())

    return recs


def default_profile() -> SleepProfile:
    """Profile used before the user completes the questionnaire."""
    return SleepProfile(disruptors=["screen_time"])
