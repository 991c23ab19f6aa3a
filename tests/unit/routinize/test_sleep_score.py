"""Tests for sleep scoring.

Pure unit tests: entries are plain namespaces carrying the
:class:`SleepEntry` attributes, so no database is involved.
"""

import datetime
from types import SimpleNamespace

import pytest

from app.routinize.sleep_score import (
    DEFAULT_CONSISTENCY,
    _consistency_score,
    _duration_component,
    _efficiency_component,
    _minutes_from_midnight,
    _quality_component,
    _time_consistency,
    build_sleep_recommendations,
    default_profile,
    duration_between,
    entries_consistency_score,
    score_profile,
    summarize_entries,
)
from app.schemas.sleep import SleepProfile


# ======================================================================
# Helpers
# ======================================================================


def _entry(day: int, bed=(23, 0), wake=(7, 0), duration=480, quality=4, deep=None, rem=None, light=None,
           awake=None):
    return SimpleNamespace(
        date=datetime.date(2026, 3, day),
        bed_time=datetime.time(*bed),
        wake_time=datetime.time(*wake),
        duration_min=duration,
        quality=quality,
        deep_sleep_min=deep,
        rem_sleep_min=rem,
        light_sleep_min=light,
        awake_min=awake,
    )


# ======================================================================
# Clock helpers
# ======================================================================


class TestClockHelpers:
    @pytest.mark.parametrize("bed, wake, expected", [
        ((23, 0), (7, 0), 480),
        ((22, 30), (6, 45), 495),
        ((1, 0), (9, 0), 480),
        ((13, 0), (15, 30), 150),
        ((7, 0), (7, 0), 1440),
    ])
    def test_duration_between(self, bed, wake, expected):
        assert duration_between(datetime.time(*bed), datetime.time(*wake)) == expected

    def test_overnight_rolls_early_times(self):
        assert _minutes_from_midnight(datetime.time(0, 30), overnight=True) == 1470
        assert _minutes_from_midnight(datetime.time(23, 30), overnight=True) == 1410
        assert _minutes_from_midnight(datetime.time(0, 30)) == 30

    def test_single_value_has_no_spread(self):
        assert _time_consistency([datetime.time(23, 0)]) == 0.0
        assert _time_consistency([]) == 0.0

    def test_bedtimes_across_midnight_are_close(self):
        times = [datetime.time(23, 30), datetime.time(0, 30)]
        assert _time_consistency(times, overnight=True) == pytest.approx(30.0)

    @pytest.mark.parametrize("sd, expected", [
        (0.0, 100.0),
        (30.0, 50.0),
        (60.0, 0.0),
        (90.0, 0.0),
    ])
    def test_consistency_score(self, sd, expected):
        assert _consistency_score(sd) == pytest.approx(expected)


# ======================================================================
# Entry-based summary
# ======================================================================


class TestSummarizeEntries:
    def test_empty_is_all_zero(self):
        stats = summarize_entries([])
        assert stats.total_entries == 0
        assert stats.sleep_score == 0
        assert stats.trend == []

    def test_scores(self):
        entries = [
            _entry(2, bed=(0, 0), quality=4),
            _entry(1, bed=(23, 0), quality=4),
        ]
        stats = summarize_entries(entries)

        assert stats.total_entries == 2
        assert stats.avg_duration_min == 480.0
        assert stats.duration_score == 100.0
        assert stats.quality_score == 80.0
        assert stats.bedtime_consistency_min == 30.0
        assert stats.waketime_consistency_min == 0.0
        assert stats.consistency_score == 75.0
        # 0.4*100 + 0.4*80 + 0.2*75
        assert stats.sleep_score == 87

    def test_duration_score_is_capped(self):
        stats = summarize_entries([_entry(1, duration=600)])
        assert stats.duration_score == 100.0

    def test_phase_averages_only_use_complete_nights(self):
        entries = [
            _entry(3, deep=90, rem=100, light=250, awake=20),
            _entry(2, deep=60, rem=None, light=200),
            _entry(1, deep=70, rem=80, light=230),
        ]
        stats = summarize_entries(entries)
        assert stats.avg_deep_sleep_min == 80.0
        assert stats.avg_rem_sleep_min == 90.0
        assert stats.avg_light_sleep_min == 240.0
        assert stats.avg_awake_min == 10.0

    def test_no_complete_nights_gives_zero_phases(self):
        stats = summarize_entries([_entry(1, deep=60)])
        assert stats.avg_deep_sleep_min == 0.0

    def test_trend_is_last_seven_oldest_first(self):
        entries = [_entry(day) for day in range(10, 0, -1)]
        stats = summarize_entries(entries)
        assert [p.date.day for p in stats.trend] == [4, 5, 6, 7, 8, 9, 10]

    def test_entries_consistency_matches_summary(self):
        entries = [_entry(2, bed=(0, 0)), _entry(1, bed=(23, 0))]
        assert entries_consistency_score(entries) == pytest.approx(75.0)


# ======================================================================
# Profile-based score
# ======================================================================


class TestProfileComponents:
    @pytest.mark.parametrize("hours, expected", [
        (8.0, 100),
        (7.0, 100),
        (9.0, 100),
        (6.5, 80),
        (9.5, 80),
        (5.5, 60),
        (10.5, 60),
        (4.5, 40),
        (12.0, 40),
        (3.0, 20),
    ])
    def test_duration(self, hours, expected):
        assert _duration_component(hours) == expected

    @pytest.mark.parametrize("quality, wakeups, expected", [
        ("very_good", "never", 100),
        ("good", "rarely", 85),
        ("fair", "sometimes", 60),
        ("poor", "often", 30),
        ("very_poor", "very_often", 0),
    ])
    def test_quality(self, quality, wakeups, expected):
        assert _quality_component(quality, wakeups) == expected

    def test_unknown_quality_is_neutral(self):
        assert _quality_component("unknown", "sometimes") == 60

    @pytest.mark.parametrize("latency, feel, expected", [
        (5, "very_rested", 100),
        (15, "rested", 80),
        (30, "neutral", 60),
        (45, "tired", 40),
        (60, "very_tired", 20),
        (90, "very_tired", 10),
    ])
    def test_efficiency(self, latency, feel, expected):
        assert _efficiency_component(latency, feel) == expected


class TestScoreProfile:
    def test_default_consistency(self):
        profile = SleepProfile(sleep_latency_min=5)
        score = score_profile(profile)
        # 0.25*100 + 0.3*60 + 0.2*70 + 0.25*80
        assert score.overall == 77
        assert score.consistency == DEFAULT_CONSISTENCY
        assert score.consistency_source == "default"

    def test_consistency_from_entries(self):
        profile = SleepProfile(sleep_latency_min=5)
        score = score_profile(profile, consistency=100.0)
        assert score.overall == 83
        assert score.consistency_source == "entries"

    def test_exact_half_rounds_up(self):
        profile = SleepProfile(
            average_sleep_hours=8, sleep_latency_min=15, sleep_quality="very_poor",
            wake_up_frequency="very_often", morning_feel="neutral",
        )
        # 0.25*100 + 0.3*0 + 0.2*0 + 0.25*70 = 42.5; round() would give 42
        assert score_profile(profile, consistency=0.0).overall == 43

    def test_best_profile_scores_100(self):
        profile = SleepProfile(
            average_sleep_hours=8, sleep_latency_min=5, sleep_quality="very_good",
            wake_up_frequency="never", morning_feel="very_rested",
        )
        assert score_profile(profile, consistency=100.0).overall == 100


# ======================================================================
# Recommendations
# ======================================================================


class TestSleepRecommendations:
    def test_default_profile(self):
        recs = build_sleep_recommendations(default_profile())
        titles = [r.title for r in recs]
        assert titles == ["Digital curfew", "Sleep in full cycles"]

    def test_short_sleep_is_high_priority(self):
        recs = build_sleep_recommendations(SleepProfile(average_sleep_hours=5.5))
        assert recs[0].title == "Increase your sleep time"
        assert recs[0].priority == "high"

    def test_long_sleep(self):
        recs = build_sleep_recommendations(SleepProfile(average_sleep_hours=10))
        assert recs[0].title == "Trim your sleep time"
        assert recs[0].priority == "medium"

    def test_environment(self):
        profile = SleepProfile(light_level="bright", noise_level="noisy", room_temperature="too_warm")
        categories = [r.category for r in build_sleep_recommendations(profile)]
        assert categories.count("environment") == 3

    def test_comfortable_environment_has_no_environment_recs(self):
        profile = SleepProfile(light_level="very_dark", noise_level="very_quiet", room_temperature="cold")
        assert all(r.category != "environment" for r in build_sleep_recommendations(profile))

    def test_disruptors(self):
        profile = SleepProfile(disruptors=["caffeine", "alcohol"])
        titles = {r.title for r in build_sleep_recommendations(profile)}
        assert {"Limit caffeine", "Cut alcohol before bed"} <= titles
        assert "Digital curfew" not in titles

    @pytest.mark.parametrize("goal, title", [
        ("fall_asleep_faster", "Try 4-7-8 breathing"),
        ("sleep_longer", "Keep a consistent schedule"),
        ("reduce_wakeups", "Limit fluids before bed"),
        ("feel_more_rested", "Sleep in full cycles"),
        ("consistent_schedule", "Wind-down routine"),
    ])
    def test_goal_recommendation_is_last(self, goal, title):
        recs = build_sleep_recommendations(SleepProfile(sleep_goal=goal))
        assert recs[-1].title == title
