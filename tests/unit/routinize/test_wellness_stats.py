"""Tests for mood and activity aggregates."""

import datetime
from types import SimpleNamespace

from app.routinize.wellness_stats import summarize_activities, summarize_mood


def _mood(day, mood, energy, stress, time=None):
    return SimpleNamespace(date=datetime.date(2026, 4, day), time=time, mood=mood, energy=energy, stress=stress)


def _activity(category, duration):
    return SimpleNamespace(category=category, duration_min=duration)


class TestSummarizeMood:
    def test_empty(self):
        assert summarize_mood([]) is None

    def test_averages(self):
        stats = summarize_mood([_mood(1, 4, 3, 2), _mood(2, 5, 4, 1), _mood(3, 2, 2, 5)])
        assert stats.total_entries == 3
        assert stats.avg_mood == 3.67
        assert stats.avg_energy == 3.0
        assert stats.avg_stress == 2.67

    def test_trend_is_chronological(self):
        entries = [
            _mood(3, 2, 2, 5),
            _mood(1, 4, 3, 2, time=datetime.time(20, 0)),
            _mood(1, 3, 3, 3, time=datetime.time(8, 0)),
            _mood(2, 5, 4, 1),
        ]
        trend = summarize_mood(entries).trend
        assert [(p.date.day, p.mood) for p in trend] == [(1, 3), (1, 4), (2, 5), (3, 2)]


class TestSummarizeActivities:
    def test_empty(self):
        assert summarize_activities([]) is None

    def test_totals_and_categories(self):
        logs = [_activity("mental", 10), _activity("physical", 45), _activity("mental", 20)]
        stats = summarize_activities(logs)
        assert stats.total_activities == 3
        assert stats.total_duration_min == 75
        assert stats.avg_duration_min == 25.0
        assert stats.by_category == {"mental": 2, "physical": 1}
