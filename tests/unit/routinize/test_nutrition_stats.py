"""Tests for daily nutrition aggregates."""

import datetime
from types import SimpleNamespace

import pytest

from app.routinize.nutrition_stats import (
    daily_totals,
    daily_trend,
    goal_progress,
    macro_percentages,
    meal_totals,
    summarize_day,
)


def _entry(meal_type, calories, protein, carbs, fat, day=10):
    return SimpleNamespace(date=datetime.date(2026, 6, day), meal_type=meal_type, calories=calories,
                           protein=protein, carbs=carbs, fat=fat)


DAY = [
    _entry("breakfast", 300, 20, 30, 10),
    _entry("lunch", 600, 40, 60, 20),
    _entry("snack", 100, 5, 15, 2),
]


class TestDailyTotals:
    def test_sums(self):
        totals = daily_totals(DAY)
        assert totals.calories == 1000
        assert totals.protein == 65
        assert totals.carbs == 105
        assert totals.fat == 32
        assert totals.entries == 3

    def test_missing_values_count_as_zero(self):
        totals = daily_totals([_entry("snack", None, None, 10, None)])
        assert (totals.calories, totals.protein, totals.carbs, totals.fat) == (0, 0, 10, 0)

    def test_empty(self):
        assert daily_totals([]).entries == 0


class TestMealTotals:
    def test_every_meal_type_present(self):
        totals = meal_totals(DAY)
        assert set(totals) == {"breakfast", "lunch", "dinner", "snack"}
        assert totals["dinner"].count == 0
        assert totals["dinner"].calories == 0

    def test_per_meal_sums(self):
        entries = DAY + [_entry("lunch", 150, 10, 5, 8)]
        totals = meal_totals(entries)
        assert totals["lunch"].calories == 750
        assert totals["lunch"].protein == 50
        assert totals["lunch"].count == 2
        assert totals["breakfast"].count == 1

    def test_unknown_meal_type_ignored(self):
        totals = meal_totals([_entry("brunch", 400, 10, 10, 10)])
        assert all(bucket.count == 0 for bucket in totals.values())


class TestMacroPercentages:
    @pytest.mark.parametrize("protein, carbs, fat, expected", [
        (65, 105, 32, (26.9, 43.4, 29.8)),
        (25, 50, 0, (33.3, 66.7, 0.0)),
        (0, 0, 10, (0.0, 0.0, 100.0)),
        (0, 0, 0, (0.0, 0.0, 0.0)),
    ])
    def test_share_of_macro_calories(self, protein, carbs, fat, expected):
        result = macro_percentages(protein, carbs, fat)
        assert (result.protein, result.carbs, result.fat) == expected

    def test_fat_weighs_more_per_gram(self):
        result = macro_percentages(10, 0, 10)
        # 40 kcal protein vs 90 kcal fat
        assert result.fat > result.protein


class TestDailyTrend:
    def test_grouped_by_day_chronological(self):
        entries = [
            _entry("dinner", 700, 30, 80, 25, day=9),
            _entry("breakfast", 300, 20, 30, 10, day=4),
            _entry("lunch", 500, 35, 50, 15, day=9),
        ]
        trend = daily_trend(entries)
        assert [p.date.day for p in trend] == [4, 9]
        assert trend[1].calories == 1200
        assert trend[1].fat == 40

    def test_empty(self):
        assert daily_trend([]) == []


class TestGoalProgress:
    def test_percent_of_targets(self):
        goal = SimpleNamespace(calories=2000, protein=130, carbs=210, fat=64)
        progress = goal_progress(daily_totals(DAY), goal)
        assert (progress.calories, progress.protein, progress.carbs, progress.fat) == (50.0, 50.0, 50.0, 50.0)

    def test_zero_target(self):
        goal = SimpleNamespace(calories=2000, protein=130, carbs=210, fat=0)
        assert goal_progress(daily_totals(DAY), goal).fat == 0.0


class TestSummarizeDay:
    def test_without_goal(self):
        stats = summarize_day(datetime.date(2026, 6, 10), DAY, DAY)
        assert stats.totals.calories == 1000
        assert stats.macro_percentages.protein == 26.9
        assert len(stats.trend) == 1
        assert stats.goal is None
        assert stats.goal_progress is None

    def test_with_goal(self):
        goal = SimpleNamespace(calories=2000, protein=130, carbs=210, fat=64)
        stats = summarize_day(datetime.date(2026, 6, 10), DAY, DAY, goal)
        assert stats.goal.calories == 2000
        assert stats.goal_progress.calories == 50.0

    def test_nothing_logged(self):
        stats = summarize_day(datetime.date(2026, 6, 10), [], [])
        assert stats.totals.entries == 0
        assert stats.macro_percentages.protein == 0.0
        assert stats.trend == []
