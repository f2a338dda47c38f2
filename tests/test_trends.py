"""Tests for distributions and trend directions."""

import pytest

from care_analytics.domain.trends import (
    PAIN_METRIC,
    TrendDirection,
    best_day,
    build_trend_report,
    classify_trend,
    distribution,
    dominant_mood,
    effective_direction,
    metric_trend,
    pain_stats,
    split_halves,
)
from tests.conftest import wellness_day


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        ([1.0], [2.0], TrendDirection.UP),
        ([2.0], [1.0], TrendDirection.DOWN),
        ([1.0], [1.25], TrendDirection.SAME),
        ([1.25], [1.0], TrendDirection.SAME),
        ([2.0, 3.0], [3.0, 3.0], TrendDirection.UP),
        ([], [5.0], TrendDirection.SAME),
        ([5.0], [], TrendDirection.SAME),
    ],
)
def test_classify_trend(first, second, expected) -> None:
    assert classify_trend(first, second) is expected


@pytest.mark.parametrize(
    ("first", "second"),
    [
        ([1.0, 2.0], [3.0]),
        ([3.0, 3.0, 2.0], [0.0, 1.0]),
        ([4.0], [4.2]),
        ([0.0], [10.0, 9.0, 8.0]),
        ([6.0, 5.0], [5.5, 5.5]),
    ],
)
def test_classify_trend_is_anti_symmetric(first, second) -> None:
    assert classify_trend(second, first) is classify_trend(first, second).reversed()


def test_reversed_same_is_same() -> None:
    assert TrendDirection.SAME.reversed() is TrendDirection.SAME


def test_effective_direction_flips_only_inverted() -> None:
    assert effective_direction(TrendDirection.UP, inverted=True) is TrendDirection.DOWN
    assert effective_direction(TrendDirection.DOWN, inverted=True) is TrendDirection.UP
    assert effective_direction(TrendDirection.UP, inverted=False) is TrendDirection.UP
    same = TrendDirection.SAME
    assert effective_direction(same, inverted=True) is same


def test_split_halves_puts_middle_item_in_second_half() -> None:
    assert split_halves([1, 2, 3]) == ([1], [2, 3])
    assert split_halves([1, 2, 3, 4]) == ([1, 2], [3, 4])
    assert split_halves([1]) == ([], [1])


def test_distribution_counts_am_and_pm_moods() -> None:
    days = [
        wellness_day(0, mood_am="happy", mood_pm="happy", appetite="good"),
        wellness_day(1, mood_am="sad", appetite="poor", social_engagement="minimal"),
        wellness_day(2, mood_pm="happy", social_engagement="active"),
    ]

    counts = distribution(days)

    assert counts.mood == {
        "happy": 3,
        "content": 0,
        "neutral": 0,
        "anxious": 0,
        "sad": 1,
        "agitated": 0,
    }
    assert counts.appetite == {"good": 1, "fair": 0, "poor": 1, "refused": 0}
    assert counts.engagement == {"active": 1, "moderate": 0, "minimal": 1}


def test_dominant_mood() -> None:
    assert dominant_mood({"happy": 1, "content": 3}) == "content"
    assert dominant_mood({"sad": 2, "neutral": 2}) == "neutral"
    assert dominant_mood({"happy": 0}) is None


def test_best_day_first_occurrence_wins() -> None:
    days = [
        wellness_day(0, 6),
        wellness_day(1, 9),
        wellness_day(2, 9),
        wellness_day(3, 4),
    ]

    assert best_day(days) == days[1]
    assert best_day([]) is None


def test_pain_trend_is_inverted_but_raw_direction_is_kept() -> None:
    days = [
        wellness_day(0, pain_level=1),
        wellness_day(1, pain_level=2),
        wellness_day(2, pain_level=5),
        wellness_day(3, pain_level=6),
    ]

    trend = metric_trend(PAIN_METRIC, days)

    assert trend.direction is TrendDirection.UP
    assert trend.inverted
    assert trend.effective is TrendDirection.DOWN


def test_pain_stats() -> None:
    stats = pain_stats(
        [wellness_day(0, pain_level=2), wellness_day(1, pain_level=3), wellness_day(2)]
    )

    assert stats is not None
    assert stats.average == 2.5
    assert stats.minimum == 2
    assert stats.maximum == 3
    assert stats.days == 2
    assert pain_stats([wellness_day(0)]) is None


def test_trend_report_sorts_days_and_classifies_metrics() -> None:
    days = [
        wellness_day(3, 8, appetite="good", social_engagement="active"),
        wellness_day(0, 4, appetite="poor", social_engagement="minimal"),
        wellness_day(2, 7, appetite="good", social_engagement="active"),
        wellness_day(1, 5, appetite="fair", social_engagement="minimal"),
    ]

    report = build_trend_report(days)

    assert [day.overall_score for day in report.days] == [4, 5, 7, 8]
    assert report.trend_by_metric["appetite"].direction is TrendDirection.UP
    assert report.trend_by_metric["engagement"].direction is TrendDirection.UP
    assert report.trend_by_metric["score"].direction is TrendDirection.UP
    assert report.trend_by_metric["pain"].direction is TrendDirection.SAME
    assert report.trend_by_metric["pain"].inverted
    assert report.best_day is not None and report.best_day.overall_score == 8
    assert report.average_score == 6.0
    assert report.previous_average_score == 4.5
    assert report.score_change == 1.5


def test_trend_report_for_empty_and_single_day() -> None:
    empty = build_trend_report([])
    single = build_trend_report([wellness_day(0, 7, mood_am="content")])

    assert empty.best_day is None
    assert empty.average_score == 0.0
    assert empty.dominant_mood is None
    assert single.previous_average_score == 7.0
    assert single.score_change == 0.0
    assert single.dominant_mood == "content"
    assert all(
        trend.direction is TrendDirection.SAME
        for trend in single.trend_by_metric.values()
    )


def test_negative_half_step_change_rounds_away_from_zero() -> None:
    days = [wellness_day(offset, score) for offset, score in enumerate([6, 5, 5, 5])]

    report = build_trend_report(days)

    assert report.average_score == 5.25
    assert report.previous_average_score == 5.5
    assert report.score_change == -0.3
