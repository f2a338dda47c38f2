"""Distributions and half-over-half trend directions for wellness days."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from care_analytics.domain.stats import mean, round_half_away, round_half_up
from care_analytics.domain.wellness import (
    APPETITE_SCORES,
    APPETITES,
    ENGAGEMENT_SCORES,
    ENGAGEMENTS,
    MOODS,
    WellnessDay,
    sort_days,
)

TREND_THRESHOLD = 0.3

T = TypeVar("T")


class TrendDirection(Enum):
    """Direction of a metric between two halves of a period."""

    UP = "up"
    SAME = "same"
    DOWN = "down"

    def reversed(self) -> "TrendDirection":
        if self is TrendDirection.UP:
            return TrendDirection.DOWN
        if self is TrendDirection.DOWN:
            return TrendDirection.UP
        return self


def classify_trend(
    first: Sequence[float], second: Sequence[float]
) -> TrendDirection:
    """Compare the mean of the second half against the first half."""
    first_mean = mean(first)
    second_mean = mean(second)
    if first_mean is None or second_mean is None:
        return TrendDirection.SAME
    diff = second_mean - first_mean
    if diff > TREND_THRESHOLD:
        return TrendDirection.UP
    if diff < -TREND_THRESHOLD:
        return TrendDirection.DOWN
    return TrendDirection.SAME


def effective_direction(direction: TrendDirection, inverted: bool) -> TrendDirection:
    """Direction as good/bad news: inverted metrics improve when they drop."""
    return direction.reversed() if inverted else direction


def split_halves(items: Sequence[T]) -> tuple[list[T], list[T]]:
    """Split at ``floor(n/2)``; an odd middle item belongs to the second half."""
    mid = len(items) // 2
    return list(items[:mid]), list(items[mid:])


@dataclass(frozen=True)
class TrendMetric:
    """How to score one wellness metric for trend comparison."""

    key: str
    label: str
    value: Callable[[WellnessDay], float | None]
    inverted: bool = False

    def values(self, days: Sequence[WellnessDay]) -> list[float]:
        scores = (self.value(day) for day in days)
        return [score for score in scores if score is not None]


def _mapped(
    attribute: str, scores: dict[str, float]
) -> Callable[[WellnessDay], float | None]:
    def value(day: WellnessDay) -> float | None:
        raw = getattr(day, attribute)
        return None if raw is None else scores.get(raw, 0)

    return value


APPETITE_METRIC = TrendMetric(
    "appetite", "Appetite", _mapped("appetite", APPETITE_SCORES)
)
ENGAGEMENT_METRIC = TrendMetric(
    "engagement", "Social", _mapped("social_engagement", ENGAGEMENT_SCORES)
)
PAIN_METRIC = TrendMetric(
    "pain",
    "Pain",
    lambda day: None if day.pain_level is None else float(day.pain_level),
    inverted=True,
)
SCORE_METRIC = TrendMetric("score", "Overall", lambda day: float(day.overall_score))
MOOD_METRIC = TrendMetric("mood", "Mood", WellnessDay.mood_score)

TREND_METRICS: tuple[TrendMetric, ...] = (
    APPETITE_METRIC,
    ENGAGEMENT_METRIC,
    PAIN_METRIC,
    SCORE_METRIC,
)


@dataclass(frozen=True)
class MetricTrend:
    """Raw direction of a metric plus its polarity."""

    direction: TrendDirection
    inverted: bool

    @property
    def effective(self) -> TrendDirection:
        return effective_direction(self.direction, self.inverted)


def metric_trend(metric: TrendMetric, days: Sequence[WellnessDay]) -> MetricTrend:
    first, second = split_halves(days)
    return MetricTrend(
        direction=classify_trend(metric.values(first), metric.values(second)),
        inverted=metric.inverted,
    )


@dataclass(frozen=True)
class Distribution:
    """Category counts across a sequence of days."""

    mood: dict[str, int]
    appetite: dict[str, int]
    engagement: dict[str, int]


def _count(values: Sequence[str | None], keys: Sequence[str]) -> dict[str, int]:
    counts = dict.fromkeys(keys, 0)
    for value in values:
        if value in counts:
            counts[value] += 1
    return counts


def distribution(days: Sequence[WellnessDay]) -> Distribution:
    """Count moods (AM and PM separately), appetites and engagement levels."""
    moods: list[str | None] = []
    for day in days:
        moods.extend((day.mood_am, day.mood_pm))
    return Distribution(
        mood=_count(moods, MOODS),
        appetite=_count([day.appetite for day in days], APPETITES),
        engagement=_count([day.social_engagement for day in days], ENGAGEMENTS),
    )


def best_day(days: Sequence[WellnessDay]) -> WellnessDay | None:
    """Day with the strictly highest score; the earliest wins ties."""
    best: WellnessDay | None = None
    for day in days:
        if best is None or day.overall_score > best.overall_score:
            best = day
    return best


def dominant_mood(mood_counts: dict[str, int]) -> str | None:
    """Most frequent mood; ties resolve in the fixed mood order."""
    top = max(MOODS, key=lambda mood: mood_counts.get(mood, 0))
    return top if mood_counts.get(top, 0) > 0 else None


@dataclass(frozen=True)
class PainStats:
    average: float
    minimum: int
    maximum: int
    days: int


def pain_stats(days: Sequence[WellnessDay]) -> PainStats | None:
    levels = [day.pain_level for day in days if day.pain_level is not None]
    if not levels:
        return None
    return PainStats(
        average=round_half_up(sum(levels) / len(levels), 1),
        minimum=min(levels),
        maximum=max(levels),
        days=len(levels),
    )


@dataclass(frozen=True)
class TrendReport:
    """Distribution, per-metric trends and headline numbers for a period."""

    days: list[WellnessDay]
    distribution: Distribution
    trend_by_metric: dict[str, MetricTrend]
    best_day: WellnessDay | None
    average_score: float
    previous_average_score: float
    score_change: float
    dominant_mood: str | None
    pain: PainStats | None


def build_trend_report(days: Sequence[WellnessDay]) -> TrendReport:
    """Analyze wellness days in any order; they are sorted by date first."""
    ordered = sort_days(days)
    first_half, _ = split_halves(ordered)
    scores = [float(day.overall_score) for day in ordered]
    average = mean(scores) or 0.0
    previous = mean([float(day.overall_score) for day in first_half])
    if previous is None:
        previous = average
    counts = distribution(ordered)
    return TrendReport(
        days=ordered,
        distribution=counts,
        trend_by_metric={
            metric.key: metric_trend(metric, ordered) for metric in TREND_METRICS
        },
        best_day=best_day(ordered),
        average_score=average,
        previous_average_score=previous,
        score_change=round_half_away(average - previous, 1),
        dominant_mood=dominant_mood(counts.mood),
        pain=pain_stats(ordered),
    )
