"""This-period versus last-period comparison of wellness metrics."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from care_analytics.domain.stats import mean
from care_analytics.domain.trends import (
    APPETITE_METRIC,
    ENGAGEMENT_METRIC,
    MOOD_METRIC,
    PAIN_METRIC,
    TrendDirection,
    TrendMetric,
    classify_trend,
    effective_direction,
    split_halves,
)
from care_analytics.domain.wellness import WellnessDay, sort_days

MIN_COMPARISON_DAYS = 4

Trajectory = Literal["improving", "stable", "declining"]


@dataclass(frozen=True)
class ComparisonRow:
    """One metric's aggregate for each period and its direction."""

    label: str
    this_period: float | None
    last_period: float | None
    direction: TrendDirection
    inverted: bool = False

    @property
    def effective_direction(self) -> TrendDirection:
        return effective_direction(self.direction, self.inverted)


@dataclass(frozen=True)
class PeriodComparison:
    rows: list[ComparisonRow]
    trajectory: Trajectory
    this_period_score: float | None
    last_period_score: float | None


def _mean_row(
    metric: TrendMetric, last: Sequence[WellnessDay], this: Sequence[WellnessDay]
) -> ComparisonRow:
    last_values = metric.values(last)
    this_values = metric.values(this)
    return ComparisonRow(
        label=metric.label,
        this_period=mean(this_values),
        last_period=mean(last_values),
        direction=classify_trend(last_values, this_values),
        inverted=metric.inverted,
    )


def _sum_row(label: str, last_total: int, this_total: int) -> ComparisonRow:
    return ComparisonRow(
        label=label,
        this_period=this_total,
        last_period=last_total,
        direction=classify_trend([last_total], [this_total]),
    )


def trajectory(rows: Sequence[ComparisonRow]) -> Trajectory:
    """Majority vote of effective directions; ties are stable."""
    ups = sum(1 for row in rows if row.effective_direction is TrendDirection.UP)
    downs = sum(1 for row in rows if row.effective_direction is TrendDirection.DOWN)
    if ups > downs:
        return "improving"
    if downs > ups:
        return "declining"
    return "stable"


def build_period_comparison(
    days: Sequence[WellnessDay],
) -> PeriodComparison | None:
    """Compare the second half of the days with the first half.

    Returns None when fewer than four days are available.
    """
    if len(days) < MIN_COMPARISON_DAYS:
        return None
    last, this = split_halves(sort_days(days))
    rows = [
        _mean_row(MOOD_METRIC, last, this),
        _mean_row(APPETITE_METRIC, last, this),
        _mean_row(PAIN_METRIC, last, this),
        _mean_row(ENGAGEMENT_METRIC, last, this),
        _sum_row(
            "Therapy Sessions",
            sum(day.therapy_sessions for day in last),
            sum(day.therapy_sessions for day in this),
        ),
        _sum_row(
            "Visits",
            sum(day.visit_count for day in last),
            sum(day.visit_count for day in this),
        ),
    ]
    return PeriodComparison(
        rows=rows,
        trajectory=trajectory(rows),
        this_period_score=mean([float(day.overall_score) for day in this]),
        last_period_score=mean([float(day.overall_score) for day in last]),
    )
