"""Daily wellness rollups consumed by trend analysis."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Literal

from care_analytics.domain.records import Appetite, LogEntry, Mood, Visit
from care_analytics.domain.scoring import DailyScoreCalculator, DayRecords

Engagement = Literal["active", "moderate", "minimal"]

MOODS: tuple[Mood, ...] = ("happy", "content", "neutral", "anxious", "sad", "agitated")
APPETITES: tuple[Appetite, ...] = ("good", "fair", "poor", "refused")
ENGAGEMENTS: tuple[Engagement, ...] = ("active", "moderate", "minimal")

# Trend charts use a 1-6 mood scale, unlike the daily score's 1-9 scale.
MOOD_TREND_SCORES: dict[str, float] = {
    "happy": 6,
    "content": 5,
    "neutral": 4,
    "anxious": 3,
    "sad": 2,
    "agitated": 1,
}
APPETITE_SCORES: dict[str, float] = {"good": 3, "fair": 2, "poor": 1, "refused": 0}
ENGAGEMENT_SCORES: dict[str, float] = {"active": 3, "moderate": 2, "minimal": 1}

THERAPY_ACTIVITIES = frozenset({"physical_therapy", "occupational_therapy"})
NOON = 12


@dataclass(frozen=True)
class WellnessDay:
    """Pre-aggregated wellness data for one calendar day."""

    date: date
    overall_score: int
    mood_am: Mood | None = None
    mood_pm: Mood | None = None
    appetite: Appetite | None = None
    pain_level: int | None = None
    social_engagement: Engagement | None = None
    therapy_sessions: int = 0
    visit_count: int = 0

    def mood_score(self) -> float | None:
        """Mean trend-scale mood of the AM and PM checks that exist."""
        moods = [mood for mood in (self.mood_am, self.mood_pm) if mood is not None]
        if not moods:
            return None
        return sum(MOOD_TREND_SCORES[mood] for mood in moods) / len(moods)


def sort_days(days: Sequence[WellnessDay]) -> list[WellnessDay]:
    """Return days oldest first; equal dates keep their input order."""
    return sorted(days, key=lambda day: day.date)


def build_wellness_day(
    day: date,
    entries: Sequence[LogEntry],
    visits: Sequence[Visit],
    tz: tzinfo,
    calculator: DailyScoreCalculator | None = None,
) -> WellnessDay | None:
    """Roll one day's records up into a WellnessDay.

    Returns None for a day without any records.
    """
    records = DayRecords.of(entries, visits)
    rating = (calculator or DailyScoreCalculator()).calculate(records)
    if not rating.has_data:
        return None

    moods = [
        (entry.created_at.astimezone(tz).hour, entry.mood_log)
        for entry in records.entries
        if entry.mood_log is not None
    ]
    morning = [log for hour, log in moods if hour < NOON]
    later = [log for hour, log in moods if hour >= NOON]
    pain_levels = [log.pain_level for _, log in moods if log.pain_level is not None]

    activities = [
        entry.activity_log for entry in records.entries if entry.activity_log
    ]
    social = [
        log.participation
        for log in activities
        if log.activity_type == "social" and log.participation is not None
    ]
    engagement: Engagement | None = None
    if social:
        engagement = "minimal" if social[-1] == "refused" else social[-1]

    return WellnessDay(
        date=day,
        overall_score=rating.score,
        mood_am=morning[0].mood if morning else None,
        mood_pm=later[-1].mood if later else None,
        appetite=moods[-1][1].appetite if moods else None,
        pain_level=pain_levels[-1] if pain_levels else None,
        social_engagement=engagement,
        therapy_sessions=sum(
            1 for log in activities if log.activity_type in THERAPY_ACTIVITIES
        ),
        visit_count=len(records.visits),
    )
