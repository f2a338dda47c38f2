"""Daily digest: score, quick stats and time-of-day sections."""

from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Literal

from care_analytics.domain.records import LogEntry, Visit
from care_analytics.domain.scoring import DailyScore, DailyScoreCalculator, DayRecords

MealQuality = Literal["good", "fair", "poor"]


@dataclass(frozen=True)
class TimeSection:
    """Half-open hour range ``[start_hour, end_hour)`` of a day."""

    label: str
    start_hour: int
    end_hour: int

    def contains(self, hour: int) -> bool:
        return self.start_hour <= hour < self.end_hour


TIME_SECTIONS: tuple[TimeSection, ...] = (
    TimeSection("Morning", 6, 12),
    TimeSection("Afternoon", 12, 18),
    TimeSection("Evening", 18, 22),
)


@dataclass(frozen=True)
class DigestStats:
    """Quick counts shown alongside the daily score."""

    vitals_count: int
    vitals_normal: bool
    meds_count: int
    meds_on_time: bool
    meals_count: int
    meals_quality: MealQuality
    visits_count: int
    visitor_names: list[str]


@dataclass(frozen=True)
class DigestSection:
    """Entries and visits that fall inside one time section."""

    label: str
    entries: list[LogEntry]
    visits: list[Visit]


@dataclass(frozen=True)
class DailyDigest:
    """Everything known about one day."""

    day: date
    rating: DailyScore
    stats: DigestStats
    sections: list[DigestSection]

    @property
    def has_data(self) -> bool:
        return self.rating.has_data


def _meal_quality(day: DayRecords) -> MealQuality:
    mood_logs = day.mood_logs()
    appetite = mood_logs[-1].appetite if mood_logs else None
    if appetite in {"poor", "refused"}:
        return "poor"
    if appetite == "fair":
        return "fair"
    return "good"


def digest_stats(day: DayRecords) -> DigestStats:
    meds = day.by_category("medication")
    meals = [
        entry
        for entry in day.by_category("activity")
        if entry.activity_log and entry.activity_log.activity_type == "meal"
    ]
    return DigestStats(
        vitals_count=len(day.by_category("vitals")),
        vitals_normal=day.vitals_all_normal(),
        meds_count=len(meds),
        meds_on_time=bool(meds),
        meals_count=len(meals),
        meals_quality=_meal_quality(day),
        visits_count=len(day.visits),
        visitor_names=list(dict.fromkeys(visit.visitor_name for visit in day.visits)),
    )


def split_sections(day: DayRecords, tz: tzinfo) -> list[DigestSection]:
    """Place records into morning/afternoon/evening by local hour."""
    sections = []
    for section in TIME_SECTIONS:
        sections.append(
            DigestSection(
                label=section.label,
                entries=[
                    entry
                    for entry in day.entries
                    if section.contains(entry.created_at.astimezone(tz).hour)
                ],
                visits=[
                    visit
                    for visit in day.visits
                    if section.contains(visit.check_in_time.astimezone(tz).hour)
                ],
            )
        )
    return sections


def build_daily_digest(
    day: date,
    entries: list[LogEntry],
    visits: list[Visit],
    tz: tzinfo,
    calculator: DailyScoreCalculator | None = None,
) -> DailyDigest:
    """Build the digest for records the caller already filtered to ``day``."""
    records = DayRecords.of(entries, visits)
    resolved_calculator = calculator or DailyScoreCalculator()
    return DailyDigest(
        day=day,
        rating=resolved_calculator.calculate(records),
        stats=digest_stats(records),
        sections=split_sections(records, tz),
    )
