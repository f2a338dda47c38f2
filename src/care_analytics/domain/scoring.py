"""Daily wellness score calculation.

The score starts from a baseline and flows through an ordered pipeline of
adjustment steps. Each step is a pure ``(score, day) -> score`` function that
applies its own cap or floor; rounding and the final clamp happen once at the
end of the pipeline.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from care_analytics.domain.records import LogCategory, LogEntry, MoodLog, Visit
from care_analytics.domain.stats import clamp, mean, round_to_int
from care_analytics.domain.vitals import is_vitals_normal

BASELINE_SCORE = 5.0
MIN_SCORE = 1
MAX_SCORE = 10

MOOD_SCORES: dict[str, float] = {
    "happy": 9,
    "content": 7,
    "neutral": 5,
    "anxious": 3,
    "sad": 2,
    "agitated": 1,
}

NO_UPDATES_SUMMARY = "No significant updates recorded."


@dataclass(frozen=True)
class DayRecords:
    """Log entries and visits of a single calendar day, kept in time order."""

    entries: tuple[LogEntry, ...]
    visits: tuple[Visit, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "entries", tuple(sorted(self.entries, key=lambda e: e.created_at))
        )
        object.__setattr__(
            self, "visits", tuple(sorted(self.visits, key=lambda v: v.check_in_time))
        )

    @classmethod
    def of(
        cls, entries: Sequence[LogEntry], visits: Sequence[Visit] = ()
    ) -> "DayRecords":
        """Build a day snapshot from any sequences of entries and visits."""
        return cls(entries=tuple(entries), visits=tuple(visits))

    @property
    def is_empty(self) -> bool:
        return not self.entries and not self.visits

    def by_category(self, category: LogCategory) -> list[LogEntry]:
        return [entry for entry in self.entries if entry.category == category]

    def mood_logs(self) -> list[MoodLog]:
        return [entry.mood_log for entry in self.entries if entry.mood_log]

    def vitals_all_normal(self) -> bool:
        return all(
            is_vitals_normal(entry.vitals)
            for entry in self.entries
            if entry.vitals is not None
        )


ScoreAdjustment = Callable[[float, DayRecords], float]


def _raise(score: float, amount: float) -> float:
    return min(MAX_SCORE, score + amount)


def _lower(score: float, amount: float) -> float:
    return max(MIN_SCORE, score - amount)


def apply_mood(score: float, day: DayRecords) -> float:
    """Replace the score with the mean mood score when moods were logged."""
    average = mean([MOOD_SCORES[log.mood] for log in day.mood_logs()])
    return score if average is None else average


def apply_vitals(score: float, day: DayRecords) -> float:
    if not day.by_category("vitals"):
        return score
    if day.vitals_all_normal():
        return _raise(score, 0.5)
    return _lower(score, 1)


def apply_activity(score: float, day: DayRecords) -> float:
    count = len(day.by_category("activity"))
    if count >= 3:
        return _raise(score, 1)
    if count >= 1:
        return _raise(score, 0.5)
    return score


def apply_incidents(score: float, day: DayRecords) -> float:
    incidents = [entry.incident_log for entry in day.by_category("incident")]
    if not incidents:
        return score
    has_high = any(log is not None and log.severity == "high" for log in incidents)
    return _lower(score, 2 if has_high else 1)


def apply_visits(score: float, day: DayRecords) -> float:
    return _raise(score, 0.5) if day.visits else score


DEFAULT_ADJUSTMENTS: tuple[ScoreAdjustment, ...] = (
    apply_mood,
    apply_vitals,
    apply_activity,
    apply_incidents,
    apply_visits,
)


@dataclass(frozen=True)
class DailyScore:
    """Score, label and auto-summary for one day.

    A score of 0 with an empty label marks a day without any records; real
    scores are always between 1 and 10.
    """

    score: int
    label: str
    summary: str

    @property
    def has_data(self) -> bool:
        return self.score > 0

    @classmethod
    def no_data(cls) -> "DailyScore":
        return cls(score=0, label="", summary="")


def score_label(score: int) -> str:
    """Map a rounded score to its qualitative label."""
    if score >= 8:
        return "Great"
    if score >= 6:
        return "Good"
    if score >= 4:
        return "Fair"
    return "Needs Attention"


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def summary_clauses(day: DayRecords) -> list[str]:
    """Return the ordered summary clauses that apply to the day."""
    clauses: list[str] = []
    mood_logs = day.mood_logs()
    if mood_logs:
        clauses.append(f"Mood was {mood_logs[-1].mood}")
    if day.by_category("vitals"):
        clauses.append(
            "vitals stable" if day.vitals_all_normal() else "some vitals elevated"
        )
    activities = len(day.by_category("activity"))
    if activities:
        clauses.append(f"{_plural(activities, 'activity', 'activities')} logged")
    medications = len(day.by_category("medication"))
    if medications:
        clauses.append(f"{medications} meds administered")
    if day.visits:
        clauses.append(_plural(len(day.visits), "visit", "visits"))
    incidents = len(day.by_category("incident"))
    if incidents:
        clauses.append(f"{_plural(incidents, 'incident', 'incidents')} reported")
    return clauses


def build_summary(day: DayRecords) -> str:
    clauses = summary_clauses(day)
    if not clauses:
        return NO_UPDATES_SUMMARY
    text = ", ".join(clauses) + "."
    return text[0].upper() + text[1:]


@dataclass
class DailyScoreCalculator:
    """Runs the adjustment pipeline over one day's records."""

    adjustments: Sequence[ScoreAdjustment] = field(
        default_factory=lambda: DEFAULT_ADJUSTMENTS
    )
    baseline: float = BASELINE_SCORE

    def raw_score(self, day: DayRecords) -> float:
        score = self.baseline
        for adjust in self.adjustments:
            score = adjust(score, day)
        return score

    def calculate(self, day: DayRecords) -> DailyScore:
        """Return the day's score, or the no-data result for an empty day."""
        if day.is_empty:
            return DailyScore.no_data()
        score = round_to_int(clamp(self.raw_score(day), MIN_SCORE, MAX_SCORE))
        return DailyScore(
            score=score, label=score_label(score), summary=build_summary(day)
        )


def calculate_daily_score(
    entries: Sequence[LogEntry], visits: Sequence[Visit] = ()
) -> DailyScore:
    """Score one day's entries and visits with the default pipeline."""
    return DailyScoreCalculator().calculate(DayRecords.of(entries, visits))
