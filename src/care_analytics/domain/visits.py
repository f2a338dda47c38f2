"""Visit durations and weekly visit summaries."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta

from care_analytics.domain.records import Visit

SECONDS_PER_MINUTE = 60


def _minutes_between(start: datetime, end: datetime) -> int:
    return int((end - start).total_seconds() // SECONDS_PER_MINUTE)


def visit_duration_minutes(visit: Visit, now: datetime) -> int:
    """Recorded duration, else check-in to check-out, else check-in to now."""
    if visit.duration:
        return visit.duration
    end = visit.check_out_time or now
    return _minutes_between(visit.check_in_time, end)


def find_active_visit(visits: Sequence[Visit], visitor_id: str) -> Visit | None:
    """Return the visitor's visit that has not been checked out."""
    for visit in visits:
        if visit.visitor_id == visitor_id and visit.is_active:
            return visit
    return None


def week_start(moment: datetime) -> datetime:
    """Midnight of the Sunday that starts the week containing ``moment``."""
    days_since_sunday = (moment.weekday() + 1) % 7
    return (moment - timedelta(days=days_since_sunday)).replace(
        hour=0, minute=0, second=0, microsecond=0
    )


@dataclass(frozen=True)
class WeeklyVisitSummary:
    """Visit count and time spent this week, with visits grouped by week."""

    count: int
    total_minutes: int
    this_week: list[Visit]
    last_week: list[Visit]


def summarize_week(visits: Sequence[Visit], now: datetime) -> WeeklyVisitSummary:
    """Summarize visits around ``now``; weeks start on Sunday."""
    this_start = week_start(now)
    next_start = this_start + timedelta(days=7)
    last_start = this_start - timedelta(days=7)

    newest_first = sorted(visits, key=lambda visit: visit.check_in_time, reverse=True)
    this_week = [
        visit
        for visit in newest_first
        if this_start <= visit.check_in_time.astimezone(now.tzinfo) < next_start
    ]
    last_week = [
        visit
        for visit in newest_first
        if last_start <= visit.check_in_time.astimezone(now.tzinfo) < this_start
    ]
    return WeeklyVisitSummary(
        count=len(this_week),
        total_minutes=sum(visit_duration_minutes(visit, now) for visit in this_week),
        this_week=this_week,
        last_week=last_week,
    )
