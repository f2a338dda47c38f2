"""In-memory care record source backed by immutable snapshots."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from care_analytics.domain.records import LogEntry, Visit
from care_analytics.domain.wellness import WellnessDay


@dataclass
class InMemoryCareRecordRepository:
    """Care record repository over tuples captured at construction time."""

    log_entries: tuple[LogEntry, ...] = ()
    visits: tuple[Visit, ...] = ()
    wellness_days: tuple[WellnessDay, ...] = ()

    @classmethod
    def from_records(
        cls,
        log_entries: Iterable[LogEntry] = (),
        visits: Iterable[Visit] = (),
        wellness_days: Iterable[WellnessDay] = (),
    ) -> "InMemoryCareRecordRepository":
        return cls(
            log_entries=tuple(log_entries),
            visits=tuple(visits),
            wellness_days=tuple(wellness_days),
        )

    def list_log_entries(self, start: datetime, end: datetime) -> list[LogEntry]:
        """Return log entries created in ``[start, end)``."""
        return [entry for entry in self.log_entries if start <= entry.created_at < end]

    def list_visits(self, start: datetime, end: datetime) -> list[Visit]:
        """Return visits checked in during ``[start, end)``."""
        return [visit for visit in self.visits if start <= visit.check_in_time < end]

    def list_wellness_days(self, start: date, end: date) -> list[WellnessDay]:
        """Return wellness days dated in ``[start, end)``."""
        return [day for day in self.wellness_days if start <= day.date < end]
