"""Care analytics service over a care record source."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from typing import Protocol
from zoneinfo import ZoneInfo

from care_analytics.domain.comparison import PeriodComparison, build_period_comparison
from care_analytics.domain.digest import DailyDigest, build_daily_digest
from care_analytics.domain.records import LogEntry, Visit
from care_analytics.domain.scoring import DailyScoreCalculator
from care_analytics.domain.trends import TrendReport, build_trend_report
from care_analytics.domain.visits import WeeklyVisitSummary, summarize_week, week_start
from care_analytics.domain.wellness import WellnessDay, build_wellness_day
from care_analytics.domain.windows import (
    TimeWindow,
    VitalsWindowReport,
    aggregate_vitals,
    is_trend_window_ready,
)

_logger = logging.getLogger(__name__)


class CareRecordRepository(Protocol):
    """Read-only source of care records."""

    def list_log_entries(self, start: datetime, end: datetime) -> list[LogEntry]:
        """Return log entries created within ``[start, end)``."""

    def list_visits(self, start: datetime, end: datetime) -> list[Visit]:
        """Return visits checked in within ``[start, end)``."""

    def list_wellness_days(self, start: date, end: date) -> list[WellnessDay]:
        """Return wellness days dated within ``[start, end)``."""


@dataclass(frozen=True)
class WellnessTrends:
    """Trend report and period comparison for a trailing window."""

    window: TimeWindow
    ready: bool
    report: TrendReport
    comparison: PeriodComparison | None


@dataclass
class CareAnalyticsService:
    """Filters records by day or window and runs the analytics engine."""

    repository: CareRecordRepository
    timezone_name: str = "UTC"
    debug: bool = False
    default_window: TimeWindow = TimeWindow.WEEK
    calculator: DailyScoreCalculator | None = None

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone_name)

    def _day_bounds(self, day: date) -> tuple[datetime, datetime]:
        start = datetime.combine(day, time.min, tzinfo=self.tz)
        end = start + timedelta(days=1)
        return start.astimezone(UTC), end.astimezone(UTC)

    def _today(self) -> date:
        return datetime.now(tz=self.tz).date()

    def daily_digest(self, day: date | None = None) -> DailyDigest:
        """Return the digest for ``day`` (today by default) in the local timezone."""
        resolved_day = day or self._today()
        start, end = self._day_bounds(resolved_day)
        entries = self.repository.list_log_entries(start, end)
        visits = self.repository.list_visits(start, end)
        if self.debug:
            _logger.info(
                "Daily digest: day=%s entries=%s visits=%s",
                resolved_day,
                len(entries),
                len(visits),
            )
        return build_daily_digest(
            resolved_day, entries, visits, self.tz, calculator=self.calculator
        )

    def vitals_trends(
        self, window: TimeWindow | None = None, now: datetime | None = None
    ) -> VitalsWindowReport:
        """Return vital sign statistics for the trailing window ending now."""
        window = window or self.default_window
        resolved_now = now or datetime.now(tz=UTC)
        start = resolved_now - timedelta(days=window.days)
        entries = self.repository.list_log_entries(
            start, resolved_now + timedelta(seconds=1)
        )
        report = aggregate_vitals(entries, window, resolved_now)
        if self.debug:
            _logger.info(
                "Vitals trends: window=%s entries=%s", window.label, report.entry_count
            )
        return report

    def wellness_trends(
        self, window: TimeWindow | None = None, today: date | None = None
    ) -> WellnessTrends:
        """Return trends and the period comparison for the trailing window."""
        window = window or self.default_window
        resolved_today = today or self._today()
        start = resolved_today - timedelta(days=window.days - 1)
        days = self.repository.list_wellness_days(
            start, resolved_today + timedelta(days=1)
        )
        if self.debug:
            _logger.info("Wellness trends: window=%s days=%s", window.label, len(days))
        return WellnessTrends(
            window=window,
            ready=is_trend_window_ready(len(days), window),
            report=build_trend_report(days),
            comparison=build_period_comparison(days),
        )

    def build_wellness_days(self, start: date, end: date) -> list[WellnessDay]:
        """Roll raw records up into wellness days for ``[start, end)``."""
        days: list[WellnessDay] = []
        current = start
        while current < end:
            day_start, day_end = self._day_bounds(current)
            rollup = build_wellness_day(
                current,
                self.repository.list_log_entries(day_start, day_end),
                self.repository.list_visits(day_start, day_end),
                self.tz,
                calculator=self.calculator,
            )
            if rollup is not None:
                days.append(rollup)
            current += timedelta(days=1)
        return days

    def visit_summary(self, now: datetime | None = None) -> WeeklyVisitSummary:
        """Summarize this week's and last week's visits."""
        resolved_now = (now or datetime.now(tz=UTC)).astimezone(self.tz)
        this_start = week_start(resolved_now)
        visits = self.repository.list_visits(
            this_start - timedelta(days=7), this_start + timedelta(days=7)
        )
        return summarize_week(visits, resolved_now)
