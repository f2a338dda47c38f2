"""Tests for the care analytics service."""

import logging
from datetime import UTC, datetime, timedelta

from care_analytics.adapters.memory_repository import InMemoryCareRecordRepository
from care_analytics.domain.windows import TimeWindow
from care_analytics.services.analytics import CareAnalyticsService
from tests.conftest import (
    DAY,
    NOON,
    activity_entry,
    at,
    make_visit,
    medication_entry,
    mood_entry,
    vitals_entry,
    wellness_day,
)


def _service(
    repository: InMemoryCareRecordRepository, **kwargs: object
) -> CareAnalyticsService:
    return CareAnalyticsService(repository=repository, **kwargs)


def test_daily_digest_filters_by_local_day() -> None:
    repository = InMemoryCareRecordRepository.from_records(
        log_entries=[
            mood_entry("sad", datetime(2024, 3, 12, 3, 0, tzinfo=UTC)),
            mood_entry("happy", datetime(2024, 3, 12, 14, 0, tzinfo=UTC)),
            medication_entry(datetime(2024, 3, 13, 3, 0, tzinfo=UTC)),
        ],
    )
    service = _service(repository, timezone_name="America/New_York")

    digest = service.daily_digest(DAY)

    assert digest.day == DAY
    assert digest.rating.score == 9
    assert digest.rating.summary == "Mood was happy, 1 meds administered."
    assert digest.stats.meds_count == 1
    sections = {section.label: section for section in digest.sections}
    assert len(sections["Morning"].entries) == 1
    assert sections["Evening"].entries == []


def test_daily_digest_for_day_without_records(repository) -> None:
    digest = _service(repository).daily_digest(DAY)

    assert not digest.has_data


def test_vitals_trends_uses_default_window() -> None:
    repository = InMemoryCareRecordRepository.from_records(
        log_entries=[
            vitals_entry(NOON - timedelta(days=8), heart_rate=90),
            vitals_entry(NOON - timedelta(days=2), heart_rate=70),
            vitals_entry(NOON, heart_rate=74),
        ],
    )

    week = _service(repository).vitals_trends(now=NOON)
    month = _service(repository, default_window=TimeWindow.MONTH).vitals_trends(
        now=NOON
    )

    assert week.window is TimeWindow.WEEK
    assert week.heart_rate is not None
    assert week.heart_rate.count == 2
    assert week.heart_rate.current == 74
    assert month.heart_rate is not None
    assert month.heart_rate.count == 3


def test_wellness_trends_for_trailing_window() -> None:
    repository = InMemoryCareRecordRepository.from_records(
        wellness_days=[
            wellness_day(offset, 4 if offset < -3 else 8, mood_am="content")
            for offset in range(-9, 2)
        ],
    )

    trends = _service(repository).wellness_trends(TimeWindow.WEEK, today=DAY)

    assert trends.ready
    assert len(trends.report.days) == 7
    assert trends.report.days[0].date == DAY - timedelta(days=6)
    assert trends.report.days[-1].date == DAY
    assert trends.comparison is not None
    assert trends.comparison.this_period_score == 8.0
    assert trends.comparison.last_period_score == 4.0
    assert trends.report.trend_by_metric["score"].direction.value == "up"


def test_wellness_trends_with_too_few_days() -> None:
    repository = InMemoryCareRecordRepository.from_records(
        wellness_days=[wellness_day(0, 7)],
    )

    trends = _service(repository).wellness_trends(TimeWindow.WEEK, today=DAY)

    assert not trends.ready
    assert trends.comparison is None
    assert trends.report.average_score == 7.0


def test_build_wellness_days_skips_empty_days() -> None:
    repository = InMemoryCareRecordRepository.from_records(
        log_entries=[
            mood_entry("content", at(9), pain_level=3),
            activity_entry("physical_therapy", at(15)),
            mood_entry("happy", at(9, day=DAY + timedelta(days=2))),
        ],
        visits=[make_visit(at(16))],
    )

    days = _service(repository).build_wellness_days(DAY, DAY + timedelta(days=3))

    assert [day.date for day in days] == [DAY, DAY + timedelta(days=2)]
    assert days[0].therapy_sessions == 1
    assert days[0].visit_count == 1
    assert days[0].pain_level == 3
    assert days[1].mood_am == "happy"


def test_visit_summary() -> None:
    repository = InMemoryCareRecordRepository.from_records(
        visits=[
            make_visit(datetime(2024, 3, 11, 10, 0, tzinfo=UTC), minutes=30),
            make_visit(datetime(2024, 3, 5, 10, 0, tzinfo=UTC), minutes=30),
        ],
    )

    summary = _service(repository).visit_summary(now=NOON)

    assert summary.count == 1
    assert summary.total_minutes == 30
    assert len(summary.last_week) == 1


def test_debug_logs_record_counts(repository, caplog) -> None:
    caplog.set_level(logging.INFO, logger="care_analytics.services.analytics")

    _service(repository, debug=True).daily_digest(DAY)

    assert "Daily digest: day=2024-03-12 entries=0 visits=0" in caplog.text


def test_quiet_without_debug(repository, caplog) -> None:
    caplog.set_level(logging.INFO, logger="care_analytics.services.analytics")

    _service(repository).daily_digest(DAY)

    assert caplog.text == ""
