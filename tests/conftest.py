"""Shared test fixtures and record builders."""

import logging
from collections.abc import Iterator
from datetime import UTC, date, datetime, timedelta
from itertools import count

import pytest

from care_analytics.adapters.memory_repository import InMemoryCareRecordRepository
from care_analytics.app_logging import LOGGER_NAME
from care_analytics.config import Settings
from care_analytics.domain.records import (
    ActivityLog,
    IncidentLog,
    LogEntry,
    LogPayload,
    MedicationLog,
    MoodLog,
    Visit,
    VitalsReading,
)
from care_analytics.domain.wellness import WellnessDay

DAY = date(2024, 3, 12)
NOON = datetime(2024, 3, 12, 12, 0, tzinfo=UTC)

_ids = count(1)


def at(hour: int, minute: int = 0, day: date = DAY) -> datetime:
    """Return a UTC timestamp on ``day``."""
    return datetime(day.year, day.month, day.day, hour, minute, tzinfo=UTC)


def make_entry(payload: LogPayload, created_at: datetime = NOON) -> LogEntry:
    return LogEntry(
        id=f"log-{next(_ids)}",
        created_at=created_at,
        entered_by="nurse-1",
        entered_by_name="Maria Lopez",
        entered_by_role="nurse",
        payload=payload,
    )


def vitals_entry(created_at: datetime = NOON, **values: float) -> LogEntry:
    return make_entry(VitalsReading(**values), created_at)


def normal_vitals_entry(created_at: datetime = NOON) -> LogEntry:
    return vitals_entry(
        created_at,
        systolic=120,
        diastolic=80,
        heart_rate=72,
        temperature=98.4,
        oxygen_saturation=97,
    )


def mood_entry(
    mood: str = "content",
    created_at: datetime = NOON,
    appetite: str = "good",
    pain_level: int | None = None,
) -> LogEntry:
    return make_entry(
        MoodLog(mood=mood, alertness="alert", appetite=appetite, pain_level=pain_level),
        created_at,
    )


def activity_entry(
    activity_type: str = "walk",
    created_at: datetime = NOON,
    participation: str | None = None,
) -> LogEntry:
    return make_entry(
        ActivityLog(
            activity_type=activity_type,
            description=f"{activity_type} session",
            participation=participation,
        ),
        created_at,
    )


def medication_entry(created_at: datetime = NOON) -> LogEntry:
    return make_entry(
        MedicationLog(
            medication_name="Lisinopril", dosage="10mg", administered_by="Maria Lopez"
        ),
        created_at,
    )


def incident_entry(severity: str = "low", created_at: datetime = NOON) -> LogEntry:
    return make_entry(
        IncidentLog(
            incident_type="fall",
            severity=severity,
            description="Slipped near bed",
            action_taken="Assisted back to bed",
        ),
        created_at,
    )


def make_visit(
    check_in_time: datetime = NOON,
    visitor_id: str = "family-1",
    visitor_name: str = "Sarah",
    minutes: int | None = 60,
    duration: int | None = None,
) -> Visit:
    check_out = None if minutes is None else check_in_time + timedelta(minutes=minutes)
    return Visit(
        id=f"visit-{next(_ids)}",
        visitor_id=visitor_id,
        visitor_name=visitor_name,
        check_in_time=check_in_time,
        check_out_time=check_out,
        duration=duration,
    )


def wellness_day(offset: int, score: int = 6, **values: object) -> WellnessDay:
    return WellnessDay(date=DAY + timedelta(days=offset), overall_score=score, **values)


@pytest.fixture
def settings() -> Settings:
    return Settings(timezone="UTC", default_window_days=7, debug=False)


@pytest.fixture
def repository() -> InMemoryCareRecordRepository:
    return InMemoryCareRecordRepository()


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger(LOGGER_NAME)
    handlers, propagate, level = list(logger.handlers), logger.propagate, logger.level
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = handlers
    logger.propagate = propagate
    logger.setLevel(level)
