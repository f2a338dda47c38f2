"""Trailing-window statistics for recorded vital signs."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Literal

from care_analytics.domain.records import LogEntry, VitalsReading
from care_analytics.domain.stats import mean, round_half_up
from care_analytics.domain.vitals import (
    blood_pressure_normal,
    heart_rate_normal,
    oxygen_saturation_normal,
    respiratory_rate_normal,
    temperature_normal,
)

ValueTrend = Literal["up", "down", "stable"]


class TimeWindow(Enum):
    """Supported trailing windows, valued in days."""

    WEEK = 7
    MONTH = 30
    QUARTER = 90

    @property
    def days(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return f"{self.value}d"


@dataclass(frozen=True)
class MetricStats:
    """Descriptive statistics for one vital metric inside a window."""

    average: float
    minimum: float
    maximum: float
    abnormal_count: int
    current: float
    current_normal: bool
    trend: ValueTrend
    count: int


@dataclass(frozen=True)
class BloodPressureStats:
    """Blood pressure statistics over readings that carry both values."""

    average_systolic: int
    average_diastolic: int
    min_systolic: float
    max_systolic: float
    min_diastolic: float
    max_diastolic: float
    abnormal_count: int
    count: int


@dataclass(frozen=True)
class VitalsWindowReport:
    """Per-metric statistics; a metric without data in the window is None."""

    window: TimeWindow
    entry_count: int
    blood_pressure: BloodPressureStats | None
    heart_rate: MetricStats | None
    oxygen_saturation: MetricStats | None
    temperature: MetricStats | None
    respiratory_rate: MetricStats | None
    weight: MetricStats | None

    @property
    def has_data(self) -> bool:
        return self.entry_count > 0


def filter_window(
    entries: Sequence[LogEntry], window: TimeWindow, now: datetime
) -> list[LogEntry]:
    """Return vitals entries after the window cutoff, oldest first."""
    cutoff = now - timedelta(days=window.days)
    selected = [
        entry
        for entry in entries
        if entry.vitals is not None and cutoff < entry.created_at <= now
    ]
    return sorted(selected, key=lambda entry: entry.created_at)


def value_trend(first: float, latest: float) -> ValueTrend:
    """Compare the latest value with the earliest one."""
    if latest > first:
        return "up"
    if latest < first:
        return "down"
    return "stable"


def metric_stats(
    readings: Sequence[VitalsReading],
    field_name: str,
    is_normal: Callable[[float | None], bool],
    digits: int = 0,
) -> MetricStats | None:
    """Aggregate one optional field over chronologically ordered readings."""
    values = [
        value
        for value in (getattr(reading, field_name) for reading in readings)
        if value is not None
    ]
    average = mean(values)
    if average is None:
        return None
    rounded = round_half_up(average, digits)
    return MetricStats(
        average=int(rounded) if digits == 0 else rounded,
        minimum=min(values),
        maximum=max(values),
        abnormal_count=sum(1 for value in values if not is_normal(value)),
        current=values[-1],
        current_normal=is_normal(values[-1]),
        trend=value_trend(values[0], values[-1]),
        count=len(values),
    )


def blood_pressure_stats(
    readings: Sequence[VitalsReading],
) -> BloodPressureStats | None:
    pairs = [
        (reading.systolic, reading.diastolic)
        for reading in readings
        if reading.systolic is not None and reading.diastolic is not None
    ]
    if not pairs:
        return None
    systolic = [pair[0] for pair in pairs]
    diastolic = [pair[1] for pair in pairs]
    return BloodPressureStats(
        average_systolic=int(round_half_up(sum(systolic) / len(systolic))),
        average_diastolic=int(round_half_up(sum(diastolic) / len(diastolic))),
        min_systolic=min(systolic),
        max_systolic=max(systolic),
        min_diastolic=min(diastolic),
        max_diastolic=max(diastolic),
        abnormal_count=sum(
            1 for sys_value, dia_value in pairs
            if not blood_pressure_normal(sys_value, dia_value)
        ),
        count=len(pairs),
    )


def _no_band(_: float | None) -> bool:
    return True


def aggregate_vitals(
    entries: Sequence[LogEntry], window: TimeWindow, now: datetime
) -> VitalsWindowReport:
    """Compute per-metric statistics for the trailing window ending at ``now``."""
    selected = filter_window(entries, window, now)
    readings = [entry.vitals for entry in selected if entry.vitals is not None]
    return VitalsWindowReport(
        window=window,
        entry_count=len(selected),
        blood_pressure=blood_pressure_stats(readings),
        heart_rate=metric_stats(readings, "heart_rate", heart_rate_normal),
        oxygen_saturation=metric_stats(
            readings, "oxygen_saturation", oxygen_saturation_normal
        ),
        temperature=metric_stats(readings, "temperature", temperature_normal, 1),
        respiratory_rate=metric_stats(
            readings, "respiratory_rate", respiratory_rate_normal
        ),
        weight=metric_stats(readings, "weight", _no_band, 1),
    )


def is_trend_window_ready(days_recorded: int, window: TimeWindow) -> bool:
    """Whether enough days exist to chart trends for the window."""
    if window is TimeWindow.WEEK:
        return days_recorded >= 2
    return days_recorded * 10 >= window.days * 3
