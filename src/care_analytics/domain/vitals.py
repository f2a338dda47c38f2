"""Clinically-normal bands for single vital sign readings.

Every predicate treats a missing value as passing, so a reading with no data
for a metric is never counted against it.
"""

from dataclasses import dataclass

from care_analytics.domain.records import VitalsReading


@dataclass(frozen=True)
class Band:
    """Inclusive normal range; ``None`` leaves a side unbounded."""

    low: float | None = None
    high: float | None = None

    def contains(self, value: float) -> bool:
        if self.low is not None and value < self.low:
            return False
        if self.high is not None and value > self.high:
            return False
        return True


SYSTOLIC_BAND = Band(90, 140)
DIASTOLIC_BAND = Band(60, 90)
HEART_RATE_BAND = Band(60, 100)
OXYGEN_SATURATION_BAND = Band(low=95)
TEMPERATURE_BAND = Band(97.0, 99.5)
RESPIRATORY_RATE_BAND = Band(12, 20)


def _within(value: float | None, band: Band) -> bool:
    return value is None or band.contains(value)


def blood_pressure_normal(systolic: float | None, diastolic: float | None) -> bool:
    """Judge blood pressure only when both values are recorded."""
    if systolic is None or diastolic is None:
        return True
    return SYSTOLIC_BAND.contains(systolic) and DIASTOLIC_BAND.contains(diastolic)


def heart_rate_normal(heart_rate: float | None) -> bool:
    return _within(heart_rate, HEART_RATE_BAND)


def oxygen_saturation_normal(oxygen_saturation: float | None) -> bool:
    return _within(oxygen_saturation, OXYGEN_SATURATION_BAND)


def temperature_normal(temperature: float | None) -> bool:
    return _within(temperature, TEMPERATURE_BAND)


def respiratory_rate_normal(respiratory_rate: float | None) -> bool:
    return _within(respiratory_rate, RESPIRATORY_RATE_BAND)


def is_vitals_normal(reading: VitalsReading) -> bool:
    """Return True when every present reading falls inside its band."""
    return (
        blood_pressure_normal(reading.systolic, reading.diastolic)
        and heart_rate_normal(reading.heart_rate)
        and oxygen_saturation_normal(reading.oxygen_saturation)
        and temperature_normal(reading.temperature)
        and respiratory_rate_normal(reading.respiratory_rate)
    )
