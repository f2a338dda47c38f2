"""Pydantic models for raw care records supplied by a record store."""

from collections.abc import Iterable
from datetime import date, datetime

from pydantic import BaseModel, Field, ValidationError, model_validator

from care_analytics.domain.records import (
    ActivityLog,
    ActivityType,
    Alertness,
    Appetite,
    IncidentLog,
    IncidentType,
    LogCategory,
    LogEntry,
    LogPayload,
    MedicationLog,
    Mood,
    MoodLog,
    Participation,
    Severity,
    UserRole,
    Visit,
    VisitMood,
    VitalsReading,
)
from care_analytics.domain.wellness import Engagement, WellnessDay

_PAYLOAD_FIELDS = {
    "vitals": "vitals",
    "medication": "medication_log",
    "activity": "activity_log",
    "mood": "mood_log",
    "incident": "incident_log",
}


class RecordValidationError(ValueError):
    """Raised when a raw record cannot be turned into a domain object."""


class VitalsPayload(BaseModel):
    """Vitals payload."""

    blood_pressure_systolic: float | None = Field(
        None, alias="bloodPressureSystolic", ge=0
    )
    blood_pressure_diastolic: float | None = Field(
        None, alias="bloodPressureDiastolic", ge=0
    )
    heart_rate: float | None = Field(None, alias="heartRate", ge=0)
    temperature: float | None = Field(None, ge=0)
    oxygen_saturation: float | None = Field(
        None, alias="oxygenSaturation", ge=0, le=100
    )
    weight: float | None = Field(None, ge=0)
    respiratory_rate: float | None = Field(None, alias="respiratoryRate", ge=0)

    def to_domain(self) -> VitalsReading:
        return VitalsReading(
            systolic=self.blood_pressure_systolic,
            diastolic=self.blood_pressure_diastolic,
            heart_rate=self.heart_rate,
            temperature=self.temperature,
            oxygen_saturation=self.oxygen_saturation,
            respiratory_rate=self.respiratory_rate,
            weight=self.weight,
        )


class MedicationPayload(BaseModel):
    """Medication administration payload."""

    medication_name: str = Field(alias="medicationName")
    dosage: str
    route: str | None = None
    administered_by: str = Field(alias="administeredBy")

    def to_domain(self) -> MedicationLog:
        return MedicationLog(
            medication_name=self.medication_name,
            dosage=self.dosage,
            administered_by=self.administered_by,
            route=self.route,
        )


class ActivityPayload(BaseModel):
    """Activity payload."""

    activity_type: ActivityType = Field(alias="activityType")
    description: str
    duration: int | None = Field(None, ge=0)
    participation: Participation | None = None

    def to_domain(self) -> ActivityLog:
        return ActivityLog(
            activity_type=self.activity_type,
            description=self.description,
            duration=self.duration,
            participation=self.participation,
        )


class MoodPayload(BaseModel):
    """Mood check payload."""

    mood: Mood
    alertness: Alertness
    appetite: Appetite
    pain_level: int | None = Field(None, alias="painLevel", ge=0, le=10)

    def to_domain(self) -> MoodLog:
        return MoodLog(
            mood=self.mood,
            alertness=self.alertness,
            appetite=self.appetite,
            pain_level=self.pain_level,
        )


class IncidentPayload(BaseModel):
    """Incident payload."""

    incident_type: IncidentType = Field(alias="incidentType")
    severity: Severity
    description: str
    action_taken: str = Field(alias="actionTaken")
    physician_notified: bool = Field(False, alias="physicianNotified")
    family_notified: bool = Field(False, alias="familyNotified")

    def to_domain(self) -> IncidentLog:
        return IncidentLog(
            incident_type=self.incident_type,
            severity=self.severity,
            description=self.description,
            action_taken=self.action_taken,
            physician_notified=self.physician_notified,
            family_notified=self.family_notified,
        )


class LogEntryPayload(BaseModel):
    """Care log entry payload with exactly one category-specific section."""

    id: str
    category: LogCategory
    title: str | None = None
    notes: str | None = None
    entered_by: str = Field(alias="enteredBy")
    entered_by_name: str = Field(alias="enteredByName")
    entered_by_role: UserRole = Field(alias="enteredByRole")
    created_at: datetime = Field(alias="createdAt")
    vitals: VitalsPayload | None = None
    medication_log: MedicationPayload | None = Field(None, alias="medicationLog")
    activity_log: ActivityPayload | None = Field(None, alias="activityLog")
    mood_log: MoodPayload | None = Field(None, alias="moodLog")
    incident_log: IncidentPayload | None = Field(None, alias="incidentLog")

    @model_validator(mode="after")
    def _check_payload(self) -> "LogEntryPayload":
        populated = [
            category
            for category, attribute in _PAYLOAD_FIELDS.items()
            if getattr(self, attribute) is not None
        ]
        if populated != [self.category]:
            raise ValueError(
                f"category {self.category!r} requires exactly one matching payload, "
                f"got {populated or 'none'}"
            )
        if self.created_at.tzinfo is None:
            raise ValueError("createdAt must include a timezone offset")
        return self

    def to_domain(self) -> LogEntry:
        section = getattr(self, _PAYLOAD_FIELDS[self.category])
        payload: LogPayload = section.to_domain()
        return LogEntry(
            id=self.id,
            created_at=self.created_at,
            entered_by=self.entered_by,
            entered_by_name=self.entered_by_name,
            entered_by_role=self.entered_by_role,
            payload=payload,
            title=self.title,
            notes=self.notes,
        )


class VisitPayload(BaseModel):
    """Visit check-in/check-out payload."""

    id: str
    visitor_id: str = Field(alias="visitorId")
    visitor_name: str = Field(alias="visitorName")
    visitor_relationship: str | None = Field(None, alias="visitorRelationship")
    check_in_time: datetime = Field(alias="checkInTime")
    check_out_time: datetime | None = Field(None, alias="checkOutTime")
    duration: int | None = Field(None, ge=0)
    mood: VisitMood | None = None
    note: str | None = None

    @model_validator(mode="after")
    def _check_times(self) -> "VisitPayload":
        if self.check_in_time.tzinfo is None:
            raise ValueError("checkInTime must include a timezone offset")
        if self.check_out_time is not None and self.check_out_time < self.check_in_time:
            raise ValueError("checkOutTime precedes checkInTime")
        return self

    def to_domain(self) -> Visit:
        return Visit(
            id=self.id,
            visitor_id=self.visitor_id,
            visitor_name=self.visitor_name,
            visitor_relationship=self.visitor_relationship,
            check_in_time=self.check_in_time,
            check_out_time=self.check_out_time,
            duration=self.duration,
            mood=self.mood,
            note=self.note,
        )


class WellnessDayPayload(BaseModel):
    """Daily wellness rollup payload."""

    date: date
    overall_score: int = Field(alias="overallScore", ge=1, le=10)
    mood_am: Mood | None = Field(None, alias="moodAM")
    mood_pm: Mood | None = Field(None, alias="moodPM")
    appetite: Appetite | None = None
    pain_level: int | None = Field(None, alias="painLevel", ge=0, le=10)
    social_engagement: Engagement | None = Field(None, alias="socialEngagement")
    therapy_sessions: int = Field(0, alias="therapySessions", ge=0)
    visit_count: int = Field(0, alias="visitCount", ge=0)

    def to_domain(self) -> WellnessDay:
        return WellnessDay(
            date=self.date,
            overall_score=self.overall_score,
            mood_am=self.mood_am,
            mood_pm=self.mood_pm,
            appetite=self.appetite,
            pain_level=self.pain_level,
            social_engagement=self.social_engagement,
            therapy_sessions=self.therapy_sessions,
            visit_count=self.visit_count,
        )


def parse_log_entry(raw: dict[str, object]) -> LogEntry:
    """Validate a raw log entry and build the domain object."""
    try:
        return LogEntryPayload.model_validate(raw).to_domain()
    except ValidationError as exc:
        raise RecordValidationError(f"Invalid log entry: {exc}") from exc


def parse_visit(raw: dict[str, object]) -> Visit:
    """Validate a raw visit and build the domain object."""
    try:
        return VisitPayload.model_validate(raw).to_domain()
    except ValidationError as exc:
        raise RecordValidationError(f"Invalid visit: {exc}") from exc


def parse_wellness_day(raw: dict[str, object]) -> WellnessDay:
    """Validate a raw wellness rollup and build the domain object."""
    try:
        return WellnessDayPayload.model_validate(raw).to_domain()
    except ValidationError as exc:
        raise RecordValidationError(f"Invalid wellness day: {exc}") from exc


def parse_log_entries(raws: Iterable[dict[str, object]]) -> list[LogEntry]:
    return [parse_log_entry(raw) for raw in raws]


def parse_visits(raws: Iterable[dict[str, object]]) -> list[Visit]:
    return [parse_visit(raw) for raw in raws]


def parse_wellness_days(raws: Iterable[dict[str, object]]) -> list[WellnessDay]:
    return [parse_wellness_day(raw) for raw in raws]
