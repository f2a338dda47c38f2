"""Domain models for care log entries and visits."""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Literal

UserRole = Literal["admin", "nurse", "family"]
LogCategory = Literal["vitals", "medication", "activity", "mood", "incident"]
ActivityType = Literal[
    "physical_therapy",
    "occupational_therapy",
    "meal",
    "social",
    "walk",
    "exercise",
    "other",
]
Participation = Literal["active", "moderate", "minimal", "refused"]
Mood = Literal["happy", "content", "neutral", "anxious", "sad", "agitated"]
Alertness = Literal["alert", "drowsy", "lethargic", "unresponsive"]
Appetite = Literal["good", "fair", "poor", "refused"]
IncidentType = Literal[
    "fall", "behavior_change", "condition_change", "complaint", "other"
]
Severity = Literal["low", "moderate", "high"]
VisitMood = Literal["great", "good", "ok", "tough", "hard"]


@dataclass(frozen=True)
class VitalsReading:
    """Vital sign measurements; any field may be missing."""

    systolic: float | None = None
    diastolic: float | None = None
    heart_rate: float | None = None
    temperature: float | None = None
    oxygen_saturation: float | None = None
    respiratory_rate: float | None = None
    weight: float | None = None

    category: ClassVar[LogCategory] = "vitals"


@dataclass(frozen=True)
class MedicationLog:
    """Medication administration record."""

    medication_name: str
    dosage: str
    administered_by: str
    route: str | None = None

    category: ClassVar[LogCategory] = "medication"


@dataclass(frozen=True)
class ActivityLog:
    """Activity participation record."""

    activity_type: ActivityType
    description: str
    duration: int | None = None
    participation: Participation | None = None

    category: ClassVar[LogCategory] = "activity"


@dataclass(frozen=True)
class MoodLog:
    """Mood and behavior check."""

    mood: Mood
    alertness: Alertness
    appetite: Appetite
    pain_level: int | None = None

    category: ClassVar[LogCategory] = "mood"


@dataclass(frozen=True)
class IncidentLog:
    """Incident report."""

    incident_type: IncidentType
    severity: Severity
    description: str
    action_taken: str
    physician_notified: bool = False
    family_notified: bool = False

    category: ClassVar[LogCategory] = "incident"


LogPayload = VitalsReading | MedicationLog | ActivityLog | MoodLog | IncidentLog


@dataclass(frozen=True)
class LogEntry:
    """A timestamped care observation carrying exactly one payload."""

    id: str
    created_at: datetime
    entered_by: str
    entered_by_name: str
    entered_by_role: UserRole
    payload: LogPayload
    title: str | None = None
    notes: str | None = None

    @property
    def category(self) -> LogCategory:
        """Category derived from the payload variant."""
        return self.payload.category

    @property
    def vitals(self) -> VitalsReading | None:
        return self.payload if isinstance(self.payload, VitalsReading) else None

    @property
    def medication_log(self) -> MedicationLog | None:
        return self.payload if isinstance(self.payload, MedicationLog) else None

    @property
    def activity_log(self) -> ActivityLog | None:
        return self.payload if isinstance(self.payload, ActivityLog) else None

    @property
    def mood_log(self) -> MoodLog | None:
        return self.payload if isinstance(self.payload, MoodLog) else None

    @property
    def incident_log(self) -> IncidentLog | None:
        return self.payload if isinstance(self.payload, IncidentLog) else None


@dataclass(frozen=True)
class Visit:
    """Family member check-in/check-out record."""

    id: str
    visitor_id: str
    visitor_name: str
    check_in_time: datetime
    visitor_relationship: str | None = None
    check_out_time: datetime | None = None
    duration: int | None = None
    mood: VisitMood | None = None
    note: str | None = None

    @property
    def is_active(self) -> bool:
        """Whether the visitor has not checked out yet."""
        return self.check_out_time is None
