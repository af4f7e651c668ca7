# simlog_app/forms.py
# Submitted form bodies. Validation errors reject the request before anything is stored.
import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from simlog_app.models import (
    COMPONENTS,
    DEFAULT_SIMULATOR,
    IssueReport,
    IssueSeverity,
    IssueStatus,
    MaintenanceLog,
    SessionLog,
    SessionType,
)
from simlog_app.utils import (
    build_session_name,
    calculate_duration,
    iso_now,
    is_valid_time,
    new_record_id,
    now_ms,
    today_iso,
)


class FormModel(BaseModel):
    # Accepts camelCase keys (as stored) or snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Instructor: log a session ---
class SessionForm(FormModel):
    instructor_name: str = Field(min_length=1)
    date: str = Field(default_factory=today_iso)
    start_time: str
    end_time: str
    simulator: str = DEFAULT_SIMULATOR
    session_type: Optional[SessionType] = None
    downtime_minutes: int = Field(default=0, ge=0)
    is_session_lost: bool = False
    session_lost_reason: Optional[str] = None
    notes: Optional[str] = None

    # Declarations
    started_per_checklist: bool = False
    briefed_participants: bool = False
    shutdown_per_checklist: bool = False

    @field_validator("start_time", "end_time")
    @classmethod
    def check_clock_time(cls, v: str) -> str:
        if not is_valid_time(v):
            raise ValueError("Times must use the 24-hour HH:mm format.")
        return v

    @field_validator("date")
    @classmethod
    def check_calendar_date(cls, v: str) -> str:
        try:
            return datetime.date.fromisoformat(v).isoformat()
        except ValueError:
            raise ValueError("Date must be a calendar date in YYYY-MM-DD format.")

    @model_validator(mode="after")
    def check_submission(self):
        if self.session_type is None:
            raise ValueError("Please select a Session Type.")
        if not (self.started_per_checklist and self.briefed_participants and self.shutdown_per_checklist):
            raise ValueError("You must confirm all safety and checklist declarations before submitting.")
        if self.is_session_lost and not (self.session_lost_reason or "").strip():
            raise ValueError("Please provide an explanation for the lost session.")
        return self

    def to_record(self) -> SessionLog:
        return SessionLog(
            id=new_record_id(),
            session_name=build_session_name(self.simulator, self.date),
            instructor_name=self.instructor_name,
            date=self.date,
            start_time=self.start_time,
            end_time=self.end_time,
            duration_hours=calculate_duration(self.start_time, self.end_time),
            simulator=self.simulator,
            session_type=self.session_type,
            downtime_minutes=self.downtime_minutes,
            is_session_lost=self.is_session_lost,
            session_lost_reason=self.session_lost_reason if self.is_session_lost else None,
            notes=self.notes or None,
            timestamp=now_ms(),
        )


# --- Instructor: report an issue ---
class IssueForm(FormModel):
    reported_by: Optional[str] = None
    severity: IssueSeverity = IssueSeverity.LOW
    component: str = COMPONENTS[0]
    description: str = Field(min_length=1)

    @field_validator("component")
    @classmethod
    def check_component(cls, v: str) -> str:
        if v not in COMPONENTS:
            raise ValueError(f"Unknown component '{v}'.")
        return v

    def to_record(self) -> IssueReport:
        return IssueReport(
            id=new_record_id(),
            reported_by=self.reported_by or "Unknown Instructor",
            date=iso_now(),
            severity=self.severity,
            status=IssueStatus.OPEN,
            component=self.component,
            description=self.description,
            timestamp=now_ms(),
        )


# --- Technician / Owner: log maintenance ---
class MaintenanceForm(FormModel):
    technician: str = Field(min_length=1)
    action_performed: str = Field(min_length=1)
    hours_spent: float = Field(ge=0)
    related_issue_id: Optional[str] = None

    def to_record(self) -> MaintenanceLog:
        return MaintenanceLog(
            id=new_record_id(),
            date=iso_now(),
            technician=self.technician,
            action_performed=self.action_performed,
            related_issue_id=self.related_issue_id or None,
            hours_spent=self.hours_spent,
            timestamp=now_ms(),
        )


class OwnerMaintenanceForm(MaintenanceForm):
    technician: str = Field(default="Owner", min_length=1)
    hours_spent: float = Field(default=1.0, ge=0)
