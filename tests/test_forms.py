import pytest
from pydantic import ValidationError

from simlog_app.forms import IssueForm, MaintenanceForm, OwnerMaintenanceForm, SessionForm
from simlog_app.models import IssueSeverity, IssueStatus, SessionType
from simlog_app.utils import today_iso

DECLARED = {
    "started_per_checklist": True,
    "briefed_participants": True,
    "shutdown_per_checklist": True,
}


def session_form(**overrides):
    data = {
        "instructor_name": "Inst. Goose",
        "date": "2024-05-20",
        "start_time": "23:00",
        "end_time": "01:00",
        "session_type": "Certified",
        **DECLARED,
    }
    data.update(overrides)
    return SessionForm(**data)


def test_session_record_is_derived_from_form():
    record = session_form(notes="Engine fire drill").to_record()

    assert record.session_name == "Airbus A320_2024-05-20"
    assert record.duration_hours == 2.0
    assert record.session_type == SessionType.CERTIFIED
    assert record.downtime_minutes == 0
    assert record.notes == "Engine fire drill"
    assert record.id and record.timestamp > 0


def test_session_type_is_required():
    with pytest.raises(ValidationError, match="Please select a Session Type."):
        session_form(session_type=None)


@pytest.mark.parametrize("unchecked", list(DECLARED))
def test_all_declarations_required(unchecked):
    with pytest.raises(ValidationError, match="safety and checklist declarations"):
        session_form(**{unchecked: False})


@pytest.mark.parametrize("reason", [None, "", "   "])
def test_lost_session_needs_reason(reason):
    with pytest.raises(ValidationError, match="explanation for the lost session"):
        session_form(is_session_lost=True, session_lost_reason=reason)


def test_lost_reason_dropped_when_session_not_lost():
    record = session_form(is_session_lost=False, session_lost_reason="Motion fault").to_record()
    assert record.session_lost_reason is None

    record = session_form(is_session_lost=True, session_lost_reason="Motion fault").to_record()
    assert record.session_lost_reason == "Motion fault"


def test_bad_time_and_negative_downtime_rejected():
    with pytest.raises(ValidationError):
        session_form(start_time="9am")
    with pytest.raises(ValidationError):
        session_form(downtime_minutes=-5)


@pytest.mark.parametrize("field", ["start_time", "end_time"])
def test_times_are_required(field):
    with pytest.raises(ValidationError, match="HH:mm"):
        session_form(**{field: ""})

    data = {
        "instructor_name": "Inst. Goose",
        "session_type": "Certified",
        **DECLARED,
    }
    with pytest.raises(ValidationError):
        SessionForm(**data)


@pytest.mark.parametrize("bad_date", ["2024-13-45", "2024-02-30", "yesterday"])
def test_date_must_be_a_calendar_date(bad_date):
    with pytest.raises(ValidationError, match="calendar date"):
        session_form(date=bad_date)


def test_date_defaults_to_today():
    form = SessionForm(
        instructor_name="Inst. Goose",
        start_time="09:00",
        end_time="10:00",
        session_type="Certified",
        **DECLARED,
    )
    assert form.date == today_iso()


def test_session_form_accepts_camel_case_keys():
    form = SessionForm.model_validate({
        "instructorName": "Capt. Starbuck",
        "sessionType": "Non-Certified",
        "startTime": "09:00",
        "endTime": "10:30",
        "startedPerChecklist": True,
        "briefedParticipants": True,
        "shutdownPerChecklist": True,
    })
    assert form.to_record().duration_hours == 1.5


def test_issue_defaults():
    record = IssueForm(description="Yoke sticks at full left").to_record()
    assert record.reported_by == "Unknown Instructor"
    assert record.severity == IssueSeverity.LOW
    assert record.status == IssueStatus.OPEN
    assert record.component == "Visual System"


def test_issue_component_must_be_known():
    with pytest.raises(ValidationError):
        IssueForm(description="Coffee machine broken", component="Galley")


def test_maintenance_form():
    with pytest.raises(ValidationError):
        MaintenanceForm(technician="Tech Mike", action_performed="Lamp swap", hours_spent=-1)

    record = MaintenanceForm(
        technician="Tech Mike", action_performed="Lamp swap", hours_spent=0.5, related_issue_id=""
    ).to_record()
    assert record.related_issue_id is None
    assert record.hours_spent == 0.5


def test_owner_maintenance_defaults():
    record = OwnerMaintenanceForm(action_performed="Filter change").to_record()
    assert record.technician == "Owner"
    assert record.hours_spent == 1.0
