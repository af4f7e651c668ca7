# simlog_app/seed_data.py
# Example records shown until a collection has been written for the first time.
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from simlog_app.models import (
    IssueReport,
    IssueSeverity,
    IssueStatus,
    MaintenanceLog,
    SessionLog,
    SessionType,
)

DAY = timedelta(days=1)


def _at(now: datetime, ago: timedelta):
    moment = now - ago
    iso = moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return moment, iso, int(moment.timestamp() * 1000)


def _now(now: Optional[datetime]) -> datetime:
    return now or datetime.now(timezone.utc)


def seed_sessions(now: Optional[datetime] = None) -> List[SessionLog]:
    now = _now(now)
    rows = [
        ("s1", "Capt. Reynolds", 2 * DAY, "09:00", "11:30", 2.5, SessionType.CERTIFIED, 0),
        ("s2", "Inst. Maverick", DAY, "14:00", "15:30", 1.5, SessionType.NON_CERTIFIED, 15),
        ("s3", "Capt. Reynolds", timedelta(0), "10:00", "13:00", 3.0, SessionType.CERTIFIED, 0),
    ]
    sessions = []
    for sid, instructor, ago, start, end, hours, session_type, downtime in rows:
        moment, _, ts = _at(now, ago)
        day = moment.date().isoformat()
        sessions.append(SessionLog(
            id=sid,
            session_name=f"Airbus A320_{day}",
            instructor_name=instructor,
            date=day,
            start_time=start,
            end_time=end,
            duration_hours=hours,
            simulator="Airbus A320",
            session_type=session_type,
            downtime_minutes=downtime,
            is_session_lost=False,
            timestamp=ts,
        ))
    return sessions


def seed_issues(now: Optional[datetime] = None) -> List[IssueReport]:
    now = _now(now)
    _, i1_date, i1_ts = _at(now, 5 * DAY)
    _, i2_date, i2_ts = _at(now, timedelta(hours=12))
    return [
        IssueReport(
            id="i1",
            reported_by="Capt. Reynolds",
            date=i1_date,
            severity=IssueSeverity.LOW,
            status=IssueStatus.RESOLVED,
            component="Instructor Station",
            description="Touchscreen lagging slightly.",
            resolution_notes="Rebooted main server.",
            timestamp=i1_ts,
        ),
        IssueReport(
            id="i2",
            reported_by="Inst. Maverick",
            date=i2_date,
            severity=IssueSeverity.HIGH,
            status=IssueStatus.OPEN,
            component="Visual System",
            description="Projector 2 flickering intermittently.",
            timestamp=i2_ts,
        ),
    ]


def seed_maintenance(now: Optional[datetime] = None) -> List[MaintenanceLog]:
    _, m1_date, m1_ts = _at(_now(now), 4 * DAY)
    return [
        MaintenanceLog(
            id="m1",
            date=m1_date,
            technician="Tech Mike",
            action_performed="Routine visual inspection",
            hours_spent=1,
            timestamp=m1_ts,
        ),
    ]
