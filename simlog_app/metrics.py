# simlog_app/metrics.py
"""
Dashboard aggregates computed from collection snapshots.
Nothing here is cached or persisted; callers pass in whatever they just read.
"""
from typing import Any, Dict, List

import pandas as pd

from simlog_app.models import IssueReport, IssueSeverity, IssueStatus, MaintenanceLog, SessionLog
from simlog_app.utils import safe_float

GROUNDED = "Grounded"
OPERATIONAL = "Operational"


def safe_sum(series, default=0.0):
    """Safely calculate sum, handling empty series and NaN values"""
    if series.empty:
        return default
    return safe_float(series.sum(), default)


def _open(issues: List[IssueReport]) -> List[IssueReport]:
    return [i for i in issues if i.status != IssueStatus.RESOLVED]


def total_flight_hours(sessions: List[SessionLog]) -> float:
    return safe_sum(pd.Series([s.duration_hours for s in sessions], dtype=float))


def total_maintenance_hours(maintenance: List[MaintenanceLog]) -> float:
    return safe_sum(pd.Series([m.hours_spent for m in maintenance], dtype=float))


def open_issues_count(issues: List[IssueReport]) -> int:
    return len(_open(issues))


def critical_issues_count(issues: List[IssueReport]) -> int:
    return sum(1 for i in _open(issues) if i.severity == IssueSeverity.CRITICAL)


def system_status(issues: List[IssueReport]) -> str:
    return GROUNDED if critical_issues_count(issues) > 0 else OPERATIONAL


def hours_by_instructor(sessions: List[SessionLog]) -> List[Dict[str, Any]]:
    df = pd.DataFrame({
        "name": [s.instructor_name for s in sessions],
        "hours": pd.Series([s.duration_hours for s in sessions], dtype=float),
    })
    # sort=False keeps groups in first-seen order
    grouped = df.groupby("name", sort=False)["hours"].sum()
    return [{"name": name, "hours": safe_float(hours)} for name, hours in grouped.items()]


def issues_by_component(issues: List[IssueReport]) -> List[Dict[str, Any]]:
    df = pd.DataFrame({"name": [i.component for i in issues]})
    grouped = df.groupby("name", sort=False).size()
    return [{"name": name, "count": int(count)} for name, count in grouped.items()]


def build_dashboard_summary(
    sessions: List[SessionLog],
    issues: List[IssueReport],
    maintenance: List[MaintenanceLog],
) -> Dict[str, Any]:
    return {
        "total_flight_hours": total_flight_hours(sessions),
        "total_maintenance_hours": total_maintenance_hours(maintenance),
        "open_issues": open_issues_count(issues),
        "critical_issues": critical_issues_count(issues),
        "system_status": system_status(issues),
        "session_count": len(sessions),
        "maintenance_count": len(maintenance),
        "hours_by_instructor": hours_by_instructor(sessions),
        "issues_by_component": issues_by_component(issues),
    }
