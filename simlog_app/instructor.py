# simlog_app/instructor.py
import logging

from fastapi import APIRouter, Depends

from simlog_app.dependencies import get_store, require_role
from simlog_app.forms import IssueForm, SessionForm
from simlog_app.models import to_payloads
from simlog_app.storage import SimLogStore

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_role("instructor", "admin"))])


# --- Log a simulator session ---
@router.post("/sessions")
def log_session(form: SessionForm, store: SimLogStore = Depends(get_store)):
    session = form.to_record()
    store.sessions.add(session)
    logger.info("Session %s logged by %s (%.2f h)", session.session_name, session.instructor_name, session.duration_hours)
    return {"message": "Flight Logged Successfully", "session": session.to_payload()}


# --- Report an issue (squawk) ---
@router.post("/issues")
def report_issue(form: IssueForm, store: SimLogStore = Depends(get_store)):
    issue = form.to_record()
    store.issues.add(issue)
    logger.info("Issue %s reported on %s (%s)", issue.id, issue.component, issue.severity.value)
    return {"message": "Issue Reported. Maintenance Notified.", "issue": issue.to_payload()}


@router.get("/sessions")
def list_sessions(store: SimLogStore = Depends(get_store)):
    return {"sessions": to_payloads(store.sessions.get_all())}
