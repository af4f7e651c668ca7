# simlog_app/dashboard.py
import logging
import threading

from fastapi import APIRouter, Depends, HTTPException

from simlog_app.dependencies import get_store, require_role
from simlog_app.forms import OwnerMaintenanceForm
from simlog_app.llm_engine import analyze_sim_data
from simlog_app.metrics import build_dashboard_summary
from simlog_app.models import to_payloads
from simlog_app.storage import IssueAlreadyResolved, SimLogStore

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_role("admin"))])

# One analysis request at a time per process
_analysis_lock = threading.Lock()


@router.get("/summary")
def get_summary(store: SimLogStore = Depends(get_store)):
    return build_dashboard_summary(
        store.sessions.get_all(),
        store.issues.get_all(),
        store.maintenance.get_all(),
    )


@router.get("/sessions")
def list_sessions(store: SimLogStore = Depends(get_store)):
    return {"sessions": to_payloads(store.sessions.get_all())}


@router.get("/issues")
def list_issues(store: SimLogStore = Depends(get_store)):
    return {"issues": to_payloads(store.issues.get_all())}


@router.get("/maintenance")
def list_maintenance(store: SimLogStore = Depends(get_store)):
    return {"logs": to_payloads(store.maintenance.get_all())}


@router.post("/maintenance")
def add_maintenance(form: OwnerMaintenanceForm, store: SimLogStore = Depends(get_store)):
    log = form.to_record()
    store.maintenance.add(log)
    return {"message": "Maintenance Recorded Successfully", "log": log.to_payload()}


# --- Resolve an issue and auto-log the maintenance entry ---
@router.put("/issues/{issue_id}/resolve")
def resolve_issue(issue_id: str, store: SimLogStore = Depends(get_store)):
    issue = store.issues.get(issue_id)
    if issue is None:
        raise HTTPException(status_code=404, detail="Issue not found")

    try:
        resolved, entry = store.resolve_issue(issue)
    except IssueAlreadyResolved:
        raise HTTPException(status_code=409, detail="Issue is already resolved")
    except KeyError:
        raise HTTPException(status_code=404, detail="Issue not found")
    return {
        "message": f"Issue {issue_id} resolved",
        "issue": resolved.to_payload(),
        "log": entry.to_payload(),
    }


# --- LLM executive summary ---
@router.post("/analysis")
def run_analysis(store: SimLogStore = Depends(get_store)):
    if not _analysis_lock.acquire(blocking=False):
        raise HTTPException(status_code=409, detail="Analysis already in progress")
    try:
        logger.info("Running facility analysis")
        analysis = analyze_sim_data(
            store.issues.get_all(),
            store.maintenance.get_all(),
            store.sessions.get_all(),
        )
    finally:
        _analysis_lock.release()
    return {"analysis": analysis}


@router.post("/reset")
def reset_data(store: SimLogStore = Depends(get_store)):
    store.reset_data()
    return {"message": "Demo data restored"}
