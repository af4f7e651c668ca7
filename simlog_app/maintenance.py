#simlog_app/maintenance.py
from fastapi import APIRouter, Depends

from simlog_app.dependencies import get_store, require_role
from simlog_app.forms import MaintenanceForm
from simlog_app.models import IssueStatus, to_payloads
from simlog_app.storage import SimLogStore

router = APIRouter(dependencies=[Depends(require_role("maintenance", "admin"))])


# --- Record a repair or inspection ---
@router.post("/logs")
def log_maintenance(form: MaintenanceForm, store: SimLogStore = Depends(get_store)):
    log = form.to_record()
    store.maintenance.add(log)
    return {"message": "Maintenance Recorded Successfully", "log": log.to_payload()}


@router.get("/logs")
def view_logs(store: SimLogStore = Depends(get_store)):
    return {"logs": to_payloads(store.maintenance.get_all())}


# --- Open squawks for technician context ---
@router.get("/open-issues")
def open_issues(store: SimLogStore = Depends(get_store)):
    issues = [i for i in store.issues.get_all() if i.status != IssueStatus.RESOLVED]
    return {"issues": to_payloads(issues)}
