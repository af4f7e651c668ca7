# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from simlog_app import config
from simlog_app.main import create_app
from simlog_app.models import IssueReport, IssueSeverity, IssueStatus, SessionLog, SessionType
from simlog_app.storage import SimLogStore


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "simlog_test.db")


@pytest.fixture
def store(db_path):
    return SimLogStore(db_path)


@pytest.fixture
def client(db_path, monkeypatch):
    monkeypatch.setattr(config, "OWNER_PASSCODE_HASH", None)
    monkeypatch.setattr(config, "GROQ_API_KEY", None)
    with TestClient(create_app(db_path)) as c:
        yield c


def login(client, role, name=None, passcode=None):
    body = {"role": role}
    if name:
        body["name"] = name
    if passcode:
        body["passcode"] = passcode
    response = client.post("/login", json=body)
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def instructor_headers(client):
    return login(client, "instructor", "Capt. Reynolds")


@pytest.fixture
def maintenance_headers(client):
    return login(client, "maintenance", "Tech Mike")


@pytest.fixture
def admin_headers(client):
    return login(client, "admin")


def make_session(instructor="Capt. Reynolds", hours=2.5, sid="t1"):
    return SessionLog(
        id=sid,
        session_name="Airbus A320_2024-05-18",
        instructor_name=instructor,
        date="2024-05-18",
        start_time="09:00",
        end_time="11:30",
        duration_hours=hours,
        simulator="Airbus A320",
        session_type=SessionType.CERTIFIED,
        timestamp=1716000000000,
    )


def make_issue(
    iid="x1",
    status=IssueStatus.OPEN,
    severity=IssueSeverity.MEDIUM,
    component="Avionics",
    description="MCDU screen blank",
):
    return IssueReport(
        id=iid,
        reported_by="Inst. Goose",
        date="2024-05-18T10:00:00.000Z",
        severity=severity,
        status=status,
        component=component,
        description=description,
        timestamp=1716000000000,
    )
