#models.py
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class IssueSeverity(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical (Grounded)"


class IssueStatus(str, Enum):
    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"


class SessionType(str, Enum):
    CERTIFIED = "Certified"
    NON_CERTIFIED = "Non-Certified"


class Role(str, Enum):
    INSTRUCTOR = "instructor"
    MAINTENANCE = "maintenance"
    ADMIN = "admin"


INSTRUCTORS = ["Capt. Reynolds", "Inst. Maverick", "Inst. Goose", "Capt. Starbuck"]
COMPONENTS = [
    "Visual System",
    "Motion Platform",
    "Avionics",
    "Controls (Yoke/Pedals)",
    "Instructor Station",
    "Software",
]
SIMULATORS = ["Airbus A320"]
DEFAULT_SIMULATOR = SIMULATORS[0]


# --- Stored records (camelCase on the wire and in storage) ---
class Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    timestamp: int

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SessionLog(Record):
    session_name: str
    instructor_name: str
    date: str
    start_time: str
    end_time: str
    duration_hours: float
    simulator: str
    session_type: SessionType
    downtime_minutes: int = Field(default=0, ge=0)
    is_session_lost: bool = False
    session_lost_reason: Optional[str] = None
    notes: Optional[str] = None


class IssueReport(Record):
    reported_by: str
    date: str
    severity: IssueSeverity
    status: IssueStatus
    component: str
    description: str
    resolution_notes: Optional[str] = None


class MaintenanceLog(Record):
    date: str
    technician: str
    action_performed: str
    related_issue_id: Optional[str] = None
    hours_spent: float = Field(ge=0)


def to_payloads(records: List[Record]) -> List[Dict[str, Any]]:
    return [r.to_payload() for r in records]
