# simlog_app/utils.py
import math
import re
import time
import uuid
from datetime import datetime, timezone
from typing import Optional

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def safe_float(value, default=0.0):
    """Safely convert value to float, handling NaN and inf values"""
    try:
        value = float(value)
        if math.isnan(value) or math.isinf(value):
            return default
        return value
    except (ValueError, TypeError):
        return default


def is_valid_time(value: Optional[str]) -> bool:
    return bool(value) and TIME_PATTERN.match(value) is not None


def calculate_duration(start: Optional[str], end: Optional[str]) -> float:
    """
    Hours between two HH:mm clock times, rounded to 2 decimals.
    An end time earlier than the start counts as a single midnight crossing.
    """
    if not start or not end:
        return 0.0
    start_h, start_m = (int(p) for p in start.split(":"))
    end_h, end_m = (int(p) for p in end.split(":"))

    duration = (end_h + end_m / 60) - (start_h + start_m / 60)
    if duration < 0:
        duration += 24
    return round(duration, 2)


def build_session_name(simulator: str, date: str) -> str:
    return f"{simulator}_{date}"


def new_record_id() -> str:
    return uuid.uuid4().hex


def now_ms() -> int:
    return int(time.time() * 1000)


def iso_now() -> str:
    # Same shape as JavaScript's toISOString(): millisecond precision, Z suffix
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def today_iso() -> str:
    return datetime.now(timezone.utc).date().isoformat()
