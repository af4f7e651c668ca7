# simlog_app/llm_engine.py - executive summary of facility data via the Groq API
import json
import logging
from typing import List

import requests

from simlog_app import config
from simlog_app.models import IssueReport, IssueStatus, MaintenanceLog, SessionLog

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "Groq API Key is missing. Please configure the environment."
FAILURE_MESSAGE = "Unable to generate AI analysis at this time."
EMPTY_MESSAGE = "No analysis available."

RECENT_SESSIONS = 10
RECENT_MAINTENANCE = 5


def build_data_context(
    issues: List[IssueReport],
    maintenance: List[MaintenanceLog],
    sessions: List[SessionLog],
) -> str:
    open_issues = [i for i in issues if i.status != IssueStatus.RESOLVED]
    recent_sessions = sessions[:RECENT_SESSIONS]
    recent_hours = sum(s.duration_hours for s in recent_sessions)

    open_json = json.dumps(
        [{"sev": i.severity.value, "comp": i.component, "desc": i.description} for i in open_issues]
    )
    maintenance_json = json.dumps(
        [{"action": m.action_performed} for m in maintenance[:RECENT_MAINTENANCE]]
    )
    return f"""
Open Issues: {open_json}
Recent Maintenance: {maintenance_json}
Recent Usage: {len(recent_sessions)} sessions in last period. Total hours logged recently: {recent_hours:g}.
"""


def build_prompt(data_context: str) -> str:
    return f"""
You are an expert Flight Simulator Maintenance Chief.
Analyze the following data context from our flight simulator facility.

Data Context:
{data_context}

Please provide a brief, professional executive summary (max 3 bullet points) for the owner regarding:
1. Critical attention items (if any grounded/high severity issues).
2. Suggested maintenance actions based on patterns.
3. Operational readiness status (Green/Yellow/Red).

Keep it strictly professional and aviation-focused.
"""


def analyze_sim_data(
    issues: List[IssueReport],
    maintenance: List[MaintenanceLog],
    sessions: List[SessionLog],
) -> str:
    """
    Ask the LLM for an owner-facing summary of open issues, recent maintenance and usage.
    Never raises: a missing key or a failed call comes back as a fixed message.
    """
    if not config.GROQ_API_KEY:
        return MISSING_KEY_MESSAGE

    prompt = build_prompt(build_data_context(issues, maintenance, sessions))

    headers = {
        "Authorization": f"Bearer {config.GROQ_API_KEY}",
        "Content-Type": "application/json"
    }
    payload = {
        "model": config.GROQ_MODEL,
        "messages": [
            {
                "role": "user",
                "content": prompt
            }
        ],
        "max_tokens": 1024,
        "temperature": 0.7,
        "stream": False
    }

    try:
        response = requests.post(
            config.GROQ_API_URL,
            headers=headers,
            json=payload,
            timeout=config.GROQ_TIMEOUT_SECONDS
        )
        response.raise_for_status()

        result = response.json()
        analysis = result["choices"][0]["message"]["content"]
    except requests.exceptions.RequestException:
        logger.exception("Groq analysis request failed")
        return FAILURE_MESSAGE
    except (KeyError, IndexError, TypeError, ValueError):
        logger.exception("Groq response format error")
        return FAILURE_MESSAGE

    return analysis if analysis else EMPTY_MESSAGE
