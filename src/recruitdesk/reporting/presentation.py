"""Framework-free display helpers: blind-mode gating and badge styles."""

from __future__ import annotations

from typing import Any

from recruitdesk.models import CandidateRecord

_NEUTRAL = "grey62"

_INTENT_STYLES: dict[str, str] = {
    "very-high": "magenta",
    "high": "green",
    "medium": "blue",
    "low": "grey62",
}

_STATUS_STYLES: dict[str, str] = {
    "new": "blue",
    "contacted": "magenta",
    "applied": "dark_orange",
    "interviewed": "cyan",
    "accepted": "green",
}


def intent_style(intent: str | None) -> str:
    """Rich style for an intent badge; unknown values get the neutral style."""
    return _INTENT_STYLES.get(intent or "", _NEUTRAL)


def status_style(status: str | None) -> str:
    return _STATUS_STYLES.get(status or "", _NEUTRAL)


def display_identity(record: CandidateRecord) -> str:
    """Name for revealed candidates, blind id otherwise."""
    if record.is_revealed and record.name:
        return record.name
    return record.blind_id


def contact_details(record: CandidateRecord) -> dict[str, str]:
    """Email and phone, only for revealed candidates."""
    if not record.is_revealed:
        return {}
    details = {}
    if record.email:
        details["email"] = record.email
    if record.phone:
        details["phone"] = record.phone
    return details


def present_candidate(record: CandidateRecord) -> dict[str, Any]:
    """Flatten a record into the fields a view may show.

    Blind-mode records never carry ``name``, ``email`` or ``phone`` here,
    whatever the upstream record holds.
    """
    row: dict[str, Any] = {
        "id": record.id,
        "identity": display_identity(record),
        "match_score": record.match_score,
        "program": record.program,
        "intent": record.intent,
        "status": record.status or "",
        "activity": record.activity,
        "activity_date": record.activity_date.isoformat() if record.activity_date else "",
        "skills": list(record.skills),
        "location": record.location or "",
        "favorite": record.favorite,
        "is_revealed": record.is_revealed,
    }
    if record.is_revealed:
        row["name"] = record.name or ""
        row.update(contact_details(record))
    return row
