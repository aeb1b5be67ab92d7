"""Candidate source backed by a JSON export on disk."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from recruitdesk.exceptions import CandidateSourceError, InvalidRecordError
from recruitdesk.models import CandidateRecord

logger = logging.getLogger(__name__)

# Accepted spellings for each record field; camelCase comes from the web API.
_ALIASES: dict[str, tuple[str, ...]] = {
    "id": ("id",),
    "blind_id": ("blind_id", "blindId"),
    "match_score": ("match_score", "matchScore"),
    "program": ("program",),
    "intent": ("intent",),
    "activity": ("activity", "lastActivity"),
    "activity_date": ("activity_date", "activityDate"),
    "status": ("status",),
    "is_revealed": ("is_revealed", "isRevealed"),
    "name": ("name",),
    "email": ("email",),
    "phone": ("phone",),
    "skills": ("skills",),
    "location": ("location",),
    "favorite": ("favorite",),
    "avatar_url": ("avatar_url", "avatarUrl"),
    "notes": ("notes",),
}

_REQUIRED = ("id", "blind_id", "match_score", "program", "intent")


def _pick(raw: dict[str, Any], field: str) -> Any:
    for alias in _ALIASES[field]:
        if raw.get(alias) is not None:
            return raw[alias]
    return None


def _parse_date(value: Any) -> datetime | None:
    if isinstance(value, bool):
        logger.warning("Ignoring non-date activity value %r.", value)
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            logger.warning("Ignoring out-of-range activity timestamp %r.", value)
            return None
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        logger.warning("Ignoring unparseable activity date %r.", value)
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_score(value: Any) -> int:
    """Whole numbers only: ``85``, ``85.0`` and ``"85"`` pass, ``85.7`` does not."""
    if isinstance(value, bool):
        raise InvalidRecordError(f"match_score is not an integer: {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidRecordError(f"match_score is not an integer: {value!r}") from exc
    if not number.is_integer():
        raise InvalidRecordError(f"match_score is not an integer: {value!r}")
    return int(number)


def _flag(value: Any) -> bool:
    # Anything other than a JSON true (e.g. "false", 1) keeps the safe default.
    return value is True


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_candidate(raw: dict[str, Any]) -> CandidateRecord:
    """Build a record from one JSON object.

    Missing required fields raise :class:`InvalidRecordError`; malformed
    optional fields degrade to their empty value.
    """
    missing = [f for f in _REQUIRED if _pick(raw, f) is None]
    if missing:
        raise InvalidRecordError(f"Missing required field(s): {', '.join(missing)}")

    score = _parse_score(_pick(raw, "match_score"))

    skills = _pick(raw, "skills")
    if not isinstance(skills, list):
        skills = []

    return CandidateRecord(
        id=str(_pick(raw, "id")),
        blind_id=str(_pick(raw, "blind_id")),
        match_score=score,
        program=str(_pick(raw, "program")),
        intent=str(_pick(raw, "intent")),
        activity=str(_pick(raw, "activity") or ""),
        activity_date=_parse_date(_pick(raw, "activity_date")),
        status=_optional_str(_pick(raw, "status")),
        is_revealed=_flag(_pick(raw, "is_revealed")),
        name=_optional_str(_pick(raw, "name")),
        email=_optional_str(_pick(raw, "email")),
        phone=_optional_str(_pick(raw, "phone")),
        skills=tuple(str(s) for s in skills if s),
        location=_optional_str(_pick(raw, "location")),
        favorite=_flag(_pick(raw, "favorite")),
        avatar_url=_optional_str(_pick(raw, "avatar_url")),
        notes=_optional_str(_pick(raw, "notes")),
    )


class JsonFileCandidateSource:
    """Reads candidates from a JSON list or a ``{"candidates": [...]}`` object."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def fetch_candidates(self) -> list[CandidateRecord]:
        if not self._path.exists():
            raise CandidateSourceError(f"Candidate file not found: {self._path}")
        try:
            with open(self._path, encoding="utf-8") as fh:
                data = json.load(fh)
        except json.JSONDecodeError as exc:
            raise CandidateSourceError(f"Invalid JSON in {self._path}: {exc}") from exc

        if isinstance(data, dict):
            data = data.get("candidates", [])
        if not isinstance(data, list):
            raise CandidateSourceError(f"Expected a list of candidates in {self._path}")

        records: list[CandidateRecord] = []
        seen: set[str] = set()
        for index, raw in enumerate(data):
            if not isinstance(raw, dict):
                logger.warning("Skipping entry %d: not an object.", index)
                continue
            try:
                record = parse_candidate(raw)
            except InvalidRecordError as exc:
                logger.warning("Skipping entry %d: %s", index, exc)
                continue
            if record.id in seen:
                logger.warning("Skipping entry %d: duplicate id %r.", index, record.id)
                continue
            seen.add(record.id)
            records.append(record)

        logger.info("Loaded %d candidate(s) from %s.", len(records), self._path)
        return records
