"""SQLite-backed per-program dashboard selections (metrics, charts, heatmaps)."""

from __future__ import annotations

import json
import logging
import sqlite3
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping

from recruitdesk.exceptions import ConfigurationError, UnknownAnalyticsKeyError
from recruitdesk.preferences.catalog import (
    CHARTS,
    DEFAULT_CHARTS,
    DEFAULT_HEATMAPS,
    DEFAULT_METRICS,
    HEATMAPS,
    METRICS,
    keys_in_category,
)

logger = logging.getLogger(__name__)

_SCHEMA = """\
CREATE TABLE IF NOT EXISTS preferences (
    key             TEXT PRIMARY KEY,
    value           TEXT NOT NULL,
    updated_at      TEXT NOT NULL
);
"""


@dataclass(frozen=True)
class _Kind:
    storage_prefix: str
    catalog: Mapping[str, object]
    defaults: tuple[str, ...]


_KINDS: dict[str, _Kind] = {
    "metrics": _Kind("program_metrics_", METRICS, DEFAULT_METRICS),
    "charts": _Kind("program_analytics_charts_", CHARTS, DEFAULT_CHARTS),
    "heatmaps": _Kind("program_analytics_heatmaps_", HEATMAPS, DEFAULT_HEATMAPS),
}

SELECTION_KINDS: tuple[str, ...] = tuple(_KINDS)


def _kind(kind: str) -> _Kind:
    try:
        return _KINDS[kind]
    except KeyError:
        raise ConfigurationError(
            f"Unknown selection kind {kind!r}; expected one of {', '.join(_KINDS)}"
        ) from None


class PreferenceStore:
    """Persistent dashboard selections keyed per program.

    Missing or unreadable entries fall back to the catalogue defaults.
    """

    def __init__(self, db_path: str | Path, max_metrics: int = 12) -> None:
        db_path = Path(db_path)
        db_path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(str(db_path))
        self._conn.row_factory = sqlite3.Row
        self._conn.executescript(_SCHEMA)
        self._max_metrics = max_metrics
        logger.info("Preference store ready at %s.", db_path)

    @staticmethod
    def storage_key(kind: str, program_id: str) -> str:
        return f"{_kind(kind).storage_prefix}{program_id}"

    # ---- reads ----

    def get_selection(self, kind: str, program_id: str) -> list[str]:
        spec = _kind(kind)
        key = self.storage_key(kind, program_id)
        row = self._conn.execute(
            "SELECT value FROM preferences WHERE key=?", (key,)
        ).fetchone()
        if row is None:
            return list(spec.defaults)
        try:
            value = json.loads(row["value"])
        except json.JSONDecodeError as exc:
            logger.error("Error loading %s from preferences: %s", key, exc)
            return list(spec.defaults)
        if not isinstance(value, list):
            logger.error("Stored %s is not a list; using defaults.", key)
            return list(spec.defaults)
        known = [str(v) for v in value if str(v) in spec.catalog]
        if len(known) != len(value):
            logger.warning("Dropped %d unknown key(s) from %s.", len(value) - len(known), key)
        return known

    # ---- writes ----

    def set_selection(self, kind: str, program_id: str, keys: list[str]) -> list[str]:
        """Validate and persist *keys* (duplicates dropped, order kept)."""
        spec = _kind(kind)
        unknown = [k for k in keys if k not in spec.catalog]
        if unknown:
            raise UnknownAnalyticsKeyError(f"Unknown {kind} key(s): {', '.join(unknown)}")
        ordered = list(dict.fromkeys(keys))
        if kind == "metrics" and len(ordered) > self._max_metrics:
            raise ConfigurationError(
                f"At most {self._max_metrics} metrics may be selected, got {len(ordered)}"
            )
        self._write(self.storage_key(kind, program_id), ordered)
        return ordered

    def select_category(self, kind: str, program_id: str, category: str) -> list[str]:
        """Append every key of *category* that is not already selected."""
        current = self.get_selection(kind, program_id)
        for key in keys_in_category(_kind(kind).catalog, category):
            if key not in current:
                current.append(key)
        return self.set_selection(kind, program_id, current)

    def deselect_category(self, kind: str, program_id: str, category: str) -> list[str]:
        members = set(keys_in_category(_kind(kind).catalog, category))
        current = [k for k in self.get_selection(kind, program_id) if k not in members]
        return self.set_selection(kind, program_id, current)

    def reset(self, kind: str, program_id: str) -> list[str]:
        return self.set_selection(kind, program_id, list(_kind(kind).defaults))

    def _write(self, key: str, value: list[str]) -> None:
        now = datetime.now(timezone.utc).isoformat()
        self._conn.execute(
            "INSERT INTO preferences (key, value, updated_at) VALUES (?, ?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value=excluded.value, updated_at=excluded.updated_at",
            (key, json.dumps(value), now),
        )
        self._conn.commit()

    def close(self) -> None:
        self._conn.close()
