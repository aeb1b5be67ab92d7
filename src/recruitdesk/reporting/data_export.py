"""JSON / CSV export of the current applicant view."""

from __future__ import annotations

import csv
import io
import json
import logging
from pathlib import Path

from recruitdesk.exceptions import ConfigurationError
from recruitdesk.models import CandidateView
from recruitdesk.reporting.presentation import present_candidate

logger = logging.getLogger(__name__)

_CSV_COLUMNS = [
    "id", "identity", "name", "email", "phone", "match_score", "program",
    "intent", "status", "activity", "activity_date", "skills", "location",
    "favorite", "is_revealed",
]


def export_view(view: CandidateView, fmt: str = "json") -> str:
    """Serialise the visible rows; blind-mode rows carry no contact details."""
    rows = [present_candidate(r) for r in view.visible_records]
    if fmt == "json":
        return json.dumps(rows, indent=2)
    if fmt != "csv":
        raise ConfigurationError(f"Unsupported export format: {fmt!r}")

    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=_CSV_COLUMNS, extrasaction="ignore")
    writer.writeheader()
    for row in rows:
        writer.writerow({**row, "skills": "; ".join(row["skills"])})
    return buf.getvalue()


def export_to_file(
    view: CandidateView,
    output_dir: str | Path,
    fmt: str = "json",
) -> Path:
    """Write an export file and return its path.

    *fmt* is ``"json"`` or ``"csv"``.
    """
    content = export_view(view, fmt)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    dest = output_dir / f"candidates_export.{fmt}"
    dest.write_text(content, encoding="utf-8")
    logger.info("Exported %d candidate(s) as %s to %s.", view.visible_count, fmt.upper(), dest)
    return dest
