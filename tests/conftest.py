"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from recruitdesk.models import CandidateRecord

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def make_candidate(cid: str, **overrides) -> CandidateRecord:
    fields = dict(
        id=cid,
        blind_id=f"Candidate #{cid}",
        match_score=80,
        program="B.S. Computer Science",
        intent="medium",
    )
    fields.update(overrides)
    return CandidateRecord(**fields)


@pytest.fixture()
def candidates() -> list[CandidateRecord]:
    """Ten records with a spread of programs, intents and statuses."""
    return [
        make_candidate("c1", match_score=94, program="B.S. Data Science", intent="high",
                       status="new", skills=("Python", "Data Viz"), location="Flagstaff, AZ",
                       activity_date=NOW - timedelta(hours=2)),
        make_candidate("c2", match_score=89, program="B.S. Computer Science", intent="medium",
                       status="contacted", skills=("JavaScript", "React"),
                       activity_date=NOW - timedelta(days=1)),
        make_candidate("c3", match_score=82, program="M.S. AI", intent="very-high",
                       skills=("ML", "Neural Networks"), is_revealed=True, name="Jordan Ellis",
                       email="jordan@example.com", phone="+1 (555) 123-4567",
                       activity_date=NOW - timedelta(days=3)),
        make_candidate("c4", match_score=71, program="B.S. Cybersecurity", intent="low",
                       status="applied", skills=("Networking",), location="Norfolk, VA"),
        make_candidate("c5", match_score=89, program="B.S. Data Science", intent="high",
                       status="interviewed", name="Hidden Person", email="hidden@example.com",
                       phone="+1 (555) 000-0000", activity_date=NOW - timedelta(days=5)),
        make_candidate("c6", match_score=65, program="M.S. AI", intent="medium",
                       status="accepted", activity_date=NOW - timedelta(days=9)),
        make_candidate("c7", match_score=77, program="B.S. Computer Science", intent="high",
                       status="new", location="Austin, TX", activity_date=NOW - timedelta(hours=6)),
        make_candidate("c8", match_score=58, program="B.S. Cybersecurity", intent="low",
                       activity_date=NOW - timedelta(days=12)),
        make_candidate("c9", match_score=91, program="M.S. Software Engineering", intent="very-high",
                       status="contacted", skills=("Rust", "Cloud"),
                       activity_date=NOW - timedelta(days=2)),
        make_candidate("c10", match_score=60, program="B.S. Data Science", intent="low",
                       status="new", skills=("SQL",), activity_date=NOW - timedelta(days=4)),
    ]


@pytest.fixture()
def tmp_settings_yaml(tmp_path):
    """Write a minimal settings.yaml and return its path."""
    content = """\
program_id: "nau-data-science"
demo_count: 8
demo_seed: 7
default_sort_key: "Program"
default_sort_direction: "ASC"
max_metrics: 6
state_dir: "{state}"
export_dir: "{exports}"
""".format(state=str(tmp_path / ".state"), exports=str(tmp_path / "exports"))
    p = tmp_path / "settings.yaml"
    p.write_text(content)
    return p
