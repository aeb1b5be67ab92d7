"""Tests for the demo provider and the JSON file source."""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from recruitdesk.exceptions import CandidateSourceError, InvalidRecordError
from recruitdesk.models import CandidateRecord
from recruitdesk.reporting.presentation import present_candidate
from recruitdesk.sources.base import CandidateActions, CandidateSource
from recruitdesk.sources.actions import LoggingCandidateActions
from recruitdesk.sources.demo import DemoCandidateProvider
from recruitdesk.sources.json_file import JsonFileCandidateSource, parse_candidate

_NOW = datetime(2025, 6, 1, tzinfo=timezone.utc)


def test_demo_provider_is_reproducible():
    first = DemoCandidateProvider(count=12, seed=3, now=_NOW).fetch_candidates()
    second = DemoCandidateProvider(count=12, seed=3, now=_NOW).fetch_candidates()
    assert first == second
    assert len({r.id for r in first}) == 12


def test_demo_provider_starts_with_fixed_samples():
    records = DemoCandidateProvider(count=3, now=_NOW).fetch_candidates()
    assert [r.id for r in records] == ["c101", "c102", "c103"]
    assert records[2].is_revealed and records[2].name == "Jordan Ellis"


def test_demo_provider_scores_in_range():
    records = DemoCandidateProvider(count=40, seed=9, now=_NOW).fetch_candidates()
    assert all(0 <= r.match_score <= 100 for r in records)


def test_protocols_are_satisfied():
    assert isinstance(DemoCandidateProvider(), CandidateSource)
    assert isinstance(JsonFileCandidateSource("x.json"), CandidateSource)
    assert isinstance(LoggingCandidateActions(), CandidateActions)


def test_parse_camel_case_record():
    record = parse_candidate({
        "id": "c1",
        "blindId": "Candidate #1",
        "matchScore": 88,
        "program": "M.S. AI",
        "intent": "high",
        "activityDate": "2025-05-30T10:00:00Z",
        "isRevealed": True,
        "name": "Avery Kim",
        "skills": ["ML", "", "Stats"],
    })
    assert record.blind_id == "Candidate #1"
    assert record.activity_date == datetime(2025, 5, 30, 10, tzinfo=timezone.utc)
    assert record.skills == ("ML", "Stats")
    assert record.status is None


def test_parse_degrades_bad_optional_fields():
    record = parse_candidate({
        "id": "c2",
        "blind_id": "Candidate #2",
        "match_score": "75",
        "program": "B.S. Cybersecurity",
        "intent": "low",
        "activity_date": "last tuesday",
        "skills": "Python",
    })
    assert record.activity_date is None
    assert record.skills == ()
    assert record.match_score == 75


def test_parse_requires_core_fields():
    with pytest.raises(InvalidRecordError):
        parse_candidate({"id": "c3", "program": "M.S. AI"})


def test_record_rejects_out_of_range_score():
    with pytest.raises(InvalidRecordError):
        CandidateRecord(id="x", blind_id="X", match_score=101, program="P", intent="low")


def test_json_source_skips_bad_rows(tmp_path):
    path = tmp_path / "candidates.json"
    path.write_text(json.dumps({"candidates": [
        {"id": "a", "blindId": "A", "matchScore": 90, "program": "P", "intent": "high"},
        {"id": "b", "blindId": "B", "matchScore": 150, "program": "P", "intent": "low"},
        {"id": "a", "blindId": "A2", "matchScore": 80, "program": "P", "intent": "low"},
        "not an object",
        {"blindId": "C", "matchScore": 50, "program": "P", "intent": "low"},
        {"id": "d", "blindId": "D", "matchScore": 60, "program": "P", "intent": "medium"},
    ]}))
    records = JsonFileCandidateSource(path).fetch_candidates()
    assert [r.id for r in records] == ["a", "d"]


def test_json_source_missing_file(tmp_path):
    with pytest.raises(CandidateSourceError):
        JsonFileCandidateSource(tmp_path / "missing.json").fetch_candidates()


def test_json_source_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(CandidateSourceError):
        JsonFileCandidateSource(path).fetch_candidates()


def _row(**extra):
    row = {"id": "c9", "blindId": "Candidate #9", "matchScore": 70,
           "program": "M.S. AI", "intent": "medium"}
    row.update(extra)
    return row


@pytest.mark.parametrize("flag", ["false", "true", 1, "yes"])
def test_parse_only_json_true_reveals(flag):
    record = parse_candidate(_row(isRevealed=flag, favorite=flag,
                                  email="secret@example.com", phone="555"))
    assert record.is_revealed is False
    assert record.favorite is False
    row = present_candidate(record)
    assert "email" not in row and "phone" not in row


def test_parse_json_true_reveals():
    record = parse_candidate(_row(isRevealed=True, favorite=True, email="a@example.com"))
    assert record.is_revealed and record.favorite
    assert present_candidate(record)["email"] == "a@example.com"


@pytest.mark.parametrize("stamp", [1e20, -1e20, float("inf"), True])
def test_parse_bad_numeric_date_degrades_to_none(stamp):
    assert parse_candidate(_row(activityDate=stamp)).activity_date is None


def test_parse_epoch_millis_date():
    record = parse_candidate(_row(activityDate=1748736000000))
    assert record.activity_date == datetime(2025, 6, 1, tzinfo=timezone.utc)


def test_json_source_survives_overflowing_timestamp(tmp_path):
    path = tmp_path / "candidates.json"
    path.write_text(json.dumps([_row(id="a"), _row(id="b", activityDate=1e20)]))
    records = JsonFileCandidateSource(path).fetch_candidates()
    assert [r.id for r in records] == ["a", "b"]
    assert records[1].activity_date is None


@pytest.mark.parametrize("score, expected", [(85, 85), (85.0, 85), ("85", 85), ("85.0", 85)])
def test_parse_accepts_whole_number_scores(score, expected):
    assert parse_candidate(_row(matchScore=score)).match_score == expected


@pytest.mark.parametrize("score", [85.7, "85.7", "high", True])
def test_parse_rejects_fractional_or_non_numeric_scores(score):
    with pytest.raises(InvalidRecordError):
        parse_candidate(_row(matchScore=score))
