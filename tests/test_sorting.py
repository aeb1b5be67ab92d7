"""Tests for comparators and sort-state transitions."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from conftest import NOW, make_candidate
from recruitdesk.evaluation.sorting import compare_activity, next_sort_state, sort_candidates
from recruitdesk.exceptions import UnknownSortKeyError
from recruitdesk.models import SORT_KEYS, SortState


def _ids(records):
    return [r.id for r in records]


def test_match_score_descending_keeps_input_order_for_ties():
    records = [
        make_candidate("a", match_score=90, intent="high"),
        make_candidate("b", match_score=70, intent="low"),
        make_candidate("c", match_score=90, intent="medium"),
    ]
    assert _ids(sort_candidates(records, SortState("match_score", "desc"))) == ["a", "c", "b"]


def test_match_score_ascending_keeps_input_order_for_ties():
    records = [
        make_candidate("a", match_score=90),
        make_candidate("b", match_score=70),
        make_candidate("c", match_score=90),
    ]
    assert _ids(sort_candidates(records, SortState("match_score", "asc"))) == ["b", "a", "c"]


def test_default_sort_is_match_score_descending(candidates):
    scores = [r.match_score for r in sort_candidates(candidates)]
    assert scores == sorted(scores, reverse=True)


def test_activity_sorts_chronologically():
    records = [
        make_candidate("old", activity_date=NOW - timedelta(days=3)),
        make_candidate("new", activity_date=NOW),
        make_candidate("mid", activity_date=NOW - timedelta(days=1)),
    ]
    assert _ids(sort_candidates(records, SortState("activity", "desc"))) == ["new", "mid", "old"]
    assert _ids(sort_candidates(records, SortState("activity", "asc"))) == ["old", "mid", "new"]


def test_activity_mixes_naive_and_aware_dates():
    records = [
        make_candidate("aware", activity_date=datetime(2025, 1, 2, tzinfo=timezone.utc)),
        make_candidate("naive", activity_date=datetime(2025, 1, 1)),
    ]
    assert _ids(sort_candidates(records, SortState("activity", "asc"))) == ["naive", "aware"]
    assert records[1].activity_date.tzinfo is timezone.utc


def test_activity_missing_date_compares_equal():
    dated = make_candidate("a", activity_date=NOW)
    undated = make_candidate("b")
    assert compare_activity(dated, undated) == 0
    assert compare_activity(undated, dated) == 0


def test_activity_without_any_dates_is_a_no_op():
    records = [make_candidate("x"), make_candidate("y"), make_candidate("z")]
    assert _ids(sort_candidates(records, SortState("activity", "desc"))) == ["x", "y", "z"]


def test_text_sort_is_case_insensitive():
    records = [
        make_candidate("a", program="cybersecurity"),
        make_candidate("b", program="Data Science"),
        make_candidate("c", program="AI"),
    ]
    assert _ids(sort_candidates(records, SortState("program", "asc"))) == ["c", "a", "b"]


def test_missing_status_sorts_as_empty_string():
    records = [
        make_candidate("a", status="new"),
        make_candidate("b"),
        make_candidate("c", status="applied"),
    ]
    assert _ids(sort_candidates(records, SortState("status", "asc"))) == ["b", "c", "a"]
    assert _ids(sort_candidates(records, SortState("status", "desc"))) == ["a", "c", "b"]


@pytest.mark.parametrize("key", SORT_KEYS)
def test_ascending_reversed_equals_descending(key):
    records = [
        make_candidate("a", match_score=50, intent="low", program="Beta", status="new",
                       activity_date=NOW - timedelta(days=2)),
        make_candidate("b", match_score=90, intent="very-high", program="Alpha", status="accepted",
                       activity_date=NOW),
        make_candidate("c", match_score=70, intent="high", program="Gamma", status="contacted",
                       activity_date=NOW - timedelta(days=5)),
    ]
    ascending = sort_candidates(records, SortState(key, "asc"))
    descending = sort_candidates(records, SortState(key, "desc"))
    assert list(reversed(ascending)) == descending


def test_sort_does_not_mutate_input(candidates):
    before = list(candidates)
    sort_candidates(candidates, SortState("program", "asc"))
    assert candidates == before


def test_new_key_starts_descending():
    state = next_sort_state(SortState("match_score", "asc"), "program")
    assert state == SortState("program", "desc")


def test_same_key_toggles_direction():
    state = SortState("match_score", "desc")
    state = next_sort_state(state, "match_score")
    assert state.direction == "asc"
    state = next_sort_state(state, "match_score")
    assert state.direction == "desc"


def test_unknown_sort_key_rejected():
    with pytest.raises(UnknownSortKeyError):
        SortState("favorite")
