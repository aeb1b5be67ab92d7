"""Field-specific comparators and the stable sort built on them."""

from __future__ import annotations

import locale
from collections.abc import Callable, Iterable
from functools import cmp_to_key

from recruitdesk.models import CandidateRecord, SortState

Comparator = Callable[[CandidateRecord, CandidateRecord], int]


def compare_match_score(a: CandidateRecord, b: CandidateRecord) -> int:
    return a.match_score - b.match_score


def compare_activity(a: CandidateRecord, b: CandidateRecord) -> int:
    """Chronological order; a pair with a missing date compares equal."""
    if a.activity_date is None or b.activity_date is None:
        return 0
    if a.activity_date < b.activity_date:
        return -1
    if a.activity_date > b.activity_date:
        return 1
    return 0


def _text_comparator(attr: str) -> Comparator:
    def compare(a: CandidateRecord, b: CandidateRecord) -> int:
        left = str(getattr(a, attr) or "").lower()
        right = str(getattr(b, attr) or "").lower()
        return locale.strcoll(left, right)

    compare.__name__ = f"compare_{attr}"
    return compare


compare_intent = _text_comparator("intent")
compare_program = _text_comparator("program")
compare_status = _text_comparator("status")

COMPARATORS: dict[str, Comparator] = {
    "match_score": compare_match_score,
    "activity": compare_activity,
    "intent": compare_intent,
    "program": compare_program,
    "status": compare_status,
}


def sort_candidates(
    records: Iterable[CandidateRecord],
    sort: SortState | None = None,
) -> list[CandidateRecord]:
    """Return *records* ordered by *sort*; equal records keep input order."""
    sort = sort or SortState()
    compare = COMPARATORS[sort.key]
    if sort.descending:
        return sorted(records, key=cmp_to_key(lambda a, b: compare(b, a)))
    return sorted(records, key=cmp_to_key(compare))


def next_sort_state(current: SortState, key: str) -> SortState:
    """Re-selecting the current key flips direction; a new key starts descending."""
    if current.key == key:
        return SortState(key, "asc" if current.descending else "desc")
    return SortState(key, "desc")
