"""Pure derivation of the applicant view: filter, then sort, then selection flags."""

from __future__ import annotations

from collections.abc import Sequence

from recruitdesk.evaluation.filter_chain import filter_candidates
from recruitdesk.evaluation.selection import SelectionState
from recruitdesk.evaluation.sorting import sort_candidates
from recruitdesk.models import CandidateRecord, CandidateView, FilterState, SelectionSummary, ViewParams


def get_visible_records(
    records: Sequence[CandidateRecord],
    params: ViewParams,
) -> list[CandidateRecord]:
    """Filter *records* by search term and categories, then order them."""
    filtered = filter_candidates(records, params.search_term, params.filters)
    return sort_candidates(filtered, params.sort)


def get_selection_summary(
    records: Sequence[CandidateRecord],
    params: ViewParams,
    selection: SelectionState,
) -> SelectionSummary:
    visible = get_visible_records(records, params)
    return selection.summary(r.id for r in visible)


def build_view(
    records: Sequence[CandidateRecord],
    params: ViewParams,
    selection: SelectionState | None = None,
) -> CandidateView:
    """Run the whole pipeline once and bundle the results."""
    visible = get_visible_records(records, params)
    if selection is None:
        selection = SelectionState()
    summary = selection.summary(r.id for r in visible)
    return CandidateView(
        visible_records=tuple(visible),
        total_count=len(records),
        visible_count=len(visible),
        selection_summary=summary,
    )


def filter_options(records: Sequence[CandidateRecord], dimension: str) -> list[str]:
    """Distinct values present for *dimension*, in order of first appearance."""
    FilterState.check_dimension(dimension)
    seen: dict[str, None] = {}
    for record in records:
        value = getattr(record, dimension)
        if value:
            seen.setdefault(str(value), None)
    return list(seen)
