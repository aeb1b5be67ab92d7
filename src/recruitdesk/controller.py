"""Caller-owned state container that drives the view engine."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

from recruitdesk.evaluation.selection import SelectionState
from recruitdesk.evaluation.sorting import next_sort_state
from recruitdesk.exceptions import CandidateNotFoundError, InvalidActionError
from recruitdesk.models import (
    STATUSES,
    Acknowledgment,
    CandidateRecord,
    CandidateView,
    ViewParams,
)
from recruitdesk.reporting.presentation import display_identity
from recruitdesk.sources.actions import LoggingCandidateActions
from recruitdesk.sources.base import CandidateActions, CandidateSource
from recruitdesk.view_engine import build_view

logger = logging.getLogger(__name__)

CONTACT_METHODS = ("email", "phone", "message")


class CandidateViewController:
    """Holds the records, view parameters and selection for one applicant view.

    Every ``on_*`` mutator replaces :attr:`params` (or updates the selection);
    :meth:`view` recomputes the derived view from scratch each time.
    """

    def __init__(
        self,
        records: Iterable[CandidateRecord] = (),
        params: ViewParams | None = None,
        actions: CandidateActions | None = None,
    ) -> None:
        self._records: list[CandidateRecord] = list(records)
        self.params = params or ViewParams()
        self.selection = SelectionState()
        self._actions = actions or LoggingCandidateActions()

    @property
    def records(self) -> tuple[CandidateRecord, ...]:
        return tuple(self._records)

    # ---- record lifecycle ----

    def set_records(self, records: Iterable[CandidateRecord]) -> None:
        """Replace the working set; the selection does not survive this."""
        self._records = list(records)
        self.selection.clear()

    def load(self, source: CandidateSource) -> None:
        self.set_records(source.fetch_candidates())

    def view(self) -> CandidateView:
        return build_view(self._records, self.params, self.selection)

    # ---- parameter mutators ----

    def on_search_change(self, term: str) -> None:
        self.params = replace(self.params, search_term=term)

    def on_filter_toggle(self, dimension: str, value: str) -> None:
        self.params = replace(
            self.params, filters=self.params.filters.toggled(dimension, value)
        )

    def on_sort_change(self, key: str) -> None:
        self.params = replace(self.params, sort=next_sort_state(self.params.sort, key))

    def clear_filters(self) -> None:
        """Drop every categorical filter and the search term."""
        self.params = replace(self.params, search_term="", filters=self.params.filters.cleared())

    def on_selection_toggle(self, candidate_id: str) -> None:
        self.selection.toggle(candidate_id)

    def on_select_all_toggle(self) -> None:
        visible = self.view().visible_records
        self.selection.toggle_all(r.id for r in visible)

    # ---- fire-and-acknowledge actions ----

    def _find(self, candidate_id: str) -> CandidateRecord:
        for record in self._records:
            if record.id == candidate_id:
                return record
        raise CandidateNotFoundError(f"No candidate with id {candidate_id!r}")

    def candidate(self, candidate_id: str) -> CandidateRecord:
        """Look up one record for the detail view."""
        return self._find(candidate_id)

    def toggle_favorite(self, candidate_id: str) -> Acknowledgment:
        record = self._find(candidate_id)
        value = not record.favorite
        self._actions.request_favorite_toggle(candidate_id, value)
        if value:
            return Acknowledgment("Added to favorites", "success")
        return Acknowledgment("Removed from favorites", "info")

    def contact(self, candidate_id: str, method: str) -> Acknowledgment:
        if method not in CONTACT_METHODS:
            raise InvalidActionError(f"Unsupported contact method: {method!r}")
        record = self._find(candidate_id)
        self._actions.request_contact(candidate_id, method)
        return Acknowledgment(f"Contacting {display_identity(record)} via {method}", "info")

    def reveal(self, candidate_id: str) -> Acknowledgment:
        record = self._find(candidate_id)
        if record.is_revealed:
            return Acknowledgment(f"{display_identity(record)} is already revealed", "info")
        self._actions.request_reveal(candidate_id)
        return Acknowledgment(f"Reveal requested for {record.blind_id}", "success")

    def change_status(self, candidate_id: str, status: str) -> Acknowledgment:
        if status not in STATUSES:
            raise InvalidActionError(f"Unsupported status: {status!r}")
        record = self._find(candidate_id)
        self._actions.request_status_change(candidate_id, status)
        logger.info("Status change %s -> %s requested for %s.", record.status, status, candidate_id)
        return Acknowledgment(f"Status updated to {status}", "success")
