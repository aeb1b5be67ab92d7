"""Protocol definitions for the collaborators around the view engine."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from recruitdesk.models import CandidateRecord


@runtime_checkable
class CandidateSource(Protocol):
    """Produces the full working set of candidates for one page load."""

    def fetch_candidates(self) -> list[CandidateRecord]:
        """Return the current candidate list."""
        ...


@runtime_checkable
class CandidateActions(Protocol):
    """Fire-and-acknowledge requests to whoever owns candidate persistence.

    The controller calls each method once per user action and does not
    interpret the return value.
    """

    def request_favorite_toggle(self, candidate_id: str, value: bool) -> None:
        """Ask for the favorite flag of *candidate_id* to become *value*."""
        ...

    def request_contact(self, candidate_id: str, method: str) -> None:
        """Ask for *candidate_id* to be contacted by email, phone or message."""
        ...

    def request_reveal(self, candidate_id: str) -> None:
        """Ask for the real identity of *candidate_id* to be disclosed."""
        ...

    def request_status_change(self, candidate_id: str, status: str) -> None:
        """Ask for the pipeline status of *candidate_id* to change."""
        ...
