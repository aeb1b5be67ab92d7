"""Default action sink that logs each request."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class LoggingCandidateActions:
    """Records every request in :attr:`calls` and logs it.

    Stands in for a persistence backend when none is wired up.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, args))
        logger.info("Action %s%r requested.", name, args)

    def request_favorite_toggle(self, candidate_id: str, value: bool) -> None:
        self._record("favorite_toggle", candidate_id, value)

    def request_contact(self, candidate_id: str, method: str) -> None:
        self._record("contact", candidate_id, method)

    def request_reveal(self, candidate_id: str) -> None:
        self._record("reveal", candidate_id)

    def request_status_change(self, candidate_id: str, status: str) -> None:
        self._record("status_change", candidate_id, status)
