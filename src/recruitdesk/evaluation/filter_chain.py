"""Chain of Responsibility filtering for candidate records."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from recruitdesk.models import FILTER_DIMENSIONS, CandidateRecord, FilterState

logger = logging.getLogger(__name__)


class CandidateFilter(ABC):
    """Abstract base for a single filter in the chain."""

    def __init__(self) -> None:
        self._next: CandidateFilter | None = None

    def set_next(self, handler: CandidateFilter) -> CandidateFilter:
        self._next = handler
        return handler

    def evaluate(self, record: CandidateRecord) -> str | None:
        """Return a rejection reason string, or ``None`` to accept.

        If this filter accepts, delegates to the next filter in the chain.
        """
        reason = self._check(record)
        if reason is not None:
            return reason
        if self._next:
            return self._next.evaluate(record)
        return None

    @abstractmethod
    def _check(self, record: CandidateRecord) -> str | None:
        ...


def _search_fields(record: CandidateRecord) -> list[str]:
    fields = [
        record.blind_id,
        record.name,
        record.program,
        " ".join(record.skills) if record.skills else None,
        record.location,
    ]
    return [f.lower() for f in fields if f]


class SearchTermFilter(CandidateFilter):
    """Reject records where no searchable field contains the term."""

    def __init__(self, term: str) -> None:
        super().__init__()
        self._term = term.lower()

    def _check(self, record: CandidateRecord) -> str | None:
        if any(self._term in field for field in _search_fields(record)):
            return None
        return f"search:{self._term}"


class CategoryFilter(CandidateFilter):
    """Reject records whose value for *dimension* is not among *values*.

    A record without a value (``status`` is optional) never matches.
    """

    def __init__(self, dimension: str, values: Iterable[str]) -> None:
        super().__init__()
        self._dimension = FilterState.check_dimension(dimension)
        self._values = frozenset(values)

    def _check(self, record: CandidateRecord) -> str | None:
        value = getattr(record, self._dimension, None)
        if value is not None and value in self._values:
            return None
        return f"{self._dimension}:{value if value is not None else '-'}"


def build_filter_chain(
    search_term: str,
    filters: FilterState,
) -> CandidateFilter | None:
    """Assemble and return the head of the filter chain (or ``None`` if empty)."""
    handlers: list[CandidateFilter] = []
    if search_term:
        handlers.append(SearchTermFilter(search_term))
    for dimension in FILTER_DIMENSIONS:
        selected = filters.values(dimension)
        if selected:
            handlers.append(CategoryFilter(dimension, selected))

    if not handlers:
        return None

    for i in range(len(handlers) - 1):
        handlers[i].set_next(handlers[i + 1])

    return handlers[0]


def filter_candidates(
    records: Iterable[CandidateRecord],
    search_term: str = "",
    filters: FilterState | None = None,
) -> list[CandidateRecord]:
    """Return the records accepted by the chain, in input order."""
    chain = build_filter_chain(search_term, filters or FilterState())
    if chain is None:
        return list(records)

    kept: list[CandidateRecord] = []
    for record in records:
        reason = chain.evaluate(record)
        if reason is None:
            kept.append(record)
        else:
            logger.debug("Filtered out %s (%s).", record.id, reason)
    return kept
