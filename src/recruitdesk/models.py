"""Domain models for RecruitDesk."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from recruitdesk.exceptions import (
    InvalidRecordError,
    UnknownDimensionError,
    UnknownSortKeyError,
)

INTENTS: tuple[str, ...] = ("low", "medium", "high", "very-high")
STATUSES: tuple[str, ...] = ("new", "contacted", "applied", "interviewed", "accepted")

FILTER_DIMENSIONS: tuple[str, ...] = ("intent", "program", "status")
SORT_KEYS: tuple[str, ...] = ("match_score", "activity", "intent", "program", "status")
SORT_DIRECTIONS: tuple[str, ...] = ("asc", "desc")


@dataclass(frozen=True)
class CandidateRecord:
    """Immutable row of recruiting data.

    ``name``, ``email`` and ``phone`` may be populated upstream even when
    ``is_revealed`` is false; presentation code must gate on ``is_revealed``.
    """

    id: str
    blind_id: str
    match_score: int
    program: str
    intent: str
    activity: str = ""
    activity_date: datetime | None = None
    status: str | None = None
    is_revealed: bool = False
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    skills: tuple[str, ...] = ()
    location: str | None = None
    favorite: bool = False
    avatar_url: str | None = None
    notes: str | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.match_score <= 100:
            raise InvalidRecordError(
                f"match_score {self.match_score} for {self.id!r} is outside 0-100"
            )
        # Naive dates are read as UTC so every activity_date stays comparable.
        if self.activity_date is not None and self.activity_date.tzinfo is None:
            object.__setattr__(
                self, "activity_date", self.activity_date.replace(tzinfo=timezone.utc)
            )


@dataclass(frozen=True)
class FilterState:
    """Selected values per categorical filter dimension."""

    intent: tuple[str, ...] = ()
    program: tuple[str, ...] = ()
    status: tuple[str, ...] = ()

    @staticmethod
    def check_dimension(dimension: str) -> str:
        if dimension not in FILTER_DIMENSIONS:
            raise UnknownDimensionError(f"Unknown filter dimension: {dimension!r}")
        return dimension

    def values(self, dimension: str) -> tuple[str, ...]:
        return getattr(self, self.check_dimension(dimension))

    def toggled(self, dimension: str, value: str) -> FilterState:
        """Return a copy with *value* added to or removed from *dimension*."""
        current = self.values(dimension)
        if value in current:
            updated = tuple(v for v in current if v != value)
        else:
            updated = current + (value,)
        return replace(self, **{dimension: updated})

    @property
    def is_active(self) -> bool:
        return any(self.values(d) for d in FILTER_DIMENSIONS)

    def cleared(self) -> FilterState:
        return FilterState()


@dataclass(frozen=True)
class SortState:
    """Current sort key and direction."""

    key: str = "match_score"
    direction: str = "desc"

    def __post_init__(self) -> None:
        if self.key not in SORT_KEYS:
            raise UnknownSortKeyError(f"Unknown sort key: {self.key!r}")
        if self.direction not in SORT_DIRECTIONS:
            raise UnknownSortKeyError(f"Unknown sort direction: {self.direction!r}")

    @property
    def descending(self) -> bool:
        return self.direction == "desc"


@dataclass(frozen=True)
class ViewParams:
    """Everything the view engine needs besides the records themselves."""

    search_term: str = ""
    filters: FilterState = field(default_factory=FilterState)
    sort: SortState = field(default_factory=SortState)


@dataclass(frozen=True)
class SelectionSummary:
    """Derived checkbox state for the current visible rows."""

    all_selected: bool = False
    indeterminate: bool = False
    selected_count: int = 0
    visible_selected_count: int = 0


@dataclass(frozen=True)
class CandidateView:
    """Output of one view-engine pass."""

    visible_records: tuple[CandidateRecord, ...]
    total_count: int
    visible_count: int
    selection_summary: SelectionSummary

    @property
    def is_empty(self) -> bool:
        return self.visible_count == 0


@dataclass(frozen=True)
class Acknowledgment:
    """User-visible confirmation after a fire-and-acknowledge request."""

    title: str
    level: str = "info"  # success, info, warning
