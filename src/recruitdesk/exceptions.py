"""Custom exception hierarchy for RecruitDesk."""


class RecruitDeskError(Exception):
    """Base exception for all RecruitDesk errors."""


class ConfigurationError(RecruitDeskError):
    """Raised when settings are invalid or missing."""


class InvalidRecordError(RecruitDeskError):
    """Raised when a candidate record violates a hard invariant."""


class UnknownDimensionError(RecruitDeskError):
    """Raised when a filter dimension is not one of intent, program or status."""


class UnknownSortKeyError(RecruitDeskError):
    """Raised when a sort key or direction is not supported."""


class CandidateNotFoundError(RecruitDeskError):
    """Raised when an action targets an id outside the working set."""


class InvalidActionError(RecruitDeskError):
    """Raised when an action request carries an unsupported value."""


class CandidateSourceError(RecruitDeskError):
    """Raised when a candidate source cannot be read."""


class UnknownAnalyticsKeyError(RecruitDeskError):
    """Raised when a preference selection names a key outside the catalogue."""
