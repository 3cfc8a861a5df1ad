from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations.

    Every error carries a stable ``category`` so callers can map it to a
    transport-level code without re-deriving the reason.
    """

    category = "domain_error"
    default_message = "Request could not be completed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class PreconditionFailed(DomainError):
    """Raised when an operation is not allowed in the current record state."""

    category = "precondition_failed"


class AlreadyCheckedIn(PreconditionFailed):
    default_message = "Already checked in today"


class NotCheckedInYet(PreconditionFailed):
    default_message = "Please check in first"


class AlreadyCheckedOut(PreconditionFailed):
    default_message = "Already checked out today"


class ValidationError(PreconditionFailed):
    """Raised when input data is invalid or violates domain rules."""

    category = "validation_error"


class NotFound(DomainError):
    """Raised when a referenced employee does not exist."""

    category = "not_found"
    default_message = "Employee not found"


class NoRecordsFound(DomainError):
    """Raised when a query or export yields an empty result set."""

    category = "no_records_found"
    default_message = "No attendance records found"


class StoreUnavailable(DomainError):
    """Raised when the underlying persistence layer fails."""

    category = "store_unavailable"
    default_message = "Attendance store is unavailable"
