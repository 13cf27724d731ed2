class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced employee or record does not exist."""


class CreditingError(DomainError):
    """Raised when a payroll row cannot be marked as credited."""


class AttendanceNotAcceptedError(CreditingError):
    """Raised when the month's attendance has not been accepted yet."""


class AlreadyCreditedError(CreditingError):
    """Raised when salary for the employee/month was already credited."""
