class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced worker or record does not exist."""


class StateError(DomainError):
    """Raised when a lifecycle transition is attempted from the wrong state."""


class QuotaExceededError(DomainError):
    """Raised by the HTTP layer when the monthly action quota is exhausted.

    The quota service itself reports exhaustion as ``False``; this exception
    only exists so controllers can turn it into a response.
    """
