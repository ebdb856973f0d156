"""Custom exception hierarchy for loan-history."""


class LoanHistoryError(Exception):
    """Base exception for all loan-history errors."""


class HistoryFormatError(LoanHistoryError):
    """Raised when an account history export cannot be parsed."""


class ConfigurationError(LoanHistoryError):
    """Raised when configuration is invalid or missing."""


class SinkError(LoanHistoryError):
    """Raised when a sink operation fails."""


class EmptyCalendarError(LoanHistoryError, ValueError):
    """Raised when a month calendar is requested for an empty date set."""
