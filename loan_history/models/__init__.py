"""Domain models for account histories and loan repayments."""

from loan_history.models.base import Amount
from loan_history.models.history import RawTransaction
from loan_history.models.loan import (
    ExtractedFields,
    LoanGroup,
    LoanOperation,
    MonthlySeries,
)

__all__ = [
    "Amount",
    "ExtractedFields",
    "LoanGroup",
    "LoanOperation",
    "MonthlySeries",
    "RawTransaction",
]
