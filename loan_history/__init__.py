"""Loan repayment extraction and monthly aggregation from bank account histories."""

from loan_history.models import (
    Amount,
    ExtractedFields,
    LoanGroup,
    LoanOperation,
    MonthlySeries,
    RawTransaction,
)
from loan_history.pipeline import LoanReport

__version__ = "0.1.0"

__all__ = [
    "Amount",
    "ExtractedFields",
    "LoanGroup",
    "LoanOperation",
    "LoanReport",
    "MonthlySeries",
    "RawTransaction",
]
