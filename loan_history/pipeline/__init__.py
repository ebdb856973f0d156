"""Extraction and monthly aggregation of loan repayments."""

from loan_history.pipeline.aggregation import aggregate_monthly, build_series
from loan_history.pipeline.calendar import month_span
from loan_history.pipeline.filtering import iter_loan_operations, select_loan_operations
from loan_history.pipeline.grouping import group_by_loan, sort_group
from loan_history.pipeline.report import LoanReport

__all__ = [
    "LoanReport",
    "aggregate_monthly",
    "build_series",
    "group_by_loan",
    "iter_loan_operations",
    "month_span",
    "select_loan_operations",
    "sort_group",
]
