"""Parsers for amounts, dates and repayment descriptions."""

from loan_history.parsing.dates import month_key, parse_order_date
from loan_history.parsing.description import DESCRIPTION_PATTERN, extract_fields
from loan_history.parsing.numbers import parse_decimal_comma

__all__ = [
    "DESCRIPTION_PATTERN",
    "extract_fields",
    "month_key",
    "parse_decimal_comma",
    "parse_order_date",
]
