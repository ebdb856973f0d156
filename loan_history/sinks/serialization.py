"""Shared serialization utilities for sinks."""

from typing import Any

from loan_history.models import MonthlySeries


def sanitize_file_name(name: str) -> str:
    """Make a loan identifier safe to use in a file name."""
    for char in (" ", "/", "\\"):
        name = name.replace(char, "_")
    return name


def series_to_dict(series: MonthlySeries) -> dict[str, Any]:
    """Convert a monthly series to a JSON-ready dict, totals included.

    Amounts are rounded to grosze (2 decimals).
    """
    return {
        "loan_id": series.loan_id,
        "months": list(series.months),
        "principal": [round(v, 2) for v in series.principal],
        "interest": [round(v, 2) for v in series.interest],
        "total_principal": round(series.total_principal, 2),
        "total_interest": round(series.total_interest, 2),
    }
