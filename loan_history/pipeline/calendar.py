"""Gap-free month calendars."""

from datetime import date
from typing import Sequence

from loan_history.exceptions import EmptyCalendarError
from loan_history.parsing import month_key


def month_span(dates: Sequence[date]) -> list[str]:
    """Every calendar month from the first to the last date, inclusive.

    Parameters
    ----------
    dates : Sequence[date]
        Non-empty dates in ascending order.

    Returns
    -------
    list[str]
        ``YYYY-MM`` keys, strictly increasing, one per month.

    Raises
    ------
    EmptyCalendarError
        If ``dates`` is empty.
    """
    if not dates:
        raise EmptyCalendarError("Cannot build a month calendar from no dates")

    first, last = dates[0], dates[-1]
    if last < first:
        raise EmptyCalendarError(f"Dates are not ascending: {first} .. {last}")

    year, month = first.year, first.month
    months = []
    while (year, month) <= (last.year, last.month):
        months.append(month_key(date(year, month, 1)))
        month += 1
        if month > 12:
            year, month = year + 1, 1
    return months
