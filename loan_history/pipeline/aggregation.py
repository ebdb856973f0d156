"""Monthly principal and interest sums per loan."""

import logging

from loan_history.models import LoanGroup, MonthlySeries
from loan_history.parsing import month_key, parse_decimal_comma, parse_order_date
from loan_history.pipeline.calendar import month_span

logger = logging.getLogger(__name__)


def aggregate_monthly(group: LoanGroup, months: list[str]) -> MonthlySeries:
    """Sum principal and interest per calendar month.

    Every month in ``months`` gets an entry, 0.0 when no operation falls
    in it. Operations whose order date does not parse are left out.

    Parameters
    ----------
    group : LoanGroup
        Operations of one loan.
    months : list[str]
        Month calendar covering the group, from ``month_span``.

    Returns
    -------
    MonthlySeries
        Aligned month keys and sums.
    """
    principal = dict.fromkeys(months, 0.0)
    interest = dict.fromkeys(months, 0.0)

    for operation in group.operations:
        day = parse_order_date(operation.order_date)
        if day is None:
            logger.debug(
                "Loan %s: skipping operation with order date %r",
                group.loan_id,
                operation.order_date,
                extra={"loan_id": group.loan_id},
            )
            continue

        key = month_key(day)
        if key not in principal:
            # Outside the calendar the caller passed
            logger.warning(
                "Loan %s: month %s not in calendar",
                group.loan_id,
                key,
                extra={"loan_id": group.loan_id},
            )
            continue

        principal[key] += parse_decimal_comma(operation.principal)
        interest[key] += parse_decimal_comma(operation.interest)

    return MonthlySeries(
        loan_id=group.loan_id,
        months=tuple(months),
        principal=tuple(principal[m] for m in months),
        interest=tuple(interest[m] for m in months),
    )


def build_series(group: LoanGroup) -> MonthlySeries | None:
    """Build the monthly series of a date-sorted group.

    The calendar spans only order dates that parse; a group without any
    such date has no series.
    """
    days = sorted(
        day
        for day in (parse_order_date(op.order_date) for op in group.operations)
        if day is not None
    )
    if not days:
        logger.warning(
            "Loan %s has no valid order dates, no series built",
            group.loan_id,
            extra={"loan_id": group.loan_id},
        )
        return None

    return aggregate_monthly(group, month_span(days))
