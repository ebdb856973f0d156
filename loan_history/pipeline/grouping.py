"""Grouping of loan operations by loan identifier."""

from datetime import date
from typing import Iterable

from loan_history.models import LoanGroup, LoanOperation
from loan_history.parsing import parse_order_date


def group_by_loan(operations: Iterable[LoanOperation]) -> dict[str, LoanGroup]:
    """Partition operations by loan identifier.

    Groups appear in the order their identifier is first seen, and each
    group keeps its operations in input order. Only identifiers with at
    least one operation get a group.
    """
    groups: dict[str, LoanGroup] = {}
    for operation in operations:
        group = groups.get(operation.loan_id)
        if group is None:
            group = groups[operation.loan_id] = LoanGroup(operation.loan_id)
        group.operations.append(operation)
    return groups


def _order_day(operation: LoanOperation) -> date:
    # Unparseable dates sort before any real date
    return parse_order_date(operation.order_date) or date.min


def sort_group(group: LoanGroup) -> LoanGroup:
    """Return a copy of the group with operations in ascending order date.

    The sort is stable: operations on the same day keep their input order.
    """
    return LoanGroup(group.loan_id, sorted(group.operations, key=_order_day))
