"""Selection of loan repayment transactions."""

import logging
from typing import Iterable, Iterator

from loan_history.config import PENALTY_DEFAULT, REPAYMENT_LABEL
from loan_history.models import LoanOperation, RawTransaction
from loan_history.parsing import extract_fields

logger = logging.getLogger(__name__)


def iter_loan_operations(
    transactions: Iterable[RawTransaction],
    repayment_label: str = REPAYMENT_LABEL,
    penalty_default: str = PENALTY_DEFAULT,
) -> Iterator[LoanOperation]:
    """Yield a LoanOperation for every repayment with a parseable description.

    Transactions with another category label, or whose description does
    not carry the repayment breakdown, are skipped silently.
    """
    for transaction in transactions:
        if transaction.type.strip() != repayment_label:
            continue

        extracted = extract_fields(transaction.description, penalty_default)
        if extracted is None:
            logger.debug(
                "Repayment on %s has no breakdown, skipping: %r",
                transaction.order_date,
                transaction.description,
            )
            continue

        yield LoanOperation.from_transaction(transaction, extracted)


def select_loan_operations(
    transactions: Iterable[RawTransaction],
    repayment_label: str = REPAYMENT_LABEL,
    penalty_default: str = PENALTY_DEFAULT,
) -> list[LoanOperation]:
    """Select loan repayments in input order.

    Parameters
    ----------
    transactions : Iterable[RawTransaction]
        Account history operations.
    repayment_label : str
        Category label of loan repayment transactions.
    penalty_default : str
        Penalty interest used when a description omits it.

    Returns
    -------
    list[LoanOperation]
        Matching operations.
    """
    transactions = list(transactions)
    operations = list(
        iter_loan_operations(transactions, repayment_label, penalty_default)
    )
    logger.debug(
        "Selected %d loan operations out of %d transactions",
        len(operations),
        len(transactions),
    )
    return operations
