"""Structured field extraction from loan repayment descriptions.

A repayment description carries its breakdown as labelled amounts
followed by the loan number, for example::

    KAPITAŁ: 100,00 ODSETKI: 20,00 ODSETKI SKAPIT.: 5,00 ODSETKI KARNE: 3,00 999

The ``ODSETKI KARNE`` (penalty interest) part is optional.
"""

import re

from loan_history.config import PENALTY_DEFAULT
from loan_history.models import ExtractedFields

# Digits with commas, or space-grouped thousands with decimals like "12 345,67"
_AMOUNT = r"(?:\d{1,3}(?:[ \u00a0\u202f]\d{3})+,\d+|[\d,]+)"

DESCRIPTION_PATTERN = re.compile(
    rf"KAPITAŁ:\s*(?P<principal>{_AMOUNT})"
    rf"\s+ODSETKI:\s*(?P<interest>{_AMOUNT})"
    rf"\s+ODSETKI\s+SKAPIT\.:\s*(?P<capitalized>{_AMOUNT})"
    rf"(?:\s+ODSETKI\s+KARNE:\s*(?P<penalty>{_AMOUNT}))?"
    r"\s+(?P<loan_id>\d+)",
    re.ASCII,
)


def extract_fields(
    description: str, penalty_default: str = PENALTY_DEFAULT
) -> ExtractedFields | None:
    """Extract the repayment breakdown from a description.

    Only the first match is used.

    Parameters
    ----------
    description : str
        Free-text transaction description.
    penalty_default : str
        Value used when the penalty interest label is absent.

    Returns
    -------
    ExtractedFields | None
        Extracted fields, or None when the description does not match.
    """
    match = DESCRIPTION_PATTERN.search(description)
    if match is None:
        return None

    return ExtractedFields(
        principal=match.group("principal"),
        interest=match.group("interest"),
        capitalized_interest=match.group("capitalized"),
        penalty_interest=match.group("penalty") or penalty_default,
        loan_id=match.group("loan_id"),
    )
