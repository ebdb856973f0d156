"""Raw account history models."""

from dataclasses import dataclass, field

from loan_history.models.base import Amount


@dataclass(frozen=True)
class RawTransaction:
    """One operation from an account history export."""

    order_date: str  # YYYY-MM-DD
    exec_date: str  # YYYY-MM-DD
    type: str  # Category label, e.g. "Spłata kredytu"
    description: str
    amount: Amount = field(default_factory=lambda: Amount(""))
    ending_balance: Amount = field(default_factory=lambda: Amount(""))
