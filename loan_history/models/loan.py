"""Loan repayment models built from the account history."""

from dataclasses import dataclass, field

from loan_history.models.base import Amount
from loan_history.models.history import RawTransaction


@dataclass(frozen=True)
class ExtractedFields:
    """Sub-fields parsed out of a loan repayment description.

    Amounts keep their decimal-comma text form.
    """

    principal: str  # KAPITAŁ
    interest: str  # ODSETKI
    capitalized_interest: str  # ODSETKI SKAPIT.
    penalty_interest: str  # ODSETKI KARNE, "0,00" when absent
    loan_id: str


@dataclass(frozen=True)
class LoanOperation:
    """A repayment transaction joined with its extracted fields."""

    order_date: str
    exec_date: str
    type: str
    amount: Amount
    ending_balance: Amount
    principal: str
    interest: str
    capitalized_interest: str
    penalty_interest: str
    loan_id: str

    @classmethod
    def from_transaction(
        cls, transaction: RawTransaction, extracted: ExtractedFields
    ) -> "LoanOperation":
        """Join a raw transaction with the fields extracted from it."""
        return cls(
            order_date=transaction.order_date,
            exec_date=transaction.exec_date,
            type=transaction.type,
            amount=transaction.amount,
            ending_balance=transaction.ending_balance,
            principal=extracted.principal,
            interest=extracted.interest,
            capitalized_interest=extracted.capitalized_interest,
            penalty_interest=extracted.penalty_interest,
            loan_id=extracted.loan_id,
        )


@dataclass
class LoanGroup:
    """All operations sharing one loan identifier."""

    loan_id: str
    operations: list[LoanOperation] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.operations)


@dataclass(frozen=True)
class MonthlySeries:
    """Per-month principal and interest sums for one loan.

    ``months`` holds ``YYYY-MM`` keys in calendar order; the two sum
    sequences are indexed the same way.
    """

    loan_id: str
    months: tuple[str, ...]
    principal: tuple[float, ...]
    interest: tuple[float, ...]

    def __post_init__(self) -> None:
        if not len(self.months) == len(self.principal) == len(self.interest):
            raise ValueError(
                f"Series for loan {self.loan_id} is misaligned: "
                f"{len(self.months)} months, {len(self.principal)} principal, "
                f"{len(self.interest)} interest values"
            )

    @property
    def total_principal(self) -> float:
        """Principal paid over the whole span."""
        return sum(self.principal)

    @property
    def total_interest(self) -> float:
        """Interest paid over the whole span."""
        return sum(self.interest)
