"""Synthetic account history generator with loan repayments."""

import random
from datetime import date, timedelta
from decimal import Decimal

from loan_history.config import REPAYMENT_LABEL
from loan_history.generators.base import BaseGenerator
from loan_history.models import Amount, RawTransaction

OTHER_TYPES = [
    "Płatność kartą",
    "Przelew z rachunku",
    "Przelew na rachunek",
    "Wypłata z bankomatu",
    "Zlecenie stałe",
]


def format_amount(value: Decimal, signed: bool = False) -> str:
    """Format an amount the way the bank export does, e.g. ``-1234,56``."""
    text = f"{value:.2f}".replace(".", ",")
    if signed and value >= 0:
        text = "+" + text
    return text


def repayment_description(
    principal: Decimal,
    interest: Decimal,
    capitalized: Decimal,
    loan_id: str,
    penalty: Decimal | None = None,
) -> str:
    """Description of a loan repayment with its breakdown."""
    parts = [
        f"KAPITAŁ: {format_amount(principal)}",
        f"ODSETKI: {format_amount(interest)}",
        f"ODSETKI SKAPIT.: {format_amount(capitalized)}",
    ]
    if penalty is not None:
        parts.append(f"ODSETKI KARNE: {format_amount(penalty)}")
    parts.append(loan_id)
    return " ".join(parts)


class HistoryGenerator(BaseGenerator):
    """Generate account histories mixing loan repayments and other operations."""

    def __init__(self, seed: int | None = None, currency: str = "PLN") -> None:
        super().__init__(seed)
        self.currency = currency

    def generate_loan_id(self) -> str:
        """Random numeric loan identifier."""
        return str(random.randint(10_000_000, 99_999_999))

    def generate(
        self,
        num_loans: int = 2,
        num_months: int = 12,
        start_date: date = date(2024, 1, 1),
        other_per_month: int = 3,
        skip_rate: float = 0.1,
        penalty_rate: float = 0.1,
        opening_balance: Decimal = Decimal("10000.00"),
    ) -> list[RawTransaction]:
        """Generate a chronological account history.

        Parameters
        ----------
        num_loans : int
            Number of loans repaid from the account.
        num_months : int
            Length of the history in months.
        start_date : date
            First day of the history.
        other_per_month : int
            Unrelated operations per month.
        skip_rate : float
            Probability that a loan has no repayment in a month.
        penalty_rate : float
            Probability that a repayment includes penalty interest.
        opening_balance : Decimal
            Balance before the first operation.

        Returns
        -------
        list[RawTransaction]
            Operations sorted by order date.
        """
        loans = [
            (self.generate_loan_id(), Decimal(random.randint(200, 2000)))
            for _ in range(num_loans)
        ]

        entries: list[tuple[date, str, str, Decimal]] = []
        year, month = start_date.year, start_date.month
        for _ in range(num_months):
            for loan_id, installment in loans:
                if random.random() < skip_rate:
                    continue
                entries.append(self._repayment(year, month, loan_id, installment, penalty_rate))

            for _ in range(other_per_month):
                entries.append(self._other(year, month))

            month += 1
            if month > 12:
                year, month = year + 1, 1

        entries.sort(key=lambda e: e[0])

        balance = opening_balance
        history = []
        for day, tx_type, description, amount in entries:
            balance += amount
            exec_day = day + timedelta(days=random.choice([0, 0, 1]))
            history.append(
                RawTransaction(
                    order_date=day.isoformat(),
                    exec_date=exec_day.isoformat(),
                    type=tx_type,
                    description=description,
                    amount=Amount(format_amount(amount, signed=True), self.currency),
                    ending_balance=Amount(format_amount(balance, signed=True), self.currency),
                )
            )
        return history

    def _repayment(
        self,
        year: int,
        month: int,
        loan_id: str,
        installment: Decimal,
        penalty_rate: float,
    ) -> tuple[date, str, str, Decimal]:
        interest = (installment * Decimal(str(round(random.uniform(0.05, 0.4), 2)))).quantize(
            Decimal("0.01")
        )
        principal = installment - interest
        capitalized = Decimal("0.00")
        penalty = None
        if random.random() < penalty_rate:
            penalty = Decimal(random.randint(100, 5000)) / 100

        total = principal + interest + (penalty or 0)
        day = date(year, month, random.randint(1, 28))
        description = repayment_description(principal, interest, capitalized, loan_id, penalty)
        return day, REPAYMENT_LABEL, description, -total

    def _other(self, year: int, month: int) -> tuple[date, str, str, Decimal]:
        tx_type = random.choice(OTHER_TYPES)
        day = date(year, month, random.randint(1, 28))
        amount = Decimal(random.randint(500, 50000)) / 100
        if tx_type == "Przelew na rachunek":
            description = f"Nadawca: {self.fake.name()} Tytuł: {self.fake.sentence(nb_words=3)}"
        else:
            amount = -amount
            description = f"Odbiorca: {self.fake.company()} Miasto: {self.fake.city()}"
        return day, tx_type, description, amount
