"""Pytest configuration and fixtures."""

from typing import Callable

import pytest

from loan_history.models import Amount, RawTransaction

REPAYMENT = "Spłata kredytu"


def make_transaction(
    order_date: str,
    description: str,
    tx_type: str = REPAYMENT,
    amount: str = "-125,00",
) -> RawTransaction:
    """Build a raw transaction with sensible defaults."""
    return RawTransaction(
        order_date=order_date,
        exec_date=order_date,
        type=tx_type,
        description=description,
        amount=Amount(amount, "PLN"),
        ending_balance=Amount("+1000,00", "PLN"),
    )


def repayment(
    principal: str = "100,00",
    interest: str = "20,00",
    capitalized: str = "5,00",
    loan_id: str = "999",
    penalty: str | None = None,
) -> str:
    """Repayment description text."""
    text = f"KAPITAŁ: {principal} ODSETKI: {interest} ODSETKI SKAPIT.: {capitalized}"
    if penalty is not None:
        text += f" ODSETKI KARNE: {penalty}"
    return f"{text} {loan_id}"


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_description() -> str:
    """Repayment description without penalty interest."""
    return "KAPITAŁ: 100,00 ODSETKI: 20,00 ODSETKI SKAPIT.: 5,00 999"


@pytest.fixture
def transaction_factory() -> Callable[..., RawTransaction]:
    """Factory for raw transactions."""
    return make_transaction


@pytest.fixture
def sample_history() -> list[RawTransaction]:
    """Small history with two loans, a gap month and unrelated operations."""
    return [
        make_transaction("2024-01-10", repayment("100,00", "20,00", loan_id="42")),
        make_transaction("2024-01-12", "Odbiorca: Sklep", tx_type="Płatność kartą"),
        make_transaction("2024-01-20", repayment("300,00", "50,00", loan_id="77")),
        make_transaction("2024-03-05", repayment("110,00", "18,50", loan_id="42")),
        make_transaction("2024-03-05", repayment("1,00", "0,50", loan_id="42", penalty="3,00")),
        make_transaction("2024-03-07", "KAPITAŁ: 1,00 bez numeru", tx_type=REPAYMENT),
    ]


@pytest.fixture
def description_factory() -> Callable[..., str]:
    """Factory for repayment descriptions."""
    return repayment
