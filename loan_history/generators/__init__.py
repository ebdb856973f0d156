"""Synthetic account history generators."""

from loan_history.generators.history import HistoryGenerator, repayment_description

__all__ = ["HistoryGenerator", "repayment_description"]
