"""Readers for account history exports."""

from loan_history.sources.xml_history import parse_history, read_history, write_history

__all__ = ["parse_history", "read_history", "write_history"]
