"""Base models shared by the history and loan models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Amount:
    """Currency-tagged amount as written in the bank export.

    The value keeps the export's text form (e.g. ``"-1 234,56"``); it is
    only converted to a number where the pipeline needs one.
    """

    value: str
    currency: str = "PLN"
