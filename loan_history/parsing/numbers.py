"""Decimal-comma number parsing."""

import math
import re

# Plain decimal or scientific notation once the comma became a dot
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

# Thousands separators used in Polish bank exports
_GROUPING = str.maketrans("", "", " \u00a0\u202f")


def parse_decimal_comma(text: str) -> float:
    """Parse a decimal-comma amount such as ``"1 234,56"``.

    Surrounding whitespace and space-like thousands separators are
    dropped and the first comma becomes the decimal point. Anything
    that still is not a finite number yields ``0.0``; this function
    never raises.

    Parameters
    ----------
    text : str
        Amount text.

    Returns
    -------
    float
        Parsed value, or 0.0 for malformed input.
    """
    if not isinstance(text, str):
        return 0.0

    candidate = text.strip().translate(_GROUPING).replace(",", ".", 1)
    if not _NUMBER_RE.fullmatch(candidate):
        return 0.0

    value = float(candidate)
    return value if math.isfinite(value) else 0.0
