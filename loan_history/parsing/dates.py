"""Order date parsing and month keys."""

import re
from datetime import date, datetime

_ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def parse_order_date(text: str) -> date | None:
    """Parse a ``YYYY-MM-DD`` date, returning None when it is not one."""
    if not isinstance(text, str) or not _ISO_DATE_RE.fullmatch(text):
        return None
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        return None


def month_key(day: date) -> str:
    """Calendar month key (``YYYY-MM``) of a date."""
    return f"{day.year:04d}-{day.month:02d}"
