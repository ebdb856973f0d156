"""Output sinks for monthly loan series."""

from loan_history.sinks.console import ConsoleSink
from loan_history.sinks.json_file import JsonFileSink
from loan_history.sinks.serialization import sanitize_file_name, series_to_dict

__all__ = ["ConsoleSink", "JsonFileSink", "sanitize_file_name", "series_to_dict"]
