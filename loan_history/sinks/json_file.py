"""JSON file sink writing one file per loan."""

import json
import logging
from pathlib import Path

from loan_history.exceptions import SinkError
from loan_history.models import MonthlySeries
from loan_history.sinks.serialization import sanitize_file_name, series_to_dict

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Output monthly series to JSON files."""

    def __init__(
        self, output_dir: str | Path, pretty: bool = False, prefix: str = "splaty"
    ) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        prefix : str
            File name prefix; files are named ``<prefix>_<loan id>.json``.
        """
        self.output_dir = Path(output_dir)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SinkError(f"Cannot create output directory {self.output_dir}: {e}") from e
        self.pretty = pretty
        self.prefix = prefix
        self._written: dict[str, Path] = {}

    def path_for(self, loan_id: str) -> Path:
        """File path used for a loan identifier."""
        return self.output_dir / f"{self.prefix}_{sanitize_file_name(loan_id)}.json"

    def write_series(self, series: MonthlySeries) -> None:
        """Write one loan's series to its own file."""
        file_path = self.path_for(series.loan_id)
        data = series_to_dict(series)

        try:
            with open(file_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(data, f, ensure_ascii=False)
        except OSError as e:
            raise SinkError(f"Cannot write {file_path}: {e}") from e

        logger.info(
            "Wrote series for loan %s -> %s",
            series.loan_id,
            file_path,
            extra={"loan_id": series.loan_id},
        )
        self._written[series.loan_id] = file_path

    def close(self) -> None:
        """Print summary."""
        print(f"JSON files written to: {self.output_dir}")
        for loan_id, file_path in self._written.items():
            print(f"  {loan_id}: {file_path.name}")
