"""Console sink for inspecting monthly series."""

import json

from loan_history.models import MonthlySeries
from loan_history.sinks.serialization import series_to_dict


class ConsoleSink:
    """Output monthly series to console (stdout)."""

    def __init__(self, pretty: bool = True) -> None:
        self.pretty = pretty
        self._totals: dict[str, tuple[float, float, int]] = {}

    def write_series(self, series: MonthlySeries) -> None:
        """Print one loan's series."""
        print(f"\n{'='*60}")
        print(f"Loan: {series.loan_id} ({len(series.months)} months)")
        print("=" * 60)

        data = series_to_dict(series)
        if self.pretty:
            print(json.dumps(data, indent=2, ensure_ascii=False))
        else:
            print(json.dumps(data, ensure_ascii=False))

        self._totals[series.loan_id] = (
            series.total_principal,
            series.total_interest,
            len(series.months),
        )

    def close(self) -> None:
        """Print summary."""
        print(f"\n{'='*60}")
        print("Loan Summary")
        print("=" * 60)
        for loan_id, (principal, interest, months) in self._totals.items():
            print(
                f"  {loan_id}: principal {principal:.2f}, "
                f"interest {interest:.2f} over {months} months"
            )
