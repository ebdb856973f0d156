"""Loan report pipeline: history in, one monthly series per loan out."""

from __future__ import annotations

import logging
import multiprocessing as mp
import time
from typing import Iterable, Protocol

from loan_history.config import ExtractionConfig, ReportConfig
from loan_history.models import LoanGroup, MonthlySeries, RawTransaction
from loan_history.pipeline.aggregation import build_series
from loan_history.pipeline.filtering import select_loan_operations
from loan_history.pipeline.grouping import group_by_loan, sort_group

logger = logging.getLogger(__name__)


class SeriesSink(Protocol):
    """Anything that accepts monthly series, e.g. JsonFileSink."""

    def write_series(self, series: MonthlySeries) -> None: ...

    def close(self) -> None: ...


def _sorted_series(group: LoanGroup) -> MonthlySeries | None:
    """Worker entry point: sort one group and aggregate it."""
    return build_series(sort_group(group))


class LoanReport:
    """Turn an account history into monthly repayment series per loan.

    Steps:
    - keep repayments whose description carries the breakdown
    - group them by loan identifier
    - per group: sort by order date, build the month calendar, sum
      principal and interest per month

    Groups are independent, so with ``workers > 1`` the per-group steps
    run in a process pool once grouping is complete.
    """

    def __init__(
        self,
        extraction: ExtractionConfig | None = None,
        workers: int = 1,
        *,
        config: ReportConfig | None = None,
    ) -> None:
        """Initialize the report.

        Parameters
        ----------
        extraction : ExtractionConfig | None
            Repayment label and penalty default.
        workers : int
            Number of processes for per-loan aggregation.
        config : ReportConfig | None
            Optional run configuration. If provided, overrides
            extraction and workers.
        """
        if config is not None:
            extraction = config.extraction
            workers = config.workers

        self.extraction = extraction or ExtractionConfig()
        self.workers = max(1, workers)

    def group(self, transactions: Iterable[RawTransaction]) -> dict[str, LoanGroup]:
        """Select loan repayments and group them by loan identifier."""
        operations = select_loan_operations(
            transactions,
            repayment_label=self.extraction.repayment_label,
            penalty_default=self.extraction.penalty_default,
        )
        return group_by_loan(operations)

    def build(self, transactions: Iterable[RawTransaction]) -> dict[str, MonthlySeries]:
        """Build the monthly series of every loan in the history.

        Returns
        -------
        dict[str, MonthlySeries]
            Series keyed by loan identifier, in first-seen order.
        """
        t0 = time.perf_counter()
        groups = self.group(transactions)
        logger.info(
            "Found %d loans in %d repayments",
            len(groups),
            sum(len(g) for g in groups.values()),
        )

        group_list = list(groups.values())
        if self.workers > 1 and len(group_list) > 1:
            processes = min(self.workers, len(group_list))
            with mp.Pool(processes=processes) as pool:
                results = pool.map(_sorted_series, group_list)
        else:
            results = [_sorted_series(group) for group in group_list]

        series = {
            group.loan_id: result
            for group, result in zip(group_list, results)
            if result is not None
        }
        logger.info(
            "Built %d monthly series in %.3fs", len(series), time.perf_counter() - t0
        )
        return series

    @staticmethod
    def emit(series: dict[str, MonthlySeries], sink: SeriesSink) -> None:
        """Hand each series to the sink in first-seen order, then close it."""
        try:
            for loan_id in series:
                sink.write_series(series[loan_id])
        finally:
            sink.close()
