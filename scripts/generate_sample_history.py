#!/usr/bin/env python3
"""Generate a sample account history export.

Writes a synthetic ``operations.xml`` with loan repayments mixed with
other operations, usable as input for ``loan-report``.
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loan_history.generators import HistoryGenerator
from loan_history.logging import setup_logging
from loan_history.sources import write_history

logger = logging.getLogger(__name__)


def main() -> None:
    """Generate the sample history."""
    parser = argparse.ArgumentParser(description="Generate a sample account history export")
    parser.add_argument("--output", type=Path, default=Path("operations.xml"), help="Output XML file")
    parser.add_argument("--loans", type=int, default=2, help="Number of loans")
    parser.add_argument("--months", type=int, default=24, help="History length in months")
    parser.add_argument("--start", type=date.fromisoformat, default=date(2023, 1, 1), help="First day (YYYY-MM-DD)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    args = parser.parse_args()

    setup_logging()

    generator = HistoryGenerator(seed=args.seed)
    history = generator.generate(
        num_loans=args.loans,
        num_months=args.months,
        start_date=args.start,
    )
    count = write_history(history, args.output)
    logger.info("Sample history with %d operations saved to %s", count, args.output)


if __name__ == "__main__":
    main()
