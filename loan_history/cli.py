"""Command line entry point: build monthly loan repayment reports."""

import argparse
import logging
import sys
from pathlib import Path

from loan_history.config import ExtractionConfig, OutputConfig, ReportConfig
from loan_history.exceptions import LoanHistoryError
from loan_history.logging import setup_logging
from loan_history.pipeline import LoanReport
from loan_history.sinks import ConsoleSink, JsonFileSink
from loan_history.sources import read_history

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for ``loan-report``."""
    parser = argparse.ArgumentParser(
        prog="loan-report",
        description="Monthly principal and interest per loan from an account history export.",
    )
    parser.add_argument(
        "source", type=Path, nargs="?", default=None,
        help="Account history XML (default: $LOAN_HISTORY_SOURCE or operations.xml)",
    )
    parser.add_argument("--output-dir", type=Path, default=None, help="Directory for JSON files")
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON")
    parser.add_argument("--console", action="store_true", help="Print series instead of writing files")
    parser.add_argument("--workers", type=int, default=None, help="Processes for aggregation")
    parser.add_argument("--label", default=None, help="Category label of loan repayments")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    parser.add_argument(
        "--log-format", choices=["standard", "json"], default="standard", help="Log format"
    )
    return parser


def config_from_args(args: argparse.Namespace) -> ReportConfig:
    """Environment config with command line overrides applied."""
    env = ReportConfig.from_env()
    return ReportConfig(
        source=args.source or env.source,
        extraction=ExtractionConfig(
            repayment_label=args.label or env.extraction.repayment_label,
        ),
        output=OutputConfig(
            output_dir=args.output_dir or env.output.output_dir,
            pretty_json=args.pretty or env.output.pretty_json,
            file_prefix=env.output.file_prefix,
        ),
        workers=args.workers if args.workers is not None else env.workers,
        log_level=args.log_level or env.log_level,
    )


def main(argv: list[str] | None = None) -> int:
    """Run the report and return the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = config_from_args(args)
    except LoanHistoryError as e:
        setup_logging(args.log_level or "INFO", args.log_format)
        logger.error("Invalid configuration: %s", e)
        return 1

    setup_logging(config.log_level, args.log_format)

    try:
        transactions = read_history(config.source)
        report = LoanReport(config=config)
        series = report.build(transactions)

        if args.console:
            sink = ConsoleSink(pretty=config.output.pretty_json)
        else:
            sink = JsonFileSink(
                config.output.output_dir,
                pretty=config.output.pretty_json,
                prefix=config.output.file_prefix,
            )
        report.emit(series, sink)
    except FileNotFoundError as e:
        logger.error("Source not found: %s", e.filename or config.source)
        return 1
    except OSError as e:
        logger.error("Cannot read %s: %s", config.source, e)
        return 1
    except LoanHistoryError as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
