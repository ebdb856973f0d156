"""Configuration management for loan-history."""

from dataclasses import dataclass, field
from pathlib import Path

from loan_history.exceptions import ConfigurationError

REPAYMENT_LABEL = "Spłata kredytu"
PENALTY_DEFAULT = "0,00"


@dataclass
class ExtractionConfig:
    """Which transactions count as loan repayments."""

    repayment_label: str = REPAYMENT_LABEL
    penalty_default: str = PENALTY_DEFAULT


@dataclass
class OutputConfig:
    """Output configuration."""

    output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False
    file_prefix: str = "splaty"


@dataclass
class ReportConfig:
    """Main configuration for a loan report run."""

    source: Path = field(default_factory=lambda: Path("operations.xml"))
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    workers: int = 1
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ConfigurationError(f"workers must be >= 1, got {self.workers}")
        if not self.extraction.repayment_label.strip():
            raise ConfigurationError("repayment_label must not be blank")

    @classmethod
    def from_env(cls) -> "ReportConfig":
        """Create config from environment variables."""
        import os

        extraction = ExtractionConfig(
            repayment_label=os.getenv("REPAYMENT_LABEL", REPAYMENT_LABEL),
        )

        output = OutputConfig(
            output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
            file_prefix=os.getenv("FILE_PREFIX", "splaty"),
        )

        workers_str = os.getenv("WORKERS", "1")
        try:
            workers = int(workers_str)
        except ValueError as e:
            raise ConfigurationError(f"WORKERS must be an integer, got {workers_str!r}") from e

        return cls(
            source=Path(os.getenv("LOAN_HISTORY_SOURCE", "operations.xml")),
            extraction=extraction,
            output=output,
            workers=workers,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
