"""Logging utilities for pathcompose."""

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

import structlog

from pathcompose.domain import DecisionRecord, Operation


@dataclass
class CompositionStats:
    """Statistics from one composition run."""

    contour_count: int = 0
    unite_count: int = 0
    subtract_count: int = 0
    rollback_count: int = 0
    assumed_containment_count: int = 0

    def record(self, decision: DecisionRecord, assumed: bool = False) -> None:
        """Count one composition step."""
        if not decision.applied:
            self.rollback_count += 1
        elif decision.operation is Operation.SUBTRACT:
            self.subtract_count += 1
        else:
            self.unite_count += 1

        if assumed:
            self.assumed_containment_count += 1

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass
class DecisionCollector:
    """Decision observer that keeps every record it receives.

    Example:
        collector = DecisionCollector()
        SequentialComposer(engine, observer=collector).compose(commands)
        for record in collector.records:
            print(record.operation)
    """

    records: list[DecisionRecord] = field(default_factory=list)

    def __call__(self, record: DecisionRecord) -> None:
        self.records.append(record)

    @property
    def operations(self) -> list[Operation]:
        """Operations of all recorded steps, in order."""
        return [record.operation for record in self.records]


def log_decision(record: DecisionRecord) -> None:
    """Default decision observer: emit the record as a debug event."""
    structlog.get_logger("pathcompose.composition").debug(
        "Composition step", **record.to_dict()
    )


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and an optional file.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("pathcompose")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level if log_file else console_level,
    )

    return logger
