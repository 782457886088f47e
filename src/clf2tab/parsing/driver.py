"""
Line driver for Common/Combined Log Format conversion.

Feeds lines through the tokenizer one at a time, sends accepted records to
the writer and rejected lines to the error reporter. A rejected line never
stops the run.
"""

import logging
import sys
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import IO, Iterable, Optional

from ..config.constants import LOG_FORMAT
from ..config.settings import Settings
from .output import ErrorReporter, RecordWriter
from .schema import FailureKind, TokenizeResult
from .tokenizer import CLFTokenizer
from .validators import FieldValidator

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO, stream: Optional[IO[str]] = None) -> None:
    """
    Configure root logging for command-line runs.

    Args:
        level: Logging level
        stream: Handler stream (default: stderr, so stdout stays data-only)
    """
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=stream or sys.stderr,
        force=True,
    )


@dataclass
class ConversionReport:
    """Counters for one conversion run."""

    lines_read: int = 0
    records_written: int = 0
    lines_rejected: int = 0
    blank_lines: int = 0
    failures: Counter = field(default_factory=Counter)
    duration_seconds: Optional[float] = None

    def record_failure(self, kind: FailureKind) -> None:
        self.lines_rejected += 1
        self.failures[kind] += 1

    def to_dict(self) -> dict:
        """Convert report to dictionary."""
        return {
            "lines_read": self.lines_read,
            "records_written": self.records_written,
            "lines_rejected": self.lines_rejected,
            "blank_lines": self.blank_lines,
            "failures": {kind.name: count for kind, count in self.failures.items()},
            "duration_seconds": self.duration_seconds,
        }


class LineDriver:
    """
    Per-line orchestration of tokenize -> write or report.

    Usage:
        driver = build_driver(settings, output=sys.stdout, errors=sys.stderr)
        report = driver.process_lines(iter_lines(sys.stdin))
    """

    def __init__(
        self,
        tokenizer: CLFTokenizer,
        writer: RecordWriter,
        reporter: ErrorReporter,
    ):
        self.tokenizer = tokenizer
        self.writer = writer
        self.reporter = reporter

    def process_line(self, line: str) -> TokenizeResult:
        """
        Convert a single line.

        Args:
            line: Raw line without its trailing newline

        Returns:
            The tokenizer result (already written or reported)
        """
        result = self.tokenizer.tokenize(line)
        if result.ok:
            self.writer.write(result.record)
        else:
            self.reporter.report(line, result.failure)
        return result

    def process_lines(self, lines: Iterable[str]) -> ConversionReport:
        """
        Convert every line of an input stream, in order.

        Trailing CR/LF is stripped from each line. Blank lines are skipped
        without producing output or diagnostics.

        Args:
            lines: Iterable of raw lines

        Returns:
            ConversionReport for the run
        """
        report = ConversionReport()
        start_time = time.time()

        for line in lines:
            line = line.rstrip("\r\n")
            report.lines_read += 1

            if not line.strip():
                report.blank_lines += 1
                continue

            result = self.process_line(line)
            if result.ok:
                report.records_written += 1
            else:
                report.record_failure(result.failure.kind)

        report.duration_seconds = time.time() - start_time
        logger.info(
            f"Conversion complete: {report.records_written} records written, "
            f"{report.lines_rejected} rejected, {report.blank_lines} blank"
        )
        return report


def build_driver(settings: Settings, output: IO[str], errors: IO[str]) -> LineDriver:
    """
    Wire a LineDriver from settings.

    Args:
        settings: Run settings (only skip_validation affects parsing)
        output: Stream for tab-separated records
        errors: Stream for rejected-line diagnostics

    Returns:
        Ready-to-use LineDriver
    """
    if settings.skip_validation:
        logger.warning("Field validation disabled; malformed fields pass through")
    validator = FieldValidator(skip_validation=settings.skip_validation)
    return LineDriver(
        tokenizer=CLFTokenizer(validator),
        writer=RecordWriter(output),
        reporter=ErrorReporter(errors),
    )
