"""
Record serialization and rejected-line reporting.

RecordWriter writes accepted records as tab-separated lines; ErrorReporter
writes one diagnostic per rejected line to a separate stream.
"""

import logging
from typing import IO

from ..config.constants import ERROR_LINE_TEMPLATE, FIELD_DELIMITER, RECORD_TERMINATOR
from .schema import FieldFailure, ValidatedRecord

logger = logging.getLogger(__name__)


def format_record(record: ValidatedRecord) -> str:
    """Join record fields with tabs (no line terminator)."""
    return FIELD_DELIMITER.join(record.fields)


def format_error(line: str, failure: FieldFailure) -> str:
    """Build the diagnostic text for a rejected line."""
    return ERROR_LINE_TEMPLATE.format(reason=failure.reason, line=line)


class RecordWriter:
    """Writes validated records to a text stream, one per line."""

    def __init__(self, stream: IO[str]):
        self.stream = stream
        self.records_written = 0

    def write(self, record: ValidatedRecord) -> None:
        self.stream.write(format_record(record) + RECORD_TERMINATOR)
        self.records_written += 1


class ErrorReporter:
    """
    Reports rejected lines on a diagnostic stream.

    Each report has the shape::

        Error "<reason>" on line: <original line>
    """

    def __init__(self, stream: IO[str]):
        self.stream = stream
        self.errors_reported = 0

    def report(self, line: str, failure: FieldFailure) -> None:
        """
        Write a diagnostic for a rejected line.

        Args:
            line: The original line text
            failure: The failure that rejected it
        """
        logger.debug(
            f"Rejected line in {failure.state.name}: {failure.kind.name} "
            f"(token={failure.token!r})"
        )
        self.stream.write(format_error(line, failure) + RECORD_TERMINATOR)
        self.errors_reported += 1
