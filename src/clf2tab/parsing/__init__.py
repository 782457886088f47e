"""
Common and Combined Log Format parsing.

Turns Apache-style access log lines into ordered, validated fields with the
timestamp normalized to epoch seconds.

Usage:
    from clf2tab.parsing import CLFTokenizer, FieldValidator

    tokenizer = CLFTokenizer(FieldValidator(skip_validation=False))
    result = tokenizer.tokenize(
        '127.0.0.1 - - [04/Apr/2012:10:37:29 -0500] "GET / HTTP/1.1" 200 512'
    )
    if result.ok:
        print(result.record.fields)
"""

from .driver import ConversionReport, LineDriver, build_driver, setup_logging
from .file_utils import iter_lines, open_log_input
from .output import ErrorReporter, RecordWriter, format_error, format_record
from .schema import (
    FailureKind,
    FieldFailure,
    ParseState,
    TokenizeResult,
    ValidatedRecord,
)
from .timestamps import normalize_timestamp, parse_timestamp
from .tokenizer import CLFTokenizer
from .validators import (
    FieldValidator,
    is_address,
    is_client_identity,
    is_numeric,
    is_path,
    is_user,
)

__all__ = [
    # Data model
    "ParseState",
    "FailureKind",
    "FieldFailure",
    "ValidatedRecord",
    "TokenizeResult",
    # Validators
    "FieldValidator",
    "is_address",
    "is_client_identity",
    "is_numeric",
    "is_path",
    "is_user",
    # Timestamps
    "normalize_timestamp",
    "parse_timestamp",
    # Tokenizer
    "CLFTokenizer",
    # Output
    "RecordWriter",
    "ErrorReporter",
    "format_record",
    "format_error",
    # Driver
    "LineDriver",
    "ConversionReport",
    "build_driver",
    "setup_logging",
    # File utilities
    "open_log_input",
    "iter_lines",
]
