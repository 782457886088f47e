#!/usr/bin/env python3
"""
Convert Apache Common/Combined Log Format access logs to tab-separated records.

Each accepted line becomes one output line:
    address[\taddress...]\tident\tuser\tepoch\tmethod\tpath\tprotocol\tstatus\tsize[\treferer[\tuser-agent]]

Rejected lines are reported on the error stream as:
    Error "<reason>" on line: <original line>

Usage:
    # Read stdin, write stdout, diagnostics on stderr
    cat access.log | python scripts/convert_logs.py

    # Gzipped input file to an output file
    python scripts/convert_logs.py --input access.log.gz --output access.tsv

    # Best-effort conversion of malformed logs
    python scripts/convert_logs.py --input access.log --skip-validation

    # Settings from a YAML file
    python scripts/convert_logs.py --config clf2tab.yaml --input access.log
"""

import argparse
import logging
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import IO, Optional

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from clf2tab.config import OUTPUT_FIELDS, Settings, get_settings
from clf2tab.config.constants import STDIO_PATH
from clf2tab.exceptions import SettingsError
from clf2tab.parsing import build_driver, iter_lines, open_log_input, setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Convert CLF/Combined access logs to tab-separated records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # stdin to stdout
  cat access.log | python scripts/convert_logs.py

  # Gzipped file to TSV, diagnostics to a file
  python scripts/convert_logs.py -i access.log.gz -o access.tsv --errors rejected.txt

  # Disable field validation
  python scripts/convert_logs.py -i access.log --skip-validation
        """,
    )

    parser.add_argument(
        "--input",
        "-i",
        type=str,
        default=STDIO_PATH,
        help="Input log file, plain or gzip (default: '-' for stdin)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=STDIO_PATH,
        help="Output file for records (default: '-' for stdout)",
    )
    parser.add_argument(
        "--errors",
        type=str,
        default=None,
        help="File for rejected-line diagnostics (default: stderr)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML config file (validation.skip, input.encoding, logging.level)",
    )
    parser.add_argument(
        "--skip-validation",
        dest="skip_validation",
        action="store_true",
        default=None,
        help="Accept every field without validation (permissive mode)",
    )
    parser.add_argument(
        "--encoding",
        type=str,
        default=None,
        help="Input text encoding (default: utf-8)",
    )
    parser.add_argument(
        "--list-fields",
        action="store_true",
        help="List output columns in order and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Combine config file / environment settings with command line flags."""
    settings = get_settings(args.config).with_overrides(
        skip_validation=args.skip_validation,
        encoding=args.encoding,
        log_level="DEBUG" if args.verbose else None,
    )
    errors = settings.validate()
    if errors:
        raise SettingsError(errors, source="command line")
    return settings


def _open_output(stack: ExitStack, path: Optional[str], default: IO[str]) -> IO[str]:
    """Open an output file on the stack; standard streams are only flushed on exit."""
    if path is None or path == STDIO_PATH:
        stack.callback(default.flush)
        return default
    return stack.enter_context(open(path, "w", encoding="utf-8", newline=""))


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    if args.list_fields:
        for position, name in enumerate(OUTPUT_FIELDS, start=1):
            print(f"  {position:2d}. {name}")
        return 0

    try:
        settings = resolve_settings(args)
    except (SettingsError, FileNotFoundError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(level=settings.logging_level)
    logger.debug(f"Settings: {settings.to_dict()}")

    try:
        with ExitStack() as stack:
            try:
                output = _open_output(stack, args.output, sys.stdout)
                errors = _open_output(stack, args.errors, sys.stderr)
            except OSError as e:
                print(f"Cannot open output: {e}", file=sys.stderr)
                return 1

            driver = build_driver(settings, output=output, errors=errors)
            try:
                source = stack.enter_context(
                    open_log_input(args.input, encoding=settings.encoding)
                )
                report = driver.process_lines(iter_lines(source))
            except (OSError, EOFError) as e:
                print(f"Cannot read input {args.input}: {e}", file=sys.stderr)
                return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130

    logger.info(
        f"Processed {report.lines_read} lines in {report.duration_seconds:.2f}s"
    )
    # Rejected lines are reported, not fatal.
    return 0


if __name__ == "__main__":
    sys.exit(main())
