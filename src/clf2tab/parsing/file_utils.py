"""
Input stream helpers for the converter.

Access logs are often rotated and gzipped, so input files are opened with
transparent decompression. The path '-' stands for standard input.
"""

import gzip
import io
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import IO, ContextManager, Iterator, Union

from ..config.constants import STDIO_PATH

GZIP_MAGIC = b"\x1f\x8b"


def open_log_input(
    file_path: Union[str, Path],
    encoding: str = "utf-8",
) -> ContextManager[IO[str]]:
    """
    Open an access log for reading, detecting gzip compression.

    Gzip detection is performed by:
    1. Checking for .gz file extension
    2. Checking for gzip magic bytes (0x1f 0x8b) even without .gz extension

    Undecodable bytes are replaced rather than failing the whole stream.

    Args:
        file_path: Path to the log file, or '-' for standard input
        encoding: Text encoding (default: utf-8)

    Returns:
        Open file handle (text mode). For '-', a context manager
        yielding a decoding view of stdin that leaves stdin open on exit.

    Raises:
        FileNotFoundError: If file doesn't exist
        PermissionError: If file cannot be read
        gzip.BadGzipFile: If file has .gz extension but is not valid gzip
    """
    if str(file_path) == STDIO_PATH:
        return _open_stdin(encoding)

    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    if path.suffix.lower() == ".gz":
        return gzip.open(path, "rt", encoding=encoding, errors="replace", newline="")

    with open(path, "rb") as f:
        magic = f.read(2)
    if magic == GZIP_MAGIC:
        return gzip.open(path, "rt", encoding=encoding, errors="replace", newline="")

    return open(path, "r", encoding=encoding, errors="replace", newline="")


def iter_lines(stream: IO[str]) -> Iterator[str]:
    """Yield lines from a text stream without their line terminators."""
    for line in stream:
        yield line.rstrip("\r\n")


@contextmanager
def _open_stdin(encoding: str) -> Iterator[IO[str]]:
    """Decode stdin's byte stream with the configured encoding."""
    stream = io.TextIOWrapper(
        sys.stdin.buffer, encoding=encoding, errors="replace", newline=""
    )
    try:
        yield stream
    finally:
        # Detach so stdin's buffer is not closed with the wrapper.
        stream.detach()
