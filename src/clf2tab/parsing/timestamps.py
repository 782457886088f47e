"""
Apache access-log timestamp normalization.

Converts the bracketed timestamp of a CLF line, e.g.::

    04/Apr/2012:10:37:29 -0500

into integer seconds since the Unix epoch (UTC). The offset written in the
timestamp is the only timezone information used; the host's local zone is
never consulted.
"""

import re
from datetime import datetime

from ..exceptions import TimestampFormatError

# day/month/year:hour:minute:second zone
TIMESTAMP_PATTERN = re.compile(
    r"^\d{2}/[A-Za-z]{3}/\d{4}:\d{2}:\d{2}:\d{2} [+-]\d{4}$"
)
TIMESTAMP_FORMAT = "%d/%b/%Y:%H:%M:%S %z"


def parse_timestamp(raw: str) -> datetime:
    """
    Parse an Apache timestamp into a timezone-aware datetime.

    Args:
        raw: Timestamp text without brackets

    Returns:
        Datetime carrying the offset stated in the text

    Raises:
        TimestampFormatError: If the text does not have the exact shape
            DD/Mon/YYYY:HH:MM:SS +ZZZZ or names an impossible date
    """
    if not TIMESTAMP_PATTERN.match(raw):
        raise TimestampFormatError("Malformed log timestamp", value=raw)
    try:
        return datetime.strptime(raw, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise TimestampFormatError(f"Invalid log timestamp: {e}", value=raw) from e


def normalize_timestamp(raw: str) -> str:
    """
    Convert an Apache timestamp to epoch seconds as a decimal string.

    The stated offset is removed to obtain UTC, so
    ``04/Apr/2012:10:37:29 -0500`` and ``04/Apr/2012:15:37:29 +0000``
    both return ``"1333553849"``.

    Raises:
        TimestampFormatError: If the text cannot be parsed
    """
    return str(int(parse_timestamp(raw).timestamp()))
