"""
Constants for log conversion output and configuration.
"""

# =============================================================================
# Output Format
# =============================================================================

FIELD_DELIMITER = "\t"
RECORD_TERMINATOR = "\n"

# Diagnostic written for each rejected line
ERROR_LINE_TEMPLATE = 'Error "{reason}" on line: {line}'

# Output columns in order. ADDRESS repeats when a forwarded chain is present;
# REFERER and USER_AGENT are only present for Combined Log Format lines.
OUTPUT_FIELDS = [
    "address",
    "client_identity",
    "user_id",
    "timestamp",
    "method",
    "path",
    "protocol",
    "status_code",
    "content_length",
    "referer",
    "user_agent",
]

# =============================================================================
# Configuration
# =============================================================================

DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"

# Marks standard input / standard output on the command line
STDIO_PATH = "-"

# Environment variable names
ENV_SKIP_VALIDATION = "CLF2TAB_SKIP_VALIDATION"
ENV_ENCODING = "CLF2TAB_ENCODING"
ENV_LOG_LEVEL = "CLF2TAB_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
