"""
Data model for Common/Combined Log Format tokenization.

Defines the ordered field states a log line moves through, the failure
taxonomy for rejected lines, and the result types produced per line.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ParseState(Enum):
    """
    Field currently being accumulated by the tokenizer.

    Members are declared in the left-to-right order fields appear on a
    CLF/Combined line. Transitions only ever move forward by one.
    """

    ADDRESS = 0
    CLIENT_IDENTITY = 1
    USER_ID = 2
    TIMESTAMP = 3
    METHOD = 4
    PATH = 5
    PROTOCOL = 6
    STATUS_CODE = 7
    CONTENT_LENGTH = 8
    REFERER = 9
    USER_AGENT = 10

    def next(self) -> Optional["ParseState"]:
        """Return the following state, or None after the user-agent."""
        if self is ParseState.USER_AGENT:
            return None
        return ParseState(self.value + 1)

    @property
    def is_simple(self) -> bool:
        """True for plain space-delimited fields."""
        return self in SIMPLE_STATES

    @property
    def is_free_text(self) -> bool:
        """True for quoted free-form fields that may contain spaces."""
        return self in FREE_TEXT_STATES


SIMPLE_STATES = frozenset(
    {
        ParseState.ADDRESS,
        ParseState.CLIENT_IDENTITY,
        ParseState.USER_ID,
        ParseState.STATUS_CODE,
        ParseState.CONTENT_LENGTH,
    }
)
FREE_TEXT_STATES = frozenset({ParseState.REFERER, ParseState.USER_AGENT})


class FailureKind(Enum):
    """Reasons a line is rejected. Values are the reported reason text."""

    INVALID_ADDRESS = "IP is invalid."
    UNSUPPORTED_CLIENT_IDENTITY = "Client identity unsupported."
    INVALID_USER = "USER is invalid."
    TIMESTAMP_NOT_NUMERIC = "TIME is not numeric."
    MALFORMED_TIMESTAMP = "TIME does not match DD/Mon/YYYY:HH:MM:SS +ZZZZ."
    PATH_MISSING_SLASH = "PATH does not begin with forward slash."
    STATUS_CODE_NOT_NUMERIC = "CODE is not numeric."
    CONTENT_LENGTH_NOT_NUMERIC = "CONTENT is not numeric."

    @property
    def reason(self) -> str:
        return self.value


@dataclass(frozen=True)
class FieldFailure:
    """
    First validation failure found on a line.

    Attributes:
        kind: Failure category
        state: Field state in which the failure was detected
        token: The offending token (normalized value for timestamps)
    """

    kind: FailureKind
    state: ParseState
    token: str

    @property
    def reason(self) -> str:
        return self.kind.reason


@dataclass(frozen=True)
class ValidatedRecord:
    """Ordered, positional field values for one accepted line."""

    fields: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self):
        return iter(self.fields)


@dataclass(frozen=True)
class TokenizeResult:
    """
    Outcome of tokenizing a single line.

    Exactly one of ``record`` and ``failure`` is set.
    """

    record: Optional[ValidatedRecord] = None
    failure: Optional[FieldFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def accepted(cls, fields: list[str]) -> "TokenizeResult":
        return cls(record=ValidatedRecord(tuple(fields)))

    @classmethod
    def rejected(
        cls, kind: FailureKind, state: ParseState, token: str
    ) -> "TokenizeResult":
        return cls(failure=FieldFailure(kind=kind, state=state, token=token))
