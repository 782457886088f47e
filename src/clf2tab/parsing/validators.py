"""
Field validators for Common/Combined Log Format tokens.

The predicates are pure and independent of the tokenizer. FieldValidator
binds them to field states and applies the permissive-mode switch.
"""

from typing import Callable, Optional

from .schema import FailureKind, ParseState

DIGITS = frozenset("0123456789")
ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
USER_TAIL_CHARS = DIGITS | ASCII_LETTERS | frozenset("_-@.")

MAX_ADDRESS_LENGTH = 15


# =============================================================================
# Predicates
# =============================================================================


def is_address(token: str) -> bool:
    """
    Check that a token looks like a dotted-quad address or is empty ('-').

    Only the shape is checked: digits and dots, exactly three dots, at most
    15 characters. Octet ranges are not verified.
    """
    if token == "-":
        return True
    if not token or len(token) > MAX_ADDRESS_LENGTH:
        return False
    if any(ch not in DIGITS and ch != "." for ch in token):
        return False
    return token.count(".") == 3


def is_numeric(token: str) -> bool:
    """Check that a token is made of digits and '-' only."""
    return bool(token) and all(ch in DIGITS or ch == "-" for ch in token)


def is_user(token: str) -> bool:
    """
    Check a user id.

    Very liberal: a lone '-', or a letter/underscore followed by
    alphanumerics, '_', '-', '@' or '.'.
    """
    if token == "-":
        return True
    if not token:
        return False
    head, tail = token[0], token[1:]
    if head not in ASCII_LETTERS and head != "_":
        return False
    return all(ch in USER_TAIL_CHARS for ch in tail)


def is_client_identity(token: str) -> bool:
    # RFC 1413 identities are almost never sent, so only '-' is supported.
    return token == "-"


def is_path(token: str) -> bool:
    return token.startswith("/")


# =============================================================================
# State-bound validation
# =============================================================================

# State -> (predicate, failure). States absent from the table accept anything.
FIELD_RULES: dict[ParseState, tuple[Callable[[str], bool], FailureKind]] = {
    ParseState.ADDRESS: (is_address, FailureKind.INVALID_ADDRESS),
    ParseState.CLIENT_IDENTITY: (
        is_client_identity,
        FailureKind.UNSUPPORTED_CLIENT_IDENTITY,
    ),
    ParseState.USER_ID: (is_user, FailureKind.INVALID_USER),
    ParseState.TIMESTAMP: (is_numeric, FailureKind.TIMESTAMP_NOT_NUMERIC),
    ParseState.PATH: (is_path, FailureKind.PATH_MISSING_SLASH),
    ParseState.STATUS_CODE: (is_numeric, FailureKind.STATUS_CODE_NOT_NUMERIC),
    ParseState.CONTENT_LENGTH: (is_numeric, FailureKind.CONTENT_LENGTH_NOT_NUMERIC),
}


class FieldValidator:
    """
    Validates committed tokens according to the field they belong to.

    Usage:
        validator = FieldValidator()
        failure = validator.check(ParseState.PATH, "index.html")
        # failure == FailureKind.PATH_MISSING_SLASH

    When ``skip_validation`` is True every token is accepted.
    """

    def __init__(self, skip_validation: bool = False):
        """
        Initialize validator.

        Args:
            skip_validation: If True, accept all tokens unconditionally
        """
        self.skip_validation = skip_validation

    def check(self, state: ParseState, token: str) -> Optional[FailureKind]:
        """
        Validate a token for a field state.

        Args:
            state: Field the token was collected for
            token: Committed token text

        Returns:
            None if the token is accepted, otherwise the failure kind
        """
        if self.skip_validation:
            return None
        rule = FIELD_RULES.get(state)
        if rule is None:
            return None
        predicate, failure = rule
        return None if predicate(token) else failure
