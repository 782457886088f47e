"""
Finite-state tokenizer for Common and Combined Log Format lines.

Common Log Format:
    127.0.0.1 - frank [10/Oct/2000:13:55:36 -0700] "GET /apache_pb.gif HTTP/1.0" 200 2326

Combined Log Format adds two quoted fields:
    ... 200 2326 "http://www.example.com/start.html" "Mozilla/4.08 [en] (Win98; I ;Nav)"

The tokenizer walks a line one character at a time, moving through the
field states in ParseState order. Each completed field is validated before
the state advances; the first failure rejects the whole line.
"""

import logging
from enum import Enum
from typing import Optional

from ..exceptions import TimestampFormatError
from .schema import FailureKind, ParseState, TokenizeResult
from .timestamps import normalize_timestamp
from .validators import FieldValidator

logger = logging.getLogger(__name__)

# Committed in place of a timestamp that could not be normalized
# when validation is skipped.
UNPARSED_TIMESTAMP = "-"


class _Action(Enum):
    """What a single character does to the pending token."""

    APPEND = "append"
    COMMIT = "commit"
    SPLIT = "split"
    OPEN_BRACKET = "open_bracket"
    CLOSE_BRACKET = "close_bracket"
    IGNORE = "ignore"


class CLFTokenizer:
    """
    Splits a CLF/Combined line into validated, ordered fields.

    Fields in order: address(es), client identity, user id, timestamp
    (epoch seconds), method, path, protocol, status code, content length,
    and optionally referer and user-agent.

    Usage:
        tokenizer = CLFTokenizer()
        result = tokenizer.tokenize(line)
        if result.ok:
            print("\\t".join(result.record))
        else:
            print(result.failure.reason)
    """

    def __init__(self, validator: Optional[FieldValidator] = None):
        """
        Initialize tokenizer.

        Args:
            validator: Field validator to apply; a strict one is created
                when omitted
        """
        self.validator = validator or FieldValidator()

    @property
    def skip_validation(self) -> bool:
        return self.validator.skip_validation

    def tokenize(self, line: str) -> TokenizeResult:
        """
        Tokenize one log line.

        Args:
            line: Raw line without its trailing newline

        Returns:
            TokenizeResult holding either the record or the first failure
        """
        fields: list[str] = []
        token = ""
        state: Optional[ParseState] = ParseState.ADDRESS
        previous: Optional[str] = None
        in_brackets = False

        for char in line:
            if state is None:
                break

            escaped = previous == "\\"
            previous = char
            action = self._classify(state, char, token, escaped, in_brackets)

            if action is _Action.APPEND:
                token += char
            elif action is _Action.OPEN_BRACKET:
                in_brackets = True
            elif action is _Action.SPLIT:
                # Another forwarded address follows; state does not advance.
                failure = self.validator.check(state, token)
                if failure is not None:
                    return TokenizeResult.rejected(failure, state, token)
                fields.append(token)
                token = ""
            elif action in (_Action.COMMIT, _Action.CLOSE_BRACKET):
                if action is _Action.CLOSE_BRACKET:
                    in_brackets = False
                    value, failure = self._normalize_timestamp(token)
                else:
                    value, failure = token, self.validator.check(state, token)
                if failure is not None:
                    return TokenizeResult.rejected(failure, state, value)
                fields.append(value)
                token = ""
                state = state.next()

        if state is not None and state.is_simple and token:
            failure = self.validator.check(state, token)
            if failure is not None:
                return TokenizeResult.rejected(failure, state, token)
            fields.append(token)
        elif state is not None and token:
            logger.debug(f"Discarding unterminated {state.name} field: {token!r}")

        return TokenizeResult.accepted(fields)

    def _classify(
        self,
        state: ParseState,
        char: str,
        token: str,
        escaped: bool,
        in_brackets: bool,
    ) -> _Action:
        """Decide what a character means in the current state."""
        if state.is_simple:
            if char == "," and state is ParseState.ADDRESS:
                return _Action.SPLIT if token else _Action.IGNORE
            if char == " ":
                return _Action.COMMIT if token else _Action.IGNORE
            return _Action.APPEND

        if state is ParseState.TIMESTAMP:
            if char == "[" and not in_brackets:
                return _Action.OPEN_BRACKET
            if char == "]" and in_brackets:
                return _Action.CLOSE_BRACKET
            return _Action.APPEND if in_brackets else _Action.IGNORE

        quote = char == '"' and not escaped
        # Referer / user-agent keep spaces once the field has started.
        space_is_content = state.is_free_text and bool(token)

        if quote or (char == " " and not space_is_content):
            return _Action.COMMIT if token else _Action.IGNORE
        return _Action.APPEND

    def _normalize_timestamp(self, raw: str) -> tuple[str, Optional[FailureKind]]:
        """Normalize a raw timestamp and validate the result as numeric."""
        try:
            value = normalize_timestamp(raw)
        except TimestampFormatError as e:
            if self.skip_validation:
                logger.debug(f"Keeping unparsed timestamp: {e}")
                return UNPARSED_TIMESTAMP, None
            return raw, FailureKind.MALFORMED_TIMESTAMP
        return value, self.validator.check(ParseState.TIMESTAMP, value)
