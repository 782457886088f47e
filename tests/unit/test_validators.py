"""
Unit tests for field validators.

Tests the pure predicates and the state-bound FieldValidator,
including permissive mode.
"""

import pytest

from clf2tab.parsing import (
    FailureKind,
    FieldValidator,
    ParseState,
    is_address,
    is_client_identity,
    is_numeric,
    is_path,
    is_user,
)


class TestIsAddress:
    """Tests for is_address."""

    def test_dash_is_accepted(self):
        """A lone dash means no address and is valid."""
        assert is_address("-") is True

    @pytest.mark.parametrize("token", ["127.0.0.1", "10.0.0.255", "255.255.255.255"])
    def test_dotted_quads(self, token):
        assert is_address(token) is True

    def test_shape_only_not_ranges(self):
        """Octet ranges are not checked."""
        assert is_address("999.999.999.999") is True

    @pytest.mark.parametrize("token", ["1.2.3", "1.2.3.4.5", "1234", ".."])
    def test_wrong_dot_count(self, token):
        assert is_address(token) is False

    def test_too_long(self):
        """More than 15 characters is rejected even with three dots."""
        assert is_address("1234.1234.1234.1") is False
        assert len("1234.1234.1234.1") == 16

    @pytest.mark.parametrize("token", ["a.b.c.d", "1.2.3.4a", "::1", "-1.2.3.4", ""])
    def test_invalid_characters(self, token):
        assert is_address(token) is False


class TestIsNumeric:
    """Tests for is_numeric."""

    @pytest.mark.parametrize("token", ["200", "0", "-", "1333553849", "-5"])
    def test_digits_and_dash(self, token):
        assert is_numeric(token) is True

    @pytest.mark.parametrize("token", ["abc", "20O", "1.5", "", " 200"])
    def test_rejects_other_characters(self, token):
        assert is_numeric(token) is False


class TestIsUser:
    """Tests for is_user."""

    @pytest.mark.parametrize(
        "token", ["-", "frank", "_svc", "john.doe@example.com", "a-b_c1"]
    )
    def test_valid_users(self, token):
        assert is_user(token) is True

    @pytest.mark.parametrize("token", ["9bob", "-bob", "@bob", "bo b", "bob!", ""])
    def test_invalid_users(self, token):
        assert is_user(token) is False


class TestSimplePredicates:
    """Tests for client identity and path predicates."""

    def test_client_identity_only_dash(self):
        assert is_client_identity("-") is True
        assert is_client_identity("bob") is False

    def test_path_requires_leading_slash(self):
        assert is_path("/") is True
        assert is_path("/index.html?x=1") is True
        assert is_path("index.html") is False
        assert is_path("http://example.com/") is False


class TestFieldValidator:
    """Tests for state-bound validation."""

    @pytest.mark.parametrize(
        "state,token,expected",
        [
            (ParseState.ADDRESS, "1.2.3", FailureKind.INVALID_ADDRESS),
            (
                ParseState.CLIENT_IDENTITY,
                "ident",
                FailureKind.UNSUPPORTED_CLIENT_IDENTITY,
            ),
            (ParseState.USER_ID, "9x", FailureKind.INVALID_USER),
            (ParseState.TIMESTAMP, "abc", FailureKind.TIMESTAMP_NOT_NUMERIC),
            (ParseState.PATH, "x", FailureKind.PATH_MISSING_SLASH),
            (ParseState.STATUS_CODE, "OK", FailureKind.STATUS_CODE_NOT_NUMERIC),
            (ParseState.CONTENT_LENGTH, "big", FailureKind.CONTENT_LENGTH_NOT_NUMERIC),
        ],
    )
    def test_strict_failures(self, state, token, expected):
        assert FieldValidator().check(state, token) is expected

    @pytest.mark.parametrize(
        "state",
        [
            ParseState.METHOD,
            ParseState.PROTOCOL,
            ParseState.REFERER,
            ParseState.USER_AGENT,
        ],
    )
    def test_unconstrained_fields(self, state):
        """Method, protocol, referer and user-agent accept anything."""
        assert FieldValidator().check(state, "any thing\"at all") is None

    def test_skip_validation_accepts_everything(self):
        validator = FieldValidator(skip_validation=True)
        for state in ParseState:
            assert validator.check(state, "not valid anywhere") is None

    def test_reason_text(self):
        """Reasons are the fixed human-readable messages."""
        assert FailureKind.UNSUPPORTED_CLIENT_IDENTITY.reason == (
            "Client identity unsupported."
        )
        assert FailureKind.PATH_MISSING_SLASH.reason == (
            "PATH does not begin with forward slash."
        )
