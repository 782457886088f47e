"""
Pytest configuration and shared fixtures for unit tests.
"""

import pytest

from clf2tab.config import clear_settings_cache
from clf2tab.parsing import CLFTokenizer, FieldValidator

# Apache documentation examples
CLF_LINE = (
    '127.0.0.1 - frank [10/Oct/2000:13:55:36 -0700] '
    '"GET /apache_pb.gif HTTP/1.0" 200 2326'
)
COMBINED_LINE = (
    CLF_LINE + ' "http://www.example.com/start.html" '
    '"Mozilla/4.08 [en] (Win98; I ;Nav)"'
)
# 10/Oct/2000:13:55:36 -0700 == 2000-10-10T20:55:36Z
CLF_EPOCH = "971211336"


@pytest.fixture
def clf_line() -> str:
    return CLF_LINE


@pytest.fixture
def combined_line() -> str:
    return COMBINED_LINE


@pytest.fixture
def strict_tokenizer() -> CLFTokenizer:
    return CLFTokenizer(FieldValidator(skip_validation=False))


@pytest.fixture
def permissive_tokenizer() -> CLFTokenizer:
    return CLFTokenizer(FieldValidator(skip_validation=True))


@pytest.fixture
def clean_settings(monkeypatch):
    """
    Fixture that isolates settings from the environment and the cache.

    Removes CLF2TAB_* variables and clears the cached settings before
    and after the test.
    """
    for name in ("CLF2TAB_SKIP_VALIDATION", "CLF2TAB_ENCODING", "CLF2TAB_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()
