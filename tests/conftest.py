"""Shared test fixtures."""
import pytest
import structlog
from unittest.mock import MagicMock
from numeric_display.backend.base import NumberFormatter
from numeric_display.backend.babel_formatter import BabelNumberFormatter
from numeric_display.config import Settings


@pytest.fixture
def mock_settings():
    """Create test settings with a non-default locale."""
    return Settings(locale="de-DE", currency_code="EUR", currency_as_symbol=True)


@pytest.fixture
def mock_formatter():
    """Create a mock locale formatter that records the options it receives."""
    formatter = MagicMock(spec=NumberFormatter)
    formatter.format.return_value = "formatted"
    return formatter


@pytest.fixture
def babel_formatter():
    return BabelNumberFormatter()


@pytest.fixture(autouse=True)
def clear_number_format_env(monkeypatch):
    """Keep NUMBER_FORMAT_* variables from the shell out of the tests."""
    for name in ("NUMBER_FORMAT_LOCALE", "NUMBER_FORMAT_CURRENCY_CODE",
                 "NUMBER_FORMAT_CURRENCY_AS_SYMBOL", "NUMBER_FORMAT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test (e.g. the CLI) installed."""
    yield
    structlog.reset_defaults()
