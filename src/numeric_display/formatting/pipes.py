"""Public entry points: decimal, percent and currency formatting.

The module-level functions take the locale explicitly. The pipe classes
bind a locale once (from ``Settings`` when none is given) and expose the
same arguments through ``transform``.
"""
from __future__ import annotations

from ..backend.base import NumberFormatter
from ..config import get_settings
from ..models.options import NumericInput, Style
from .dispatcher import format_number

DEFAULT_CURRENCY_CODE = "USD"


def format_decimal(
    value: NumericInput | None,
    locale: str,
    digits: str | None = None,
    *,
    formatter: NumberFormatter | None = None,
) -> str | None:
    """Format *value* as a locale decimal, e.g. ``"1,234.5"`` for ``en-US``.

    *digits* follows ``{minIntegerDigits}.{minFractionDigits}-{maxFractionDigits}``
    with defaults ``1``, ``0`` and ``3``.
    """
    return format_number("decimal", locale, value, Style.DECIMAL, digits, formatter=formatter)


def format_percent(
    value: NumericInput | None,
    locale: str,
    digits: str | None = None,
    *,
    formatter: NumberFormatter | None = None,
) -> str | None:
    """Format *value* as a locale percentage (``0.25`` is ``"25%"``)."""
    return format_number("percent", locale, value, Style.PERCENT, digits, formatter=formatter)


def format_currency(
    value: NumericInput | None,
    locale: str,
    currency_code: str = DEFAULT_CURRENCY_CODE,
    currency_as_symbol: bool = False,
    digits: str | None = None,
    *,
    formatter: NumberFormatter | None = None,
) -> str | None:
    """Format *value* as a locale currency amount.

    *currency_code* is an ISO 4217 code. With *currency_as_symbol* the
    locale symbol (``$``) is shown instead of the code (``USD``). Fraction
    digits default to the currency's minor units unless *digits* says
    otherwise.
    """
    return format_number(
        "currency", locale, value, Style.CURRENCY, digits,
        currency_code, currency_as_symbol, formatter=formatter,
    )


class NumberPipe:
    """Base for the locale-bound pipes."""

    def __init__(self, locale: str | None = None, formatter: NumberFormatter | None = None):
        self._locale = locale or get_settings().locale
        self._formatter = formatter

    @property
    def locale(self) -> str:
        return self._locale


class DecimalPipe(NumberPipe):
    """Formats a number as local text; see ``format_decimal``."""

    def transform(self, value: NumericInput | None, digits: str | None = None) -> str | None:
        return format_decimal(value, self._locale, digits, formatter=self._formatter)


class PercentPipe(NumberPipe):
    """Formats a number as a local percentage; see ``format_percent``."""

    def transform(self, value: NumericInput | None, digits: str | None = None) -> str | None:
        return format_percent(value, self._locale, digits, formatter=self._formatter)


class CurrencyPipe(NumberPipe):
    """Formats a number as local currency; see ``format_currency``."""

    def transform(
        self,
        value: NumericInput | None,
        currency_code: str = DEFAULT_CURRENCY_CODE,
        symbol_display: bool = False,
        digits: str | None = None,
    ) -> str | None:
        return format_currency(
            value, self._locale, currency_code, symbol_display, digits, formatter=self._formatter,
        )
