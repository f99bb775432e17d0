"""Shared dispatcher behind the decimal, percent and currency entry points.

Validates and coerces the input value, merges the style defaults with the
digit info overrides and delegates rendering to a ``NumberFormatter``.
"""
from __future__ import annotations
import re
from decimal import Decimal
from typing import Any

import structlog

from ..backend.babel_formatter import BabelNumberFormatter
from ..backend.base import NumberFormatter
from ..errors import InvalidInputError
from ..models.options import FormatOptions, NumericInput, Style
from .digit_spec import parse_digit_spec

logger = structlog.get_logger(__name__)

# Optionally signed, optional fraction and exponent: "42", "-3", "4.", ".5", "1e-3"
NUMERIC_STRING_PATTERN = re.compile(r'^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$')

# Decimal and percent defaults; currency defers to the currency's minor units
DEFAULT_MIN_INTEGER_DIGITS = 1
DEFAULT_MIN_FRACTION_DIGITS = 0
DEFAULT_MAX_FRACTION_DIGITS = 3

_default_formatter = BabelNumberFormatter()


def is_blank(value: Any) -> bool:
    """``None`` and the empty string pass through formatting untouched."""
    return value is None or value == ""


def coerce_numeric(caller: str, value: NumericInput) -> int | float | Decimal:
    """Return *value* as a number or raise ``InvalidInputError``.

    Numeric strings become floats. ``bool`` is rejected even though it is
    an ``int`` subclass.
    """
    if not isinstance(value, bool):
        if isinstance(value, (int, float, Decimal)):
            return value
        if isinstance(value, str) and NUMERIC_STRING_PATTERN.fullmatch(value):
            return float(value)
    logger.warning("invalid_number_input", caller=caller, value=repr(value))
    raise InvalidInputError(caller, value)


def build_format_options(
    style: Style,
    digits: str | None = None,
    currency_code: str | None = None,
    currency_as_symbol: bool = False,
) -> FormatOptions:
    """Merge the style defaults with the overrides parsed from *digits*."""
    min_int: int | None = None
    min_frac: int | None = None
    max_frac: int | None = None
    if style != Style.CURRENCY:
        min_int = DEFAULT_MIN_INTEGER_DIGITS
        min_frac = DEFAULT_MIN_FRACTION_DIGITS
        max_frac = DEFAULT_MAX_FRACTION_DIGITS

    if digits is not None:
        spec = parse_digit_spec(digits)
        if spec.min_integer_digits is not None:
            min_int = spec.min_integer_digits
        if spec.min_fraction_digits is not None:
            min_frac = spec.min_fraction_digits
        if spec.max_fraction_digits is not None:
            max_frac = spec.max_fraction_digits

    is_currency = style == Style.CURRENCY
    return FormatOptions(
        minimum_integer_digits=min_int,
        minimum_fraction_digits=min_frac,
        maximum_fraction_digits=max_frac,
        currency_code=currency_code if is_currency else None,
        currency_as_symbol=currency_as_symbol if is_currency else None,
    )


def format_number(
    caller: str,
    locale: str,
    value: NumericInput | None,
    style: Style,
    digits: str | None = None,
    currency_code: str | None = None,
    currency_as_symbol: bool = False,
    *,
    formatter: NumberFormatter | None = None,
) -> str | None:
    """Format *value* for display, or return ``None`` for a blank value.

    Raises ``InvalidInputError`` for non-numeric values and
    ``InvalidDigitSpecError`` for malformed *digits*. Errors from the
    formatter propagate unchanged.
    """
    if is_blank(value):
        return None

    number = coerce_numeric(caller, value)
    options = build_format_options(style, digits, currency_code, currency_as_symbol)
    logger.debug(
        "formatting_number",
        caller=caller,
        locale=locale,
        style=str(style),
        **options.model_dump(exclude_none=True),
    )
    return (formatter or _default_formatter).format(number, locale, style, options)
