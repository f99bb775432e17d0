"""Locale formatter backed by Babel's CLDR number patterns."""
from __future__ import annotations
import math
import re
from copy import copy
from decimal import Decimal

from babel import Locale
from babel.numbers import (
    NumberPattern, get_currency_precision, get_currency_symbol, get_nan_symbol, parse_pattern,
)

from ..models.options import FormatOptions, Style
from .base import NumberFormatter

CURRENCY_SIGN_PATTERN = re.compile("¤+")


class BabelNumberFormatter(NumberFormatter):
    """Formats numbers with the locale's standard CLDR patterns.

    The digit bounds in ``FormatOptions`` replace the precision of the
    locale pattern; bounds left unset keep the pattern's own precision, or
    the ISO 4217 minor units of the currency for the currency style.
    Holds no state, so a single instance can be shared between threads.
    """

    def format(
        self,
        value: int | float | Decimal,
        locale: str,
        style: Style,
        options: FormatOptions,
    ) -> str:
        babel_locale = parse_locale(locale)
        pattern = self._pattern_for(babel_locale, style, options)
        currency = options.currency_code if style == Style.CURRENCY else None
        if _is_nan(value):
            return _format_nan(pattern, babel_locale, currency)
        return pattern.apply(
            value,
            babel_locale,
            currency=currency,
            currency_digits=False,
            decimal_quantization=True,
        )

    def _pattern_for(self, locale: Locale, style: Style, options: FormatOptions) -> NumberPattern:
        if style == Style.PERCENT:
            pattern = copy(locale.percent_formats[None])
        elif style == Style.CURRENCY:
            if not options.currency_code:
                raise ValueError("Currency style requires a currency code")
            pattern = locale.currency_formats["standard"]
            if not options.currency_as_symbol:
                # "¤¤" renders the ISO code instead of the symbol
                pattern = parse_pattern(CURRENCY_SIGN_PATTERN.sub("¤¤", pattern.pattern))
            else:
                pattern = copy(pattern)
        else:
            pattern = copy(locale.decimal_formats[None])

        min_int = _pick(options.minimum_integer_digits, pattern.int_prec[0])
        if style == Style.CURRENCY:
            precision = get_currency_precision(options.currency_code)
            default_frac = (precision, precision)
        else:
            default_frac = pattern.frac_prec
        min_frac = _pick(options.minimum_fraction_digits, default_frac[0])
        max_frac = _pick(options.maximum_fraction_digits, default_frac[1])

        pattern.int_prec = (min_int, max(min_int, pattern.int_prec[1]))
        pattern.frac_prec = (min_frac, max(min_frac, max_frac))
        return pattern


def parse_locale(locale: str) -> Locale:
    """Resolve a BCP-47 (``en-US``) or POSIX (``en_US``) identifier.

    Unknown locales raise ``babel.UnknownLocaleError``.
    """
    return Locale.parse(locale.replace("-", "_"))


def _pick(override: int | None, default: int) -> int:
    return default if override is None else override


def _is_nan(value: int | float | Decimal) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, float) and math.isnan(value)


def _format_nan(pattern: NumberPattern, locale: Locale, currency: str | None) -> str:
    """Render the locale NaN symbol inside the pattern's affixes, without digits."""
    text = f"{pattern.prefix[0]}{get_nan_symbol(locale)}{pattern.suffix[0]}"
    if currency is not None:
        text = text.replace("¤¤", currency.upper()).replace("¤", get_currency_symbol(currency, locale))
    return text
