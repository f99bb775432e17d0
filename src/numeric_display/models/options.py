"""Value records exchanged between the dispatcher and the locale formatter.

All of them are frozen and built per call: a ``DigitSpec`` comes out of the
digit info parser, a ``FormatOptions`` goes into the locale formatter.
"""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

# What callers may hand to an entry point. Strings must look numeric.
NumericInput = Union[int, float, Decimal, str]


class Style(StrEnum):
    DECIMAL = "decimal"
    PERCENT = "percent"
    CURRENCY = "currency"


class DigitSpec(BaseModel):
    """Parsed ``{minIntegerDigits}.{minFractionDigits}-{maxFractionDigits}``.

    A field is ``None`` when the digit info string did not mention it, so the
    dispatcher can keep the style default for that bound.
    """

    model_config = ConfigDict(frozen=True)

    min_integer_digits: int | None = Field(default=None, ge=0)
    min_fraction_digits: int | None = Field(default=None, ge=0)
    max_fraction_digits: int | None = Field(default=None, ge=0)


class FormatOptions(BaseModel):
    """Normalized options handed to a ``NumberFormatter``.

    Unset bounds mean "use the locale or currency convention".
    """

    model_config = ConfigDict(frozen=True)

    minimum_integer_digits: int | None = Field(default=None, ge=0)
    minimum_fraction_digits: int | None = Field(default=None, ge=0)
    maximum_fraction_digits: int | None = Field(default=None, ge=0)
    currency_code: str | None = None
    currency_as_symbol: bool | None = None
