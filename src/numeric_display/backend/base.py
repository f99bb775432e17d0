"""Locale formatter abstract base class."""
from __future__ import annotations
from abc import ABC, abstractmethod
from decimal import Decimal

from ..models.options import FormatOptions, Style


class NumberFormatter(ABC):
    """Renders an already-validated number as locale-correct text.

    Implementations own grouping, decimal markers and currency symbols.
    They must be free of side effects so one instance can serve any caller.
    """

    @abstractmethod
    def format(
        self,
        value: int | float | Decimal,
        locale: str,
        style: Style,
        options: FormatOptions,
    ) -> str:
        """Format *value* for *locale* in *style* honoring *options*."""
        ...
