"""Errors raised while preparing a number for display."""

from __future__ import annotations

from typing import Any


class NumberFormatError(ValueError):
    """Base class for formatting failures raised by this package."""


class InvalidInputError(NumberFormatError):
    """The value handed to an entry point could not be read as a number.

    ``caller`` names the entry point (``decimal``, ``percent`` or
    ``currency``) so the failure can be traced back to the call site.
    """

    def __init__(self, caller: str, value: Any):
        self.caller = caller
        self.value = value
        super().__init__(f"Invalid argument '{value}' for pipe '{caller}'")


class InvalidDigitSpecError(NumberFormatError):
    """The digit info string does not follow ``{minInt}.{minFrac}-{maxFrac}``."""

    def __init__(self, digits: Any):
        self.digits = digits
        super().__init__(f"{digits} is not a valid digit info for number pipes")
