# src/models/errors.py

"""Typed errors raised by the price conversion pipeline.

Every failure surfaces as a subclass of :class:`PriceConversionError` so
callers can branch on the error kind instead of the message text.
"""

from typing import Any


class PriceConversionError(Exception):
    """Base class for all price conversion failures.

    Attributes:
        message (str): Human-readable description
        value (Any, optional): The input that caused the failure
    """

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)


class NotANumber(PriceConversionError):
    """A value expected to be numeric failed to parse."""


class CurrencyNotEnabled(PriceConversionError):
    """A currency code outside the allowlist was used."""


class InvalidAllowlist(PriceConversionError):
    """A custom allowlist was not a sequence of currency codes."""


class FormattingUnavailable(PriceConversionError):
    """The locale formatting facility failed for the given inputs."""


class NoElementsFound(PriceConversionError):
    """No page elements carry the marker class."""


class SliceError(PriceConversionError):
    """A minor-unit string could not be reshaped into a decimal string."""
