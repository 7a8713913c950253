# src/conversion/normalizer.py

"""Turn raw price text scraped from a page into a float.

Storefront templates render prices two ways: liquid-formatted with a
currency sign (``"£19.99"``) or as a bare minor-unit integer
(``"1999"`` meaning 19.99).  :func:`strip_currency_signs` tells the two
apart and dispatches accordingly.
"""

import logging
import math
import re

from src.conversion.allowlist import currency_is_enabled
from src.models.errors import CurrencyNotEnabled, NotANumber, SliceError

logger = logging.getLogger("price_hook.conversion")

# Text that parses as a leading integer (parseInt-style)
_LEADING_INT = re.compile(r"^\s*[+-]?\d")
# Everything before the first digit, decimal point or minus, e.g. "£", "US$"
_LEADING_SIGN = re.compile(r"^[^\d.-]+")
_LEADING_DECIMAL = re.compile(r"^\d*\.?\d+")


def _to_float(text: str, original: str) -> float:
    """Parse a decimal string, raising ``NotANumber`` on failure or NaN."""
    try:
        value = float(text)
    except ValueError as exc:
        raise NotANumber(
            f'Price "{original}" is not a number.', original
        ) from exc
    if math.isnan(value):
        raise NotANumber(f'Price "{original}" is not a number.', original)
    return value


def currency_string_to_float(price_string: str, currency: str) -> float:
    """Convert a minor-unit price string to a float (``'4999'`` -> 49.99).

    Strings shorter than three digits are zero-padded so the last two
    digits always hold the minor units (``'9'`` -> 0.09).
    """
    if not isinstance(currency, str) or not currency_is_enabled(currency):
        raise CurrencyNotEnabled(
            f"{currency} not an enabled store currency.", currency
        )
    if not price_string.isascii() or not price_string.isdigit():
        raise SliceError(
            f'Cannot slice "{price_string}" into a decimal price: '
            "minor-unit strings must contain only digits.",
            price_string,
        )
    padded = price_string.rjust(3, "0")
    decimal_text = f"{padded[:-2]}.{padded[-2:]}"
    logger.debug("Minor-unit price %r read as %s", price_string, decimal_text)
    return _to_float(decimal_text, price_string)


def strip_currency_signs(price_text: str, store_currency: str) -> float:
    """Return the numeric value of *price_text*.

    Text that does not start with an integer is treated as sign-prefixed:
    the leading sign (one or more characters) and grouping commas are
    dropped and the leading decimal number is parsed.  Anything else is a
    minor-unit string in *store_currency*.
    """
    if _LEADING_INT.match(price_text):
        return currency_string_to_float(price_text, store_currency)

    remainder = _LEADING_SIGN.sub("", price_text, count=1).replace(",", "")
    match = _LEADING_DECIMAL.match(remainder)
    if match is None:
        raise NotANumber(f'Price "{price_text}" is not a number.', price_text)
    return _to_float(match.group(0), price_text)
