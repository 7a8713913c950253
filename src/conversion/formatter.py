# src/conversion/formatter.py

"""Render a price with its currency symbol using CLDR locale data."""

import logging
import math

from babel.numbers import format_currency

from src.config.settings import Settings
from src.conversion.allowlist import currency_is_enabled
from src.models.errors import (
    CurrencyNotEnabled,
    FormattingUnavailable,
    NotANumber,
)

logger = logging.getLogger("price_hook.conversion")


def add_currency_sign(
    price: float,
    currency: str,
    locale: str = Settings.FORMAT_LOCALE,
) -> str:
    """Format *price* in *currency*, e.g. ``24.99, 'USD'`` -> ``'$24.99'``.

    Raises:
        NotANumber: *price* is not a finite int or float.
        CurrencyNotEnabled: *currency* is not an enabled store currency.
        FormattingUnavailable: Babel could not format the inputs.
    """
    if (
        isinstance(price, bool)
        or not isinstance(price, (int, float))
        or not math.isfinite(price)
    ):
        raise NotANumber(f'Price parameter "{price}" is not a number.', price)
    if not currency_is_enabled(currency):
        raise CurrencyNotEnabled(
            f"{currency} not an enabled store currency.", currency
        )
    try:
        return format_currency(price, currency, locale=locale)
    except Exception as exc:
        logger.debug(
            "Babel failed to format %r %s for locale %r",
            price,
            currency,
            locale,
            exc_info=True,
        )
        raise FormattingUnavailable(
            f'Could not format price "{price}" as {currency} '
            f"for locale {locale!r}: {exc}",
            price,
        ) from exc
