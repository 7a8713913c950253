# src/models/conversion_config.py

"""Conversion configuration read once per run and passed explicitly."""

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass
from http.cookies import SimpleCookie

from src.config.settings import Settings
from src.models.errors import NotANumber


def parse_conversion_rate(raw: str | None) -> float:
    """Parse a conversion rate string into a positive float."""
    if raw is None or not str(raw).strip():
        raise NotANumber("Conversion rate is missing.", raw)
    try:
        rate = float(str(raw).strip())
    except ValueError as exc:
        raise NotANumber(
            f'Conversion rate "{raw}" is not a number.', raw
        ) from exc
    if not math.isfinite(rate) or rate <= 0:
        raise NotANumber(
            f'Conversion rate "{raw}" must be a positive number.', raw
        )
    return rate


@dataclass(frozen=True)
class ConversionConfig:
    """Currency codes and rate used to rewrite a page."""

    local_currency_code: str
    store_currency_code: str
    local_conversion_rate: float

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ConversionConfig":
        """Build a config from any key-value store using the cookie key names.

        Currency codes are not validated here; the conversion functions
        reject them with ``CurrencyNotEnabled`` when they are first used.
        """
        return cls(
            local_currency_code=values.get(Settings.LOCAL_CURRENCY_KEY, ""),
            store_currency_code=values.get(Settings.STORE_CURRENCY_KEY, ""),
            local_conversion_rate=parse_conversion_rate(
                values.get(Settings.CONVERSION_RATE_KEY)
            ),
        )

    @classmethod
    def from_cookie_header(cls, header: str) -> "ConversionConfig":
        """Build a config from a browser ``Cookie`` header string."""
        cookie: SimpleCookie = SimpleCookie()
        cookie.load(header)
        return cls.from_mapping(
            {key: morsel.value for key, morsel in cookie.items()}
        )

    @classmethod
    def from_env(cls) -> "ConversionConfig":
        """Build a config from environment variables (``.env`` included)."""
        return cls.from_mapping(os.environ)
