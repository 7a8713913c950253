# src/conversion/allowlist.py

"""Currency allowlist check."""

from collections.abc import Sequence

from src.config.settings import Settings
from src.models.errors import InvalidAllowlist


def currency_is_enabled(
    currency: str,
    allowed_currencies: Sequence[str] | None = None,
) -> bool:
    """Return True if *currency* is one of the store's enabled currencies.

    *allowed_currencies* defaults to ``Settings.ENABLED_CURRENCIES``.
    Raises ``InvalidAllowlist`` when a custom allowlist is not a list or
    tuple of currency code strings.
    """
    if allowed_currencies is None:
        allowed_currencies = Settings.ENABLED_CURRENCIES
    if not isinstance(allowed_currencies, (list, tuple)) or not all(
        isinstance(code, str) for code in allowed_currencies
    ):
        raise InvalidAllowlist(
            "Given allowed_currencies is not a sequence of currency codes.",
            allowed_currencies,
        )
    return currency in allowed_currencies
