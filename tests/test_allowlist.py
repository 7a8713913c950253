# tests/test_allowlist.py

"""Tests for currency_is_enabled."""

import unittest

from src.conversion.allowlist import currency_is_enabled
from src.models.errors import InvalidAllowlist


class TestCurrencyIsEnabled(unittest.TestCase):
    """Allowlist membership checks."""

    def test_default_currencies_enabled(self) -> None:
        """GBP, USD and EUR are enabled by default."""
        for code in ("GBP", "USD", "EUR"):
            with self.subTest(code=code):
                self.assertTrue(currency_is_enabled(code))

    def test_other_codes_disabled(self) -> None:
        """Any other three-letter code is rejected."""
        for code in ("JPY", "AED", "CAD", "gbp", "XXX"):
            with self.subTest(code=code):
                self.assertFalse(currency_is_enabled(code))

    def test_custom_allowlist(self) -> None:
        """A custom list replaces the default."""
        self.assertTrue(currency_is_enabled("JPY", ["JPY"]))
        self.assertFalse(currency_is_enabled("GBP", ("JPY", "AED")))

    def test_empty_allowlist_enables_nothing(self) -> None:
        """An empty list is valid and matches nothing."""
        self.assertFalse(currency_is_enabled("GBP", []))

    def test_string_allowlist_rejected(self) -> None:
        """A bare string is not a sequence of codes."""
        with self.assertRaises(InvalidAllowlist):
            currency_is_enabled("GBP", "GBP,USD")  # type: ignore[arg-type]

    def test_non_sequence_allowlist_rejected(self) -> None:
        """Dicts, sets and numbers are rejected."""
        for bad in ({"GBP": 1}, {"GBP"}, 42):
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidAllowlist) as ctx:
                    currency_is_enabled("GBP", bad)  # type: ignore[arg-type]
                self.assertEqual(ctx.exception.value, bad)

    def test_non_string_members_rejected(self) -> None:
        """Every allowlist member must be a currency code string."""
        with self.assertRaises(InvalidAllowlist):
            currency_is_enabled("GBP", ["GBP", 840])  # type: ignore[list-item]


if __name__ == "__main__":
    unittest.main()
