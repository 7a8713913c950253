# src/config/settings.py

"""Central configuration for the price_hook converter."""

from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the price_hook converter."""

    # --- Page ---
    MARKER_CLASS: str = "price-conversion-hook"  # Elements to convert
    HTML_PARSER: str = "lxml"

    # --- Currencies ---
    # Store and viewer currencies must both be listed here
    ENABLED_CURRENCIES: list[str] = ["GBP", "USD", "EUR"]
    FORMAT_LOCALE: str = "en"

    # --- Configuration keys (cookie names / env vars) ---
    LOCAL_CURRENCY_KEY: str = "localCurrencyCode"
    STORE_CURRENCY_KEY: str = "storeCurrencyCode"
    CONVERSION_RATE_KEY: str = "localConversionRate"

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    RESULTS_DIR: Path = BASE_DIR / "results"
    LOGS_DIR: Path = BASE_DIR / "logs"
