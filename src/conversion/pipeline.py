# src/conversion/pipeline.py

"""Run one element's price text through the full conversion pipeline."""

from src.conversion.converter import convert_to_local_currency
from src.conversion.formatter import add_currency_sign
from src.conversion.normalizer import strip_currency_signs
from src.models.conversion_config import ConversionConfig


def process_price_text(price_text: str, config: ConversionConfig) -> str:
    """Rewrite *price_text* from the store currency into the local one.

    Errors from any stage propagate unchanged.
    """
    price = strip_currency_signs(
        price_text.strip(), config.store_currency_code
    )
    converted = convert_to_local_currency(
        price, config.local_conversion_rate
    )
    return add_currency_sign(converted, config.local_currency_code)
