# src/page/updater.py

"""Rewrite every marked price on a page into the local currency.

Elements are converted one at a time in document order.  The first
failure aborts the update: elements already rewritten keep their new
text and the remaining ones stay in the store currency.  There is no
per-element isolation or retry.
"""

import logging
from collections.abc import Sequence

from bs4 import BeautifulSoup

from src.config.settings import Settings
from src.conversion.pipeline import process_price_text
from src.models.conversion_config import ConversionConfig
from src.models.errors import NoElementsFound, PriceConversionError
from src.models.page_update import PageUpdateResult
from src.page.elements import PriceElement, find_price_elements

logger = logging.getLogger("price_hook.page")


def update_elements(
    elements: Sequence[PriceElement],
    config: ConversionConfig,
    marker_class: str = Settings.MARKER_CLASS,
) -> PageUpdateResult:
    """Convert the price text of each element in place.

    Raises ``NoElementsFound`` (writing nothing) when *elements* is empty.
    """
    if len(elements) < 1:
        raise NoElementsFound(
            f'No class found by the name of "{marker_class}".', marker_class
        )

    result = PageUpdateResult(
        marker_class=marker_class,
        currency_code=config.local_currency_code,
    )
    for index, element in enumerate(elements):
        original = element.get_text()
        try:
            converted = process_price_text(original, config)
        except PriceConversionError:
            logger.warning(
                "Aborting page update at element %d (%r); "
                "%d of %d prices already converted",
                index,
                original,
                result.count,
                len(elements),
            )
            raise
        element.set_text(converted)
        result.converted.append((original, converted))
        logger.debug("Converted %r -> %r", original, converted)

    logger.info(
        "Converted %d prices to %s (marker class '%s')",
        result.count,
        result.currency_code,
        marker_class,
    )
    return result


def update_page(
    document: BeautifulSoup,
    config: ConversionConfig,
    marker_class: str = Settings.MARKER_CLASS,
) -> PageUpdateResult:
    """Find the marked elements on *document* and convert them."""
    elements = find_price_elements(document, marker_class)
    logger.debug(
        "Found %d elements with class '%s'", len(elements), marker_class
    )
    return update_elements(elements, config, marker_class)
