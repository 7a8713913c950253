# src/storage/file_manager.py

"""Reads storefront pages from disk and saves converted copies."""

import logging
from datetime import datetime
from pathlib import Path

from bs4 import BeautifulSoup

from src.config.settings import Settings

logger = logging.getLogger("price_hook.storage")


class FileManager:
    """Reads storefront pages from disk and saves converted copies."""

    def __init__(self) -> None:
        self.results_dir: Path = Settings.RESULTS_DIR
        self.results_dir.mkdir(parents=True, exist_ok=True)
        logger.debug("FileManager initialised — results_dir=%s", self.results_dir)

    @staticmethod
    def load_page(path: Path) -> BeautifulSoup:
        """Parse an HTML file into a BeautifulSoup document.

        The raw bytes go to BeautifulSoup so the page's declared charset
        is honoured.
        """
        with open(path, "rb") as f:
            document = BeautifulSoup(f.read(), Settings.HTML_PARSER)
        logger.info("Loaded page %s", path)
        return document

    def save_page(
        self, document: BeautifulSoup, source_name: str, currency_code: str
    ) -> Path:
        """Save a converted page to a timestamped HTML file."""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = (
            f"{source_name.replace(' ', '_')}_{currency_code}_{timestamp}.html"
        )
        return self.save_page_to(document, self.results_dir / filename)

    @staticmethod
    def save_page_to(document: BeautifulSoup, path: Path) -> Path:
        """Write *document* to an explicit path, creating parent dirs."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(str(document))
        logger.info("Saved converted page to %s", path)
        return path
