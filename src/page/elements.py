# src/page/elements.py

"""Element handles over a parsed HTML page."""

from typing import Protocol

from bs4 import BeautifulSoup, Tag

from src.config.settings import Settings


class PriceElement(Protocol):
    """Anything whose text can be read and overwritten."""

    def get_text(self) -> str:
        """Return the element's trimmed text content."""
        ...

    def set_text(self, text: str) -> None:
        """Replace the element's text content."""
        ...


class SoupPriceElement:
    """PriceElement backed by a BeautifulSoup tag."""

    def __init__(self, tag: Tag) -> None:
        self.tag = tag

    def get_text(self) -> str:
        return self.tag.get_text().strip()

    def set_text(self, text: str) -> None:
        # Drops child markup, like jQuery's .text(value)
        self.tag.string = text

    def __repr__(self) -> str:
        return f"SoupPriceElement({self.tag.name!r}, {self.get_text()!r})"


def find_price_elements(
    document: BeautifulSoup,
    marker_class: str = Settings.MARKER_CLASS,
) -> list[SoupPriceElement]:
    """Return every element carrying *marker_class*, in document order."""
    return [
        SoupPriceElement(tag)
        for tag in document.select(f".{marker_class}")
    ]
