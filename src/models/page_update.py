# src/models/page_update.py

"""Summary of a completed page update."""

from dataclasses import dataclass, field


@dataclass
class PageUpdateResult:
    """Prices rewritten on one page, in document order."""

    marker_class: str
    currency_code: str
    converted: list[tuple[str, str]] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.converted)
