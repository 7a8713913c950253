# src/cli/runner.py

"""Headless CLI runner: convert a saved page or a single price string."""

import logging
import sys
from pathlib import Path

from rich.console import Console

from src.conversion.pipeline import process_price_text
from src.models.conversion_config import ConversionConfig
from src.models.errors import PriceConversionError
from src.page.updater import update_page
from src.storage.file_manager import FileManager

logger = logging.getLogger("price_hook.cli")

# Stderr console for status messages so stdout stays clean for output
_err = Console(stderr=True)


def load_config(cookie_header: str | None) -> ConversionConfig:
    """Read conversion settings from a Cookie header, else the environment."""
    if cookie_header is not None:
        logger.debug("Reading conversion config from cookie header")
        return ConversionConfig.from_cookie_header(cookie_header)
    logger.debug("Reading conversion config from environment")
    return ConversionConfig.from_env()


def _report_failure(exc: PriceConversionError) -> int:
    """Log a conversion failure and return the failing exit code."""
    logger.error(
        "%s: %s", type(exc).__name__, exc.message, exc_info=True
    )
    _err.print(f"[red]{type(exc).__name__}: {exc.message}[/red]")
    return 1


def run_convert_text(price_text: str, cookie_header: str | None) -> int:
    """Convert one raw price string and print it to stdout."""
    try:
        config = load_config(cookie_header)
        converted = process_price_text(price_text, config)
    except PriceConversionError as exc:
        return _report_failure(exc)
    print(converted)
    return 0


def run_convert_page(
    page_path: str,
    cookie_header: str | None,
    marker_class: str,
    output_path: str | None,
    to_stdout: bool,
) -> int:
    """Convert every marked price on a saved page (0=ok, 1=fail, 2=no file)."""
    path = Path(page_path)
    if not path.is_file():
        logger.error("Page not found: %s", path)
        _err.print(f"[red]Page not found: {path}[/red]")
        return 2

    file_manager = FileManager()
    try:
        config = load_config(cookie_header)
        document = file_manager.load_page(path)
        result = update_page(document, config, marker_class)
    except PriceConversionError as exc:
        # The partially converted document is discarded, never saved
        return _report_failure(exc)

    _err.print(
        f"[bold]Converted {result.count} prices[/bold] "
        f"[dim]to {result.currency_code}[/dim]"
    )
    if to_stdout:
        sys.stdout.write(str(document))
        return 0

    if output_path is not None:
        saved = file_manager.save_page_to(document, Path(output_path))
    else:
        saved = file_manager.save_page(
            document, path.stem, result.currency_code
        )
    _err.print(f"[dim]Saved → {saved}[/dim]")
    return 0
