# main.py

"""Entry point for price_hook: rewrite storefront prices into a local currency."""

import argparse
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("price_hook.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="price_hook",
        description=(
            "Convert prices marked with a CSS class on a storefront page "
            "into the viewer's local currency."
        ),
        epilog=(
            "Configuration keys: "
            f"{Settings.LOCAL_CURRENCY_KEY}, {Settings.STORE_CURRENCY_KEY}, "
            f"{Settings.CONVERSION_RATE_KEY}. "
            f"Enabled currencies: {', '.join(Settings.ENABLED_CURRENCIES)}."
        ),
    )
    parser.add_argument(
        "page",
        nargs="?",
        default=None,
        help="HTML page to convert. Omit when using --text.",
    )
    parser.add_argument(
        "-t",
        "--text",
        default=None,
        help="Convert a single raw price string (e.g. '£19.99' or '1999').",
    )
    parser.add_argument(
        "-c",
        "--cookies",
        default=None,
        help=(
            "Cookie header holding the configuration keys "
            "(default: read them from the environment / .env)."
        ),
    )
    parser.add_argument(
        "-m",
        "--marker-class",
        default=Settings.MARKER_CLASS,
        dest="marker_class",
        help=f"Class of elements to convert (default: {Settings.MARKER_CLASS}).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        dest="output_path",
        help="Output file (default: timestamped file in results/).",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        default=False,
        help="Print the converted page instead of saving it.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Echo INFO messages to stderr.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Route to single-price or whole-page conversion."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = setup_logging(
        logging.INFO if args.verbose else logging.WARNING
    )
    logger.info("price_hook starting — log file: %s", log_file)

    from src.cli.runner import run_convert_page, run_convert_text

    if args.text is not None:
        exit_code = run_convert_text(args.text, args.cookies)
    elif args.page is not None:
        exit_code = run_convert_page(
            page_path=args.page,
            cookie_header=args.cookies,
            marker_class=args.marker_class,
            output_path=args.output_path,
            to_stdout=args.stdout,
        )
    else:
        parser.error("a page path or --text is required")
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
