# src/config/logging_config.py

"""Per-run logging for price_hook.

Every run writes ``logs/run_<YYYYmmdd_HHMMSS>.log`` at DEBUG level and
echoes warnings and errors to stderr.  Modules log through children of
the ``price_hook`` logger (``price_hook.page``, ``price_hook.cli``, ...).
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)
_CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(console_level: int = logging.WARNING) -> Path:
    """Attach file and console handlers to the ``price_hook`` logger.

    Args:
        console_level: Minimum level echoed to stderr.

    Returns:
        Path of this run's log file.
    """
    Settings.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = Settings.LOGS_DIR / f"run_{stamp}.log"

    app_logger = logging.getLogger("price_hook")
    app_logger.setLevel(logging.DEBUG)

    # Already configured in this process
    if app_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, _DATE_FORMAT))

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT, _DATE_FORMAT))

    app_logger.addHandler(file_handler)
    app_logger.addHandler(console)
    app_logger.debug("Logging to %s", log_file)
    return log_file
