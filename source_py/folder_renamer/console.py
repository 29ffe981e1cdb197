"""
Console and logging setup for the folder renamer.
"""

import logging
import sys
from typing import Optional, Tuple

from rich.console import Console

LOG_FORMAT = '%(asctime)s.%(msecs)03d %(levelname)s: %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def configure_console_encoding() -> None:
    """Switch stdout/stderr to UTF-8 where the stream allows it.

    Only affects how text is displayed.
    """
    for stream in (sys.stdout, sys.stderr):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is None:
            continue
        try:
            reconfigure(encoding="utf-8", errors="replace")
        except ValueError as e:
            # Raised once the stream has been written to in some environments
            logging.debug(f"Could not reconfigure {stream!r}: {e}")


def create_consoles() -> Tuple[Console, Console]:
    """Return (stdout console, stderr console)."""
    return (
        Console(soft_wrap=True, emoji=False, highlight=False),
        Console(stderr=True, soft_wrap=True, emoji=False, highlight=False),
    )


def setup_logging(log_file: Optional[str] = None) -> None:
    """Configure the root logger.

    Warnings and errors go to stderr; with log_file, a debug-level trail of
    every operation is written there instead.
    """
    if log_file:
        logging.basicConfig(
            filename=log_file,
            encoding="utf-8",
            level=logging.DEBUG,
            format=LOG_FORMAT,
            datefmt=LOG_DATE_FORMAT,
            force=True,
        )
    else:
        logging.basicConfig(
            level=logging.WARNING,
            format=LOG_FORMAT,
            datefmt=LOG_DATE_FORMAT,
        )
