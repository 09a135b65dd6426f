"""
Logging setup for the CLI.

The library only creates loggers; handlers are installed here so parser
warnings (skipped chunks, dropped routings) show up in the terminal.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """
    Route akpconv log records through rich.

    Args:
        verbose: Show DEBUG records instead of WARNING and above
        console: Console to print to (stderr console by default)
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("akpconv")
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
