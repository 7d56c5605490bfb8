"""Console logging setup for the schemagen CLI."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Diagnostics go to stderr; stdout carries generated code
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Configure logging with a Rich handler.

    Without verbose only warnings and errors are shown.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console or err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )
