"""Logging setup for schemagen.

Library modules log through logging.getLogger(__name__); the CLI
routes those records to a colored Rich handler on stderr.
"""

from schemagen.logging.console import err_console, setup_logging

__all__ = [
    "err_console",
    "setup_logging",
]
