"""
Logging setup for the command line front end.

Library modules only create module loggers (logging.getLogger(__name__));
handlers are attached here, once, by the CLI.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(log_level: int = logging.WARNING) -> logging.Logger:
    """
    Attach a rich console handler (stderr) to the 'coursecatalog' logger.

    Calling it again only updates the level.
    """
    logger = logging.getLogger("coursecatalog")
    logger.setLevel(log_level)

    # Prevent adding handlers multiple times
    if logger.handlers:
        return logger

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
