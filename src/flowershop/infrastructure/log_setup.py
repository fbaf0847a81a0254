"""Console logging for the CLI, rendered through rich."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

_FORMAT = "[%(name)s]  %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Attach a RichHandler to the ``flowershop`` logger (once)."""
    logger = logging.getLogger("flowershop")
    logger.setLevel(level)

    if not logger.handlers:
        handler = RichHandler(
            show_time=True,
            show_level=True,
            show_path=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
