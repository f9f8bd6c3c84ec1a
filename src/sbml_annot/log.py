"""
Logging setup.

All modules log through ``logging.getLogger(__name__)``; this module attaches
a rich handler to the package logger so output matches the CLI console.
"""

import logging

from rich.logging import RichHandler

from sbml_annot.config import settings

PACKAGE_LOGGER = "sbml_annot"


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Install a RichHandler on the package logger (once).

    Args:
        level: Logging level name; defaults to settings.log_level

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level or settings.log_level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(show_path=False, markup=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
    return logger
