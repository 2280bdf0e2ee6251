"""Logger helpers for monadkit.

The library never installs handlers on import. Modules obtain loggers under
the ``monadkit`` namespace; applications that want the library's DEBUG
records call ``configure_logging()`` once at startup.

Example:
    >>> from monadkit.runtime.observability import configure_logging
    >>> configure_logging("DEBUG")
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ...foundation.config import get_settings

ROOT = "monadkit"

# Marker attribute so repeated configure_logging() calls replace our handler only
_HANDLER_FLAG = "_monadkit_handler"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the monadkit namespace ("monadkit.<name>")."""
    return logging.getLogger(name if name.startswith(ROOT) else f"{ROOT}.{name}")


def configure_logging(level: str | int | None = None, *, stream: TextIO | None = None) -> logging.Logger:
    """Attach a single stream handler to the monadkit logger.

    Level and format default to the values from settings. Calling this again
    replaces the previously installed handler instead of stacking a new one.
    """
    settings = get_settings()
    logger = logging.getLogger(ROOT)
    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_FLAG, False)]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(settings.logging.format))
    setattr(handler, _HANDLER_FLAG, True)
    logger.addHandler(handler)
    logger.setLevel(level if level is not None else settings.effective_log_level)
    return logger
