"""Package logger and lightweight logging setup."""

from __future__ import annotations

import logging
import os

from .constants import LOG_LEVEL_ENV

logger = logging.getLogger("compound_names")

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once; ``level`` overrides the environment.

    The level defaults to ``$COMPOUND_NAMES_LOG_LEVEL`` (``WARNING`` when
    unset or unknown). Later calls only adjust the level.
    """
    level_name = (level or os.getenv(LOG_LEVEL_ENV, "WARNING")).upper()
    resolved = getattr(logging, level_name, logging.WARNING)
    if getattr(configure_logging, "_done", False):  # type: ignore[attr-defined]
        logging.getLogger().setLevel(resolved)
        return
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    configure_logging._done = True  # type: ignore[attr-defined]


__all__ = ["logger", "configure_logging", "LOG_FORMAT"]
