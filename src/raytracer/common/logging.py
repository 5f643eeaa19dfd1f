"""
Lightweight logging helper for the project.

Default behavior: modules import logging and obtain a logger via
`logging.getLogger(__name__)`; the library itself never installs handlers.
This helper gives scripts embedding the library a sane default configuration
when the application has not configured logging yet.
"""

from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_default_logging(level: int | str = "INFO") -> None:
    """Apply a minimal logging configuration once.

    - No-op if the root logger already has handlers
    - Unknown level names fall back to INFO
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
        if not isinstance(lvl, int):
            lvl = logging.INFO
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(level=lvl, format=DEFAULT_FORMAT)


__all__ = ["setup_default_logging", "DEFAULT_FORMAT"]
