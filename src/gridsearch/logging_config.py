# src/gridsearch/logging_config.py
"""
Logging setup for gridsearch entrypoints.

Library modules only do `log = logging.getLogger(__name__)`. The CLI (or any
host application that wants gridsearch's debug output) calls
configure_logging() once, with a level int or a name such as "DEBUG".
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int | str = logging.INFO) -> None:
    """
    Attach a stdout handler to the root logger unless one is already there.

    The gridsearch logger level is always set, so a host that configured
    logging itself still gets the requested verbosity for this package.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    logging.getLogger("gridsearch").setLevel(level)

    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
