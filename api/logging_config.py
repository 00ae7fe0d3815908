"""
Logging setup for the intake API.

``setup_logging`` configures the root logger once with a console handler
and, optionally, a file handler.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Does nothing if the root logger already has handlers (repeated
    ``create_app`` calls, pytest's capture handler).

    Args:
        level: Log level name, case insensitive. Unknown names fall back to INFO.
        logfile: Optional path for an additional UTF-8 file handler.
    """

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
