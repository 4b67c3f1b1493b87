"""
Logging bootstrap.

Every module logs through ``logging.getLogger(__name__)``; this module
only attaches handlers to the ``chartdeck`` logger once, using
``LOG_LEVEL`` / ``LOG_FILE`` from settings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from chartdeck.core.config import settings

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"


def configure_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Attach stream (and optional file) handlers to the package logger.

    Calling it again is a no-op while handlers are already attached.
    """
    root = logging.getLogger("chartdeck")
    root.setLevel((level or settings.LOG_LEVEL).upper())
    if root.handlers:
        return root

    formatter = logging.Formatter(_FORMAT)

    stream = logging.StreamHandler()
    stream.setFormatter(formatter)
    root.addHandler(stream)

    path = log_file if log_file is not None else settings.LOG_FILE
    if path:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return root
