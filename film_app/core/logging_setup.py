"""
Logging setup shared by the FastAPI and Flask entry points.

Modules keep using ``logging.getLogger(__name__)``; this only wires the
root logger once from ``LOG_LEVEL`` / ``LOG_FILE``.
"""

import logging
import os
from typing import Optional

from film_app.core.config import settings

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

_configured = False


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure the root logger (idempotent)."""
    global _configured
    if _configured:
        return

    level_name = (level or settings.LOG_LEVEL).upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(console)

    path = log_file if log_file is not None else settings.LOG_FILE
    if path:
        try:
            directory = os.path.dirname(path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            file_handler = logging.FileHandler(path, encoding="utf-8")
            file_handler.setFormatter(logging.Formatter(_FORMAT))
            root.addHandler(file_handler)
        except OSError as exc:
            root.warning(f"[Logging] Cannot open log file {path}: {exc}")

    _configured = True
