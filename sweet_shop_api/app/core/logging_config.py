"""
Logging setup for the Sweet Shop API.

Every module logs through ``logging.getLogger(__name__)``, so all
records of this project live under the ``sweet_shop_api`` logger.
``setup_logging`` gives that logger the configured level and, when
``LOG_FILE`` is set, a file handler of its own.  A console handler is
attached to the root logger only if nothing else (uvicorn, pytest)
has configured it yet.
"""

import logging
from pathlib import Path
from typing import Optional

APP_LOGGER = "sweet_shop_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the project logger and return it.

    Parameters
    ----------
    level : str
        Level name for the ``sweet_shop_api`` logger (e.g. ``"DEBUG"``).
        Case insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        File that receives the project's records.  Missing parent
        directories are created.  Calling again with the same path does
        not add a second handler.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root = logging.getLogger()
    if not root.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        already_attached = any(
            isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == log_path
            for handler in app_logger.handlers
        )
        if not already_attached:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            app_logger.addHandler(file_handler)

    return app_logger
