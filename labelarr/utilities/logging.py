"""Logging setup for Labelarr.

Library code logs through logging.getLogger(__name__) and stays silent by
default. Applications (the API server, scripts) call setup_logging() once.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from labelarr.config import Config

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s:%(lineno)d] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def setup_logging(log_level: str | None = None, log_dir: str | None = None) -> None:
    """Configure the root logger.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL (default Config.LOG_LEVEL)
        log_dir: Directory for rotating log files (default Config.LOG_DIR, None = console only)
    """
    global _configured
    if _configured:
        return

    level = getattr(logging, (log_level or Config.LOG_LEVEL).upper(), logging.INFO)
    log_dir = log_dir or Config.LOG_DIR
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

        file_handler = RotatingFileHandler(
            os.path.join(log_dir, "labelarr.log"),
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

        error_handler = RotatingFileHandler(
            os.path.join(log_dir, "labelarr_errors.log"),
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=3,
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        root_logger.addHandler(error_handler)

    # Request lines are noise at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    _configured = True

