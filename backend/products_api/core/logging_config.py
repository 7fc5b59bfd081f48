import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from products_api.core.config import settings

LOGGER_NAME = "products_api"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None, log_file: str | None = None) -> logging.Logger:
    """
    Configure the package logger with a stdout handler and, optionally,
    a rotating file handler.

    Safe to call more than once: handlers are only attached the first time.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_file = log_file or settings.LOG_FILE
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = RotatingFileHandler(
            log_file, maxBytes=10*1024*1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
