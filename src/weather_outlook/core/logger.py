"""
Logging setup for the weather outlook application.

Console output carries the request flow; the log file keeps DEBUG detail
such as request URLs and session transitions. Provider keys are masked in
every record before it reaches a handler.
"""

import logging
import os
import re
import time
from pathlib import Path
from typing import Optional

_APPID_PATTERN = re.compile(r"(appid=)[^&\s]+")

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class AppIdRedactingFilter(logging.Filter):
    """Replace 'appid=<key>' query values with '***'."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        if "appid=" in message:
            record.msg = _APPID_PATTERN.sub(r"\1***", message)
            record.args = None
        return True


def setup_logger(
    name: str = "weather_outlook",
    log_file: Optional[str] = None,
    log_level: str = "INFO",
    console_level: str = "INFO"
) -> logging.Logger:
    """
    Configure the application logger.

    Args:
        name: Logger name
        log_file: Log file path. None reads LOG_FILE (default
            'logs/weather_outlook.log'); an empty string disables the file
        log_level: Level of the logger and its file handler
        console_level: Level of the console handler

    Returns:
        Configured logger instance
    """
    if log_file is None:
        log_file = os.getenv("LOG_FILE", "logs/weather_outlook.log")

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Reconfiguring replaces handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.filters.clear()
    logger.addFilter(AppIdRedactingFilter())

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, console_level.upper(), logging.INFO))
    console_handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


class LoggerContext:
    """Log the start, duration and outcome of one operation."""

    def __init__(self, logger: logging.Logger, operation: str):
        """
        Args:
            logger: Logger instance
            operation: Name used in the log lines, e.g. 'weather request'
        """
        self.logger = logger
        self.operation = operation
        self.duration: Optional[float] = None
        self._started: Optional[float] = None

    def __enter__(self):
        self._started = time.monotonic()
        self.logger.info(f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Exceptions always propagate to the caller
        self.duration = time.monotonic() - self._started

        if exc_type is not None:
            self.logger.error(f"{self.operation} failed after {self.duration:.2f}s: {exc_val}")
            return False

        self.logger.info(f"{self.operation} finished in {self.duration:.2f}s")
        return False
