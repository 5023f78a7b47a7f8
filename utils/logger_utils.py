import logging
import re
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

# Constants
LOG_FORMAT = "%(asctime)s - %(name)s - [%(levelname)s] - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_SIZE_BYTES = 10 * 1024 * 1024  # 10MB
LOG_BACKUP_COUNT = 5

# Third-party loggers kept at WARNING
QUIET_LOGGERS = ("aiohttp", "web3", "urllib3")

BEARER_PATTERN = re.compile(r"(Bearer\s+)\S+", re.IGNORECASE)

# Global formatter instance
FORMATTER = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


class BearerRedactingFilter(logging.Filter):
    """Replaces any bearer credential in a log record with a placeholder."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = BEARER_PATTERN.sub(r"\1<redacted>", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def resolve_log_level(log_level: Union[int, str]) -> int:
    """
    Accepts logging.DEBUG or "debug". Unknown names fall back to INFO.
    """
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _build_handler(handler: logging.Handler) -> logging.Handler:
    handler.setFormatter(FORMATTER)
    handler.addFilter(BearerRedactingFilter())
    return handler


def configure_logging(filename: Optional[str] = None, log_level: Union[int, str] = logging.INFO) -> None:
    """
    Configures the root logger once, at the CLI entry point.

    Console output goes to stderr so command output on stdout stays parseable.
    A rotating file handler is added when filename is given.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(resolve_log_level(log_level))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.addHandler(_build_handler(logging.StreamHandler(sys.stderr)))

    if filename:
        try:
            file_handler = RotatingFileHandler(filename, maxBytes=MAX_LOG_SIZE_BYTES, backupCount=LOG_BACKUP_COUNT)
            root_logger.addHandler(_build_handler(file_handler))
        except OSError as e:
            sys.stderr.write(f"Warning: Could not set up file logging to '{filename}': {e}\n")

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Retrieves a logger instance with the specified name.
    """
    return logging.getLogger(name)
