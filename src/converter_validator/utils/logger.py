"""Global logging setup

Every module uses `from converter_validator.utils.logger import get_logger`.
The CLI calls `setup_logging()` once with values from the config file.
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

# Default log directory
LOG_DIR = Path("data/logs")

# Log formats
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"


def get_log_file(log_dir: Path = LOG_DIR) -> Path:
    """Daily log file path inside `log_dir`"""
    return log_dir / f"{datetime.now().strftime('%Y-%m-%d')}.log"


def setup_logging(
    level: str = "DEBUG",
    console_level: str = "WARNING",
    log_dir: Optional[str] = None
) -> Path:
    """Configure the root logger

    Args:
        level: file log level (DEBUG/INFO/WARNING/ERROR)
        console_level: console log level (WARNING by default so the report stays readable)
        log_dir: directory for daily log files (default: data/logs)

    Returns:
        Path of the log file in use
    """
    directory = Path(log_dir) if log_dir else LOG_DIR
    directory.mkdir(parents=True, exist_ok=True)
    log_file = get_log_file(directory)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # handlers filter on their own level

    # Drop existing handlers
    root_logger.handlers.clear()

    # File handler
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, level.upper()))
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    root_logger.addHandler(file_handler)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root_logger.addHandler(console_handler)

    root_logger.debug(f"Logging initialized: file={log_file}, level={level}")
    return log_file


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger instance

    Args:
        name: logger name (usually __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> from converter_validator.utils.logger import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("debug message")
    """
    return logging.getLogger(name or __name__)
