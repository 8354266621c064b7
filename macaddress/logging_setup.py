"""
Logging infrastructure for the macaddress library.

The library logger stays silent (NullHandler) until an application opts in
through setup_logging() or configure().
"""

import logging
import sys
import threading
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import (
    LOGGER_NAME,
    LOG_FILE,
    LOG_MAX_BYTES,
    LOG_BACKUP_COUNT,
    RuntimeConfig,
    load_config_file,
    apply_config_file,
)


_logger = logging.getLogger(LOGGER_NAME)
_logger.addHandler(logging.NullHandler())

_setup_lock = threading.Lock()
_configured = False


class ColorFormatter(logging.Formatter):
    """
    Formatter that adds colors for terminal output.
    """

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Format a copy so other handlers see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, "")
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(
    log_to_file: bool = False,
    log_to_console: bool = False,
    log_level: str = "INFO",
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the library logger.

    Args:
        log_to_file: Enable rotating file logging
        log_to_console: Enable colored stderr logging
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Override for the log file path (defaults to LOG_FILE)

    Returns:
        Configured logger instance
    """
    global _configured

    with _setup_lock:
        if _configured:
            return _logger

        level = getattr(logging, log_level.upper(), logging.INFO)
        _logger.setLevel(level)

        if log_to_file:
            path = Path(log_file or LOG_FILE)
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                path,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setLevel(logging.DEBUG)  # Capture everything to file
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            ))
            _logger.addHandler(file_handler)

        if log_to_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level)
            console_handler.setFormatter(
                ColorFormatter("[%(levelname)s] %(name)s: %(message)s")
            )
            _logger.addHandler(console_handler)

        _configured = True
        return _logger


def reset_logging() -> None:
    """Detach all handlers added by setup_logging()."""
    global _configured

    with _setup_lock:
        for handler in list(_logger.handlers):
            if isinstance(handler, logging.NullHandler):
                continue
            _logger.removeHandler(handler)
            handler.close()
        _logger.setLevel(logging.NOTSET)
        _configured = False


def configure(path: Optional[str] = None) -> RuntimeConfig:
    """
    Load the YAML config file and set up logging from it.

    Args:
        path: Path to config file (defaults to CONFIG_FILE)

    Returns:
        The effective runtime configuration
    """
    runtime_config = RuntimeConfig()
    apply_config_file(runtime_config, load_config_file(path))
    setup_logging(
        log_to_file=runtime_config.log_to_file,
        log_to_console=runtime_config.log_to_console,
        log_level=runtime_config.log_level,
    )
    log(format_block("CONFIG", [
        f"to_file: {runtime_config.log_to_file}",
        f"to_console: {runtime_config.log_to_console}",
        f"level: {runtime_config.log_level}",
    ]))
    return runtime_config


def get_logger() -> logging.Logger:
    """Get the library logger."""
    return _logger


def log(msg: str) -> None:
    """Log an info message."""
    _logger.info(msg)


def log_debug(msg: str) -> None:
    """Log a debug message."""
    _logger.debug(msg)


def log_warning(msg: str) -> None:
    """Log a warning message."""
    _logger.warning(msg)


def format_block(title: str, lines: list[str]) -> str:
    """
    Format a titled block for log output.

    Args:
        title: Block title (displayed in brackets)
        lines: Content lines (will be indented)

    Returns:
        Formatted multi-line string
    """
    pad = "  "
    return "\n".join([f"[{title}]", *[pad + ln for ln in lines]])
