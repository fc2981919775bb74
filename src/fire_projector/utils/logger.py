"""
Logging helpers for the projection engine.

Library modules only call ``get_logger(__name__)``; nothing is printed until
an application calls ``setup_logging``.
"""
import logging
import sys
import time
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

ROOT_LOGGER = "fire_projector"


class ColoredFormatter(logging.Formatter):
    """Console formatter that colours the level name."""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'
    BOLD = '\033[1m'

    def format(self, record):
        original_levelname = record.levelname
        if original_levelname in self.COLORS:
            record.levelname = f"{self.COLORS[original_levelname]}{self.BOLD}{original_levelname}{self.RESET}"
        result = super().format(record)
        # restore for any file handler sharing the record
        record.levelname = original_levelname
        return result


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package root so ``setup_logging`` reaches it."""
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def setup_logging(
    console_level: str = 'INFO',
    log_dir: Optional[Path] = None,
    file_level: str = 'DEBUG',
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> logging.Logger:
    """
    Attach handlers to the package root logger.

    Args:
        console_level: level for the coloured stdout handler
        log_dir: when given, also write a rotating plain-text log there
        file_level: level for the file handler
        max_bytes: size per log file before rotation
        backup_count: number of rotated files to keep
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(logging.DEBUG)
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)
    root.propagate = False

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(getattr(logging, console_level.upper()))
    console.setFormatter(ColoredFormatter("%(asctime)s %(levelname)s %(message)s"))
    root.addHandler(console)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"projection_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = RotatingFileHandler(
            log_file, maxBytes=max_bytes, backupCount=backup_count, encoding='utf-8'
        )
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] [%(name)s] %(message)s"))
        root.addHandler(file_handler)

    return root


class timer:
    """
    Context manager logging how long an operation took.

        >>> with timer('projection'):
        ...     project(inp)
    """

    def __init__(self, operation: str, logger: Optional[logging.Logger] = None):
        self.operation = operation
        self.logger = logger or get_logger('timer')
        self.start_time = None
        self.elapsed = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.debug(f"[{self.operation}] Started")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed = time.perf_counter() - self.start_time
        if exc_type is None:
            self.logger.info(f"[{self.operation}] Completed in {self.elapsed:.3f}s")
        else:
            self.logger.error(
                f"[{self.operation}] Failed after {self.elapsed:.3f}s: {exc_type.__name__}: {exc_val}"
            )
        return False
