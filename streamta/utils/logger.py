"""
Logging system for streamta.
Provides human-readable console logs and optional file output.

Nothing on the per-sample path logs; only construction, parameter
rejection and build selection do.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

# ANSI color codes for terminal output
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    BOLD = "\033[1m"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        # Format a copy so other handlers see the plain record
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{Colors.RESET}"
        return super().format(colored)


class StreamLogger:
    """
    Central logging system for streamta.

    Features:
    - Console output with colors
    - Optional dated file output when a log directory is configured
    """

    _instance: Optional['StreamLogger'] = None
    _initialized: bool = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_dir: Optional[str] = None, log_level: str = "INFO"):
        if StreamLogger._initialized:
            return

        self.log_dir = Path(log_dir) if log_dir else None
        self.main_logger = self._create_logger("streamta", log_level)

        StreamLogger._initialized = True

    def _create_logger(self, name: str, level: str) -> logging.Logger:
        """Create a configured logger instance."""
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        logger.handlers.clear()

        # Console handler with colors
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(ColoredFormatter(
            "%(asctime)s | %(levelname)s | %(message)s",
            datefmt="%H:%M:%S"
        ))
        logger.addHandler(console_handler)

        # File handler (plain text, no colors)
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            log_file = self.log_dir / f"streamta_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            logger.addHandler(file_handler)

        return logger

    def info(self, msg: str, *args, **kwargs):
        """Log info message."""
        self.main_logger.info(msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs):
        """Log debug message."""
        self.main_logger.debug(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        """Log warning message."""
        self.main_logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        """Log error message."""
        self.main_logger.error(msg, *args, **kwargs)

    def is_debug(self) -> bool:
        """True when DEBUG records would be emitted."""
        return self.main_logger.isEnabledFor(logging.DEBUG)

    def rejected(self, method: str, parameter: str, value, reason: str):
        """
        Log a rejected construction parameter with structured format.

        Args:
            method: Indicator name (e.g., "sma")
            parameter: Parameter name (e.g., "period")
            value: Rejected value
            reason: Violated constraint
        """
        parts = [
            "[REJECTED]",
            f"method={method}",
            f"{parameter}={value!r}",
            reason,
        ]
        self.main_logger.warning(" | ".join(parts))


# Global logger instance
_logger: Optional[StreamLogger] = None


def get_logger(log_dir: Optional[str] = None, log_level: Optional[str] = None) -> StreamLogger:
    """Get or create the global logger instance (defaults come from LogConfig)."""
    global _logger
    if _logger is None:
        if log_dir is None or log_level is None:
            from ..config import get_config
            log_config = get_config().log
            log_dir = log_dir if log_dir is not None else log_config.log_dir
            log_level = log_level if log_level is not None else log_config.level
        _logger = StreamLogger(log_dir, log_level)
    return _logger


def setup_logger(log_dir: Optional[str] = None, log_level: str = "INFO") -> StreamLogger:
    """Initialize the logger with custom settings."""
    global _logger
    StreamLogger._initialized = False
    StreamLogger._instance = None
    _logger = StreamLogger(log_dir, log_level)
    return _logger
