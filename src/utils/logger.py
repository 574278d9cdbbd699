"""
Logging system for ShowIf.
Provides human-readable logs with console and optional file output.
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
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{Colors.RESET}"
        record.msg = f"{color}{record.msg}{Colors.RESET}"
        return super().format(record)


class InspectorLogger:
    """
    Central logging system for ShowIf.

    Features:
    - Console output with colors
    - Optional dated file output
    - Separate logger for rule verdicts
    """

    _instance: Optional['InspectorLogger'] = None
    _initialized: bool = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_dir: str = "logs", log_level: str = "INFO", file_logging: bool = False):
        if InspectorLogger._initialized:
            return

        self.log_dir = Path(log_dir)
        self.file_logging = file_logging
        if file_logging:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = self._create_logger("showif", log_level)
        self.verdict_logger = self._create_logger("showif.verdicts", log_level, "verdicts")

        InspectorLogger._initialized = True

    def _create_logger(self, name: str, level: str, file_prefix: str = None) -> logging.Logger:
        """Create a configured logger instance."""
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper()))
        logger.handlers.clear()
        logger.propagate = False

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(ColoredFormatter(
            "%(asctime)s | %(levelname)s | %(message)s",
            datefmt="%H:%M:%S"
        ))
        logger.addHandler(console_handler)

        if self.file_logging:
            prefix = file_prefix or "showif"
            log_file = self.log_dir / f"{prefix}_{datetime.now().strftime('%Y%m%d')}.log"
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

    def verdict(self, field_path: str, state: str, message: str = "", **kwargs):
        """
        Log a rule verdict with structured format.

        Args:
            field_path: Annotated field path
            state: VISIBLE, HIDDEN or ERROR (ERROR logs at WARNING, others at DEBUG)
            message: Error message (for ERROR)
            **kwargs: Additional fields
        """
        parts = [f"[{state.upper()}]", f"field={field_path}"]
        if message:
            parts.append(message)
        for key, value in kwargs.items():
            parts.append(f"{key}={value}")

        msg = " | ".join(parts)
        if state.upper() == "ERROR":
            self.verdict_logger.warning(msg)
        else:
            self.verdict_logger.debug(msg)


# Global logger instance
_logger: Optional[InspectorLogger] = None


def get_logger(log_dir: str = "logs", log_level: str = "INFO", file_logging: bool = False) -> InspectorLogger:
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = InspectorLogger(log_dir, log_level, file_logging)
    return _logger


def setup_logger(log_dir: str = "logs", log_level: str = "INFO", file_logging: bool = False) -> InspectorLogger:
    """Initialize the logger with custom settings."""
    global _logger
    InspectorLogger._initialized = False
    InspectorLogger._instance = None
    _logger = InspectorLogger(log_dir, log_level, file_logging)
    return _logger
