"""
Utility modules.
"""

from .logger import get_logger, setup_logger, InspectorLogger
from .debug import debug_log, enable_debug, is_debug_enabled

__all__ = [
    # Logger
    "get_logger",
    "setup_logger",
    "InspectorLogger",
    # Debug tracing
    "debug_log",
    "enable_debug",
    "is_debug_enabled",
]
