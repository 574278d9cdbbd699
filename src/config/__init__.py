"""
Configuration management.
"""

from .config import (
    Config,
    get_config,
    LogConfig,
    InspectorConfig,
)

__all__ = [
    "Config",
    "get_config",
    "LogConfig",
    "InspectorConfig",
]
