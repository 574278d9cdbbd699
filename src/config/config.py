"""
Configuration management for ShowIf.
Loads settings from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass
from typing import List, Optional
from pathlib import Path
from dotenv import load_dotenv


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_dir: str = "logs"
    file_logging: bool = False
    debug: bool = False


@dataclass
class InspectorConfig:
    """
    Layout settings for the conditional field drawer.

    Heights are in inspector layout units. A field with an ERROR verdict is
    drawn as a warning banner of ``help_box_height`` followed by
    ``vertical_spacing`` and the field itself.
    """
    help_box_height: float = 36.0
    vertical_spacing: float = 2.0
    field_height: float = 18.0


class Config:
    """
    Central configuration manager.

    Loads configuration from environment variables and provides
    typed access to all settings.
    """

    _instance: Optional['Config'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=True)

        self.log = self._load_log_config()
        self.inspector = self._load_inspector_config()

        self._initialized = True

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration from environment."""
        return LogConfig(
            level=os.getenv("SHOWIF_LOG_LEVEL", "INFO"),
            log_dir=os.getenv("SHOWIF_LOG_DIR", "logs"),
            file_logging=_env_bool("SHOWIF_LOG_TO_FILE", False),
            debug=_env_bool("SHOWIF_DEBUG", False),
        )

    def _load_inspector_config(self) -> InspectorConfig:
        """Load drawer layout configuration from environment."""
        defaults = InspectorConfig()
        return InspectorConfig(
            help_box_height=float(os.getenv("SHOWIF_HELP_BOX_HEIGHT", defaults.help_box_height)),
            vertical_spacing=float(os.getenv("SHOWIF_VERTICAL_SPACING", defaults.vertical_spacing)),
            field_height=float(os.getenv("SHOWIF_FIELD_HEIGHT", defaults.field_height)),
        )

    def reload(self, env_file: str = ".env"):
        """Reload configuration from environment."""
        self._initialized = False
        Config._instance = None
        return Config(env_file)

    def validate(self) -> tuple[bool, List[str]]:
        """
        Validate configuration.

        Returns:
            Tuple of (is_valid, list of error messages)
        """
        messages = []
        if self.log.level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            messages.append(f"Unknown log level '{self.log.level}'")
        if self.inspector.help_box_height < 0:
            messages.append("SHOWIF_HELP_BOX_HEIGHT must be >= 0")
        if self.inspector.vertical_spacing < 0:
            messages.append("SHOWIF_VERTICAL_SPACING must be >= 0")
        if self.inspector.field_height < 0:
            messages.append("SHOWIF_FIELD_HEIGHT must be >= 0")
        return len(messages) == 0, messages


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes")


def get_config(env_file: str = ".env") -> Config:
    """Get or create the global config instance."""
    return Config(env_file)
