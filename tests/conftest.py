"""
Pytest configuration for ShowIf tests.
"""

import logging

import pytest

from src.config.config import Config, InspectorConfig
from src.inspector import ConditionalFieldDrawer
from src.utils import debug
from tests.harness.fields import SyntheticFields, enum_field


STATE_NAMES = ["Idle", "Running", "Stopped"]


@pytest.fixture
def empty_fields() -> SyntheticFields:
    """Resolver with no fields at all."""
    return SyntheticFields()


@pytest.fixture
def settings_fields() -> SyntheticFields:
    """Resolver with one field of every kind."""
    return SyntheticFields.with_fields({
        "enabled": True,
        "count": 10,
        "threshold": 0.5,
        "label": "primary",
        "state": enum_field(1, STATE_NAMES),
    })


@pytest.fixture
def layout_config() -> InspectorConfig:
    """Drawer layout with the default banner height and spacing."""
    return InspectorConfig(help_box_height=36.0, vertical_spacing=2.0, field_height=18.0)


@pytest.fixture
def drawer(layout_config) -> ConditionalFieldDrawer:
    return ConditionalFieldDrawer(config=layout_config)


@pytest.fixture
def fresh_config(monkeypatch, tmp_path):
    """Reset the Config singleton and point it at an empty env file."""
    for name in (
        "SHOWIF_LOG_LEVEL",
        "SHOWIF_LOG_DIR",
        "SHOWIF_LOG_TO_FILE",
        "SHOWIF_DEBUG",
        "SHOWIF_HELP_BOX_HEIGHT",
        "SHOWIF_VERTICAL_SPACING",
        "SHOWIF_FIELD_HEIGHT",
    ):
        # Recorded so values loaded from a test .env are undone
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setattr(Config, "_instance", None)
    return tmp_path / ".env"


@pytest.fixture
def debug_enabled():
    """Enable debug tracing for one test."""
    previous = debug.is_debug_enabled()
    debug.enable_debug(True)
    yield
    debug.enable_debug(previous)


@pytest.fixture
def reset_logging():
    """Drop InspectorLogger handlers created during a test."""
    from src.utils import logger as logger_module

    yield
    for name in ("showif", "showif.verdicts"):
        log = logging.getLogger(name)
        log.handlers.clear()
        log.propagate = True
        log.setLevel(logging.NOTSET)
    logger_module.InspectorLogger._instance = None
    logger_module.InspectorLogger._initialized = False
    logger_module._logger = None
