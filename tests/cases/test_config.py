"""
Configuration Tests.

Settings come from the environment, optionally seeded from a .env file.
"""

from src.config.config import Config, InspectorConfig, LogConfig, get_config


class TestDefaults:
    """No environment, no .env file."""

    def test_defaults(self, fresh_config):
        config = get_config(str(fresh_config))
        assert config.log == LogConfig()
        assert config.inspector == InspectorConfig()
        assert config.inspector.help_box_height == 36.0
        assert config.inspector.vertical_spacing == 2.0

    def test_singleton(self, fresh_config):
        assert get_config(str(fresh_config)) is get_config(str(fresh_config))

    def test_defaults_are_valid(self, fresh_config):
        is_valid, messages = get_config(str(fresh_config)).validate()
        assert is_valid
        assert messages == []


class TestEnvironment:
    """Environment variables and .env files."""

    def test_env_file(self, fresh_config):
        fresh_config.write_text(
            "SHOWIF_LOG_LEVEL=DEBUG\n"
            "SHOWIF_LOG_TO_FILE=true\n"
            "SHOWIF_HELP_BOX_HEIGHT=40\n"
            "SHOWIF_FIELD_HEIGHT=20.5\n",
            encoding="utf-8",
        )
        config = get_config(str(fresh_config))
        assert config.log.level == "DEBUG"
        assert config.log.file_logging is True
        assert config.inspector.help_box_height == 40.0
        assert config.inspector.field_height == 20.5
        assert config.inspector.vertical_spacing == 2.0

    def test_environment_variables(self, fresh_config, monkeypatch):
        monkeypatch.setenv("SHOWIF_DEBUG", "1")
        monkeypatch.setenv("SHOWIF_VERTICAL_SPACING", "4")
        config = get_config(str(fresh_config))
        assert config.log.debug is True
        assert config.inspector.vertical_spacing == 4.0

    def test_reload(self, fresh_config, monkeypatch):
        config = get_config(str(fresh_config))
        monkeypatch.setenv("SHOWIF_LOG_DIR", "other_logs")
        reloaded = config.reload(str(fresh_config))
        assert reloaded is not config
        assert reloaded.log.log_dir == "other_logs"
        assert Config._instance is reloaded


class TestValidate:
    """Validation messages."""

    def test_invalid_values(self, fresh_config, monkeypatch):
        monkeypatch.setenv("SHOWIF_LOG_LEVEL", "LOUD")
        monkeypatch.setenv("SHOWIF_HELP_BOX_HEIGHT", "-1")
        is_valid, messages = get_config(str(fresh_config)).validate()
        assert not is_valid
        assert "Unknown log level 'LOUD'" in messages
        assert "SHOWIF_HELP_BOX_HEIGHT must be >= 0" in messages
