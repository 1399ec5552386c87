"""
Unit tests for ConfigManager and the configuration models.
"""

import logging

import pytest
import yaml
from pydantic import ValidationError

from toggl_client.api.authentication import API_SECRET, USER_AGENT
from toggl_client.core.config_manager import AppConfig, ConfigManager, LoggingConfig
from toggl_client.core.error_handler import ConfigurationError
from tests.fixtures.sample_data import TEST_TOKEN


class TestConfigModels:
    """Test suite for the configuration models"""

    @pytest.mark.unit
    def test_defaults(self):
        config = AppConfig()

        assert config.api.token is None
        assert config.api.secret.get_secret_value() == API_SECRET
        assert config.api.user_agent == USER_AGENT
        assert config.api.timeout is None
        assert config.endpoints == {}
        assert config.logging.level == "INFO"

    @pytest.mark.unit
    def test_secrets_hidden_in_repr(self):
        config = AppConfig(api={"token": TEST_TOKEN})
        assert TEST_TOKEN not in repr(config)
        assert config.api.token.get_secret_value() == TEST_TOKEN

    @pytest.mark.unit
    def test_log_level_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    @pytest.mark.unit
    def test_invalid_values_rejected(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")
        with pytest.raises(ValidationError):
            AppConfig(api={"timeout": 0})


class TestConfigManager:
    """Test suite for ConfigManager"""

    @pytest.mark.unit
    def test_loads_default_file(self, temp_config_dir, clean_env):
        config = ConfigManager(config_path=temp_config_dir).load_config()

        assert config.api.token.get_secret_value() == TEST_TOKEN
        assert config.api.timeout == 15
        assert config.logging.level == "DEBUG"
        assert config.logging.log_to_console is False
        assert config.endpoints["workspaces"] == "http://localhost:8080/api/v8/workspaces"
        assert config.environment == "development"

    @pytest.mark.unit
    def test_missing_directory_gives_defaults(self, tmp_path, clean_env):
        config = ConfigManager(config_path=tmp_path / "nowhere").load_config()
        assert config == AppConfig()

    @pytest.mark.unit
    def test_environment_and_local_files_override(self, temp_config_dir, clean_env):
        with open(temp_config_dir / "staging.yaml", "w") as f:
            yaml.dump({"api": {"timeout": 60}, "logging": {"level": "WARNING"}}, f)
        with open(temp_config_dir / "local.yaml", "w") as f:
            yaml.dump({"logging": {"level": "ERROR"}}, f)

        config = ConfigManager(config_path=temp_config_dir, environment="staging").load_config()

        assert config.environment == "staging"
        assert config.api.timeout == 60
        assert config.api.token.get_secret_value() == TEST_TOKEN
        assert config.logging.level == "ERROR"

    @pytest.mark.unit
    def test_environment_selected_from_variable(self, temp_config_dir, clean_env):
        with open(temp_config_dir / "production.yaml", "w") as f:
            yaml.dump({"api": {"verify_ssl": True, "timeout": 5}}, f)
        clean_env.setenv("TOGGL_ENV", "production")

        manager = ConfigManager(config_path=temp_config_dir)

        assert manager.environment == "production"
        assert manager.load_config().api.timeout == 5

    @pytest.mark.unit
    def test_env_variables_override_files(self, temp_config_dir, clean_env):
        clean_env.setenv("TOGGL_API_TOKEN", "from-env")
        clean_env.setenv("TOGGL_API_TIMEOUT", "2.5")
        clean_env.setenv("TOGGL_API_VERIFY_SSL", "false")
        clean_env.setenv("TOGGL_ENDPOINTS_REPORT_WEEKLY", "http://localhost/weekly")

        config = ConfigManager(config_path=temp_config_dir).load_config()

        assert config.api.token.get_secret_value() == "from-env"
        assert config.api.timeout == 2.5
        assert config.api.verify_ssl is False
        assert config.endpoints["report_weekly"] == "http://localhost/weekly"
        assert config.endpoints["workspaces"] == "http://localhost:8080/api/v8/workspaces"

    @pytest.mark.unit
    def test_numeric_looking_token_stays_string(self, tmp_path, clean_env):
        clean_env.setenv("TOGGL_API_TOKEN", "12345678")
        config = ConfigManager(config_path=tmp_path).load_config()
        assert config.api.token.get_secret_value() == "12345678"

    @pytest.mark.unit
    def test_config_is_cached_until_reload(self, temp_config_dir, clean_env):
        manager = ConfigManager(config_path=temp_config_dir)
        first = manager.load_config()
        assert manager.config is first

        with open(temp_config_dir / "local.yaml", "w") as f:
            yaml.dump({"api": {"timeout": 99}}, f)

        assert manager.load_config().api.timeout == 15
        assert manager.reload_config().api.timeout == 99

    @pytest.mark.unit
    def test_invalid_yaml(self, temp_config_dir, clean_env):
        (temp_config_dir / "local.yaml").write_text("api: [unclosed\n")

        with pytest.raises(ConfigurationError):
            ConfigManager(config_path=temp_config_dir).load_config()

    @pytest.mark.unit
    def test_non_mapping_yaml(self, temp_config_dir, clean_env):
        (temp_config_dir / "local.yaml").write_text("- just\n- a list\n")

        with pytest.raises(ConfigurationError):
            ConfigManager(config_path=temp_config_dir).load_config()

    @pytest.mark.unit
    def test_validation_failure(self, temp_config_dir, clean_env):
        clean_env.setenv("TOGGL_LOGGING_LEVEL", "CHATTY")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager(config_path=temp_config_dir).load_config()

        assert isinstance(exc_info.value.__cause__, ValidationError)

    @pytest.mark.unit
    def test_failures_are_raised_not_logged(self, temp_config_dir, clean_env, caplog):
        (temp_config_dir / "local.yaml").write_text("api: [unclosed\n")

        with caplog.at_level(logging.DEBUG, logger="toggl_client"):
            with pytest.raises(ConfigurationError):
                ConfigManager(config_path=temp_config_dir).load_config()

        assert [r for r in caplog.records if r.levelno >= logging.WARNING] == []
