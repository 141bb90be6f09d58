"""Tests for dd_logs_import.config."""

import pytest
from inline_snapshot import snapshot

from dd_logs_import.config import load_datadog_settings, load_harness_settings
from dd_logs_import.errors import ConfigError


class TestHarnessSettings:
    """Tests for load_harness_settings function."""

    def test_defaults(self):
        """Test settings with no environment variables set."""
        settings = load_harness_settings()

        assert settings.model_dump() == snapshot(
            {
                "api_key": "",
                "app_key": "",
                "extra_filter": "",
                "services": "",
                "log_cmd_output": False,
            }
        )

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch):
        """Test that every harness variable is picked up."""
        monkeypatch.setenv("DD_TEST_CLIENT_API_KEY", "api")
        monkeypatch.setenv("DD_TEST_CLIENT_APP_KEY", "app")
        monkeypatch.setenv("DATADOG_TERRAFORMER_FILTER", "logs_index=main")
        monkeypatch.setenv("DATADOG_TERRAFORMER_SERVICES", "logs_index")
        monkeypatch.setenv("LOG_CMD_OUTPUT", "true")

        settings = load_harness_settings()

        assert settings.api_key == "api"
        assert settings.app_key == "app"
        assert settings.extra_filter == "logs_index=main"
        assert settings.services == "logs_index"
        assert settings.log_cmd_output is True

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("1", True),
            ("T", True),
            ("TRUE", True),
            ("0", False),
            ("f", False),
            ("False", False),
            ("", False),
        ],
    )
    def test_log_cmd_output_values(self, monkeypatch: pytest.MonkeyPatch, value: str, expected):
        """Test boolean parsing of LOG_CMD_OUTPUT, with empty meaning unset."""
        monkeypatch.setenv("LOG_CMD_OUTPUT", value)
        assert load_harness_settings().log_cmd_output is expected

    def test_malformed_boolean_raises_config_error(self, monkeypatch: pytest.MonkeyPatch):
        """Test that a malformed boolean is a startup error."""
        monkeypatch.setenv("LOG_CMD_OUTPUT", "sometimes")

        with pytest.raises(ConfigError) as exc_info:
            load_harness_settings()

        assert "log_cmd_output" in str(exc_info.value).lower()

    def test_ignores_unprefixed_field_names(self, monkeypatch: pytest.MonkeyPatch):
        """Test that generic variables named like the fields are not read."""
        monkeypatch.setenv("SERVICES", "bogus")
        monkeypatch.setenv("API_KEY", "leaked")
        monkeypatch.setenv("APP_KEY", "leaked")
        monkeypatch.setenv("EXTRA_FILTER", "logs_index=leaked")

        settings = load_harness_settings()

        assert (settings.services, settings.api_key, settings.app_key) == ("", "", "")
        assert settings.extra_filter == ""

    @pytest.mark.parametrize("value", ["yes", "no", "on", "off", "y", "n", "tRuE"])
    def test_rejects_loose_boolean_spellings(self, monkeypatch: pytest.MonkeyPatch, value: str):
        """Test that only 1/0, t/f and true/false spellings are booleans."""
        monkeypatch.setenv("LOG_CMD_OUTPUT", value)

        with pytest.raises(ConfigError):
            load_harness_settings()


class TestDatadogSettings:
    """Tests for load_datadog_settings function."""

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch):
        """Test the DD_ prefixed variables."""
        monkeypatch.setenv("DD_API_KEY", "api")
        monkeypatch.setenv("DD_APP_KEY", "app")
        monkeypatch.setenv("DD_SITE", "datadoghq.eu")

        settings = load_datadog_settings()

        assert (settings.api_key, settings.app_key, settings.site) == snapshot(
            ("api", "app", "datadoghq.eu")
        )

    def test_default_site(self):
        """Test the US1 site default."""
        assert load_datadog_settings().site == "datadoghq.com"
