"""Regression tests for runtime settings loading and validation."""

import pytest

from storable.config import AppSettings, SettingsLoadError, config_load_settings


@pytest.fixture(autouse=True)
def _isolate_settings_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run each test without ambient settings variables or a local dotenv file."""

    monkeypatch.chdir(tmp_path)
    for variable_name in (
        "ENVIRONMENT_NAME",
        "APPLICATION_PORT",
        "LOG_LEVEL",
        "LOG_JSON_OUTPUT",
        "API_MAX_PAYLOAD_BYTES",
        "STORABLE_TYPE_MODULES",
    ):
        monkeypatch.delenv(variable_name, raising=False)


def test_config_settings_defaults() -> None:
    """Load deterministic defaults when no variables are set.

    Returns:
        None: Assertions validate default values.

    Raises:
        AssertionError: Raised when defaults differ.
    """

    settings = config_load_settings()

    assert settings.environment_name == "development"
    assert settings.application_port == 8000
    assert settings.log_level == "INFO"
    assert settings.log_json_output is False
    assert settings.api_max_payload_bytes == 1_048_576
    assert settings.storable_type_modules == []


def test_config_settings_reads_environment_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read uppercase environment variables including JSON list values.

    Args:
        monkeypatch: Pytest environment patch helper.

    Returns:
        None: Assertions validate environment mapping.

    Raises:
        AssertionError: Raised when variables are not applied.
    """

    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_JSON_OUTPUT", "true")
    monkeypatch.setenv("STORABLE_TYPE_MODULES", '["storable_sample_types"]')

    settings = config_load_settings()

    assert settings.log_level == "DEBUG"
    assert settings.log_json_output is True
    assert settings.storable_type_modules == ["storable_sample_types"]


@pytest.mark.parametrize(
    ("variable_name", "variable_value"),
    [
        ("LOG_LEVEL", "verbose"),
        ("APPLICATION_PORT", "70000"),
        ("API_MAX_PAYLOAD_BYTES", "0"),
    ],
)
def test_config_settings_invalid_values_raise_settings_load_error(
    monkeypatch: pytest.MonkeyPatch,
    variable_name: str,
    variable_value: str,
) -> None:
    """Wrap validation failures in SettingsLoadError.

    Args:
        monkeypatch: Pytest environment patch helper.
        variable_name: Environment variable to override.
        variable_value: Invalid value.

    Returns:
        None: Assertions validate error wrapping.

    Raises:
        AssertionError: Raised when invalid settings load successfully.
    """

    monkeypatch.setenv(variable_name, variable_value)

    with pytest.raises(SettingsLoadError, match="Startup configuration validation failed"):
        config_load_settings()


def test_config_settings_rejects_blank_type_module_entries() -> None:
    with pytest.raises(ValueError, match="must not be blank"):
        AppSettings(storable_type_modules=["  "])
