"""Configuration read from environment variables."""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from dd_logs_import.errors import ConfigError

TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_strict_bool(value: Any) -> Any:
    """Accept only 1/0, t/f and true/false spellings for string booleans."""
    if not isinstance(value, str):
        return value
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean {value!r}")


StrictEnvBool = Annotated[bool, BeforeValidator(parse_strict_bool)]


class DatadogSettings(BaseSettings):
    """Credentials for the discover command."""

    model_config = SettingsConfigDict(
        env_prefix="DD_",
        env_ignore_empty=True,
        extra="ignore",
    )

    api_key: str = Field("", description="Datadog API key")
    app_key: str = Field("", description="Datadog application key")
    site: str = Field("datadoghq.com", description="Datadog site, e.g. datadoghq.eu")


class HarnessSettings(BaseSettings):
    """
    Settings for the end-to-end create/import/plan/destroy harness.

    Fields are read only from their aliased variables; the bare field names
    (``API_KEY``, ``SERVICES``, ...) are never consulted.
    """

    model_config = SettingsConfigDict(
        env_ignore_empty=True,
        extra="ignore",
    )

    api_key: str = Field("", validation_alias="DD_TEST_CLIENT_API_KEY")
    app_key: str = Field("", validation_alias="DD_TEST_CLIENT_APP_KEY")
    extra_filter: str = Field(
        "",
        validation_alias="DATADOG_TERRAFORMER_FILTER",
        description="Extra filter expression appended to every import",
    )
    services: str = Field(
        "",
        validation_alias="DATADOG_TERRAFORMER_SERVICES",
        description="Comma-separated services to test; empty means all",
    )
    log_cmd_output: StrictEnvBool = Field(
        False,
        validation_alias="LOG_CMD_OUTPUT",
        description="Mirror external command output to stdout/stderr",
    )


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


def load_harness_settings() -> HarnessSettings:
    """Read harness settings, raising ConfigError on malformed values."""
    try:
        return HarnessSettings()
    except ValidationError as e:
        raise ConfigError(f"Invalid harness configuration: {_describe(e)}") from e


def load_datadog_settings() -> DatadogSettings:
    """Read Datadog credentials, raising ConfigError on malformed values."""
    try:
        return DatadogSettings()
    except ValidationError as e:
        raise ConfigError(f"Invalid Datadog configuration: {_describe(e)}") from e
