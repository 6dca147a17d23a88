"""Root settings model for Topiary configuration."""

from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from topiary.config.models.engine import EngineConfig
from topiary.config.models.observability import ObservabilityConfig

# Merged TOML layers, set by get_settings before Settings is built
_toml_config: dict[str, Any] = {}


def set_toml_config(config: dict[str, Any]) -> None:
    """Set the merged TOML configuration used below environment variables."""
    global _toml_config
    _toml_config = config


class Settings(BaseSettings):
    """Root configuration object.

    Priority, highest first: constructor arguments, TOPIARY_* environment
    variables (``__`` separates nested sections), the merged TOML files,
    then the defaults below.
    """

    model_config = SettingsConfigDict(
        env_prefix="TOPIARY_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="topiary", description="Stamped on every log event")

    engine: EngineConfig = Field(
        default_factory=EngineConfig,
        description="Turn engine configuration",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            InitSettingsSource(settings_cls, init_kwargs=dict(_toml_config)),
        )
