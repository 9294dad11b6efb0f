"""Configuration loading with pydantic-settings.

Supports loading configuration from multiple sources with precedence:
1. Direct kwargs (highest priority)
2. Environment variables (MODELMAPPER__SECTION__KEY)
3. User config (.modelmapper/config.yaml) - minimal user-facing options
4. Global config (~/.config/modelmapper/config.yaml) - full structure
5. Built-in defaults (lowest priority)
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from modelmapper.config.models import (
    GenerationConfig,
    LoggingConfig,
    ModelMapperConfig,
    OutputConfig,
)
from modelmapper.config.user_config import load_user_config
from modelmapper.core.errors import ConfigError

GLOBAL_CONFIG_PATH = Path("~/.config/modelmapper/config.yaml").expanduser()
PROJECT_CONFIG_DIR = ".modelmapper"


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open() as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class _YamlSource(PydanticBaseSettingsSource):
    """Settings source that reads from pre-loaded YAML config."""

    def __init__(self, settings_cls: type[BaseSettings], yaml_config: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._yaml_config = yaml_config

    def get_field_value(
        self,
        field: Any,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        val = self._yaml_config.get(field_name)
        return val, field_name, val is not None

    def __call__(self) -> dict[str, Any]:
        return self._yaml_config


def _make_settings_class(yaml_config: dict[str, Any]) -> type[BaseSettings]:
    """Create a Settings class with instance-based YAML source (thread-safe)."""

    class ModelMapperSettings(BaseSettings):
        """Root config. Env vars: MODELMAPPER__LOGGING__LEVEL, MODELMAPPER__OUTPUT__LAYOUT, etc."""

        model_config = SettingsConfigDict(
            env_prefix="MODELMAPPER__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        logging: LoggingConfig = LoggingConfig()
        generation: GenerationConfig = GenerationConfig()
        output: OutputConfig = OutputConfig()

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            # Precedence (first wins): init kwargs > env vars > yaml files
            return (init_settings, env_settings, _YamlSource(settings_cls, yaml_config))

    return ModelMapperSettings


ModelMapperSettings = _make_settings_class({})


def load_config(project_root: Path | None = None, **kwargs: Any) -> ModelMapperConfig:
    """Load config: defaults < global config < user config < env vars < kwargs.

    Args:
        project_root: Directory holding .modelmapper/. Defaults to cwd.
        **kwargs: Override values (highest precedence).

    Returns:
        Fully resolved configuration object.

    Raises:
        ConfigError: On invalid YAML syntax or validation errors.
    """
    project_root = project_root or Path.cwd()
    user_config = load_user_config(project_root / PROJECT_CONFIG_DIR / "config.yaml")

    yaml_config: dict[str, Any] = {
        "generation": {"modules": user_config.modules},
        "output": {
            "directory": user_config.output_directory,
            "layout": user_config.layout,
        },
        "logging": {"level": user_config.log_level},
    }

    global_config = _load_yaml(GLOBAL_CONFIG_PATH)
    if global_config:
        yaml_config = _deep_merge(global_config, yaml_config)

    settings_cls = _make_settings_class(yaml_config)
    try:
        settings = settings_cls(**kwargs)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e
    return ModelMapperConfig.model_validate(settings.model_dump())


def resolve_output_dir(project_root: Path, config: ModelMapperConfig) -> Path:
    """Output directory for generated sources, anchored at project_root when relative."""
    directory = Path(config.output.directory).expanduser()
    if directory.is_absolute():
        return directory
    return project_root / directory
