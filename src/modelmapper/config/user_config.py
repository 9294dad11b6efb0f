"""Minimal user-facing configuration.

This module defines only the config fields that users should care about.
Everything else uses opinionated defaults.

User config is stored in .modelmapper/config.yaml
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from modelmapper.config.models import LogLevel, OutputLayout
from modelmapper.core.errors import ConfigError

# Default values - kept in sync with UserConfig defaults
DEFAULT_OUTPUT_DIRECTORY = "generated"
DEFAULT_LAYOUT: OutputLayout = "files"
DEFAULT_LOG_LEVEL: LogLevel = "WARNING"


class UserConfig(BaseModel):
    """User-facing configuration options."""

    modules: list[str] = Field(
        default_factory=list,
        description="Modules holding generation targets. Used when 'mmg generate' gets none.",
    )
    output_directory: str = Field(
        default=DEFAULT_OUTPUT_DIRECTORY,
        description="Where generated sources are written.",
    )
    layout: OutputLayout = Field(
        default=DEFAULT_LAYOUT,
        description="files or bundle.",
    )
    log_level: LogLevel = Field(
        default=DEFAULT_LOG_LEVEL,
        description="Log level. DEBUG is very verbose.",
    )


def write_user_config(path: Path, config: UserConfig | None = None) -> None:
    """Write user config file with helpful comments.

    Non-default values are written as active keys, defaults as comments.
    """
    cfg = config or UserConfig()

    lines = [
        "# ModelMapper Configuration",
        "",
        "# Modules containing @model_generation_target declarations",
    ]
    if cfg.modules:
        lines.append("modules:")
        lines.extend(f"  - {module}" for module in cfg.modules)
    else:
        lines.append("# modules:")
        lines.append("#   - myapp.contracts")
    lines.append("")

    lines.append("# Output directory for generated sources (relative to this project)")
    if cfg.output_directory != DEFAULT_OUTPUT_DIRECTORY:
        lines.append(f"output_directory: {cfg.output_directory}")
    else:
        lines.append(f"# output_directory: {cfg.output_directory}")
    lines.append("")

    lines.append("# Layout: 'files' writes one file per model/mapper,")
    lines.append("# 'bundle' writes one importable module per destination namespace.")
    if cfg.layout != DEFAULT_LAYOUT:
        lines.append(f"layout: {cfg.layout}")
    else:
        lines.append(f"# layout: {cfg.layout}")
    lines.append("")

    lines.append("# Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL")
    if cfg.log_level != DEFAULT_LOG_LEVEL:
        lines.append(f"log_level: {cfg.log_level}")
    else:
        lines.append(f"# log_level: {cfg.log_level}")
    lines.append("")

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines))


def load_user_config(path: Path) -> UserConfig:
    """Load user config from YAML file, defaults when the file is absent."""
    if not path.exists():
        return UserConfig()
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top-level value must be a mapping")
    try:
        return UserConfig(**data)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e
