"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (MODELMAPPER__SECTION__KEY)
3. Project YAML (.modelmapper/config.yaml)
4. Global YAML (~/.config/modelmapper/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    MODELMAPPER__<SECTION>__<KEY>=<VALUE>

Examples:
    MODELMAPPER__LOGGING__LEVEL=DEBUG
    MODELMAPPER__GENERATION__MAX_WORKERS=4
    MODELMAPPER__OUTPUT__LAYOUT=bundle
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
OutputLayout = Literal["files", "bundle"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        MODELMAPPER__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. INFO reports one line per target, DEBUG one per artifact.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class GenerationConfig(BaseModel):
    """Code generation configuration.

    Env vars:
        MODELMAPPER__GENERATION__MODULES: JSON list of modules holding targets
        MODELMAPPER__GENERATION__FILE_EXTENSION: Extension of generated artifact names
        MODELMAPPER__GENERATION__MAX_WORKERS: Targets synthesized in parallel
        MODELMAPPER__GENERATION__HEADER: Prefix generated files with a do-not-edit banner
    """

    modules: list[str] = Field(
        default_factory=list,
        description="Modules holding generation targets, used when none are given on the command line.",
    )
    file_extension: str = Field(
        default="g.py",
        description="Extension appended to generated artifact names.",
    )
    max_workers: int = Field(
        default=1,
        description="Targets synthesized in parallel. Output order does not depend on it.",
    )
    header: bool = Field(
        default=True,
        description="Prefix every written file with an auto-generated banner.",
    )

    @field_validator("file_extension")
    @classmethod
    def validate_file_extension(cls, v: str) -> str:
        v = v.lstrip(".")
        if not v or "/" in v:
            raise ValueError(f"Invalid file extension: {v!r}")
        return v

    @field_validator("max_workers")
    @classmethod
    def validate_max_workers(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_workers must be >= 1, got {v}")
        return v


class OutputConfig(BaseModel):
    """Where and how generated sources are written.

    Env vars:
        MODELMAPPER__OUTPUT__DIRECTORY: Output directory (relative to project root)
        MODELMAPPER__OUTPUT__LAYOUT: "files" (one file per artifact) or "bundle"
    """

    directory: str = Field(
        default="generated",
        description="Output directory, relative to the project root unless absolute.",
    )
    layout: OutputLayout = Field(
        default="files",
        description="files: one file per model/mapper. "
        "bundle: one importable module per destination namespace.",
    )


class ModelMapperConfig(BaseModel):
    """Root configuration for ModelMapper.

    All settings can be configured via:
    1. Environment variables: MODELMAPPER__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
