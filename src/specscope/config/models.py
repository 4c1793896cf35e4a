"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (SPECSCOPE__SECTION__KEY)
3. Project YAML (.spec.yaml)
4. Global YAML (~/.config/specscope/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    SPECSCOPE__<SECTION>__<KEY>=<VALUE>

Examples:
    SPECSCOPE__LOGGING__LEVEL=DEBUG
    SPECSCOPE__PARSER__MAX_INCLUDE_DEPTH=128
    SPECSCOPE__DIFF__DEFAULT_REF=main
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from specscope.config.constants import (
    CONTEXT_WIDTH,
    DEFAULT_DIFF_REF,
    MAX_INCLUDE_DEPTH,
    MAX_INCLUDE_DEPTH_LIMIT,
    SOURCE_SUFFIXES,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


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
        SPECSCOPE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. Report output goes to stdout regardless.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ParserConfig(BaseModel):
    """Document parsing configuration.

    Env vars:
        SPECSCOPE__PARSER__MAX_INCLUDE_DEPTH: Nesting cap for include resolution
    """

    max_include_depth: int = Field(
        default=MAX_INCLUDE_DEPTH,
        description="Stop descending into includes nested deeper than this. "
        "Cycles are caught regardless; this bounds very deep acyclic chains.",
    )

    @field_validator("max_include_depth")
    @classmethod
    def validate_max_include_depth(cls, v: int) -> int:
        if not (1 <= v <= MAX_INCLUDE_DEPTH_LIMIT):
            raise ValueError(f"max_include_depth must be 1-{MAX_INCLUDE_DEPTH_LIMIT}, got {v}")
        return v


class DiffConfig(BaseModel):
    """Compiled-output diff configuration.

    Env vars:
        SPECSCOPE__DIFF__DEFAULT_REF: Git ref compared against by default
    """

    default_ref: str = Field(
        default=DEFAULT_DIFF_REF,
        description="Ref used when 'specscope diff' is given none.",
    )
    source_suffixes: list[str] = Field(
        default_factory=lambda: list(SOURCE_SUFFIXES),
        description="Suffixes of files listed as changed sources.",
    )


class ReportConfig(BaseModel):
    """Text report configuration.

    Env vars:
        SPECSCOPE__REPORT__CONTEXT_WIDTH: Usage context width in impact reports
    """

    context_width: int = Field(
        default=CONTEXT_WIDTH,
        description="Characters of source line shown for each attribute usage.",
    )

    @field_validator("context_width")
    @classmethod
    def validate_context_width(cls, v: int) -> int:
        if v < 4:
            raise ValueError(f"context_width must be at least 4, got {v}")
        return v


class SpecScopeConfig(BaseModel):
    """Root configuration for specscope.

    All settings can be configured via:
    1. Environment variables: SPECSCOPE__SECTION__KEY
    2. YAML config files (project .spec.yaml or global)
    3. Direct kwargs to load_config()
    """

    spec: str | None = Field(
        default=None,
        description="Root document path, relative to the project root.",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
    diff: DiffConfig = Field(default_factory=DiffConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
