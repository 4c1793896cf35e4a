"""Config module exports."""

from specscope.config.loader import find_spec, load_config
from specscope.config.models import (
    DiffConfig,
    LoggingConfig,
    LogOutputConfig,
    ParserConfig,
    ReportConfig,
    SpecScopeConfig,
)

__all__ = [
    "find_spec",
    "load_config",
    "SpecScopeConfig",
    "DiffConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "ParserConfig",
    "ReportConfig",
]
