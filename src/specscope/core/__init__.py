"""Core module exports."""

from specscope.core.errors import (
    ConfigError,
    ErrorCode,
    GitError,
    ReadError,
    RenderError,
    SpecError,
    SpecScopeError,
)
from specscope.core.logging import (
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Errors
    "SpecScopeError",
    "ConfigError",
    "ErrorCode",
    "GitError",
    "ReadError",
    "RenderError",
    "SpecError",
    # Logging
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
]
