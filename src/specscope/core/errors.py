"""specscope error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Spec (reading and lookup)
- 4xxx: Render
- 5xxx: Git
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2003

    # Spec (3xxx)
    SPEC_NOT_FOUND = 3001
    SPEC_READ_FAILED = 3002
    SECTION_NOT_FOUND = 3003

    # Render (4xxx)
    RENDER_FAILED = 4001

    # Git (5xxx)
    GIT_NOT_A_REPOSITORY = 5001
    GIT_REF_NOT_FOUND = 5002


@dataclass(frozen=True, slots=True)
class SpecScopeError(Exception):
    """Base error with structured context for reports and JSON output."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'SPEC_READ_FAILED')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(SpecScopeError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Spec file not found at configured path: {path}",
            details={"path": path},
        )


class ReadError(SpecScopeError):
    """A document could not be read.

    Fatal for the root document. Callers doing best-effort traversal of
    included files catch it and skip the file.
    """

    @classmethod
    def failed(cls, path: str, reason: str) -> "ReadError":
        return cls(
            code=ErrorCode.SPEC_READ_FAILED,
            message=f"Failed to read {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class SpecError(SpecScopeError):
    """Spec discovery and lookup errors."""

    @classmethod
    def not_found(cls, checked: list[str]) -> "SpecError":
        return cls(
            code=ErrorCode.SPEC_NOT_FOUND,
            message=(
                f"Spec not found - checked: {', '.join(checked)}. "
                "Create .spec.yaml or use MANIFEST.adoc"
            ),
            details={"checked": checked},
        )

    @classmethod
    def section_not_found(cls, query: str, available: list[str] | None = None) -> "SpecError":
        message = f"Section not found: {query}"
        if available:
            message += "\nAvailable sections:\n" + "\n".join(f"  - {t}" for t in available)
        return cls(
            code=ErrorCode.SECTION_NOT_FOUND,
            message=message,
            details={"query": query, "available": available or []},
        )


class RenderError(SpecScopeError):
    """Rendering a document tree to Markdown failed."""

    @classmethod
    def failed(cls, path: str, reason: str) -> "RenderError":
        return cls(
            code=ErrorCode.RENDER_FAILED,
            message=f"Failed to render {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class GitError(SpecScopeError):
    """Version-control lookups needed by the diff command."""

    @classmethod
    def not_a_repository(cls, path: str) -> "GitError":
        return cls(
            code=ErrorCode.GIT_NOT_A_REPOSITORY,
            message=f"Not a git repository: {path}",
            details={"path": path},
        )

    @classmethod
    def ref_not_found(cls, ref: str) -> "GitError":
        return cls(
            code=ErrorCode.GIT_REF_NOT_FOUND,
            message=f"Reference not found: {ref}",
            details={"ref": ref},
        )

