"""Raw document reads shared by the scanners.

Pure filesystem I/O. OSError is mapped to ReadError so callers can tell a
fatal root failure from a skippable included-file failure.
"""

from __future__ import annotations

from pathlib import Path

from specscope.core.errors import ReadError


def read_file_content(file_path: str | Path) -> str:
    """Read the whole file as text.

    Raises:
        ReadError: If the file cannot be opened or read.
    """
    try:
        return Path(file_path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ReadError.failed(str(file_path), e.strerror or str(e)) from e


def split_lines(content: str) -> list[str]:
    """Split on newlines the way a line scanner does.

    A trailing newline does not produce an empty last line and a carriage
    return before the newline is dropped. Form feeds and other Unicode line
    separators stay inside their line so line numbers match editors.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_lines(file_path: str | Path) -> list[str]:
    """Read a file and split it into lines (see split_lines)."""
    return split_lines(read_file_content(file_path))
