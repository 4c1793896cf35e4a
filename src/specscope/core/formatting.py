"""Formatting utilities for consistent terminal reports."""

from __future__ import annotations

import os


def truncate(text: str, max_len: int = 60, suffix: str = "...") -> str:
    """Truncate text to max_len characters, suffix included.

    Examples:
        "Target: {api-p99-latency}" (max_len=12) -> "Target: {..."
        "short" -> "short"
    """
    if len(text) <= max_len:
        return text
    cut_at = max_len - len(suffix)
    if cut_at <= 0:
        return suffix[:max_len]
    return text[:cut_at] + suffix


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return grammatically correct singular/plural form.

    Args:
        count: The number of items
        singular: Singular form (e.g., "line")
        plural: Plural form (default: singular + "s")

    Returns:
        Formatted string like "1 line" or "3 lines"
    """
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"


def display_path(path: str, base_dir: str | None) -> str:
    """Path relative to base_dir, falling back to the base name.

    Paths on another drive or outside base_dir keep their relative form
    with ``..`` segments; only an empty result falls back to the base name.
    """
    if not base_dir:
        return os.path.basename(path)
    try:
        rel = os.path.relpath(path, base_dir)
    except ValueError:
        return os.path.basename(path)
    return rel or os.path.basename(path)
