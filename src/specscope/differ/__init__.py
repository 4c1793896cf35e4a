"""Compiled-output diffing."""

from specscope.differ.ops import (
    DiffResult,
    RenderedDiff,
    SectionChange,
    analyze_section_changes,
    count_changed_lines,
    diff_against_ref,
    diff_rendered,
    extract_section_blocks,
    reduced_diff,
)
from specscope.differ.report import format_diff_result

__all__ = [
    "DiffResult",
    "RenderedDiff",
    "SectionChange",
    "analyze_section_changes",
    "count_changed_lines",
    "diff_against_ref",
    "diff_rendered",
    "extract_section_blocks",
    "format_diff_result",
    "reduced_diff",
]
