"""Section list report."""

from __future__ import annotations

import os
from dataclasses import dataclass

from specscope.parser.models import SpecStructure


@dataclass(frozen=True, slots=True)
class SectionSummary:
    """Simplified section info for listing."""

    title: str
    level: int
    file_path: str
    line: int


def list_section_summaries(structure: SpecStructure) -> list[SectionSummary]:
    return [
        SectionSummary(
            title=s.title,
            level=s.level,
            file_path=s.file_path,
            line=s.start_line,
        )
        for s in structure.sections
    ]


def format_section_list(sections: list[SectionSummary]) -> str:
    """One line per section, indented two spaces per level.

    Example:
        ``  Performance (perf.adoc:3)``
    """
    lines = [
        f"{'  ' * s.level}{s.title} ({os.path.basename(s.file_path)}:{s.line})"
        for s in sections
    ]
    return "".join(f"{line}\n" for line in lines)


def top_level_titles(structure: SpecStructure, max_level: int = 2) -> list[str]:
    """Titles of sections at or above max_level, for not-found hints."""
    return [s.title for s in structure.sections if s.level <= max_level]
