"""Section scanning - heading-delimited spans of a single file."""

from __future__ import annotations

import re
from pathlib import Path

from specscope.parser.files import read_file_content, read_lines, split_lines
from specscope.parser.models import SectionInfo

# = Level 0 (document title)
# == Level 1
# === Level 2, etc.
# Anchored at column 0: indented "=" runs inside literal blocks never match.
SECTION_HEADING = re.compile(r"^(=+)\s+(.+)$")


def extract_sections(content: str, file_path: str) -> list[SectionInfo]:
    """Extract sections from content.

    Each heading closes the previous section on the line before it. The
    last section stays open (end_line is None).
    """
    headings: list[tuple[int, int, str]] = []
    for line_num, line in enumerate(split_lines(content), start=1):
        if match := SECTION_HEADING.match(line):
            headings.append((line_num, len(match.group(1)) - 1, match.group(2).strip()))

    sections: list[SectionInfo] = []
    for i, (start, level, title) in enumerate(headings):
        end = headings[i + 1][0] - 1 if i + 1 < len(headings) else None
        sections.append(
            SectionInfo(
                title=title,
                level=level,
                file_path=str(file_path),
                start_line=start,
                end_line=end,
            )
        )
    return sections


def extract_sections_from_file(file_path: str | Path) -> list[SectionInfo]:
    """Extract sections from a file.

    Raises:
        ReadError: If the file cannot be read.
    """
    path = str(file_path)
    return extract_sections(read_file_content(path), path)


def get_section_content(section: SectionInfo) -> str:
    """Raw text of a section, heading line included.

    Reads the inclusive range [start_line, end_line], or up to the end of
    the file when the section is open. Lines are joined with newlines.

    Raises:
        ReadError: If the owning file cannot be read.
    """
    lines = read_lines(section.file_path)
    start = section.start_line - 1
    end = len(lines) if section.end_line is None else section.end_line
    return "\n".join(lines[start:end])
