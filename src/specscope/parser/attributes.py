"""Attribute scanning - ``:name: value`` declarations and ``{name}`` references."""

from __future__ import annotations

import re
from collections.abc import Iterator
from pathlib import Path

from specscope.parser.files import read_lines, split_lines
from specscope.parser.models import AttributeDefinition, AttributeUsage

# :attribute-name: value
ATTRIBUTE_DEFINITION = re.compile(r"^:([A-Za-z0-9_-]+):\s*(.*)$")

# {attribute-name}
ATTRIBUTE_REFERENCE = re.compile(r"\{([A-Za-z0-9_-]+)\}")


def extract_attributes(content: str) -> dict[str, str]:
    """Map attribute names to their most recently declared value."""
    attrs: dict[str, str] = {}
    for line in split_lines(content):
        if match := ATTRIBUTE_DEFINITION.match(line):
            attrs[match.group(1)] = match.group(2).strip()
    return attrs


def extract_attributes_from_file(file_path: str | Path) -> list[AttributeDefinition]:
    """Extract attribute declarations with their file and line.

    Raises:
        ReadError: If the file cannot be read. No partial result is returned.
    """
    path = str(file_path)
    definitions: list[AttributeDefinition] = []
    for line_num, line in enumerate(read_lines(path), start=1):
        if match := ATTRIBUTE_DEFINITION.match(line):
            definitions.append(
                AttributeDefinition(
                    name=match.group(1),
                    value=match.group(2).strip(),
                    file_path=path,
                    line=line_num,
                )
            )
    return definitions


def _heading_title(line: str) -> str:
    return line.lstrip("= ").strip()


def _scan_references(
    content: str, file_path: str, pattern: re.Pattern[str]
) -> Iterator[AttributeUsage]:
    current_section = ""
    for line_num, line in enumerate(split_lines(content), start=1):
        if line.startswith("="):
            current_section = _heading_title(line)

        for match in pattern.finditer(line):
            yield AttributeUsage(
                name=match.group(1),
                file_path=file_path,
                line=line_num,
                context=line.strip(),
                section_title=current_section,
            )


def find_attribute_usages(content: str, file_path: str, name: str) -> list[AttributeUsage]:
    """Find every ``{name}`` reference in content.

    Each usage carries the nearest preceding heading line (any line starting
    with ``=``) as its section title.
    """
    pattern = re.compile(r"\{(" + re.escape(name) + r")\}")
    return list(_scan_references(content, str(file_path), pattern))


def find_all_attribute_usages(content: str, file_path: str) -> list[AttributeUsage]:
    """Find every attribute reference in content, whatever the name."""
    return list(_scan_references(content, str(file_path), ATTRIBUTE_REFERENCE))


def referenced_attribute_names(content: str) -> list[str]:
    """Unique referenced names in order of first appearance."""
    seen: dict[str, None] = {}
    for match in ATTRIBUTE_REFERENCE.finditer(content):
        seen.setdefault(match.group(1), None)
    return list(seen)


def resolve_attributes(content: str, attributes: dict[str, str]) -> str:
    """Substitute known ``{name}`` references; unknown ones are left as-is."""
    return ATTRIBUTE_REFERENCE.sub(
        lambda m: attributes.get(m.group(1), m.group(0)),
        content,
    )
