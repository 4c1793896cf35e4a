"""Attribute impact analysis - where is an attribute defined and used."""

from __future__ import annotations

from dataclasses import dataclass, field

from specscope.core.errors import ReadError
from specscope.core.logging import get_logger
from specscope.parser.attributes import find_all_attribute_usages, find_attribute_usages
from specscope.parser.files import read_file_content
from specscope.parser.models import AttributeDefinition, AttributeUsage, SpecStructure

log = get_logger("impact.ops")


@dataclass
class AttributeImpact:
    """Definition site and every reference site of one attribute."""

    attribute_name: str
    definition: AttributeDefinition | None = None
    usages: list[AttributeUsage] = field(default_factory=list)

    def usages_by_file(self) -> dict[str, list[AttributeUsage]]:
        """Usages grouped by file, files in scan order, lines ascending."""
        grouped: dict[str, list[AttributeUsage]] = {}
        for usage in self.usages:
            grouped.setdefault(usage.file_path, []).append(usage)
        return grouped

    def affected_sections(self) -> list[str]:
        """Unique non-empty section titles, in first-seen order."""
        seen: dict[str, None] = {}
        for usage in self.usages:
            if usage.section_title:
                seen.setdefault(usage.section_title, None)
        return list(seen)


def _readable_contents(structure: SpecStructure) -> list[tuple[str, str]]:
    contents: list[tuple[str, str]] = []
    for file_path in structure.all_files:
        try:
            contents.append((file_path, read_file_content(file_path)))
        except ReadError as e:
            log.debug("file_skipped", path=file_path, reason=e.details.get("reason"))
    return contents


def analyze_attribute(structure: SpecStructure, name: str) -> AttributeImpact:
    """Find the definition and every usage of an attribute.

    The root document is scanned first, then each included file in
    structure order. A missing definition is reported as None, not raised.
    """
    impact = AttributeImpact(
        attribute_name=name,
        definition=structure.attributes.get(name),
    )
    for file_path, content in _readable_contents(structure):
        impact.usages.extend(find_attribute_usages(content, file_path, name))
    return impact


def analyze_all_attributes(structure: SpecStructure) -> dict[str, AttributeImpact]:
    """Impact of every defined attribute, reading each file once."""
    impacts = {
        name: AttributeImpact(attribute_name=name, definition=definition)
        for name, definition in structure.attributes.items()
    }
    for file_path, content in _readable_contents(structure):
        for usage in find_all_attribute_usages(content, file_path):
            if usage.name in impacts:
                impacts[usage.name].usages.append(usage)
    return impacts


def list_attributes(structure: SpecStructure) -> list[AttributeDefinition]:
    """All attribute definitions in map order."""
    return list(structure.attributes.values())


def find_undefined_references(structure: SpecStructure) -> list[AttributeUsage]:
    """References whose attribute has no definition anywhere in the structure."""
    return [
        usage
        for file_path, content in _readable_contents(structure)
        for usage in find_all_attribute_usages(content, file_path)
        if usage.name not in structure.attributes
    ]
