"""Data models for the parsed document structure."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class AttributeDefinition:
    """A ``:name: value`` declaration.

    Attributes:
        name: Attribute identifier.
        value: Trimmed value, may be empty.
        file_path: File containing the declaration.
        line: Line number (1-based).
    """

    name: str
    value: str
    file_path: str
    line: int


@dataclass(frozen=True, slots=True)
class AttributeUsage:
    """A ``{name}`` reference site.

    Attributes:
        name: Referenced attribute identifier.
        file_path: File containing the reference.
        line: Line number (1-based).
        context: The trimmed source line.
        section_title: Nearest preceding heading, empty if none.
    """

    name: str
    file_path: str
    line: int
    context: str
    section_title: str = ""


@dataclass(frozen=True, slots=True)
class IncludeInfo:
    """One ``include::path[options]`` directive occurrence."""

    path: str  # As written in the directive
    abs_path: str  # Resolved against the including file's directory
    line: int
    tags: tuple[str, ...] = ()
    source_file: str = ""


@dataclass(slots=True)
class IncludeNode:
    """A resolved file in the include dependency tree.

    Tags are inherited from the directive that discovered the file; the
    root node has none.
    """

    path: str  # Base name
    abs_path: str
    tags: tuple[str, ...] = ()
    children: list[IncludeNode] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class SectionInfo:
    """A heading-delimited span of a single file.

    Attributes:
        title: Heading text.
        level: Heading depth; 0 is the document title (``=``).
        file_path: Source file; sections never span files.
        start_line: Line of the heading (1-based).
        end_line: Last line of the section (inclusive), or None when the
            section runs to the end of the file.
    """

    title: str
    level: int
    file_path: str
    start_line: int
    end_line: int | None = None

    @property
    def is_open(self) -> bool:
        return self.end_line is None

    def contains_line(self, line: int) -> bool:
        if line < self.start_line:
            return False
        return self.end_line is None or line <= self.end_line


@dataclass(slots=True)
class SpecStructure:
    """Aggregate model of a root document and everything it includes.

    Attributes:
        root_path: Absolute path of the root document.
        attributes: Definitions by name; on collision the last file visited wins.
        includes: Include directives found in the root document.
        files: Every transitively included file (absolute, deduplicated,
            depth-first discovery order). The root itself is not listed.
        sections: Root sections first, then each included file's sections
            in discovery order.
    """

    root_path: str
    attributes: dict[str, AttributeDefinition] = field(default_factory=dict)
    includes: list[IncludeInfo] = field(default_factory=list)
    files: list[str] = field(default_factory=list)
    sections: list[SectionInfo] = field(default_factory=list)

    @property
    def all_files(self) -> list[str]:
        """Root document followed by every other included file."""
        return [self.root_path, *(f for f in self.files if f != self.root_path)]

    def find_section(self, query: str) -> SectionInfo | None:
        """Find a section by title or file path, case-insensitively.

        For each section in order, matches on exact title, then file path
        suffix, then title substring. Returns None when nothing matches.
        """
        query = query.strip().lower()
        for section in self.sections:
            title = section.title.lower()
            if title == query:
                return section
            if section.file_path.lower().endswith(query):
                return section
            if query in title:
                return section
        return None

    def find_sections_by_file(self, file_path: str) -> list[SectionInfo]:
        """All sections whose file equals file_path, in original order."""
        target = str(file_path)
        return [s for s in self.sections if s.file_path == target]

    def attribute_map(self) -> dict[str, str]:
        """Attribute names mapped to their values."""
        return {name: attr.value for name, attr in self.attributes.items()}
