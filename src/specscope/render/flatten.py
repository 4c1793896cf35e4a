"""Flatten a document tree into a single Markdown string.

This is the default Renderer used by diff and check. It covers the subset
of the markup the parser understands:

- include directives are expanded in place, relative to the including
  file, honouring ``tag=`` filters (``tag::name[]`` / ``end::name[]``)
- attribute definitions are collected in document order and removed;
  later ``{name}`` references are substituted
- ``//`` line comments and ``////`` comment blocks are dropped
- ``=`` headings become ``#`` headings (level + 1 hashes)

Anything else passes through unchanged. Callers needing a full document
compiler pass their own Renderer to the differ instead.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable
from pathlib import Path

from specscope.config.constants import MAX_INCLUDE_DEPTH
from specscope.core.errors import ReadError, RenderError, SpecError
from specscope.core.logging import get_logger
from specscope.parser.attributes import ATTRIBUTE_DEFINITION, resolve_attributes
from specscope.parser.files import read_lines, split_lines
from specscope.parser.includes import INCLUDE_DIRECTIVE, parse_tags, resolve_include_path
from specscope.parser.models import SpecStructure
from specscope.parser.report import top_level_titles
from specscope.parser.sections import SECTION_HEADING, get_section_content

log = get_logger("render.flatten")

Renderer = Callable[[Path], str]

TAG_START = re.compile(r"tag::([A-Za-z0-9_-]+)\[\]")
TAG_END = re.compile(r"end::([A-Za-z0-9_-]+)\[\]")

COMMENT_BLOCK = "////"


def select_tagged_lines(lines: list[str], tags: tuple[str, ...]) -> list[str]:
    """Keep only lines inside the requested tagged regions.

    Tag marker lines are always dropped. With no tags, every other line is
    kept.
    """
    selected: list[str] = []
    active: list[str] = []
    for line in lines:
        if start := TAG_START.search(line):
            if start.group(1) in tags:
                active.append(start.group(1))
            continue
        if end := TAG_END.search(line):
            if end.group(1) in active:
                active.remove(end.group(1))
            continue
        if not tags or active:
            selected.append(line)
    return selected


class _Flattener:
    """One rendering pass; attribute state accumulates in document order."""

    def __init__(self, attributes: dict[str, str] | None, max_depth: int) -> None:
        self.attributes: dict[str, str] = dict(attributes or {})
        self._max_depth = max_depth
        self._stack: list[str] = []

    def flatten(self, lines: list[str], source: str, base_dir: str, depth: int) -> list[str]:
        out: list[str] = []
        in_comment = False
        self._stack.append(source)
        try:
            for line in lines:
                if line.strip() == COMMENT_BLOCK:
                    in_comment = not in_comment
                    continue
                if in_comment or line.startswith("//"):
                    continue

                if directive := INCLUDE_DIRECTIVE.match(line.strip()):
                    out.extend(self._include(directive, line.strip(), source, base_dir, depth))
                    continue

                if definition := ATTRIBUTE_DEFINITION.match(line):
                    value = resolve_attributes(definition.group(2).strip(), self.attributes)
                    self.attributes[definition.group(1)] = value
                    continue

                if heading := SECTION_HEADING.match(line):
                    level = len(heading.group(1)) - 1
                    title = resolve_attributes(heading.group(2).strip(), self.attributes)
                    out.append(f"{'#' * (level + 1)} {title}")
                    continue

                out.append(resolve_attributes(line, self.attributes))
        finally:
            self._stack.pop()
        return out

    def _include(
        self,
        directive: re.Match[str],
        raw: str,
        source: str,
        base_dir: str,
        depth: int,
    ) -> list[str]:
        target_path = resolve_attributes(directive.group(1), self.attributes)
        target = resolve_include_path(base_dir, target_path)
        unresolved = [f"Unresolved directive in {os.path.basename(source)} - {raw}"]

        if target in self._stack:
            log.warning("include_cycle", source=source, target=target)
            return unresolved
        if depth >= self._max_depth:
            log.warning("include_depth_exceeded", path=target, max_depth=self._max_depth)
            return unresolved
        try:
            lines = read_lines(target)
        except ReadError as e:
            log.warning("include_unresolved", source=source, target=target, reason=e.details.get("reason"))
            return unresolved

        lines = select_tagged_lines(lines, parse_tags(directive.group(2)))
        return self.flatten(lines, target, os.path.dirname(target), depth + 1)


def _join(lines: list[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def render_text(
    content: str,
    base_dir: str,
    attributes: dict[str, str] | None = None,
    *,
    source: str = "<text>",
    max_depth: int = MAX_INCLUDE_DEPTH,
) -> str:
    """Render markup text; includes resolve against base_dir."""
    flattener = _Flattener(attributes, max_depth)
    return _join(flattener.flatten(split_lines(content), source, base_dir, 0))


def render_markdown(root: str | Path, *, max_depth: int = MAX_INCLUDE_DEPTH) -> str:
    """Render a root document and everything it includes to Markdown.

    Raises:
        RenderError: If the root document cannot be read.
    """
    root_abs = os.path.abspath(root)
    try:
        lines = read_lines(root_abs)
    except ReadError as e:
        raise RenderError.failed(root_abs, e.details.get("reason", str(e))) from e
    flattener = _Flattener(None, max_depth)
    return _join(flattener.flatten(lines, root_abs, os.path.dirname(root_abs), 0))


def render_section(structure: SpecStructure, query: str) -> str:
    """Render one section with the structure's attributes in scope.

    Raises:
        SpecError: If no section matches query.
        ReadError: If the section's file cannot be read.
    """
    section = structure.find_section(query)
    if section is None:
        raise SpecError.section_not_found(query, top_level_titles(structure))
    content = get_section_content(section)
    return render_text(
        content,
        os.path.dirname(section.file_path),
        structure.attribute_map(),
        source=section.file_path,
    )


def render_file(structure: SpecStructure, file_path: str | Path) -> str:
    """Render a single file of the tree with the structure's attributes in scope.

    Raises:
        RenderError: If the file cannot be read.
    """
    path = os.path.abspath(file_path)
    try:
        lines = read_lines(path)
    except ReadError as e:
        raise RenderError.failed(path, e.details.get("reason", str(e))) from e
    flattener = _Flattener(structure.attribute_map(), MAX_INCLUDE_DEPTH)
    return _join(flattener.flatten(lines, path, os.path.dirname(path), 0))
