"""Include directive extraction and cycle-safe include traversal.

Two traversals share the same visited-set rule (a file is entered at most
once) but differ on unreadable files:

- get_included_files lists an unreadable file and simply has no
  descendants for it.
- build_include_tree keeps a childless node for it.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterator
from pathlib import Path

from specscope.config.constants import MAX_INCLUDE_DEPTH
from specscope.core.errors import ReadError
from specscope.core.logging import get_logger
from specscope.parser.files import read_file_content, split_lines
from specscope.parser.models import IncludeInfo, IncludeNode

log = get_logger("parser.includes")

# include::path/to/file.adoc[] or include::path/to/file.adoc[tag=name]
INCLUDE_DIRECTIVE = re.compile(r"^include::([^\[]+)\[(.*)\]$")

TAG_OPTION = re.compile(r"tag=([A-Za-z0-9_-]+)")


def parse_tags(options: str) -> tuple[str, ...]:
    """All ``tag=<name>`` fragments of a directive's options, in order."""
    return tuple(m.group(1) for m in TAG_OPTION.finditer(options))


def extract_includes(content: str) -> list[IncludeInfo]:
    """Extract include directives without resolving their paths."""
    includes: list[IncludeInfo] = []
    for line_num, raw in enumerate(split_lines(content), start=1):
        if match := INCLUDE_DIRECTIVE.match(raw.strip()):
            includes.append(
                IncludeInfo(
                    path=match.group(1),
                    abs_path="",
                    line=line_num,
                    tags=parse_tags(match.group(2)),
                )
            )
    return includes


def resolve_include_path(base_dir: str, include_path: str) -> str:
    """Absolute paths are kept; relative ones are joined with base_dir."""
    if os.path.isabs(include_path):
        return include_path
    return os.path.normpath(os.path.join(base_dir, include_path))


def extract_includes_from_file(file_path: str | Path) -> list[IncludeInfo]:
    """Extract include directives from a file with resolved absolute paths.

    Raises:
        ReadError: If the file cannot be read.
    """
    path = str(file_path)
    base_dir = os.path.dirname(os.path.abspath(path))
    return [
        IncludeInfo(
            path=inc.path,
            abs_path=resolve_include_path(base_dir, inc.path),
            line=inc.line,
            tags=inc.tags,
            source_file=path,
        )
        for inc in extract_includes(read_file_content(path))
    ]


def get_included_files(root: str | Path, *, max_depth: int = MAX_INCLUDE_DEPTH) -> list[str]:
    """Every file transitively included by root, depth-first, deduplicated.

    The root is entered first but only listed when a directive reaches it,
    so in an A <-> B cycle walked from A the result is [B, A]. Failure to
    read the root raises; an included file that cannot be read stays listed
    without descendants.

    Raises:
        ReadError: If the root document cannot be read.
    """
    root_abs = os.path.abspath(root)
    files: list[str] = []
    _collect_includes(extract_includes_from_file(root_abs), {root_abs}, set(), files, 1, max_depth)
    return files


def _collect_includes(
    includes: list[IncludeInfo],
    entered: set[str],
    listed: set[str],
    files: list[str],
    depth: int,
    max_depth: int,
) -> None:
    for inc in includes:
        if inc.abs_path not in listed:
            listed.add(inc.abs_path)
            files.append(inc.abs_path)
        if inc.abs_path in entered:
            continue
        entered.add(inc.abs_path)

        if depth >= max_depth:
            log.warning("include_depth_exceeded", path=inc.abs_path, max_depth=max_depth)
            continue

        try:
            nested = extract_includes_from_file(inc.abs_path)
        except ReadError as e:
            log.debug("include_skipped", path=inc.abs_path, reason=e.details.get("reason"))
            continue
        _collect_includes(nested, entered, listed, files, depth + 1, max_depth)


def build_include_tree(root: str | Path, *, max_depth: int = MAX_INCLUDE_DEPTH) -> IncludeNode:
    """Build the include dependency tree rooted at root.

    Cycle back-edges (and repeat visits) produce no node. A file that
    cannot be read, the root included, becomes a childless node.
    """
    root_abs = os.path.abspath(root)
    return _build_node(root_abs, (), {root_abs}, 0, max_depth)


def _build_node(
    file_path: str,
    tags: tuple[str, ...],
    visited: set[str],
    depth: int,
    max_depth: int,
) -> IncludeNode:
    node = IncludeNode(path=os.path.basename(file_path), abs_path=file_path, tags=tags)

    if depth >= max_depth:
        log.warning("include_depth_exceeded", path=file_path, max_depth=max_depth)
        return node

    try:
        includes = extract_includes_from_file(file_path)
    except ReadError:
        return node

    for inc in includes:
        if inc.abs_path in visited:
            continue
        visited.add(inc.abs_path)
        node.children.append(_build_node(inc.abs_path, inc.tags, visited, depth + 1, max_depth))
    return node


def walk_include_tree(node: IncludeNode, depth: int = 0) -> Iterator[tuple[int, IncludeNode]]:
    """Yield (depth, node) pairs depth-first, root at depth 0."""
    yield depth, node
    for child in node.children:
        yield from walk_include_tree(child, depth + 1)
