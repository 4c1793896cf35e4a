"""Structure building - compose the scanners over a root and its includes."""

from __future__ import annotations

import os
from pathlib import Path

from specscope.config.constants import MAX_INCLUDE_DEPTH
from specscope.core.errors import ReadError
from specscope.core.logging import get_logger
from specscope.parser.attributes import extract_attributes_from_file
from specscope.parser.includes import extract_includes_from_file, get_included_files
from specscope.parser.models import SpecStructure
from specscope.parser.sections import extract_sections_from_file

log = get_logger("parser.structure")


def build_structure(root: str | Path, *, max_depth: int = MAX_INCLUDE_DEPTH) -> SpecStructure:
    """Build the aggregate structure of a root document.

    Steps, in order:
    1. attribute definitions of the root
    2. include directives of the root
    3. transitive include set (depth-first)
    4. sections of the root
    5. attributes and sections of every included file, in discovery order

    Any read failure on the root aborts the build. Included files that
    cannot be read are skipped. On attribute name collisions the definition
    visited last wins, so discovery order decides the winner.

    Raises:
        ReadError: If the root document cannot be read.
    """
    root_path = os.path.abspath(root)
    structure = SpecStructure(root_path=root_path)

    for attr in extract_attributes_from_file(root_path):
        structure.attributes[attr.name] = attr

    structure.includes = extract_includes_from_file(root_path)
    structure.files = get_included_files(root_path, max_depth=max_depth)
    structure.sections.extend(extract_sections_from_file(root_path))

    for file_path in structure.files:
        if file_path == root_path:
            continue
        try:
            definitions = extract_attributes_from_file(file_path)
            sections = extract_sections_from_file(file_path)
        except ReadError as e:
            log.debug("file_skipped", path=file_path, reason=e.details.get("reason"))
            continue
        for attr in definitions:
            structure.attributes[attr.name] = attr
        structure.sections.extend(sections)

    log.debug(
        "structure_built",
        root=root_path,
        files=len(structure.files),
        sections=len(structure.sections),
        attributes=len(structure.attributes),
    )
    return structure
