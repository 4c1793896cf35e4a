"""Structural pre-flight checks on a document tree.

Fast, local checks only. Whether the content is complete or sensible is
out of scope here.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path

from specscope.config.constants import MAX_INCLUDE_DEPTH
from specscope.core.errors import ReadError, RenderError
from specscope.core.formatting import pluralize
from specscope.impact.ops import find_undefined_references
from specscope.parser.structure import build_structure
from specscope.render.flatten import Renderer, render_markdown


@dataclass(frozen=True, slots=True)
class StructuralCheck:
    """Outcome of one check."""

    id: str
    name: str
    passed: bool
    message: str


def run_structural_checks(
    root: str | Path,
    *,
    render: Renderer = render_markdown,
    max_depth: int = MAX_INCLUDE_DEPTH,
) -> list[StructuralCheck]:
    """Run the structural checks in order.

    Rendering and parsing gate the rest: when either fails, the remaining
    checks are not run.
    """
    checks: list[StructuralCheck] = []

    try:
        render(Path(root))
    except (RenderError, ReadError) as e:
        checks.append(StructuralCheck("renders", "Specification renders", False, e.message))
        return checks
    checks.append(StructuralCheck("renders", "Specification renders", True, "OK"))

    try:
        structure = build_structure(root, max_depth=max_depth)
    except ReadError as e:
        checks.append(StructuralCheck("parseable", "Structure parseable", False, e.message))
        return checks
    checks.append(StructuralCheck("parseable", "Structure parseable", True, "OK"))

    if structure.sections:
        checks.append(
            StructuralCheck(
                "has-sections",
                "Has defined sections",
                True,
                f"Found {pluralize(len(structure.sections), 'section')}",
            )
        )
    else:
        checks.append(
            StructuralCheck(
                "has-sections",
                "Has defined sections",
                False,
                "No sections found - spec appears empty",
            )
        )

    # Advisory: never fails
    if structure.attributes:
        attrs_message = f"Found {pluralize(len(structure.attributes), 'attribute')}"
    else:
        attrs_message = "No attributes defined (consider using :attr: for reusable values)"
    checks.append(StructuralCheck("has-attributes", "Has reusable attributes", True, attrs_message))

    missing = [f for f in structure.files if not os.path.isfile(f)]
    if missing:
        base_dir = os.path.dirname(structure.root_path)
        names = ", ".join(os.path.relpath(f, base_dir) for f in missing)
        checks.append(
            StructuralCheck("includes-resolve", "Includes resolve", False, f"Missing: {names}")
        )
    else:
        checks.append(
            StructuralCheck(
                "includes-resolve",
                "Includes resolve",
                True,
                f"{pluralize(len(structure.files), 'included file')} found",
            )
        )

    # Advisory: built-in attributes of the markup language are never defined locally
    undefined = sorted({u.name for u in find_undefined_references(structure)})
    if undefined:
        undefined_message = f"Not defined in spec: {', '.join(undefined)}"
    else:
        undefined_message = "OK"
    checks.append(
        StructuralCheck("attributes-defined", "Referenced attributes defined", True, undefined_message)
    )

    return checks


def all_passed(checks: list[StructuralCheck]) -> bool:
    return all(check.passed for check in checks)


def format_checks(checks: list[StructuralCheck]) -> str:
    """Plain-text rendering, one check per line."""
    out = ["Structural Checks:"]
    for check in checks:
        mark = "✓" if check.passed else "✗"
        out.append(f"  {mark} {check.name}: {check.message}")
    return "\n".join(out) + "\n"


def checks_to_json(checks: list[StructuralCheck]) -> str:
    return json.dumps([asdict(check) for check in checks], indent=2)
