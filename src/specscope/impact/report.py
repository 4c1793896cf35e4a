"""Text reports for attribute impact."""

from __future__ import annotations

from specscope.config.constants import CONTEXT_WIDTH
from specscope.core.formatting import display_path, truncate
from specscope.impact.ops import AttributeImpact
from specscope.parser.models import AttributeDefinition


def format_impact(
    impact: AttributeImpact,
    base_dir: str,
    *,
    context_width: int = CONTEXT_WIDTH,
) -> str:
    """Definition site, then usages grouped by file with truncated context."""
    out = [f"Attribute: {impact.attribute_name}"]

    definition = impact.definition
    if definition is not None:
        rel = display_path(definition.file_path, base_dir)
        out.append(f'Defined in: {rel}:{definition.line} = "{definition.value}"')
    else:
        out.append("Defined in: (not found)")

    out.append("")
    out.append("Used in:")

    if not impact.usages:
        out.append("  (no usages found)")
    for file_path, usages in impact.usages_by_file().items():
        rel = display_path(file_path, base_dir)
        for usage in usages:
            section = f' (Section: "{usage.section_title}")' if usage.section_title else ""
            out.append(f"  - {rel}:{usage.line}{section}")
            out.append(f"    Context: {truncate(usage.context, context_width)}")

    return "\n".join(out) + "\n"


def format_attribute_list(attrs: list[AttributeDefinition], base_dir: str) -> str:
    out = ["Defined Attributes:", ""]
    for attr in attrs:
        rel = display_path(attr.file_path, base_dir)
        out.append(f'  {attr.name} = "{attr.value}" ({rel}:{attr.line})')
    return "\n".join(out) + "\n"
