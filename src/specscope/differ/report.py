"""Text report for compiled-output diffs."""

from __future__ import annotations

from specscope.differ.ops import DiffResult, SectionChange


def format_section_change(change: SectionChange) -> str:
    if change.change_type == "added":
        return f"  + {change.section_title} (+{change.added_lines} lines)"
    if change.change_type == "removed":
        return f"  - {change.section_title} (-{change.removed_lines} lines)"
    return (
        f"  ~ {change.section_title} "
        f"(+{change.added_lines}/-{change.removed_lines} lines)"
    )


def format_diff_result(result: DiffResult) -> str:
    out = [f"Comparing: {result.old_commit_short} -> {result.new_commit_short}", ""]

    if not result.has_changes:
        out.append("No changes in compiled output.")
        return "\n".join(out) + "\n"

    if result.changed_files:
        out.append("Changed source files:")
        out.extend(f"  - {path}" for path in result.changed_files)
        out.append("")

    if result.section_changes:
        out.append("Section changes:")
        out.extend(format_section_change(c) for c in result.section_changes)
        out.append("")

    out.append("Diff:")
    return "\n".join(out) + "\n" + result.unified_diff
