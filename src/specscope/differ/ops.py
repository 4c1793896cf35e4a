"""Compiled-output diffing.

Works on two rendered Markdown strings. Section blocks are re-derived from
the rendered text (lines starting with ``#``), independent of the parsed
source structure.
"""

from __future__ import annotations

import difflib
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from specscope.config.constants import SOURCE_SUFFIXES
from specscope.core.logging import get_logger
from specscope.git.ops import SpecRepository
from specscope.parser.files import split_lines
from specscope.render.flatten import Renderer, render_markdown

log = get_logger("differ.ops")

ChangeType = Literal["added", "removed", "modified"]


@dataclass(frozen=True, slots=True)
class SectionChange:
    """Change classification for one rendered section."""

    section_title: str
    change_type: ChangeType
    added_lines: int = 0
    removed_lines: int = 0


@dataclass(frozen=True, slots=True)
class RenderedDiff:
    """Diff of two renderings.

    has_changes is True exactly when the two strings differ; when False the
    reduced diff is empty and there are no section changes.
    """

    has_changes: bool
    unified_diff: str = ""
    section_changes: list[SectionChange] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Diff of a document tree between a git ref and the working tree."""

    old_commit: str
    new_commit: str
    old_commit_short: str
    new_commit_short: str
    changed_files: list[str]
    unified_diff: str
    section_changes: list[SectionChange]
    has_changes: bool


def _line_opcodes(old_lines: list[str], new_lines: list[str]) -> list[tuple[str, int, int, int, int]]:
    return difflib.SequenceMatcher(None, old_lines, new_lines, autojunk=False).get_opcodes()


def reduced_diff(old: str, new: str, *, old_label: str = "old", new_label: str = "new") -> str:
    """Line diff that keeps only removed (-) and added (+) lines.

    Unlike a unified diff there are no context lines and no hunk headers.
    Returns an empty string when old and new are identical.
    """
    if old == new:
        return ""
    old_lines = split_lines(old)
    new_lines = split_lines(new)

    out = [f"--- {old_label}", f"+++ {new_label}"]
    for tag, i1, i2, j1, j2 in _line_opcodes(old_lines, new_lines):
        if tag == "equal":
            continue
        out.extend(f"-{line}" for line in old_lines[i1:i2])
        out.extend(f"+{line}" for line in new_lines[j1:j2])
    return "".join(f"{line}\n" for line in out)


def extract_section_blocks(markdown: str) -> dict[str, str]:
    """Split rendered Markdown into section bodies keyed by heading title.

    A line starting with ``#`` opens a section; its title is the line with
    leading ``#`` and spaces stripped. Text before the first heading is
    ignored and a repeated title keeps its last body.
    """
    blocks: dict[str, str] = {}
    current_title = ""
    body: list[str] = []

    for line in split_lines(markdown):
        if line.startswith("#"):
            if current_title:
                blocks[current_title] = "".join(body)
            current_title = line.lstrip("# ")
            body = []
        elif current_title:
            body.append(f"{line}\n")

    if current_title:
        blocks[current_title] = "".join(body)
    return blocks


def count_changed_lines(old: str, new: str) -> tuple[int, int]:
    """Count (added, removed) lines between two texts."""
    old_lines = split_lines(old)
    new_lines = split_lines(new)
    added = removed = 0
    for tag, i1, i2, j1, j2 in _line_opcodes(old_lines, new_lines):
        if tag in ("replace", "delete"):
            removed += i2 - i1
        if tag in ("replace", "insert"):
            added += j2 - j1
    return added, removed


def analyze_section_changes(old: str, new: str) -> list[SectionChange]:
    """Classify each rendered section as added, removed or modified.

    Modified and removed sections come first in old order, then added
    sections in new order. Unchanged sections are omitted.
    """
    old_sections = extract_section_blocks(old)
    new_sections = extract_section_blocks(new)
    changes: list[SectionChange] = []

    for title, old_body in old_sections.items():
        if title not in new_sections:
            changes.append(
                SectionChange(
                    section_title=title,
                    change_type="removed",
                    removed_lines=len(split_lines(old_body)),
                )
            )
            continue
        new_body = new_sections[title]
        if old_body != new_body:
            added, removed = count_changed_lines(old_body, new_body)
            changes.append(
                SectionChange(
                    section_title=title,
                    change_type="modified",
                    added_lines=added,
                    removed_lines=removed,
                )
            )

    for title, new_body in new_sections.items():
        if title not in old_sections:
            changes.append(
                SectionChange(
                    section_title=title,
                    change_type="added",
                    added_lines=len(split_lines(new_body)),
                )
            )

    return changes


def diff_rendered(
    old: str,
    new: str,
    *,
    old_label: str = "old",
    new_label: str = "new",
) -> RenderedDiff:
    """Reduced diff plus per-section breakdown of two renderings."""
    if old == new:
        return RenderedDiff(has_changes=False)
    return RenderedDiff(
        has_changes=True,
        unified_diff=reduced_diff(old, new, old_label=old_label, new_label=new_label),
        section_changes=analyze_section_changes(old, new),
    )


def diff_against_ref(
    root: str | Path,
    ref: str,
    *,
    render: Renderer = render_markdown,
    repo_path: str | Path | None = None,
    suffixes: tuple[str, ...] | list[str] = SOURCE_SUFFIXES,
) -> DiffResult:
    """Compare the rendered working tree against the tree at a git ref.

    The historical tree is exported to a temporary directory and rendered
    with the same renderer.

    Raises:
        GitError: Not inside a repository, or ref cannot be resolved.
        RenderError: Either rendering fails.
    """
    root_abs = Path(root).resolve()
    repo = SpecRepository(repo_path or root_abs.parent)

    old_commit = repo.resolve_commit(ref)
    new_commit = repo.head_commit()
    old_short = repo.short_id(old_commit)
    new_short = repo.short_id(new_commit)

    changed_files = repo.changed_files(old_commit, new_commit, suffixes)
    current_output = render(root_abs)

    rel_root = repo.relative_path(root_abs)
    with tempfile.TemporaryDirectory(prefix="specscope-") as tmp:
        written = repo.export_tree(old_commit, Path(tmp))
        log.debug("tree_exported", ref=ref, commit=old_short, files=written)
        old_output = render(Path(tmp) / rel_root)

    rendered = diff_rendered(old_output, current_output, old_label=old_short, new_label=new_short)
    return DiffResult(
        old_commit=str(old_commit.id),
        new_commit=str(new_commit.id),
        old_commit_short=old_short,
        new_commit_short=new_short,
        changed_files=changed_files,
        unified_diff=rendered.unified_diff,
        section_changes=rendered.section_changes,
        has_changes=rendered.has_changes,
    )
