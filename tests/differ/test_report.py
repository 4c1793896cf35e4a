"""Tests for the diff text report."""

from specscope.differ.ops import DiffResult, SectionChange
from specscope.differ.report import format_diff_result, format_section_change


def _result(**overrides: object) -> DiffResult:
    fields: dict[str, object] = {
        "old_commit": "a" * 40,
        "new_commit": "b" * 40,
        "old_commit_short": "aaaaaaa",
        "new_commit_short": "bbbbbbb",
        "changed_files": [],
        "unified_diff": "",
        "section_changes": [],
        "has_changes": False,
    }
    fields.update(overrides)
    return DiffResult(**fields)  # type: ignore[arg-type]


class TestFormatSectionChange:
    def test_added(self) -> None:
        change = SectionChange("Security", "added", added_lines=4)
        assert format_section_change(change) == "  + Security (+4 lines)"

    def test_removed(self) -> None:
        change = SectionChange("Legacy", "removed", removed_lines=2)
        assert format_section_change(change) == "  - Legacy (-2 lines)"

    def test_modified(self) -> None:
        change = SectionChange("Performance", "modified", added_lines=1, removed_lines=3)
        assert format_section_change(change) == "  ~ Performance (+1/-3 lines)"


class TestFormatDiffResult:
    def test_unchanged(self) -> None:
        assert format_diff_result(_result()) == (
            "Comparing: aaaaaaa -> bbbbbbb\n\nNo changes in compiled output.\n"
        )

    def test_changed(self) -> None:
        result = _result(
            has_changes=True,
            changed_files=["chapters/perf.adoc"],
            section_changes=[SectionChange("Performance", "modified", added_lines=1)],
            unified_diff="--- aaaaaaa\n+++ bbbbbbb\n+Budget: 5ms\n",
        )

        assert format_diff_result(result) == (
            "Comparing: aaaaaaa -> bbbbbbb\n"
            "\n"
            "Changed source files:\n"
            "  - chapters/perf.adoc\n"
            "\n"
            "Section changes:\n"
            "  ~ Performance (+1/-0 lines)\n"
            "\n"
            "Diff:\n"
            "--- aaaaaaa\n"
            "+++ bbbbbbb\n"
            "+Budget: 5ms\n"
        )

    def test_changed_without_source_files(self) -> None:
        result = _result(has_changes=True, unified_diff="--- a\n+++ b\n-x\n")

        output = format_diff_result(result)

        assert "Changed source files:" not in output
        assert "Section changes:" not in output
        assert output.endswith("Diff:\n--- a\n+++ b\n-x\n")
