"""Tests for structural checks."""

import json
from pathlib import Path

from specscope.checks.ops import (
    StructuralCheck,
    all_passed,
    checks_to_json,
    format_checks,
    run_structural_checks,
)
from specscope.core.errors import RenderError


def _by_id(checks: list[StructuralCheck]) -> dict[str, StructuralCheck]:
    return {check.id: check for check in checks}


class TestRunStructuralChecks:
    def test_healthy_tree_passes(self, spec_tree: Path) -> None:
        checks = run_structural_checks(spec_tree)

        assert [c.id for c in checks] == [
            "renders",
            "parseable",
            "has-sections",
            "has-attributes",
            "includes-resolve",
            "attributes-defined",
        ]
        assert all_passed(checks)
        by_id = _by_id(checks)
        assert by_id["has-sections"].message == "Found 5 sections"
        assert by_id["has-attributes"].message == "Found 3 attributes"
        assert by_id["includes-resolve"].message == "3 included files found"
        assert by_id["attributes-defined"].message == "OK"

    def test_missing_include_fails(self, tmp_path: Path) -> None:
        (tmp_path / "root.adoc").write_text("= Root\ninclude::parts/missing.adoc[]\n")

        checks = run_structural_checks(tmp_path / "root.adoc")

        check = _by_id(checks)["includes-resolve"]
        assert not check.passed
        assert check.message == "Missing: parts/missing.adoc"
        assert not all_passed(checks)

    def test_missing_root_stops_after_render(self, tmp_path: Path) -> None:
        checks = run_structural_checks(tmp_path / "missing.adoc")

        assert len(checks) == 1
        assert checks[0].id == "renders"
        assert not checks[0].passed

    def test_custom_renderer_failure(self, spec_tree: Path) -> None:
        def failing(path: Path) -> str:
            raise RenderError.failed(str(path), "compiler exited 1")

        checks = run_structural_checks(spec_tree, render=failing)

        assert len(checks) == 1
        assert "compiler exited 1" in checks[0].message

    def test_no_sections_fails(self, tmp_path: Path) -> None:
        (tmp_path / "root.adoc").write_text("just text\n")

        by_id = _by_id(run_structural_checks(tmp_path / "root.adoc"))

        assert not by_id["has-sections"].passed
        assert by_id["has-attributes"].passed

    def test_undefined_references_are_advisory(self, tmp_path: Path) -> None:
        (tmp_path / "root.adoc").write_text("= R\n{zeta} {alpha} {zeta}\n")

        checks = run_structural_checks(tmp_path / "root.adoc")

        check = _by_id(checks)["attributes-defined"]
        assert check.passed
        assert check.message == "Not defined in spec: alpha, zeta"
        assert all_passed(checks)


class TestOutput:
    def test_format_checks(self) -> None:
        checks = [
            StructuralCheck("renders", "Specification renders", True, "OK"),
            StructuralCheck("has-sections", "Has defined sections", False, "No sections found"),
        ]
        assert format_checks(checks) == (
            "Structural Checks:\n"
            "  ✓ Specification renders: OK\n"
            "  ✗ Has defined sections: No sections found\n"
        )

    def test_checks_to_json(self) -> None:
        data = json.loads(checks_to_json([StructuralCheck("renders", "Specification renders", True, "OK")]))
        assert data == [{"id": "renders", "name": "Specification renders", "passed": True, "message": "OK"}]
