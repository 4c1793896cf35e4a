"""Structural checks."""

from specscope.checks.ops import (
    StructuralCheck,
    all_passed,
    checks_to_json,
    format_checks,
    run_structural_checks,
)

__all__ = [
    "StructuralCheck",
    "all_passed",
    "checks_to_json",
    "format_checks",
    "run_structural_checks",
]
