"""Configuration constants.

Values here are not user-configurable: grammar limits, report widths and
discovery conventions. For configurable values, see models.py.
"""

# =============================================================================
# Spec Discovery
# =============================================================================

PROJECT_CONFIG_NAME = ".spec.yaml"
"""Project-level config file, looked up in the project root."""

SPEC_CONVENTIONS = (
    "MANIFEST.adoc",
    "spec/MANIFEST.adoc",
    "plan/MANIFEST.adoc",
)
"""Root document locations tried when no spec path is configured."""

# =============================================================================
# Traversal Limits
# =============================================================================

MAX_INCLUDE_DEPTH = 64
"""Default nesting cap for recursive include resolution."""

MAX_INCLUDE_DEPTH_LIMIT = 1024
"""Upper bound accepted for a configured include depth."""

# =============================================================================
# Reports
# =============================================================================

CONTEXT_WIDTH = 60
"""Characters of usage context shown in impact reports."""

SOURCE_SUFFIXES = (".adoc",)
"""File suffixes reported as changed source files in diffs."""

DEFAULT_DIFF_REF = "HEAD~1"
"""Git ref compared against when diff is given none."""
