"""CLI utilities."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click

from specscope.config.loader import find_spec
from specscope.config.models import SpecScopeConfig
from specscope.core.errors import SpecScopeError
from specscope.parser.models import SpecStructure
from specscope.parser.structure import build_structure

spec_option = click.option(
    "--spec",
    "spec_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Root document (default: .spec.yaml 'spec' or MANIFEST.adoc conventions)",
)


@contextmanager
def report_errors() -> Iterator[None]:
    """Turn domain errors into a clean CLI failure (exit code 1)."""
    try:
        yield
    except SpecScopeError as e:
        raise click.ClickException(e.message) from e


def get_config(ctx: click.Context) -> SpecScopeConfig:
    return ctx.obj["config"]  # type: ignore[no-any-return]


def resolve_spec(ctx: click.Context, spec_path: Path | None) -> Path:
    """Explicit --spec wins; otherwise discover from the project root.

    Raises:
        ConfigError: Configured spec path does not exist.
        SpecError: Nothing found by convention.
    """
    if spec_path is not None:
        return spec_path.resolve()
    return find_spec(ctx.obj["project_root"], get_config(ctx))


def load_structure(ctx: click.Context, spec_path: Path | None) -> tuple[Path, SpecStructure]:
    """Resolve the root document and build its structure."""
    root = resolve_spec(ctx, spec_path)
    structure = build_structure(root, max_depth=get_config(ctx).parser.max_include_depth)
    return root, structure
