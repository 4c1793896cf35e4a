"""specscope diff command - compare compiled output against a git ref."""

from functools import partial
from pathlib import Path

import click

from specscope.cli.utils import get_config, report_errors, resolve_spec, spec_option
from specscope.differ.ops import diff_against_ref
from specscope.differ.report import format_diff_result
from specscope.render.flatten import render_markdown


@click.command()
@click.argument("ref", required=False)
@spec_option
@click.pass_context
def diff_command(ctx: click.Context, ref: str | None, spec_path: Path | None) -> None:
    """Compare the compiled spec at REF (default: HEAD~1) with the working tree."""
    config = get_config(ctx)
    with report_errors():
        root = resolve_spec(ctx, spec_path)
        result = diff_against_ref(
            root,
            ref or config.diff.default_ref,
            render=partial(render_markdown, max_depth=config.parser.max_include_depth),
            suffixes=tuple(config.diff.source_suffixes),
        )
    click.echo(format_diff_result(result), nl=False)
