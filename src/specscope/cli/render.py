"""specscope render command - print the compiled Markdown."""

from pathlib import Path

import click

from specscope.cli.utils import get_config, load_structure, report_errors, resolve_spec, spec_option
from specscope.render.flatten import render_markdown, render_section


@click.command()
@click.option("--section", "query", default=None, help="Render only the matching section")
@spec_option
@click.pass_context
def render_command(ctx: click.Context, query: str | None, spec_path: Path | None) -> None:
    """Render the whole spec, or one section, to Markdown on stdout."""
    with report_errors():
        if query:
            _, structure = load_structure(ctx, spec_path)
            output = render_section(structure, query)
        else:
            root = resolve_spec(ctx, spec_path)
            output = render_markdown(root, max_depth=get_config(ctx).parser.max_include_depth)
    click.echo(output, nl=False)
