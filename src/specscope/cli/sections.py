"""specscope list command - list every section of the spec."""

from pathlib import Path

import click

from specscope.cli.utils import load_structure, report_errors, spec_option
from specscope.parser.report import format_section_list, list_section_summaries


@click.command()
@spec_option
@click.pass_context
def list_command(ctx: click.Context, spec_path: Path | None) -> None:
    """List all sections, indented by level, with file and line."""
    with report_errors():
        _, structure = load_structure(ctx, spec_path)

    click.echo("Sections in specification:\n")
    click.echo(format_section_list(list_section_summaries(structure)), nl=False)
