"""specscope impact / attrs commands - attribute impact analysis."""

from pathlib import Path

import click

from specscope.cli.utils import get_config, load_structure, report_errors, spec_option
from specscope.impact.ops import analyze_all_attributes, analyze_attribute, list_attributes
from specscope.impact.report import format_attribute_list, format_impact


@click.command()
@click.argument("name", required=False)
@click.option("--all", "show_all", is_flag=True, help="Report every defined attribute")
@spec_option
@click.pass_context
def impact_command(
    ctx: click.Context, name: str | None, show_all: bool, spec_path: Path | None
) -> None:
    """Show where attribute NAME is defined and every place it is used."""
    if not name and not show_all:
        raise click.UsageError("Provide an attribute NAME or pass --all")

    width = get_config(ctx).report.context_width
    with report_errors():
        root, structure = load_structure(ctx, spec_path)
        base_dir = str(root.parent)

        if show_all:
            impacts = analyze_all_attributes(structure)
            for i, attr_name in enumerate(sorted(impacts)):
                if i:
                    click.echo()
                click.echo(format_impact(impacts[attr_name], base_dir, context_width=width), nl=False)
            return

        impact = analyze_attribute(structure, name)  # type: ignore[arg-type]
    click.echo(format_impact(impact, base_dir, context_width=width), nl=False)


@click.command()
@spec_option
@click.pass_context
def attrs_command(ctx: click.Context, spec_path: Path | None) -> None:
    """List every defined attribute with its value and location."""
    with report_errors():
        root, structure = load_structure(ctx, spec_path)
    click.echo(format_attribute_list(list_attributes(structure), str(root.parent)), nl=False)
