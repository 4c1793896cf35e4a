"""specscope CLI - structure, impact and diff tooling for modular specs."""

from pathlib import Path

import click

from specscope import __version__
from specscope.cli.check import check_command
from specscope.cli.diff import diff_command
from specscope.cli.impact import attrs_command, impact_command
from specscope.cli.render import render_command
from specscope.cli.sections import list_command
from specscope.cli.tree import tree_command
from specscope.cli.utils import report_errors
from specscope.config.loader import load_config
from specscope.core.logging import configure_logging, set_run_id


@click.group()
@click.version_option(version=__version__, prog_name="specscope")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON on stderr")
@click.option(
    "--project",
    "project_root",
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Project root holding .spec.yaml (default: current directory)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, json_logs: bool, project_root: Path | None) -> None:
    """specscope - inspect, render and diff modular AsciiDoc specifications."""
    ctx.ensure_object(dict)
    project_root = (project_root or Path.cwd()).resolve()

    with report_errors():
        config = load_config(project_root)

    if verbose:
        configure_logging(level="DEBUG", json_format=json_logs)
    elif json_logs:
        configure_logging(level=config.logging.level, json_format=True)
    else:
        configure_logging(config=config.logging)
    set_run_id()

    ctx.obj["verbose"] = verbose
    ctx.obj["project_root"] = project_root
    ctx.obj["config"] = config


cli.add_command(list_command, name="list")
cli.add_command(impact_command, name="impact")
cli.add_command(attrs_command, name="attrs")
cli.add_command(tree_command, name="tree")
cli.add_command(render_command, name="render")
cli.add_command(diff_command, name="diff")
cli.add_command(check_command, name="check")


if __name__ == "__main__":
    cli()
