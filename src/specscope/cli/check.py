"""specscope check command - structural pre-flight checks."""

from functools import partial
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from specscope.checks.ops import all_passed, checks_to_json, run_structural_checks
from specscope.cli.utils import get_config, report_errors, resolve_spec, spec_option
from specscope.render.flatten import render_markdown


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@spec_option
@click.pass_context
def check_command(ctx: click.Context, as_json: bool, spec_path: Path | None) -> None:
    """Run structural checks. Exits 1 if any check fails."""
    max_depth = get_config(ctx).parser.max_include_depth
    with report_errors():
        root = resolve_spec(ctx, spec_path)
    checks = run_structural_checks(
        root, render=partial(render_markdown, max_depth=max_depth), max_depth=max_depth
    )

    if as_json:
        click.echo(checks_to_json(checks))
    else:
        console = Console(highlight=False, emoji=False, soft_wrap=True)
        console.print("Structural Checks:")
        for check in checks:
            mark = "[green]✓[/green]" if check.passed else "[red]✗[/red]"
            console.print(f"  {mark} {escape(check.name)}: {escape(check.message)}")

    if not all_passed(checks):
        raise SystemExit(1)
