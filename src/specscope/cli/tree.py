"""specscope tree command - show the include hierarchy."""

from pathlib import Path

import click
from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from specscope.cli.utils import get_config, report_errors, resolve_spec, spec_option
from specscope.parser.includes import build_include_tree
from specscope.parser.models import IncludeNode


def _label(node: IncludeNode) -> Text:
    label = Text(node.path)
    if node.tags:
        label.append(f" [tag={','.join(node.tags)}]", style="dim")
    return label


def _add_children(branch: Tree, node: IncludeNode) -> None:
    for child in node.children:
        _add_children(branch.add(_label(child)), child)


@click.command()
@spec_option
@click.pass_context
def tree_command(ctx: click.Context, spec_path: Path | None) -> None:
    """Show the include tree of the root document."""
    with report_errors():
        root = resolve_spec(ctx, spec_path)
        node = build_include_tree(root, max_depth=get_config(ctx).parser.max_include_depth)

    tree = Tree(Text(root.name, style="bold"))
    _add_children(tree, node)
    Console().print(tree)
