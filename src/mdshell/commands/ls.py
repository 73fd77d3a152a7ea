"""Tree browsing commands: ls, cat, tree."""

from __future__ import annotations

import json

import click

from mdshell.commands._helpers import complete_path, require_tree
from mdshell.config import display_width, working_directory
from mdshell.listing import collect_listing, list_targets
from mdshell.tree import DirectoryNode
from mdshell.tree.formatter import render_tree


@click.command("ls")
@click.argument("targets", nargs=-1, shell_complete=complete_path)
@click.option(
    "-w",
    "--width",
    type=click.IntRange(min=0),
    default=None,
    help="Output width in columns (default: terminal width).",
)
@click.option("-1", "one_per_line", is_flag=True, help="List one entry per line.")
@click.option("--json", "use_json", is_flag=True, help="JSON output")
def ls_cmd(
    targets: tuple[str, ...],
    width: int | None,
    one_per_line: bool,
    use_json: bool,
) -> None:
    """List files and directory contents of the snapshot tree."""
    tree = require_tree()
    resolve = tree.resolver(working_directory())

    if use_json:
        listing = collect_listing(targets, resolve)
        payload = {
            "files": listing.files,
            "directories": [
                {"name": d.pattern, "children": list(d.children)} for d in listing.directories
            ],
            "missing": listing.missing,
        }
        click.echo(json.dumps(payload, indent=2))
        return

    if one_per_line:
        width = None
    elif width is None:
        width = display_width()
    list_targets(targets, width, resolve, click.echo)


@click.command("cat")
@click.argument("path", shell_complete=complete_path)
def cat_cmd(path: str) -> None:
    """Print the contents of a file node."""
    node = require_tree().resolve(path, working_directory())
    if node is None:
        click.echo(f"error: {path}: No such file or directory", err=True)
        raise SystemExit(1)
    if isinstance(node, DirectoryNode):
        click.echo(f"error: {path}: Is a directory", err=True)
        raise SystemExit(1)
    click.echo(node.contents)


@click.command("tree")
@click.argument("path", default=".", shell_complete=complete_path)
@click.option("--depth", default=2, type=click.IntRange(1, 8), show_default=True)
def tree_cmd(path: str, depth: int) -> None:
    """Display the subtree below PATH."""
    node = require_tree().resolve(path, working_directory())
    if node is None:
        click.echo(f"error: {path}: No such file or directory", err=True)
        raise SystemExit(1)
    click.echo(render_tree(path, node, depth))
