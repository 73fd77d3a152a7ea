"""Shared CLI command helpers for snapshot access."""

from __future__ import annotations

import json

import click
from click.shell_completion import CompletionItem

from mdshell.config import snapshot_path, working_directory
from mdshell.tree import DirectoryNode, MetadataTree, SnapshotError, load_tree

__all__ = [
    "require_tree",
    "try_load_tree",
    "complete_path",
    "_json_mode",
]


def _json_mode() -> bool:
    """Return True if the current Click context has a JSON output flag set."""
    ctx = click.get_current_context(silent=True)
    if ctx is None:
        return False
    return bool(ctx.params.get("use_json"))


def require_tree() -> MetadataTree:
    """Load the configured snapshot or exit with error."""
    try:
        return load_tree(snapshot_path())
    except SnapshotError as exc:
        if _json_mode():
            click.echo(json.dumps({"error": {"message": str(exc)}}), err=True)
        else:
            click.echo(f"error: {exc}", err=True)
        raise SystemExit(1) from None


def try_load_tree() -> MetadataTree | None:
    """Load the snapshot for completion, returning None on failure."""
    try:
        return load_tree(snapshot_path())
    except SnapshotError:
        return None


def complete_path(
    ctx: click.Context, param: click.Parameter, incomplete: str
) -> list[CompletionItem]:
    """Shell completion callback for tree paths."""
    if "/" in incomplete:
        last_slash = incomplete.rfind("/")
        dir_path = incomplete[: last_slash + 1].rstrip("/") or "/"
        prefix = incomplete[last_slash + 1 :]
        base = dir_path if dir_path == "/" else dir_path + "/"
    else:
        dir_path = "."
        prefix = incomplete
        base = ""

    tree = try_load_tree()
    if tree is None:
        return []
    node = tree.resolve(dir_path, working_directory())
    if not isinstance(node, DirectoryNode):
        return []

    items: list[CompletionItem] = []
    for name, child in node.children.items():
        if name.startswith(prefix):
            suffix = "/" if isinstance(child, DirectoryNode) else ""
            items.append(CompletionItem(base + name + suffix))
    return items
