"""ASCII tree rendering for metadata subtrees."""

from __future__ import annotations

from mdshell.tree.nodes import DirectoryNode, Node


def render_tree(label: str, node: Node, max_depth: int) -> str:
    """Render a subtree below ``label`` with ASCII connectors.

    Args:
        label: Display path for the root node (e.g. "/brokers").
        node: Node to render.
        max_depth: Maximum depth to render (0 = root only).
    """
    is_dir = isinstance(node, DirectoryNode)
    suffix = "/" if is_dir and not label.endswith("/") else ""
    lines = [label + suffix]
    if is_dir:
        _render_children(node, lines, "", max_depth, 1)
    return "\n".join(lines)


def _render_children(
    node: DirectoryNode,
    lines: list[str],
    prefix: str,
    max_depth: int,
    depth: int,
) -> None:
    if depth > max_depth or not node.children:
        return
    children = list(node.children.values())
    for i, child in enumerate(children):
        is_last = i == len(children) - 1
        connector = "└── " if is_last else "├── "
        if isinstance(child, DirectoryNode):
            lines.append(prefix + connector + child.name + "/")
            extension = "    " if is_last else "│   "
            _render_children(child, lines, prefix + extension, max_depth, depth + 1)
        else:
            lines.append(prefix + connector + child.name)
