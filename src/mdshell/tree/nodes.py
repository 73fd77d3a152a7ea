"""In-memory metadata tree and path resolution."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass
class FileNode:
    """Leaf node holding a text payload."""

    name: str
    contents: str = ""


@dataclass
class DirectoryNode:
    """Directory node; children keep insertion order."""

    name: str
    children: dict[str, Node] = field(default_factory=dict)

    def child_names(self) -> list[str]:
        return list(self.children)


Node = DirectoryNode | FileNode


def split_path(pattern: str, cwd: str = "/") -> list[str]:
    """Normalize a path into its components relative to the root.

    Relative paths are joined onto ``cwd``. ``.`` and empty components are
    dropped, ``..`` pops one level and stops at the root.
    """
    joined = pattern if pattern.startswith("/") else f"{cwd}/{pattern}"
    parts: list[str] = []
    for part in joined.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if parts:
                parts.pop()
            continue
        parts.append(part)
    return parts


class MetadataTree:
    """Read-only view over a tree of metadata nodes."""

    def __init__(self, root: DirectoryNode | None = None) -> None:
        self.root = root if root is not None else DirectoryNode("/")

    def resolve(self, pattern: str, cwd: str = "/") -> Node | None:
        """Return the node at ``pattern``, or None when nothing is there."""
        node: Node = self.root
        for part in split_path(pattern, cwd):
            if not isinstance(node, DirectoryNode):
                return None
            child = node.children.get(part)
            if child is None:
                return None
            node = child
        return node

    def resolver(self, cwd: str = "/") -> Callable[[str], Node | None]:
        """Bind ``cwd`` and return a one-argument resolve callable."""
        return lambda pattern: self.resolve(pattern, cwd)
