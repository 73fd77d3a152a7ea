"""Snapshot loading for the metadata tree.

A snapshot is a JSON document whose objects become directories and whose
other values become files. Key order in the document is the listing order.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from mdshell.tree.nodes import DirectoryNode, FileNode, MetadataTree, Node

log = logging.getLogger(__name__)


class SnapshotError(Exception):
    """Raised when a snapshot cannot be read or has the wrong shape."""


def _build_node(name: str, value: Any) -> Node:
    if isinstance(value, Mapping):
        node = DirectoryNode(name)
        for key, child in value.items():
            node.children[str(key)] = _build_node(str(key), child)
        return node
    if isinstance(value, str):
        return FileNode(name, value)
    return FileNode(name, json.dumps(value))


def build_tree(data: Mapping[str, Any]) -> MetadataTree:
    """Build a tree from an already decoded snapshot mapping."""
    root = _build_node("/", data)
    assert isinstance(root, DirectoryNode)
    return MetadataTree(root)


def load_tree(path: Path) -> MetadataTree:
    """Load a snapshot file into a MetadataTree.

    Raises:
        SnapshotError: If the file is missing, is not valid JSON, or its
            top-level value is not an object.
    """
    if not path.exists():
        raise SnapshotError(f"snapshot not found: {path}")
    try:
        data = json.loads(path.read_text())
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        log.warning("corrupt snapshot file: %s", path)
        raise SnapshotError(f"corrupt snapshot {path}: {exc}") from None
    if not isinstance(data, dict):
        log.warning("snapshot root is not an object: %s", path)
        raise SnapshotError(f"snapshot root must be a JSON object: {path}")
    tree = build_tree(data)
    log.debug("loaded snapshot %s (%d top-level entries)", path, len(tree.root.children))
    return tree
