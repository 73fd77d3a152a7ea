"""Metadata tree browsed by the shell."""

from mdshell.tree.loader import SnapshotError, build_tree, load_tree
from mdshell.tree.nodes import DirectoryNode, FileNode, MetadataTree, Node

__all__ = [
    "DirectoryNode",
    "FileNode",
    "MetadataTree",
    "Node",
    "SnapshotError",
    "build_tree",
    "load_tree",
]
