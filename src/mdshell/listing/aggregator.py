"""ls aggregation: resolve targets, group them, and print column blocks.

Targets resolving to files are printed together in one block, followed by
one block per directory. Missing targets are reported inline as they are
resolved and never abort the listing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from mdshell.listing.layout import compute_layout, render_rows
from mdshell.tree.nodes import DirectoryNode, FileNode, Node

log = logging.getLogger(__name__)

Resolver = Callable[[str], Node | None]
LineWriter = Callable[[str], None]


@dataclass(frozen=True)
class Missing:
    pattern: str


@dataclass(frozen=True)
class File:
    pattern: str


@dataclass(frozen=True)
class Directory:
    pattern: str
    children: tuple[str, ...] = ()


ResolvedEntry = Missing | File | Directory


@dataclass
class Listing:
    """Resolved targets grouped for output."""

    files: list[str] = field(default_factory=list)
    directories: list[Directory] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    @property
    def needs_intro(self) -> bool:
        """Directory blocks get a ``name:`` header unless one directory is shown alone."""
        return bool(self.files) or len(self.directories) > 1


def missing_message(pattern: str) -> str:
    return f"ls: {pattern}: no such file or directory."


def resolve_entry(pattern: str, resolve: Resolver) -> ResolvedEntry:
    """Classify what ``pattern`` resolves to."""
    node = resolve(pattern)
    if isinstance(node, DirectoryNode):
        return Directory(pattern, tuple(node.child_names()))
    if isinstance(node, FileNode):
        return File(pattern)
    return Missing(pattern)


def collect_listing(
    targets: Sequence[str],
    resolve: Resolver,
    on_missing: Callable[[str], None] | None = None,
) -> Listing:
    """Resolve every target in order and group the results.

    Args:
        targets: Target paths; an empty sequence means the current directory.
        resolve: Maps a path to its node, or None when nothing matches.
        on_missing: Called with each unresolved target as soon as it is seen.
    """
    listing = Listing()
    for target in targets or ["."]:
        entry = resolve_entry(target, resolve)
        if isinstance(entry, Missing):
            listing.missing.append(entry.pattern)
            if on_missing is not None:
                on_missing(entry.pattern)
        elif isinstance(entry, File):
            listing.files.append(entry.pattern)
        else:
            listing.directories.append(entry)
    return listing


def _write_block(
    write: LineWriter, intro: list[str], width: int | None, entries: Sequence[str]
) -> None:
    if not entries:
        return
    for line in intro:
        write(line)
    for row in render_rows(compute_layout(width, entries), entries):
        write(row)


def render_listing(listing: Listing, width: int | None, write: LineWriter) -> None:
    """Write the files block, then each directory block, one line per call."""
    log.debug(
        "ls: files=%s directories=%s width=%s",
        listing.files,
        [d.pattern for d in listing.directories],
        width,
    )
    _write_block(write, [], width, listing.files)

    need_intro = listing.needs_intro
    first_intro = not listing.files
    for directory in listing.directories:
        intro: list[str] = []
        if need_intro:
            if not first_intro:
                intro.append("")
            intro.append(f"{directory.pattern}:")
            first_intro = False
        log.debug("ls: directory %s children=%s", directory.pattern, directory.children)
        _write_block(write, intro, width, directory.children)


def list_targets(
    targets: Sequence[str],
    width: int | None,
    resolve: Resolver,
    write: LineWriter,
) -> Listing:
    """List targets the way ``ls`` does, writing each output line to ``write``.

    Unresolvable targets produce an error line at the point they are resolved;
    they are not raised.
    """
    listing = collect_listing(targets, resolve, lambda p: write(missing_message(p)))
    render_listing(listing, width, write)
    return listing
