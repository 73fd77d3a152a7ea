"""Directory listing and column layout."""

from mdshell.listing.aggregator import (
    Directory,
    File,
    Listing,
    Missing,
    ResolvedEntry,
    collect_listing,
    list_targets,
    missing_message,
    render_listing,
    resolve_entry,
)
from mdshell.listing.layout import ColumnLayout, compute_layout, render_rows

__all__ = [
    "ColumnLayout",
    "Directory",
    "File",
    "Listing",
    "Missing",
    "ResolvedEntry",
    "collect_listing",
    "compute_layout",
    "list_targets",
    "missing_message",
    "render_listing",
    "render_rows",
    "resolve_entry",
]
