"""Column layout engine for ls output.

Chooses how many columns a group of names can be spread across without
exceeding the display width, filling columns top-to-bottom before moving
across (the classic ``ls`` look).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

# Narrowest entry assumed when bounding the column search; a tuning knob,
# not derived from the entries themselves.
MIN_ENTRY_WIDTH = 4
COLUMN_PADDING = 2


@dataclass(frozen=True)
class ColumnLayout:
    """Rendering plan for one group of entries."""

    num_columns: int
    entries_per_column: int
    column_widths: tuple[int, ...]

    @property
    def total_width(self) -> int:
        return sum(self.column_widths)

    def column_of(self, index: int) -> int:
        """Return the column an entry index is placed in (column-major)."""
        return index // self.entries_per_column


def _measure(num_columns: int, entries: Sequence[str]) -> ColumnLayout:
    per_column = -(-len(entries) // num_columns)
    widths = [0] * num_columns
    for i, entry in enumerate(entries):
        col = i // per_column
        widths[col] = max(widths[col], len(entry) + COLUMN_PADDING)
    return ColumnLayout(num_columns, per_column, tuple(widths))


def compute_layout(width: int | None, entries: Sequence[str]) -> ColumnLayout:
    """Pick the widest column layout that fits in ``width``.

    Args:
        width: Display width in characters, or None when output is not a
            terminal. None always yields a single column.
        entries: Names to lay out, in display order.

    Returns:
        The candidate with the most columns whose total width fits, or the
        single-column layout when no multi-column candidate fits.
    """
    if not entries:
        return ColumnLayout(1, 0, (0,))
    if width is None:
        return _measure(1, entries)
    max_columns = width // MIN_ENTRY_WIDTH
    if max_columns <= 1:
        return _measure(1, entries)

    for num_columns in range(max_columns, 1, -1):
        layout = _measure(num_columns, entries)
        if layout.total_width <= width:
            return layout
    return _measure(1, entries)


def render_rows(layout: ColumnLayout, entries: Sequence[str]) -> list[str]:
    """Render entries into display rows according to ``layout``.

    Every column but the last is padded to its width plus the column gap.
    Once a row runs past the end of ``entries`` the remaining slots are empty.
    """
    rows: list[str] = []
    last = layout.num_columns - 1
    for row in range(layout.entries_per_column):
        parts: list[str] = []
        for col in range(layout.num_columns):
            index = row + col * layout.entries_per_column
            if index >= len(entries):
                break
            entry = entries[index]
            parts.append(entry)
            if col < last:
                parts.append(" " * (layout.column_widths[col] - len(entry) + COLUMN_PADDING))
        rows.append("".join(parts))
    return rows
