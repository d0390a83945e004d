"""Column layout search.

Pure functions only: rows go in, a ``Layout`` comes out. The writer owns all
I/O and calls :func:`search_layout` once per flush.

Width accounting is deliberately asymmetric. Every column except the last is
charged the width of the widest row in the whole input plus one space of
padding; the last column is charged only the width of its own widest row.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = structlog.get_logger(__name__)

ROW_SEPARATOR = "\n"


@dataclass(frozen=True, slots=True)
class Column:
    """One vertical band of contiguous rows."""

    rows: tuple[str, ...]

    @property
    def width(self) -> int:
        return max_row_width(self.rows)


@dataclass(frozen=True, slots=True)
class Layout:
    """Ordered columns covering every row exactly once.

    ``slots`` is the column count that was requested when the layout was
    partitioned. It can exceed ``len(columns)`` because partitioning never
    creates trailing empty columns.
    """

    columns: tuple[Column, ...]
    slots: int

    @property
    def height(self) -> int:
        if not self.columns:
            return 0
        return len(self.columns[0].rows)


def split_rows(text: str) -> list[str]:
    """Split buffered text into rows; a trailing line break yields an empty last row."""
    if not text:
        return []
    return text.split(ROW_SEPARATOR)


def max_row_width(rows: Sequence[str]) -> int:
    return max((len(row) for row in rows), default=0)


def total_width(layout: Layout, row_width: int) -> int:
    """Width of ``layout`` when all but the last column are ``row_width + 1`` wide."""

    if not layout.columns:
        return 0
    padded = (row_width + 1) * (len(layout.columns) - 1)
    return padded + layout.columns[-1].width


def partition(rows: Sequence[str], slots: int) -> Layout:
    """Distribute rows column-major into at most ``slots`` contiguous chunks."""

    if slots < 1:
        raise ValueError(f"slots must be >= 1, got {slots}")
    per_column = -(-len(rows) // slots)
    columns: list[Column] = []
    for index in range(slots):
        start = per_column * index
        if start >= len(rows):
            break
        columns.append(Column(rows=tuple(rows[start : start + per_column])))
    return Layout(columns=tuple(columns), slots=slots)


def widen(
    rows: Sequence[str],
    layout: Layout,
    *,
    row_width: int,
    max_width: int,
) -> Layout | None:
    """Try to grow ``layout`` by one column.

    Returns the wider layout, or None when no further widening is possible:
    either every column already holds a single row, or the candidate would be
    at least ``max_width`` wide.
    """

    if layout.slots >= len(rows):
        return None
    candidate = partition(rows, layout.slots + 1)
    width = total_width(candidate, row_width)
    if width >= max_width:
        logger.debug(
            "widen rejected",
            slots=candidate.slots,
            total_width=width,
            max_width=max_width,
        )
        return None
    return candidate


def search_layout(
    rows: Sequence[str],
    max_width: int,
    *,
    row_width: int | None = None,
) -> Layout:
    """Greedily widen a single-column layout until the width budget is hit.

    ``row_width`` is the widest row in ``rows``; callers that already know it
    pass it in. The single-column layout is always returned as a fallback, even
    when it is wider than ``max_width``.
    """

    if not rows:
        return Layout(columns=(), slots=1)
    if row_width is None:
        row_width = max_row_width(rows)
    layout = partition(rows, 1)
    while (wider := widen(rows, layout, row_width=row_width, max_width=max_width)) is not None:
        layout = wider
    logger.debug(
        "layout selected",
        rows=len(rows),
        columns=len(layout.columns),
        row_width=row_width,
        total_width=total_width(layout, row_width),
    )
    return layout
