"""Folding of change records into hunks"""

import logging

from strdiff.core.models import Change, Hunk


logger = logging.getLogger(__name__)


def _span(change: Change) -> tuple[int, int]:
    """Line range covered by a change on either side."""
    return min(change.start_a, change.start_b), max(change.end_a, change.end_b)


def ranges_overlap(x: Change, y: Change) -> bool:
    """Permissive range test kept for compat output; true for any forward-ordered pair."""
    start_x, end_x = _span(x)
    start_y, end_y = _span(y)
    return start_y <= end_x or start_x <= end_y


def within_context(prev: Change, change: Change, context_lines: int) -> bool:
    """True when the unchanged gap between two records fits inside both context windows."""
    # positional records occupy the same index on both sides
    gap = change.start_a - prev.start_a - 1
    return gap <= 2 * context_lines


def merge_changes(changes: list[Change], context_lines: int = 0, *, compat: bool = False) -> list[Hunk]:
    """Merge adjacent change records into hunks in a single left-to-right pass.

    Each record is compared with its immediate predecessor. With compat=True the
    legacy range test is used and context_lines is ignored.
    Raises ValueError for an empty change list.
    """
    if not changes:
        raise ValueError("merge_changes requires at least one change")

    merged = []
    current = Hunk.from_change(changes[0])
    for prev, change in zip(changes, changes[1:]):
        if compat:
            adjacent = ranges_overlap(prev, change)
        else:
            adjacent = within_context(prev, change, context_lines)
        if adjacent:
            current.absorb(change)
        else:
            merged.append(current)
            current = Hunk.from_change(change)
    merged.append(current)

    logger.debug("merged %d change(s) into %d hunk(s)", len(changes), len(merged))
    return merged
