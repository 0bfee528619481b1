"""Public entry points: unified diff text and line statistics for two strings"""

import logging

from strdiff.core.detect import detect_changes
from strdiff.core.lines import split_lines
from strdiff.core.merge import merge_changes
from strdiff.core.models import DiffStats
from strdiff.core.render import render_diff


logger = logging.getLogger(__name__)


def produce_diff(
    text_a: str,
    text_b: str,
    label_a: str,
    label_b: str,
    context_lines: int = 0,
    *,
    compat: bool = False,
    ) -> str:
    """Return a unified diff of text_a -> text_b labelled with label_a / label_b.

    Identical inputs (after trailing newlines are dropped) yield only the two
    file header lines. compat=True reproduces the legacy output: additions and
    deletions past the shorter side both land on the new side, every change is
    folded into one hunk and context_lines has no effect. Negative
    context_lines is treated as 0.
    """
    context_lines = max(0, context_lines)

    a, b = split_lines(text_a), split_lines(text_b)
    changes = detect_changes(a, b, compat=compat)
    hunks = merge_changes(changes, context_lines, compat=compat) if changes else []
    return render_diff(hunks, a, b, label_a, label_b, context_lines, compat=compat)


def diff_summary(text_a: str, text_b: str) -> DiffStats:
    """Count added, deleted, changed and unchanged positions between two texts."""
    a, b = split_lines(text_a), split_lines(text_b)
    stats = DiffStats()
    for change in detect_changes(a, b):
        if not change.lines_a:
            stats.added += 1
        elif not change.lines_b:
            stats.deleted += 1
        else:
            stats.changed += 1
    stats.unchanged = max(len(a), len(b)) - stats.added - stats.deleted - stats.changed
    logger.debug("diff summary: %s", stats)
    return stats
