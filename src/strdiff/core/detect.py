"""Positional change detection between two line sequences"""

import logging

from strdiff.core.models import Change


logger = logging.getLogger(__name__)


def detect_changes(a: list[str], b: list[str], *, compat: bool = False) -> list[Change]:
    """Walk both sequences index by index and record every position where they differ.

    This is an index-aligned comparison, not a longest-common-subsequence one:
    an inserted line shifts everything after it and shows up as a run of changes.
    Lines past the end of b are deletions; with compat=True they are reported on
    the new side instead, reproducing the legacy output.
    """
    changes = []
    for i in range(max(len(a), len(b))):
        j = i + 1
        if i >= len(a):
            changes.append(Change(start_a=j, start_b=j, lines_b=(b[i],)))
        elif i >= len(b):
            if compat:
                changes.append(Change(start_a=j, start_b=j, lines_b=(a[i],)))
            else:
                changes.append(Change(start_a=j, start_b=j, lines_a=(a[i],)))
        elif a[i] != b[i]:
            changes.append(Change(start_a=j, start_b=j, lines_a=(a[i],), lines_b=(b[i],)))

    logger.debug("detected %d change(s) across %d/%d lines", len(changes), len(a), len(b))
    return changes
