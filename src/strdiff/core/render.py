"""Unified-diff text rendering of merged hunks"""

from strdiff.core.models import Hunk


def _header(start_a: int, count_a: int, start_b: int, count_b: int) -> str:
    return f"@@ -{start_a},{count_a} +{start_b},{count_b} @@"


def _paired(lines_a: list[str], lines_b: list[str]) -> list[str]:
    """Interleave old/new lines by offset: '-' line then '+' line."""
    out = []
    for j in range(max(len(lines_a), len(lines_b))):
        if j < len(lines_a):
            out.append(f"-{lines_a[j]}")
        if j < len(lines_b):
            out.append(f"+{lines_b[j]}")
    return out


def render_compat_hunk(hunk: Hunk) -> list[str]:
    """Header and body using only the hunk's own lines; no context."""
    return [
        _header(hunk.start_a, hunk.count_a, hunk.start_b, hunk.count_b),
        *_paired(hunk.lines_a, hunk.lines_b),
    ]


def render_hunk(hunk: Hunk, a: list[str], b: list[str], context_lines: int) -> list[str]:
    """Header and body for a hunk widened by context_lines unchanged lines on each side.

    Counts include the context lines. A side with no lines in the window reports
    the line before the window as its start.
    """
    changed = {c.start_a - 1 for c in hunk.changes}
    lo = max(0, min(changed) - context_lines)
    hi = min(max(len(a), len(b)), max(changed) + 1 + context_lines)

    body = []
    count_a = count_b = 0
    for i in range(lo, hi):
        if i not in changed:
            body.append(f" {a[i]}")
            count_a += 1
            count_b += 1
            continue
        if i < len(a):
            body.append(f"-{a[i]}")
            count_a += 1
        if i < len(b):
            body.append(f"+{b[i]}")
            count_b += 1

    start_a = lo + 1 if count_a else lo
    start_b = lo + 1 if count_b else lo
    return [_header(start_a, count_a, start_b, count_b), *body]


def render_diff(
    hunks: list[Hunk],
    a: list[str],
    b: list[str],
    old_label: str,
    new_label: str,
    context_lines: int = 0,
    *,
    compat: bool = False,
    ) -> str:
    """Join file headers and every hunk into one newline-separated string (no trailing newline)."""
    lines = [f"--- {old_label}", f"+++ {new_label}"]
    for hunk in hunks:
        if compat:
            lines.extend(render_compat_hunk(hunk))
        else:
            lines.extend(render_hunk(hunk, a, b, context_lines))
    return "\n".join(lines)
