"""Data models for the change-detect, merge and render steps"""

from pydantic import BaseModel, ConfigDict


class Change(BaseModel):
    """One divergent position found by the line walk; line numbers are 1-based."""
    model_config = ConfigDict(frozen=True)

    start_a: int
    start_b: int
    lines_a: tuple[str, ...] = ()   # lines only on the old side; empty for additions
    lines_b: tuple[str, ...] = ()   # lines only on the new side; empty for deletions

    @property
    def end_a(self) -> int:
        return self.start_a + len(self.lines_a)

    @property
    def end_b(self) -> int:
        return self.start_b + len(self.lines_b)


class Hunk(BaseModel):
    """A contiguous run of merged changes, rendered as one @@ block."""
    start_a: int
    start_b: int
    lines_a: list[str] = []
    lines_b: list[str] = []
    changes: list[Change] = []      # source records in encounter order

    @property
    def count_a(self) -> int:
        return len(self.lines_a)

    @property
    def count_b(self) -> int:
        return len(self.lines_b)

    @classmethod
    def from_change(cls, change: Change) -> "Hunk":
        return cls(
            start_a=change.start_a,
            start_b=change.start_b,
            lines_a=list(change.lines_a),
            lines_b=list(change.lines_b),
            changes=[change],
        )

    def absorb(self, change: Change) -> None:
        """Merge change into this hunk: keep the lowest starts, append its lines."""
        self.start_a = min(self.start_a, change.start_a)
        self.start_b = min(self.start_b, change.start_b)
        self.lines_a.extend(change.lines_a)
        self.lines_b.extend(change.lines_b)
        self.changes.append(change)


class DiffStats(BaseModel):
    """Line counts of a positional comparison."""
    added:     int = 0
    deleted:   int = 0
    changed:   int = 0
    unchanged: int = 0
