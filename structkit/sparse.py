"""Sparse matrices in triplet (row, column, value) form."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple


@dataclass(frozen=True, order=True)
class Triplet:
    """A non-zero entry of a sparse matrix."""

    row: int
    col: int
    value: int


def is_sparse(matrix: Iterable[Sequence[int]]) -> bool:
    """True when at least half of the cells (rounded down) are zero."""
    rows = [list(r) for r in matrix]
    total = sum(len(r) for r in rows)
    zeros = sum(1 for r in rows for v in r if v == 0)
    return zeros >= total // 2


@dataclass(frozen=True)
class SparseMatrix:
    """Matrix dimensions plus its non-zero entries in row-major order."""

    rows: int
    cols: int
    entries: Tuple[Triplet, ...] = ()

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        object.__setattr__(self, "entries", tuple(self.entries))

    @classmethod
    def from_dense(cls, matrix: Iterable[Sequence[int]]) -> "SparseMatrix":
        """Collect the non-zero cells of a rectangular matrix."""
        rows = [list(r) for r in matrix]
        widths = {len(r) for r in rows}
        if len(widths) > 1:
            raise ValueError("matrix rows differ in length")
        cols = widths.pop() if widths else 0
        entries = [
            Triplet(i, j, value)
            for i, row in enumerate(rows)
            for j, value in enumerate(row)
            if value != 0
        ]
        return cls(len(rows), cols, tuple(entries))

    def transpose(self) -> "SparseMatrix":
        """Swap rows and columns, keeping the result in row-major order."""
        entries = [
            Triplet(t.col, t.row, t.value)
            for column in range(self.cols)
            for t in self.entries
            if t.col == column
        ]
        return SparseMatrix(self.cols, self.rows, tuple(entries))

    def __add__(self, other: object) -> "SparseMatrix":
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError(
                f"Addition impossible: {self.rows}x{self.cols} "
                f"and {other.rows}x{other.cols}"
            )
        left, right = deque(self.entries), deque(other.entries)
        merged: List[Triplet] = []
        while left and right:
            a, b = left[0], right[0]
            key_a, key_b = (a.row, a.col), (b.row, b.col)
            if key_a == key_b:
                left.popleft()
                right.popleft()
                merged.append(Triplet(a.row, a.col, a.value + b.value))
            elif key_a < key_b:
                merged.append(left.popleft())
            else:
                merged.append(right.popleft())
        merged.extend(left)
        merged.extend(right)
        return SparseMatrix(self.rows, self.cols, tuple(merged))

    def to_rows(self) -> List[List[int]]:
        """The triplet table: a header row of rows, cols, count, then entries."""
        header = [self.rows, self.cols, len(self.entries)]
        return [header] + [[t.row, t.col, t.value] for t in self.entries]

    def format(self) -> str:
        """The triplet table as fixed-width text, one row per line."""
        return "\n".join(f"{r:5d}{c:5d}{v:5d}" for r, c, v in self.to_rows())