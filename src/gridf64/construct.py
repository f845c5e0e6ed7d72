"""Allocation, extraction and comparison helpers for grids."""

from __future__ import annotations

import numbers

from .errors import GridShapeError
from .values import Grid, Vector, as_vector, normalize_index, read_grid


def check_dim(value: object, *, name: str, operation: str) -> int:
    if not isinstance(value, numbers.Integral) or isinstance(value, bool) or value < 0:
        raise GridShapeError(f"expected a non-negative integer {name}, but received {value!r}", operation=operation)
    return int(value)


def new(rows: int, cols: int | None = None) -> Grid:
    """Zero-filled grid with ``rows`` rows and ``cols`` columns.

    With a single argument the grid is square:

        new(3)      # 3x3
        new(2, 5)   # 2 rows, 5 columns
    """
    r = check_dim(rows, name="row count", operation="new")
    c = r if cols is None else check_dim(cols, name="column count", operation="new")
    return [[0.0] * c for _ in range(r)]


def identity(n: int) -> Grid:
    """``n x n`` grid with ones on the diagonal and zeros elsewhere."""
    m = new(n)
    for i in range(len(m)):
        m[i][i] = 1.0
    return m


def flatten(m: Grid) -> Vector:
    """Concatenate the rows of ``m`` into a new vector.

    [[1, 2, 3], [4, 5, 6]] becomes [1, 2, 3, 4, 5, 6].
    """
    grid, _ = read_grid(m, operation="flatten")
    out: Vector = []
    for row in grid:
        out.extend(row)
    return out


def row(m: Grid, i: int) -> Vector:
    """Copy of row ``i``; negative indices count from the last row."""
    grid, (rows, _) = read_grid(m, operation="row")
    idx = normalize_index(i, rows, axis="row", operation="row")
    return list(grid[idx])


def col(m: Grid, j: int) -> Vector:
    """Copy of column ``j``; negative indices count from the last column."""
    grid, (_, cols) = read_grid(m, operation="col")
    idx = normalize_index(j, cols, axis="column", operation="col")
    return [r[idx] for r in grid]


def append_col(m: Grid, v: Vector) -> Grid:
    """New grid equal to ``m`` with ``v`` added as its last column.

    ``len(v)`` must equal the row count of ``m``; neither argument is modified.
    """
    grid, (rows, _) = read_grid(m, operation="append_col")
    vec = as_vector(v, operation="append_col")
    if len(vec) != rows:
        raise GridShapeError(
            f"expected a vector of length {rows} (the row count), but received length {len(vec)}",
            operation="append_col",
        )
    return [list(r) + [x] for r, x in zip(grid, vec)]


def equal(m: Grid, n: Grid) -> bool:
    """Same number of rows, same row lengths, and equal values at every position."""
    if len(m) != len(n):
        return False
    for a, b in zip(m, n):
        if len(a) != len(b):
            return False
    for a, b in zip(m, n):
        for x, y in zip(a, b):
            if x != y:
                return False
    return True


def clone(m: Grid) -> Grid:
    """Deep copy of ``m``; mutating the copy never affects the original."""
    return [list(r) for r in m]
