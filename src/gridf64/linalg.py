"""Matrix product and transpose. Both return new grids and leave inputs intact."""

from __future__ import annotations

from .construct import new
from .errors import GridShapeError
from .values import Grid, read_grid


def dot(m: Grid, n: Grid) -> Grid:
    """Matrix product of an ``r x k`` grid and a ``k x c`` grid.

    The result is a new ``r x c`` grid with
    ``res[i][j] == sum(m[i][t] * n[t][j] for t in range(k))``.

    >>> dot([[1.0, 0.0], [0.0, 1.0]], [[5.0, 6.0], [7.0, 8.0]])
    [[5.0, 6.0], [7.0, 8.0]]
    """
    a, (r, k) = read_grid(m, operation="dot")
    b, (k2, c) = read_grid(n, operation="dot")
    if r and k != k2:
        raise GridShapeError(
            f"expected the column count of the first grid ({k}) to equal the row count of the second ({k2})",
            operation="dot",
        )

    res = new(r, c)
    for i in range(r):
        a_row = a[i]
        res_row = res[i]
        for j in range(c):
            acc = 0.0
            for t in range(k):
                acc += a_row[t] * b[t][j]
            res_row[j] = acc
    return res


def transpose(m: Grid) -> Grid:
    """New grid with rows and columns swapped: ``res[j][i] == m[i][j]``.

    A grid with rows but no columns, such as ``[[], []]``, transposes to
    ``[]``: a list of rows cannot hold a 0xN grid, so the row count is lost
    and ``transpose(transpose(m)) == m`` only holds when ``m`` has columns.
    """
    grid, (rows, cols) = read_grid(m, operation="transpose")
    return [[grid[i][j] for i in range(rows)] for j in range(cols)]
