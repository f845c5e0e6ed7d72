"""Global and axis-restricted reductions over grids.

Every reduction takes an optional ``axis``/``index`` pair. With neither,
the whole grid is reduced; with both, only the selected row or column is.
Indices may be negative, ``-1`` selecting the last row/column:

    sum(m)                       # every element
    sum(m, Axis.ROW, -1)         # last row
    product(m, "column", 0)      # first column

Passing only one of ``axis``/``index`` is an arity error. The axis may be
an ``Axis``, its string value, or the integers ``0`` (row) / ``1`` (column).
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from loguru import logger

from .errors import DegenerateReductionError, GridAxisError
from .values import Grid, normalize_index, read_grid


class Axis(str, Enum):
    ROW = "row"
    COLUMN = "column"


_AXIS_ALIASES = {
    0: Axis.ROW,
    1: Axis.COLUMN,
    "row": Axis.ROW,
    "column": Axis.COLUMN,
}


def resolve_axis(axis: object, *, operation: str = "resolve_axis") -> Axis:
    if isinstance(axis, Axis):
        return axis
    if not isinstance(axis, bool) and isinstance(axis, (int, str)):
        resolved = _AXIS_ALIASES.get(axis)
        if resolved is not None:
            return resolved
    raise GridAxisError(
        f"the axis must be 'row' (0) or 'column' (1), but {axis!r} was passed",
        operation=operation,
    )


def _select(m: object, axis: object, index: object, *, operation: str) -> tuple[Iterable[float], int]:
    """Return the values to reduce and how many of them there are."""
    grid, (rows, cols) = read_grid(m, operation=operation)
    given = (axis is not None) + (index is not None)
    if given == 0:
        return _flat(grid), rows * cols
    if given != 2:
        raise GridAxisError(
            f"expected 0 or 2 axis arguments (axis, index), but received {given}",
            operation=operation,
        )

    selected = resolve_axis(axis, operation=operation)
    logger.debug("gridf64.{}: reducing {} {} of a {}x{} grid", operation, selected.value, index, rows, cols)
    if selected is Axis.ROW:
        i = normalize_index(index, rows, axis="row", operation=operation)
        return grid[i], cols
    j = normalize_index(index, cols, axis="column", operation=operation)
    return (row[j] for row in grid), rows


def _flat(grid: Grid) -> Iterable[float]:
    for row in grid:
        yield from row


def sum(m: Grid, axis: Axis | str | int | None = None, index: int | None = None) -> float:
    """Sum of every element, or of one row/column when ``axis`` and ``index`` are given.

    >>> sum([[1.0, 1.0, 1.0], [1.0, 1.0, 1.0]], Axis.COLUMN, -1)
    2.0
    """
    values, _ = _select(m, axis, index, operation="sum")
    total = 0.0
    for x in values:
        total += x
    return total


def product(m: Grid, axis: Axis | str | int | None = None, index: int | None = None) -> float:
    """Product of every element, or of one row/column. An empty selection gives ``1.0``."""
    values, _ = _select(m, axis, index, operation="product")
    total = 1.0
    for x in values:
        total *= x
    return total


def average(m: Grid, axis: Axis | str | int | None = None, index: int | None = None) -> float:
    """Arithmetic mean of every element, or of one row/column.

    The count is the number of elements reduced: ``rows * cols`` globally,
    the column count for a row and the row count for a column. Averaging
    zero elements raises ``DegenerateReductionError``.
    """
    values, count = _select(m, axis, index, operation="average")
    if count == 0:
        raise DegenerateReductionError("cannot average an empty selection", operation="average")
    total = 0.0
    for x in values:
        total += x
    return total / count
