"""Element-wise arithmetic with scalar, vector, and grid broadcasting.

``add``, ``sub``, ``mul`` and ``div`` mutate their left grid in place and
accept a scalar, a vector, or a grid as the right operand:

- scalar: every element is combined with the same value.
- vector: its length must equal the grid's column count; the vector is
  combined with every row, ``m[i][j] op v[j]``.
- grid: must have the same shape; elements are combined pairwise.

Shapes are checked before the first write, so a rejected call leaves the
grid untouched. Division follows IEEE-754 semantics: dividing by zero gives
``inf``, ``-inf`` or ``nan`` instead of raising.

The direct kernels (``add_scalar``, ``add_vec``, ``add_mat``, ...) skip the
operand classification but still check shapes.
"""

from __future__ import annotations

import math
from typing import Callable, Final

from loguru import logger

from .errors import GridShapeError
from .values import (
    Grid,
    Operand,
    OperandKind,
    Vector,
    as_grid,
    as_scalar,
    as_vector,
    check_elements,
    classify_operand,
    classify_target,
    grid_shape,
)


def _true_divide(x: float, y: float) -> float:
    try:
        return x / y
    except ZeroDivisionError:
        if math.isnan(x) or x == 0:
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)


def _target_shape(m: Grid, *, operation: str) -> tuple[int, int]:
    info = classify_target(m, operation=operation)
    if info.kind is OperandKind.GRID:
        return info.shape
    if m:
        raise GridShapeError(
            f"expected a grid as the left operand, but received a vector of length {len(m)}",
            operation=operation,
        )
    return (0, 0)


def _vector_operand(m: Grid, v: object, *, operation: str) -> Vector:
    _, cols = _target_shape(m, operation=operation)
    vec = as_vector(v, operation=operation)
    if len(vec) != cols:
        raise GridShapeError(
            f"expected a vector of length {cols} (the column count), but received length {len(vec)}",
            operation=operation,
        )
    check_elements(vec, operation=operation)
    # A row of m used as the operand would be read after it is written.
    if any(vec is row for row in m):
        vec = list(vec)
    return vec


def _grid_operand(m: Grid, n: object, *, operation: str) -> Grid:
    shape = _target_shape(m, operation=operation)
    other = as_grid(n, operation=operation)
    other_shape = grid_shape(other, operation=operation)
    if other_shape != shape:
        raise GridShapeError(
            f"expected a grid of shape {shape[0]}x{shape[1]}, but received {other_shape[0]}x{other_shape[1]}",
            operation=operation,
        )
    for row in other:
        check_elements(row, operation=operation)
    row_ids = {id(row) for row in m}
    if any(id(row) in row_ids for row in other):
        other = [list(row) for row in other]
    return other


def _scalar_operand(m: Grid, v: object, *, operation: str) -> float:
    _target_shape(m, operation=operation)
    return as_scalar(v, operation=operation)


# Kernels. Each one is a flat double loop over an already-validated operand.


def _add_scalar(m: Grid, v: float) -> None:
    for row in m:
        for j in range(len(row)):
            row[j] += v


def _add_vec(m: Grid, v: Vector) -> None:
    for row in m:
        for j, x in enumerate(v):
            row[j] += x


def _add_mat(m: Grid, n: Grid) -> None:
    for row, other in zip(m, n):
        for j in range(len(row)):
            row[j] += other[j]


def _sub_scalar(m: Grid, v: float) -> None:
    for row in m:
        for j in range(len(row)):
            row[j] -= v


def _sub_vec(m: Grid, v: Vector) -> None:
    for row in m:
        for j, x in enumerate(v):
            row[j] -= x


def _sub_mat(m: Grid, n: Grid) -> None:
    for row, other in zip(m, n):
        for j in range(len(row)):
            row[j] -= other[j]


def _mul_scalar(m: Grid, v: float) -> None:
    for row in m:
        for j in range(len(row)):
            row[j] *= v


def _mul_vec(m: Grid, v: Vector) -> None:
    for row in m:
        for j, x in enumerate(v):
            row[j] *= x


def _mul_mat(m: Grid, n: Grid) -> None:
    for row, other in zip(m, n):
        for j in range(len(row)):
            row[j] *= other[j]


def _div_scalar(m: Grid, v: float) -> None:
    for row in m:
        for j in range(len(row)):
            row[j] = _true_divide(row[j], v)


def _div_vec(m: Grid, v: Vector) -> None:
    for row in m:
        for j, x in enumerate(v):
            row[j] = _true_divide(row[j], x)


def _div_mat(m: Grid, n: Grid) -> None:
    for row, other in zip(m, n):
        for j in range(len(row)):
            row[j] = _true_divide(row[j], other[j])


_OPERAND_PREPARERS: Final[dict[OperandKind, Callable[..., object]]] = {
    OperandKind.SCALAR: _scalar_operand,
    OperandKind.VECTOR: _vector_operand,
    OperandKind.GRID: _grid_operand,
}

_KERNELS: Final[dict[str, dict[OperandKind, Callable[[Grid, object], None]]]] = {
    "add": {OperandKind.SCALAR: _add_scalar, OperandKind.VECTOR: _add_vec, OperandKind.GRID: _add_mat},
    "sub": {OperandKind.SCALAR: _sub_scalar, OperandKind.VECTOR: _sub_vec, OperandKind.GRID: _sub_mat},
    "mul": {OperandKind.SCALAR: _mul_scalar, OperandKind.VECTOR: _mul_vec, OperandKind.GRID: _mul_mat},
    "div": {OperandKind.SCALAR: _div_scalar, OperandKind.VECTOR: _div_vec, OperandKind.GRID: _div_mat},
}


def _run(op: str, kind: OperandKind, m: Grid, val: object, *, operation: str) -> None:
    operand = _OPERAND_PREPARERS[kind](m, val, operation=operation)
    _KERNELS[op][kind](m, operand)


def _dispatch(op: str, m: Grid, val: object) -> None:
    info = classify_operand(val, operation=op)
    logger.debug("gridf64.{}: routing {} operand of shape {}", op, info.kind.value, info.shape)
    _run(op, info.kind, m, val, operation=op)


def add(m: Grid, val: Operand) -> None:
    """Add ``val`` (scalar, vector, or grid) to every element of ``m`` in place.

    >>> m = [[1.0, 2.0], [3.0, 4.0]]
    >>> add(m, [10.0, 20.0])
    >>> m
    [[11.0, 22.0], [13.0, 24.0]]
    """
    _dispatch("add", m, val)


def sub(m: Grid, val: Operand) -> None:
    """Subtract ``val`` (scalar, vector, or grid) from every element of ``m`` in place."""
    _dispatch("sub", m, val)


def mul(m: Grid, val: Operand) -> None:
    """Multiply every element of ``m`` by ``val`` (scalar, vector, or grid) in place.

    >>> m = [[1.0, 2.0], [3.0, 4.0]]
    >>> mul(m, 2.0)
    >>> m
    [[2.0, 4.0], [6.0, 8.0]]
    """
    _dispatch("mul", m, val)


def div(m: Grid, val: Operand) -> None:
    """Divide every element of ``m`` by ``val`` (scalar, vector, or grid) in place.

    Zero divisors produce ``inf``/``-inf``/``nan`` rather than an error.
    """
    _dispatch("div", m, val)


def add_scalar(m: Grid, v: float) -> None:
    """Increase every element of ``m`` by ``v`` in place."""
    _run("add", OperandKind.SCALAR, m, v, operation="add_scalar")


def add_vec(m: Grid, v: Vector) -> None:
    """Increase each row of ``m`` element-wise by ``v`` in place."""
    _run("add", OperandKind.VECTOR, m, v, operation="add_vec")


def add_mat(m: Grid, n: Grid) -> None:
    """Element-wise ``m += n`` in place."""
    _run("add", OperandKind.GRID, m, n, operation="add_mat")


def sub_scalar(m: Grid, v: float) -> None:
    """Decrease every element of ``m`` by ``v`` in place."""
    _run("sub", OperandKind.SCALAR, m, v, operation="sub_scalar")


def sub_vec(m: Grid, v: Vector) -> None:
    """Decrease each row of ``m`` element-wise by ``v`` in place."""
    _run("sub", OperandKind.VECTOR, m, v, operation="sub_vec")


def sub_mat(m: Grid, n: Grid) -> None:
    """Element-wise ``m -= n`` in place."""
    _run("sub", OperandKind.GRID, m, n, operation="sub_mat")


def mul_scalar(m: Grid, v: float) -> None:
    """Multiply every element of ``m`` by ``v`` in place."""
    _run("mul", OperandKind.SCALAR, m, v, operation="mul_scalar")


def mul_vec(m: Grid, v: Vector) -> None:
    """Multiply each row of ``m`` element-wise by ``v`` in place."""
    _run("mul", OperandKind.VECTOR, m, v, operation="mul_vec")


def mul_mat(m: Grid, n: Grid) -> None:
    """Element-wise ``m *= n`` in place."""
    _run("mul", OperandKind.GRID, m, n, operation="mul_mat")


def div_scalar(m: Grid, v: float) -> None:
    """Divide every element of ``m`` by ``v`` in place."""
    _run("div", OperandKind.SCALAR, m, v, operation="div_scalar")


def div_vec(m: Grid, v: Vector) -> None:
    """Divide each row of ``m`` element-wise by ``v`` in place."""
    _run("div", OperandKind.VECTOR, m, v, operation="div_vec")


def div_mat(m: Grid, n: Grid) -> None:
    """Element-wise ``m /= n`` in place."""
    _run("div", OperandKind.GRID, m, n, operation="div_mat")
