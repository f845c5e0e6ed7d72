"""Grid/vector value model, operand classification and array interop."""

from __future__ import annotations

import numbers
import os
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Final, Union

import jax.numpy as jnp

from .errors import GridIndexError, GridShapeError, GridTypeError


Vector = list[float]
Grid = list[list[float]]
Container = Union[Vector, Grid]
Operand = Union[float, Vector, Grid]

_CHECK_RECTANGULAR: Final[bool] = os.environ.get("GRIDF64_DISABLE_RECTANGULAR_CHECK", "0") != "1"


class OperandKind(str, Enum):
    SCALAR = "scalar"
    VECTOR = "vector"
    GRID = "grid"


@dataclass(frozen=True)
class OperandInfo:
    kind: OperandKind
    shape: tuple[int, ...]

    @property
    def rank(self) -> int:
        return len(self.shape)


def is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_array(value: object) -> bool:
    """True for jax/numpy arrays; these are read-only operands."""
    return hasattr(value, "ndim") and hasattr(value, "tolist") and not isinstance(value, list)


def _type_name(value: object) -> str:
    if is_array(value):
        return f"{type(value).__name__} of rank {value.ndim}"
    return type(value).__name__


def grid_shape(grid: Grid, *, operation: str) -> tuple[int, int]:
    """Return ``(rows, cols)``, rejecting jagged grids unless the check is disabled."""
    rows = len(grid)
    if rows == 0:
        return (0, 0)
    cols = len(grid[0])
    if _CHECK_RECTANGULAR:
        for i, row in enumerate(grid):
            if not isinstance(row, list):
                raise GridTypeError(
                    f"expected every row to be a list of floats, but row {i} is {type(row).__name__}",
                    operation=operation,
                )
            if len(row) != cols:
                raise GridShapeError(
                    f"expected a rectangular grid, but row {i} has length {len(row)} instead of {cols}",
                    operation=operation,
                )
    return (rows, cols)


def check_elements(values: list, *, operation: str) -> None:
    """Reject any element of a vector or grid row that is not a real number."""
    for j, x in enumerate(values):
        if not is_scalar(x):
            raise GridTypeError(
                f"expected float elements in the operand, but element {j} is {type(x).__name__}",
                operation=operation,
            )


def classify_operand(value: object, *, operation: str) -> OperandInfo:
    """Classify a right-hand operand as a scalar, vector, or grid."""
    if is_scalar(value):
        return OperandInfo(kind=OperandKind.SCALAR, shape=())
    if is_array(value):
        shape = tuple(int(d) for d in value.shape)
        if value.ndim == 0:
            return OperandInfo(kind=OperandKind.SCALAR, shape=())
        if value.ndim == 1:
            return OperandInfo(kind=OperandKind.VECTOR, shape=shape)
        if value.ndim == 2:
            return OperandInfo(kind=OperandKind.GRID, shape=shape)
    elif isinstance(value, list):
        if all(isinstance(item, list) for item in value) and value:
            return OperandInfo(kind=OperandKind.GRID, shape=grid_shape(value, operation=operation))
        if all(is_scalar(item) for item in value):
            return OperandInfo(kind=OperandKind.VECTOR, shape=(len(value),))
    raise GridTypeError(
        f"expected float, vector, or grid for the operand, but received {_type_name(value)}",
        operation=operation,
    )


def classify_target(value: object, *, operation: str) -> OperandInfo:
    """Classify a container that is about to be mutated in place."""
    if not isinstance(value, list):
        raise GridTypeError(
            f"expected a mutable vector or grid (list), but received {_type_name(value)}",
            operation=operation,
        )
    return classify_operand(value, operation=operation)


def as_scalar(value: object, *, operation: str) -> float:
    if is_scalar(value):
        return float(value)
    if is_array(value) and value.ndim == 0:
        return float(value)
    raise GridTypeError(f"expected a float, but received {_type_name(value)}", operation=operation)


def as_vector(value: object, *, operation: str) -> Vector:
    """Return ``value`` as a vector; lists pass through, arrays are converted."""
    if is_array(value):
        if value.ndim != 1:
            raise GridTypeError(f"expected a vector, but received {_type_name(value)}", operation=operation)
        return [float(x) for x in value.tolist()]
    if isinstance(value, list):
        return value
    raise GridTypeError(f"expected a vector, but received {_type_name(value)}", operation=operation)


def as_grid(value: object, *, operation: str) -> Grid:
    """Return ``value`` as a grid; lists pass through, arrays are converted."""
    if is_array(value):
        if value.ndim != 2:
            raise GridTypeError(f"expected a grid, but received {_type_name(value)}", operation=operation)
        return [[float(x) for x in row] for row in value.tolist()]
    if isinstance(value, list):
        return value
    raise GridTypeError(f"expected a grid, but received {_type_name(value)}", operation=operation)


def as_container(value: object, *, operation: str) -> tuple[OperandKind, Container]:
    """Read-only view of a vector or grid operand."""
    if is_array(value) and value.ndim == 1:
        return OperandKind.VECTOR, as_vector(value, operation=operation)
    if is_array(value) and value.ndim == 2:
        return OperandKind.GRID, as_grid(value, operation=operation)
    info = classify_operand(value, operation=operation)
    if info.kind is OperandKind.SCALAR:
        raise GridTypeError(f"expected a vector or grid, but received {_type_name(value)}", operation=operation)
    return info.kind, value


def iter_elements(value: object, *, operation: str) -> Iterator[float]:
    """Yield the elements of a vector or grid in row-major order."""
    kind, container = as_container(value, operation=operation)
    if kind is OperandKind.VECTOR:
        yield from container
        return
    for row in container:
        yield from row


def normalize_index(index: object, length: int, *, axis: str, operation: str) -> int:
    """Map a signed index onto ``[0, length)``; ``-1`` is the last position."""
    if not isinstance(index, numbers.Integral) or isinstance(index, bool):
        raise GridTypeError(
            f"expected an integer {axis} index, but received {type(index).__name__}",
            operation=operation,
        )
    idx = int(index)
    if idx < -length or idx >= length:
        raise GridIndexError(
            f"{axis} index {idx} is out of range for {length} {axis}s",
            operation=operation,
        )
    if idx < 0:
        idx += length
    return idx


def to_array(value: object) -> jnp.ndarray:
    """Convert a vector or grid into a ``jax.numpy`` float array."""
    dtype = jnp.result_type(float)
    if is_array(value):
        return jnp.asarray(value, dtype=dtype)
    kind, container = as_container(value, operation="to_array")
    if kind is OperandKind.GRID:
        rows, cols = grid_shape(container, operation="to_array")
        return jnp.asarray(container, dtype=dtype).reshape((rows, cols))
    return jnp.asarray(container, dtype=dtype).reshape((len(container),))


def read_grid(value: object, *, operation: str) -> tuple[Grid, tuple[int, int]]:
    """Read-only grid view plus its ``(rows, cols)`` shape."""
    if is_array(value):
        grid = as_grid(value, operation=operation)
        return grid, (len(grid), int(value.shape[1]))
    info = classify_operand(value, operation=operation)
    if info.kind is OperandKind.GRID:
        return value, info.shape
    if info.kind is OperandKind.VECTOR and not value:
        return value, (0, 0)
    raise GridTypeError(f"expected a grid, but received {info.kind.value}", operation=operation)
