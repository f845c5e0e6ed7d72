"""Transform, filter and custom-reducer helpers for vectors and grids."""

from __future__ import annotations

from typing import Callable, Union

from .errors import GridTypeError
from .values import Container, Grid, OperandKind, Vector, as_scalar, classify_target, iter_elements

# Called with one element; the return value replaces that element.
TransformerFn = Callable[[float], float]

# Called with one element; checks a condition on it.
FilterFn = Callable[[float], bool]

# Called with (accumulator, element); returns the new accumulator.
BinaryFn = Callable[[float, float], float]

ReducerFn = Callable[[Union[Grid, Vector]], float]


def _target_kind(container: object, *, operation: str) -> OperandKind:
    return classify_target(container, operation=operation).kind


def apply(container: Container, f: TransformerFn) -> None:
    """Replace every element ``x`` of a vector or grid with ``f(x)``, in place.

    For example, squaring every element:

        apply(m, lambda x: x * x)
    """
    if _target_kind(container, operation="apply") is OperandKind.VECTOR:
        apply_vec(container, f)
    else:
        apply_mat(container, f)


def apply_vec(v: Vector, f: TransformerFn) -> None:
    for i in range(len(v)):
        v[i] = f(v[i])


def apply_mat(m: Grid, f: TransformerFn) -> None:
    for row in m:
        for j in range(len(row)):
            row[j] = f(row[j])


def set_all(container: Container, value: float) -> None:
    """Set every element of a vector or grid to ``value``, in place."""
    value = as_scalar(value, operation="set_all")
    if _target_kind(container, operation="set_all") is OperandKind.VECTOR:
        set_vec(container, value)
    else:
        set_mat(container, value)


def set_vec(v: Vector, value: float) -> None:
    for i in range(len(v)):
        v[i] = value


def set_mat(m: Grid, value: float) -> None:
    for row in m:
        for j in range(len(row)):
            row[j] = value


def all(container: Container, f: FilterFn) -> bool:
    """True iff ``f`` holds for every element; true for an empty container.

        positive = lambda x: x > 0.0
        all(m, positive)

    Stops at the first element for which ``f`` is false.
    """
    for x in iter_elements(container, operation="all"):
        if not f(x):
            return False
    return True


def any(container: Container, f: FilterFn) -> bool:
    """True iff ``f`` holds for at least one element; false for an empty container."""
    for x in iter_elements(container, operation="any"):
        if f(x):
            return True
    return False


def make_reducer(initial_value: float, f: BinaryFn) -> ReducerFn:
    """Build a reusable reducer folding a grid (or vector) with ``f``.

    Elements are folded in row-major order starting from ``initial_value``;
    each call starts again from ``initial_value``.

    >>> total = make_reducer(0.0, lambda acc, x: acc + x)
    >>> total([[2.0, 2.0], [2.0, 2.0]])
    8.0
    >>> total([[1.0]])
    1.0
    """
    initial_value = as_scalar(initial_value, operation="make_reducer")
    if not callable(f):
        raise GridTypeError(f"expected a callable combiner, but received {type(f).__name__}", operation="make_reducer")

    def reducer(container: Union[Grid, Vector]) -> float:
        acc = initial_value
        for x in iter_elements(container, operation="reducer"):
            acc = f(acc, x)
        return acc

    return reducer
