"""Random grid and vector population backed by ``jax.random``."""

from __future__ import annotations

import os
from typing import Final

import jax
import jax.numpy as jnp

from .construct import check_dim
from .errors import GridShapeError
from .values import Grid, Vector

_DEFAULT_SEED: Final[int] = int(os.environ.get("GRIDF64_SEED", "0"))


class _KeyState:
    """Package-level PRNG key, split once per draw."""

    def __init__(self, seed: int) -> None:
        self.key = jax.random.PRNGKey(seed)

    def next(self) -> jax.Array:
        self.key, sub = jax.random.split(self.key)
        return sub


_STATE = _KeyState(_DEFAULT_SEED)


def seed(value: int) -> None:
    """Reset the package PRNG key; draws after ``seed(n)`` are reproducible."""
    _STATE.key = jax.random.PRNGKey(int(value))


def _check_bounds(low: float, high: float, *, operation: str) -> None:
    if not low <= high:
        raise GridShapeError(f"expected low <= high for the range, but received [{low}, {high})", operation=operation)


def _uniform(shape: tuple[int, ...], low: float, high: float, key: jax.Array | None) -> list:
    if key is None:
        key = _STATE.next()
    sample = jax.random.uniform(key, shape, dtype=jnp.result_type(float), minval=low, maxval=high)
    return sample.tolist()


def rand_mat(rows: int, cols: int | None = None, low: float = 0.0, high: float = 1.0, *, key: jax.Array | None = None) -> Grid:
    """Grid with entries drawn uniformly from ``[low, high)``.

        rand_mat(3)             # 3x3 in [0, 1)
        rand_mat(2, 4, -1, 1)   # 2x4 in [-1, 1)

    Pass ``key`` to draw from an explicit ``jax.random`` key instead of the
    package state.
    """
    r = check_dim(rows, name="row count", operation="rand_mat")
    c = r if cols is None else check_dim(cols, name="column count", operation="rand_mat")
    _check_bounds(low, high, operation="rand_mat")
    if r == 0:
        return []
    return _uniform((r, c), low, high, key)


def rand_vec(size: int, low: float = 0.0, high: float = 1.0, *, key: jax.Array | None = None) -> Vector:
    """Vector of ``size`` entries drawn uniformly from ``[low, high)``."""
    n = check_dim(size, name="size", operation="rand_vec")
    _check_bounds(low, high, operation="rand_vec")
    return _uniform((n,), low, high, key)
