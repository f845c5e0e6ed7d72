"""Shared benchmark runtime helpers."""

from __future__ import annotations

import os
import platform
import time
from typing import Any

import jax

THREAD_ENV_VARS = (
    "OMP_NUM_THREADS",
    "OPENBLAS_NUM_THREADS",
    "JAX_NUM_THREADS",
    "XLA_FLAGS",
    "GRIDF64_DISABLE_RECTANGULAR_CHECK",
)


def host_metadata() -> dict[str, Any]:
    return {
        "platform": platform.platform(),
        "python": platform.python_version(),
        "jax": getattr(jax, "__version__", "unknown"),
        "backend": jax.default_backend(),
        "cpu_count": os.cpu_count(),
        "env": {name: os.environ[name] for name in THREAD_ENV_VARS if name in os.environ},
    }


def block_until_ready(value: object) -> None:
    if hasattr(value, "block_until_ready"):
        value.block_until_ready()


def timeit(fn, *args: object, repeats: int, warmup: int) -> float:
    """Mean seconds per call of ``fn(*args)``."""
    for _ in range(warmup):
        block_until_ready(fn(*args))
    start = time.perf_counter()
    for _ in range(repeats):
        block_until_ready(fn(*args))
    return (time.perf_counter() - start) / repeats
