"""Pure-Python grid kernels vs jax.numpy over growing square sizes."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict, dataclass

import jax
import jax.numpy as jnp

import gridf64 as gf
from _bench_utils import host_metadata, timeit


@dataclass(frozen=True)
class BenchRow:
    workload: str
    size: int
    repeats: int
    gridf64_seconds: float
    jax_seconds: float
    max_abs_diff: float


def _max_abs_diff(grid: gf.Grid, arr: jnp.ndarray) -> float:
    ref = arr.tolist()
    worst = 0.0
    for got_row, ref_row in zip(grid, ref, strict=True):
        for got, want in zip(got_row, ref_row, strict=True):
            worst = max(worst, abs(got - want))
    return worst


def _bench_dot(size: int, repeats: int) -> BenchRow:
    a = gf.rand_mat(size, key=jax.random.PRNGKey(1))
    b = gf.rand_mat(size, key=jax.random.PRNGKey(2))
    a_arr = gf.to_array(a)
    b_arr = gf.to_array(b)
    matmul = jax.jit(jnp.matmul)

    grid_sec = timeit(gf.dot, a, b, repeats=repeats, warmup=1)
    jax_sec = timeit(matmul, a_arr, b_arr, repeats=repeats, warmup=2)
    diff = _max_abs_diff(gf.dot(a, b), matmul(a_arr, b_arr))
    return BenchRow("dot", size, repeats, grid_sec, jax_sec, diff)


def _bench_broadcast_mul(size: int, repeats: int) -> BenchRow:
    m = gf.rand_mat(size, key=jax.random.PRNGKey(3))
    v = gf.rand_vec(size, key=jax.random.PRNGKey(4))
    m_arr = gf.to_array(m)
    v_arr = gf.to_array(v)
    multiply = jax.jit(jnp.multiply)

    def grid_mul(grid: gf.Grid, vec: gf.Vector) -> gf.Grid:
        out = gf.clone(grid)
        gf.mul(out, vec)
        return out

    grid_sec = timeit(grid_mul, m, v, repeats=repeats, warmup=1)
    jax_sec = timeit(multiply, m_arr, v_arr, repeats=repeats, warmup=2)
    diff = _max_abs_diff(grid_mul(m, v), multiply(m_arr, v_arr))
    return BenchRow("mul_vec", size, repeats, grid_sec, jax_sec, diff)


def main() -> None:
    parser = argparse.ArgumentParser(description="Time gridf64 kernels against jax.numpy references.")
    parser.add_argument("--min-exp", type=int, default=3, help="minimum square side exponent (2^exp)")
    parser.add_argument("--max-exp", type=int, default=7, help="maximum square side exponent (2^exp)")
    parser.add_argument("--repeats", type=int, default=5)
    parser.add_argument("--json-out", default="", help="optional path to write machine-readable results")
    args = parser.parse_args()
    if args.min_exp > args.max_exp:
        raise ValueError("minimum exponent cannot be greater than maximum exponent")

    rows: list[BenchRow] = []
    for exp in range(args.min_exp, args.max_exp + 1):
        size = 1 << exp
        rows.append(_bench_dot(size, args.repeats))
        rows.append(_bench_broadcast_mul(size, args.repeats))

    print(f"{'workload':>10} {'size':>6} {'gridf64(ms)':>12} {'jax(ms)':>10} {'ratio':>9} {'max|diff|':>10}")
    for row in rows:
        ratio = row.gridf64_seconds / row.jax_seconds if row.jax_seconds > 0 else float("inf")
        print(
            f"{row.workload:>10} {row.size:6d} "
            f"{row.gridf64_seconds * 1e3:12.4f} {row.jax_seconds * 1e3:10.4f} "
            f"{ratio:8.1f}x {row.max_abs_diff:10.2e}"
        )

    if args.json_out:
        payload = {"host": host_metadata(), "rows": [asdict(row) for row in rows]}
        with open(args.json_out, "w", encoding="utf-8") as fh:
            json.dump(payload, fh, indent=2)


if __name__ == "__main__":
    main()
