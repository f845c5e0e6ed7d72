"""gridf64 public API.

Dense row-major grids (``list[list[float]]``) and vectors (``list[float]``)
with in-place broadcasting arithmetic, axis reductions, a transform/filter/
reducer protocol, and matrix products.
"""

from loguru import logger

from .arithmetic import (
    add,
    add_mat,
    add_scalar,
    add_vec,
    div,
    div_mat,
    div_scalar,
    div_vec,
    mul,
    mul_mat,
    mul_scalar,
    mul_vec,
    sub,
    sub_mat,
    sub_scalar,
    sub_vec,
)
from .construct import append_col, clone, col, equal, flatten, identity, new, row
from .errors import (
    DegenerateReductionError,
    ErrorKind,
    GridAxisError,
    GridError,
    GridIndexError,
    GridShapeError,
    GridTypeError,
    classify_error,
)
from .functional import (
    BinaryFn,
    FilterFn,
    ReducerFn,
    TransformerFn,
    all,
    any,
    apply,
    apply_mat,
    apply_vec,
    make_reducer,
    set_all,
    set_mat,
    set_vec,
)
from .linalg import dot, transpose
from .prng import rand_mat, rand_vec, seed
from .reductions import Axis, average, product, resolve_axis, sum
from .values import Grid, OperandInfo, OperandKind, Vector, classify_operand, to_array

logger.disable("gridf64")

__all__ = [
    "Grid",
    "Vector",
    "OperandKind",
    "OperandInfo",
    "classify_operand",
    "to_array",
    "add",
    "sub",
    "mul",
    "div",
    "add_scalar",
    "add_vec",
    "add_mat",
    "sub_scalar",
    "sub_vec",
    "sub_mat",
    "mul_scalar",
    "mul_vec",
    "mul_mat",
    "div_scalar",
    "div_vec",
    "div_mat",
    "Axis",
    "resolve_axis",
    "sum",
    "product",
    "average",
    "TransformerFn",
    "FilterFn",
    "BinaryFn",
    "ReducerFn",
    "apply",
    "apply_vec",
    "apply_mat",
    "set_all",
    "set_vec",
    "set_mat",
    "all",
    "any",
    "make_reducer",
    "dot",
    "transpose",
    "new",
    "identity",
    "flatten",
    "row",
    "col",
    "append_col",
    "equal",
    "clone",
    "rand_mat",
    "rand_vec",
    "seed",
    "GridError",
    "GridShapeError",
    "GridTypeError",
    "GridAxisError",
    "GridIndexError",
    "DegenerateReductionError",
    "ErrorKind",
    "classify_error",
]
