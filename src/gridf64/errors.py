"""Structured error types for grid operations."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    SHAPE = "shape"
    TYPE = "type"
    AXIS = "axis"
    INDEX = "index"
    DEGENERATE = "degenerate"


class GridError(Exception):
    """Base class for structured gridf64 errors."""

    kind: ErrorKind

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation

    def __str__(self) -> str:
        if self.operation is None:
            return self.message
        return f"In gridf64.{self.operation}(), {self.message}"


class GridShapeError(GridError, ValueError):
    """Operand length/shape incompatible with the target grid."""

    kind = ErrorKind.SHAPE


class GridTypeError(GridError, TypeError):
    """Operand is not a scalar, vector, or grid, or cannot be mutated."""

    kind = ErrorKind.TYPE


class GridAxisError(GridError, ValueError):
    """Axis discriminator or axis/index arity misuse."""

    kind = ErrorKind.AXIS


class GridIndexError(GridError, IndexError):
    """Row or column index outside the axis after negative normalization."""

    kind = ErrorKind.INDEX


class DegenerateReductionError(GridError, ZeroDivisionError):
    """Reduction that would divide by a zero element count."""

    kind = ErrorKind.DEGENERATE


def classify_error(err: BaseException) -> ErrorKind | None:
    """Best-effort mapping of an exception onto the grid error taxonomy."""
    if isinstance(err, GridError):
        return err.kind
    if isinstance(err, IndexError):
        return ErrorKind.INDEX
    if isinstance(err, ZeroDivisionError):
        return ErrorKind.DEGENERATE
    if isinstance(err, TypeError):
        return ErrorKind.TYPE

    lowered = str(err).lower()
    axis_markers = ("axis", "arity")
    if any(marker in lowered for marker in axis_markers):
        return ErrorKind.AXIS
    shape_markers = ("shape", "length", "dimension", "jagged", "rectangular")
    if any(marker in lowered for marker in shape_markers):
        return ErrorKind.SHAPE
    return None
