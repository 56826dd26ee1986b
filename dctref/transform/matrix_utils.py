"""Matrix validation and output buffer utilities for the DCT."""

import numpy as np
from typing import Optional, Tuple
from ..constants import DIMENSION_MULTIPLE, OUTPUT_DTYPE
from .errors import InvalidDimensionError


def as_matrix(src) -> np.ndarray:
    """
    Coerce an array-like input into a 2D float64 matrix.

    Args:
        src: 2D array-like (ndarray or nested lists)

    Returns:
        2D numpy array with dtype float64 (no copy if already float64)

    Raises:
        InvalidDimensionError: If the input is not two-dimensional
    """
    matrix = np.asarray(src, dtype=OUTPUT_DTYPE)

    if matrix.ndim != 2:
        raise InvalidDimensionError(f"Expected 2D array, got {matrix.ndim}D")

    return matrix


def check_even_dimensions(matrix: np.ndarray) -> Tuple[int, int]:
    """
    Check that both dimensions of a matrix are even.

    Args:
        matrix: 2D input matrix

    Returns:
        Tuple of (rows, cols)

    Raises:
        InvalidDimensionError: If either dimension is odd
    """
    r, c = matrix.shape

    if r % DIMENSION_MULTIPLE != 0 or c % DIMENSION_MULTIPLE != 0:
        raise InvalidDimensionError(
            f"Matrix dimensions must be even, got {r}x{c}")

    return r, c


def prepare_output(dst: Optional[np.ndarray], shape: Tuple[int, int]) -> np.ndarray:
    """
    Validate a caller-supplied output buffer or allocate a new one.

    Args:
        dst: Output buffer to overwrite, or None to allocate
        shape: Required (rows, cols)

    Returns:
        Buffer of the requested shape, ready to be overwritten

    Raises:
        InvalidDimensionError: If dst has a different shape
        TypeError: If dst is not a float64 (or wider) array
    """
    if dst is None:
        return np.zeros(shape, dtype=OUTPUT_DTYPE)

    if not isinstance(dst, np.ndarray):
        raise TypeError(f"Output buffer must be a numpy array, got {type(dst).__name__}")

    if dst.shape != tuple(shape):
        got = "x".join(str(n) for n in dst.shape)
        raise InvalidDimensionError(
            f"Output shape mismatch. Expected {shape[0]}x{shape[1]}, got {got}")

    # Anything narrower than float64 loses precision silently
    if not np.issubdtype(dst.dtype, np.floating) or \
            np.finfo(dst.dtype).precision < np.finfo(OUTPUT_DTYPE).precision:
        raise TypeError(f"Output buffer must be float64 or wider, got {dst.dtype}")

    return dst
