"""Reference 2D DCT-II / DCT-III by direct summation."""

import numpy as np
from typing import Optional
from .matrix_utils import as_matrix, check_even_dimensions, prepare_output


def normalization_coefficient(k: int, N: int) -> float:
    """
    Orthonormal scale factor for frequency index k of an N-point DCT.

        c(0, N) = 1/sqrt(N)
        c(k, N) = sqrt(2/N) for k > 0
    """
    if k == 0:
        return 1 / np.sqrt(N)
    return np.sqrt(2 / N)


def create_dct_matrix(N: int) -> np.ndarray:
    """
    Generate the normalized DCT-II basis table of size N x N.

    Row k holds basis function k sampled at every position n:
        T[k, n] = c(k, N) * cos(pi/N * (n + 0.5) * k)

    The table is orthogonal: T @ T.T = I

    Args:
        N: Number of samples along one axis

    Returns:
        N x N basis table
    """
    T = np.zeros((N, N))

    for k in range(N):
        coeff = normalization_coefficient(k, N)
        for n in range(N):
            T[k, n] = coeff * np.cos(np.pi / N * (n + 0.5) * k)

    return T


def forward_dct(src, dst: Optional[np.ndarray] = None,
                separable: bool = False) -> np.ndarray:
    """
    Compute the orthonormal 2D DCT-II of a matrix.

    Output cell (k1, k2) of an R x C input is:

        out[k1, k2] = c(k1, R) * c(k2, C) * sum over n1, n2 of
                      src[n1, n2] * cos(pi/R * (n1 + 0.5) * k1)
                                  * cos(pi/C * (n2 + 0.5) * k2)

    Every output cell is evaluated on its own by summing over the whole
    input, so the cost is O(R^2 * C^2). With separable=True the same
    sums are taken along columns, then rows (T_R @ src @ T_C').

    Args:
        src: R x C spatial-domain matrix, R and C even
        dst: Optional R x C float buffer to overwrite. If None, a new
             matrix is allocated. Must not alias src.
        separable: Evaluate as two 1D passes instead of per-cell sums

    Returns:
        R x C frequency-domain matrix (dst itself when supplied)

    Raises:
        InvalidDimensionError: If src is not 2D, either dimension is odd,
            or dst does not match the shape of src
    """
    matrix = as_matrix(src)
    r, c = check_even_dimensions(matrix)
    dst = prepare_output(dst, (r, c))

    basis_r = create_dct_matrix(r)
    basis_c = create_dct_matrix(c)

    if separable:
        dst[...] = basis_r @ matrix @ basis_c.T
        return dst

    # Normalization follows the output index: row k of each table
    for k1 in range(r):
        for k2 in range(c):
            dst[k1, k2] = np.sum(matrix * np.outer(basis_r[k1], basis_c[k2]))

    return dst


def inverse_dct(src, dst: Optional[np.ndarray] = None,
                separable: bool = False) -> np.ndarray:
    """
    Compute the orthonormal 2D DCT-III (inverse of forward_dct).

    Output cell (k1, k2) of an R x C input is:

        out[k1, k2] = sum over n1, n2 of
                      src[n1, n2] * c(n1, R) * c(n2, C)
                                  * cos(pi/R * (k1 + 0.5) * n1)
                                  * cos(pi/C * (k2 + 0.5) * n2)

    The scale factors belong to the summed frequency indices here, not to
    the output position as in forward_dct.

    Args:
        src: R x C frequency-domain matrix, R and C even
        dst: Optional R x C float buffer to overwrite. If None, a new
             matrix is allocated. Must not alias src.
        separable: Evaluate as two 1D passes instead of per-cell sums

    Returns:
        R x C spatial-domain matrix (dst itself when supplied)

    Raises:
        InvalidDimensionError: If src is not 2D, either dimension is odd,
            or dst does not match the shape of src
    """
    matrix = as_matrix(src)
    r, c = check_even_dimensions(matrix)
    dst = prepare_output(dst, (r, c))

    basis_r = create_dct_matrix(r)
    basis_c = create_dct_matrix(c)

    if separable:
        dst[...] = basis_r.T @ matrix @ basis_c
        return dst

    # Normalization follows the summed index: column k of each table
    for k1 in range(r):
        for k2 in range(c):
            dst[k1, k2] = np.sum(matrix * np.outer(basis_r[:, k1], basis_c[:, k2]))

    return dst
