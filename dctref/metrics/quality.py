"""Accuracy metrics for checking DCT round trips and energy preservation."""

import numpy as np
from ..constants import ROUNDTRIP_TOLERANCE
from ..transform import forward_dct, inverse_dct


def values_differ(a, b, tolerance: float = ROUNDTRIP_TOLERANCE) -> np.ndarray:
    """
    Element-wise combined relative/absolute difference test.

    Two values differ only if BOTH checks fail:
        |a - b| / |a + b| * 2 > tolerance
        |a - b| > tolerance

    Args:
        a: First array
        b: Second array (same shape as a)
        tolerance: Allowed relative and absolute deviation

    Returns:
        Boolean array, True where the values differ
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    diff = np.abs(a - b)

    # a == -b gives inf (or nan for 0/0); the absolute check decides then
    with np.errstate(divide='ignore', invalid='ignore'):
        relative = diff / np.abs(a + b) * 2

    return (relative > tolerance) & (diff > tolerance)


def count_mismatches(expected, actual, tolerance: float = ROUNDTRIP_TOLERANCE) -> int:
    """Number of cells where expected and actual differ beyond tolerance."""
    return int(np.count_nonzero(values_differ(expected, actual, tolerance)))


def calculate_max_error(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """Largest absolute per-cell deviation."""
    diff = np.asarray(original, dtype=np.float64) - np.asarray(reconstructed, dtype=np.float64)
    if diff.size == 0:
        return 0.0
    return float(np.abs(diff).max())


def calculate_rmse(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """
    Calculate Root Mean Squared Error (RMSE).

    Args:
        original: Original matrix
        reconstructed: Reconstructed matrix

    Returns:
        RMSE value
    """
    diff = np.asarray(original, dtype=np.float64) - np.asarray(reconstructed, dtype=np.float64)
    mse = np.mean(diff ** 2)
    return float(np.sqrt(mse))


def calculate_energy(matrix: np.ndarray) -> float:
    """Sum of squared entries."""
    return float(np.sum(np.asarray(matrix, dtype=np.float64) ** 2))


def energy_ratio(original: np.ndarray, coefficients: np.ndarray) -> float:
    """
    Ratio of coefficient energy to signal energy.

    For the orthonormal DCT this is 1 (Parseval). An all-zero original
    gives 1.0 if the coefficients are all zero too, else inf.
    """
    signal = calculate_energy(original)
    spectrum = calculate_energy(coefficients)

    if signal == 0:
        return 1.0 if spectrum == 0 else float('inf')

    return spectrum / signal


def roundtrip_report(matrix, separable: bool = False,
                     tolerance: float = ROUNDTRIP_TOLERANCE) -> dict:
    """
    Transform a matrix forward and back, and measure what was lost.

    Args:
        matrix: 2D even-dimensioned input
        separable: Use the separable two-pass evaluation
        tolerance: Tolerance for counting mismatched cells

    Returns:
        Dictionary with 'shape', 'max_error', 'rmse', 'mismatches',
        'energy_ratio' and 'passed'
    """
    original = np.asarray(matrix, dtype=np.float64)
    coefficients = forward_dct(original, separable=separable)
    recovered = inverse_dct(coefficients, separable=separable)

    mismatches = count_mismatches(original, recovered, tolerance)

    return {
        'shape': list(original.shape),
        'max_error': calculate_max_error(original, recovered),
        'rmse': calculate_rmse(original, recovered),
        'mismatches': mismatches,
        'energy_ratio': energy_ratio(original, coefficients),
        'passed': mismatches == 0,
    }
