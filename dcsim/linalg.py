from __future__ import annotations
import logging
import numpy as np

from .errors import DimensionMismatchError, SingularMatrixError

Array = np.ndarray

logger = logging.getLogger(__name__)

DEFAULT_PIVOT_RTOL = 1e-12


def solve_linear_system(A, b, pivot_rtol: float = DEFAULT_PIVOT_RTOL) -> Array:
    """
    Solve the dense linear system A x = b by Gaussian elimination with partial pivoting.

    At every column the row (at or below the diagonal) holding the largest
    absolute value is swapped into the pivot position; on ties the upper row
    wins, so the elimination order depends only on the input values.

    Args:
        A: Square coefficient matrix (n x n). Not modified.
        b: Right-hand side vector of length n. Not modified.
        pivot_rtol: A pivot whose magnitude is at most pivot_rtol times the
            largest absolute entry of the same column of A is treated as zero.

    Returns:
        Solution vector x of length n.

    Raises:
        DimensionMismatchError: A is not square or b does not match it.
        SingularMatrixError: A has no usable pivot in some column.
    """
    A = np.asarray(A, dtype=float)
    b = np.asarray(b, dtype=float)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise DimensionMismatchError(f"Matrix must be square, got shape {A.shape}.")
    n = A.shape[0]
    if b.ndim != 1 or b.shape[0] != n:
        raise DimensionMismatchError(f"Right-hand side must have length {n}, got shape {b.shape}.")
    if n == 0:
        return np.zeros(0, dtype=float)

    # Per-column pivot thresholds from the original A; row swaps keep columns in place.
    thresholds = pivot_rtol * np.max(np.abs(A), axis=0)

    # augmented copy [A | b]
    M = np.empty((n, n + 1), dtype=float)
    M[:, :n] = A
    M[:, n] = b

    for col in range(n):
        pivot_row = col + int(np.argmax(np.abs(M[col:, col])))
        pivot = M[pivot_row, col]
        threshold = thresholds[col]
        if abs(pivot) <= threshold:
            logger.debug("Singular pivot %.3e in column %d (threshold %.3e).", pivot, col, threshold)
            raise SingularMatrixError(f"Matrix is singular: no usable pivot in column {col}.")
        if pivot_row != col:
            M[[col, pivot_row]] = M[[pivot_row, col]]

        factors = M[col + 1:, col] / M[col, col]
        M[col + 1:, col:] -= np.outer(factors, M[col, col:])

    x = np.zeros(n, dtype=float)
    for i in range(n - 1, -1, -1):
        x[i] = (M[i, n] - M[i, i + 1:n] @ x[i + 1:]) / M[i, i]
    return x
