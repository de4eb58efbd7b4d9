"""Pure numeric correlation algorithms.

Pearson correlation with pairwise deletion: for each pair of columns only
the positions where both values are present are used, so different pairs
may be computed over different subsets of rows.
No configuration, no logging - just math.
"""

from collections.abc import Sequence

import numpy as np
from scipy import stats

MIN_PAIRS = 2


def _valid_pairs(x: Sequence[float], y: Sequence[float]) -> tuple[np.ndarray, np.ndarray]:
    """Return the aligned values where both series are present."""
    n = min(len(x), len(y))
    col1 = np.asarray(x[:n], dtype=np.float64)
    col2 = np.asarray(y[:n], dtype=np.float64)

    # Remove NaN pairs
    mask = ~(np.isnan(col1) | np.isnan(col2))
    return col1[mask], col2[mask]


def count_valid_pairs(x: Sequence[float], y: Sequence[float]) -> int:
    """Count positions where both series have a present value."""
    col1, _ = _valid_pairs(x, y)
    return len(col1)


def pearson_correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """Sample Pearson correlation over the pairwise-complete positions.

    Covariance and both variances use Bessel's correction (n - 1).
    The result is clipped to [-1, 1].

    Args:
        x: Cleaned series (NaN marks missing values)
        y: Cleaned series, aligned with x by position

    Returns:
        The coefficient, or NaN when it is undefined (fewer than 2 pairs,
        or either side constant over the pairs)
    """
    col1, col2 = _valid_pairs(x, y)
    n = len(col1)
    if n < MIN_PAIRS:
        return float("nan")

    diff1 = col1 - col1.mean()
    diff2 = col2 - col2.mean()

    cov = float(np.sum(diff1 * diff2)) / (n - 1)
    std1 = float(np.sqrt(np.sum(diff1 * diff1) / (n - 1)))
    std2 = float(np.sqrt(np.sum(diff2 * diff2) / (n - 1)))

    if std1 == 0.0 or std2 == 0.0:
        return float("nan")
    # Rounding can push nearly linear pairs just past +-1
    return float(np.clip(cov / (std1 * std2), -1.0, 1.0))


def pearson_p_value(r: float, n: int) -> float | None:
    """Two-sided p-value for a Pearson coefficient from n pairs.

    Uses the t distribution with n - 2 degrees of freedom.

    Returns:
        The p-value, or None when n < 3 or r is undefined
    """
    if n < 3 or np.isnan(r):
        return None
    if abs(r) >= 1.0:
        return 0.0
    df = n - 2
    t_stat = r * np.sqrt(df / (1.0 - r * r))
    return float(2.0 * stats.t.sf(abs(t_stat), df))


def compute_correlation_matrix(
    columns: Sequence[Sequence[float]],
    fill: float = 0.0,
) -> list[list[float]]:
    """Compute the Pearson coefficient for every ordered pair of columns.

    Each cell, diagonal included, is computed on its own (cell [j][i] is not
    copied from [i][j]). Undefined coefficients are stored as fill.

    Args:
        columns: Cleaned series in matrix order
        fill: Value stored in place of undefined coefficients

    Returns:
        Square matrix as nested lists
    """
    matrix = []
    for col1 in columns:
        row = []
        for col2 in columns:
            r = pearson_correlation(col1, col2)
            row.append(fill if np.isnan(r) else r)
        matrix.append(row)
    return matrix


def compute_sample_size_matrix(columns: Sequence[Sequence[float]]) -> list[list[int]]:
    """Number of pairwise-complete positions for every ordered pair of columns."""
    return [[count_valid_pairs(col1, col2) for col2 in columns] for col1 in columns]
