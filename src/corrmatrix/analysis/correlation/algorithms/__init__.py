"""Pure correlation algorithms.

These functions operate on plain sequences and numpy arrays and return
plain values. No configuration, no logging, no Pydantic models - just math.
"""

from corrmatrix.analysis.correlation.algorithms.numeric import (
    compute_correlation_matrix,
    compute_sample_size_matrix,
    count_valid_pairs,
    pearson_correlation,
    pearson_p_value,
)
from corrmatrix.analysis.correlation.algorithms.sanitize import (
    MISSING,
    clean_series,
    clean_value,
    is_missing,
)
from corrmatrix.analysis.correlation.algorithms.sufficiency import (
    count_complete_rows,
    has_enough_data,
)

__all__ = [
    # Sanitization
    "MISSING",
    "clean_value",
    "clean_series",
    "is_missing",
    # Sufficiency
    "has_enough_data",
    "count_complete_rows",
    # Numeric
    "pearson_correlation",
    "pearson_p_value",
    "count_valid_pairs",
    "compute_correlation_matrix",
    "compute_sample_size_matrix",
]
