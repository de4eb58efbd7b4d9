"""Correlation matrix module.

Pairwise Pearson correlation over named series with missing data:
- Value sanitization (missing and malformed values become NaN)
- Sufficiency gate (rows complete across all columns)
- Pearson matrix with pairwise deletion
- Strength classification of coefficients
"""

# Algorithms (pure computation)
from corrmatrix.analysis.correlation.algorithms import (
    clean_series,
    clean_value,
    compute_correlation_matrix,
    count_complete_rows,
    has_enough_data,
    pearson_correlation,
    pearson_p_value,
)

# Interpretation
from corrmatrix.analysis.correlation.description import (
    CorrelationStrength,
    classify_correlation,
    describe_correlation,
)

# Pydantic Models
from corrmatrix.analysis.correlation.models import (
    CorrelationMatrixResult,
    PairwiseCorrelation,
)
from corrmatrix.analysis.correlation.processor import (
    CorrelationMatrix,
    InsufficientDataError,
    analyze_correlation_matrix,
    calculate_correlation_matrix,
)

__all__ = [
    # Main entry points
    "calculate_correlation_matrix",
    "analyze_correlation_matrix",
    "CorrelationMatrix",
    "InsufficientDataError",
    # Algorithms (pure computation)
    "clean_value",
    "clean_series",
    "has_enough_data",
    "count_complete_rows",
    "pearson_correlation",
    "pearson_p_value",
    "compute_correlation_matrix",
    # Interpretation
    "CorrelationStrength",
    "classify_correlation",
    "describe_correlation",
    # Pydantic Models
    "CorrelationMatrixResult",
    "PairwiseCorrelation",
]
