"""corrmatrix - pairwise Pearson correlation matrices over messy series.

Computes a symmetric correlation matrix for named numeric columns, tolerating
missing or malformed values through pairwise deletion.
"""

__version__ = "0.1.0"

from corrmatrix.analysis.correlation import (
    CorrelationMatrix,
    CorrelationMatrixResult,
    CorrelationStrength,
    InsufficientDataError,
    PairwiseCorrelation,
    analyze_correlation_matrix,
    calculate_correlation_matrix,
    classify_correlation,
    describe_correlation,
)
from corrmatrix.core.config import Settings, get_settings
from corrmatrix.core.models.base import Result

__all__ = [
    # Main entry points
    "calculate_correlation_matrix",
    "analyze_correlation_matrix",
    "CorrelationMatrix",
    "describe_correlation",
    "classify_correlation",
    # Models
    "CorrelationMatrixResult",
    "PairwiseCorrelation",
    "CorrelationStrength",
    "InsufficientDataError",
    "Result",
    # Config
    "Settings",
    "get_settings",
    "__version__",
]
