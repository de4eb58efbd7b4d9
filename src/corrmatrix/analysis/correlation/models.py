"""Correlation matrix Pydantic models.

Data structures returned by the correlation matrix computation:
- CorrelationMatrixResult: matrix, column order, cleaned data, sample sizes
- PairwiseCorrelation: one unordered column pair with interpretation
"""

from __future__ import annotations

import math

import pandas as pd
from pydantic import BaseModel, Field, model_validator

from corrmatrix.analysis.correlation.algorithms import (
    pearson_correlation,
    pearson_p_value,
)
from corrmatrix.analysis.correlation.description import (
    CorrelationStrength,
    classify_correlation,
)


class PairwiseCorrelation(BaseModel):
    """Pearson correlation between two columns."""

    column1_name: str
    column2_name: str

    pearson_r: float
    p_value: float | None = None  # None when undefined or fewer than 3 pairs
    sample_size: int

    # Interpretation
    strength: CorrelationStrength
    is_defined: bool  # False when the coefficient was replaced by the fill value


class CorrelationMatrixResult(BaseModel):
    """Complete correlation matrix result.

    matrix[i][j] is the coefficient between column_names[i] and
    column_names[j]; undefined coefficients hold the fill value.
    """

    matrix: list[list[float]]
    column_names: list[str]
    data_dict: dict[str, list[float]]  # NaN marks missing values
    sample_sizes: list[list[int]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_shape(self) -> CorrelationMatrixResult:
        size = len(self.column_names)
        if len(self.matrix) != size or any(len(row) != size for row in self.matrix):
            raise ValueError(f"matrix must be {size}x{size} to match column_names")
        return self

    @property
    def size(self) -> int:
        """Number of columns in the matrix."""
        return len(self.column_names)

    def index_of(self, column: str) -> int:
        """Position of a column in the matrix."""
        try:
            return self.column_names.index(column)
        except ValueError:
            raise KeyError(column) from None

    def get(self, column1: str, column2: str) -> float:
        """Coefficient between two columns by name."""
        return self.matrix[self.index_of(column1)][self.index_of(column2)]

    def pairs(self, min_abs_r: float = 0.0) -> list[PairwiseCorrelation]:
        """Unordered column pairs (upper triangle) with interpretation.

        Args:
            min_abs_r: Skip pairs whose |r| is below this value

        Returns:
            Pairs in matrix order
        """
        results = []
        for i in range(self.size):
            for j in range(i + 1, self.size):
                r = self.matrix[i][j]
                if abs(r) < min_abs_r:
                    continue

                name1 = self.column_names[i]
                name2 = self.column_names[j]
                raw_r = pearson_correlation(self.data_dict[name1], self.data_dict[name2])
                is_defined = not math.isnan(raw_r)
                n = self.sample_sizes[i][j] if self.sample_sizes else 0

                results.append(
                    PairwiseCorrelation(
                        column1_name=name1,
                        column2_name=name2,
                        pearson_r=r,
                        p_value=pearson_p_value(raw_r, n) if is_defined else None,
                        sample_size=n,
                        strength=classify_correlation(r),
                        is_defined=is_defined,
                    )
                )
        return results

    def to_frame(self) -> pd.DataFrame:
        """Matrix as a DataFrame labelled with column names on both axes."""
        return pd.DataFrame(self.matrix, index=self.column_names, columns=self.column_names)
