"""Correlation matrix processor.

Main orchestrator for the correlation matrix:
1. Keeps dataset entries that are series, drops everything else
2. Cleans every series (missing and malformed values become NaN)
3. Checks that enough rows are complete across all columns
4. Computes Pearson correlation for every column pair (pairwise deletion)
"""

import time
from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np
import pandas as pd

from corrmatrix.analysis.correlation.algorithms import (
    clean_series,
    compute_correlation_matrix,
    compute_sample_size_matrix,
    count_complete_rows,
    has_enough_data,
)
from corrmatrix.analysis.correlation.description import describe_correlation
from corrmatrix.analysis.correlation.models import CorrelationMatrixResult
from corrmatrix.core.config import Settings, get_settings
from corrmatrix.core.logging import get_logger
from corrmatrix.core.models.base import Result

logger = get_logger(__name__)

_INSUFFICIENT_DATA_MESSAGES = {
    "en": (
        "Not enough data to compute the correlation matrix. At least {required} "
        "observations with complete data across all indicators are required."
    ),
    "ru": (
        "Недостаточно данных для вычисления корреляционной матрицы. Требуется как "
        "минимум {required} наблюдения с полными данными по всем показателям."
    ),
}


class InsufficientDataError(Exception):
    """Too few rows have data in every column to compute a matrix."""

    def __init__(self, complete_rows: int, required_rows: int, language: str = "en"):
        self.complete_rows = complete_rows
        self.required_rows = required_rows
        super().__init__(_INSUFFICIENT_DATA_MESSAGES[language].format(required=required_rows))


def _is_series(value: Any) -> bool:
    """Check whether a dataset entry is an ordered sequence of values."""
    if isinstance(value, pd.Series):
        return True
    if isinstance(value, np.ndarray):
        return value.ndim == 1
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _split_dataset(raw_data: Mapping[str, Any]) -> tuple[dict[str, list[float]], list[str]]:
    """Clean series entries and collect the names of dropped entries."""
    data_dict: dict[str, list[float]] = {}
    dropped: list[str] = []
    for name, values in raw_data.items():
        if _is_series(values):
            data_dict[name] = clean_series(values)
        else:
            dropped.append(name)
    return data_dict, dropped


def _compute(
    data_dict: dict[str, list[float]],
    dropped: list[str],
    settings: Settings,
) -> CorrelationMatrixResult:
    """Gate and compute the matrix for an already cleaned dataset."""
    start_time = time.time()

    if dropped:
        logger.debug("columns_dropped", dropped=dropped)

    column_names = list(data_dict)

    if not has_enough_data(data_dict, settings.min_complete_rows):
        complete_rows = count_complete_rows(data_dict)
        logger.warning(
            "insufficient_data",
            columns=len(column_names),
            complete_rows=complete_rows,
            required_rows=settings.min_complete_rows,
        )
        raise InsufficientDataError(complete_rows, settings.min_complete_rows, settings.language)

    columns = [data_dict[name] for name in column_names]
    matrix = compute_correlation_matrix(columns, fill=settings.undefined_fill)
    sample_sizes = compute_sample_size_matrix(columns)

    logger.info(
        "correlation_matrix_computed",
        columns=len(column_names),
        rows=max(len(series) for series in columns),
        duration_seconds=round(time.time() - start_time, 6),
    )

    return CorrelationMatrixResult(
        matrix=matrix,
        column_names=column_names,
        data_dict=data_dict,
        sample_sizes=sample_sizes,
    )


def calculate_correlation_matrix(
    raw_data: Mapping[str, Any],
    settings: Settings | None = None,
) -> CorrelationMatrixResult:
    """Compute the Pearson correlation matrix for a dataset.

    Args:
        raw_data: Column name -> raw series. Entries that are not series
            are ignored.
        settings: Overrides the environment settings

    Returns:
        CorrelationMatrixResult with columns in their input order

    Raises:
        InsufficientDataError: Fewer than settings.min_complete_rows rows
            have a value in every column
    """
    data_dict, dropped = _split_dataset(raw_data)
    return _compute(data_dict, dropped, settings or get_settings())


def analyze_correlation_matrix(
    raw_data: Mapping[str, Any],
    settings: Settings | None = None,
) -> Result[CorrelationMatrixResult]:
    """Compute the correlation matrix without raising on insufficient data.

    Args:
        raw_data: Column name -> raw series
        settings: Overrides the environment settings

    Returns:
        Result containing CorrelationMatrixResult. Warnings name the dataset
        entries that were ignored because they are not series.
    """
    data_dict, dropped = _split_dataset(raw_data)
    warnings = [f"Ignored non-series entry: {name}" for name in dropped]

    try:
        result = _compute(data_dict, dropped, settings or get_settings())
    except InsufficientDataError as e:
        return Result.fail(str(e), warnings)

    return Result.ok(result, warnings)


class CorrelationMatrix:
    """Stateless calculator bound to a set of settings.

    Usage:
        calculator = CorrelationMatrix()
        result = calculator.calculate({"gdp": [1, 2, 3], "exports": [2, 4, 7]})
        calculator.get_description(result.matrix[0][1])
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def calculate(self, raw_data: Mapping[str, Any]) -> CorrelationMatrixResult:
        """Compute the correlation matrix. See calculate_correlation_matrix."""
        return calculate_correlation_matrix(raw_data, self.settings)

    def get_description(self, value: float) -> str:
        """Describe a coefficient in the configured language."""
        return describe_correlation(value, self.settings.language)
