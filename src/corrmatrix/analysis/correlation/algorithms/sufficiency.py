"""Data sufficiency checks.

A row (observation index) is complete when every column has a present
value at that index. Columns shorter than the longest one count as missing
past their end.
"""

from collections.abc import Mapping, Sequence

from corrmatrix.analysis.correlation.algorithms.sanitize import is_missing

MIN_COMPLETE_ROWS = 2


def _row_count(data: Mapping[str, Sequence[float]]) -> int:
    return max((len(series) for series in data.values()), default=0)


def _is_complete_row(data: Mapping[str, Sequence[float]], row: int) -> bool:
    for series in data.values():
        if row >= len(series) or is_missing(series[row]):
            return False
    return True


def has_enough_data(
    data: Mapping[str, Sequence[float]],
    min_complete_rows: int = MIN_COMPLETE_ROWS,
) -> bool:
    """Check that at least min_complete_rows rows are complete.

    Stops scanning as soon as the threshold is reached. A dataset without
    columns never has enough data.

    Args:
        data: Cleaned dataset (column name -> cleaned series)
        min_complete_rows: Number of complete rows required

    Returns:
        True if the threshold is met
    """
    if not data:
        return False

    complete = 0
    for row in range(_row_count(data)):
        if _is_complete_row(data, row):
            complete += 1
        if complete >= min_complete_rows:
            return True
    return False


def count_complete_rows(data: Mapping[str, Sequence[float]]) -> int:
    """Count rows where every column has a present value."""
    if not data:
        return 0
    return sum(1 for row in range(_row_count(data)) if _is_complete_row(data, row))
