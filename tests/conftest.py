"""Shared pytest fixtures for all tests."""

import numpy as np
import pytest
import structlog

from corrmatrix.core.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any logging configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the environment."""
    return Settings(
        min_complete_rows=2,
        undefined_fill=0.0,
        language="en",
        log_level="INFO",
        log_format="console",
    )


@pytest.fixture
def linear_data() -> dict[str, list[int]]:
    """Two perfectly correlated columns."""
    return {"X": [1, 2, 3, 4, 5], "Y": [2, 4, 6, 8, 10]}


@pytest.fixture
def gapped_data() -> dict[str, list]:
    """Three columns where A/B overlap fully and A/C only on rows 0, 3, 4, 5."""
    return {
        "A": [1, 2, 3, 4, 5, 6],
        "B": [2, 1, 4, 3, 6, 5],
        "C": [1, None, "n/a", 4, 5, 7],
    }


@pytest.fixture
def noisy_data() -> dict[str, list]:
    """Five random columns with roughly 20% missing values."""
    rng = np.random.default_rng(42)
    data: dict[str, list] = {}
    for name in ["alpha", "beta", "gamma", "delta", "epsilon"]:
        values = rng.normal(size=40).tolist()
        mask = rng.random(40) < 0.2
        data[name] = [None if missing else v for v, missing in zip(values, mask, strict=True)]
    return data
