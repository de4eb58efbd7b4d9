"""Correlation strength classification.

Maps a coefficient to one of six ordered buckets. Thresholds are strict
(value > threshold), so a boundary value lands in the lower-magnitude bucket.
"""

from enum import Enum
from typing import Literal

Language = Literal["en", "ru"]


class CorrelationStrength(str, Enum):
    """Direction and strength of a correlation coefficient."""

    STRONG_POSITIVE = "strong_positive"
    MODERATE_POSITIVE = "moderate_positive"
    WEAK_POSITIVE = "weak_positive"
    WEAK_NEGATIVE = "weak_negative"
    MODERATE_NEGATIVE = "moderate_negative"
    STRONG_NEGATIVE = "strong_negative"


# Checked in order, first match wins
_THRESHOLDS: list[tuple[float, CorrelationStrength]] = [
    (0.7, CorrelationStrength.STRONG_POSITIVE),
    (0.3, CorrelationStrength.MODERATE_POSITIVE),
    (0.0, CorrelationStrength.WEAK_POSITIVE),
    (-0.3, CorrelationStrength.WEAK_NEGATIVE),
    (-0.7, CorrelationStrength.MODERATE_NEGATIVE),
]

_LABELS: dict[str, dict[CorrelationStrength, str]] = {
    "en": {
        CorrelationStrength.STRONG_POSITIVE: "Strong positive correlation",
        CorrelationStrength.MODERATE_POSITIVE: "Moderate positive correlation",
        CorrelationStrength.WEAK_POSITIVE: "Weak positive correlation",
        CorrelationStrength.WEAK_NEGATIVE: "Weak negative correlation",
        CorrelationStrength.MODERATE_NEGATIVE: "Moderate negative correlation",
        CorrelationStrength.STRONG_NEGATIVE: "Strong negative correlation",
    },
    "ru": {
        CorrelationStrength.STRONG_POSITIVE: "Сильная положительная корреляция",
        CorrelationStrength.MODERATE_POSITIVE: "Умеренная положительная корреляция",
        CorrelationStrength.WEAK_POSITIVE: "Слабая положительная корреляция",
        CorrelationStrength.WEAK_NEGATIVE: "Слабая отрицательная корреляция",
        CorrelationStrength.MODERATE_NEGATIVE: "Умеренная отрицательная корреляция",
        CorrelationStrength.STRONG_NEGATIVE: "Сильная отрицательная корреляция",
    },
}


def classify_correlation(value: float) -> CorrelationStrength:
    """Classify a correlation coefficient into a strength bucket."""
    for threshold, strength in _THRESHOLDS:
        if value > threshold:
            return strength
    return CorrelationStrength.STRONG_NEGATIVE


def strength_label(strength: CorrelationStrength, language: Language = "en") -> str:
    """Human-readable label for a strength bucket."""
    return _LABELS[language][strength]


def describe_correlation(value: float, language: Language = "en") -> str:
    """Human-readable description of a correlation coefficient."""
    return strength_label(classify_correlation(value), language)
