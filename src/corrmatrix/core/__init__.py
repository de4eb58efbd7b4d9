"""Core module - configuration, logging, and shared models."""

from corrmatrix.core.config import Settings, get_settings
from corrmatrix.core.models.base import Result

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Models
    "Result",
]
