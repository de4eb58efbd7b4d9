"""Shared models."""

from corrmatrix.core.models.base import Result

__all__ = ["Result"]
