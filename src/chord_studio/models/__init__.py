"""
Models for the chord studio.

This module provides:
- ProgressionTemplate: Named scale-degree pattern (pydantic)
- Progression: Template anchored to a key and scale
"""

from chord_studio.models.progression import TONIC_DEGREE, Progression, ProgressionTemplate

__all__ = [
    "Progression",
    "ProgressionTemplate",
    "TONIC_DEGREE",
]
