"""
Built-in progression templates.

Degrees are 0-indexed scale degrees: 0 = I, 4 = V, 5 = vi, 3 = IV.
"""

from __future__ import annotations

from chord_studio.models import ProgressionTemplate

COMMON_PROGRESSIONS: tuple[ProgressionTemplate, ...] = (
    ProgressionTemplate(
        name="I-V-vi-IV",
        degrees=(0, 4, 5, 3),
        description="The pop progression",
    ),
    ProgressionTemplate(
        name="I-vi-IV-V",
        degrees=(0, 5, 3, 4),
        description="The fifties progression",
    ),
    ProgressionTemplate(
        name="vi-IV-I-V",
        degrees=(5, 3, 0, 4),
        description="Pop progression starting on the relative minor",
    ),
)
