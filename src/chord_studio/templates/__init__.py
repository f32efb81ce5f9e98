"""
Progression templates - named scale-degree patterns.

Templates are key-independent: the generator anchors them to a key.
"""

from chord_studio.templates.library import COMMON_PROGRESSIONS
from chord_studio.templates.loader import TemplateLoader

__all__ = [
    "COMMON_PROGRESSIONS",
    "TemplateLoader",
]
